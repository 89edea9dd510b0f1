"""Exception hierarchy for the langtour walkthrough.

Every langtour-specific exception inherits from :class:`TourError` so that
callers can catch a single base class when they do not care about the
specific failure mode.
"""


class TourError(Exception):
    """Base exception for all langtour operations."""


class InputReadError(TourError):
    """Raised when the input stream itself can not be read.

    This covers closed or missing streams, operating-system level read
    failures and bytes that can not be decoded. The walkthrough treats it
    as fatal.
    """


class InvalidNumberError(TourError, ValueError):
    """Raised when a line of input is not a valid signed integer.

    Subclasses :class:`ValueError` so it can be handled like a failed
    ``int()`` conversion.
    """

    def __init__(self, message: str, *, text: str | None = None) -> None:
        super().__init__(message)
        self.text = text
