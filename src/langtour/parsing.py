"""Reading a line of input and turning it into a signed 32-bit integer."""

from __future__ import annotations

import re
from typing import TextIO

from .exceptions import InputReadError, InvalidNumberError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
# Ten digits is the widest 32-bit magnitude; anything longer is rejected
# before ``int()`` sees it.
MAX_DIGITS = 10

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def read_line(stream: TextIO | None) -> str:
    """Read one line from ``stream``, blocking until it arrives.

    Returns ``""`` at end of input. Failures of the stream itself are
    reported as :class:`InputReadError`, and so are lines that carry
    undecodable bytes smuggled through as lone surrogates (the
    ``surrogateescape`` handler ``sys.stdin`` uses under C and UTF-8 locales).
    """
    if stream is None:
        raise InputReadError("Failed to read line: no input stream attached")
    try:
        line = stream.readline()
    except (OSError, ValueError) as exc:
        raise InputReadError(f"Failed to read line: {exc}") from exc
    try:
        line.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InputReadError(
            "Failed to read line: stream did not contain valid UTF-8"
        ) from exc
    return line


def parse_number(text: str) -> int:
    """Parse ``text`` as a signed 32-bit integer after trimming whitespace.

    Only an optional sign followed by ASCII digits is accepted, so
    ``"1_000"``, ``"4.0"`` and ``"0x10"`` are all rejected even though some
    of them are valid Python literals.
    """
    stripped = text.strip()
    if not stripped:
        raise InvalidNumberError("cannot parse integer from empty string", text=text)
    if _INTEGER_RE.fullmatch(stripped) is None:
        raise InvalidNumberError(f"invalid digit found in {stripped!r}", text=text)

    digits = stripped.lstrip("+-").lstrip("0")
    if len(digits) > MAX_DIGITS:
        raise InvalidNumberError(f"number out of range: {stripped}", text=text)
    value = int(stripped)
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidNumberError(f"number out of range: {stripped}", text=text)
    return value


__all__ = ["INT32_MIN", "INT32_MAX", "read_line", "parse_number"]
