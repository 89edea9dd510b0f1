"""Logging setup shared by the command-line entry point and tests."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "langtour"
LOG_FORMAT = "%(levelname)s:%(message)s"


class MaxLevelFilter(logging.Filter):
    """Pass ``langtour`` records at or below ``max_level``.

    Attached to the stdout handler so debug notes about rejected input
    land beside the walkthrough text while warnings and errors are left
    for the stderr handler.
    """

    def __init__(self, max_level: int = logging.INFO, name: str = LOGGER_NAME) -> None:
        super().__init__(name)
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return super().filter(record) and record.levelno <= self.max_level


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Configure the package logger to write to stdout and stderr.

    Records up to INFO go to stdout and WARNING and above go to stderr, so
    diagnostics never mix with the walkthrough text a user pipes
    elsewhere. Calling it again replaces the previous handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(level)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(MaxLevelFilter())

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)

    formatter = logging.Formatter(LOG_FORMAT)
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    logger.propagate = False
    return logger
