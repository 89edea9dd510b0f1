"""Console entry point for the walkthrough."""

from __future__ import annotations

import logging
from typing import TextIO

from .exceptions import InputReadError
from .logs import setup_logging
from .tour import run_all


def main(stream: TextIO | None = None, *, log_level: int = logging.WARNING) -> int:
    """Run the walkthrough and return the process exit code.

    Returns ``1`` when the input stream can not be read, ``0`` otherwise,
    whether or not the line parsed as a number.
    """
    logger = setup_logging(log_level)
    try:
        run_all(stream)
    except InputReadError as exc:
        logger.error("%s", exc)
        return 1
    return 0
