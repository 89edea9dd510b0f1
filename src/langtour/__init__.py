"""Beginner walkthrough of records, tagged unions, closures and input parsing.

The walkthrough itself lives in :mod:`langtour.tour`; the building blocks
it demonstrates are importable from here.
"""

from __future__ import annotations

from .exceptions import InputReadError, InvalidNumberError, TourError
from .messages import Boolean, Message, Number, Text, process_message
from .models import User
from .parsing import parse_number, read_line
from .tour import make_adder, run_all

__all__ = [
    "Boolean",
    "InputReadError",
    "InvalidNumberError",
    "Message",
    "Number",
    "Text",
    "TourError",
    "User",
    "make_adder",
    "parse_number",
    "process_message",
    "read_line",
    "run_all",
]

__version__ = "0.1.0"
