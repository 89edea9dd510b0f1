"""Tagged union of message shapes and the function that dispatches on it.

A :data:`Message` is exactly one of :class:`Text`, :class:`Number` or
:class:`Boolean`. :func:`process_message` matches on the variant and
writes one line describing the payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeAlias, assert_never


@dataclass(frozen=True, slots=True)
class Text:
    text: str


@dataclass(frozen=True, slots=True)
class Number:
    value: int


@dataclass(frozen=True, slots=True)
class Boolean:
    value: bool


Message: TypeAlias = Text | Number | Boolean


def format_bool(value: bool) -> str:
    """Render a boolean as its lowercase literal (``true``/``false``)."""
    return "true" if value else "false"


def process_message(msg: Message, write: Callable[[str], object] = print) -> None:
    """Write a variant-specific line for ``msg``.

    ``write`` defaults to :func:`print`; tests pass a list's ``append``.
    Objects outside the union fail the exhaustiveness check with
    :class:`AssertionError`.
    """
    match msg:
        case Text(text):
            write(f"Received text: {text}")
        case Number(value):
            write(f"Received number: {value:d}")
        case Boolean(value):
            write(f"Received boolean: {format_bool(value)}")
        case _:
            assert_never(msg)


__all__ = ["Text", "Number", "Boolean", "Message", "format_bool", "process_message"]
