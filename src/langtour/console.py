"""Colored section headings for the walkthrough output."""

from __future__ import annotations

from colored import attr, fg

HEADING_COLOR = "cyan"
BANNER_COLOR = "yellow"
RESET = attr("reset")


def heading(title: str) -> str:
    return f"{fg(HEADING_COLOR)}== {title} =={RESET}"


def banner(text: str) -> str:
    return f"{fg(BANNER_COLOR)}{text}{RESET}"
