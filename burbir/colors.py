"""ANSI colouring of single characters for the terminal."""

from __future__ import annotations

from enum import Enum


class Color(Enum):
    """Terminal escape sequences."""

    NORMAL = "\x1b[0m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    BLUE = "\x1b[34m"


def colored(char: str, color: Color) -> str:
    """Return ``char`` wrapped in ``color`` and reset to normal afterwards."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return f"{color.value}{char}{Color.NORMAL.value}"


def red(char: str) -> str:
    """Return ``char`` coloured red."""
    return colored(char, Color.RED)


def green(char: str) -> str:
    """Return ``char`` coloured green."""
    return colored(char, Color.GREEN)


def blue(char: str) -> str:
    """Return ``char`` coloured blue."""
    return colored(char, Color.BLUE)