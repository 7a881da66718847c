"""ANSI colour escape sequences used for terminal output."""

from __future__ import annotations

from enum import Enum


class Color(str, Enum):
    """Terminal escape sequences for foreground colours and effects."""

    BLACK = "\033[30m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    RESET = "\033[0m"
    PURPLE = "\033[0;35m"
    BLINK = "\033[5m"
    CLEAR = "\033[2J\033[H"

    def __str__(self) -> str:
        return self.value


def _resolve(color: Color | str) -> Color:
    if isinstance(color, Color):
        return color
    try:
        return Color[color.upper()]
    except KeyError:
        raise ValueError(f"unknown colour: {color!r}") from None


def colorize(text: str, color: Color | str) -> str:
    """Wrap ``text`` in the escape sequence for ``color`` followed by a reset.

    ``color`` is a :class:`Color` member or the name of one, in any case.
    """
    return f"{_resolve(color).value}{text}{Color.RESET.value}"