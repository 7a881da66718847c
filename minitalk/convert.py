"""Conversions between decimal text and integers."""

from __future__ import annotations

import operator

_INT_BITS = 32
_WHITESPACE = " \t\n\v\f\r"


def _wrap_int(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped and one optional sign is accepted; parsing
    stops at the first non-digit. Text without digits gives 0. The result
    wraps to a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(operator.index(n))