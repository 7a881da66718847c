"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator, TextIO

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1


def _as_signed_int(value: Any) -> int:
    n = operator.index(value) & _UINT_MASK
    return n - (1 << _INT_BITS) if n >> (_INT_BITS - 1) else n


def _as_unsigned_int(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _format_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else operator.index(value) & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _format_decimal(value: Any) -> str:
    return str(_as_signed_int(value))


def _format_unsigned(value: Any) -> str:
    return str(_as_unsigned_int(value))


def _format_hex_lower(value: Any) -> str:
    return f"{_as_unsigned_int(value):x}"


def _format_hex_upper(value: Any) -> str:
    return f"{_as_unsigned_int(value):X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": _format_decimal,
    "i": _format_decimal,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    formatter = _CONVERSIONS.get(spec)
    if formatter is None:
        # Unknown conversions are dropped and consume no argument.
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return formatter(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    Integers are taken as 32-bit values (pointers as 64-bit), as they would be
    when passed through a C variadic call.
    """
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        pieces.append(_convert(next(chars, ""), values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    out.flush()
    return len(text)