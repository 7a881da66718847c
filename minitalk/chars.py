"""ASCII character classification and case conversion."""

from __future__ import annotations

import operator
from typing import Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def isalpha(c: CharLike) -> bool:
    """Return whether ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: CharLike) -> bool:
    """Return whether ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """Return whether ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """Return whether ``c`` lies in the ASCII range 0-127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """Return whether ``c`` is a printable ASCII character (space to tilde)."""
    return 32 <= _code(c) <= 126


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def toupper(c: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; leave anything else as is.

    A character comes back as a character, a code as a code.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _same_kind(c, code)


def tolower(c: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; leave anything else as is.

    A character comes back as a character, a code as a code.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _same_kind(c, code)