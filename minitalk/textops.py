"""String and byte-buffer operations: searching, comparing, slicing, splitting."""

from __future__ import annotations

import operator
from itertools import islice, zip_longest
from typing import Any, Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]
BytesLike = Union[bytes, bytearray, memoryview]
NUL = "\0"


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; integer codes wrap to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _byte(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c) & 0xFF
    return operator.index(c) & 0xFF


def _count(n: int, name: str = "n") -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    return n


def _codes(text: Union[str, BytesLike]) -> list[int]:
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    return list(bytes(text))


def strncmp(first: Union[str, bytes], second: Union[str, bytes], n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Comparison stops at the end of either string (or an embedded NUL). The
    result is the difference of the first pair of differing character codes,
    or 0 when the compared parts are equal.
    """
    limit = _count(n)
    pairs = zip_longest(_codes(first), _codes(second), fillvalue=0)
    for a, b in islice(pairs, limit):
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first differing bytes, or 0.
    """
    limit = _count(n)
    a, b = bytes(first), bytes(second)
    if limit > len(a) or limit > len(b):
        raise ValueError(f"cannot compare {limit} bytes of shorter buffers")
    for x, y in zip(a[:limit], b[:limit]):
        if x != y:
            return x - y
    return 0


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of ``c`` in ``s``, or ``None``.

    Searching for NUL finds the end of the string, ``len(s)``.
    """
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of ``c`` in ``s``, or ``None``.

    Searching for NUL finds the end of the string, ``len(s)``.
    """
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def memchr(data: BytesLike, c: CharLike, n: int) -> Optional[int]:
    """Return the index of byte ``c`` within the first ``n`` bytes, or ``None``."""
    limit = _count(n)
    buf = bytes(data)
    if limit > len(buf):
        raise ValueError(f"cannot search {limit} bytes of a {len(buf)}-byte buffer")
    index = buf.find(_byte(c), 0, limit)
    return None if index < 0 else index


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Return where ``little`` first occurs wholly within ``big[:n]``.

    An empty ``little`` is found at index 0. ``None`` means no match.
    """
    limit = _count(n)
    if not little:
        return 0
    index = big.find(little, 0, limit)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    start = _count(start, "start")
    length = _count(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of two strings."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("strjoin expects two strings")
    return first + second


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of ``s`` found in ``charset``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("strtrim expects two strings")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on runs of the single character ``sep``, dropping empty words."""
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string built from ``f(index, char)`` for each character."""
    if f is None:
        raise TypeError("strmapi requires a function")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Apply ``f(index, item)`` to each item of ``s`` in place.

    A non-``None`` result replaces the item; ``None`` leaves it unchanged.
    """
    if f is None:
        raise TypeError("striteri requires a function")
    for index, item in enumerate(list(s)):
        result = f(index, item)
        if result is not None:
            s[index] = result