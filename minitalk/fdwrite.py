"""Write characters, strings and numbers straight to a file descriptor."""

from __future__ import annotations

import operator
from os import write
from typing import Union

Text = Union[str, bytes]


def _to_bytes(data: Text) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = write(fd, view)
        view = view[written:]


def putchar_fd(c: Union[str, int], fd: int) -> None:
    """Write one character (or one byte value) to ``fd``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([operator.index(c) & 0xFF])
    _write_all(fd, data)


def putstr_fd(s: Text, fd: int) -> None:
    """Write ``s`` to ``fd``."""
    _write_all(fd, _to_bytes(s))


def putendl_fd(s: Text, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    _write_all(fd, _to_bytes(s) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    _write_all(fd, str(operator.index(n)).encode("ascii"))