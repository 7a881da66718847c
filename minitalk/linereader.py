"""Read a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator

BUFFER_SIZE = 42


class LineReader:
    """Return successive newline-terminated lines read from a file descriptor.

    Data is read in chunks of ``buffer_size`` bytes; whatever follows the
    returned line is kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def readline(self) -> bytes | None:
        """Return the next line with its newline, or ``None`` at end of input.

        The last line is returned without a newline if the input lacks one.
        A read error discards buffered data and propagates.
        """
        pending = self._pending
        while b"\n" not in pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = bytearray()
                raise
            if not chunk:
                break
            pending += chunk
        if not pending:
            return None
        line, sep, rest = pending.partition(b"\n")
        self._pending = bytearray(rest)
        return bytes(line + sep)

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.readline()) is not None:
            yield line

    def close(self) -> None:
        """Discard any buffered data; the descriptor itself stays open."""
        self._pending = bytearray()

    def __enter__(self) -> LineReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()