"""Bit-level wire format: each byte travels as eight signals, low bit first.

A message is its bytes followed by a NUL byte. The receiver acknowledges
every bit before the sender goes on to the next.
"""

from __future__ import annotations

import operator
from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8
TERMINATOR = 0


def char_to_bits(byte: int) -> tuple[int, ...]:
    """Return the eight bits of ``byte``, least significant first."""
    value = operator.index(byte)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte out of range: {value}")
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_BYTE))


def _encode(message: Union[str, bytes]) -> bytes:
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if TERMINATOR in data:
        raise ValueError("message must not contain a NUL byte")
    return data


def message_to_bits(message: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits that carry ``message`` and its terminating NUL.

    Text is sent as UTF-8. A message holding a NUL byte cannot be sent.
    """
    data = _encode(message)
    for byte in (*data, TERMINATOR):
        yield from char_to_bits(byte)


class Decoder:
    """Rebuild messages from a stream of bits tagged with their sender.

    A bit from a different sender than the previous one drops everything
    gathered so far and starts afresh.
    """

    def __init__(self) -> None:
        self._sender: Optional[int] = None
        self._reset()

    def _reset(self) -> None:
        self._char = 0
        self._bit = 0
        self._buffer = bytearray()

    def feed(self, sender: int, bit: int) -> Optional[bytes]:
        """Take one bit from ``sender``; return a message once it is complete."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        if sender != self._sender:
            self._reset()
            self._sender = sender
        self._char |= bit << self._bit
        self._bit += 1
        if self._bit < BITS_PER_BYTE:
            return None
        byte = self._char
        self._char = 0
        self._bit = 0
        if byte != TERMINATOR:
            self._buffer.append(byte)
            return None
        message = bytes(self._buffer)
        self._buffer = bytearray()
        return message