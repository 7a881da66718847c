"""Receive messages sent bit by bit as SIGUSR1/SIGUSR2 signals and print them."""

from __future__ import annotations

import os
import signal
import sys
from typing import Optional, Sequence, TextIO, Union

from minitalk.colors import Color
from minitalk.printf import printf
from minitalk.protocol import Decoder

_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}


def format_message(message: Union[str, bytes]) -> str:
    """Return the coloured line the server prints for a received message."""
    text = message.decode("utf-8", errors="replace") if isinstance(message, bytes) else message
    return f"{Color.YELLOW.value}message :{Color.MAGENTA.value}{text}\n{Color.RESET.value}"


def serve(stream: Optional[TextIO] = None) -> None:
    """Print this process's PID, then print every message received, forever.

    SIGUSR1 carries a 0 bit and SIGUSR2 a 1 bit; each bit is acknowledged
    with SIGUSR1 to its sender.
    """
    out = sys.stdout if stream is None else stream
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
    try:
        printf(Color.GREEN.value + "PID du serv: %d\n" + Color.RESET.value, os.getpid(), stream=out)
        decoder = Decoder()
        while True:
            info = signal.sigwaitinfo(_SIGNALS)
            bit = 1 if info.si_signo == signal.SIGUSR2 else 0
            message = decoder.feed(info.si_pid, bit)
            if message is not None:
                out.write(format_message(message))
                out.flush()
            try:
                os.kill(info.si_pid, signal.SIGUSR1)
            except ProcessLookupError:
                pass
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server until interrupted."""
    try:
        serve(sys.stdout)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())