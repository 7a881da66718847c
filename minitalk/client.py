"""Send a message to a server process as a sequence of signals."""

from __future__ import annotations

import os
import signal
import sys
from typing import Optional, Sequence, Union

from minitalk.colors import Color, colorize
from minitalk.convert import atoi
from minitalk.protocol import message_to_bits

_SIGNALS = {signal.SIGUSR1, signal.SIGUSR2}


def parse_pid(text: str) -> int:
    """Parse a process id the way the command line gives it; it must be positive."""
    pid = atoi(text)
    if pid <= 0:
        raise ValueError("INVALID PID")
    return pid


def send_message(pid: int, message: Union[str, bytes]) -> bool:
    """Send ``message`` to ``pid``, waiting for an acknowledgement after each bit.

    SIGUSR1 acknowledges a bit; SIGUSR2 asks the sender to stop. Returns True
    when the whole message was sent, False when the receiver stopped it.
    """
    bits = list(message_to_bits(message))
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, _SIGNALS)
    try:
        for bit in bits:
            os.kill(pid, signal.SIGUSR2 if bit else signal.SIGUSR1)
            info = signal.sigwaitinfo(_SIGNALS)
            if info.si_signo == signal.SIGUSR2:
                return False
        return True
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line: ``client PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stdout.write(colorize("Wrong argument :p", Color.RED))
        sys.stdout.flush()
        return 0
    try:
        pid = parse_pid(args[0])
    except ValueError:
        sys.stdout.write(colorize("INVALID PID", Color.RED))
        sys.stdout.flush()
        return 0
    try:
        send_message(pid, args[1])
    except OSError as exc:
        sys.stdout.write(colorize(str(exc), Color.RED))
        sys.stdout.flush()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())