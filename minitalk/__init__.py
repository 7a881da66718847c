"""Text messages between processes, carried bit by bit over SIGUSR1 and SIGUSR2."""

__version__ = "1.0.0"