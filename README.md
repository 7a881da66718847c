# minitalk

Two small commands that pass a text message from one process to another
using nothing but POSIX signals. Each byte is sent as eight signals, least
significant bit first: `SIGUSR1` stands for a 0 bit and `SIGUSR2` for a 1 bit.
After every bit the server answers the sender with `SIGUSR1`, and the client
waits for that answer before sending the next bit. A zero byte ends the
message. Text is sent as UTF-8.

The commands wait for signals with `signal.sigwaitinfo`, so they need a
platform where Python provides it (Linux and similar POSIX systems).

## Installing

```
pip install .
```

Running the tests needs the `test` extra:

```
pip install ".[test]"
pytest
```

## Usage

Start the server in one terminal. It prints its process id and then waits
until interrupted:

```
minitalk-server
```

From another terminal, send it a message, giving the server's process id and
the text:

```
minitalk-client 4242 "hello there"
```

The server prints each complete message, in colour, as `message :` followed
by the text. Bytes that are not valid UTF-8 are shown as replacement
characters. If signals from a different sender arrive in the middle of a
message, the partial message is dropped and decoding starts again for the new
sender.

The client prints `Wrong argument :p` unless it gets exactly two arguments,
and `INVALID PID` when the process id does not read as a positive number; in
both cases it exits with status 0. If a signal cannot be delivered (for
instance, no process has that id), it prints the error and exits with
status 1. Receiving `SIGUSR2` while waiting for an acknowledgement makes the
client stop sending. A message containing a NUL byte cannot be sent.

## As a library

The encoding and decoding work without any signals at all:

- `minitalk.protocol.char_to_bits(byte)` returns the eight bits of a byte,
  least significant first; `minitalk.protocol.message_to_bits(message)`
  yields the bits of a whole message, terminator included.
- `minitalk.protocol.Decoder` takes bits one at a time, tagged with the
  sender, through `Decoder.feed(sender, bit)`, and returns each finished
  message as `bytes` (otherwise `None`).
- `minitalk.server.format_message(message)` gives the coloured line the
  server prints; `minitalk.server.serve(stream)` runs the server loop.
- `minitalk.client.parse_pid(text)` reads a process id the way the client
  does and raises `ValueError` for one that is not positive;
  `minitalk.client.send_message(pid, message)` sends a message and returns
  `False` if the receiver stopped it.

Helpers the commands rely on, usable on their own:

- `minitalk.printf`: `sprintf(fmt, *args)` and `printf(fmt, *args, stream=None)`
  with the `%c %s %p %d %i %u %x %X %%` conversions. Integers are treated as
  32-bit values, `None` prints as `(null)` for `%s` and `(nil)` for `%p`, and
  unknown conversions are dropped.
- `minitalk.linereader.LineReader(fd, buffer_size=42)`: reads a file
  descriptor one line at a time as `bytes`; `readline()` returns `None` at end
  of input, and the reader is iterable and a context manager.
- `minitalk.colors`: the `Color` enum of ANSI escape sequences and
  `colorize(text, color)`.
- `minitalk.chars`: ASCII `isalpha`, `isdigit`, `isalnum`, `isascii`,
  `isprint`, `toupper`, `tolower`.
- `minitalk.convert`: `atoi` (leading whitespace, one sign, wraps to 32 bits)
  and `itoa`.
- `minitalk.fdwrite`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  write directly to a file descriptor.
- `minitalk.textops`: `strncmp`, `memcmp`, `strchr`, `strrchr`, `memchr`,
  `strnstr`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`.
  The search functions return an index or `None`.

## What it does not do

There are no timeouts: the client waits indefinitely for each
acknowledgement, and the server keeps running until it is interrupted. The
server handles one sender at a time and keeps no record of past messages.