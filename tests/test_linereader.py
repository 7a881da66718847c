import os

import pytest

from minitalk.linereader import LineReader


@pytest.fixture
def open_fd(tmp_path):
    opened = []

    def _open(data: bytes) -> int:
        path = tmp_path / f"input{len(opened)}.txt"
        path.write_bytes(data)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _open
    for fd in opened:
        try:
            os.close(fd)
        except OSError:
            pass


SAMPLES = [
    b"",
    b"\n",
    b"one line\n",
    b"no newline at end",
    b"first\nsecond\nthird\n",
    b"\n\n\nblank lines\n\n",
    b"x" * 200 + b"\n" + b"y" * 90,
]


@pytest.mark.parametrize("data", SAMPLES)
@pytest.mark.parametrize("buffer_size", [1, 3, 42, 1000])
def test_lines_reassemble_input(open_fd, data, buffer_size):
    lines = list(LineReader(open_fd(data), buffer_size))
    assert b"".join(lines) == data
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert all(line.count(b"\n") <= 1 for line in lines)


def test_lines_match_splitlines(open_fd):
    data = b"alpha\nbeta\ngamma"
    lines = list(LineReader(open_fd(data), 4))
    assert lines == data.splitlines(keepends=True)


def test_empty_input_returns_none(open_fd):
    reader = LineReader(open_fd(b""))
    assert reader.readline() is None


def test_none_repeats_after_end(open_fd):
    reader = LineReader(open_fd(b"only\n"))
    assert reader.readline() == b"only\n"
    assert reader.readline() is None
    assert reader.readline() is None


def test_reads_from_pipe():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"ping\npong\n")
        os.close(write_end)
        write_end = -1
        lines = list(LineReader(read_end, 2))
        assert lines == [b"ping\n", b"pong\n"]
    finally:
        os.close(read_end)
        if write_end >= 0:
            os.close(write_end)


def test_close_discards_buffered_data(open_fd):
    reader = LineReader(open_fd(b"ab\ncd\nef"), 100)
    assert reader.readline() == b"ab\n"
    reader.close()
    assert reader.readline() is None


def test_context_manager_discards_on_exit(open_fd):
    with LineReader(open_fd(b"a\nb\n"), 100) as reader:
        assert reader.readline() == b"a\n"
    assert reader.readline() is None


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_buffer_rejected(open_fd, size):
    with pytest.raises(ValueError):
        LineReader(open_fd(b"data\n"), size)


def test_read_error_propagates(tmp_path):
    path = tmp_path / "gone.txt"
    path.write_bytes(b"data\n")
    fd = os.open(path, os.O_RDONLY)
    reader = LineReader(fd)
    os.close(fd)
    with pytest.raises(OSError):
        reader.readline()