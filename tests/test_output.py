import os
from contextlib import contextmanager

import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd
from libft.strings import INT_MAX, INT_MIN


class _Pipe:
    """An OS pipe whose write end is handed to the code under test."""

    def __init__(self):
        self._read_fd, self.write_fd = os.pipe()

    def drain(self):
        """Close the write end and return everything written to it."""
        if self.write_fd != -1:
            os.close(self.write_fd)
            self.write_fd = -1
        chunks = []
        while chunk := os.read(self._read_fd, 4096):
            chunks.append(chunk)
        return b"".join(chunks)

    def close(self):
        if self.write_fd != -1:
            os.close(self.write_fd)
            self.write_fd = -1
        os.close(self._read_fd)


@contextmanager
def _pipe():
    pipe = _Pipe()
    try:
        yield pipe
    finally:
        pipe.close()


def test_putchar_str():
    with _pipe() as pipe:
        count = putchar_fd("a", pipe.write_fd)
        assert pipe.drain() == b"a"
    assert count == 1


def test_putchar_int_writes_low_byte():
    with _pipe() as pipe:
        count = putchar_fd(ord("z") + 256, pipe.write_fd)
        assert pipe.drain() == b"z"
    assert count == 1


def test_putchar_rejects_long_string():
    with pytest.raises(TypeError):
        putchar_fd("ab", 1)


def test_putchar_no_fd_writes_nothing():
    assert putchar_fd("x", -1) == 0


def test_putstr_writes_whole_string():
    with _pipe() as pipe:
        count = putstr_fd("hello world", pipe.write_fd)
        assert pipe.drain() == b"hello world"
    assert count == len("hello world")


def test_putstr_none_writes_nothing():
    with _pipe() as pipe:
        count = putstr_fd(None, pipe.write_fd)
        assert pipe.drain() == b""
    assert count == 0


def test_putstr_no_fd():
    assert putstr_fd("hello", -1) == 0


def test_putendl_appends_newline():
    with _pipe() as pipe:
        count = putendl_fd("line", pipe.write_fd)
        data = pipe.drain()
    assert data == b"line\n"
    assert count == len(data)


def test_putendl_none_writes_nothing():
    with _pipe() as pipe:
        count = putendl_fd(None, pipe.write_fd)
        assert pipe.drain() == b""
    assert count == 0


@pytest.mark.parametrize("n", [0, 7, -7, 42, INT_MAX, INT_MIN])
def test_putnbr_values(n):
    with _pipe() as pipe:
        count = putnbr_fd(n, pipe.write_fd)
        data = pipe.drain()
    assert data.decode() == str(n)
    assert count == len(data)


def test_putnbr_min_text():
    with _pipe() as pipe:
        putnbr_fd(INT_MIN, pipe.write_fd)
        assert pipe.drain() == b"-2147483648"


def test_putnbr_out_of_range():
    with pytest.raises(OverflowError):
        putnbr_fd(INT_MAX + 1, 1)


@given(st.integers(min_value=INT_MIN, max_value=INT_MAX))
def test_putnbr_round_trip(n):
    with _pipe() as pipe:
        putnbr_fd(n, pipe.write_fd)
        data = pipe.drain()
    assert int(data) == n


@given(st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=50))
def test_putstr_round_trip(s):
    with _pipe() as pipe:
        count = putstr_fd(s, pipe.write_fd)
        data = pipe.drain()
    assert data.decode("utf-8") == s
    assert count == len(data)