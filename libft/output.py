"""Write characters, strings and integers to raw file descriptors.

Every function returns the number of bytes written. A descriptor of -1
is treated as "no output" and nothing is written. Errors from the
underlying write propagate as ``OSError``.
"""

from __future__ import annotations

import os
from typing import Optional, Union

from libft.strings import itoa

Char = Union[int, str]

_NO_FD = -1


def _write(data: bytes, fd: int) -> int:
    """Write all of *data* to *fd*, returning the number of bytes written."""
    if fd == _NO_FD or not data:
        return 0
    view = memoryview(data)
    written = 0
    while written < len(view):
        written += os.write(fd, view[written:])
    return written


def _encode_char(c: Char) -> bytes:
    if isinstance(c, bool):
        raise TypeError("a character must be an int or a one-character str")
    if isinstance(c, int):
        return bytes([c & 0xFF])
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c.encode("utf-8")
    raise TypeError(
        f"a character must be an int or a one-character str, not {type(c).__name__}"
    )


def putchar_fd(c: Char, fd: int) -> int:
    """Write one character to *fd*.

    An integer is written as its low byte; a one-character string is
    written in UTF-8.
    """
    return _write(_encode_char(c), fd)


def putstr_fd(s: Optional[str], fd: int) -> int:
    """Write *s* to *fd* in UTF-8; ``None`` writes nothing."""
    if s is None:
        return 0
    if not isinstance(s, str):
        raise TypeError(f"s must be a str, not {type(s).__name__}")
    return _write(s.encode("utf-8"), fd)


def putendl_fd(s: Optional[str], fd: int) -> int:
    """Write *s* followed by a newline to *fd*; ``None`` writes nothing."""
    if s is None:
        return 0
    return putstr_fd(s, fd) + putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal form of the 32-bit signed integer *n* to *fd*.

    Raises OverflowError for values outside the 32-bit signed range.
    """
    return putstr_fd(itoa(n), fd)