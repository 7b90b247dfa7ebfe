"""String operations with the semantics of the classic C string routines.

Positions are returned as integer indices instead of pointers, and ``None``
stands for "not found". A character argument may be a one-character ``str``
or an integer code point. Functions that take a size or length reject
negative values with ``ValueError``.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Callable, MutableSequence, Optional, Tuple, TypeVar, Union

from libft.charclass import is_digit

Char = Union[int, str]
T = TypeVar("T")

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_TERMINATOR = "\0"


def _char(c: Char) -> str:
    """Normalise a character argument to a one-character string."""
    if isinstance(c, bool):
        raise TypeError("a character must be an int or a one-character str")
    if isinstance(c, int):
        if not 0 <= c <= 0x10FFFF:
            raise ValueError(f"character code out of range: {c}")
        return chr(c)
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(
        f"a character must be an int or a one-character str, not {type(c).__name__}"
    )


def _non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _require_str(value: object, name: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, not {type(value).__name__}")


def _wrap_int(value: int) -> int:
    """Wrap *value* into the 32-bit signed integer range."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* characters including the terminator.

    Returns the (possibly truncated) copy and the full length of *src*,
    so truncation happened when the length is not less than *size*.
    """
    _require_str(src, "src")
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dest* within a buffer of *size* characters.

    Returns the resulting string and the length it tried to create. When
    *dest* already fills the buffer it is returned unchanged and the length
    reported is ``size + len(src)``.
    """
    _require_str(dest, "dest")
    _require_str(src, "src")
    _non_negative(size, "size")
    dest_len = len(dest)
    if dest_len >= size:
        return dest, size + len(src)
    room = size - 1 - dest_len
    return dest + src[:room], dest_len + len(src)


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of *c* in *s*, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    _require_str(s, "s")
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _TERMINATOR else None


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of *c* in *s*, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    _require_str(s, "s")
    ch = _char(c)
    if ch == _TERMINATOR:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return the code difference at the first mismatch.

    The end of a string compares as character code 0, so comparison stops
    at the end of the shorter string.
    """
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    _non_negative(n, "n")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first *little* in *big* lying wholly within the first *length* characters.

    An empty *little* is found at index 0.
    """
    _require_str(big, "big")
    _require_str(little, "little")
    _non_negative(length, "length")
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return index if index >= 0 else None


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. A string with no digits gives 0. Values
    beyond the 32-bit range wrap around.
    """
    _require_str(text, "text")
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(is_digit, rest))
    value = int(digits) if digits else 0
    return _wrap_int(sign * value)


def strdup(s: str) -> str:
    """Return a copy of *s*."""
    _require_str(s, "s")
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """Up to *length* characters of *s* beginning at *start*; empty if *start* is past the end."""
    _require_str(s, "s")
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate *s1* and *s2*."""
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    return s.strip(charset) if charset else s


def split(s: str, sep: Char) -> list[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    _require_str(s, "s")
    separator = _char(sep)
    return [word for word in s.split(separator) if word]


def itoa(n: int) -> str:
    """Decimal representation of a 32-bit signed integer.

    Raises OverflowError for values outside the 32-bit signed range.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, not {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` applied to each character of *s*."""
    _require_str(s, "s")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[T], f: Callable[[int, T], T]) -> None:
    """Replace each element of *chars* in place with ``f(index, element)``."""
    for index, ch in enumerate(chars):
        chars[index] = f(index, ch)