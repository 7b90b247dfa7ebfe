"""Character classification and case conversion over the ASCII range.

Every function accepts either an integer character code or a string of
exactly one character. Classification functions return a bool; case
conversion returns a value of the same kind it was given.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]

_CASE_OFFSET = 32


def _code(c: Char) -> int:
    """Return the integer code of *c*, validating its type."""
    if isinstance(c, bool):
        raise TypeError("a character must be an int or a one-character str")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"a character must be an int or a one-character str, not {type(c).__name__}")


def _is_upper_code(code: int) -> bool:
    return ord("A") <= code <= ord("Z")


def _is_lower_code(code: int) -> bool:
    return ord("a") <= code <= ord("z")


def is_alpha(c: Char) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return _is_upper_code(code) or _is_lower_code(code)


def is_digit(c: Char) -> bool:
    """True for ASCII decimal digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for character codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def _convert(c: Char, code: int) -> Char:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Map an ASCII lowercase letter to uppercase; anything else is unchanged."""
    code = _code(c)
    if _is_lower_code(code):
        return _convert(c, code - _CASE_OFFSET)
    return c


def to_lower(c: Char) -> Char:
    """Map an ASCII uppercase letter to lowercase; anything else is unchanged."""
    code = _code(c)
    if _is_upper_code(code):
        return _convert(c, code + _CASE_OFFSET)
    return c