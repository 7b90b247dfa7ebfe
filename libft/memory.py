"""Byte-buffer operations: fill, copy, move, search, compare and allocate.

Buffers written to must be mutable (``bytearray`` or a writable
``memoryview``); buffers only read may be any bytes-like object. A length
that reaches past the end of a buffer raises ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

MutableBuffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_span(buf: ReadableBuffer, offset: int, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative, got {offset}")
    if offset + n > len(buf):
        raise ValueError(
            f"{name}: {n} bytes at offset {offset} exceed buffer of {len(buf)} bytes"
        )


def memset(buf: MutableBuffer, c: int, n: int) -> MutableBuffer:
    """Fill the first *n* bytes of *buf* with the low byte of *c*; return *buf*."""
    _check_span(buf, 0, n, "buf")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: MutableBuffer, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    memset(buf, 0, n)


def memcpy(dest: MutableBuffer, src: ReadableBuffer, n: int) -> MutableBuffer:
    """Copy the first *n* bytes of *src* into *dest*; return *dest*."""
    _check_span(dest, 0, n, "dest")
    _check_span(src, 0, n, "src")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(
    buf: MutableBuffer, dest_offset: int, src_offset: int, n: int
) -> MutableBuffer:
    """Copy *n* bytes within *buf* from *src_offset* to *dest_offset*.

    The regions may overlap; the result is as if the source were copied
    out first. Returns *buf*.
    """
    _check_span(buf, dest_offset, n, "dest")
    _check_span(buf, src_offset, n, "src")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of *c* among the first *n*, or None."""
    _check_span(data, 0, n, "data")
    target = c & 0xFF
    return next((i for i, byte in enumerate(bytes(data[:n])) if byte == target), None)


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first *n* bytes; return the difference at the first mismatch, or 0."""
    _check_span(a, 0, n, "a")
    _check_span(b, 0, n, "b")
    return next(
        (x - y for x, y in zip(bytes(a[:n]), bytes(b[:n])) if x != y),
        0,
    )


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of *nmemb* elements of *size* bytes each.

    Raises OverflowError when the total size would not fit in a size_t.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} elements of {size} bytes overflow the size limit")
    return bytearray(nmemb * size)