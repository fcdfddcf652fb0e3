"""Byte-buffer helpers: fill, search, copy and compare.

Buffers are bytes-like objects; destinations must be writable (a bytearray
or a writable memoryview, possibly a slice of a larger buffer).
"""

from __future__ import annotations

from typing import Optional


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf, value: int, n: int):
    """Set the first n bytes of buf to value (taken modulo 256); return buf."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf, n: int) -> None:
    """Set the first n bytes of buf to zero."""
    memset(buf, 0, n)


def memchr(data, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value within n bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcpy(dest, src, n: int):
    """Copy n bytes from src to dest and return dest."""
    if dest is None and src is None:
        return None
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy n bytes from src to dest, safe when the two overlap; return dest."""
    if dest is None and src is None:
        return None
    _check_length(n, dest, src)
    # Taking a snapshot of the source first makes overlapping views safe.
    dest[:n] = bytes(src[:n])
    return dest


def memcmp(first, second, n: int) -> int:
    """Compare n bytes; return the difference of the first differing pair, or 0."""
    _check_length(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)