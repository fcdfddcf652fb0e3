"""String inspection, search, copy and number conversion.

Text functions take ``str`` values and, like their C counterparts, treat an
embedded NUL character as the end of the string. Searches return an index
into the string, or ``None`` when nothing is found.

``strlcpy`` and ``strlcat`` work on byte buffers: the destination is a
writable bytes-like object (such as a ``bytearray``) that receives a
NUL-terminated result.
"""

from __future__ import annotations

import re
from typing import Optional, Union

CharLike = Union[int, str]

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = re.compile(r"[0-9]*")


def _cstr(text: str) -> str:
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _cbytes(data) -> bytes:
    raw = bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strlen(text: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(text))


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c; searching for NUL finds the terminator."""
    text = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c; searching for NUL finds the terminator."""
    text = _cstr(text)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first mismatch."""
    _check_size(n, "n")
    first = _cstr(first)
    second = _cstr(second)
    for i in range(n):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle in the first length characters of haystack, or None."""
    _check_size(length, "length")
    haystack = _cstr(haystack)
    needle = _cstr(needle)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """A copy of the string up to its first NUL."""
    return _cstr(text)


def strlcpy(dest, src, size: int) -> int:
    """Copy src into dest, writing at most size bytes including the NUL.

    Returns the length of src, so a result >= size means truncation.
    """
    _check_size(size, "size")
    data = _cbytes(src)
    if size == 0:
        return len(data)
    count = min(size - 1, len(data))
    if count + 1 > len(dest):
        raise ValueError(f"destination of size {len(dest)} cannot hold {count + 1} bytes")
    dest[:count] = data[:count]
    dest[count] = 0
    return len(data)


def strlcat(dest, src, size: int) -> int:
    """Append src to the NUL-terminated string in dest, limited to size bytes total.

    Returns the length the full concatenation would have had.
    """
    _check_size(size, "size")
    dest_len = bytes(dest).find(0)
    if dest_len < 0:
        raise ValueError("destination is not NUL-terminated")
    data = _cbytes(src)
    if size <= dest_len:
        return size + len(data)
    count = min(size - 1 - dest_len, len(data))
    end = dest_len + count
    if end >= len(dest):
        raise ValueError(f"destination of size {len(dest)} cannot hold {end + 1} bytes")
    dest[dest_len:end] = data[:count]
    dest[end] = 0
    return dest_len + len(data)


def atoi(text: str) -> int:
    """Parse leading whitespace, an optional sign and decimal digits.

    Parsing stops at the first non-digit; no digits gives 0.
    """
    rest = _cstr(text).lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    return sign * int(digits or "0")


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)