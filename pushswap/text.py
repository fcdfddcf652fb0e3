"""Word counting, splitting, slicing, joining, trimming and mapping of strings.

Like the other string helpers in this package, an embedded NUL character
ends the string.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence

from pushswap.strings import strdup


def _separator(sep: str) -> str:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return sep


def _words(text: str, sep: str) -> List[str]:
    return [word for word in strdup(text).split(_separator(sep)) if word]


def count_words(text: str, sep: str) -> int:
    """Number of non-empty runs of characters other than sep."""
    return len(_words(text, sep))


def split(text: str, sep: str) -> List[str]:
    """Split on sep, dropping the empty pieces between repeated separators."""
    return _words(text, sep)


def substr(text: str, start: int, length: int) -> str:
    """At most length characters of text beginning at start.

    A start at or past the end of the string gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strdup(text)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """The concatenation of two strings."""
    return strdup(first) + strdup(second)


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in charset from both ends of text."""
    return strdup(text).strip(strdup(charset))


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string built from func(index, char) for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(strdup(text)))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character in place with func(index, char).

    Processing stops at the first NUL character. A result of None leaves the
    character unchanged.
    """
    for index, ch in enumerate(list(chars)):
        if ch == "\0":
            break
        result = func(index, ch)
        if result is not None:
            chars[index] = result