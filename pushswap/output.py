"""Write characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO, Union


def putchar_fd(c: Union[int, str], stream: TextIO) -> None:
    """Write one character, given as a one-character string or a code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        stream.write(c)
    else:
        stream.write(chr(c))


def putstr_fd(text: Optional[str], stream: TextIO) -> None:
    """Write a string; None writes nothing."""
    if text is None:
        return
    stream.write(text)


def putendl_fd(text: Optional[str], stream: TextIO) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if text is None:
        return
    stream.write(text + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    stream.write(str(n))