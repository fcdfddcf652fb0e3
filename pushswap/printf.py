"""A small printf supporting %c %s %d %i %u %x %X %p and %%.

Integers are interpreted as C would: %d and %i as 32-bit signed, %u, %x and
%X as 32-bit unsigned, %p as a 64-bit address. An unknown conversion prints
nothing and consumes no argument; a lone trailing % is printed as is.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator

_HEX_LOWER = "0123456789abcdef"


def _as_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"missing argument for %{spec}") from None
    if spec == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(_as_int(value, spec) & 0xFF)
    if spec == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a str, got {type(value).__name__}")
        return value
    if spec in "di":
        return str(_signed32(_as_int(value, spec)))
    if spec == "p":
        address = 0 if value is None else _as_int(value, spec) & 0xFFFFFFFFFFFFFFFF
        return "(nil)" if address == 0 else f"0x{address:x}"
    number = _as_int(value, spec) & 0xFFFFFFFF
    if spec == "u":
        return str(number)
    return f"{number:x}" if spec == "x" else f"{number:X}"


def format_printf(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted arguments."""
    remaining = iter(args)
    pieces = []
    position = 0
    while position < len(fmt):
        ch = fmt[position]
        if ch == "%" and position + 1 < len(fmt):
            pieces.append(_convert(fmt[position + 1], remaining))
            position += 2
        else:
            pieces.append(ch)
            position += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)