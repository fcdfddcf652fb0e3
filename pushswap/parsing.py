"""Checking, parsing and ranking the numbers given to the sorter."""

from __future__ import annotations

from bisect import bisect_left
from itertools import zip_longest
from typing import Iterable, List, Sequence

from pushswap.chars import isdigit
from pushswap.text import split

INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"


class PushSwapError(Exception):
    """Invalid input or a failed sort.

    ``operations`` holds the moves already made when the error arose.
    """

    def __init__(self, message: str = "ERROR", operations: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.operations = list(operations)


def validate_arguments(args: Sequence[str]) -> None:
    """Reject an empty argument list and arguments with stray characters.

    Allowed are digits, spaces and signs; an argument may not be empty or
    start with a space, and a sign must be followed by something other than
    a space or the end of the argument.
    """
    if not args:
        raise PushSwapError()
    for arg in args:
        if not arg or arg[0] == " ":
            raise PushSwapError()
        for ch, following in zip_longest(arg, arg[1:], fillvalue=" "):
            if not isdigit(ch) and ch not in " -+":
                raise PushSwapError()
            if ch in "-+" and following == " ":
                raise PushSwapError()


def parse_number(text: str) -> int:
    """Parse one signed decimal number that must fit in a 32-bit int.

    Overflow raises with the message ``Error``; any other stray character
    raises with ``ERROR``.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        digit = ord(ch) - ord("0")
        if result > INT_MAX // 10 or (result == INT_MAX // 10 and digit > INT_MAX % 10):
            raise PushSwapError("Error")
        if not isdigit(ch):
            raise PushSwapError()
        result = result * 10 + digit
    return sign * result


def parse_numbers(args: Iterable[str]) -> List[int]:
    """All numbers in the arguments, which may each hold several separated by spaces."""
    return [parse_number(word) for word in split(" ".join(args), " ")]


def check_duplicates(values: Sequence[int]) -> None:
    """Raise when any value occurs more than once."""
    if len(set(values)) != len(values):
        raise PushSwapError()


def index_values(values: Sequence[int]) -> List[int]:
    """Replace each value by the number of values smaller than it."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]