"""Command line: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from pushswap.parsing import (
    PushSwapError,
    check_duplicates,
    index_values,
    parse_numbers,
    validate_arguments,
)
from pushswap.sorting import sort_stacks
from pushswap.stacks import Stacks


def solve(args: Iterable[str]) -> List[str]:
    """The list of moves that sorts the numbers in args.

    Already sorted input needs no moves. Invalid input raises PushSwapError.
    """
    args = list(args)
    validate_arguments(args)
    values = parse_numbers(args)
    check_duplicates(values)
    if Stacks(values).is_sorted():
        return []
    stacks = Stacks(index_values(values))
    sort_stacks(stacks)
    if not stacks.is_sorted():
        raise PushSwapError("ERROR", stacks.operations)
    return stacks.operations


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one move per line; errors go to standard error.

    The exit status is 1 in every case.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        operations = solve(args)
    except PushSwapError as error:
        for name in error.operations:
            sys.stdout.write(name + "\n")
        sys.stderr.write(error.message + "\n")
        return 1
    for name in operations:
        sys.stdout.write(name + "\n")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())