"""Sorting strategies for stacks holding ranks 0..n-1."""

from __future__ import annotations

from pushswap.stacks import Stacks


def _bit(value: int, bit: int) -> int:
    return (value >> bit) & 1


def _sort_stack_b(stacks: Stacks, bit_size: int, bit: int) -> None:
    for _ in range(len(stacks.b)):
        if bit > bit_size or stacks.is_sorted():
            break
        if _bit(stacks.b[0], bit) == 0:
            stacks.rotate("b", "up")
        else:
            stacks.push("pa")
    if stacks.is_sorted():
        while stacks.b:
            stacks.push("pa")


def radix_sort(stacks: Stacks) -> None:
    """Binary radix sort of stack ``a`` using ``b`` as the bucket for zero bits."""
    bit_size = max(len(stacks.a).bit_length() - 1, 0)
    for bit in range(bit_size + 1):
        for _ in range(len(stacks.a)):
            if stacks.is_sorted():
                break
            if _bit(stacks.a[0], bit) == 0:
                stacks.push("pb")
            else:
                stacks.rotate("a", "up")
        _sort_stack_b(stacks, bit_size, bit + 1)
    while stacks.b:
        stacks.push("pa")


def sort_three(stacks: Stacks) -> None:
    """Sort exactly the ranks 0, 1 and 2 held in stack ``a``."""
    a = stacks.a
    if a[2] != 2:
        if a[0] == 2:
            stacks.rotate("a", "up")
        else:
            stacks.rotate("a", "down")
    if a[0] > a[1]:
        stacks.swap("sa")


def sort_small(stacks: Stacks) -> None:
    """Sort four or five ranks by parking 0 and 1 on stack ``b``."""
    while len(stacks.b) <= 1:
        if stacks.a[0] in (0, 1):
            stacks.push("pb")
        else:
            stacks.rotate("a", "up")
    if stacks.b[0] == 0:
        stacks.swap("sb")
    a = stacks.a
    third = a[2] if len(a) > 2 else None
    if third != 4:
        if a[0] == 4:
            stacks.rotate("a", "up")
        else:
            stacks.rotate("a", "down")
    if a[0] > a[1]:
        stacks.swap("sa")
    stacks.push("pa")
    stacks.push("pa")


def sort_stacks(stacks: Stacks) -> None:
    """Pick the strategy for the size of stack ``a`` and run it."""
    size = len(stacks.a)
    if size == 2 and stacks.a[0] > stacks.a[1]:
        stacks.swap("sa")
    elif size == 3:
        sort_three(stacks)
    elif 4 <= size <= 5:
        sort_small(stacks)
    else:
        radix_sort(stacks)