"""The two stacks of the puzzle and the moves that act on them."""

from __future__ import annotations

from collections import deque
from itertools import pairwise
from typing import Deque, Iterable, List, Optional, TextIO


class Stacks:
    """Stacks ``a`` and ``b``; the top of each stack is index 0.

    Every move that takes effect is recorded in ``operations`` and, when an
    output stream is given, written to it as one line.
    """

    def __init__(self, values: Iterable[int] = (), out: Optional[TextIO] = None) -> None:
        self.a: Deque[int] = deque(values)
        self.b: Deque[int] = deque()
        self.out = out
        self.operations: List[str] = []

    def _emit(self, name: str) -> None:
        self.operations.append(name)
        if self.out is not None:
            self.out.write(name + "\n")

    def _stack(self, name: str) -> Deque[int]:
        if name == "a":
            return self.a
        if name == "b":
            return self.b
        raise ValueError(f"unknown stack {name!r}")

    def swap(self, name: str) -> None:
        """``sa`` or ``sb``: exchange the two top elements of a stack.

        On an empty stack nothing happens and nothing is recorded.
        """
        if name not in ("sa", "sb"):
            raise ValueError(f"unknown swap {name!r}")
        stack = self._stack(name[1])
        if not stack:
            return
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]
        self._emit(name)

    def push(self, name: str) -> None:
        """``pa`` or ``pb``: move the top of one stack onto the other.

        When the source stack is empty nothing happens and nothing is recorded.
        """
        if name == "pa":
            source, target = self.b, self.a
        elif name == "pb":
            source, target = self.a, self.b
        else:
            raise ValueError(f"unknown push {name!r}")
        if not source:
            return
        target.appendleft(source.popleft())
        self._emit(name)

    def rotate(self, stack: str, direction: str) -> None:
        """Rotate a stack: ``up`` sends the top to the bottom, ``down`` the reverse."""
        target = self._stack(stack)
        if direction == "up":
            target.rotate(-1)
            self._emit("r" + stack)
        elif direction == "down":
            target.rotate(1)
            self._emit("rr" + stack)
        else:
            raise ValueError(f"unknown direction {direction!r}")

    def is_sorted(self) -> bool:
        """True when stack ``a`` is in ascending order from the top; ``b`` is ignored."""
        return all(first <= second for first, second in pairwise(self.a))