"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list built from :class:`Node` objects."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items or ():
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node]:
        """The final node, or None for an empty list."""
        final = None
        for final in self._nodes():
            pass
        return final

    def add_front(self, node: Optional[Node]) -> None:
        """Make node the new head; None is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Attach node (and anything chained after it) at the end."""
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def delete_front(self, delete: Deleter = None) -> None:
        """Remove the head node, passing its content to delete first."""
        node = self.head
        if node is None:
            return
        if delete is not None:
            delete(node.content)
        self.head = node.next
        node.next = None

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, passing each content to delete in order."""
        for content in list(self):
            if delete is not None:
                delete(content)
        self.head = None

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call func on each content in order."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """A new list of func applied to each content.

        If func raises, the contents already produced are passed to delete
        and the exception propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except Exception:
            result.clear(delete)
            raise
        return result