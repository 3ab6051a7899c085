"""A small singly linked list of values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that can grow at either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
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

    def add_front(self, value: Any) -> Node:
        """Insert ``value`` before the first element and return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def add_back(self, value: Any) -> Node:
        """Append ``value`` after the last element and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def apply(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value; a result other than None replaces it."""
        for node in self._nodes():
            result = func(node.content)
            if result is not None:
                node.content = result

    def delete_front(self, func: Optional[Callable[[Any], Any]] = None) -> Any:
        """Remove the first element, hand it to ``func`` and return it.

        Raises IndexError when the list is empty.
        """
        node = self.head
        if node is None:
            raise IndexError("delete from an empty list")
        self.head = node.next
        node.next = None
        if func is not None:
            func(node.content)
        return node.content

    def clear(self, func: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every element front to back, handing each to ``func``."""
        while self.head is not None:
            self.delete_front(func)