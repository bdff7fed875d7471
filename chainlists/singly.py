"""A singly linked list holding arbitrary objects."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


class EmptyListError(LookupError):
    """Raised when an operation needs a list that holds at least one node."""


@dataclass(eq=False)
class SinglyNode:
    """One link of a singly linked list."""

    data: Any
    next: SinglyNode | None = field(default=None, repr=False)


def _matches(candidate: Any, data: Any) -> bool:
    return candidate is data or candidate == data


class SinglyLinkedList:
    """A chain of nodes reachable from the head, with a tail shortcut."""

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._head: SinglyNode | None = None
        self._tail: SinglyNode | None = None
        self._len = 0
        for item in iterable:
            self.insert_tail(item)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    @property
    def head(self) -> SinglyNode | None:
        """The first node, or None when the list is empty."""
        return self._head

    @property
    def tail(self) -> SinglyNode | None:
        """The last node, or None when the list is empty."""
        return self._tail

    def _nodes(self) -> Iterator[SinglyNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _require_items(self) -> None:
        if self._head is None:
            raise EmptyListError("list empty!")

    def insert_head(self, data: Any) -> SinglyNode:
        """Put data at the front and return its new node."""
        node = SinglyNode(data, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._len += 1
        return node

    def insert_tail(self, data: Any) -> SinglyNode:
        """Put data at the end and return its new node."""
        node = SinglyNode(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._len += 1
        return node

    def search(self, data: Any) -> SinglyNode | None:
        """Return the first node holding data, or None if there is none.

        Raises EmptyListError when the list is empty.
        """
        self._require_items()
        return next((node for node in self._nodes() if _matches(node.data, data)), None)

    def delete(self, data: Any) -> int:
        """Remove every node holding data and return how many were removed.

        Raises EmptyListError when the list is empty.
        """
        self._require_items()
        removed = 0
        prev: SinglyNode | None = None
        node = self._head
        while node is not None:
            following = node.next
            if _matches(node.data, data):
                if prev is None:
                    self._head = following
                else:
                    prev.next = following
                if node is self._tail:
                    self._tail = prev
                node.next = None
                removed += 1
            else:
                prev = node
            node = following
        self._len -= removed
        return removed

    def clear(self) -> None:
        """Drop every node. Raises EmptyListError when already empty."""
        self._require_items()
        self._head = self._tail = None
        self._len = 0