"""A doubly linked list holding arbitrary objects."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """One link of a doubly linked list."""

    data: Any
    next: DoublyNode | None = field(default=None, repr=False)
    prev: DoublyNode | None = field(default=None, repr=False)


def _matches(candidate: Any, data: Any) -> bool:
    return candidate is data or candidate == data


class DoublyLinkedList:
    """A chain of nodes that can be walked in both directions."""

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._head: DoublyNode | None = None
        self._tail: DoublyNode | None = None
        self._len = 0
        for item in iterable:
            self.insert_tail(item)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    @property
    def head(self) -> DoublyNode | None:
        """The first node, or None when the list is empty."""
        return self._head

    @property
    def tail(self) -> DoublyNode | None:
        """The last node, or None when the list is empty."""
        return self._tail

    def insert_head(self, data: Any) -> DoublyNode:
        """Put data at the front and return its new node."""
        node = DoublyNode(data, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._len += 1
        return node

    def insert_tail(self, data: Any) -> DoublyNode:
        """Put data at the end and return its new node."""
        node = DoublyNode(data, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._len += 1
        return node

    def search(self, data: Any) -> DoublyNode | None:
        """Return the first node holding data, or None if there is none."""
        node = self._head
        while node is not None:
            if _matches(node.data, data):
                return node
            node = node.next
        return None

    def delete(self, data: Any) -> int:
        """Remove every node holding data and return how many were removed."""
        removed = 0
        node = self._head
        while node is not None:
            following = node.next
            if _matches(node.data, data):
                if node.prev is None:
                    self._head = following
                else:
                    node.prev.next = following
                if following is None:
                    self._tail = node.prev
                else:
                    following.prev = node.prev
                node.next = node.prev = None
                removed += 1
            node = following
        self._len -= removed
        return removed

    def clear(self) -> None:
        """Drop every node."""
        self._head = self._tail = None
        self._len = 0