"""Singly linked FIFO queues, with and without a sentinel head node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class LinkedQueue:
    """Queue on a singly linked list whose first node holds the first item."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0
        for item in items:
            self.enqueue(item)

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def dequeue(self) -> Any:
        """Remove and return the item at the head."""
        if self._head is None:
            raise IndexError("dequeue from an empty queue")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._length -= 1
        return node.data

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._length


class HeadedLinkedQueue:
    """Queue on a singly linked list that starts with an empty head node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node(None)
        self._tail = self._head
        self._length = 0
        for item in items:
            self.enqueue(item)

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        node = _Node(value)
        self._tail.next = node
        self._tail = node
        self._length += 1

    def dequeue(self) -> Any:
        """Remove and return the first item after the head node."""
        first = self._head.next
        if first is None:
            raise IndexError("dequeue from an empty queue")
        self._head.next = first.next
        if first is self._tail:
            self._tail = self._head
        self._length -= 1
        return first.data

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._length