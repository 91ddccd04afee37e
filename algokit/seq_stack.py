"""Sequential stack that grows by a fixed increment when full."""

from __future__ import annotations

from typing import Any


class SeqStack:
    """A stack with an explicit capacity that grows by ``increment``."""

    def __init__(self, size: int, increment: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._capacity = size
        self.increment = increment
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Number of elements the stack holds before it has to grow."""
        return self._capacity

    def push(self, value: Any) -> None:
        """Push ``value``, growing the capacity by ``increment`` when full."""
        if len(self._items) >= self._capacity:
            if self.increment <= 0:
                raise OverflowError("stack is full and cannot grow")
            self._capacity += self.increment
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def clear(self) -> None:
        """Empty the stack; a non-empty stack also drops its capacity to 0."""
        if not self._items:
            return
        self._items.clear()
        self._capacity = 0

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)