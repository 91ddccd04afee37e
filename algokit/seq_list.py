"""Fixed-capacity sequential list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class SeqList:
    """A list with a fixed capacity of ``size`` elements.

    ``increment`` is recorded but appending never grows the list: a full list
    refuses further elements.
    """

    def __init__(self, size: int, increment: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self.increment = increment
        self._items: list[Any] = []

    def append(self, value: Any) -> None:
        """Add ``value`` at the end; raise OverflowError when full."""
        if len(self._items) >= self.size:
            raise OverflowError("list is full")
        self._items.append(value)

    def pop_last(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from an empty list")
        return self._items.pop()

    def get(self, position: int) -> Any:
        """Element at 1-based ``position``."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"position {position} out of range")
        return self._items[position - 1]

    def search(self, value: Any) -> int | None:
        """0-based index of the first element equal to ``value``, or None."""
        return next((i for i, item in enumerate(self._items) if item == value), None)

    def clear(self) -> None:
        """Remove all elements."""
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)