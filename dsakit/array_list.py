"""A growable array list that doubles its capacity when full."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 10


class ArrayList:
    """An ordered sequence with a capacity that doubles whenever it fills."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Any] = []

    def append(self, value: Any) -> None:
        """Add ``value`` at the end, growing the capacity if needed."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def pop_first(self) -> Any:
        """Remove and return the first element."""
        self._require_items()
        return self._items.pop(0)

    def pop_last(self) -> Any:
        """Remove and return the last element."""
        self._require_items()
        return self._items.pop()

    def first(self) -> Any:
        """Return the first element."""
        self._require_items()
        return self._items[0]

    def last(self) -> Any:
        """Return the last element."""
        self._require_items()
        return self._items[-1]

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def _require_items(self) -> None:
        if not self._items:
            raise IndexError("ArrayList is empty")

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._items):
            raise IndexError("index out of range")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._items[self._check_index(index)]

    def __delitem__(self, index: int) -> None:
        del self._items[self._check_index(index)]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"