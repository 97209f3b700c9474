"""Binary max- and min-heaps, heap construction and heap sort."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator
from typing import Any


def _sift_up(items: list[Any], index: int) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if items[parent] < items[index]:
            items[parent], items[index] = items[index], items[parent]
            index = parent
        else:
            return


def _sift_down(items: list[Any], index: int, end: int) -> None:
    """Move ``items[index]`` down within ``items[:end]`` to restore max order."""
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1
        if left < end and items[largest] < items[left]:
            largest = left
        if right < end and items[largest] < items[right]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


class MaxHeap:
    """A binary heap whose top is its largest value."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Insert ``value``."""
        self._items.append(value)
        _sift_up(self._items, len(self._items) - 1)

    def pop(self) -> Any:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("nothing to delete")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, 0, len(self._items))
        return top

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0]

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in heap array order."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class MinHeap:
    """A binary heap whose top is its smallest value."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Insert ``value``."""
        heapq.heappush(self._items, value)

    def pop(self) -> Any:
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("heap is empty")
        return heapq.heappop(self._items)

    def peek(self) -> Any:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0]

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in heap array order."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` arranged as a max-heap."""
    items = list(values)
    for index in range(len(items) // 2 - 1, -1, -1):
        _sift_down(items, index, len(items))
    return items


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list holding ``values`` in ascending order."""
    items = build_max_heap(values)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items