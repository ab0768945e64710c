"""Array-backed binary min-heap of integers."""

from __future__ import annotations

from typing import Iterator


class BinaryHeap:
    """A binary min-heap; iteration yields the underlying array order."""

    def __init__(self) -> None:
        self._data: list[int] = []

    def _bubble_up(self, pos: int) -> None:
        data = self._data
        while pos:
            parent = (pos - 1) // 2
            if data[parent] <= data[pos]:
                return
            data[parent], data[pos] = data[pos], data[parent]
            pos = parent

    def _bubble_down(self, pos: int) -> None:
        data = self._data
        size = len(data)
        while True:
            left, right = 2 * pos + 1, 2 * pos + 2
            if left < size and right < size:
                child = left if data[left] < data[right] else right
            elif left < size:
                child = left
            else:
                return
            if data[child] >= data[pos]:
                return
            data[child], data[pos] = data[pos], data[child]
            pos = child

    def insert(self, value: int) -> None:
        self._data.append(value)
        self._bubble_up(len(self._data) - 1)

    def extract(self) -> int:
        """Remove and return the smallest value."""
        if not self._data:
            raise IndexError("Trying to extract an element from an empty binary heap!")
        data = self._data
        smallest = data[0]
        last = data.pop()
        if data:
            data[0] = last
            self._bubble_down(0)
        return smallest

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data!r})"