"""First-in first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class RingQueue(Generic[T]):
    """A FIFO queue: values are pushed at the head and popped at the tail."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, value: T) -> None:
        self._items.append(value)

    def head(self) -> T:
        """The most recently pushed value."""
        if not self._items:
            raise IndexError("Trying to peek at the head of an empty queue!")
        return self._items[-1]

    def pop(self) -> T:
        """Remove and return the oldest value."""
        if not self._items:
            raise IndexError("Trying to pop an empty queue!")
        return self._items.popleft()

    def peek(self) -> T:
        """The oldest value, left in place."""
        if not self._items:
            raise IndexError("Trying to peek at an empty queue!")
        return self._items[0]

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"RingQueue({list(self._items)!r})"