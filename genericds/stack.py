"""Last-in first-out stack."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A LIFO stack backed by a list."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = list(items) if items is not None else []

    def push(self, value: T) -> None:
        self._items.append(value)

    def extend(self, values: Iterable[T]) -> None:
        """Push every value in order; the last one ends on top."""
        self._items.extend(values)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("Trying to pop an empty stack!")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise IndexError("Trying to peek at an empty stack!")
        return self._items[-1]

    def reversed(self) -> Stack[T]:
        """A new stack holding the elements in the opposite order."""
        return Stack(reversed(self._items))

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"