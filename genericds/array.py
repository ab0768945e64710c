"""Growable array with filter, map and search helpers."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar, overload

T = TypeVar("T")
U = TypeVar("U")


class DynamicArray(Generic[T]):
    """An ordered, growable sequence of values."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = list(items) if items is not None else []

    def append(self, value: T) -> None:
        self._items.append(value)

    def extend(self, values: Iterable[T]) -> None:
        self._items.extend(values)

    def _check_index(self, pos: int) -> None:
        if pos < 0 or pos >= len(self._items):
            raise IndexError("Index out of range!")

    def remove(self, pos: int) -> None:
        """Remove the element at ``pos``, shifting later elements left."""
        self._check_index(pos)
        del self._items[pos]

    def insert(self, value: T, pos: int) -> None:
        """Insert ``value`` before the existing element at ``pos``."""
        self._check_index(pos)
        self._items.insert(pos, value)

    def filter(self, predicate: Callable[[T], Any]) -> DynamicArray[T]:
        return DynamicArray(item for item in self._items if predicate(item))

    def map(self, func: Callable[[T], U]) -> DynamicArray[U]:
        return DynamicArray(func(item) for item in self._items)

    def find(self, value: T) -> int:
        """Index of the first element equal to ``value``, or -1."""
        return next((i for i, item in enumerate(self._items) if item == value), -1)

    def find_by(self, value: T, cmp: Callable[[T, T], Any]) -> int:
        """Index of the first element for which ``cmp(value, element)`` holds, or -1."""
        return next((i for i, item in enumerate(self._items) if cmp(value, item)), -1)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    @overload
    def __getitem__(self, pos: int) -> T: ...

    @overload
    def __getitem__(self, pos: slice) -> list[T]: ...

    def __getitem__(self, pos):
        return self._items[pos]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynamicArray):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r})"