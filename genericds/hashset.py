"""Open-addressing hash set with linear probing and tombstones."""

from __future__ import annotations

import operator
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from genericds.hashfuncs import hash_uint64

T = TypeVar("T")

BASE_SIZE = 128
_LOAD_NUMERATOR = 675
_LOAD_DENOMINATOR = 1000

_EMPTY = object()
_TOMBSTONE = object()


class HashSet(Generic[T]):
    """A set whose hashing and equality are supplied by the caller.

    Iteration yields elements in slot order. The table starts with 128
    slots and doubles whenever it would become more than 67.5% full.
    """

    def __init__(
        self,
        hash_func: Callable[[T], int] | None = None,
        eq: Callable[[T, T], Any] | None = None,
        items: Iterable[T] | None = None,
    ) -> None:
        self._hash = hash_func if hash_func is not None else hash_uint64
        self._eq = eq if eq is not None else operator.eq
        self._slots: list[Any] = []
        self._len = 0
        if items is not None:
            self.update(items)

    @property
    def capacity(self) -> int:
        """Number of slots in the table."""
        return len(self._slots)

    def _target_capacity(self, extra: int) -> int:
        size = self.capacity or BASE_SIZE
        while (self._len + extra) * _LOAD_DENOMINATOR >= size * _LOAD_NUMERATOR:
            size <<= 1
        return size

    def _resize(self, size: int) -> None:
        old = list(self)
        self._slots = [_EMPTY] * size
        self._len = 0
        for value in old:
            self._insert(value)

    def _insert(self, value: T) -> bool:
        slots = self._slots
        size = len(slots)
        start = self._hash(value) % size
        tombstone = -1
        for i in range(size):
            probe = (start + i) % size
            slot = slots[probe]
            if slot is _TOMBSTONE:
                tombstone = probe
            elif slot is _EMPTY:
                slots[tombstone if tombstone != -1 else probe] = value
                self._len += 1
                return True
            elif self._eq(slot, value):
                return False
        if tombstone != -1:
            slots[tombstone] = value
            self._len += 1
            return True
        return False

    def _find(self, value: T) -> int:
        slots = self._slots
        size = len(slots)
        if not size:
            return -1
        start = self._hash(value) % size
        for i in range(size):
            probe = (start + i) % size
            slot = slots[probe]
            if slot is _EMPTY:
                break
            if slot is not _TOMBSTONE and self._eq(slot, value):
                return probe
        return -1

    def add(self, value: T) -> bool:
        """Add ``value``; return True if it was not present before."""
        size = self._target_capacity(0)
        if size != self.capacity:
            self._resize(size)
        return self._insert(value)

    def update(self, values: Iterable[T]) -> None:
        """Add every value, growing the table once up front."""
        batch = list(values)
        size = self._target_capacity(len(batch))
        if size != self.capacity:
            self._resize(size)
        for value in batch:
            self._insert(value)

    def remove(self, value: T) -> bool:
        """Remove ``value`` if present; return whether it was."""
        pos = self._find(value)
        if pos == -1:
            return False
        self._slots[pos] = _TOMBSTONE
        self._len -= 1
        return True

    def clear(self) -> None:
        self._slots = []
        self._len = 0

    def __contains__(self, value: object) -> bool:
        return self._find(value) != -1  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return (slot for slot in self._slots if slot is not _EMPTY and slot is not _TOMBSTONE)

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return f"HashSet({list(self)!r})"