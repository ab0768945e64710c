"""Open-addressing hash map with linear probing and tombstones."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from genericds.hashfuncs import hash_uint64

K = TypeVar("K")
V = TypeVar("V")

BASE_SIZE = 128
_LOAD_NUMERATOR = 675
_LOAD_DENOMINATOR = 1000

_EMPTY = object()
_TOMBSTONE = object()
_MISSING = object()


@dataclass
class _Entry(Generic[K, V]):
    key: K
    value: V


class HashMap(Generic[K, V]):
    """A mapping whose key hashing and equality are supplied by the caller.

    Iteration yields keys in slot order. The table starts with 128 slots
    and doubles whenever it would become more than 67.5% full.
    """

    def __init__(
        self,
        hash_func: Callable[[K], int] | None = None,
        eq: Callable[[K, K], Any] | None = None,
    ) -> None:
        self._hash = hash_func if hash_func is not None else hash_uint64
        self._eq = eq if eq is not None else operator.eq
        self._slots: list[Any] = []
        self._len = 0

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
        old = list(self.items())
        self._slots = [_EMPTY] * size
        self._len = 0
        for key, value in old:
            self._insert(key, value)

    def _insert(self, key: K, value: V) -> None:
        slots = self._slots
        size = len(slots)
        start = self._hash(key) % size
        tombstone = -1
        for i in range(size):
            probe = (start + i) % size
            slot = slots[probe]
            if slot is _TOMBSTONE:
                tombstone = probe
            elif slot is _EMPTY:
                slots[tombstone if tombstone != -1 else probe] = _Entry(key, value)
                self._len += 1
                return
            elif self._eq(slot.key, key):
                slot.value = value
                return
        if tombstone != -1:
            slots[tombstone] = _Entry(key, value)
            self._len += 1

    def _find(self, key: K) -> int:
        slots = self._slots
        size = len(slots)
        if not size:
            return -1
        start = self._hash(key) % size
        for i in range(size):
            probe = (start + i) % size
            slot = slots[probe]
            if slot is _EMPTY:
                break
            if slot is not _TOMBSTONE and self._eq(slot.key, key):
                return probe
        return -1

    def add(self, key: K, value: V) -> None:
        """Insert ``key`` or overwrite its value."""
        size = self._target_capacity(0)
        if size != self.capacity:
            self._resize(size)
        self._insert(key, value)

    def update(self, pairs: Iterable[tuple[K, V]]) -> None:
        """Insert every (key, value) pair, growing the table once up front."""
        batch = list(pairs)
        size = self._target_capacity(len(batch))
        if size != self.capacity:
            self._resize(size)
        for key, value in batch:
            self._insert(key, value)

    def remove(self, key: K) -> bool:
        """Remove ``key`` if present; return whether it was."""
        pos = self._find(key)
        if pos == -1:
            return False
        self._slots[pos] = _TOMBSTONE
        self._len -= 1
        return True

    def get(self, key: K, default: Any = None) -> Any:
        pos = self._find(key)
        return default if pos == -1 else self._slots[pos].value

    def items(self) -> Iterator[tuple[K, V]]:
        for slot in self._slots:
            if slot is not _EMPTY and slot is not _TOMBSTONE:
                yield slot.key, slot.value

    def clear(self) -> None:
        self._slots = []
        self._len = 0

    def __contains__(self, key: object) -> bool:
        return self._find(key) != -1  # type: ignore[arg-type]

    def __getitem__(self, key: K) -> V:
        value = self.get(key, _MISSING)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def __iter__(self) -> Iterator[K]:
        return (key for key, _ in self.items())

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return f"HashMap({dict(self.items())!r})"