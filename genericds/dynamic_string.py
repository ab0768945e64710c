"""Growable text buffer with slicing and field splitting."""

from __future__ import annotations

import os
from typing import Iterator

from genericds.hashfuncs import hash_murmur3_string

BASE_SIZE = 256


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")


class DynamicString:
    """A text buffer with an explicit capacity that includes a terminator slot."""

    def __init__(self, text: str | None = None) -> None:
        self._text = ""
        self._capacity = 0
        if text is not None:
            self.append_text(text)

    @property
    def capacity(self) -> int:
        return self._capacity

    def reserve(self, size: int) -> None:
        """Set the capacity; a buffer that no longer fits is cut to ``size - 1``."""
        if self._capacity:
            self._capacity = size
            self._text = self._text[: max(size - 1, 0)]
        else:
            self._capacity = size or BASE_SIZE
            self._text = ""

    def _make_room(self, extra: int) -> None:
        target = self._capacity or BASE_SIZE
        while len(self._text) + extra >= target:
            target <<= 1
        if target != self._capacity:
            self.reserve(target)

    def append(self, c: str) -> None:
        _check_char(c)
        self._make_room(1)
        self._text += c

    def append_text(self, text: str | DynamicString) -> None:
        text = str(text)
        self._make_room(len(text))
        self._text += text

    def append_file(self, path: str | os.PathLike[str]) -> None:
        """Append the whole contents of the file at ``path``."""
        with open(path, encoding="utf-8", newline="") as handle:
            self.append_text(handle.read())

    def copy_from(self, other: DynamicString) -> None:
        """Replace the contents with those of ``other``."""
        self._text = ""
        self._capacity = other.capacity or BASE_SIZE
        self.append_text(other._text)

    def remove_char(self, c: str) -> None:
        """Remove every occurrence of the character ``c``."""
        _check_char(c)
        self._text = self._text.replace(c, "")

    def slice(self, start: int, length: int) -> str | None:
        """The ``length`` characters from ``start``, or None if out of range."""
        if start < 0 or start > len(self._text) or length < 0:
            return None
        return self._text[start : start + length]

    def split(self, sep: str) -> Iterator[str]:
        """Yield the fields between occurrences of ``sep``, empty ones included."""
        _check_char(sep)
        start = 0
        text = self._text
        while True:
            end = text.find(sep, start)
            if end == -1:
                yield text[start:]
                return
            yield text[start:end]
            start = end + 1

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynamicString):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash_murmur3_string(self._text)

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"DynamicString({self._text!r})"