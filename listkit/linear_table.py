"""Fixed-capacity sequential list of integers."""

from __future__ import annotations

from typing import Iterator

MAX_NUM = 100
"""Default capacity of a :class:`SeqList`."""


class ListFullError(Exception):
    """Raised when inserting into a list that is at capacity."""


class ListEmptyError(Exception):
    """Raised when reading or removing from an empty list."""


class SeqList:
    """A bounded array-backed list of integers."""

    def __init__(self, capacity: int = MAX_NUM) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SeqList({self._items!r}, capacity={self.capacity})"

    def _check_existing(self, index: int) -> None:
        if not self._items:
            raise ListEmptyError("list is empty")
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def insert(self, index: int, data: int) -> None:
        """Insert ``data`` at ``index``; ``index`` may equal the length."""
        if len(self._items) >= self.capacity:
            raise ListFullError("list is full")
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range")
        self._items.insert(index, data)

    def append(self, data: int) -> None:
        """Add ``data`` after the last element."""
        self.insert(len(self._items), data)

    def delete(self, index: int) -> int:
        """Remove and return the element at ``index``."""
        self._check_existing(index)
        return self._items.pop(index)

    def renew(self, index: int, data: int) -> None:
        """Replace the element at ``index`` with ``data``."""
        self._check_existing(index)
        self._items[index] = data

    def query(self, index: int) -> int:
        """Return the element at ``index``."""
        self._check_existing(index)
        return self._items[index]

    def render(self) -> str:
        """Return the one-line textual form of the list."""
        return "".join(f"|{value}|-" for value in self._items)