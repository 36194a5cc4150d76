"""A fixed-capacity array-backed list."""

from __future__ import annotations

from typing import Iterator

DEFAULT_CAPACITY = 30000


class ListFullError(OverflowError):
    """Raised when adding to a list that is at capacity."""


class ArrayList:
    """A list of values with a fixed maximum size.

    Indexing accepts positions from ``-len`` to ``len - 1``; insertion also
    accepts ``len`` to add at the end.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[int] = []

    def __repr__(self) -> str:
        return f"ArrayList({self._items!r}, capacity={self.capacity})"

    def _position(self, index: int) -> int:
        size = len(self._items)
        if not -size <= index < size:
            raise IndexError(f"index {index} out of range for length {size}")
        return index % size

    def _ensure_room(self) -> None:
        if len(self._items) >= self.capacity:
            raise ListFullError(f"list is full (capacity {self.capacity})")

    def append(self, value: int) -> None:
        """Add a value at the end."""
        self._ensure_room()
        self._items.append(value)

    def insert(self, index: int, value: int) -> None:
        """Insert a value before position ``index``; ``index == len`` appends."""
        self._ensure_room()
        if not 0 <= index <= len(self._items):
            raise IndexError(
                f"cannot insert at {index} in list of length {len(self._items)}"
            )
        self._items.insert(index, value)

    def __getitem__(self, index: int) -> int:
        return self._items[self._position(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self._items[self._position(index)] = value

    def __delitem__(self, index: int) -> None:
        """Remove the value at ``index``, shifting later values left."""
        position = self._position(index)
        self._items.pop(position)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArrayList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()