"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Iterator


class EmptyStackError(IndexError):
    """Raised when reading from an empty stack."""


class Stack:
    """A stack of values; the most recently pushed value comes out first."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"

    def push(self, value: int) -> None:
        """Put a value on top."""
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise EmptyStackError("empty stack")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise EmptyStackError("empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from top to bottom without removing anything."""
        return reversed(list(self._items))