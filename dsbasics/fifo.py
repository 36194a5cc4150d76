"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Iterator


class EmptyQueueError(IndexError):
    """Raised when reading from an empty queue."""


class Queue:
    """A queue of values; values come out in the order they went in."""

    def __init__(self) -> None:
        self._items: deque[int] = deque()

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"

    def enqueue(self, value: int) -> None:
        """Add a value at the back."""
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if not self._items:
            raise EmptyQueueError("queue is empty")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the value at the front without removing it."""
        if not self._items:
            raise EmptyQueueError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from front to back without removing anything."""
        return iter(list(self._items))