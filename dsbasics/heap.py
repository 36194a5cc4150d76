"""A bounded binary heap ordered by a priority comparison function."""

from __future__ import annotations

from typing import Callable

HEAP_LEN = 100
# Slot 0 of the backing array is unused, so one fewer value fits.
DEFAULT_CAPACITY = HEAP_LEN - 1

Compare = Callable[[int, int], int]


class HeapFullError(OverflowError):
    """Raised when pushing onto a heap that is at capacity."""


def max_first(d1: int, d2: int) -> int:
    """Priority comparison under which larger values come out first."""
    return d1 - d2


def min_first(d1: int, d2: int) -> int:
    """Priority comparison under which smaller values come out first."""
    return d2 - d1


class Heap:
    """A priority heap.

    ``compare(d1, d2)`` returns a positive number when ``d1`` has the higher
    priority, a negative number when ``d2`` has, and zero when they tie.
    """

    def __init__(self, compare: Compare = max_first,
                 capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._compare = compare
        self.capacity = capacity
        self._arr: list[int] = [0]

    def __repr__(self) -> str:
        return f"Heap({self._arr[1:]!r}, capacity={self.capacity})"

    def __len__(self) -> int:
        return len(self._arr) - 1

    def is_empty(self) -> bool:
        return len(self) == 0

    def _higher_child(self, idx: int, size: int) -> int:
        left = idx * 2
        if left > size:
            return 0
        if left == size:
            return left
        if self._compare(self._arr[left], self._arr[left + 1]) < 0:
            return left + 1
        return left

    def push(self, value: int) -> None:
        """Add a value."""
        if len(self) >= self.capacity:
            raise HeapFullError(f"heap is full (capacity {self.capacity})")
        arr = self._arr
        arr.append(value)
        idx = len(arr) - 1
        while idx != 1:
            parent = idx // 2
            if self._compare(value, arr[parent]) > 0:
                arr[idx] = arr[parent]
                idx = parent
            else:
                break
        arr[idx] = value

    def pop(self) -> int:
        """Remove and return the value with the highest priority."""
        size = len(self)
        if size == 0:
            raise IndexError("pop from an empty heap")
        arr = self._arr
        root = arr[1]
        last = arr[size]
        idx = 1
        while child := self._higher_child(idx, size):
            if self._compare(last, arr[child]) >= 0:
                break
            arr[idx] = arr[child]
            idx = child
        arr[idx] = last
        del arr[size]
        return root