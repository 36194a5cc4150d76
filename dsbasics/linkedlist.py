"""A singly linked list with a sentinel head node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One link of a LinkedList."""

    data: int = 0
    next: Optional["ListNode"] = None


class LinkedList:
    """An unbounded list of values kept in linked nodes.

    Indexing accepts positions from ``-len`` to ``len - 1``; insertion also
    accepts ``len`` to add at the end.
    """

    def __init__(self) -> None:
        self._head = ListNode()
        self._tail = self._head
        self._size = 0

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _position(self, index: int) -> int:
        if not -self._size <= index < self._size:
            raise IndexError(f"index {index} out of range for length {self._size}")
        return index % self._size

    def _node_before(self, position: int) -> ListNode:
        node = self._head
        for _ in range(position):
            assert node.next is not None
            node = node.next
        return node

    def _node_at(self, index: int) -> ListNode:
        node = self._node_before(self._position(index)).next
        assert node is not None
        return node

    def append(self, value: int) -> None:
        """Add a value at the end."""
        node = ListNode(value)
        self._tail.next = node
        self._tail = node
        self._size += 1

    def insert(self, index: int, value: int) -> None:
        """Insert a value before position ``index``; ``index == len`` appends."""
        if not 0 <= index <= self._size:
            raise IndexError(
                f"cannot insert at {index} in list of length {self._size}"
            )
        if index == self._size:
            self.append(value)
            return
        prev = self._node_before(index)
        prev.next = ListNode(value, prev.next)
        self._size += 1

    def __getitem__(self, index: int) -> int:
        return self._node_at(index).data

    def __setitem__(self, index: int, value: int) -> None:
        self._node_at(index).data = value

    def __delitem__(self, index: int) -> None:
        prev = self._node_before(self._position(index))
        target = prev.next
        assert target is not None
        prev.next = target.next
        if target is self._tail:
            self._tail = prev
        self._size -= 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head.next
        while node is not None:
            yield node.data
            node = node.next

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LinkedList):
            return list(self) == list(other)
        if isinstance(other, list):
            return list(self) == other
        return NotImplemented

    def search(self, value: int) -> Optional[ListNode]:
        """Return the first node holding ``value``, or None."""
        node = self._head.next
        while node is not None:
            if node.data == value:
                return node
            node = node.next
        return None

    def clear(self) -> None:
        """Remove every value."""
        self._head.next = None
        self._tail = self._head
        self._size = 0