"""A binary search tree of distinct values."""

from __future__ import annotations

from typing import Iterator, Optional

from dsbasics.binary_tree import TreeNode


class BinarySearchTree:
    """A binary search tree; duplicate values are not stored."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None
        self._size = 0

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"

    def insert(self, value: int) -> bool:
        """Store ``value``; return False if it was already present."""
        parent: Optional[TreeNode] = None
        node = self.root
        while node is not None:
            if value == node.data:
                return False
            parent = node
            node = node.left if value < node.data else node.right
        new_node = TreeNode(value)
        if parent is None:
            self.root = new_node
        elif value < parent.data:
            parent.set_left(new_node)
        else:
            parent.set_right(new_node)
        self._size += 1
        return True

    def search(self, value: int) -> Optional[TreeNode]:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None:
            if value == node.data:
                return node
            node = node.left if value < node.data else node.right
        return None

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return self.search(value) is not None

    def __iter__(self) -> Iterator[int]:
        """Iterate over the values in ascending order."""
        if self.root is None:
            return iter(())
        return self.root.inorder()

    def __len__(self) -> int:
        return self._size