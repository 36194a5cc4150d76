"""Binary tree nodes with depth-first and breadth-first traversals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from dsbasics.fifo import Queue


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree, holding a value and two optional subtrees."""

    data: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def set_left(self, sub: Optional["TreeNode"]) -> None:
        """Attach ``sub`` as the left subtree, replacing any existing one."""
        self.left = sub

    def set_right(self, sub: Optional["TreeNode"]) -> None:
        """Attach ``sub`` as the right subtree, replacing any existing one."""
        self.right = sub

    def preorder(self) -> Iterator[int]:
        """Yield values node, left, right."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> Iterator[int]:
        """Yield values left, node, right."""
        stack: list[TreeNode] = []
        node: Optional[TreeNode] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values left, right, node."""
        stack: list[tuple[TreeNode, bool]] = [(self, False)]
        while stack:
            node, visited = stack.pop()
            if visited:
                yield node.data
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def levelorder(self) -> Iterator[int]:
        """Yield values level by level, left to right."""
        pending: Queue = Queue()
        pending.enqueue(self)  # type: ignore[arg-type]
        while not pending.is_empty():
            node: TreeNode = pending.dequeue()  # type: ignore[assignment]
            yield node.data
            if node.left is not None:
                pending.enqueue(node.left)  # type: ignore[arg-type]
            if node.right is not None:
                pending.enqueue(node.right)  # type: ignore[arg-type]