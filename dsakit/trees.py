"""Binary tree nodes, depth-first traversals and a binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class TreeNode:
    """A binary tree node."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values root, left subtree, right subtree."""
    stack = [] if root is None else [root]
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree, root, right subtree."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.value
        node = node.right


def postorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree, right subtree, root."""
    reverse_order = []
    stack = [] if root is None else [root]
    while stack:
        node = stack.pop()
        reverse_order.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(reverse_order)


class BinarySearchTree:
    """A binary search tree that ignores duplicate values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add value unless it is already present."""
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            else:
                return

    def preorder(self) -> Iterator[Any]:
        """Yield the values in preorder."""
        return preorder(self.root)

    def inorder(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        return inorder(self.root)

    def postorder(self) -> Iterator[Any]:
        """Yield the values in postorder."""
        return postorder(self.root)