"""Binary search tree operations on tree nodes, and a tree class built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any

from dsakit.binary_tree import TreeNode, inorder


def bst_insert(root: TreeNode | None, value: Any) -> TreeNode:
    """Insert ``value`` and return the root; equal values go to the left."""
    new = TreeNode(value)
    if root is None:
        return new
    node = root
    while True:
        if value > node.value:
            if node.right is None:
                node.right = new
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = new
                return root
            node = node.left


def bst_search(root: TreeNode | None, value: Any) -> bool:
    """Return whether ``value`` is in the tree."""
    node = root
    while node is not None:
        if node.value == value:
            return True
        node = node.left if value < node.value else node.right
    return False


def _min_node(root: TreeNode) -> TreeNode:
    while root.left is not None:
        root = root.left
    return root


def bst_min(root: TreeNode | None) -> Any:
    """Return the smallest value in the tree."""
    if root is None:
        raise ValueError("tree is empty")
    return _min_node(root).value


def bst_max(root: TreeNode | None) -> Any:
    """Return the largest value in the tree."""
    if root is None:
        raise ValueError("tree is empty")
    while root.right is not None:
        root = root.right
    return root.value


def bst_delete(root: TreeNode | None, value: Any) -> TreeNode | None:
    """Remove one node holding ``value`` and return the new root.

    A node with two children takes the smallest value of its right subtree.
    """
    if root is None:
        return None
    if value < root.value:
        root.left = bst_delete(root.left, value)
        return root
    if value > root.value:
        root.right = bst_delete(root.right, value)
        return root
    if root.left is None:
        return root.right
    if root.right is None:
        return root.left
    successor = _min_node(root.right).value
    root.value = successor
    root.right = bst_delete(root.right, successor)
    return root


def kth_smallest(root: TreeNode | None, k: int) -> Any:
    """Return the ``k``-th smallest value, counting from 1."""
    if k < 1:
        raise IndexError("k must be at least 1")
    for value in islice(inorder(root), k - 1, None):
        return value
    raise IndexError("k is larger than the tree")


class BinarySearchTree:
    """A binary search tree holding each value at most once."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add ``value``; return False if it was already present."""
        if bst_search(self.root, value):
            return False
        self.root = bst_insert(self.root, value)
        self._size += 1
        return True

    def remove(self, value: Any) -> bool:
        """Remove ``value``; return whether it was present."""
        if not bst_search(self.root, value):
            return False
        self.root = bst_delete(self.root, value)
        self._size -= 1
        return True

    def min(self) -> Any:
        """Return the smallest value."""
        return bst_min(self.root)

    def max(self) -> Any:
        """Return the largest value."""
        return bst_max(self.root)

    def kth_smallest(self, k: int) -> Any:
        """Return the ``k``-th smallest value, counting from 1."""
        return kth_smallest(self.root, k)

    def __contains__(self, value: object) -> bool:
        return bst_search(self.root, value)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        return inorder(self.root)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"