"""Binary tree nodes, traversals, construction from preorder tokens and LCA."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

NULL_MARKER = -1


@dataclass
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values root first, then the left subtree, then the right."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values of the left subtree, then the root, then the right subtree."""
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
    """Yield values of the left subtree, then the right subtree, then the root."""
    if root is None:
        return
    stack = [root]
    reversed_order: list[Any] = []
    while stack:
        node = stack.pop()
        reversed_order.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(reversed_order)


def level_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield values level by level, left to right."""
    for level in levels(root):
        yield from level


def levels(root: TreeNode | None) -> list[list[Any]]:
    """Return the values of each level of the tree, top level first."""
    result: list[list[Any]] = []
    queue = deque([root] if root is not None else [])
    while queue:
        current: list[Any] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            current.append(node.value)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        result.append(current)
    return result


def build_from_preorder(tokens: Iterable[Any]) -> TreeNode | None:
    """Build a tree from preorder values where -1 marks a missing child.

    Tokens may be integers or strings holding integers; tokens left over
    after the tree is complete are ignored.
    """
    iterator = iter(tokens)

    def build() -> TreeNode | None:
        try:
            token = next(iterator)
        except StopIteration:
            raise ValueError("preorder tokens ended before the tree was complete") from None
        value = int(token)
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def lowest_common_ancestor(root: TreeNode | None, p: Any, q: Any) -> TreeNode | None:
    """Return the lowest node that has values ``p`` and ``q`` beneath or at it.

    If only one of the values is present, the node holding it is returned;
    if neither is, ``None`` is returned.
    """
    if root is None:
        return None
    if root.value == p or root.value == q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


class BinaryTree:
    """A binary tree filled by always taking the free left slot, else going right."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def insert(self, value: Any) -> None:
        """Place ``value`` in the first free left slot along the right spine."""
        new = TreeNode(value)
        if self.root is None:
            self.root = new
            return
        node = self.root
        while True:
            if node.left is None:
                node.left = new
                return
            if node.right is None:
                node.right = new
                return
            node = node.right

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in preorder(self.root))

    def __iter__(self) -> Iterator[Any]:
        """Yield the values in inorder."""
        return inorder(self.root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"