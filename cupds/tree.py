"""Binary tree nodes with parent links, rotations and traversals."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class TreeNode:
    """A binary tree node that knows its parent and two children."""

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.parent: TreeNode | None = None
        self.left: TreeNode | None = None
        self.right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r})"


def _replace_child(parent: TreeNode | None, old: TreeNode, new: TreeNode) -> None:
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new


def left_rotate(node: TreeNode) -> TreeNode:
    """Rotate ``node`` down to the left; return the node that took its place.

    ::

          n                 m
         / \\               / \\
        a   m     =>      n   c
           / \\           / \\
          b   c         a   b
    """
    if node is None or node.right is None:
        raise ValueError("a left rotation needs a node with a right child")
    pivot = node.right
    node.right = pivot.left
    if node.right is not None:
        node.right.parent = node
    pivot.parent = node.parent
    _replace_child(node.parent, node, pivot)
    pivot.left = node
    node.parent = pivot
    return pivot


def right_rotate(node: TreeNode) -> TreeNode:
    """Rotate ``node`` down to the right; return the node that took its place.

    ::

            n             m
           / \\           / \\
          m   c   =>    a   n
         / \\               / \\
        a   b             b   c
    """
    if node is None or node.left is None:
        raise ValueError("a right rotation needs a node with a left child")
    pivot = node.left
    node.left = pivot.right
    if node.left is not None:
        node.left.parent = node
    pivot.parent = node.parent
    _replace_child(node.parent, node, pivot)
    pivot.right = node
    node.parent = pivot
    return pivot


def preorder(root: Any) -> Iterator[Any]:
    """Nodes in pre-order: each node before its left and right subtrees."""
    stack = [] if root is None else [root]
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def inorder(root: Any) -> Iterator[Any]:
    """Nodes in in-order: left subtree, node, right subtree."""
    stack: list[Any] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def postorder(root: Any) -> Iterator[Any]:
    """Nodes in post-order: both subtrees before the node itself."""
    reverse: list[Any] = []
    stack = [] if root is None else [root]
    while stack:
        node = stack.pop()
        reverse.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(reverse)


def inorder_successor(node: TreeNode) -> TreeNode | None:
    """The node that follows ``node`` in in-order, or None if it is last."""
    if node.right is not None:
        node = node.right
        while node.left is not None:
            node = node.left
        return node
    while node.parent is not None:
        if node is node.parent.left:
            return node.parent
        node = node.parent
    return None