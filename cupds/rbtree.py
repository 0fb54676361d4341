"""A red-black tree of values ordered by a key function."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from typing import Any

from cupds import tree
from cupds.tree import TreeNode


class Color(enum.Enum):
    """The colour of a red-black tree node."""

    RED = "red"
    BLACK = "black"


class RBNode(TreeNode):
    """A tree node with a colour; new nodes start red."""

    def __init__(self, data: Any = None) -> None:
        super().__init__(data)
        self.color = Color.RED

    def __repr__(self) -> str:
        return f"RBNode({self.data!r}, {self.color.value})"

    def uncle(self) -> RBNode | None:
        """The sibling of this node's parent, or None."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grand = parent.parent
        return grand.right if parent is grand.left else grand.left

    def root(self) -> RBNode:
        """The topmost ancestor of this node."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node


def _identity(value: Any) -> Any:
    return value


def _is_red(node: RBNode | None) -> bool:
    return node is not None and node.color is Color.RED


class RedBlackTree:
    """A balanced search tree; values with equal keys are kept, later ones to the right."""

    def __init__(self, key: Callable[[Any], Any] | None = None) -> None:
        self.key: Callable[[Any], Any] = _identity if key is None else key
        self._root: RBNode | None = None
        self._size = 0

    def __repr__(self) -> str:
        return f"RedBlackTree({list(self)!r})"

    @property
    def root(self) -> RBNode | None:
        """The root node, or None for an empty tree."""
        return self._root

    def _rotate_left(self, node: RBNode) -> None:
        pivot = tree.left_rotate(node)
        if pivot.parent is None:
            self._root = pivot

    def _rotate_right(self, node: RBNode) -> None:
        pivot = tree.right_rotate(node)
        if pivot.parent is None:
            self._root = pivot

    def insert(self, data: Any) -> RBNode:
        """Add ``data``, restore the red-black properties and return its node."""
        node = RBNode(data)
        wanted = self.key(data)
        parent: RBNode | None = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if wanted < self.key(current.data) else current.right
        node.parent = parent
        if parent is None:
            self._root = node
        elif wanted < self.key(parent.data):
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._fix(node)
        return node

    def _fix(self, node: RBNode) -> None:
        while _is_red(node.parent):
            parent = node.parent
            grand = parent.parent
            if parent is grand.left:
                uncle = grand.right
                if _is_red(uncle):
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_right(grand)
            else:
                uncle = grand.left
                if _is_red(uncle):
                    parent.color = uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent
                parent.color = Color.BLACK
                grand.color = Color.RED
                self._rotate_left(grand)
        if self._root is not None:
            self._root.color = Color.BLACK

    def find(self, data: Any) -> RBNode | None:
        """A node whose value has the same key as ``data``, or None."""
        wanted = self.key(data)
        node = self._root
        while node is not None:
            current = self.key(node.data)
            if wanted < current:
                node = node.left
            elif wanted > current:
                node = node.right
            else:
                return node
        return None

    def __iter__(self) -> Iterator[Any]:
        """Values in key order."""
        return (node.data for node in tree.inorder(self._root))

    def __len__(self) -> int:
        return self._size