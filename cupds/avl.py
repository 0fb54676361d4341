"""A self-balancing AVL tree of comparable values."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class _Node:
    __slots__ = ("data", "left", "right", "height")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.height = 0


def _height(node: _Node | None) -> int:
    return -1 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: _Node) -> int:
    return _height(node.right) - _height(node.left)


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance < -1:
        if _balance(node.left) > 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance > 1:
        if _balance(node.right) < 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: _Node | None, data: Any) -> _Node:
    if node is None:
        return _Node(data)
    if data <= node.data:
        node.left = _insert(node.left, data)
    else:
        node.right = _insert(node.right, data)
    return _rebalance(node)


def _checked_height(node: _Node | None) -> int | None:
    if node is None:
        return -1
    left = _checked_height(node.left)
    right = _checked_height(node.right)
    if left is None or right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


class AvlTree:
    """An AVL tree; equal values are kept and sort to the left."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, data: Any) -> None:
        """Add ``data`` and rebalance along the insertion path."""
        self._root = _insert(self._root, data)
        self._size += 1

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return _height(self._root)

    def is_balanced(self) -> bool:
        """Whether every node's subtree heights differ by at most one."""
        return _checked_height(self._root) is not None

    def inorder(self) -> Iterator[Any]:
        """Values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def postorder(self) -> Iterator[Any]:
        """Values with both subtrees before each node."""
        reverse: list[Any] = []
        stack = [] if self._root is None else [self._root]
        while stack:
            node = stack.pop()
            reverse.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reverse)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, data: Any) -> bool:
        node = self._root
        while node is not None:
            if data == node.data:
                return True
            node = node.left if data < node.data else node.right
        return False


def main(argv: list[str] | None = None) -> int:
    """Insert a fixed set of values and print them in order."""
    avl = AvlTree()
    for value in (41, 20, 65, 11, 29, 26, 50):
        avl.insert(value)
    print("".join(f"{value} " for value in avl.inorder()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())