"""A binary search tree ordered by a caller-supplied comparison function."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterator
from typing import Any

from cupds import tree
from cupds.lexical import lexicographical_compare
from cupds.tree import TreeNode

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _natural(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _atoi(text: Any) -> int:
    match = _LEADING_INT.match(str(text))
    return int(match.group(1)) if match else 0


def compare_words(a: str, b: str) -> int:
    """Negative, zero or positive as ``a`` sorts before, with or after ``b``."""
    return lexicographical_compare(a, b)


def compare_numeric(a: Any, b: Any) -> int:
    """Compare the integers that ``a`` and ``b`` start with; no number counts as 0."""
    return _atoi(a) - _atoi(b)


class Bst:
    """An unbalanced search tree; values comparing equal go to the left."""

    def __init__(self, compare: Callable[[Any, Any], int] | None = None) -> None:
        self._compare = _natural if compare is None else compare
        self._root: TreeNode | None = None
        self._size = 0

    def __repr__(self) -> str:
        return f"Bst({list(self)!r})"

    def insert(self, data: Any) -> None:
        """Add ``data`` at the leaf where the comparison leads it."""
        node = TreeNode(data)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if self._compare(data, current.data) <= 0:
                if current.left is None:
                    current.left = node
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    break
                current = current.right
        node.parent = current

    def preorder(self) -> Iterator[Any]:
        """Values with each node before its subtrees."""
        return (node.data for node in tree.preorder(self._root))

    def inorder(self) -> Iterator[Any]:
        """Values in the tree's sorted order."""
        return (node.data for node in tree.inorder(self._root))

    def postorder(self) -> Iterator[Any]:
        """Values with both subtrees before each node."""
        return (node.data for node in tree.postorder(self._root))

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __len__(self) -> int:
        return self._size


def main(argv: list[str] | None = None) -> int:
    """Read values from standard input and print them in sorted order.

    With a count, that many tokens are read and ordered as numbers;
    without one, words are read until ``exit`` and ordered as strings.
    """
    parser = argparse.ArgumentParser(description="Sort input through a search tree.")
    parser.add_argument("count", nargs="?", type=int, help="number of elements")
    args = parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if args.count is not None:
        if args.count < 0:
            print("count must not be negative", file=sys.stderr)
            return 1
        bst = Bst(compare_numeric)
        for token in tokens[: args.count]:
            bst.insert(token)
    else:
        bst = Bst(compare_words)
        for token in tokens:
            if token == "exit":
                break
            bst.insert(token)
    print(" ".join(str(value) for value in bst.inorder()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())