"""An integer binary search tree that chains equal values together."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

from cupds import tree

LIMIT = 10


class BstNode:
    """A node of a binary search tree; equal values hang off ``next``."""

    def __init__(self, data: Any) -> None:
        self.data = data
        self.left: BstNode | None = None
        self.right: BstNode | None = None
        self.next: BstNode | None = None

    def __repr__(self) -> str:
        return f"BstNode({self.data!r})"

    def insert(self, data: Any) -> BstNode:
        """Insert ``data`` below this node and return the new node."""
        elem = BstNode(data)
        node = self
        while True:
            if data < node.data:
                if node.left is None:
                    node.left = elem
                    return elem
                node = node.left
            elif data > node.data:
                if node.right is None:
                    node.right = elem
                    return elem
                node = node.right
            else:
                while node.next is not None:
                    node = node.next
                node.next = elem
                return elem

    def find(self, data: Any) -> BstNode | None:
        """The first node holding ``data``, or None if there is none."""
        node: BstNode | None = self
        while node is not None:
            if data < node.data:
                node = node.left
            elif data > node.data:
                node = node.right
            else:
                return node
        return None

    def minimum(self) -> BstNode:
        """The node with the smallest value in this subtree."""
        node = self
        while node.left is not None:
            node = node.left
        return node

    def maximum(self) -> BstNode:
        """The node with the largest value in this subtree."""
        node = self
        while node.right is not None:
            node = node.right
        return node

    def duplicates(self) -> Iterator[BstNode]:
        """This node followed by every node chained to it with an equal value."""
        node: BstNode | None = self
        while node is not None:
            yield node
            node = node.next

    def preorder(self) -> Iterator[BstNode]:
        """Tree nodes in pre-order; chained duplicates are not visited."""
        return tree.preorder(self)

    def inorder(self) -> Iterator[BstNode]:
        """Tree nodes in ascending order; chained duplicates are not visited."""
        return tree.inorder(self)

    def postorder(self) -> Iterator[BstNode]:
        """Tree nodes in post-order; chained duplicates are not visited."""
        return tree.postorder(self)


def main(argv: list[str] | None = None) -> int:
    """Build a small tree, print it, then look up the numbers read from input."""
    root = BstNode(LIMIT // 2)
    for value in range(LIMIT):
        root.insert(value)
    out = sys.stdout
    out.write(
        "".join(f"{dup.data} " for node in root.inorder() for dup in node.duplicates())
    )
    for token in sys.stdin.read().split():
        try:
            wanted = int(token)
        except ValueError:
            break
        found = root.find(wanted)
        out.write(f"{found.data} " if found is not None else "not in tree!")
    out.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())