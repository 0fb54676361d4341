"""Doubly linked lists with a single-pointer head, as used by hash buckets.

Each node keeps a reference to whatever holds the link pointing at it:
either the list head or the preceding node. That lets a node unlink
itself without knowing the head.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Union


class HListNode:
    """A node of a single-headed doubly linked list."""

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.next: HListNode | None = None
        self.pprev: Union[HListHead, HListNode, None] = None

    def __repr__(self) -> str:
        return f"HListNode({self.data!r})"

    def _init(self) -> None:
        self.next = None
        self.pprev = None

    def _unlink(self) -> None:
        following = self.next
        owner = self.pprev
        _store(owner, following)
        if following is not None:
            following.pprev = owner

    def unhashed(self) -> bool:
        """Whether the node is on no list."""
        return self.pprev is None

    def delete(self) -> None:
        """Unlink the node from its list and detach its links."""
        if self.unhashed():
            raise ValueError("node is not on a list")
        self._unlink()
        self._init()

    def delete_init(self) -> None:
        """Unlink the node if it is on a list, leaving it detached."""
        if not self.unhashed():
            self._unlink()
            self._init()

    def add_before(self, next_node: HListNode) -> None:
        """Insert this node just before ``next_node``, which must be on a list."""
        if next_node.unhashed():
            raise ValueError("node to insert before is not on a list")
        self.pprev = next_node.pprev
        self.next = next_node
        next_node.pprev = self
        _store(self.pprev, self)

    def add_behind(self, prev: HListNode) -> None:
        """Insert this node just after ``prev``."""
        self.next = prev.next
        prev.next = self
        self.pprev = prev
        if self.next is not None:
            self.next.pprev = self

    def add_fake(self) -> None:
        """Make the node look hashed so that ``delete`` works on it."""
        self.pprev = self

    def is_fake(self) -> bool:
        """Whether the node was made to look hashed with ``add_fake``."""
        return self.pprev is self

    def is_singular_node(self, head: HListHead) -> bool:
        """Whether this node is the only node of ``head``."""
        return self.next is None and self.pprev is head


class HListHead:
    """The head of a single-headed doubly linked list."""

    def __init__(self) -> None:
        self.first: HListNode | None = None

    def __repr__(self) -> str:
        return f"HListHead({self.values()!r})"

    def empty(self) -> bool:
        """Whether the list has no nodes."""
        return self.first is None

    def add_head(self, node: HListNode) -> None:
        """Insert ``node`` at the front of the list."""
        first = self.first
        node.next = first
        if first is not None:
            first.pprev = node
        self.first = node
        node.pprev = self

    def move_list(self, new: HListHead) -> None:
        """Move every node of this list to ``new``, leaving this list empty."""
        new.first = self.first
        if new.first is not None:
            new.first.pprev = new
        self.first = None

    def __iter__(self) -> Iterator[HListNode]:
        """Nodes from first to last; the current node may be removed."""
        pos = self.first
        while pos is not None:
            following = pos.next
            yield pos
            pos = following

    def values(self) -> list[Any]:
        """The nodes' data, first to last."""
        return [node.data for node in self]


def _store(owner: Union[HListHead, HListNode, None], node: HListNode | None) -> None:
    if isinstance(owner, HListHead):
        owner.first = node
    elif isinstance(owner, HListNode):
        owner.next = node
    else:
        raise ValueError("node is not on a list")