"""Circular doubly linked lists whose head is a node of the same type."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


def _link(new: ListHead, prev: ListHead, nxt: ListHead) -> None:
    nxt.prev = new
    new.next = nxt
    new.prev = prev
    prev.next = new


def _unlink(prev: ListHead, nxt: ListHead) -> None:
    nxt.prev = prev
    prev.next = nxt


def _splice(source: ListHead, prev: ListHead, nxt: ListHead) -> None:
    first, last = source.next, source.prev
    first.prev = prev
    prev.next = first
    last.next = nxt
    nxt.prev = last


class ListHead:
    """A node of a circular doubly linked list.

    The same type serves both as the list head, a sentinel whose ``data`` is
    unused, and as an entry carrying ``data``. A fresh node is an empty list.
    """

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.next: ListHead = self
        self.prev: ListHead = self

    def __repr__(self) -> str:
        return f"ListHead({self.data!r})"

    def _init(self) -> None:
        self.next = self
        self.prev = self

    def _require_linked(self) -> None:
        if self.next is None or self.prev is None:
            raise ValueError("entry is not on a list")

    def add(self, entry: ListHead) -> None:
        """Insert ``entry`` right after this head (stack order)."""
        _link(entry, self, self.next)

    def add_tail(self, entry: ListHead) -> None:
        """Insert ``entry`` right before this head (queue order)."""
        _link(entry, self.prev, self)

    def delete(self) -> None:
        """Unlink this entry from its list and detach its links."""
        self._require_linked()
        _unlink(self.prev, self.next)
        self.next = None
        self.prev = None

    def delete_init(self) -> None:
        """Unlink this entry and make it an empty list of its own."""
        self._require_linked()
        _unlink(self.prev, self.next)
        self._init()

    def replace(self, new: ListHead) -> None:
        """Put ``new`` in this entry's place; this entry's links are left stale."""
        self._require_linked()
        new.next = self.next
        new.next.prev = new
        new.prev = self.prev
        new.prev.next = new

    def replace_init(self, new: ListHead) -> None:
        """Put ``new`` in this entry's place and reinitialise this entry."""
        self.replace(new)
        self._init()

    def swap(self, other: ListHead) -> None:
        """Exchange the positions of this entry and ``other``."""
        pos = other.prev
        other.delete()
        self.replace(other)
        if pos is self:
            pos = other
        pos.add(self)

    def move(self, head: ListHead) -> None:
        """Take this entry off its list and add it after ``head``."""
        self._require_linked()
        _unlink(self.prev, self.next)
        head.add(self)

    def move_tail(self, head: ListHead) -> None:
        """Take this entry off its list and add it before ``head``."""
        self._require_linked()
        _unlink(self.prev, self.next)
        head.add_tail(self)

    def bulk_move_tail(self, first: ListHead, last: ListHead) -> None:
        """Move the run ``first .. last`` of this list to its tail."""
        first.prev.next = last.next
        last.next.prev = first.prev
        self.prev.next = first
        first.prev = self.prev
        last.next = self
        self.prev = last

    def is_first(self, head: ListHead) -> bool:
        """Whether this entry is the first of the list at ``head``."""
        return self.prev is head

    def is_last(self, head: ListHead) -> bool:
        """Whether this entry is the last of the list at ``head``."""
        return self.next is head

    def empty(self) -> bool:
        """Whether this list has no entries."""
        return self.next is self

    def empty_careful(self) -> bool:
        """Whether this list is empty, checking both links."""
        nxt = self.next
        return nxt is self and nxt is self.prev

    def is_singular(self) -> bool:
        """Whether this list has exactly one entry."""
        return not self.empty() and self.next is self.prev

    def rotate_left(self) -> None:
        """Move the first entry to the tail."""
        if not self.empty():
            self.next.move_tail(self)

    def rotate_to_front(self, entry: ListHead) -> None:
        """Rotate this list so that ``entry`` becomes its first entry."""
        self.move_tail(entry)

    def cut_position(self, head: ListHead, entry: ListHead) -> None:
        """Move entries of ``head`` up to and including ``entry`` into this list.

        If ``entry`` is ``head`` itself this list is emptied and ``head`` is
        left alone. Whatever this list held before is discarded.
        """
        if head.empty():
            return
        if head.is_singular() and head.next is not entry and head is not entry:
            return
        if entry is head:
            self._init()
            return
        new_first = entry.next
        self.next = head.next
        self.next.prev = self
        self.prev = entry
        entry.next = self
        head.next = new_first
        new_first.prev = head

    def cut_before(self, head: ListHead, entry: ListHead) -> None:
        """Move entries of ``head`` before ``entry`` into this list.

        If ``entry`` is ``head`` itself every entry moves. Whatever this list
        held before is discarded.
        """
        if head.next is entry:
            self._init()
            return
        self.next = head.next
        self.next.prev = self
        self.prev = entry.prev
        self.prev.next = self
        head.next = entry
        entry.prev = head

    def splice(self, head: ListHead) -> None:
        """Join this list's entries in after ``head``; this head goes stale."""
        if not self.empty():
            _splice(self, head, head.next)

    def splice_tail(self, head: ListHead) -> None:
        """Join this list's entries in before ``head``; this head goes stale."""
        if not self.empty():
            _splice(self, head.prev, head)

    def splice_init(self, head: ListHead) -> None:
        """Join this list in after ``head`` and leave this list empty."""
        if not self.empty():
            _splice(self, head, head.next)
            self._init()

    def splice_tail_init(self, head: ListHead) -> None:
        """Join this list in before ``head`` and leave this list empty."""
        if not self.empty():
            _splice(self, head.prev, head)
            self._init()

    def first(self) -> Any:
        """Data of the first entry; IndexError on an empty list."""
        if self.empty():
            raise IndexError("list is empty")
        return self.next.data

    def last(self) -> Any:
        """Data of the last entry; IndexError on an empty list."""
        if self.empty():
            raise IndexError("list is empty")
        return self.prev.data

    def first_or_none(self) -> Any:
        """Data of the first entry, or None on an empty list."""
        return None if self.empty() else self.next.data

    def __iter__(self) -> Iterator[ListHead]:
        """Entries from first to last; the current entry may be removed."""
        pos = self.next
        while pos is not self:
            following = pos.next
            yield pos
            pos = following

    def __reversed__(self) -> Iterator[ListHead]:
        """Entries from last to first; the current entry may be removed."""
        pos = self.prev
        while pos is not self:
            preceding = pos.prev
            yield pos
            pos = preceding

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def values(self) -> list[Any]:
        """The entries' data, first to last."""
        return [entry.data for entry in self]