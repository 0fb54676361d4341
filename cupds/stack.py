"""A stack kept on a circular doubly linked list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from cupds.dlist import ListHead


class Stack:
    """Last in, first out; the top sits just before the list head."""

    def __init__(self) -> None:
        self._base = ListHead()
        self._size = 0

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"

    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""
        self._base.add_tail(ListHead(data))
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._base.empty():
            raise IndexError("pop from an empty stack")
        top = self._base.prev
        top.delete()
        self._size -= 1
        return top.data

    def peek(self) -> Any:
        """The top item, left in place."""
        if self._base.empty():
            raise IndexError("peek at an empty stack")
        return self._base.last()

    def empty(self) -> bool:
        """Whether the stack holds nothing."""
        return self._base.empty()

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Items from the top down."""
        return (entry.data for entry in reversed(self._base))