"""A bounded binary heap kept in a one-based array, and heapsort."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any

HEAP_SIZE = 100
ROOT = 1


class HeapFullError(Exception):
    """The heap is at capacity."""


def parent(i: int) -> int:
    """Index of the parent of one-based position ``i``."""
    return i // 2


def left(i: int) -> int:
    """Index of the left child of one-based position ``i``."""
    return 2 * i


def right(i: int) -> int:
    """Index of the right child of one-based position ``i``."""
    return 2 * i + 1


def _sift_up(items: list, i: int, before: Callable[[Any, Any], bool]) -> None:
    while i != ROOT and not before(items[parent(i)], items[i]):
        items[i], items[parent(i)] = items[parent(i)], items[i]
        i = parent(i)


def _sift_down(
    items: list, i: int, size: int, before: Callable[[Any, Any], bool]
) -> None:
    while True:
        best = i
        child = left(i)
        if child <= size and not before(items[best], items[child]):
            best = child
        child = right(i)
        if child <= size and not before(items[best], items[child]):
            best = child
        if best == i:
            return
        items[i], items[best] = items[best], items[i]
        i = best


class Heap:
    """A binary heap; ``before(a, b)`` is true when ``a`` may sit above ``b``.

    The default ordering makes a min-heap. ``capacity`` None means unbounded.
    """

    def __init__(
        self,
        capacity: int | None = HEAP_SIZE,
        before: Callable[[Any, Any], bool] = operator.le,
    ) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._before = before
        self._items: list[Any] = [None]

    def __repr__(self) -> str:
        return f"Heap({self.values()!r})"

    def push(self, value: Any) -> None:
        """Add ``value``; HeapFullError if the heap is at capacity."""
        if self._capacity is not None and len(self) >= self._capacity:
            raise HeapFullError("heap reached capacity, cannot add to heap")
        self._items.append(value)
        _sift_up(self._items, len(self), self._before)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not len(self):
            raise IndexError("heap empty, cannot extract")
        top = self._items[ROOT]
        last = self._items.pop()
        if len(self):
            self._items[ROOT] = last
            _sift_down(self._items, ROOT, len(self), self._before)
        return top

    def peek(self) -> Any:
        """The top value, left in place."""
        if not len(self):
            raise IndexError("heap empty")
        return self._items[ROOT]

    def __len__(self) -> int:
        return len(self._items) - 1

    def values(self) -> list[Any]:
        """The heap's values in array order, root first."""
        return self._items[ROOT:]


def heapsort(values: Iterable[Any]) -> list[Any]:
    """A new list of ``values`` in ascending order."""
    items = [None, *values]
    size = len(items) - 1
    for i in range(size // 2, ROOT - 1, -1):
        _sift_down(items, i, size, operator.ge)
    for end in range(size, ROOT, -1):
        items[ROOT], items[end] = items[end], items[ROOT]
        _sift_down(items, ROOT, end - 1, operator.ge)
    return items[ROOT:]