"""A growable array that tracks its own capacity."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

INITIAL_CAPACITY = 10


class Vector:
    """A dynamic array that doubles when full and halves when a quarter full."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._capacity = INITIAL_CAPACITY

    @property
    def capacity(self) -> int:
        """Number of items the vector can hold before growing."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def empty(self) -> bool:
        """Whether the vector holds no items."""
        return not self._items

    def resize(self, capacity: int) -> None:
        """Set the capacity; it may not drop below the current size or 1."""
        if capacity < 1 or capacity < len(self._items):
            raise ValueError(
                f"capacity {capacity} cannot hold {len(self._items)} items"
            )
        self._capacity = capacity

    def add(self, item: Any) -> None:
        """Append ``item``, doubling the capacity when full."""
        if len(self._items) == self._capacity:
            self.resize(self._capacity * 2)
        self._items.append(item)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")

    def set(self, index: int, item: Any) -> None:
        """Replace the item at ``index``."""
        self._check(index)
        self._items[index] = item

    def get(self, index: int) -> Any:
        """The item at ``index``."""
        self._check(index)
        return self._items[index]

    def remove(self, index: int) -> Any:
        """Remove and return the item at ``index``, shifting later items back.

        The capacity halves once the vector is a quarter full.
        """
        self._check(index)
        item = self._items.pop(index)
        size = len(self._items)
        if size > 0 and size == self._capacity // 4:
            self.resize(self._capacity // 2)
        return item


def _show(vector: Vector) -> None:
    for index, item in enumerate(vector):
        print(f"{index}:{item}")


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many lines, then exercise removal on them."""
    lines = iter(sys.stdin.read().splitlines())
    first = next(lines, "").strip()
    if not first:
        print("expected a count of lines", file=sys.stderr)
        return 1
    try:
        count = int(first)
    except ValueError:
        print(f"not a count: {first!r}", file=sys.stderr)
        return 1

    vector = Vector()
    for _, line in zip(range(count), lines):
        vector.add(line)
    _show(vector)

    if not vector.empty():
        vector.remove(len(vector) // 2)
    _show(vector)

    while not vector.empty():
        vector.remove(len(vector) - 1)

    print("end:")
    print("".join(str(item) for item in vector), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())