"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

LIMIT = 100


def linear_search(items: Sequence[Any], elem: Any) -> int:
    """Return the index of the first item equal to ``elem``, or -1 if absent."""
    return next((index for index, item in enumerate(items) if item == elem), -1)


def binary_search(items: Sequence[Any], elem: Any) -> int:
    """Return an index of ``elem`` in the ascending sequence ``items``, or -1."""
    low, high = 0, len(items)
    while low < high:
        mid = (low + high) // 2
        value = items[mid]
        if value == elem:
            return mid
        if value < elem:
            low = mid + 1
        else:
            high = mid
    return -1


def main(argv: list[str] | None = None) -> int:
    """Print the one-based positions found by linear search for arrays 1..n."""
    for size in range(LIMIT):
        items = list(range(1, size + 1))
        print("".join(f"{linear_search(items, value) + 1} " for value in items))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())