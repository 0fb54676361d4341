"""A bottom-up segment tree for range sums."""

from __future__ import annotations

import sys
from collections.abc import Iterable


class SegmentTree:
    """Sums over half-open ranges ``[left, right)`` of a fixed-length array."""

    def __init__(self, values: Iterable[int]) -> None:
        leaves = list(values)
        self._n = len(leaves)
        self._tree = [0] * self._n + leaves
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def __len__(self) -> int:
        return self._n

    def update(self, i: int, value: int) -> None:
        """Set position ``i`` to ``value``."""
        if not 0 <= i < self._n:
            raise IndexError(f"position {i} out of range")
        i += self._n
        self._tree[i] = value
        while i > 1:
            i //= 2
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def query(self, left: int, right: int) -> int:
        """Sum of positions ``left`` up to but not including ``right``."""
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) out of bounds")
        total = 0
        left += self._n
        right += self._n
        while left < right:
            if left & 1:
                total += self._tree[left]
                left += 1
            if right & 1:
                right -= 1
                total += self._tree[right]
            left //= 2
            right //= 2
        return total


def main(argv: list[str] | None = None) -> int:
    """Read a size and that many numbers, then print the built tree array."""
    tokens = sys.stdin.read().split()
    print("Size of arr: ", end="")
    try:
        size = int(tokens[0])
        values = [int(token) for token in tokens[1 : 1 + size]]
    except (IndexError, ValueError):
        print("\nexpected a size followed by that many integers", file=sys.stderr)
        return 1
    if len(values) != size:
        print(f"\nexpected {size} integers", file=sys.stderr)
        return 1
    print("arr: ", end="")
    tree = SegmentTree(values)
    print("".join(f"{value} " for value in tree._tree))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())