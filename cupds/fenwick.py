"""Fenwick (binary indexed) tree for prefix and range sums."""

from __future__ import annotations


def _lsbit(i: int) -> int:
    return i & -i


class FenwickTree:
    """Range sums over positions ``1 .. size``, all starting at zero."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return len(self._tree) - 1

    def update(self, i: int, value: int) -> None:
        """Add ``value`` to position ``i``."""
        if not 1 <= i <= len(self):
            raise IndexError(f"position {i} out of range")
        while i < len(self._tree):
            self._tree[i] += value
            i += _lsbit(i)

    def prefix_sum(self, i: int) -> int:
        """Sum of positions ``1 .. i``; zero when ``i`` is 0."""
        if not 0 <= i <= len(self):
            raise IndexError(f"position {i} out of range")
        total = 0
        while i:
            total += self._tree[i]
            i -= _lsbit(i)
        return total

    def range_sum(self, i: int, j: int) -> int:
        """Sum of positions ``i .. j`` inclusive."""
        if not 1 <= i <= len(self):
            raise IndexError(f"position {i} out of range")
        if j < i:
            raise ValueError("range end comes before its start")
        return self.prefix_sum(j) - self.prefix_sum(i - 1)