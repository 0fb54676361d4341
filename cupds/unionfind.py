"""Union-find disjoint sets with union by rank and path compression."""

from __future__ import annotations


class UnionFind:
    """Disjoint sets over the items ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size
        self._size = [1] * size
        self._num_sets = size

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def num_sets(self) -> int:
        """Number of disjoint sets."""
        return self._num_sets

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parent):
            raise IndexError(f"item {i} out of range")

    def find_set(self, i: int) -> int:
        """The representative of the set holding ``i``."""
        self._check(i)
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            following = self._parent[i]
            self._parent[i] = root
            i = following
        return root

    def in_same_set(self, i: int, j: int) -> bool:
        """Whether ``i`` and ``j`` share a set."""
        return self.find_set(i) == self.find_set(j)

    def union_set(self, i: int, j: int) -> None:
        """Merge the sets holding ``i`` and ``j``."""
        ri, rj = self.find_set(i), self.find_set(j)
        if ri == rj:
            return
        if self._rank[ri] < self._rank[rj]:
            ri, rj = rj, ri
        self._parent[rj] = ri
        self._size[ri] += self._size[rj]
        if self._rank[ri] == self._rank[rj]:
            self._rank[ri] += 1
        self._num_sets -= 1

    def set_size(self, i: int) -> int:
        """Number of items in the set holding ``i``."""
        return self._size[self.find_set(i)]