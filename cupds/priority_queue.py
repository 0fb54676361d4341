"""A priority queue that hands out the lowest priority value first."""

from __future__ import annotations

import heapq
import itertools
from typing import Any


class PriorityQueue:
    """Items leave in ascending priority; equal priorities leave in push order."""

    def __init__(self) -> None:
        self._heap: list[tuple[Any, int, Any]] = []
        self._counter = itertools.count()

    def push(self, data: Any, priority: Any) -> None:
        """Add ``data`` with the given ``priority``."""
        heapq.heappush(self._heap, (priority, next(self._counter), data))

    def pop(self) -> Any:
        """Remove and return the data with the lowest priority."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> Any:
        """The data with the lowest priority, left in place."""
        if not self._heap:
            raise IndexError("peek at an empty priority queue")
        return self._heap[0][2]

    def empty(self) -> bool:
        """Whether the queue holds nothing."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)


def main(argv: list[str] | None = None) -> int:
    """Push three items with falling priorities and print them as they leave."""
    queue = PriorityQueue()
    queue.push(1, 3)
    queue.push(2, 2)
    queue.push(3, 1)
    while not queue.empty():
        print(queue.pop())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())