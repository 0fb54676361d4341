"""Minimum spanning tree cost by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import heapq
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter

from cupds.unionfind import UnionFind


@dataclass(frozen=True)
class Edge:
    """An undirected edge between vertices ``u`` and ``v`` with weight ``w``."""

    u: int
    v: int
    w: int


def kruskal(
    edges: Iterable[Edge | tuple[int, int, int]], num_vertices: int | None = None
) -> int:
    """Cost of a minimum spanning forest of the graph given by ``edges``.

    Vertices are numbered from 0; by default there are as many as the
    largest vertex named in ``edges`` implies.
    """
    edge_list = [e if isinstance(e, Edge) else Edge(*e) for e in edges]
    if num_vertices is None:
        num_vertices = max((max(e.u, e.v) for e in edge_list), default=-1) + 1
    for edge in edge_list:
        if not (0 <= edge.u < num_vertices and 0 <= edge.v < num_vertices):
            raise ValueError(f"edge {edge} names a vertex outside 0..{num_vertices - 1}")
    if num_vertices <= 1:
        return 0
    components = UnionFind(num_vertices)
    remaining = num_vertices
    cost = 0
    for edge in sorted(edge_list, key=attrgetter("w")):
        if not components.in_same_set(edge.u, edge.v):
            cost += edge.w
            components.union_set(edge.u, edge.v)
            remaining -= 1
            if remaining == 1:
                break
    return cost


def prim(adjacency: Sequence[Iterable[tuple[int, int]]]) -> int:
    """Cost of a minimum spanning tree of the component holding vertex 0.

    ``adjacency[v]`` lists ``(neighbour, weight)`` pairs for vertex ``v``.
    """
    if not adjacency:
        return 0
    taken = [False] * len(adjacency)
    frontier: list[tuple[int, int]] = []

    def take(vertex: int) -> None:
        taken[vertex] = True
        for neighbour, weight in adjacency[vertex]:
            if not taken[neighbour]:
                heapq.heappush(frontier, (weight, neighbour))

    take(0)
    cost = 0
    while frontier:
        weight, vertex = heapq.heappop(frontier)
        if not taken[vertex]:
            cost += weight
            take(vertex)
    return cost


def main(argv: list[str] | None = None) -> int:
    """Read an edge count and that many ``u v w`` lines; print the MST cost."""
    tokens = sys.stdin.read().split()
    try:
        count = int(tokens[0])
        numbers = [int(token) for token in tokens[1 : 1 + 3 * count]]
    except (IndexError, ValueError):
        print("expected an edge count followed by u v w triples", file=sys.stderr)
        return 1
    if count < 0 or len(numbers) != 3 * count:
        print(f"expected {count} edges", file=sys.stderr)
        return 1
    edges = [Edge(*numbers[i : i + 3]) for i in range(0, len(numbers), 3)]
    try:
        cost = kruskal(edges)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(f"MST cost: {cost}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())