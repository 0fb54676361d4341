import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cupds.mst import Edge, kruskal, main, prim


def _adjacency(n, edges):
    adjacency = [[] for _ in range(n)]
    for edge in edges:
        adjacency[edge.u].append((edge.v, edge.w))
        adjacency[edge.v].append((edge.u, edge.w))
    return adjacency


@st.composite
def connected_graphs(draw):
    n = draw(st.integers(1, 8))
    path = [Edge(i, i + 1, draw(st.integers(0, 50))) for i in range(n - 1)]
    extra = draw(
        st.lists(
            st.tuples(st.integers(0, n - 1), st.integers(0, n - 1), st.integers(0, 50)),
            max_size=15,
        )
    )
    return n, path, path + [Edge(*e) for e in extra]


@given(connected_graphs())
def test_kruskal_and_prim_agree(graph):
    n, _, edges = graph
    assert kruskal(edges, n) == prim(_adjacency(n, edges))


@given(connected_graphs())
def test_cost_bounded_by_any_spanning_tree(graph):
    n, path, edges = graph
    assert kruskal(edges, n) <= sum(edge.w for edge in path)


@given(connected_graphs(), st.randoms())
def test_edge_order_does_not_matter(graph, rnd):
    n, _, edges = graph
    shuffled = list(edges)
    rnd.shuffle(shuffled)
    assert kruskal(shuffled, n) == kruskal(edges, n)


def test_tree_costs_its_total_weight():
    edges = [Edge(0, 1, 4), Edge(1, 2, 7), Edge(1, 3, 2)]
    assert kruskal(edges) == 4 + 7 + 2
    assert prim(_adjacency(4, edges)) == 4 + 7 + 2


def test_triangle_drops_heaviest_edge():
    edges = [(0, 1, 1), (1, 2, 2), (0, 2, 3)]
    assert kruskal(edges) == 3


def test_empty_graphs():
    assert kruskal([]) == 0
    assert prim([]) == 0
    assert prim([[]]) == 0


def test_self_loops_are_ignored():
    assert kruskal([Edge(0, 0, 5), Edge(0, 1, 2)]) == 2


def test_vertex_out_of_range():
    with pytest.raises(ValueError):
        kruskal([Edge(0, 5, 1)], num_vertices=3)
    with pytest.raises(ValueError):
        kruskal([Edge(-1, 0, 1)])


def test_main_prints_cost(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n0 1 1\n1 2 2\n0 2 3\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "MST cost: 3\n"


def test_main_rejects_short_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0 1 1\n"))
    assert main([]) == 1
    assert capsys.readouterr().err