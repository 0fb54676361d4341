import pytest
from hypothesis import given
from hypothesis import strategies as st

from cupds.unionfind import UnionFind


def test_initial_state():
    uf = UnionFind(5)
    assert len(uf) == 5
    assert uf.num_sets == 5
    assert all(uf.find_set(i) == i for i in range(5))
    assert all(uf.set_size(i) == 1 for i in range(5))


def test_union_merges_sets():
    uf = UnionFind(4)
    uf.union_set(0, 1)
    uf.union_set(2, 3)
    assert uf.in_same_set(0, 1)
    assert not uf.in_same_set(1, 2)
    assert uf.num_sets == 2
    uf.union_set(1, 3)
    assert uf.in_same_set(0, 2)
    assert uf.num_sets == 1
    assert uf.set_size(3) == len(uf)


def test_union_of_same_set_is_noop():
    uf = UnionFind(3)
    uf.union_set(0, 1)
    uf.union_set(1, 0)
    assert uf.num_sets == 2
    assert uf.set_size(0) == 2


@given(st.lists(st.tuples(st.integers(0, 19), st.integers(0, 19)), max_size=40))
def test_invariants_against_component_labels(pairs):
    uf = UnionFind(20)
    labels = list(range(20))
    for a, b in pairs:
        uf.union_set(a, b)
        old, new = labels[a], labels[b]
        labels = [new if label == old else label for label in labels]
    assert uf.num_sets == len(set(labels))
    for i in range(20):
        assert uf.set_size(i) == labels.count(labels[i])
        for j in range(20):
            assert uf.in_same_set(i, j) == (labels[i] == labels[j])


def test_out_of_range_and_negative_size():
    uf = UnionFind(2)
    with pytest.raises(IndexError):
        uf.find_set(2)
    with pytest.raises(IndexError):
        uf.union_set(-1, 0)
    with pytest.raises(ValueError):
        UnionFind(-1)