import pytest
from hypothesis import given
from hypothesis import strategies as st

from cupds.fenwick import FenwickTree


def _build(values):
    tree = FenwickTree(len(values))
    for position, value in enumerate(values, start=1):
        tree.update(position, value)
    return tree


@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=50))
def test_prefix_sums_match(values):
    tree = _build(values)
    assert len(tree) == len(values)
    for k in range(len(values) + 1):
        assert tree.prefix_sum(k) == sum(values[:k])


@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=30), st.data())
def test_range_sums_match(values, data):
    tree = _build(values)
    i = data.draw(st.integers(1, len(values)))
    j = data.draw(st.integers(i, len(values)))
    assert tree.range_sum(i, j) == sum(values[i - 1 : j])


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=30), st.data())
def test_repeated_updates_accumulate(values, data):
    tree = _build(values)
    position = data.draw(st.integers(1, len(values)))
    delta = data.draw(st.integers(-100, 100))
    tree.update(position, delta)
    values[position - 1] += delta
    assert tree.prefix_sum(len(values)) == sum(values)
    assert tree.range_sum(position, position) == values[position - 1]


def test_range_starting_at_one():
    tree = _build([4, 5, 6])
    assert tree.range_sum(1, 3) == tree.prefix_sum(3)
    assert tree.range_sum(1, 1) == 4


def test_errors():
    tree = FenwickTree(3)
    with pytest.raises(IndexError):
        tree.update(0, 1)
    with pytest.raises(IndexError):
        tree.update(4, 1)
    with pytest.raises(IndexError):
        tree.prefix_sum(4)
    with pytest.raises(ValueError):
        tree.range_sum(3, 2)
    with pytest.raises(ValueError):
        FenwickTree(-1)