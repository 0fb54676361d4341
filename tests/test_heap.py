import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cupds.heap import Heap, HeapFullError, heapsort, left, parent, right


def is_heap(values, before):
    items = [None, *values]
    size = len(values)
    return all(
        before(items[i], items[child])
        for i in range(1, size + 1)
        for child in (left(i), right(i))
        if child <= size
    )


@given(st.integers(1, 10_000))
def test_index_helpers(i):
    assert parent(left(i)) == i
    assert parent(right(i)) == i
    assert right(i) == left(i) + 1


@given(st.lists(st.integers(-1000, 1000), max_size=100))
def test_min_heap_pops_in_order(values):
    heap = Heap(capacity=None)
    for value in values:
        heap.push(value)
        assert heap.peek() == min(heap.values())
        assert is_heap(heap.values(), operator.le)
    assert len(heap) == len(values)
    assert [heap.pop() for _ in values] == sorted(values)


@given(st.lists(st.integers(), max_size=50))
def test_max_heap_pops_descending(values):
    heap = Heap(capacity=None, before=operator.ge)
    for value in values:
        heap.push(value)
    assert is_heap(heap.values(), operator.ge)
    assert [heap.pop() for _ in values] == sorted(values, reverse=True)


def test_capacity_is_enforced():
    heap = Heap(capacity=2)
    heap.push(1)
    heap.push(2)
    with pytest.raises(HeapFullError):
        heap.push(3)
    assert len(heap) == 2


def test_pop_and_peek_empty():
    heap = Heap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_negative_capacity():
    with pytest.raises(ValueError):
        Heap(capacity=-1)


@given(st.lists(st.integers(), max_size=200))
def test_heapsort_matches_sorted(values):
    original = list(values)
    assert heapsort(values) == sorted(values)
    assert values == original