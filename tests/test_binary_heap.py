import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from genericds.binary_heap import BinaryHeap


def _is_heap(values):
    return all(
        values[(i - 1) // 2] <= v for i, v in enumerate(values) if i > 0
    )


def test_extract_empty_raises():
    with pytest.raises(IndexError):
        BinaryHeap().extract()


def test_single_element():
    h = BinaryHeap()
    h.insert(5)
    assert list(h) == [5]
    assert h.extract() == 5
    assert len(h) == 0


def test_insert_layout_keeps_minimum_at_root():
    h = BinaryHeap()
    for v in (3, 1, 2):
        h.insert(v)
    assert list(h)[0] == 1
    assert sorted(h) == [1, 2, 3]


def test_random_inserts_then_partial_extract():
    rng = random.Random(0)
    values = [rng.randrange(50) for _ in range(30)]
    h = BinaryHeap()
    for v in values:
        h.insert(v)
    assert _is_heap(list(h))
    first = [h.extract() for _ in range(10)]
    assert first == sorted(values)[:10]
    assert len(h) == 20
    assert _is_heap(list(h))


@given(st.lists(st.integers(min_value=-(2**31), max_value=2**31 - 1)))
def test_heap_sort(values):
    h = BinaryHeap()
    for v in values:
        h.insert(v)
        assert _is_heap(list(h))
    assert [h.extract() for _ in values] == sorted(values)


@given(st.lists(st.integers(), min_size=1))
def test_heap_property_after_each_extract(values):
    h = BinaryHeap()
    for v in values:
        h.insert(v)
    while len(h):
        h.extract()
        assert _is_heap(list(h))
    assert list(h) == []