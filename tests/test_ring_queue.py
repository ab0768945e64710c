import pytest
from hypothesis import given
from hypothesis import strategies as st

from genericds.ring_queue import RingQueue


def test_pop_order_is_fifo():
    q = RingQueue()
    for v in (10, 7, 41, 23, 153):
        q.push(v)
    assert [q.pop() for _ in range(5)] == [10, 7, 41, 23, 153]


def test_head_and_peek():
    q = RingQueue()
    q.push(1)
    q.push(2)
    assert q.head() == 2
    assert q.peek() == 1
    assert len(q) == 2


@pytest.mark.parametrize("method", ["pop", "peek", "head"])
def test_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(RingQueue(), method)()


def test_clear():
    q = RingQueue()
    q.push(1)
    q.clear()
    assert len(q) == 0


def test_many_items_beyond_base_size():
    q = RingQueue()
    for v in range(300):
        q.push(v)
    assert [q.pop() for _ in range(300)] == list(range(300))


@given(st.lists(st.integers()))
def test_round_trip(values):
    q = RingQueue()
    for v in values:
        q.push(v)
    assert [q.pop() for _ in values] == values
    assert len(q) == 0