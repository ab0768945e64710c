import pytest
from hypothesis import given
from hypothesis import strategies as st

from genericds.stack import Stack


def test_pop_order_is_lifo():
    s = Stack()
    for v in (10, 7, 41, 23, 153):
        s.push(v)
    assert [s.pop() for _ in range(5)] == [153, 23, 41, 7, 10]
    assert len(s) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_peek_does_not_remove():
    s = Stack([1, 2])
    assert s.peek() == 2
    assert len(s) == 2


def test_extend_last_on_top():
    s = Stack()
    s.extend([1, 2, 3])
    assert s.pop() == 3


def test_reversed_returns_new_stack():
    s = Stack([1, 2, 3])
    r = s.reversed()
    assert [r.pop() for _ in range(3)] == [1, 2, 3]
    assert len(s) == 3


def test_clear():
    s = Stack([1, 2, 3])
    s.clear()
    assert len(s) == 0


@given(st.lists(st.integers()))
def test_push_pop_round_trip(values):
    s = Stack()
    s.extend(values)
    popped = [s.pop() for _ in range(len(values))]
    assert popped[::-1] == values