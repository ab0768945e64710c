import pytest
from hypothesis import given
from hypothesis import strategies as st

from genericds.hashset import HashSet


def test_add_and_contains():
    s = HashSet()
    assert s.add(5) is True
    assert s.add(5) is False
    assert 5 in s
    assert 6 not in s
    assert len(s) == 1


def test_initial_capacity_is_base_size():
    s = HashSet()
    s.add(1)
    assert s.capacity == 128


def test_empty_set_contains_nothing():
    s = HashSet()
    assert 0 not in s
    assert len(s) == 0
    assert list(s) == []


def test_multi_add_from_source_example():
    values = [1, 2, -3, 6, 123, 56, 912, 92, -64, -1633]
    s = HashSet(items=values)
    assert len(s) == len(values)
    assert sorted(s) == sorted(values)
    for v in values:
        assert v in s


def test_remove_from_source_example():
    s = HashSet(items=range(50))
    for v in (10, 8, 20, 30, 40):
        assert s.remove(v) is True
    assert s.remove(10) is False
    assert len(s) == 45
    assert sorted(s) == [v for v in range(50) if v not in (10, 8, 20, 30, 40)]


def test_growth_keeps_elements_and_load_factor():
    s = HashSet()
    for v in range(1000):
        s.add(v)
    assert len(s) == 1000
    assert s.capacity > 128
    assert len(s) * 1000 < s.capacity * 675 + 1000
    assert sorted(s) == list(range(1000))


def test_collisions_and_tombstones():
    s = HashSet(hash_func=lambda x: 0)
    s.update([1, 2, 3, 4])
    assert s.remove(2) is True
    assert 3 in s
    assert 4 in s
    assert 2 not in s
    assert s.add(5) is True
    assert sorted(s) == [1, 3, 4, 5]


def test_custom_equality():
    s = HashSet(hash_func=lambda x: len(x), eq=lambda a, b: a.lower() == b.lower())
    s.add("Hello")
    assert s.add("HELLO") is False
    assert "hello" in s
    assert list(s) == ["Hello"]


def test_clear():
    s = HashSet(items=[1, 2, 3])
    s.clear()
    assert len(s) == 0
    assert 1 not in s
    assert s.capacity == 0
    s.add(7)
    assert list(s) == [7]


@given(st.lists(st.tuples(st.booleans(), st.integers(-40, 40)), max_size=300))
def test_behaves_like_builtin_set(ops):
    s = HashSet(hash_func=lambda x: x % 7)
    ref = set()
    for is_add, v in ops:
        if is_add:
            assert s.add(v) == (v not in ref)
            ref.add(v)
        else:
            assert s.remove(v) == (v in ref)
            ref.discard(v)
    assert len(s) == len(ref)
    assert sorted(s) == sorted(ref)


@given(st.lists(st.integers(-(2**31), 2**31 - 1), max_size=200))
def test_iteration_yields_each_once(values):
    s = HashSet(items=values)
    out = list(s)
    assert len(out) == len(set(out)) == len(set(values))