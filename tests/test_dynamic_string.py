import pytest
from hypothesis import given
from hypothesis import strategies as st

from genericds.dynamic_string import DynamicString
from genericds.hashfuncs import hash_murmur3_string

SOURCE_TEXT = "Hello World! How are you doing today?"


def test_unallocated_then_default_capacity():
    s = DynamicString()
    assert s.capacity == 0
    s.append_text("a")
    assert s.capacity == 256
    assert str(s) == "a"


def test_source_walkthrough():
    s = DynamicString()
    s.append_text(SOURCE_TEXT)
    assert str(s) == SOURCE_TEXT
    s.remove_char(" ")
    assert str(s) == "HelloWorld!Howareyoudoingtoday?"
    piece = s.slice(5, 11)
    assert piece == "World!Howar"
    before = str(s)
    s.append_text(piece)
    assert str(s) == before + piece
    s.reserve(20)
    assert len(s) == 19
    assert str(s) == before[:19]
    assert s.capacity == 20


def test_split_words():
    s = DynamicString("Hello world are you doing okay?")
    assert list(s.split(" ")) == ["Hello", "world", "are", "you", "doing", "okay?"]


def test_split_keeps_empty_fields():
    assert list(DynamicString("a  b ").split(" ")) == ["a", "", "b", ""]
    assert list(DynamicString().split(" ")) == [""]


@given(st.text(alphabet="ab,", max_size=40))
def test_split_join_round_trip(text):
    s = DynamicString(text)
    assert ",".join(s.split(",")) == text


def test_slice_out_of_range():
    s = DynamicString("abc")
    assert s.slice(4, 1) is None
    assert s.slice(0, -1) is None
    assert s.slice(3, 0) == ""


def test_append_chars_and_growth():
    s = DynamicString()
    for _ in range(600):
        s.append("x")
    assert len(s) == 600
    assert s.capacity > len(s)
    assert str(s) == "x" * 600


def test_append_rejects_non_char():
    s = DynamicString()
    with pytest.raises(ValueError):
        s.append("ab")
    with pytest.raises(ValueError):
        s.remove_char("")


def test_reserve_larger_keeps_text():
    s = DynamicString("hello")
    s.reserve(1000)
    assert str(s) == "hello"
    assert s.capacity == 1000


def test_copy_from_and_equality():
    a = DynamicString("some text")
    b = DynamicString("other")
    b.copy_from(a)
    assert a == b
    assert str(b) == "some text"
    assert b.capacity == a.capacity
    assert DynamicString("x") != DynamicString("y")


def test_append_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("line one\nline two\n", encoding="utf-8")
    s = DynamicString("> ")
    s.append_file(path)
    assert str(s) == "> line one\nline two\n"


def test_append_missing_file_raises(tmp_path):
    s = DynamicString()
    with pytest.raises(FileNotFoundError):
        s.append_file(tmp_path / "missing.txt")