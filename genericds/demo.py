"""Demonstrations of the containers, string buffer and regex compiler."""

from __future__ import annotations

import argparse
import os
import random
from typing import Callable, Iterable, Sequence

from genericds.array import DynamicArray
from genericds.binary_heap import BinaryHeap
from genericds.dynamic_string import DynamicString
from genericds.hashmap import HashMap
from genericds.hashset import HashSet
from genericds.regex import Regex
from genericds.ring_queue import RingQueue
from genericds.stack import Stack

DEFAULT_PATTERN = "gray|grey"
_PUSHED = (10, 7, 41, 23, 153)
_SET_VALUES = (1, 2, -3, 6, 123, 56, 912, 92, -64, -1633)


def _listing(values: Iterable[object]) -> str:
    return "".join(f"{v}, " for v in values)


def _heap_rows(values: Iterable[int], closer: str) -> str:
    """Lay out heap values one tree level per row."""
    items = list(values)
    rows = []
    start, width = 0, 1
    while start < len(items):
        row = items[start : start + width]
        text = "[ " + _listing(row)
        text += closer + "\n" if len(row) == width else "]"
        rows.append(text)
        start += width
        width <<= 1
    return "".join(rows) + "\n"


def demo_arrays() -> str:
    """Fill an array with 1..10, then filter the odd values and square them."""
    arr = DynamicArray(range(1, 11))
    odd = arr.filter(lambda x: x % 2)
    squares = arr.map(lambda x: x * x)
    return ">>> Testing Arrays <<<\n" + "".join(
        f"[ {_listing(a)}]\n" for a in (arr, odd, squares)
    )


def demo_stacks() -> str:
    """Push five values and pop them all back."""
    stack: Stack[int] = Stack()
    for value in _PUSHED:
        stack.push(value)
    popped = [stack.pop() for _ in range(len(_PUSHED) - 1)]
    last = stack.pop()
    return f">>> Testing Stacks <<<\n[ {_listing(popped)}{last} ]\n"


def demo_queues() -> str:
    """Push five values through a queue and pop them all back."""
    queue: RingQueue[int] = RingQueue()
    for value in _PUSHED:
        queue.push(value)
    popped = [queue.pop() for _ in range(len(_PUSHED) - 1)]
    last = queue.pop()
    return f">>> Testing Queues <<<\n[ {_listing(popped)}{last} ]\n"


def demo_binary_heap(seed: int | None = 0) -> str:
    """Insert 30 random values, show the tree, extract ten and show it again."""
    rng = random.Random(seed)
    heap = BinaryHeap()
    for _ in range(30):
        heap.insert(rng.randrange(50))
    before = _heap_rows(heap, "]")
    extracted = [heap.extract() for _ in range(10)]
    after = _heap_rows(heap, " ]")
    return (
        ">>> Testing Binary Heaps <<<\n"
        + before
        + _listing(extracted)
        + "\n"
        + after
    )


def _set_line(s: HashSet[int]) -> str:
    return f"{s.capacity}, {len(s)} -> {{ {_listing(s)}}}\n"


def demo_hashset(seed: int | None = 0) -> str:
    """Fill a set with random values, then build one from fixed values."""
    rng = random.Random(seed)
    first: HashSet[int] = HashSet()
    for _ in range(100):
        first.add(rng.randrange(50))
    text = ">> Test Hashset <<<\n" + _set_line(first)
    for value in (10, 8, 20, 30, 40):
        first.remove(value)
    second: HashSet[int] = HashSet(items=_SET_VALUES)
    return text + _set_line(second)


def demo_hashmap() -> str:
    """Store two pairs and look up three keys."""
    hm: HashMap[int, int] = HashMap()
    hm.add(2, 3)
    hm.add(5, 8)
    pairs = "".join(f"({k}: {v}), " for k, v in hm.items())
    lookups = "".join(f"{hm.get(key, 'None')}\n" for key in (2, 8, 5))
    return f">>> Test Hashmap <<<\n{{ {pairs}}}\n" + lookups


def demo_string(path: str | os.PathLike[str] | None = None) -> str:
    """Edit a string buffer, optionally load a file, and split a sentence."""
    lines = [">>> Test Strings <<<", "Start"]
    s = DynamicString()
    s.append_text("Hello World! How are you doing today?")
    lines.append(f'1: "{s}"')
    s.remove_char(" ")
    lines.append(f'2: "{s}"')
    piece = s.slice(5, 11)
    if piece is not None:
        s.append_text(piece)
    lines.append(f'3: "{s}"')
    s.reserve(20)
    lines.append(f'4: "{s}"')

    scratch = DynamicString()
    if path is not None:
        scratch.append_file(path)

    sentence = DynamicString("Hello world are you doing okay?")
    for field in sentence.split(" "):
        scratch = DynamicString(field)
        lines.append(str(scratch))
    return "\n".join(lines) + "\n"


def demo_regex(pattern: str = DEFAULT_PATTERN) -> str:
    """Compile ``pattern`` and describe the resulting DFA."""
    return Regex(pattern).dfa.describe()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="genericds", description="Run demonstrations of the data structures."
    )
    parser.add_argument(
        "demos",
        nargs="*",
        metavar="DEMO",
        help="arrays, stacks, queues, heap, hashset, hashmap, string, regex (default: regex)",
    )
    parser.add_argument("--seed", type=int, default=0, help="seed for random demos")
    parser.add_argument("--path", default=None, help="file loaded by the string demo")
    parser.add_argument("--pattern", default=DEFAULT_PATTERN, help="pattern for the regex demo")
    args = parser.parse_args(argv)

    demos: dict[str, Callable[[], str]] = {
        "arrays": demo_arrays,
        "stacks": demo_stacks,
        "queues": demo_queues,
        "heap": lambda: demo_binary_heap(args.seed),
        "hashset": lambda: demo_hashset(args.seed),
        "hashmap": demo_hashmap,
        "string": lambda: demo_string(args.path),
        "regex": lambda: demo_regex(args.pattern),
    }
    chosen = args.demos or ["regex"]
    unknown = [name for name in chosen if name not in demos]
    if unknown:
        parser.error(f"unknown demo: {', '.join(unknown)}")
    for name in chosen:
        print(demos[name](), end="")
    return 0