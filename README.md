# genericds

Plain-Python data structures, 64-bit hash functions, a growable string buffer and a small
regular expression compiler that goes from an epsilon-NFA to an NFA and then to a DFA. The package
has no runtime dependencies.

## Installation

```
pip install .
```

To install the test tools as well (pytest, hypothesis), run `pip install .[test]`.

## Modules

### `genericds.array`: `DynamicArray`

This is an ordered, growable sequence. It has `append`, `extend`, `clear`, `len()`, iteration and
indexing.

- `remove(pos)` deletes the element at `pos`.
- `insert(value, pos)` inserts `value` before the existing element at `pos`.
- Both raise `IndexError` when `pos` is not the index of an existing element. This means you cannot
  use `insert` to add at the end.
- `filter(predicate)` and `map(func)` return new `DynamicArray`s.
- `find(value)` and `find_by(value, cmp)` return the index of the first match, or `-1`.

### `genericds.stack`: `Stack`

This is a LIFO stack. It has `push`, `extend`, `pop`, `peek`, `clear` and `len()`.
`reversed()` returns a new stack with the elements in the opposite order. `pop` and `peek` raise
`IndexError` when the stack is empty.

### `genericds.ring_queue`: `RingQueue`

This is a FIFO queue.

- `push(value)` adds a value.
- `pop()` removes and returns the oldest value.
- `peek()` returns the oldest value without removing it.
- `head()` returns the most recently pushed value.

All three reading methods raise `IndexError` when the queue is empty.

### `genericds.binary_heap`: `BinaryHeap`

This is an integer min-heap. It has `insert(value)` and `extract()`. `extract()` removes and returns
the smallest value, and raises `IndexError` when the heap is empty. Iterating over the heap yields
the underlying array order, not sorted order.

### `genericds.hashset` and `genericds.hashmap`: `HashSet`, `HashMap`

These are open-addressing tables with linear probing and tombstones. They start with 128 slots and
double whenever the table would become more than 67.5% full. The `capacity` property gives the
current slot count.

Both constructors take an optional `hash_func` and an optional `eq`:

- `hash_func` defaults to `hashfuncs.hash_uint64`, so the defaults suit integers.
- `eq` defaults to `==`.

`HashSet(hash_func=None, eq=None, items=None)`:

- `add(value)` returns `True` if the value was new.
- `update(values)` adds several values.
- `remove(value)` returns `True` if the value was present.
- It also has `clear()`, `in`, `len()`, and iteration in slot order.

`HashMap(hash_func=None, eq=None)`:

- `add(key, value)` inserts a key or overwrites its value.
- `update(pairs)` inserts several `(key, value)` pairs.
- `remove(key)` returns `True` if the key was present.
- `get(key, default=None)` looks up a key.
- `map[key]` raises `KeyError` for a missing key.
- `items()` yields the pairs.
- It also has `clear()`, `in`, `len()`, and iteration over keys in slot order.

### `genericds.dynamic_string`: `DynamicString`

This is a text buffer with an explicit capacity. The capacity starts at 256 and doubles as the text
grows.

- `append(c)` adds one character.
- `append_text(text)` adds text.
- `append_file(path)` adds the whole contents of a UTF-8 file.
- `copy_from(other)` replaces the contents with those of another `DynamicString`.
- `remove_char(c)` removes every occurrence of a character.
- `reserve(size)` sets the capacity. If the text no longer fits, it is cut to `size - 1`
  characters.
- `slice(start, length)` returns a substring, or `None` when `start` is out of range or `length`
  is negative.
- `split(sep)` yields the fields between occurrences of a single character. Empty fields are
  included.

Strings compare by content. `hash()` of a `DynamicString` uses `hash_murmur3_string`.

### `genericds.hashfuncs`

Each of these returns an unsigned 64-bit integer:

- `hash_murmur3_uint64(n)`: the MurmurHash3 finaliser. A zero input is replaced by a fixed constant
  before hashing.
- `hash_uint64(n)`: the default integer hash, which is `hash_murmur3_uint64`.
- `hash_wang_uint64(n)`: Thomas Wang's 64-bit integer mix.
- `hash_string_seeded(data, seed)`: MurmurHash64A of the input. It accepts `bytes` or `str`;
  `str` is encoded as UTF-8.
- `hash_murmur3_string(data)`: `hash_string_seeded` with the default seed `HASH_STRING_SEED`.
- `hash_float(x)`: a hash of `x` as a 32-bit IEEE float.
- `hash_double(x)`: a hash of `x` as a 64-bit IEEE float.

### `genericds.regex`

`Regex(pattern)` compiles a pattern. The attribute `regex.dfa` holds the compiled automaton.
`matches(text)` reports whether the *whole* of `text` is accepted, and returns `False` for any
character that is not in the pattern.

The pattern syntax is:

- A literal character matches itself.
- `|` is alternation.
- `*` and `+` repeat the preceding piece.
- `(` and `)` close the run of pieces written so far into a group. The groups are then joined in
  sequence.

The compiler raises `ValueError` in these cases:

- `*` or `+` has nothing before it.
- A parenthesis has no pieces before it. For example, a pattern that starts with `(` fails.

You can also use the automata directly:

- `epsilon_symbol(c)` returns an `EpsilonNFA` that accepts exactly `c`.
- `EpsilonNFA` has `append`, `union`, `star`, `plus`, `reachable_from` and `to_nfa`.
- `compress(automata)` joins a sequence of `EpsilonNFA`s in order.
- `NFA.to_dfa()` performs the subset construction.
- `DFA.run(text)` runs the automaton. It raises `ValueError` when there is no transition for a
  character.
- Each automaton has `describe()`, which returns a text listing of its states, alphabet,
  transitions, initial state and final states.

## Usage

```python
from genericds.hashfuncs import hash_uint64
from genericds.hashset import HashSet
from genericds.binary_heap import BinaryHeap
from genericds.regex import Regex

s = HashSet(hash_uint64, items=[1, 2, 3, 2])
assert len(s) == 3 and 2 in s

heap = BinaryHeap()
for v in (5, 1, 4):
    heap.insert(v)
assert heap.extract() == 1

reg = Regex("gray|grey")
print(reg.matches("grey"))
print(reg.dfa.describe())
```

## Demo command

Installing the package adds a command that prints the output of the demonstration routines in
`genericds.demo`:

```
genericds-demo [DEMO ...] [--seed N] [--path FILE] [--pattern PATTERN]
```

The DEMO names are `arrays`, `stacks`, `queues`, `heap`, `hashset`, `hashmap`, `string` and `regex`.
If you give no name, the command runs `regex`, which prints the DFA compiled from `--pattern`
(default `gray|grey`).

The options are:

- `--seed` seeds the random values used by the `heap` and `hashset` demos.
- `--path` names a file that the `string` demo loads.

## What it does not do

The regex engine only answers whether a whole string matches. It does not search inside a string,
return match positions or capture groups. It has no character classes, anchors, escapes or `?`.

## Tests

```
pytest
```