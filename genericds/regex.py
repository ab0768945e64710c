"""Regular expressions compiled through epsilon-NFA, NFA and DFA stages.

Supported syntax: literal characters, ``|`` (alternation), ``*`` and
``+`` applied to the preceding piece, and ``(``/``)`` which close the
current run of pieces into a group. Groups are then joined in sequence.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

INVALID_CHAR = "\x80"


def _first(states: set[int]) -> int:
    return min(states)


def _char_list(chars: Iterable[str]) -> str:
    return "".join(f"'{c}', " for c in sorted(chars))


def _int_list(values: Iterable[int]) -> str:
    return "".join(f"{v}, " for v in sorted(values))


@dataclass
class DFA:
    """A deterministic automaton over single-character symbols."""

    states: set[int] = field(default_factory=set)
    symbols: set[str] = field(default_factory=set)
    transition: dict[tuple[int, str], int] = field(default_factory=dict)
    initial_state: int = 0
    final: set[int] = field(default_factory=set)

    def run(self, text: str) -> bool:
        """Whether the automaton accepts ``text``.

        A character outside the alphabet has no transition and raises
        ValueError.
        """
        state = self.initial_state
        for ch in text:
            symbol = ch if ch in self.symbols else INVALID_CHAR
            try:
                state = self.transition[(state, symbol)]
            except KeyError:
                raise ValueError(f"no transition from state {state} on {ch!r}") from None
        return state in self.final

    def describe(self) -> str:
        delta = "".join(
            f"({state}, '{symbol}') : {target}, "
            for (state, symbol), target in sorted(self.transition.items())
        )
        return (
            "DFA:\n"
            f"\tQ = {{ {_int_list(self.states)}}},\n"
            f"\tSigma = {{ {_char_list(self.symbols)}}},\n"
            f"\tdelta = {{ {delta}}},\n"
            f"\tq0 = {self.initial_state},\n"
            f"\tF = {{ {_int_list(self.final)}}}\n"
        )


@dataclass
class NFA:
    """A nondeterministic automaton without epsilon moves."""

    states: set[int] = field(default_factory=set)
    symbols: set[str] = field(default_factory=set)
    transition: dict[tuple[int, str], list[int]] = field(default_factory=dict)
    initial_state: set[int] = field(default_factory=set)
    final: set[int] = field(default_factory=set)

    def to_dfa(self) -> DFA:
        """Subset construction; the initial subset becomes state 0."""
        symbols = sorted(self.symbols)
        start = frozenset(self.initial_state)
        ids: dict[frozenset[int], int] = {start: 0}
        stack = [start]
        edges: list[tuple[frozenset[int], str, frozenset[int]]] = []
        while stack:
            current = stack.pop()
            for symbol in symbols:
                target = frozenset().union(
                    *(self.transition.get((state, symbol), ()) for state in current)
                )
                edges.append((current, symbol, target))
                if target not in ids:
                    ids[target] = len(ids)
                    stack.append(target)
        return DFA(
            states=set(ids.values()),
            symbols=set(symbols),
            transition={(ids[src], symbol): ids[dst] for src, symbol, dst in edges},
            initial_state=0,
            final={state_id for subset, state_id in ids.items() if subset & self.final},
        )

    def _delta_text(self) -> str:
        return "".join(
            f"({state}, '{symbol}') : {{ {_int_list(targets)}}}, "
            for (state, symbol), targets in sorted(self.transition.items())
        )

    def describe(self) -> str:
        return (
            "NFA:\n"
            f"\tQ = {{ {_int_list(self.states)}}}\n"
            f"\tSigma = {{ {_char_list(self.symbols)}}}\n"
            f"\tdelta = {{ {self._delta_text()}}}\n"
            f"\tq0 = {{ {_int_list(self.initial_state)}}}\n"
            f"\tF = {{ {_int_list(self.final)}}}\n"
        )


@dataclass
class EpsilonNFA:
    """An automaton with epsilon moves, built up piece by piece.

    A fresh instance accepts only the empty string: one state, 0, which is
    both initial and final. ``epsilon`` maps each state to the states it
    reaches by a single epsilon move (itself included).
    """

    states: set[int] = field(default_factory=lambda: {0})
    symbols: set[str] = field(default_factory=set)
    transition: dict[tuple[int, str], list[int]] = field(default_factory=dict)
    initial_state: set[int] = field(default_factory=lambda: {0})
    final: set[int] = field(default_factory=lambda: {0})
    epsilon: dict[int, set[int]] = field(default_factory=lambda: {0: {0}})
    is_or: bool = False

    def _closure(self, states: Iterable[int]) -> set[int]:
        closure = set(states)
        stack = list(closure)
        while stack:
            current = stack.pop()
            for nxt in self.epsilon.get(current, ()):
                if nxt not in closure:
                    closure.add(nxt)
                    stack.append(nxt)
        return closure

    def reachable_from(self, state: int) -> set[int]:
        """Every state reachable from ``state`` by epsilon moves alone."""
        return self._closure((state,))

    def to_nfa(self) -> NFA:
        """Remove epsilon moves; initial and final states are kept as they are."""
        nfa = NFA(
            states=set(self.states),
            symbols=set(self.symbols),
            initial_state=set(self.initial_state),
            final=set(self.final),
        )
        for current in self.states:
            start = self.reachable_from(current)
            for symbol in self.symbols:
                moved: set[int] = set()
                for state in start:
                    moved.update(self.transition.get((state, symbol), ()))
                targets = self._closure(moved)
                if targets:
                    nfa.transition[(current, symbol)] = sorted(targets)
        return nfa

    def _absorb(self, other: EpsilonNFA) -> int:
        """Copy ``other`` in with its states shifted past ours; return the shift."""
        offset = len(self.states)
        self.symbols.update(other.symbols)
        for state in other.states:
            self.states.add(state + offset)
            self.epsilon[state + offset] = {s + offset for s in other.epsilon.get(state, ())}
        for (state, symbol), targets in other.transition.items():
            self.transition[(state + offset, symbol)] = [t + offset for t in targets]
        return offset

    def union(self, other: EpsilonNFA) -> None:
        """Make this automaton accept what either it or ``other`` accepts."""
        offset = self._absorb(other)
        initial = _first(self.initial_state)
        self.epsilon.setdefault(initial, set()).add(offset)

        own_final = _first(self.final)
        other_final = _first(other.final) + offset
        new_state = len(self.states)
        self.epsilon.setdefault(own_final, set()).add(new_state)
        self.epsilon.setdefault(other_final, set()).add(new_state)
        self.states.add(new_state)
        self.epsilon[new_state] = {new_state}
        self.final = {new_state}

    def append(self, other: EpsilonNFA) -> None:
        """Concatenate ``other``, or join it by union if an alternation is pending."""
        if self.is_or:
            self.union(other)
            self.is_or = False
            return
        last = _first(self.final)
        offset = self._absorb(other)
        self.final = {state + offset for state in other.final}
        self.epsilon.setdefault(last, set()).add(offset)
        if other.is_or:
            self.is_or = True

    def star(self) -> None:
        """Allow zero or more repetitions."""
        initial = _first(self.initial_state)
        final = _first(self.final)
        self.epsilon.setdefault(final, set()).add(initial)
        self.epsilon.setdefault(initial, set()).add(final)

    def plus(self) -> None:
        """Allow one or more repetitions."""
        initial = _first(self.initial_state)
        final = _first(self.final)
        self.epsilon.setdefault(final, set()).add(initial)

    def describe(self) -> str:
        delta = "".join(
            f"({state}, '{symbol}') : {{ {_int_list(targets)}}}, "
            for (state, symbol), targets in sorted(self.transition.items())
        )
        eps = "".join(
            f"{state} : {{ {_int_list(targets)}}}, "
            for state, targets in sorted(self.epsilon.items())
        )
        return (
            "EpsilonNFA:\n"
            f"\tQ = {{ {_int_list(self.states)}}}\n"
            f"\tSigma = {{ {_char_list(self.symbols)}}}\n"
            f"\tdelta = {{ {delta}}}\n"
            f"\tepsilon = {{ {eps}}}\n"
            f"\tq0 = {{ {_int_list(self.initial_state)}}}\n"
            f"\tF = {{ {_int_list(self.final)}}}\n"
        )


def epsilon_symbol(c: str) -> EpsilonNFA:
    """An automaton accepting exactly the one-character string ``c``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError("expected a single character")
    return EpsilonNFA(
        states={0, 1},
        symbols={c},
        transition={(0, c): [1]},
        initial_state={0},
        final={1},
        epsilon={0: {0}, 1: {1}},
    )


def compress(automata: Iterable[EpsilonNFA]) -> EpsilonNFA:
    """Join the automata in order into the first one and return it."""
    iterator = iter(automata)
    try:
        result = next(iterator)
    except StopIteration:
        raise ValueError("nothing to join: empty pattern segment") from None
    for automaton in iterator:
        result.append(automaton)
    return result


class Regex:
    """A compiled pattern."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        pending: list[EpsilonNFA] = []
        groups: list[EpsilonNFA] = []
        for ch in pattern:
            if ch in "()":
                groups.append(compress(pending))
                pending = []
            elif ch in "+*":
                if not pending:
                    raise ValueError(f"nothing to repeat before {ch!r}")
                if ch == "+":
                    pending[-1].plus()
                else:
                    pending[-1].star()
            elif ch == "|":
                pending.append(EpsilonNFA(is_or=True))
            else:
                pending.append(epsilon_symbol(ch))
        if pending:
            groups.append(compress(pending))
        self.dfa = compress(groups).to_nfa().to_dfa()

    def matches(self, text: str) -> bool:
        """Whether the whole of ``text`` is accepted."""
        if any(ch not in self.dfa.symbols for ch in text):
            return False
        return self.dfa.run(text)

    def __repr__(self) -> str:
        return f"Regex({self.pattern!r})"