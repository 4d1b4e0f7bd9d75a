"""
Nondeterministic finite automaton with subset-simulation acceptance.

NFA representation:
    start:       str
    states:      Set[str]
    alphabet:    Set[str]
    finals:      Set[str]
    transitions: List[Tuple[str, str, str]]      # declaration order, no duplicates
    delta:       Dict[str, Dict[str, Set[str]]]  # index (state, symbol) -> targets

The transition relation is not a function: one (state, symbol) pair may lead
to several states. Adding a transition implicitly declares its endpoints and
its symbol.
"""

from typing import AbstractSet, Dict, FrozenSet, Iterable, List, Set, Tuple

Transition = Tuple[str, str, str]


class Automaton:
    def __init__(
        self,
        start: str,
        states: Iterable[str] = (),
        alphabet: Iterable[str] = (),
        finals: Iterable[str] = (),
    ):
        self._start: str = str(start)
        self._states: Set[str] = {self._start}
        self._alphabet: Set[str] = set()
        self._finals: Set[str] = set()
        self._transitions: List[Transition] = []
        self.delta: Dict[str, Dict[str, Set[str]]] = {}
        for q in states:
            self.add_state(q)
        for a in alphabet:
            self.add_symbol(a)
        for q in finals:
            self.add_final(q)

    # --- Construction ---

    def add_state(self, state: str) -> None:
        self._states.add(str(state))

    def add_symbol(self, symbol: str) -> None:
        self._alphabet.add(str(symbol))

    def add_final(self, state: str) -> None:
        self.add_state(state)
        self._finals.add(str(state))

    def add_transition(self, src: str, symbol: str, dst: str) -> None:
        src, symbol, dst = str(src), str(symbol), str(dst)
        self.add_state(src)
        self.add_state(dst)
        self.add_symbol(symbol)
        targets = self.delta.setdefault(src, {}).setdefault(symbol, set())
        if dst not in targets:
            targets.add(dst)
            self._transitions.append((src, symbol, dst))

    # --- Simulation ---

    def step(self, active: AbstractSet[str], symbol: str) -> Set[str]:
        nxt: Set[str] = set()
        for q in active:
            ts = self.delta.get(q, {}).get(symbol)
            if ts:
                nxt.update(ts)
        return nxt

    def accepts(self, word: str) -> bool:
        """NFA simulation without epsilon transitions."""
        current: Set[str] = {self._start}
        for a in word:
            current = self.step(current, a)
            if not current:
                return False
        return not current.isdisjoint(self._finals)

    def is_deterministic(self) -> bool:
        return all(len(ts) <= 1 for trans in self.delta.values() for ts in trans.values())

    # --- Export ---

    def to_right_linear_grammar(self) -> Tuple[Dict[str, List[List[str]]], str, List[str]]:
        """
        Convert back into a right-linear CFG:
          <q> -> a <p> for each transition q --a--> p
          <q> -> []    for each final q
        Returns (grammar, start_symbol, alphabet_list)
        """
        g: Dict[str, List[List[str]]] = {}

        def NT(q: str) -> str:
            return f"<{q}>"

        for q in sorted(self._states):
            g[NT(q)] = [[]] if q in self._finals else []
        for src, a, dst in self._transitions:
            g[NT(src)].append([a, NT(dst)])
        return g, NT(self._start), sorted(self._alphabet)

    # --- Read-only accessors ---

    @property
    def start(self) -> str:
        return self._start

    @property
    def states(self) -> FrozenSet[str]:
        return frozenset(self._states)

    @property
    def alphabet(self) -> FrozenSet[str]:
        return frozenset(self._alphabet)

    @property
    def finals(self) -> FrozenSet[str]:
        return frozenset(self._finals)

    @property
    def transitions(self) -> Tuple[Transition, ...]:
        return tuple(self._transitions)

    def __repr__(self) -> str:
        return (f"Automaton(start={self._start!r}, states={len(self._states)}, "
                f"transitions={len(self._transitions)}, finals={sorted(self._finals)!r})")
