"""
Membership oracles for cross-checking the grammar -> automaton construction.

- GrammarOracle answers membership by Earley-parsing the grammar itself,
  independently of the automaton construction.
- AutomatonOracle answers membership through Automaton.accepts.

Implements:
- is_member(q) -> 0/1
- find_disagreement(a, b, words) -> first word the oracles disagree on, or None
- check_generated(grammar, automaton, max_words) -> generated words rejected by the automaton
"""

from typing import Iterable, List, Optional

import earleyparser

from .automaton import Automaton
from .generator import DEFAULT_MAX_WORDS, WordGenerator
from .grammar import Grammar


class Oracle:
    def is_member(self, q: str) -> int:
        raise NotImplementedError


class GrammarOracle(Oracle):
    def __init__(self, grammar: Grammar):
        self.g, self.s = grammar.to_cfg()
        self.parser = earleyparser.EarleyParser(self.g)

    def is_member(self, q: str) -> int:
        try:
            list(self.parser.recognize_on(q, self.s))
        except SyntaxError:
            return 0
        return 1


class AutomatonOracle(Oracle):
    def __init__(self, automaton: Automaton):
        self.automaton = automaton

    def is_member(self, q: str) -> int:
        return 1 if self.automaton.accepts(q) else 0


def find_disagreement(a: Oracle, b: Oracle, words: Iterable[str]) -> Optional[str]:
    for w in words:
        if a.is_member(w) != b.is_member(w):
            return w
    return None


def check_generated(grammar: Grammar, automaton: Automaton, max_words: int = DEFAULT_MAX_WORDS) -> List[str]:
    """Every generated word must be accepted; returns the ones that are not."""
    words = WordGenerator(grammar).generate(max_words)
    return [w for w in words if not automaton.accepts(w)]
