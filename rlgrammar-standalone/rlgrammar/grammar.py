"""
Right-linear grammar model and suffix-based rewriting.

A grammar is G = {VN, VT, P, S}:
- VN: nonterminal symbols (strings, usually single upper-case letters)
- VT: terminal symbols (single characters)
- P:  ordered productions lhs -> rhs, rhs possibly empty
- S:  start symbol, always a member of VN

Rewriting only ever touches the end of a sentential form: a production
applies to `current` when its lhs is a suffix of `current`, and the result
is `current` with that suffix replaced by the rhs. For right-linear grammars
this is exactly "rewrite the trailing nonterminal".

Grammar convention for export (compatible with earleyparser / simplefuzzer):
- Nonterminals are strings in angle brackets, e.g. '<S>'
- Terminals are single-character strings
- Epsilon is the empty production []
"""

import logging
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

from .errors import GrammarError, InvalidProduction, UnsupportedGrammarShape

logger = logging.getLogger(__name__)

# CFG dictionary form shared with the fuzzing / parsing tooling
CFG = Dict[str, List[List[str]]]


class Production:
    __slots__ = ("_lhs", "_rhs")

    def __init__(self, lhs: str, rhs: str):
        if not isinstance(lhs, str) or not isinstance(rhs, str):
            raise InvalidProduction(lhs, rhs, "both sides must be strings")
        if not lhs:
            raise InvalidProduction(lhs, rhs)
        self._lhs = lhs
        self._rhs = rhs

    @property
    def lhs(self) -> str:
        return self._lhs

    @property
    def rhs(self) -> str:
        return self._rhs

    def applies_to(self, current: str) -> bool:
        return len(current) >= len(self._lhs) and current.endswith(self._lhs)

    def rewrite(self, current: str) -> str:
        return current[: len(current) - len(self._lhs)] + self._rhs

    def __eq__(self, other) -> bool:
        if not isinstance(other, Production):
            return NotImplemented
        return (self._lhs, self._rhs) == (other._lhs, other._rhs)

    def __hash__(self) -> int:
        return hash((self._lhs, self._rhs))

    def __iter__(self):
        return iter((self._lhs, self._rhs))

    def __repr__(self) -> str:
        return f"Production({self._lhs!r}, {self._rhs!r})"

    def __str__(self) -> str:
        return f"{self._lhs} -> {self._rhs or 'ε'}"


class Grammar:
    def __init__(self, start: str):
        if not isinstance(start, str) or not start:
            raise GrammarError(f"start symbol must be a non-empty string, got {start!r}")
        self._start: str = start
        self._nonterminals: Set[str] = {start}
        self._terminals: Set[str] = set()
        self._productions: List[Production] = []

    # --- Construction ---

    def add_nonterminal(self, symbol: str) -> None:
        if not isinstance(symbol, str) or not symbol:
            raise GrammarError(f"nonterminal symbol must be a non-empty string, got {symbol!r}")
        self._nonterminals.add(symbol)

    def add_terminal(self, symbol: str) -> None:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise GrammarError(f"terminal symbol must be a single character, got {symbol!r}")
        self._terminals.add(symbol)

    def add_production(self, lhs: str, rhs: str) -> Production:
        p = Production(lhs, rhs)
        self._productions.append(p)
        return p

    # --- Queries ---

    def is_nonterminal(self, symbol: str) -> bool:
        return symbol in self._nonterminals

    def is_terminal(self, symbol: str) -> bool:
        return symbol in self._terminals

    def productions_for(self, lhs: str) -> List[Production]:
        return [p for p in self._productions if p.lhs == lhs]

    def expand(self, current: str) -> List[str]:
        """
        All one-step rewrites of `current`, in production declaration order.

        Only suffix matches are considered. An empty result means `current`
        cannot be rewritten any further, i.e. it is a generated word.
        """
        return [p.rewrite(current) for p in self._productions if p.applies_to(current)]

    def shape_error(self, p: Production) -> Optional[str]:
        """Why `p` is not of the form A -> a | aB | (empty), or None if it is."""
        if p.lhs not in self._nonterminals:
            return f"{p.lhs!r} is not a nonterminal"
        if not p.rhs:
            return None
        if p.rhs[0] not in self._terminals:
            return f"{p.rhs[0]!r} is not a terminal"
        rest = p.rhs[1:]
        if rest and rest not in self._nonterminals:
            return f"{rest!r} is not a single trailing nonterminal"
        return None

    def check_right_linear(self) -> None:
        """Raise UnsupportedGrammarShape for the first non right-linear production."""
        for p in self._productions:
            reason = self.shape_error(p)
            if reason is not None:
                raise UnsupportedGrammarShape(p, reason)
        logger.debug("grammar with %d productions is right-linear", len(self._productions))

    def dead_ends(self) -> FrozenSet[str]:
        """
        Nonterminals that are rewritten forever without reaching a word.

        Only computed when every sentential form has exactly one candidate
        trailing nonterminal: all productions right-linear, no nonterminal a
        proper suffix of another, none spelled with terminals only. Otherwise
        the result is empty.
        """
        nts = self._nonterminals
        if any(self.shape_error(p) is not None for p in self._productions):
            return frozenset()
        if any(a != b and a.endswith(b) for a in nts for b in nts):
            return frozenset()
        if any(all(c in self._terminals for c in nt) for nt in nts):
            return frozenset()

        # a nonterminal without productions stops rewriting at once
        alive: Set[str] = nts - {p.lhs for p in self._productions}
        changed = True
        while changed:
            changed = False
            for p in self._productions:
                if p.lhs not in alive and (len(p.rhs) <= 1 or p.rhs[1:] in alive):
                    alive.add(p.lhs)
                    changed = True
        return frozenset(nts - alive)

    # --- Export ---

    def tokenize(self, rhs: str) -> List[str]:
        """Split a right-hand side into symbols, preferring the longest nonterminal."""
        by_length = sorted(self._nonterminals, key=len, reverse=True)
        tokens: List[str] = []
        i = 0
        while i < len(rhs):
            for nt in by_length:
                if rhs.startswith(nt, i):
                    tokens.append(nt)
                    i += len(nt)
                    break
            else:
                tokens.append(rhs[i])
                i += 1
        return tokens

    @staticmethod
    def key(nonterminal: str) -> str:
        return f"<{nonterminal}>"

    def to_cfg(self, productive_only: bool = False) -> Tuple[CFG, str]:
        """
        Export as a CFG dictionary: '<X>' -> list of rules, each rule a list
        of tokens. Returns (grammar, start_key).

        With productive_only, nonterminals that cannot derive any terminal
        string (and every rule mentioning one) are left out.
        """
        rules: Dict[str, List[List[str]]] = {nt: [] for nt in sorted(self._nonterminals)}
        for p in self._productions:
            tokens = [self.key(t) if t in self._nonterminals else t for t in self.tokenize(p.rhs)]
            rules.setdefault(p.lhs, []).append(tokens)

        if productive_only:
            alive = self._productive(rules)
            rules = {
                nt: [r for r in alts if all(not self._is_key(t) or t in alive for t in r)]
                for nt, alts in rules.items()
                if self.key(nt) in alive
            }

        g: CFG = {self.key(nt): alts for nt, alts in rules.items()}
        return g, self.key(self._start)

    def _is_key(self, token: str) -> bool:
        return len(token) > 2 and token[0] == "<" and token[-1] == ">" and token[1:-1] in self._nonterminals

    def _productive(self, rules: Dict[str, List[List[str]]]) -> FrozenSet[str]:
        alive: Set[str] = set()
        changed = True
        while changed:
            changed = False
            for nt, alts in rules.items():
                k = self.key(nt)
                if k in alive:
                    continue
                if any(all(not self._is_key(t) or t in alive for t in r) for r in alts):
                    alive.add(k)
                    changed = True
        return frozenset(alive)

    # --- Read-only accessors ---

    @property
    def start(self) -> str:
        return self._start

    @property
    def nonterminals(self) -> FrozenSet[str]:
        return frozenset(self._nonterminals)

    @property
    def terminals(self) -> FrozenSet[str]:
        return frozenset(self._terminals)

    @property
    def productions(self) -> Tuple[Production, ...]:
        return tuple(self._productions)

    def __repr__(self) -> str:
        return f"Grammar(start={self._start!r}, productions={len(self._productions)})"
