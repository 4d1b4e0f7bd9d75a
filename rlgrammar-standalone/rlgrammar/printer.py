"""
Plain-text rendering of grammars, automata and word lists.
"""

from typing import Iterable

from .automaton import Automaton
from .grammar import Grammar


def _set(symbols: Iterable[str]) -> str:
    return "{ " + "".join(f"{s} " for s in sorted(symbols)) + "}"


def format_grammar(g: Grammar) -> str:
    lines = [
        f"VN = {_set(g.nonterminals)}",
        f"VT = {_set(g.terminals)}",
        "P:",
    ]
    lines.extend(f"  {p}" for p in g.productions)
    lines.append(f"S = {g.start}")
    return "\n".join(lines)


def format_automaton(a: Automaton) -> str:
    lines = [
        f"Q  = {_set(a.states)}",
        f"Σ  = {_set(a.alphabet)}",
        "δ:",
    ]
    lines.extend(f"  ({src}, {sym}) -> {dst}" for src, sym, dst in a.transitions)
    lines.append(f"q0 = {a.start}")
    lines.append(f"F  = {_set(a.finals)}")
    return "\n".join(lines)


def format_words(words: Iterable[str]) -> str:
    return "\n".join(w if w else "ε" for w in words)
