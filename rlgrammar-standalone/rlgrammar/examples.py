"""
Demo grammar (variant 20) and the words it is checked against.

VN={S, A, B, C}, VT={a, b, c, d},
P={ S -> dA, A -> d, A -> aB, B -> bC, C -> cA, C -> aS }
"""

from typing import List

from .grammar import Grammar

# (word, expected membership)
TEST_CASES = [
    ("dd", True),
    ("dabcd", True),
    ("dabcad", False),
    ("dabad", False),
    ("dabadd", True),
    ("abc", False),
    ("dabca", False),
    ("", False),
    ("d", False),
    ("dx", False),
]

TEST_WORDS: List[str] = [w for w, _ in TEST_CASES]


def variant_20() -> Grammar:
    g = Grammar("S")
    for nt in "SABC":
        g.add_nonterminal(nt)
    for t in "abcd":
        g.add_terminal(t)

    g.add_production("S", "dA")
    g.add_production("A", "d")
    g.add_production("A", "aB")
    g.add_production("B", "bC")
    g.add_production("C", "cA")
    g.add_production("C", "aS")
    return g
