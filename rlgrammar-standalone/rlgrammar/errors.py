"""
Errors raised while building grammars and automata.

Only construction can fail. Queries (expand, generate, accepts) are total
over well-formed values and never raise.
"""

from typing import Optional


class GrammarError(ValueError):
    pass


class InvalidProduction(GrammarError):
    """A production whose left-hand side is empty."""

    def __init__(self, lhs: str, rhs: str, reason: Optional[str] = None):
        self.lhs = lhs
        self.rhs = rhs
        reason = reason or "left-hand side must not be empty"
        super().__init__(f"invalid production {lhs!r} -> {rhs!r}: {reason}")


class UnsupportedGrammarShape(GrammarError):
    """A production that is not of the right-linear form A -> a | aB."""

    def __init__(self, production, reason: str):
        self.production = production
        super().__init__(f"unsupported production {production}: {reason}")
