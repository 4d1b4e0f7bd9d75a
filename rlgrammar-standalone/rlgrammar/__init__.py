"""
rlgrammar: right-linear grammars, bounded word generation and
grammar -> NFA conversion with subset-simulation membership.
"""

from .automaton import Automaton
from .converter import FINAL_STATE, GrammarToAutomatonConverter, convert
from .errors import GrammarError, InvalidProduction, UnsupportedGrammarShape
from .generator import WordGenerator
from .grammar import Grammar, Production

__all__ = [
    "Automaton",
    "FINAL_STATE",
    "Grammar",
    "GrammarError",
    "GrammarToAutomatonConverter",
    "InvalidProduction",
    "Production",
    "UnsupportedGrammarShape",
    "WordGenerator",
    "convert",
]
