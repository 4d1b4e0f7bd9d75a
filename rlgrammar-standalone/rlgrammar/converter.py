"""
Right-linear grammar -> NFA.

Standard correspondence, one transition per production:
  A -> a    becomes  A --a--> <final>
  A -> aB   becomes  A --a--> B
  A ->      (empty right-hand side) yields no transition
The start state is the grammar's start symbol and the synthesized
<final> state is the only accepting state.

Productions of any other shape cannot be converted. A strict converter
rejects the grammar with UnsupportedGrammarShape; a lenient one skips the
offending productions and logs a warning.
"""

import logging

from .automaton import Automaton
from .grammar import Grammar

logger = logging.getLogger(__name__)

FINAL_STATE = "<final>"


def fresh_final_state(g: Grammar) -> str:
    name = FINAL_STATE
    while g.is_nonterminal(name) or g.is_terminal(name):
        name += "'"
    return name


class GrammarToAutomatonConverter:
    def __init__(self, strict: bool = True):
        self.strict = strict

    def convert(self, g: Grammar) -> Automaton:
        if self.strict:
            g.check_right_linear()

        final = fresh_final_state(g)
        nfa = Automaton(g.start, states=sorted(g.nonterminals), alphabet=sorted(g.terminals), finals=[final])

        for p in g.productions:
            if not p.rhs:
                logger.debug("skipping empty production %s", p)
                continue
            if not self.strict:
                reason = g.shape_error(p)
                if reason is not None:
                    logger.warning("skipping production %s: %s", p, reason)
                    continue
            terminal = p.rhs[0]
            if len(p.rhs) == 1:
                nfa.add_transition(p.lhs, terminal, final)
            else:
                nfa.add_transition(p.lhs, terminal, p.rhs[1:])

        logger.debug("converted %d production(s) into %d transition(s)",
                     len(g.productions), len(nfa.transitions))
        return nfa


def convert(g: Grammar, strict: bool = True) -> Automaton:
    return GrammarToAutomatonConverter(strict=strict).convert(g)
