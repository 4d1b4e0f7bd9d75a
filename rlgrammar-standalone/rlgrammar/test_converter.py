import logging

import pytest

from rlgrammar.converter import FINAL_STATE, GrammarToAutomatonConverter, convert
from rlgrammar.errors import UnsupportedGrammarShape
from rlgrammar.examples import variant_20
from rlgrammar.grammar import Grammar


def small_grammar() -> Grammar:
    g = Grammar("S")
    g.add_nonterminal("A")
    for t in "ad":
        g.add_terminal(t)
    return g


def test_terminal_plus_nonterminal_production():
    g = small_grammar()
    g.add_production("S", "dA")
    assert convert(g).transitions == (("S", "d", "A"),)


def test_terminal_production_goes_to_final():
    g = small_grammar()
    g.add_production("A", "d")
    nfa = convert(g)
    assert nfa.transitions == (("A", "d", FINAL_STATE),)
    assert nfa.finals == frozenset({FINAL_STATE})


def test_demo_conversion():
    nfa = convert(variant_20())
    assert nfa.start == "S"
    assert nfa.finals == frozenset({FINAL_STATE})
    assert nfa.states == frozenset({"S", "A", "B", "C", FINAL_STATE})
    assert nfa.alphabet == frozenset("abcd")
    assert nfa.transitions == (
        ("S", "d", "A"),
        ("A", "d", FINAL_STATE),
        ("A", "a", "B"),
        ("B", "b", "C"),
        ("C", "c", "A"),
        ("C", "a", "S"),
    )


def test_empty_rhs_is_skipped():
    g = small_grammar()
    g.add_production("S", "")
    g.add_production("S", "a")
    nfa = convert(g)
    assert nfa.transitions == (("S", "a", FINAL_STATE),)
    assert not nfa.accepts("")


def test_strict_rejects_non_right_linear():
    g = small_grammar()
    g.add_production("S", "adA")
    with pytest.raises(UnsupportedGrammarShape):
        GrammarToAutomatonConverter().convert(g)


def test_lenient_skips_non_right_linear(caplog):
    g = small_grammar()
    g.add_production("S", "adA")
    g.add_production("S", "dA")
    g.add_production("A", "a")
    with caplog.at_level(logging.WARNING, logger="rlgrammar.converter"):
        nfa = GrammarToAutomatonConverter(strict=False).convert(g)
    assert nfa.transitions == (("S", "d", "A"), ("A", "a", FINAL_STATE))
    assert any("adA" in r.getMessage() for r in caplog.records)
    assert nfa.accepts("da")
    assert not nfa.accepts("ada")


def test_final_state_does_not_clash_with_grammar_symbols():
    g = Grammar("S")
    g.add_nonterminal(FINAL_STATE)
    g.add_terminal("a")
    g.add_production("S", "a" + FINAL_STATE)
    g.add_production(FINAL_STATE, "a")
    nfa = convert(g)
    (final,) = nfa.finals
    assert final != FINAL_STATE
    assert final.startswith(FINAL_STATE)
    assert nfa.accepts("aa")
    assert not nfa.accepts("a")


def test_multichar_nonterminals():
    g = Grammar("Q0")
    g.add_nonterminal("Q10")
    g.add_terminal("x")
    g.add_production("Q0", "xQ10")
    g.add_production("Q10", "x")
    nfa = convert(g)
    assert ("Q0", "x", "Q10") in nfa.transitions
    assert nfa.accepts("xx")


def test_converter_does_not_modify_grammar():
    g = variant_20()
    before = g.productions
    convert(g)
    assert g.productions == before
