#!/usr/bin/env python3
"""
Grammar -> words -> NFA -> membership, from the command line.

Usage example:
  rlgrammar                                   # built-in variant 20 grammar
  rlgrammar --grammar g.json --max-words 30 --words dd dabcd abc
  rlgrammar --sample 5 --check

Steps:
1) Print the grammar.
2) Generate up to --max-words words breadth-first.
3) Convert the grammar to an NFA and print it.
4) Report which of the test words the NFA accepts.
5) Optionally draw random samples (--sample) and cross-check the NFA
   against an Earley parser of the grammar (--check).

Exit status: 0 ok, 1 a cross-check failed, 2 the grammar could not be used.
"""

import argparse
import itertools
import logging
import sys
from typing import List, Optional

from .config import Settings, load_grammar, save_grammar
from .converter import GrammarToAutomatonConverter
from .errors import GrammarError
from .examples import TEST_WORDS, variant_20
from .generator import WordGenerator
from .grammar import Grammar
from .log import setup_logger
from .oracle import AutomatonOracle, GrammarOracle, check_generated, find_disagreement
from .printer import format_automaton, format_grammar, format_words

logger = logging.getLogger(__name__)


def build_arg_parser(settings: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="rlgrammar", description="Right-linear grammar to NFA toolkit")
    ap.add_argument("--grammar", help="JSON grammar definition (default: built-in variant 20)")
    ap.add_argument("--max-words", type=int, default=settings.max_words,
                    help="maximum number of words to generate (default: %(default)s)")
    ap.add_argument("--words", nargs="*", default=None, help="words to test for membership")
    ap.add_argument("--sample", type=int, default=settings.sample_count, metavar="N",
                    help="also draw N random words from the grammar, 0 for none (default: %(default)s)")
    ap.add_argument("--max-depth", type=int, default=settings.sample_max_depth,
                    help="derivation depth limit for random samples (default: %(default)s)")
    ap.add_argument("--check", action="store_true",
                    help="cross-check the NFA against an Earley parser of the grammar")
    ap.add_argument("--lenient", action="store_true",
                    help="skip non right-linear productions instead of failing")
    ap.add_argument("--dump-grammar", metavar="PATH", help="write the grammar as JSON and continue")
    ap.add_argument("--log-level", default=settings.log_level)
    return ap


def all_words(alphabet: List[str], max_len: int) -> List[str]:
    out: List[str] = []
    for n in range(max_len + 1):
        out.extend("".join(t) for t in itertools.product(alphabet, repeat=n))
    return out


def run(args: argparse.Namespace) -> int:
    g: Grammar = load_grammar(args.grammar) if args.grammar else variant_20()
    if args.dump_grammar:
        save_grammar(args.dump_grammar, g)
        logger.info("grammar written to %s", args.dump_grammar)

    print(format_grammar(g))

    gen = WordGenerator(g)
    words = gen.generate(args.max_words)
    print(f"\nGenerated words ({len(words)}):")
    print(format_words(words))

    nfa = GrammarToAutomatonConverter(strict=not args.lenient).convert(g)
    print("\nAutomaton:")
    print(format_automaton(nfa))

    tests = TEST_WORDS if args.words is None else args.words
    print("\nMembership:")
    width = max([len(w) for w in tests] + [1])
    for w in tests:
        verdict = "accepted" if nfa.accepts(w) else "rejected"
        print(f"  {(w or 'ε'):<{width}} -> {verdict}")

    if args.sample > 0:
        print(f"\nRandom samples ({args.sample}):")
        for s in gen.sample(args.sample, max_depth=args.max_depth):
            print(f"  {s or 'ε'} -> {'accepted' if nfa.accepts(s) else 'rejected'}")

    if args.check:
        failed = check_generated(g, nfa, args.max_words)
        if failed:
            print(f"[FAIL] Generated words rejected by the automaton: {failed}")
            return 1
        alphabet = sorted(g.terminals)
        candidates = all_words(alphabet, 6 if len(alphabet) <= 4 else 4) + list(tests)
        bad = find_disagreement(GrammarOracle(g), AutomatonOracle(nfa), candidates)
        if bad is not None:
            print(f"[FAIL] Grammar and automaton disagree on {bad!r}")
            return 1
        print(f"\n[CHECK] Automaton agrees with the grammar on {len(candidates)} word(s)")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()
    args = build_arg_parser(settings).parse_args(argv)
    if args.max_words < 1:
        print("[ERROR] --max-words must be positive", file=sys.stderr)
        return 2
    setup_logger("rlgrammar", args.log_level)
    try:
        return run(args)
    except GrammarError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"[ERROR] cannot read grammar: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
