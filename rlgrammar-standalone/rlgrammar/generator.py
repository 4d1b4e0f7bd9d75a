"""
Bounded word generation from a grammar.

Words are enumerated breadth-first over the suffix-rewrite relation, starting
from the start symbol. Each distinct sentential form is enqueued at most
once, so derivation cycles such as S -> dA -> daB -> dabC -> dabaS -> ...
cannot grow the frontier without bound; `max_words` bounds the output.
Forms whose trailing nonterminal can never finish (Grammar.dead_ends) are
not enqueued, so such branches do not keep the search alive.

Random samples are drawn with simplefuzzer.LimitFuzzer over the exported
grammar, the same generator the learners use for fuzzing hypotheses.
"""

import logging
from collections import deque
from typing import Dict, List, Optional

import simplefuzzer as fuzzer

from .grammar import Grammar

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORDS = 15


class WordGenerator:
    def __init__(self, grammar: Grammar):
        self.g = grammar
        # sentential form -> form it was first rewritten from
        self._parent: Dict[str, Optional[str]] = {}

    def generate(self, max_words: int = DEFAULT_MAX_WORDS) -> List[str]:
        if isinstance(max_words, bool) or not isinstance(max_words, int) or max_words < 1:
            raise ValueError(f"max_words must be a positive integer, got {max_words!r}")

        start = self.g.start
        dead = self.g.dead_ends()
        q: deque = deque([] if start in dead else [start])
        seen = {start}
        parent: Dict[str, Optional[str]] = {start: None}
        words: List[str] = []

        while q and len(words) < max_words:
            cur = q.popleft()
            nxt = self.g.expand(cur)

            # can't expand = it's a finished word
            if not nxt:
                words.append(cur)
                continue

            for s in nxt:
                if s in seen:
                    continue
                seen.add(s)
                # forms ending in a dead-end nonterminal never become words
                if any(s.endswith(nt) for nt in dead):
                    continue
                parent[s] = cur
                q.append(s)

        self._parent = parent
        logger.debug("generated %d word(s), %d form(s) visited, %d left in frontier",
                     len(words), len(seen), len(q))
        return words

    def derivation(self, word: str) -> Optional[List[str]]:
        """
        The chain of sentential forms S, ..., word through which the last
        generate() run first reached `word`, or None if it was not reached.
        """
        if not self._parent:
            self.generate()
        if word not in self._parent:
            return None
        chain: List[str] = []
        cur: Optional[str] = word
        while cur is not None:
            chain.append(cur)
            cur = self._parent[cur]
        chain.reverse()
        return chain

    def sample(self, count: int, max_depth: int = 32) -> List[str]:
        """Draw `count` random words using LimitFuzzer."""
        grammar, start = self.g.to_cfg(productive_only=True)
        if start not in grammar:
            logger.info("start symbol %s derives no word, nothing to sample", start)
            return []
        gf = fuzzer.LimitFuzzer(grammar)
        out: List[str] = []
        for _ in range(count):
            s = gf.iter_fuzz(key=start, max_depth=max_depth)
            if isinstance(s, str):
                out.append(s)
        return out
