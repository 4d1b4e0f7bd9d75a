"""
Runtime settings and grammar definition files.

Settings can be controlled via arguments or via environment variables:

    RLGRAMMAR_MAX_WORDS         (default: 15)
    RLGRAMMAR_SAMPLE_COUNT      (default: 0, no random samples)
    RLGRAMMAR_SAMPLE_MAX_DEPTH  (default: 32)
    LOG_LEVEL                   (default: WARNING)

Grammar definition format (JSON):
    {
      "start": "S",
      "nonterminals": ["S", "A"],
      "terminals": ["a", "d"],
      "productions": [["S", "dA"], ["A", "d"]]
    }
"""

import json
import os
from dataclasses import dataclass
from typing import Any, Dict

from .errors import GrammarError
from .grammar import Grammar


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    try:
        value = int(os.getenv(name, str(default)))
    except ValueError:
        return default
    return value if value >= minimum else default


@dataclass
class Settings:
    max_words: int = 15
    sample_count: int = 0
    sample_max_depth: int = 32
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            max_words=_env_int("RLGRAMMAR_MAX_WORDS", cls.max_words),
            sample_count=_env_int("RLGRAMMAR_SAMPLE_COUNT", cls.sample_count, minimum=0),
            sample_max_depth=_env_int("RLGRAMMAR_SAMPLE_MAX_DEPTH", cls.sample_max_depth),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
        )


def grammar_from_dict(data: Dict[str, Any]) -> Grammar:
    if not isinstance(data, dict):
        raise GrammarError("grammar definition must be a JSON object")
    if "start" not in data:
        raise GrammarError("grammar definition has no 'start' symbol")

    g = Grammar(data["start"])
    for nt in data.get("nonterminals", []):
        g.add_nonterminal(nt)
    for t in data.get("terminals", []):
        g.add_terminal(t)
    for i, rule in enumerate(data.get("productions", [])):
        if not isinstance(rule, (list, tuple)) or len(rule) != 2:
            raise GrammarError(f"production #{i} must be a [lhs, rhs] pair, got {rule!r}")
        g.add_production(rule[0], rule[1])
    return g


def grammar_to_dict(g: Grammar) -> Dict[str, Any]:
    return {
        "start": g.start,
        "nonterminals": sorted(g.nonterminals),
        "terminals": sorted(g.terminals),
        "productions": [[p.lhs, p.rhs] for p in g.productions],
    }


def load_grammar(path: str) -> Grammar:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise GrammarError(f"{path}: not valid JSON ({e})") from e
    return grammar_from_dict(data)


def save_grammar(path: str, g: Grammar) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(grammar_to_dict(g), f, ensure_ascii=False, indent=2)
