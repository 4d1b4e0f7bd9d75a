import json

import pytest

from rlgrammar.config import Settings, grammar_to_dict, load_grammar, save_grammar
from rlgrammar.errors import GrammarError, InvalidProduction
from rlgrammar.examples import variant_20
from rlgrammar.generator import WordGenerator


def test_settings_defaults(monkeypatch):
    for name in ("RLGRAMMAR_MAX_WORDS", "RLGRAMMAR_SAMPLE_COUNT", "RLGRAMMAR_SAMPLE_MAX_DEPTH", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = Settings.from_env()
    assert s == Settings(max_words=15, sample_count=0, sample_max_depth=32, log_level="WARNING")


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("RLGRAMMAR_MAX_WORDS", "40")
    monkeypatch.setenv("RLGRAMMAR_SAMPLE_COUNT", "not-a-number")
    monkeypatch.setenv("RLGRAMMAR_SAMPLE_MAX_DEPTH", "-3")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings.from_env()
    assert s.max_words == 40
    assert s.sample_count == 0
    assert s.sample_max_depth == 32
    assert s.log_level == "DEBUG"


def test_grammar_file_round_trip(tmp_path):
    path = tmp_path / "sub" / "g.json"
    save_grammar(str(path), variant_20())
    g = load_grammar(str(path))
    assert grammar_to_dict(g) == grammar_to_dict(variant_20())
    assert WordGenerator(g).generate(5) == WordGenerator(variant_20()).generate(5)


def test_load_grammar_file(tmp_path):
    path = tmp_path / "g.json"
    path.write_text(json.dumps({
        "start": "S",
        "terminals": ["d"],
        "productions": [["S", "d"]],
    }), encoding="utf-8")
    g = load_grammar(str(path))
    assert g.start == "S"
    assert g.expand("S") == ["d"]


@pytest.mark.parametrize("content, error", [
    ("{not json", GrammarError),
    ("[]", GrammarError),
    ('{"terminals": ["a"]}', GrammarError),
    ('{"start": "S", "productions": [["S"]]}', GrammarError),
    ('{"start": "S", "productions": [["", "a"]]}', InvalidProduction),
    ('{"start": "S", "terminals": ["ab"]}', GrammarError),
    ('{"start": "S", "terminals": ["d"], "productions": [["S", null]]}', InvalidProduction),
    ('{"start": null}', GrammarError),
    ('{"start": "S", "nonterminals": [null]}', GrammarError),
    ('{"start": "S", "terminals": [7]}', GrammarError),
])
def test_malformed_grammar_file(tmp_path, content, error):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(error):
        load_grammar(str(path))


def test_sample_count_may_be_zero(monkeypatch):
    monkeypatch.setenv("RLGRAMMAR_SAMPLE_COUNT", "3")
    assert Settings.from_env().sample_count == 3
    monkeypatch.setenv("RLGRAMMAR_SAMPLE_COUNT", "0")
    assert Settings.from_env().sample_count == 0
    monkeypatch.setenv("RLGRAMMAR_SAMPLE_COUNT", "-2")
    assert Settings.from_env().sample_count == 0
