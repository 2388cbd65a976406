import pytest

from roadanalysis_core.analyzers.standard import RussianAnalyzer, StandardAnalyzer
from roadanalysis_core.analyzers.stemmers import RussianLightStemFilter, RussianStemmer, SnowballFilter
from roadanalysis_core.analyzers.tokenizers import WhitespaceTokenizer
from roadanalysis_core.errors import ConfigurationError
from roadanalysis_core.registry import (
    ANALYZERS,
    FILTERS,
    STEMMERS,
    TOKENIZERS,
    ComponentRegistry,
    StemmerKind,
)


def test_analyzer_keys():
    assert ANALYZERS.keys() == ["ar", "basic", "bg", "classic", "de", "en", "fr", "ru", "standard"]
    assert ANALYZERS.get("ru").cls is RussianAnalyzer
    assert ANALYZERS.get("basic").is_custom


def test_standard_and_classic_take_no_stem_exclusion():
    assert not ANALYZERS.get("standard").accepts_stem_exclusion
    assert not ANALYZERS.get("classic").accepts_stem_exclusion
    assert ANALYZERS.get("standard").cls is StandardAnalyzer


def test_keys_are_normalized():
    assert TOKENIZERS.get("WhiteSpace") is WhitespaceTokenizer
    assert "path_hierarchy" in TOKENIZERS
    assert "caching_token" in FILTERS


def test_unknown_key_lists_known_keys():
    with pytest.raises(ConfigurationError, match="whitespace"):
        TOKENIZERS.get("ngram")


def test_non_string_key():
    with pytest.raises(ConfigurationError):
        STEMMERS.get(None)
    assert None not in STEMMERS


def test_snowball_filter_cannot_wrap_a_bare_stream():
    entry = FILTERS.get("snowball")
    assert entry.cls is SnowballFilter
    assert not entry.wraps_stream
    assert FILTERS.get("standard").wraps_stream


def test_stemmer_kinds_come_from_the_entry():
    assert STEMMERS.get("ru").kind is StemmerKind.FULL
    assert STEMMERS.get("ru").factory is RussianStemmer
    assert STEMMERS.get("ru-light").kind is StemmerKind.LIGHT
    assert STEMMERS.get("ru-light").factory is RussianLightStemFilter
    assert STEMMERS.get("en-min").kind is StemmerKind.LIGHT


def test_registries_are_read_only():
    with pytest.raises(TypeError):
        TOKENIZERS.entries["ngram"] = WhitespaceTokenizer


def test_custom_registry():
    registry = ComponentRegistry("widget", {"Foo_Bar": 1})
    assert registry.keys() == ["foo-bar"]
    assert registry.get("FOO-BAR") == 1
    assert list(registry) == ["foo-bar"]
    assert len(registry) == 1
