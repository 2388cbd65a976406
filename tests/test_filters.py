import pytest

from roadanalysis_core.analyzers.base import pipeline_stages
from roadanalysis_core.analyzers.filters import (
    CachingTokenFilter,
    ClassicFilter,
    ElisionFilter,
    EnglishPossessiveFilter,
    FilteringTokenFilter,
    LengthFilter,
    LowerCaseFilter,
    SetKeywordMarkerFilter,
    StandardFilter,
    StopFilter,
)
from roadanalysis_core.analyzers.tokenizers import ClassicTokenizer, WhitespaceTokenizer


def source(text):
    tokenizer = WhitespaceTokenizer()
    tokenizer.set_text(text)
    return tokenizer


def test_standard_filter_passes_tokens_through():
    assert StandardFilter(source("A b")).get_texts() == ["A", "b"]


def test_classic_filter():
    tokenizer = ClassicTokenizer()
    tokenizer.set_text("John's I.B.M.")
    assert ClassicFilter(tokenizer).get_texts() == ["John", "IBM"]


def test_lowercase_filter():
    assert LowerCaseFilter(source("Алма-Ата ABC")).get_texts() == ["алма-ата", "abc"]


def test_length_filter_bounds_are_inclusive():
    stream = LengthFilter(source("a bb ccc dddd"), 2, 3)
    assert stream.get_texts() == ["bb", "ccc"]


def test_stop_filter_carries_position_increments():
    tokens = StopFilter(source("the quick the brown"), frozenset(["the"])).to_list()
    assert [t.text for t in tokens] == ["quick", "brown"]
    assert [t.position_increment for t in tokens] == [2, 2]


def test_stop_filter_case_sensitivity():
    assert StopFilter(source("The the"), frozenset(["the"])).get_texts() == ["The"]
    assert StopFilter(source("The the"), frozenset(["the"]), ignore_case=True).get_texts() == []


def test_keyword_marker():
    tokens = SetKeywordMarkerFilter(source("keep stem"), frozenset(["keep"])).to_list()
    assert [(t.text, t.keyword) for t in tokens] == [("keep", True), ("stem", False)]


def test_english_possessive():
    assert EnglishPossessiveFilter(source("John's cat’s dogs")).get_texts() == ["John", "cat", "dogs"]


def test_elision():
    assert ElisionFilter(source("l'école qu'il aujourd'hui")).get_texts() == ["école", "il", "aujourd'hui"]
    assert ElisionFilter(source("l'école"), articles=["x"]).get_texts() == ["l'école"]


def test_caching_filter_replays_tokens():
    calls = []

    class Counting(StandardFilter):
        def filter(self, tokens):
            calls.append(1)
            return tokens

    stream = CachingTokenFilter(Counting(source("a b")))
    assert stream.get_texts() == ["a", "b"]
    assert stream.get_texts() == ["a", "b"]
    assert len(calls) == 1


def test_filters_are_lazy():
    pulled = []

    def spy(tokens):
        for token in tokens:
            pulled.append(token.text)
            yield token

    class Spy(StandardFilter):
        def filter(self, tokens):
            return spy(tokens)

    iterator = iter(LowerCaseFilter(Spy(source("A B C"))))
    assert next(iterator).text == "a"
    assert pulled == ["A"]


def test_pipeline_stages_walks_back_to_the_source():
    tokenizer = source("x")
    lower = LowerCaseFilter(tokenizer)
    stop = StopFilter(lower, frozenset())
    assert pipeline_stages(stop) == [tokenizer, lower, stop]


def test_filtering_filter_requires_accept():
    with pytest.raises(TypeError):
        FilteringTokenFilter(source("x"))
