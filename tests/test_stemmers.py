import pytest

from roadanalysis_core.analyzers.filters import SetKeywordMarkerFilter
from roadanalysis_core.analyzers.stemmers import (
    BulgarianStemFilter,
    EnglishMinimalStemmer,
    FrenchLightStemmer,
    GermanLightStemmer,
    GermanNormalizationFilter,
    PorterStemFilter,
    RussianLightStemmer,
    RussianStemmer,
    SnowballFilter,
)
from roadanalysis_core.analyzers.tokenizers import WhitespaceTokenizer


def source(text):
    tokenizer = WhitespaceTokenizer()
    tokenizer.set_text(text)
    return tokenizer


@pytest.mark.parametrize("word, stem", [
    ("queries", "query"),
    ("cats", "cat"),
    ("glass", "glass"),
    ("bus", "bus"),
])
def test_english_minimal(word, stem):
    assert EnglishMinimalStemmer().stem(word) == stem


@pytest.mark.parametrize("word, stem", [
    ("häuser", "haus"),
    ("katzen", "katz"),
])
def test_german_light(word, stem):
    assert GermanLightStemmer().stem(word) == stem


def test_french_light_plural():
    assert FrenchLightStemmer().stem("chevaux") == "cheval"


def test_russian_light():
    stemmer = RussianLightStemmer()
    assert stemmer.stem("алма") == "алм"
    assert stemmer.stem("ата") == "ата"


def test_snowball_filter_with_stemmer_object():
    stream = SnowballFilter(source("алма ата йошкар ола"), RussianStemmer())
    assert stream.get_texts() == ["алм", "ат", "йошкар", "ол"]


def test_snowball_filter_with_language_name():
    stream = SnowballFilter(source("алма ата"), "russian")
    assert stream.get_texts() == ["алм", "ат"]


def test_snowball_filter_requires_a_stemmer():
    with pytest.raises(TypeError):
        SnowballFilter(source("x"))


def test_stem_filters_skip_keywords():
    marked = SetKeywordMarkerFilter(source("алма ата"), frozenset(["алма"]))
    assert SnowballFilter(marked, RussianStemmer()).get_texts() == ["алма", "ат"]


def test_porter_stem_filter():
    assert PorterStemFilter(source("running caresses")).get_texts() == ["run", "caress"]


def test_bulgarian_stem_filter_leaves_short_words():
    assert BulgarianStemFilter(source("на")).get_texts() == ["на"]


def test_german_normalization():
    assert GermanNormalizationFilter(source("straße häuser")).get_texts() == ["strasse", "hauser"]


def test_stem_filters_keep_case():
    assert SnowballFilter(source("Running RUNS"), "english").get_texts() == ["Run", "RUN"]
    assert BulgarianStemFilter(source("на")).get_texts() == ["на"]
