import pytest

from roadanalysis_core.analyzers.tokenizers import WhitespaceTokenizer
from roadanalysis_core.config import AnalyzerConfig
from roadanalysis_core.errors import ConfigurationError
from roadanalysis_core.version import Version


def test_defaults_describe_a_custom_pipeline():
    config = AnalyzerConfig()
    assert config.is_custom
    assert config.tokenizer == "standard"
    assert config.filter == "standard"
    assert config.lower_case is True
    assert config.stemmer is None
    assert config.version == Version.LATEST


def test_word_sets_are_frozen():
    config = AnalyzerConfig(stop_words=["a", "b"], stem_exclusion_words={"c"})
    assert config.stop_words == frozenset(["a", "b"])
    assert isinstance(config.stem_exclusion_words, frozenset)


def test_empty_word_set_is_kept():
    assert AnalyzerConfig(stop_words=[]).stop_words == frozenset()


def test_string_word_set_is_rejected():
    with pytest.raises(ConfigurationError):
        AnalyzerConfig(stop_words="the")


def test_version_is_parsed():
    assert AnalyzerConfig(version="4.2").version == Version(4, 2)
    with pytest.raises(ConfigurationError):
        AnalyzerConfig(version="four")


def test_length_filter_becomes_a_tuple():
    assert AnalyzerConfig(length_filter=[2, 10]).length_filter == (2, 10)
    with pytest.raises(ConfigurationError):
        AnalyzerConfig(length_filter=3)


def test_from_dict_accepts_aliases():
    config = AnalyzerConfig.from_dict({
        "class": "ru",
        "stop-words": ["и"],
        "Stem_Exclusion_Words": ["алма"],
    })
    assert config.analyzer_class == "ru"
    assert config.stop_words == frozenset(["и"])
    assert config.stem_exclusion_words == frozenset(["алма"])


def test_from_dict_rejects_unknown_options():
    with pytest.raises(ConfigurationError, match="stemer"):
        AnalyzerConfig.from_dict({"stemer": "ru"})


def test_replace_and_with_options():
    config = AnalyzerConfig(stemmer="ru")
    changed = config.with_options({"tokenizer": "whitespace"})
    assert changed.tokenizer == "whitespace"
    assert changed.stemmer == "ru"
    assert config.tokenizer == "standard"
    assert config.replace(lower_case=False).lower_case is False


def test_to_dict():
    data = AnalyzerConfig(
        tokenizer=WhitespaceTokenizer(),
        stop_words={"b", "a"},
        length_filter=(1, 5),
    ).to_dict()
    assert data["class"] == "basic"
    assert data["tokenizer"] == "WhitespaceTokenizer"
    assert data["stop_words"] == ["a", "b"]
    assert data["stem_exclusion_words"] is None
    assert data["length_filter"] == [1, 5]
    assert data["version"] == str(Version.LATEST)


def test_configs_are_immutable():
    config = AnalyzerConfig()
    with pytest.raises(AttributeError):
        config.stemmer = "ru"


def test_is_custom_follows_the_analyzer_registry():
    assert AnalyzerConfig(analyzer_class=" Basic ").is_custom
    assert not AnalyzerConfig(analyzer_class="ru").is_custom
    with pytest.raises(ConfigurationError):
        AnalyzerConfig(analyzer_class="klingon").is_custom
