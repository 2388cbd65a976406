"""RoadAnalysis Standard Analyzers - Pre-configured Analyzers.

Ready-made analyzers for general text and for specific languages.
Each accepts an optional stop word set; the language analyzers also
accept a set of words that must never be stemmed.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from functools import lru_cache
from typing import AbstractSet, ClassVar, Optional

from roadanalysis_core.analyzers.base import (
    Analyzer,
    TokenStream,
    TokenStreamComponents,
)
from roadanalysis_core.analyzers.tokenizers import (
    StandardTokenizer,
    ClassicTokenizer,
)
from roadanalysis_core.analyzers.filters import (
    StandardFilter,
    ClassicFilter,
    LowerCaseFilter,
    StopFilter,
    SetKeywordMarkerFilter,
    EnglishPossessiveFilter,
    ElisionFilter,
)
from roadanalysis_core.analyzers.stemmers import (
    SnowballFilter,
    PorterStemFilter,
    FrenchLightStemFilter,
    GermanLightStemFilter,
    GermanNormalizationFilter,
    BulgarianStemFilter,
    ArabicNormalizationFilter,
    ArabicStemFilter,
    RussianStemmer,
)
from roadanalysis_core.wordsets import WordSet, resource_to_wordset

# Default English stop words
ENGLISH_STOP_WORDS: WordSet = frozenset([
    "a", "an", "and", "are", "as", "at", "be", "but", "by",
    "for", "if", "in", "into", "is", "it", "no", "not", "of",
    "on", "or", "such", "that", "the", "their", "then", "there",
    "these", "they", "this", "to", "was", "will", "with",
])


@lru_cache(maxsize=None)
def default_stop_words(name: str) -> WordSet:
    """Load a bundled stop word list once per process.

    Args:
        name: List name, e.g. "russian"

    Returns:
        Frozen set of stop words
    """
    return resource_to_wordset(f"stopwords/{name}.txt")


class StopwordAnalyzerBase(Analyzer):
    """Base class for analyzers with a configurable stop word set."""

    def __init__(self, stop_words: Optional[AbstractSet[str]] = None):
        """Initialize analyzer.

        Args:
            stop_words: Stop word set, or None for the analyzer default
        """
        super().__init__()
        self.stop_words: WordSet = (
            frozenset(stop_words) if stop_words is not None
            else self.get_default_stop_set()
        )

    @classmethod
    def get_default_stop_set(cls) -> WordSet:
        """Stop words used when none are supplied."""
        return frozenset()


class StandardAnalyzer(StopwordAnalyzerBase):
    """Standard analyzer for general text.

    Uses standard tokenization with lowercase and stop word removal.
    """

    def __init__(
        self,
        stop_words: Optional[AbstractSet[str]] = None,
        *,
        max_token_length: int = 255,
    ):
        """Initialize standard analyzer.

        Args:
            stop_words: Custom stop word set
            max_token_length: Maximum token length
        """
        super().__init__(stop_words)
        self.max_token_length = max_token_length

    @classmethod
    def get_default_stop_set(cls) -> WordSet:
        return ENGLISH_STOP_WORDS

    def create_components(self, field_name: str) -> TokenStreamComponents:
        source = StandardTokenizer(max_token_length=self.max_token_length)
        result: TokenStream = StandardFilter(source)
        result = LowerCaseFilter(result)
        result = StopFilter(result, self.stop_words)
        return TokenStreamComponents(source, result)


class ClassicAnalyzer(StandardAnalyzer):
    """Classic analyzer.

    Classic grammar tokenization that keeps e-mails, hosts and
    acronyms intact, followed by lowercase and stop word removal.
    """

    def create_components(self, field_name: str) -> TokenStreamComponents:
        source = ClassicTokenizer(max_token_length=self.max_token_length)
        result: TokenStream = ClassicFilter(source)
        result = LowerCaseFilter(result)
        result = StopFilter(result, self.stop_words)
        return TokenStreamComponents(source, result)


class LanguageAnalyzer(StopwordAnalyzerBase):
    """Base class for language-specific analyzers.

    Subclasses name their bundled stop word list and build their
    filter chain in :meth:`create_components`.
    """

    STOPWORDS_RESOURCE: ClassVar[Optional[str]] = None

    def __init__(
        self,
        stop_words: Optional[AbstractSet[str]] = None,
        stem_exclusion_words: Optional[AbstractSet[str]] = None,
    ):
        """Initialize language analyzer.

        Args:
            stop_words: Stop word set, or None for the language default
            stem_exclusion_words: Words protected from stemming
        """
        super().__init__(stop_words)
        self.stem_exclusion_words: WordSet = frozenset(stem_exclusion_words or ())

    @classmethod
    def get_default_stop_set(cls) -> WordSet:
        if cls.STOPWORDS_RESOURCE is None:
            return frozenset()
        return default_stop_words(cls.STOPWORDS_RESOURCE)

    def _mark_keywords(self, stream: TokenStream) -> TokenStream:
        if self.stem_exclusion_words:
            return SetKeywordMarkerFilter(stream, self.stem_exclusion_words)
        return stream


class EnglishAnalyzer(LanguageAnalyzer):
    """English language analyzer with Porter stemming."""

    @classmethod
    def get_default_stop_set(cls) -> WordSet:
        return ENGLISH_STOP_WORDS

    def create_components(self, field_name: str) -> TokenStreamComponents:
        source = StandardTokenizer()
        result: TokenStream = StandardFilter(source)
        result = EnglishPossessiveFilter(result)
        result = LowerCaseFilter(result)
        result = StopFilter(result, self.stop_words)
        result = self._mark_keywords(result)
        result = PorterStemFilter(result)
        return TokenStreamComponents(source, result)


class FrenchAnalyzer(LanguageAnalyzer):
    """French language analyzer with elision removal and light stemming."""

    STOPWORDS_RESOURCE = "french"

    def create_components(self, field_name: str) -> TokenStreamComponents:
        source = StandardTokenizer()
        result: TokenStream = StandardFilter(source)
        result = ElisionFilter(result)
        result = LowerCaseFilter(result)
        result = StopFilter(result, self.stop_words)
        result = self._mark_keywords(result)
        result = FrenchLightStemFilter(result)
        return TokenStreamComponents(source, result)


class GermanAnalyzer(LanguageAnalyzer):
    """German language analyzer with spelling normalization and light stemming."""

    STOPWORDS_RESOURCE = "german"

    def create_components(self, field_name: str) -> TokenStreamComponents:
        source = StandardTokenizer()
        result: TokenStream = StandardFilter(source)
        result = LowerCaseFilter(result)
        result = StopFilter(result, self.stop_words)
        result = self._mark_keywords(result)
        result = GermanNormalizationFilter(result)
        result = GermanLightStemFilter(result)
        return TokenStreamComponents(source, result)


class RussianAnalyzer(LanguageAnalyzer):
    """Russian language analyzer with Snowball stemming."""

    STOPWORDS_RESOURCE = "russian"

    def create_components(self, field_name: str) -> TokenStreamComponents:
        source = StandardTokenizer()
        result: TokenStream = StandardFilter(source)
        result = LowerCaseFilter(result)
        result = StopFilter(result, self.stop_words)
        result = self._mark_keywords(result)
        result = SnowballFilter(result, RussianStemmer())
        return TokenStreamComponents(source, result)


class ArabicAnalyzer(LanguageAnalyzer):
    """Arabic language analyzer with orthographic normalization and stemming."""

    STOPWORDS_RESOURCE = "arabic"

    def create_components(self, field_name: str) -> TokenStreamComponents:
        source = StandardTokenizer()
        result: TokenStream = LowerCaseFilter(source)
        result = StopFilter(result, self.stop_words)
        result = ArabicNormalizationFilter(result)
        result = self._mark_keywords(result)
        result = ArabicStemFilter(result)
        return TokenStreamComponents(source, result)


class BulgarianAnalyzer(LanguageAnalyzer):
    """Bulgarian language analyzer with light stemming."""

    STOPWORDS_RESOURCE = "bulgarian"

    def create_components(self, field_name: str) -> TokenStreamComponents:
        source = StandardTokenizer()
        result: TokenStream = StandardFilter(source)
        result = LowerCaseFilter(result)
        result = StopFilter(result, self.stop_words)
        result = self._mark_keywords(result)
        result = BulgarianStemFilter(result)
        return TokenStreamComponents(source, result)


__all__ = [
    "ENGLISH_STOP_WORDS",
    "default_stop_words",
    "StopwordAnalyzerBase",
    "StandardAnalyzer",
    "ClassicAnalyzer",
    "LanguageAnalyzer",
    "EnglishAnalyzer",
    "FrenchAnalyzer",
    "GermanAnalyzer",
    "RussianAnalyzer",
    "ArabicAnalyzer",
    "BulgarianAnalyzer",
]
