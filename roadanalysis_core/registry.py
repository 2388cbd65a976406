"""RoadAnalysis Registry - Symbolic Component Lookup.

Maps the symbolic keys used in analyzer configurations to concrete
analyzer, tokenizer, filter and stemmer implementations. The tables are
filled once at import time and are read-only afterwards, so concurrent
lookups need no locking.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Callable, Generic, Iterator, List, Mapping, Optional, Type, TypeVar

from roadanalysis_core.analyzers.base import Analyzer, TokenFilter, Tokenizer
from roadanalysis_core.analyzers.filters import (
    CachingTokenFilter,
    ClassicFilter,
    StandardFilter,
)
from roadanalysis_core.analyzers.standard import (
    ArabicAnalyzer,
    BulgarianAnalyzer,
    ClassicAnalyzer,
    EnglishAnalyzer,
    FrenchAnalyzer,
    GermanAnalyzer,
    RussianAnalyzer,
    StandardAnalyzer,
)
from roadanalysis_core.analyzers.stemmers import (
    EnglishMinimalStemFilter,
    EnglishStemmer,
    FrenchLightStemFilter,
    FrenchStemmer,
    GermanLightStemFilter,
    GermanStemmer,
    RussianLightStemFilter,
    RussianStemmer,
    SnowballFilter,
)
from roadanalysis_core.analyzers.tokenizers import (
    ClassicTokenizer,
    KeywordTokenizer,
    LetterTokenizer,
    LowerCaseTokenizer,
    PathHierarchyTokenizer,
    StandardTokenizer,
    WhitespaceTokenizer,
    WikipediaTokenizer,
)
from roadanalysis_core.errors import ConfigurationError

E = TypeVar("E")


class StemmerKind(Enum):
    """How a stemmer is attached to a pipeline."""

    FULL = auto()   # stemmer object applied through SnowballFilter
    LIGHT = auto()  # self-contained stem filter wrapping the stream


@dataclass(frozen=True)
class AnalyzerEntry:
    """A pre-built analyzer and the constructor forms it supports.

    Attributes:
        cls: Analyzer class, or None for the custom pipeline sentinel
        accepts_stop_words: Supports ``cls(stop_words)``
        accepts_stem_exclusion: Supports ``cls(stop_words, stem_exclusion_words)``
    """

    cls: Optional[Type[Analyzer]]
    accepts_stop_words: bool = True
    accepts_stem_exclusion: bool = True

    @property
    def is_custom(self) -> bool:
        return self.cls is None


@dataclass(frozen=True)
class FilterEntry:
    """A primary token filter.

    Attributes:
        cls: Filter class
        wraps_stream: Constructible from the wrapped stream alone
    """

    cls: Type[TokenFilter]
    wraps_stream: bool = True


@dataclass(frozen=True)
class StemmerEntry:
    """A stemmer and how it is attached.

    Attributes:
        factory: Zero-argument stemmer (FULL) or one-argument stem filter (LIGHT)
        kind: Attachment strategy
    """

    factory: Callable
    kind: StemmerKind


class ComponentRegistry(Generic[E]):
    """Read-only lookup table of configuration keys.

    Keys are matched case-insensitively, and underscores are accepted
    in place of hyphens.
    """

    def __init__(self, name: str, entries: Mapping[str, E]):
        """Initialize registry.

        Args:
            name: Registry name used in error messages
            entries: Key to entry mapping
        """
        self.name = name
        self._entries: Mapping[str, E] = MappingProxyType(
            {self.normalize_key(k): v for k, v in entries.items()}
        )

    @staticmethod
    def normalize_key(key: str) -> str:
        """Normalize a key to its canonical spelling."""
        return str(key).strip().lower().replace("_", "-")

    def get(self, key: str) -> E:
        """Look up an entry.

        Args:
            key: Configuration key

        Returns:
            Registered entry

        Raises:
            ConfigurationError: If the key is not registered
        """
        if not isinstance(key, str):
            raise ConfigurationError(f"Unknown {self.name}: {key!r}")
        try:
            return self._entries[self.normalize_key(key)]
        except KeyError:
            raise ConfigurationError(
                f"Unknown {self.name}: {key!r} (known: {', '.join(self.keys())})"
            ) from None

    def keys(self) -> List[str]:
        """List registered keys."""
        return sorted(self._entries)

    @property
    def entries(self) -> Mapping[str, E]:
        """Read-only view of all entries."""
        return self._entries

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.normalize_key(key) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._entries)


ANALYZERS: ComponentRegistry[AnalyzerEntry] = ComponentRegistry("analyzer class", {
    "basic": AnalyzerEntry(cls=None),
    "standard": AnalyzerEntry(StandardAnalyzer, accepts_stem_exclusion=False),
    "classic": AnalyzerEntry(ClassicAnalyzer, accepts_stem_exclusion=False),
    "ar": AnalyzerEntry(ArabicAnalyzer),
    "bg": AnalyzerEntry(BulgarianAnalyzer),
    "fr": AnalyzerEntry(FrenchAnalyzer),
    "de": AnalyzerEntry(GermanAnalyzer),
    "en": AnalyzerEntry(EnglishAnalyzer),
    "ru": AnalyzerEntry(RussianAnalyzer),
})

TOKENIZERS: ComponentRegistry[Type[Tokenizer]] = ComponentRegistry("tokenizer", {
    "standard": StandardTokenizer,
    "whitespace": WhitespaceTokenizer,
    "letter": LetterTokenizer,
    "classic": ClassicTokenizer,
    "keyword": KeywordTokenizer,
    "lowercase": LowerCaseTokenizer,
    "path-hierarchy": PathHierarchyTokenizer,
    "wikipedia": WikipediaTokenizer,
})

FILTERS: ComponentRegistry[FilterEntry] = ComponentRegistry("filter", {
    "standard": FilterEntry(StandardFilter),
    "snowball": FilterEntry(SnowballFilter, wraps_stream=False),
    "classic": FilterEntry(ClassicFilter),
    "caching-token": FilterEntry(CachingTokenFilter),
})

STEMMERS: ComponentRegistry[StemmerEntry] = ComponentRegistry("stemmer", {
    "en": StemmerEntry(EnglishStemmer, StemmerKind.FULL),
    "fr": StemmerEntry(FrenchStemmer, StemmerKind.FULL),
    "de": StemmerEntry(GermanStemmer, StemmerKind.FULL),
    "ru": StemmerEntry(RussianStemmer, StemmerKind.FULL),
    "en-min": StemmerEntry(EnglishMinimalStemFilter, StemmerKind.LIGHT),
    "fr-light": StemmerEntry(FrenchLightStemFilter, StemmerKind.LIGHT),
    "de-light": StemmerEntry(GermanLightStemFilter, StemmerKind.LIGHT),
    "ru-light": StemmerEntry(RussianLightStemFilter, StemmerKind.LIGHT),
})


__all__ = [
    "StemmerKind",
    "AnalyzerEntry",
    "FilterEntry",
    "StemmerEntry",
    "ComponentRegistry",
    "ANALYZERS",
    "TOKENIZERS",
    "FILTERS",
    "STEMMERS",
]
