"""RoadAnalysis Configuration - Analyzer Build Options.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import AbstractSet, Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from roadanalysis_core.analyzers.base import Tokenizer
from roadanalysis_core.errors import ConfigurationError
from roadanalysis_core.registry import ANALYZERS
from roadanalysis_core.version import Version
from roadanalysis_core.wordsets import WordSet

CUSTOM_ANALYZER_CLASS = "basic"

# Option names accepted by AnalyzerConfig.from_dict, keyed by their
# normalized spelling
_OPTION_ALIASES = {
    "class": "analyzer_class",
    "analyzer_class": "analyzer_class",
    "version": "version",
    "stop_words": "stop_words",
    "stem_exclusion_words": "stem_exclusion_words",
    "tokenizer": "tokenizer",
    "filter": "filter",
    "stemmer": "stemmer",
    "lower_case": "lower_case",
    "length_filter": "length_filter",
}


def _freeze_words(words: Optional[Iterable[str]], option: str) -> Optional[WordSet]:
    if words is None:
        return None
    if isinstance(words, (str, bytes)):
        raise ConfigurationError(f"{option} must be a collection of words, not a string")
    return frozenset(words)


def _normalize_option(name: str) -> str:
    return name.strip().lower().replace("-", "_")


def _resolve_options(data: Mapping[str, Any]) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {}
    for name, value in data.items():
        option = _OPTION_ALIASES.get(_normalize_option(name))
        if option is None:
            known = sorted(set(_OPTION_ALIASES) - {"analyzer_class"})
            raise ConfigurationError(
                f"Unknown analyzer option: {name!r} (known: {', '.join(known)})"
            )
        kwargs[option] = value
    return kwargs


@dataclass(frozen=True)
class AnalyzerConfig:
    """Analyzer build configuration.

    Options only used by custom pipelines (tokenizer, filter, stemmer,
    lower_case, length_filter) are ignored when ``analyzer_class``
    names a pre-built analyzer.

    Attributes:
        analyzer_class: Pre-built analyzer key, or "basic" for a custom pipeline
        version: Version tag given to the built analyzer
        stop_words: Words removed from the stream
        stem_exclusion_words: Words protected from stemming
        tokenizer: Tokenizer key, or a tokenizer instance used as a prototype
        filter: Primary filter key
        stemmer: Stemmer key
        lower_case: Insert a lowercasing stage
        length_filter: Inclusive (min, max) token length bounds
    """

    analyzer_class: str = CUSTOM_ANALYZER_CLASS
    version: Version = field(default_factory=lambda: Version.LATEST)
    stop_words: Optional[AbstractSet[str]] = None
    stem_exclusion_words: Optional[AbstractSet[str]] = None
    tokenizer: Union[str, Tokenizer] = "standard"
    filter: str = "standard"
    stemmer: Optional[str] = None
    lower_case: bool = True
    length_filter: Optional[Tuple[int, int]] = None

    def __post_init__(self):
        # Freeze word sets so configs stay immutable and hashable by value
        object.__setattr__(self, "stop_words", _freeze_words(self.stop_words, "stop_words"))
        object.__setattr__(
            self,
            "stem_exclusion_words",
            _freeze_words(self.stem_exclusion_words, "stem_exclusion_words"),
        )
        object.__setattr__(self, "version", Version.parse(self.version))
        if self.length_filter is not None and not isinstance(self.length_filter, tuple):
            try:
                object.__setattr__(self, "length_filter", tuple(self.length_filter))
            except TypeError as e:
                raise ConfigurationError(
                    f"length_filter must be a (min, max) pair, got {self.length_filter!r}"
                ) from e

    @property
    def is_custom(self) -> bool:
        """Whether this config describes a custom pipeline.

        Raises:
            ConfigurationError: If the analyzer class is unknown
        """
        return ANALYZERS.get(self.analyzer_class).is_custom

    def replace(self, **changes: Any) -> "AnalyzerConfig":
        """Return a copy with some options changed."""
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "class": self.analyzer_class,
            "version": str(self.version),
            "stop_words": sorted(self.stop_words) if self.stop_words is not None else None,
            "stem_exclusion_words": (
                sorted(self.stem_exclusion_words)
                if self.stem_exclusion_words is not None else None
            ),
            "tokenizer": self.tokenizer if isinstance(self.tokenizer, str) else type(self.tokenizer).__name__,
            "filter": self.filter,
            "stemmer": self.stemmer,
            "lower_case": self.lower_case,
            "length_filter": list(self.length_filter) if self.length_filter else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnalyzerConfig":
        """Create from a mapping of option names.

        Option names may use hyphens or underscores, and the analyzer
        class may be given as "class".

        Args:
            data: Option mapping

        Returns:
            AnalyzerConfig

        Raises:
            ConfigurationError: If an option name is unknown
        """
        return cls(**_resolve_options(data))

    def with_options(self, data: Mapping[str, Any]) -> "AnalyzerConfig":
        """Return a copy with options from a mapping applied.

        Args:
            data: Option mapping, named as for :meth:`from_dict`

        Returns:
            AnalyzerConfig
        """
        return self.replace(**_resolve_options(data))


__all__ = [
    "CUSTOM_ANALYZER_CLASS",
    "AnalyzerConfig",
]
