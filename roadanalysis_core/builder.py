"""RoadAnalysis Builder - Analyzer Construction from Configuration.

Turns an :class:`AnalyzerConfig` into a ready-to-use analyzer. A
config either names a pre-built analyzer, which is constructed with
the word sets it supplies, or asks for a custom pipeline, which is
assembled from the component registries.

Custom pipelines always run their stages in this order:

    tokenizer -> primary filter -> lowercase -> length -> stop words
              -> keyword marker -> stemmer

Stages whose option is unset are left out. All keys are resolved and
checked when the analyzer is built, so a bad configuration fails
before any text is analyzed.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple, Type, Union

from roadanalysis_core.analyzers.base import (
    Analyzer,
    TokenFilter,
    TokenStream,
    TokenStreamComponents,
    Tokenizer,
)
from roadanalysis_core.analyzers.filters import (
    LengthFilter,
    LowerCaseFilter,
    SetKeywordMarkerFilter,
    StopFilter,
)
from roadanalysis_core.analyzers.stemmers import SnowballFilter
from roadanalysis_core.config import AnalyzerConfig
from roadanalysis_core.errors import ConfigurationError, ConstructionError
from roadanalysis_core.registry import (
    ANALYZERS,
    FILTERS,
    STEMMERS,
    TOKENIZERS,
    AnalyzerEntry,
    StemmerKind,
)
from roadanalysis_core.version import Version
from roadanalysis_core.wordsets import WordSet

logger = logging.getLogger(__name__)

# Analyzer classes whose constructors take no stem exclusion set
NO_STEM_EXCLUSION_CLASSES = frozenset(["standard", "classic"])

# Options that only shape custom pipelines
_PIPELINE_OPTIONS = ("tokenizer", "filter", "stemmer", "lower_case", "length_filter")


# ---------------------------------------------------------------------------
# Word set arguments for pre-built analyzers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NoWordSets:
    """Build with the analyzer's own defaults: ``cls()``."""


@dataclass(frozen=True)
class StopWordsOnly:
    """Build with a stop word set: ``cls(stop_words)``."""

    stop_words: WordSet


@dataclass(frozen=True)
class StopAndExclusionWords:
    """Build with both word sets: ``cls(stop_words, stem_exclusion_words)``."""

    stop_words: WordSet
    stem_exclusion_words: WordSet


WordSetArguments = Union[NoWordSets, StopWordsOnly, StopAndExclusionWords]


def word_set_arguments(
    stop_words: Optional[WordSet],
    stem_exclusion_words: Optional[WordSet],
) -> WordSetArguments:
    """Choose the constructor form for a pre-built analyzer.

    Presence decides, not emptiness: an empty stop word set still
    selects the one-argument form.
    """
    if stop_words is not None and stem_exclusion_words is not None:
        return StopAndExclusionWords(stop_words, stem_exclusion_words)
    if stop_words is not None:
        return StopWordsOnly(stop_words)
    return NoWordSets()


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _validate_length_filter(bounds: Any) -> Optional[Tuple[int, int]]:
    if bounds is None:
        return None
    if len(bounds) != 2:
        raise ConfigurationError(f"length_filter must be a (min, max) pair, got {bounds!r}")

    min_length, max_length = bounds
    for value in (min_length, max_length):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"length_filter bounds must be integers, got {bounds!r}")
    if min_length < 0:
        raise ConfigurationError(f"length_filter minimum must not be negative, got {min_length}")
    if min_length > max_length:
        raise ConfigurationError(
            f"length_filter minimum {min_length} is greater than maximum {max_length}"
        )
    return min_length, max_length


def validate_config(config: AnalyzerConfig) -> AnalyzerEntry:
    """Check a configuration before anything is built.

    Args:
        config: Analyzer configuration

    Returns:
        Registry entry of the configured analyzer class

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    entry = ANALYZERS.get(config.analyzer_class)

    if (
        ANALYZERS.normalize_key(config.analyzer_class) in NO_STEM_EXCLUSION_CLASSES
        and config.stem_exclusion_words is not None
    ):
        raise ConfigurationError(
            f"Can't set stem_exclusion_words for the {config.analyzer_class!r} analyzer"
        )

    if not entry.is_custom:
        return entry

    if not isinstance(config.tokenizer, Tokenizer):
        TOKENIZERS.get(config.tokenizer)
    FILTERS.get(config.filter)
    if config.stemmer is not None:
        STEMMERS.get(config.stemmer)
    if not isinstance(config.lower_case, bool):
        raise ConfigurationError(f"lower_case must be a boolean, got {config.lower_case!r}")
    _validate_length_filter(config.length_filter)

    return entry


# ---------------------------------------------------------------------------
# Pre-built analyzers
# ---------------------------------------------------------------------------


def _construction_error(message: str) -> ConstructionError:
    logger.error(message)
    return ConstructionError(message)


def build_prebuilt_analyzer(
    analyzer_class: str,
    stop_words: Optional[WordSet] = None,
    stem_exclusion_words: Optional[WordSet] = None,
) -> Analyzer:
    """Construct a pre-built analyzer.

    Args:
        analyzer_class: Analyzer registry key
        stop_words: Stop word set
        stem_exclusion_words: Words protected from stemming

    Returns:
        New analyzer

    Raises:
        ConfigurationError: If the key is unknown or names the custom pipeline
        ConstructionError: If the analyzer lacks the required constructor form
    """
    entry = ANALYZERS.get(analyzer_class)
    if entry.is_custom:
        raise ConfigurationError(f"{analyzer_class!r} is not a pre-built analyzer")

    if stop_words is None and stem_exclusion_words is not None:
        logger.warning(
            f"Ignoring stem_exclusion_words for {analyzer_class!r}: "
            "they are only applied together with stop_words"
        )

    args = word_set_arguments(stop_words, stem_exclusion_words)
    name = entry.cls.__name__

    if isinstance(args, StopAndExclusionWords):
        if not entry.accepts_stem_exclusion:
            raise _construction_error(
                f"{name} has no (stop_words, stem_exclusion_words) constructor "
                f"(analyzer class {analyzer_class!r})"
            )
        logger.debug(f"Building {name} with stop and stem exclusion words")
        return entry.cls(args.stop_words, args.stem_exclusion_words)

    if isinstance(args, StopWordsOnly):
        if not entry.accepts_stop_words:
            raise _construction_error(
                f"{name} has no (stop_words) constructor (analyzer class {analyzer_class!r})"
            )
        logger.debug(f"Building {name} with {len(args.stop_words)} stop words")
        return entry.cls(args.stop_words)

    logger.debug(f"Building {name} with default word sets")
    return entry.cls()


# ---------------------------------------------------------------------------
# Custom pipelines
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StemmerChoice:
    """A stemmer resolved from its configuration key.

    Attributes:
        key: Canonical stemmer key
        kind: FULL stemmers go through SnowballFilter, LIGHT ones wrap the stream
        factory: Stemmer class (FULL) or stem filter class (LIGHT)
    """

    key: str
    kind: StemmerKind
    factory: Callable

    def wrap(self, stream: TokenStream) -> TokenFilter:
        """Attach this stemmer to a stream."""
        if self.kind is StemmerKind.LIGHT:
            return self.factory(stream)
        return SnowballFilter(stream, self.factory())


@dataclass(frozen=True)
class PipelinePlan:
    """Resolved, immutable description of a custom pipeline.

    Attributes:
        tokenizer_name: Tokenizer key or prototype class name
        tokenizer_factory: Builds a fresh tokenizer per call
        filter_name: Canonical primary filter key
        filter_cls: Primary filter class
        lower_case: Insert LowerCaseFilter
        length_bounds: Inclusive LengthFilter bounds
        stop_words: StopFilter word set
        stem_exclusion_words: SetKeywordMarkerFilter word set
        stemmer: Resolved stemmer
    """

    tokenizer_name: str
    tokenizer_factory: Callable[[], Tokenizer]
    filter_name: str
    filter_cls: Type[TokenFilter]
    lower_case: bool = True
    length_bounds: Optional[Tuple[int, int]] = None
    stop_words: Optional[WordSet] = None
    stem_exclusion_words: Optional[WordSet] = None
    stemmer: Optional[StemmerChoice] = None

    def stage_names(self):
        """Names of the stages in pipeline order."""
        names = [f"tokenizer:{self.tokenizer_name}", f"filter:{self.filter_name}"]
        if self.lower_case:
            names.append("lowercase")
        if self.length_bounds is not None:
            names.append("length")
        if self.stop_words is not None:
            names.append("stop")
        if self.stem_exclusion_words is not None:
            names.append("keyword_marker")
        if self.stemmer is not None:
            names.append(f"stemmer:{self.stemmer.key}")
        return names


def _tokenizer_factory(tokenizer: Union[str, Tokenizer]) -> Tuple[str, Callable[[], Tokenizer]]:
    if isinstance(tokenizer, Tokenizer):
        prototype = tokenizer
        return type(prototype).__name__, lambda: copy.copy(prototype)
    return TOKENIZERS.normalize_key(tokenizer), TOKENIZERS.get(tokenizer)


def plan_pipeline(config: AnalyzerConfig) -> PipelinePlan:
    """Resolve a custom pipeline configuration against the registries.

    Args:
        config: Validated custom pipeline configuration

    Returns:
        Pipeline plan

    Raises:
        ConfigurationError: If a key is unknown
        ConstructionError: If the primary filter cannot wrap a bare stream
    """
    tokenizer_name, tokenizer_factory = _tokenizer_factory(config.tokenizer)

    filter_entry = FILTERS.get(config.filter)
    filter_name = FILTERS.normalize_key(config.filter)
    if not filter_entry.wraps_stream:
        raise _construction_error(
            f"{filter_entry.cls.__name__} has no (token_stream) constructor "
            f"and cannot be used as the primary filter {config.filter!r}"
        )

    stemmer = None
    if config.stemmer is not None:
        stemmer_entry = STEMMERS.get(config.stemmer)
        stemmer = StemmerChoice(
            key=STEMMERS.normalize_key(config.stemmer),
            kind=stemmer_entry.kind,
            factory=stemmer_entry.factory,
        )

    return PipelinePlan(
        tokenizer_name=tokenizer_name,
        tokenizer_factory=tokenizer_factory,
        filter_name=filter_name,
        filter_cls=filter_entry.cls,
        lower_case=config.lower_case,
        length_bounds=_validate_length_filter(config.length_filter),
        stop_words=config.stop_words,
        stem_exclusion_words=config.stem_exclusion_words,
        stemmer=stemmer,
    )


class CustomAnalyzer(Analyzer):
    """Analyzer assembled from registry components.

    Holds only the immutable pipeline plan; every call to
    :meth:`create_components` builds a new tokenizer and filter chain.
    """

    def __init__(self, plan: PipelinePlan, version: Optional[Version] = None):
        """Initialize analyzer.

        Args:
            plan: Resolved pipeline plan
            version: Analysis behaviour version
        """
        super().__init__(version)
        self.plan = plan

    def create_components(self, field_name: str) -> TokenStreamComponents:
        plan = self.plan

        source = plan.tokenizer_factory()
        result: TokenStream = plan.filter_cls(source)

        if plan.lower_case:
            result = LowerCaseFilter(result)
        if plan.length_bounds is not None:
            result = LengthFilter(result, *plan.length_bounds)
        if plan.stop_words is not None:
            result = StopFilter(result, plan.stop_words)
        # Keywords must be marked before the stemmer sees them
        if plan.stem_exclusion_words is not None:
            result = SetKeywordMarkerFilter(result, plan.stem_exclusion_words)
        if plan.stemmer is not None:
            result = plan.stemmer.wrap(result)

        return TokenStreamComponents(source, result)

    def __repr__(self) -> str:
        return f"CustomAnalyzer({' -> '.join(self.plan.stage_names())}, version={self.version})"


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _coerce_config(
    config: Union[AnalyzerConfig, Mapping[str, Any], None],
    options: Mapping[str, Any],
) -> AnalyzerConfig:
    if config is None:
        config = AnalyzerConfig()
    elif isinstance(config, Mapping):
        config = AnalyzerConfig.from_dict(config)
    elif not isinstance(config, AnalyzerConfig):
        raise ConfigurationError(f"Unsupported analyzer configuration: {config!r}")

    if options:
        config = config.with_options(options)
    return config


def build_analyzer(
    config: Union[AnalyzerConfig, Mapping[str, Any], None] = None,
    **options: Any,
) -> Analyzer:
    """Build an analyzer from a configuration.

    Called without any arguments, returns the pre-built standard
    analyzer. Otherwise options default as in :class:`AnalyzerConfig`,
    which means a custom pipeline unless a class is named.

    Args:
        config: AnalyzerConfig or option mapping
        **options: Options overriding those in ``config``

    Returns:
        Analyzer tagged with the configured version

    Raises:
        ConfigurationError: If the configuration is invalid
        ConstructionError: If a registry entry cannot be built as configured
    """
    if config is None and not options:
        config = AnalyzerConfig(analyzer_class="standard")
    else:
        config = _coerce_config(config, options)

    entry = validate_config(config)

    if entry.is_custom:
        plan = plan_pipeline(config)
        analyzer: Analyzer = CustomAnalyzer(plan)
        logger.debug(f"Built custom pipeline: {' -> '.join(plan.stage_names())}")
    else:
        ignored = [
            name for name in _PIPELINE_OPTIONS
            if getattr(config, name) != getattr(AnalyzerConfig, name)
        ]
        if ignored:
            logger.warning(
                f"Options {', '.join(ignored)} are ignored by the pre-built "
                f"{config.analyzer_class!r} analyzer"
            )
        analyzer = build_prebuilt_analyzer(
            config.analyzer_class,
            config.stop_words,
            config.stem_exclusion_words,
        )

    analyzer.set_version(config.version)
    return analyzer


__all__ = [
    "NO_STEM_EXCLUSION_CLASSES",
    "NoWordSets",
    "StopWordsOnly",
    "StopAndExclusionWords",
    "WordSetArguments",
    "word_set_arguments",
    "validate_config",
    "build_prebuilt_analyzer",
    "StemmerChoice",
    "PipelinePlan",
    "plan_pipeline",
    "CustomAnalyzer",
    "build_analyzer",
]
