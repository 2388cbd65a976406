"""RoadAnalysis - Configurable Text Analyzers for BlackRoad OS.

Builds text analyzers from declarative configurations. A configuration
either selects a pre-built analyzer (standard, classic, or one of the
language analyzers) or assembles a custom pipeline from registered
tokenizers, filters and stemmers.

Architecture:
┌─────────────────────────────────────────────────────────────────────────────┐
│                           RoadAnalysis Builder                              │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Configuration                                │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │  Options   │→ │  Validate  │→ │  Resolve   │→ │   Build    │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Registries                                   │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │  Analyzer  │  │ Tokenizer  │  │   Filter   │  │  Stemmer   │    │   │
│   │  │  Classes   │  │            │  │            │  │            │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Token Pipeline                               │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │ Tokenizer  │→ │  Filters   │→ │ Stop Words │→ │  Stemmer   │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Word Sets                                    │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐                     │   │
│   │  │    File    │  │  Resource  │  │   Stream   │                     │   │
│   │  └────────────┘  └────────────┘  └────────────┘                     │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Key Features:
- Pre-built analyzers for English, French, German, Russian, Arabic and Bulgarian
- Custom pipelines with a fixed, predictable stage order
- Snowball stemmers from NLTK and lightweight in-house stemmers
- Stop word and stem exclusion lists in Snowball format
- Eager validation of every configuration key

Example:
    >>> from roadanalysis_core import build_analyzer
    >>> analyzer = build_analyzer({"class": "ru"})
    >>> analyzer.get_terms("Алма-Ата Йошкар-Ола")
    ['алм', 'ат', 'йошкар', 'ол']

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Building
from roadanalysis_core.builder import (
    build_analyzer,
    build_prebuilt_analyzer,
    validate_config,
    plan_pipeline,
    CustomAnalyzer,
    PipelinePlan,
    NoWordSets,
    StopWordsOnly,
    StopAndExclusionWords,
)
from roadanalysis_core.config import AnalyzerConfig
from roadanalysis_core.version import Version

# Registries
from roadanalysis_core.registry import (
    ANALYZERS,
    TOKENIZERS,
    FILTERS,
    STEMMERS,
    ComponentRegistry,
    StemmerKind,
)

# Word sets
from roadanalysis_core.wordsets import (
    WordSet,
    FileSource,
    ResourceSource,
    StreamSource,
    file_to_wordset,
    resource_to_wordset,
    stream_to_wordset,
    load_wordset,
)

# Errors
from roadanalysis_core.errors import (
    AnalysisError,
    ConfigurationError,
    ConstructionError,
    WordSetLoadError,
)

# Analyzers
from roadanalysis_core.analyzers.base import (
    Analyzer,
    Token,
    TokenStream,
    Tokenizer,
    TokenFilter,
    TokenStreamComponents,
    pipeline_stages,
)

__all__ = [
    # Building
    "build_analyzer",
    "build_prebuilt_analyzer",
    "validate_config",
    "plan_pipeline",
    "CustomAnalyzer",
    "PipelinePlan",
    "NoWordSets",
    "StopWordsOnly",
    "StopAndExclusionWords",
    "AnalyzerConfig",
    "Version",
    # Registries
    "ANALYZERS",
    "TOKENIZERS",
    "FILTERS",
    "STEMMERS",
    "ComponentRegistry",
    "StemmerKind",
    # Word sets
    "WordSet",
    "FileSource",
    "ResourceSource",
    "StreamSource",
    "file_to_wordset",
    "resource_to_wordset",
    "stream_to_wordset",
    "load_wordset",
    # Errors
    "AnalysisError",
    "ConfigurationError",
    "ConstructionError",
    "WordSetLoadError",
    # Analyzers
    "Analyzer",
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
    "TokenStreamComponents",
    "pipeline_stages",
]
