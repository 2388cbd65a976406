"""RoadAnalysis Analyzers - Text Analysis Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from roadanalysis_core.analyzers.base import (
    Analyzer,
    Token,
    TokenType,
    TokenStream,
    Tokenizer,
    TokenFilter,
    TokenStreamComponents,
    pipeline_stages,
)
from roadanalysis_core.analyzers.standard import (
    ENGLISH_STOP_WORDS,
    StandardAnalyzer,
    ClassicAnalyzer,
    EnglishAnalyzer,
    FrenchAnalyzer,
    GermanAnalyzer,
    RussianAnalyzer,
    ArabicAnalyzer,
    BulgarianAnalyzer,
)
from roadanalysis_core.analyzers.filters import (
    StandardFilter,
    ClassicFilter,
    CachingTokenFilter,
    LowerCaseFilter,
    LengthFilter,
    StopFilter,
    SetKeywordMarkerFilter,
    EnglishPossessiveFilter,
    ElisionFilter,
)
from roadanalysis_core.analyzers.stemmers import (
    StemFilter,
    SnowballFilter,
    PorterStemFilter,
    EnglishMinimalStemFilter,
    RussianLightStemFilter,
    GermanLightStemFilter,
    FrenchLightStemFilter,
    BulgarianStemFilter,
)
from roadanalysis_core.analyzers.tokenizers import (
    StandardTokenizer,
    ClassicTokenizer,
    WhitespaceTokenizer,
    LetterTokenizer,
    LowerCaseTokenizer,
    KeywordTokenizer,
    PathHierarchyTokenizer,
    WikipediaTokenizer,
)

__all__ = [
    "Analyzer",
    "Token",
    "TokenType",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
    "TokenStreamComponents",
    "pipeline_stages",
    "ENGLISH_STOP_WORDS",
    "StandardAnalyzer",
    "ClassicAnalyzer",
    "EnglishAnalyzer",
    "FrenchAnalyzer",
    "GermanAnalyzer",
    "RussianAnalyzer",
    "ArabicAnalyzer",
    "BulgarianAnalyzer",
    "StandardFilter",
    "ClassicFilter",
    "CachingTokenFilter",
    "LowerCaseFilter",
    "LengthFilter",
    "StopFilter",
    "SetKeywordMarkerFilter",
    "EnglishPossessiveFilter",
    "ElisionFilter",
    "StemFilter",
    "SnowballFilter",
    "PorterStemFilter",
    "EnglishMinimalStemFilter",
    "RussianLightStemFilter",
    "GermanLightStemFilter",
    "FrenchLightStemFilter",
    "BulgarianStemFilter",
    "StandardTokenizer",
    "ClassicTokenizer",
    "WhitespaceTokenizer",
    "LetterTokenizer",
    "LowerCaseTokenizer",
    "KeywordTokenizer",
    "PathHierarchyTokenizer",
    "WikipediaTokenizer",
]
