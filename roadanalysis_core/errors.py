"""RoadAnalysis Errors - Exception Hierarchy.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Optional


class AnalysisError(Exception):
    """Base class for all analysis construction errors."""


class ConfigurationError(AnalysisError, ValueError):
    """Raised when an analyzer configuration is invalid.

    Covers unknown registry keys, incompatible option combinations and
    malformed option values. Always raised before anything is built.
    """


class ConstructionError(AnalysisError, TypeError):
    """Raised when a registered component cannot be built as requested.

    Indicates a mismatch between a registry entry and the arguments the
    builder must pass, not a user error.
    """


class WordSetLoadError(AnalysisError, OSError):
    """Raised when a word list cannot be read or decoded.

    Attributes:
        source: Identifier of the offending source
    """

    def __init__(self, message: str, source: Optional[Any] = None):
        super().__init__(message)
        self.source = source


__all__ = [
    "AnalysisError",
    "ConfigurationError",
    "ConstructionError",
    "WordSetLoadError",
]
