"""RoadAnalysis Analyzer Base - Core Text Analysis Components.

Provides base classes for the text analysis pipeline including
tokens, token streams, tokenizers, filters, and analyzers.

A pipeline is a chain of token streams: a tokenizer is the source,
each filter wraps the stream before it, and the outermost filter is
the sink that consumers iterate. Streams are lazy; tokens are pulled
through the whole chain one at a time.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Tuple

from roadanalysis_core.version import Version

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token type classification."""

    ALPHANUM = auto()
    NUM = auto()
    APOSTROPHE = auto()
    ACRONYM = auto()
    COMPANY = auto()
    EMAIL = auto()
    HOST = auto()
    CJ = auto()  # Chinese/Japanese ideographs
    WORD = auto()


@dataclass
class Token:
    """A token in the analysis stream.

    Attributes:
        text: Token text
        position: Position in original text
        start_offset: Start character offset
        end_offset: End character offset
        token_type: Type classification
        position_increment: Position increment
        keyword: Token is protected from stemming
    """

    text: str
    position: int = 0
    start_offset: int = 0
    end_offset: int = 0
    token_type: TokenType = TokenType.WORD
    position_increment: int = 1
    keyword: bool = False

    def __repr__(self) -> str:
        return f"Token({self.text!r}, pos={self.position}, type={self.token_type.name})"

    def clone(self) -> "Token":
        """Create a copy of this token."""
        return Token(
            text=self.text,
            position=self.position,
            start_offset=self.start_offset,
            end_offset=self.end_offset,
            token_type=self.token_type,
            position_increment=self.position_increment,
            keyword=self.keyword,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "text": self.text,
            "position": self.position,
            "start_offset": self.start_offset,
            "end_offset": self.end_offset,
            "token_type": self.token_type.name,
            "position_increment": self.position_increment,
            "keyword": self.keyword,
        }


class TokenStream(ABC):
    """A lazy stream of tokens.

    Iterating a stream pulls tokens through every stage below it.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[Token]:
        """Iterate over tokens."""
        pass

    def to_list(self) -> List[Token]:
        """Consume the stream into a list of tokens."""
        return list(self)

    def get_texts(self) -> List[str]:
        """Consume the stream into a list of token texts."""
        return [t.text for t in self]


class Tokenizer(TokenStream):
    """Base class for tokenizers.

    Tokenizers are the source of a pipeline. They are constructed
    without arguments and fed text with :meth:`set_text`.
    """

    def __init__(self):
        self._text = ""

    def set_text(self, text: str) -> None:
        """Set the text this tokenizer will split."""
        self._text = text or ""

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize(self._text)

    @abstractmethod
    def tokenize(self, text: str) -> Iterator[Token]:
        """Tokenize text.

        Args:
            text: Input text

        Returns:
            Iterator of tokens
        """
        pass


class TokenFilter(TokenStream):
    """Base class for token filters.

    Token filters transform, remove, or annotate tokens of the stream
    they wrap. Every filter takes the wrapped stream as its first
    constructor argument.
    """

    def __init__(self, input: TokenStream):
        """Initialize filter.

        Args:
            input: Wrapped token stream
        """
        self.input = input

    def __iter__(self) -> Iterator[Token]:
        return self.filter(iter(self.input))

    @abstractmethod
    def filter(self, tokens: Iterator[Token]) -> Iterator[Token]:
        """Filter tokens pulled from the wrapped stream.

        Args:
            tokens: Upstream tokens

        Returns:
            Filtered tokens
        """
        pass


class TokenStreamComponents(NamedTuple):
    """The source and sink of one per-text pipeline."""

    source: Tokenizer
    sink: TokenStream

    def set_text(self, text: str) -> TokenStream:
        """Feed text to the source and return the sink."""
        self.source.set_text(text)
        return self.sink


def pipeline_stages(stream: TokenStream) -> List[TokenStream]:
    """List the stages of a pipeline from source to sink.

    Args:
        stream: Sink of the pipeline

    Returns:
        Stages in the order tokens flow through them
    """
    stages = []
    current: Optional[TokenStream] = stream
    while current is not None:
        stages.append(current)
        current = getattr(current, "input", None)
    stages.reverse()
    return stages


class Analyzer(ABC):
    """Base class for text analyzers.

    An analyzer is an immutable factory of per-text pipelines. Each
    call to :meth:`token_stream` builds a fresh tokenizer and filter
    chain, so one analyzer may serve many threads at once.
    """

    def __init__(self, version: Optional[Version] = None):
        """Initialize analyzer.

        Args:
            version: Analysis behaviour version
        """
        self._version = version or Version.LATEST

    @property
    def version(self) -> Version:
        """Analysis behaviour version."""
        return self._version

    def set_version(self, version: Version) -> None:
        """Tag this analyzer with a version."""
        self._version = version

    @abstractmethod
    def create_components(self, field_name: str) -> TokenStreamComponents:
        """Build a fresh tokenizer and filter chain.

        Args:
            field_name: Name of the field being analyzed

        Returns:
            Source and sink of the new pipeline
        """
        pass

    def token_stream(self, field_name: str, text: str) -> TokenStream:
        """Analyze text for a field.

        Args:
            field_name: Name of the field being analyzed
            text: Input text

        Returns:
            Lazy token stream
        """
        components = self.create_components(field_name)
        return components.set_text(text)

    def analyze(self, text: str, field_name: str = "") -> List[Token]:
        """Analyze text into tokens.

        Args:
            text: Input text
            field_name: Name of the field being analyzed

        Returns:
            List of tokens
        """
        return self.token_stream(field_name, text).to_list()

    def get_terms(self, text: str, field_name: str = "") -> List[str]:
        """Get analyzed terms from text.

        Args:
            text: Input text
            field_name: Name of the field being analyzed

        Returns:
            List of term strings
        """
        return self.token_stream(field_name, text).get_texts()

    def get_tokens_with_positions(
        self,
        text: str,
        field_name: str = "",
    ) -> List[Tuple[str, int, int]]:
        """Get tokens with positions.

        Args:
            text: Input text
            field_name: Name of the field being analyzed

        Returns:
            List of (term, position, offset) tuples
        """
        return [
            (t.text, t.position, t.start_offset)
            for t in self.token_stream(field_name, text)
        ]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(version={self._version})"


__all__ = [
    "Analyzer",
    "Token",
    "TokenType",
    "TokenStream",
    "TokenStreamComponents",
    "Tokenizer",
    "TokenFilter",
    "pipeline_stages",
]
