"""RoadAnalysis Token Filters - Token Transformation Pipeline.

Various filters for transforming, removing, or annotating tokens.
Each filter wraps the stream it reads from and is itself a stream,
so filters compose by nesting constructors.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import AbstractSet, Iterable, Iterator, List, Optional

from roadanalysis_core.analyzers.base import (
    TokenFilter,
    Token,
    TokenStream,
    TokenType,
)


class StandardFilter(TokenFilter):
    """Normalizes tokens from the standard tokenizer.

    The standard tokenizer already emits normalized tokens, so this
    filter passes them through unchanged.
    """

    def filter(self, tokens: Iterator[Token]) -> Iterator[Token]:
        return tokens


class ClassicFilter(TokenFilter):
    """Normalizes tokens from the classic tokenizer.

    Removes trailing "'s" from apostrophe words and dots from acronyms.
    """

    def filter(self, tokens: Iterator[Token]) -> Iterator[Token]:
        for token in tokens:
            if token.token_type == TokenType.APOSTROPHE and token.text[-2:] in ("'s", "'S"):
                token = token.clone()
                token.text = token.text[:-2]
            elif token.token_type == TokenType.ACRONYM:
                token = token.clone()
                token.text = token.text.replace(".", "")
            yield token


class CachingTokenFilter(TokenFilter):
    """Caches upstream tokens so the stream can be consumed repeatedly.

    The wrapped stream is read once, on first iteration; later
    iterations replay the cached tokens.
    """

    def __init__(self, input: TokenStream):
        super().__init__(input)
        self._cache: Optional[List[Token]] = None

    def __iter__(self) -> Iterator[Token]:
        if self._cache is None:
            self._cache = list(self.filter(iter(self.input)))
        return (t.clone() for t in self._cache)

    def filter(self, tokens: Iterator[Token]) -> Iterator[Token]:
        return tokens


class LowerCaseFilter(TokenFilter):
    """Converts tokens to lowercase."""

    def filter(self, tokens: Iterator[Token]) -> Iterator[Token]:
        """Convert all tokens to lowercase."""
        for token in tokens:
            new_token = token.clone()
            new_token.text = token.text.lower()
            yield new_token


class FilteringTokenFilter(TokenFilter):
    """Base class for filters that drop tokens.

    Position increments of dropped tokens are carried over to the next
    accepted token so phrase positions stay correct.
    """

    @abstractmethod
    def accept(self, token: Token) -> bool:
        """Whether to keep a token."""
        pass

    def filter(self, tokens: Iterator[Token]) -> Iterator[Token]:
        skipped = 0
        for token in tokens:
            if self.accept(token):
                if skipped:
                    token = token.clone()
                    token.position_increment += skipped
                    skipped = 0
                yield token
            else:
                skipped += token.position_increment


class LengthFilter(FilteringTokenFilter):
    """Filters tokens by length.

    Tokens shorter than ``min_length`` or longer than ``max_length``
    are dropped; both bounds are inclusive.
    """

    def __init__(self, input: TokenStream, min_length: int, max_length: int):
        """Initialize filter.

        Args:
            input: Wrapped token stream
            min_length: Minimum token length
            max_length: Maximum token length
        """
        super().__init__(input)
        self.min_length = min_length
        self.max_length = max_length

    def accept(self, token: Token) -> bool:
        return self.min_length <= len(token.text) <= self.max_length


class StopFilter(FilteringTokenFilter):
    """Removes stop words.

    Stop words are common words that don't carry significant meaning
    and can be removed to improve search performance.
    """

    def __init__(
        self,
        input: TokenStream,
        stop_words: AbstractSet[str],
        ignore_case: bool = False,
    ):
        """Initialize filter.

        Args:
            input: Wrapped token stream
            stop_words: Stop word set
            ignore_case: Case-insensitive matching
        """
        super().__init__(input)
        self.ignore_case = ignore_case
        if ignore_case:
            self.stop_words = frozenset(w.lower() for w in stop_words)
        else:
            self.stop_words = stop_words

    def accept(self, token: Token) -> bool:
        text = token.text.lower() if self.ignore_case else token.text
        return text not in self.stop_words


class SetKeywordMarkerFilter(TokenFilter):
    """Marks tokens as keywords to protect them from stemming.

    Stemming filters leave tokens with the keyword flag unchanged.
    """

    def __init__(
        self,
        input: TokenStream,
        keywords: AbstractSet[str],
        ignore_case: bool = False,
    ):
        """Initialize filter.

        Args:
            input: Wrapped token stream
            keywords: Set of keyword terms
            ignore_case: Case-insensitive matching
        """
        super().__init__(input)
        self.ignore_case = ignore_case
        if ignore_case:
            self.keywords = frozenset(k.lower() for k in keywords)
        else:
            self.keywords = keywords

    def filter(self, tokens: Iterator[Token]) -> Iterator[Token]:
        """Mark keywords."""
        for token in tokens:
            check_text = token.text.lower() if self.ignore_case else token.text
            if check_text in self.keywords and not token.keyword:
                token = token.clone()
                token.keyword = True
            yield token


class EnglishPossessiveFilter(TokenFilter):
    """Removes trailing possessive "'s" from tokens."""

    APOSTROPHES = ("'", "’", "＇")

    def filter(self, tokens: Iterator[Token]) -> Iterator[Token]:
        for token in tokens:
            text = token.text
            if len(text) >= 2 and text[-2] in self.APOSTROPHES and text[-1] in "sS":
                token = token.clone()
                token.text = text[:-2]
            yield token


class ElisionFilter(TokenFilter):
    """Removes elisions (contractions with apostrophes).

    For example: "l'école" -> "école"
    """

    DEFAULT_ARTICLES = frozenset([
        "l", "m", "t", "qu", "n", "s", "j", "d", "c",
        "jusqu", "quoiqu", "lorsqu", "puisqu",
    ])

    def __init__(self, input: TokenStream, articles: Optional[Iterable[str]] = None):
        """Initialize filter.

        Args:
            input: Wrapped token stream
            articles: Set of elided articles
        """
        super().__init__(input)
        self.articles = frozenset(articles) if articles is not None else self.DEFAULT_ARTICLES

    def filter(self, tokens: Iterator[Token]) -> Iterator[Token]:
        """Remove elisions from tokens."""
        for token in tokens:
            text = token.text
            for i, char in enumerate(text):
                if char in ("'", "’"):
                    if text[:i].lower() in self.articles:
                        token = token.clone()
                        token.text = text[i + 1:]
                    break
            yield token


__all__ = [
    "TokenFilter",
    "StandardFilter",
    "ClassicFilter",
    "CachingTokenFilter",
    "LowerCaseFilter",
    "FilteringTokenFilter",
    "LengthFilter",
    "StopFilter",
    "SetKeywordMarkerFilter",
    "EnglishPossessiveFilter",
    "ElisionFilter",
]
