"""RoadAnalysis Tokenizers - Text Tokenization Strategies.

Various tokenization strategies for breaking text into tokens. Every
tokenizer here is constructible without arguments so that the
component registry can build a fresh one for each analyzed text.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from abc import abstractmethod
from typing import Iterator, Optional, Pattern

from roadanalysis_core.analyzers.base import (
    Tokenizer,
    Token,
    TokenType,
)

# Ideographs and hiragana are emitted one character per token
_IDEOGRAPHIC = "\u3040-\u309f\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff"
# Combining marks belong to the word they decorate
_MARKS = "\u0300-\u036f\u0483-\u0489\u0591-\u05bd\u0610-\u061a\u064b-\u065f\u0670"
_WORD_CHAR = rf"(?:[^\W{_IDEOGRAPHIC}]|[{_MARKS}])"

DEFAULT_MAX_TOKEN_LENGTH = 255


class StandardTokenizer(Tokenizer):
    """Standard tokenizer based on Unicode word boundaries.

    Splits on whitespace, punctuation and hyphens. Apostrophes and
    periods between word characters stay inside the token, so
    "O'Neil" and "3.14" are single tokens while "Алма-Ата" is two.
    """

    WORD_PATTERN = re.compile(
        rf"""
        [{_IDEOGRAPHIC}]
        |
        {_WORD_CHAR}+(?:['’.]{_WORD_CHAR}+)*
        """,
        re.VERBOSE | re.UNICODE,
    )

    NUMBER_PATTERN = re.compile(r"^[\d.,]+$")

    def __init__(self, max_token_length: int = DEFAULT_MAX_TOKEN_LENGTH):
        """Initialize tokenizer.

        Args:
            max_token_length: Maximum token length
        """
        super().__init__()
        self.max_token_length = max_token_length

    def tokenize(self, text: str) -> Iterator[Token]:
        """Tokenize text."""
        position = 0

        for match in self.WORD_PATTERN.finditer(text):
            token_text = match.group()

            # Skip tokens that are too long
            if len(token_text) > self.max_token_length:
                continue

            yield Token(
                text=token_text,
                position=position,
                start_offset=match.start(),
                end_offset=match.end(),
                token_type=self._classify_token(token_text),
            )
            position += 1

    def _classify_token(self, text: str) -> TokenType:
        """Classify token type."""
        if self.NUMBER_PATTERN.match(text):
            return TokenType.NUM
        if len(text) == 1 and re.match(f"[{_IDEOGRAPHIC}]", text):
            return TokenType.CJ
        return TokenType.ALPHANUM


class ClassicTokenizer(Tokenizer):
    """Classic grammar-based tokenizer.

    Recognizes e-mail addresses, host names, acronyms, company names
    and apostrophe words as single tokens, and keeps numbers joined by
    punctuation together ("1-800-555-1212").
    """

    PATTERNS = (
        (TokenType.EMAIL, r"\w+(?:[.\-]\w+)*@\w+(?:[.\-]\w+)*\.[A-Za-z]{2,}"),
        (TokenType.HOST, r"\w+(?:[.\-]\w+)*\.[A-Za-z]{2,}(?![\w.])"),
        (TokenType.ACRONYM, r"(?:[^\W\d_]\.){2,}"),
        (TokenType.COMPANY, r"[^\W\d_]+[&@][^\W\d_]+"),
        (TokenType.APOSTROPHE, r"[^\W\d_]+(?:'[^\W\d_]+)+"),
        (TokenType.NUM, r"\d+(?:[\-_/.,]\w+)+|\w+(?:[\-_/.,]\d+)+"),
        (TokenType.ALPHANUM, r"\w+"),
    )

    GRAMMAR: Pattern = re.compile(
        "|".join(f"(?P<{t.name}>{p})" for t, p in PATTERNS),
        re.UNICODE,
    )

    def __init__(self, max_token_length: int = DEFAULT_MAX_TOKEN_LENGTH):
        """Initialize tokenizer.

        Args:
            max_token_length: Maximum token length
        """
        super().__init__()
        self.max_token_length = max_token_length

    def tokenize(self, text: str) -> Iterator[Token]:
        """Tokenize text using the classic grammar."""
        position = 0

        for match in self.GRAMMAR.finditer(text):
            token_text = match.group()
            if len(token_text) > self.max_token_length:
                continue

            yield Token(
                text=token_text,
                position=position,
                start_offset=match.start(),
                end_offset=match.end(),
                token_type=TokenType[match.lastgroup],
            )
            position += 1


class CharTokenizer(Tokenizer):
    """Splits text into runs of characters accepted by :meth:`is_token_char`."""

    @abstractmethod
    def is_token_char(self, char: str) -> bool:
        """Whether a character belongs to a token."""
        pass

    def normalize(self, char: str) -> str:
        return char

    def tokenize(self, text: str) -> Iterator[Token]:
        position = 0
        start = 0
        in_token = False

        for i, char in enumerate(text):
            if self.is_token_char(char):
                if not in_token:
                    start = i
                    in_token = True
            else:
                if in_token:
                    yield self._make_token(text, start, i, position)
                    position += 1
                    in_token = False

        # Last token
        if in_token:
            yield self._make_token(text, start, len(text), position)

    def _make_token(self, text: str, start: int, end: int, position: int) -> Token:
        return Token(
            text="".join(self.normalize(c) for c in text[start:end]),
            position=position,
            start_offset=start,
            end_offset=end,
        )


class WhitespaceTokenizer(CharTokenizer):
    """Simple whitespace tokenizer.

    Splits text on whitespace only, preserving punctuation and hyphens.
    """

    def is_token_char(self, char: str) -> bool:
        return not char.isspace()


class LetterTokenizer(CharTokenizer):
    """Letter tokenizer.

    Splits on non-letter characters, producing only letter tokens.
    """

    def is_token_char(self, char: str) -> bool:
        return char.isalpha()


class LowerCaseTokenizer(LetterTokenizer):
    """Letter tokenizer that also lowercases its tokens."""

    def normalize(self, char: str) -> str:
        return char.lower()


class KeywordTokenizer(Tokenizer):
    """Keyword tokenizer.

    Emits the entire input as a single token. Useful for exact matching.
    """

    def tokenize(self, text: str) -> Iterator[Token]:
        """Return input as single token."""
        if text:
            yield Token(
                text=text,
                position=0,
                start_offset=0,
                end_offset=len(text),
            )


class PathHierarchyTokenizer(Tokenizer):
    """File path tokenizer.

    Emits every ancestor of a path followed by the path itself:
    "/usr/local/bin" gives "/usr", "/usr/local", "/usr/local/bin".
    All tokens share one position.
    """

    def __init__(self, delimiter: str = "/", replacement: Optional[str] = None):
        """Initialize tokenizer.

        Args:
            delimiter: Path delimiter
            replacement: Delimiter written into emitted tokens
        """
        super().__init__()
        self.delimiter = delimiter
        self.replacement = replacement or delimiter

    def tokenize(self, text: str) -> Iterator[Token]:
        """Tokenize path."""
        if not text:
            return

        increment = 1
        for i, char in enumerate(text):
            if char == self.delimiter and i > 0:
                yield self._make_token(text[:i], increment)
                increment = 0

        yield self._make_token(text, increment)

    def _make_token(self, prefix: str, increment: int) -> Token:
        return Token(
            text=prefix.replace(self.delimiter, self.replacement),
            position=0,
            start_offset=0,
            end_offset=len(prefix),
            position_increment=increment,
        )


class WikipediaTokenizer(StandardTokenizer):
    """Tokenizer for MediaWiki markup.

    Blanks out link brackets, templates, emphasis quotes, headings and
    HTML tags before standard tokenization. Markup is replaced with
    spaces of the same length so offsets still point into the raw text.
    """

    MARKUP_PATTERNS = (
        re.compile(r"\{\{[^{}]*\}\}"),            # templates
        re.compile(r"\[\[(?:[^\[\]|]*\|)?"),      # internal link target
        re.compile(r"\[(?:https?|ftp)://\S*\s?"),  # external link url
        re.compile(r"\]\]?"),
        re.compile(r"'{2,}"),                     # bold and italics
        re.compile(r"^=+|=+$", re.MULTILINE),     # headings
        re.compile(r"<[^>]+>"),
    )

    def tokenize(self, text: str) -> Iterator[Token]:
        """Tokenize wiki text."""
        return super().tokenize(self.strip_markup(text))

    def strip_markup(self, text: str) -> str:
        for pattern in self.MARKUP_PATTERNS:
            text = pattern.sub(lambda m: " " * len(m.group()), text)
        return text


__all__ = [
    "DEFAULT_MAX_TOKEN_LENGTH",
    "Tokenizer",
    "StandardTokenizer",
    "ClassicTokenizer",
    "CharTokenizer",
    "WhitespaceTokenizer",
    "LetterTokenizer",
    "LowerCaseTokenizer",
    "KeywordTokenizer",
    "PathHierarchyTokenizer",
    "WikipediaTokenizer",
]
