"""RoadAnalysis Word Sets - Stop Word and Exclusion List Loading.

Word lists use the Snowball format: everything after a ``|`` on a line
is a comment, the rest of the line holds zero or more words separated
by whitespace. Lists are decoded strictly as UTF-8.

Lists can come from a file, a resource bundled in a Python package,
or any binary stream. Every entry point decodes and parses the bytes
the same way, so identical content always yields an identical set.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import io
import logging
import os
from dataclasses import dataclass
from importlib import resources
from typing import BinaryIO, FrozenSet, Iterable, Union

from roadanalysis_core.errors import WordSetLoadError

logger = logging.getLogger(__name__)

WordSet = FrozenSet[str]

COMMENT_MARKER = "|"
ENCODING = "utf-8"
DEFAULT_RESOURCE_PACKAGE = "roadanalysis_core.resources"


@dataclass(frozen=True)
class FileSource:
    """A word list stored in a file."""

    path: Union[str, os.PathLike]

    def __str__(self) -> str:
        return f"file:{os.fspath(self.path)}"


@dataclass(frozen=True)
class ResourceSource:
    """A word list bundled as package data.

    Attributes:
        name: Resource path relative to the package, e.g. "stopwords/russian.txt"
        package: Package that holds the resource
    """

    name: str
    package: str = DEFAULT_RESOURCE_PACKAGE

    def __str__(self) -> str:
        return f"resource:{self.package}/{self.name}"


@dataclass(frozen=True)
class StreamSource:
    """A word list read from an open binary stream."""

    stream: BinaryIO
    name: str = "<stream>"

    def __str__(self) -> str:
        return f"stream:{self.name}"


WordSetSource = Union[FileSource, ResourceSource, StreamSource]


def parse_wordset(lines: Iterable[str]) -> WordSet:
    """Parse Snowball-format lines into a word set.

    Args:
        lines: Decoded lines

    Returns:
        Frozen set of words
    """
    words = set()
    for line in lines:
        comment = line.find(COMMENT_MARKER)
        if comment >= 0:
            line = line[:comment]
        words.update(line.split())
    return frozenset(words)


def _decode(data: bytes, source: WordSetSource) -> WordSet:
    try:
        text = data.decode(ENCODING)
    except UnicodeDecodeError as e:
        raise WordSetLoadError(
            f"Word list {source} is not valid {ENCODING}: {e}", source=source
        ) from e

    words = parse_wordset(io.StringIO(text))
    logger.debug(f"Loaded {len(words)} words from {source}")
    return words


def file_to_wordset(path: Union[str, os.PathLike]) -> WordSet:
    """Load a word set from a file.

    Args:
        path: Path of the word list

    Returns:
        Frozen set of words

    Raises:
        WordSetLoadError: If the file is missing, unreadable or not UTF-8
    """
    source = FileSource(path)
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise WordSetLoadError(f"Cannot read word list {source}: {e}", source=source) from e
    return _decode(data, source)


def resource_to_wordset(name: str, package: str = DEFAULT_RESOURCE_PACKAGE) -> WordSet:
    """Load a word set bundled with a package.

    Args:
        name: Resource path relative to the package
        package: Package that holds the resource

    Returns:
        Frozen set of words

    Raises:
        WordSetLoadError: If the resource is missing or not UTF-8
    """
    source = ResourceSource(name, package)
    try:
        data = resources.files(package).joinpath(name).read_bytes()
    except (OSError, ModuleNotFoundError) as e:
        raise WordSetLoadError(f"Cannot read word list {source}: {e}", source=source) from e
    return _decode(data, source)


def stream_to_wordset(stream: BinaryIO, name: str = "<stream>") -> WordSet:
    """Load a word set from a binary stream.

    The stream is read to the end but not closed.

    Args:
        stream: Open binary stream
        name: Name used in error messages

    Returns:
        Frozen set of words

    Raises:
        WordSetLoadError: If the stream cannot be read or is not UTF-8
    """
    source = StreamSource(stream, name)
    try:
        data = stream.read()
    except (OSError, ValueError) as e:
        raise WordSetLoadError(f"Cannot read word list {source}: {e}", source=source) from e
    if isinstance(data, str):
        raise WordSetLoadError(f"Word list {source} must be a binary stream", source=source)
    return _decode(data, source)


def load_wordset(source: Union[WordSetSource, str, os.PathLike, BinaryIO]) -> WordSet:
    """Load a word set from any supported source.

    Plain strings and path objects are treated as file paths, and
    objects with a ``read`` method as binary streams.

    Args:
        source: File, resource or stream source

    Returns:
        Frozen set of words

    Raises:
        WordSetLoadError: If the source cannot be read or decoded
    """
    if isinstance(source, FileSource):
        return file_to_wordset(source.path)
    if isinstance(source, ResourceSource):
        return resource_to_wordset(source.name, source.package)
    if isinstance(source, StreamSource):
        return stream_to_wordset(source.stream, source.name)
    if isinstance(source, (str, os.PathLike)):
        return file_to_wordset(source)
    if hasattr(source, "read"):
        return stream_to_wordset(source, getattr(source, "name", "<stream>"))
    raise TypeError(f"Unsupported word list source: {source!r}")


__all__ = [
    "WordSet",
    "WordSetSource",
    "FileSource",
    "ResourceSource",
    "StreamSource",
    "COMMENT_MARKER",
    "parse_wordset",
    "file_to_wordset",
    "resource_to_wordset",
    "stream_to_wordset",
    "load_wordset",
]
