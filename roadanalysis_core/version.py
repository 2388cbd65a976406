"""RoadAnalysis Version - Analysis Compatibility Tags.

Analyzers carry a version tag so that the indexing and query layers
can tell which tokenization behaviour produced a set of terms.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from roadanalysis_core.errors import ConfigurationError


@dataclass(frozen=True, order=True)
class Version:
    """Analysis behaviour version.

    Attributes:
        major: Major version
        minor: Minor version
        bugfix: Bugfix version
    """

    major: int
    minor: int = 0
    bugfix: int = 0

    LATEST: ClassVar["Version"]

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.bugfix}"

    def on_or_after(self, other: "Version") -> bool:
        """Check if this version is the same as or newer than another."""
        return self >= other

    @classmethod
    def parse(cls, value: Union[str, "Version"]) -> "Version":
        """Parse a dotted version string such as ``"7.2.1"``.

        Args:
            value: Version string or existing Version

        Returns:
            Version instance

        Raises:
            ConfigurationError: If the string is not a dotted version
        """
        if isinstance(value, Version):
            return value
        if not isinstance(value, str):
            raise ConfigurationError(f"Invalid version: {value!r}")
        if value.upper() == "LATEST":
            return cls.LATEST

        parts = value.strip().split(".")
        if not 1 <= len(parts) <= 3:
            raise ConfigurationError(f"Invalid version: {value!r}")
        try:
            numbers = [int(p) for p in parts]
        except ValueError as e:
            raise ConfigurationError(f"Invalid version: {value!r}") from e
        if any(n < 0 for n in numbers):
            raise ConfigurationError(f"Invalid version: {value!r}")

        return cls(*numbers)


Version.LATEST = Version(7, 2, 1)


__all__ = ["Version"]
