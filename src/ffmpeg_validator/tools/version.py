"""Partially specified version numbers.

A Version always carries major and minor; build and revision are optional.
Unset components order below every explicit value, so 4.0.1 < 4.0.1.0.
This matches the ordering ffmpeg version gating has always relied on and
must not be normalised away.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

from ffmpeg_validator.tools.exceptions import (
    InvalidVersionComponentError,
    VersionFormatError,
)

# Value an unset build/revision takes when ordering versions
UNSET_COMPONENT = -1

_MAX_COMPONENTS = 4
_COMPONENT_PATTERN = re.compile(r"-?\d+")


@total_ordering
@dataclass(frozen=True)
class Version:
    """Immutable version number with optional build and revision.

    ``Version()`` is the zero version (0.0), used only as a default.
    """

    major: int = 0
    minor: int = 0
    build: int | None = None
    revision: int | None = None

    def __post_init__(self) -> None:
        """Validate components."""
        for name in ("major", "minor", "build", "revision"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidVersionComponentError(name, value)
        if self.revision is not None and self.build is None:
            raise InvalidVersionComponentError(
                "revision",
                self.revision,
                "revision cannot be set without build",
            )

    @classmethod
    def from_major_minor(cls, major: int, minor: int) -> Version:
        return cls(major, minor)

    @classmethod
    def from_major_minor_build(cls, major: int, minor: int, build: int) -> Version:
        return cls(major, minor, build)

    @classmethod
    def from_major_minor_build_revision(
        cls, major: int, minor: int, build: int, revision: int
    ) -> Version:
        return cls(major, minor, build, revision)

    @classmethod
    def parse(cls, text: str | None) -> Version:
        """Parse a dotted version string.

        Accepts "N", "N.N", "N.N.N" and "N.N.N.N". A single component N is
        read as N.0.

        Args:
            text: Version string.

        Returns:
            Parsed Version.

        Raises:
            VersionFormatError: If text is None, has a non-numeric or empty
                component, or has more than four components.
            InvalidVersionComponentError: If a component is negative.
        """
        if text is None:
            raise VersionFormatError(text, "input cannot be None")

        tokens = text.split(".")
        if len(tokens) > _MAX_COMPONENTS:
            raise VersionFormatError(
                text, f"expected at most {_MAX_COMPONENTS} components"
            )

        parts: list[int] = []
        for token in tokens:
            if not _COMPONENT_PATTERN.fullmatch(token):
                raise VersionFormatError(text, f"component {token!r} is not an integer")
            parts.append(int(token))

        if len(parts) == 1:
            parts.append(0)
        return cls(*parts)

    def _sort_key(self) -> tuple[int, int, int, int]:
        return (
            self.major,
            self.minor,
            UNSET_COMPONENT if self.build is None else self.build,
            UNSET_COMPONENT if self.revision is None else self.revision,
        )

    def compare_to(self, other: Version | None) -> int:
        """Compare with another version.

        Returns:
            1 if self is newer (or other is None), -1 if older, 0 if equal.
        """
        if other is None:
            return 1
        mine = self._sort_key()
        theirs = other._sort_key()
        if mine == theirs:
            return 0
        return 1 if mine > theirs else -1

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __str__(self) -> str:
        if self.build is None:
            return f"{self.major}.{self.minor}"
        if self.revision is None:
            return f"{self.major}.{self.minor}.{self.build}"
        return f"{self.major}.{self.minor}.{self.build}.{self.revision}"


def parse_version(text: str | None) -> Version:
    """Parse a dotted version string. See Version.parse."""
    return Version.parse(text)
