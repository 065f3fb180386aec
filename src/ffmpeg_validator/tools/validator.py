"""ffmpeg version determination and gating.

The version is taken from the ``ffmpeg version x.y`` banner when the binary
reports one. Otherwise the libav* library versions are checked against the
versions shipped with the minimum supported release.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from ffmpeg_validator.core.string_utils import contains_ci
from ffmpeg_validator.logging.interface import LoggerProtocol
from ffmpeg_validator.tools.libraries import (
    MAX_VERSION,
    MIN_VERSION,
    MINIMUM_LIBRARY_VERSIONS,
    extract_library_versions,
)
from ffmpeg_validator.tools.version import Version

# Release builds start with e.g. "ffmpeg version 4.3.1" or "ffmpeg version n6.0".
# Dated git builds ("ffmpeg version 2022-05-23-git-...") have no dot and fall
# through to the library check.
VERSION_LINE_PATTERN = re.compile(r"ffmpeg version n?(\d+(?:\.\d+){1,3})")

# Banner of the libav fork (avconv), which is not supported
INCOMPATIBLE_FORK_MARKER = "libav developers"


class VersionValidator:
    """Checks raw ``ffmpeg -version`` output against version bounds.

    Args:
        logger: Logger for validation findings.
        min_version: Minimum acceptable version.
        max_version: Maximum acceptable version, or None for no upper bound.
        library_minimums: Library name to minimum version, matching the
            libraries shipped with min_version.
    """

    def __init__(
        self,
        logger: LoggerProtocol | None = None,
        min_version: Version = MIN_VERSION,
        max_version: Version | None = MAX_VERSION,
        library_minimums: Mapping[str, Version] = MINIMUM_LIBRARY_VERSIONS,
    ) -> None:
        self._logger: LoggerProtocol = logger or logging.getLogger(__name__)
        self.min_version = min_version
        self.max_version = max_version
        self.library_minimums = library_minimums

    def determine_version(self, output: str) -> Version | None:
        """Work out the ffmpeg version from ``-version`` output.

        Note:
            When the banner is missing and every library meets its minimum,
            the configured minimum version is returned. That is a stand-in
            meaning "compatible, exact version unknown", not a version that
            was observed in the output.

        Args:
            output: Raw ``ffmpeg -version`` output.

        Returns:
            The version, or None if it cannot be determined.
        """
        match = VERSION_LINE_PATTERN.match(output or "")
        if match:
            return Version.parse(match.group(1))

        all_satisfied = True
        found_versions = extract_library_versions(output)
        for name, minimum in self.library_minimums.items():
            found = found_versions.get(name)
            if found is None:
                self._logger.error("%s version not found", name)
                all_satisfied = False
            elif found.compare_to(minimum) >= 0:
                self._logger.info("Found %s version %s (%s)", name, found, minimum)
            else:
                self._logger.warning(
                    "Found %s version %s lower than recommended version %s",
                    name,
                    found,
                    minimum,
                )
                all_satisfied = False

        return self.min_version if all_satisfied else None

    def validate(self, output: str) -> bool:
        """Check whether ``-version`` output describes an acceptable ffmpeg.

        Args:
            output: Raw ``ffmpeg -version`` output.

        Returns:
            True if the version is known and within [min_version, max_version].
        """
        if not output or not output.strip():
            self._logger.error("FFmpeg validation: The process returned no result")
            return False

        if contains_ci(output, INCOMPATIBLE_FORK_MARKER):
            self._logger.error(
                "FFmpeg validation: avconv instead of ffmpeg is not supported"
            )
            return False

        version = self.determine_version(output)
        self._logger.info(
            "Found ffmpeg version %s", version if version is not None else "unknown"
        )

        if version is None:
            self._log_recommendation()
            return False

        if version < self.min_version:
            self._logger.warning(
                "FFmpeg validation: The minimum recommended version is %s",
                self.min_version,
            )
            return False

        if self.max_version is not None and version > self.max_version:
            self._logger.warning(
                "FFmpeg validation: The maximum recommended version is %s",
                self.max_version,
            )
            return False

        return True

    def _log_recommendation(self) -> None:
        if self.max_version is None:
            self._logger.warning(
                "FFmpeg validation: We recommend minimum version %s",
                self.min_version,
            )
        elif self.min_version == self.max_version:
            self._logger.warning(
                "FFmpeg validation: We recommend version %s", self.min_version
            )
        else:
            self._logger.warning(
                "FFmpeg validation: We recommend a minimum of %s and maximum of %s",
                self.min_version,
                self.max_version,
            )
