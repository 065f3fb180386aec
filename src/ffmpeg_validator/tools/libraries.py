"""ffmpeg shared library version extraction.

``ffmpeg -version`` lists the versions of the libav* libraries it was built
against, e.g.::

    libavutil      56. 31.100 / 56. 31.100
    libavcodec     58. 54.100 / 58. 54.100

When the binary does not report its own version (distro and git builds),
these library versions are the only reliable signal left.
"""

from __future__ import annotations

import re
from types import MappingProxyType

from ffmpeg_validator.tools.version import Version

# Minimum ffmpeg version supported.
# When changing this, also change MINIMUM_LIBRARY_VERSIONS to the library
# versions shipped with that ffmpeg release.
MIN_VERSION = Version(4, 0)

# No upper bound
MAX_VERSION: Version | None = None

# Library versions shipped with ffmpeg 4.0
MINIMUM_LIBRARY_VERSIONS: MappingProxyType[str, Version] = MappingProxyType(
    {
        "libavutil": Version(56, 14),
        "libavcodec": Version(58, 18),
        "libavformat": Version(58, 12),
        "libavdevice": Version(58, 3),
        "libavfilter": Version(7, 16),
        "libswscale": Version(5, 1),
        "libswresample": Version(3, 1),
        "libpostproc": Version(55, 1),
    }
)

LIBRARY_VERSION_PATTERN = re.compile(
    r"(?P<name>lib\w+)\s+(?P<major>\d+)\.\s*(?P<minor>\d+)"
)


def extract_library_versions(output: str) -> dict[str, Version]:
    """Extract library major.minor versions from ffmpeg output.

    Args:
        output: Text of an ffmpeg -version (or similar) response.

    Returns:
        Dict mapping library name to its version. A library reported more
        than once keeps the last reported version. Empty if none found.
    """
    versions: dict[str, Version] = {}
    for match in LIBRARY_VERSION_PATTERN.finditer(output or ""):
        versions[match.group("name")] = Version(
            int(match.group("major")), int(match.group("minor"))
        )
    return versions
