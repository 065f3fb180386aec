"""ffmpeg-validator - validate and introspect an installed ffmpeg binary.

Answers whether the installed ffmpeg version is acceptable, which of a
curated set of codecs, filters and hwaccels the build supports, and whether
a VA-API render node is driven by a given driver.
"""

from ffmpeg_validator.tools import (
    CapabilityProbe,
    CodecKind,
    EncoderValidator,
    PlatformFamily,
    Version,
    VersionValidator,
)

__version__ = "0.1.0"

__all__ = [
    "CapabilityProbe",
    "CodecKind",
    "EncoderValidator",
    "PlatformFamily",
    "Version",
    "VersionValidator",
    "__version__",
]
