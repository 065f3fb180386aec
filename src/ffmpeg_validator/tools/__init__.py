"""ffmpeg version validation and capability probing.

This package answers three questions about an installed ffmpeg binary:
is its version supported, which of the curated codecs, filters and
hwaccels does it provide, and does a VA-API render node use a given driver.
"""

from ffmpeg_validator.tools.capabilities import (
    FILTER_OPTIONS,
    REQUIRED_DECODERS,
    REQUIRED_ENCODERS,
    REQUIRED_FILTERS,
    CapabilityProbe,
    CodecKind,
    parse_codec_list,
    parse_filter_list,
    parse_hwaccel_list,
)
from ffmpeg_validator.tools.codecs import get_audio_codec_friendly_name
from ffmpeg_validator.tools.encoder_validator import EncoderValidator
from ffmpeg_validator.tools.exceptions import (
    InvalidVersionComponentError,
    ProcessExecutionError,
    VersionError,
    VersionFormatError,
)
from ffmpeg_validator.tools.libraries import (
    MAX_VERSION,
    MIN_VERSION,
    MINIMUM_LIBRARY_VERSIONS,
    extract_library_versions,
)
from ffmpeg_validator.tools.platform import PlatformFamily, detect_platform_family
from ffmpeg_validator.tools.runner import (
    CommandResult,
    ProcessRunner,
    SubprocessRunner,
    get_process_output,
)
from ffmpeg_validator.tools.validator import VersionValidator
from ffmpeg_validator.tools.version import Version, parse_version

__all__ = [
    # Version
    "Version",
    "parse_version",
    "MIN_VERSION",
    "MAX_VERSION",
    "MINIMUM_LIBRARY_VERSIONS",
    "extract_library_versions",
    "VersionValidator",
    # Capabilities
    "CapabilityProbe",
    "CodecKind",
    "FILTER_OPTIONS",
    "REQUIRED_DECODERS",
    "REQUIRED_ENCODERS",
    "REQUIRED_FILTERS",
    "parse_codec_list",
    "parse_filter_list",
    "parse_hwaccel_list",
    "get_audio_codec_friendly_name",
    # Host facade
    "EncoderValidator",
    # Process execution
    "CommandResult",
    "ProcessRunner",
    "SubprocessRunner",
    "get_process_output",
    # Platform
    "PlatformFamily",
    "detect_platform_family",
    # Exceptions
    "VersionError",
    "InvalidVersionComponentError",
    "VersionFormatError",
    "ProcessExecutionError",
]
