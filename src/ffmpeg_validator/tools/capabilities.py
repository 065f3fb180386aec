"""ffmpeg capability probing.

Parses the tabular listings printed by ``-encoders``, ``-decoders``,
``-filters`` and ``-hwaccels`` and narrows them to the capabilities the
host application can make use of.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from enum import Enum

from ffmpeg_validator.logging.interface import LoggerProtocol
from ffmpeg_validator.tools.exceptions import ProcessExecutionError
from ffmpeg_validator.tools.platform import PlatformFamily, detect_platform_family
from ffmpeg_validator.tools.runner import (
    ProcessRunner,
    SubprocessRunner,
    get_process_output,
)

# =============================================================================
# Allow-lists
# =============================================================================

REQUIRED_DECODERS: tuple[str, ...] = (
    "h264",
    "hevc",
    "vp8",
    "libvpx",
    "vp9",
    "libvpx-vp9",
    "av1",
    "libdav1d",
    "mpeg2video",
    "mpeg4",
    "msmpeg4",
    "dts",
    "ac3",
    "aac",
    "mp3",
    "flac",
    "h264_qsv",
    "hevc_qsv",
    "mpeg2_qsv",
    "vc1_qsv",
    "vp8_qsv",
    "vp9_qsv",
    "av1_qsv",
    "h264_cuvid",
    "hevc_cuvid",
    "mpeg2_cuvid",
    "vc1_cuvid",
    "mpeg4_cuvid",
    "vp8_cuvid",
    "vp9_cuvid",
    "av1_cuvid",
)

REQUIRED_ENCODERS: tuple[str, ...] = (
    "libx264",
    "libx265",
    "mpeg4",
    "msmpeg4",
    "libvpx",
    "libvpx-vp9",
    "aac",
    "libfdk_aac",
    "ac3",
    "libmp3lame",
    "libopus",
    "libvorbis",
    "flac",
    "srt",
    "h264_amf",
    "hevc_amf",
    "h264_qsv",
    "hevc_qsv",
    "h264_nvenc",
    "hevc_nvenc",
    "h264_vaapi",
    "hevc_vaapi",
    "h264_v4l2m2m",
    "h264_videotoolbox",
    "hevc_videotoolbox",
)

REQUIRED_FILTERS: tuple[str, ...] = (
    # sw
    "alphasrc",
    "zscale",
    # qsv
    "scale_qsv",
    "vpp_qsv",
    "deinterlace_qsv",
    "overlay_qsv",
    # cuda
    "scale_cuda",
    "yadif_cuda",
    "tonemap_cuda",
    "overlay_cuda",
    "hwupload_cuda",
    # opencl
    "scale_opencl",
    "tonemap_opencl",
    "overlay_opencl",
    # vaapi
    "scale_vaapi",
    "deinterlace_vaapi",
    "tonemap_vaapi",
    "procamp_vaapi",
    "overlay_vaapi",
    "hwupload_vaapi",
)

# (filter, text that only appears in its help when the option is supported)
FILTER_OPTIONS: tuple[tuple[str, str], ...] = (
    ("scale_cuda", 'Output format (default "same")'),
    ("tonemap_cuda", "GPU accelerated HDR to SDR tonemapping"),
    ("tonemap_opencl", "bt2390"),
    ("overlay_opencl", "Action to take when encountering EOF from secondary input"),
    ("overlay_vaapi", "Action to take when encountering EOF from secondary input"),
)


class CodecKind(Enum):
    """Which codec listing to query."""

    ENCODER = "encoders"
    DECODER = "decoders"

    @property
    def flag(self) -> str:
        """ffmpeg flag listing this kind of codec."""
        return f"-{self.value}"

    @property
    def required(self) -> tuple[str, ...]:
        """Allow-list for this kind of codec."""
        if self is CodecKind.ENCODER:
            return REQUIRED_ENCODERS
        return REQUIRED_DECODERS


# =============================================================================
# Output parsing
# =============================================================================

# Format: " V....D libx264              H.264 / AVC / MPEG-4 AVC ..."
_CODEC_LINE_PATTERN = re.compile(
    r"^ \S{6}[ \t]+(?P<name>[\w-]+)[ \t]+\S.*$", re.MULTILINE
)

# Format: " TSC scale            V->V       Scale the input video size ..."
_FILTER_LINE_PATTERN = re.compile(
    r"^ \S{3}[ \t]+(?P<name>[\w-]+)[ \t]+\S.*$", re.MULTILINE
)

_LINE_SPLIT_PATTERN = re.compile(r"[\r\n]+")


def _parse_listing(output: str, pattern: re.Pattern[str]) -> list[str]:
    """Extract names from a tabular listing, in order of first appearance."""
    names: list[str] = []
    seen: set[str] = set()
    for match in pattern.finditer(output):
        name = match.group("name")
        if name not in seen:
            seen.add(name)
            names.append(name)
    return names


def parse_codec_list(output: str) -> list[str]:
    """Parse ``ffmpeg -encoders`` or ``-decoders`` output."""
    return _parse_listing(output, _CODEC_LINE_PATTERN)


def parse_filter_list(output: str) -> list[str]:
    """Parse ``ffmpeg -filters`` output."""
    return _parse_listing(output, _FILTER_LINE_PATTERN)


def parse_hwaccel_list(output: str) -> list[str]:
    """Parse ``ffmpeg -hwaccels`` output.

    The first line is the "Hardware acceleration methods:" header; every
    other non-blank line is a hwaccel type.
    """
    lines = [line.strip() for line in _LINE_SPLIT_PATTERN.split(output)]
    lines = [line for line in lines if line]
    return lines[1:]


def filter_allowed(found: Iterable[str], allowed: Iterable[str]) -> list[str]:
    """Keep the found names that are allowed, in the order they were found."""
    allowed_set = frozenset(allowed)
    return [name for name in found if name in allowed_set]


# =============================================================================
# Probe
# =============================================================================


class CapabilityProbe:
    """Queries an ffmpeg binary for the capabilities it was built with.

    Each query spawns its own process; nothing is cached between calls.

    Args:
        encoder_path: Path to the ffmpeg binary.
        logger: Logger for commands and findings.
        runner: Process runner. Defaults to SubprocessRunner().
        platform_family: OS family. Detected once if not given.
    """

    def __init__(
        self,
        encoder_path: str,
        logger: LoggerProtocol | None = None,
        runner: ProcessRunner | None = None,
        platform_family: PlatformFamily | None = None,
    ) -> None:
        self.encoder_path = encoder_path
        self._logger: LoggerProtocol = logger or logging.getLogger(__name__)
        self._runner: ProcessRunner = runner or SubprocessRunner()
        self.platform_family = platform_family or detect_platform_family()

    def _get_output(self, args: list[str], read_stderr: bool = False) -> str:
        return get_process_output(
            self._runner, self.encoder_path, args, self._logger, read_stderr
        )

    def get_codecs(self, kind: CodecKind) -> list[str]:
        """Return the allow-listed codecs of the given kind this build has."""
        try:
            output = self._get_output(["-hide_banner", kind.flag])
        except ProcessExecutionError as e:
            self._logger.error("Error detecting available %s: %s", kind.value, e)
            return []

        if not output.strip():
            return []

        available = filter_allowed(parse_codec_list(output), kind.required)
        self._logger.info("Available %s: %s", kind.value, ",".join(available))
        return available

    def get_encoders(self) -> list[str]:
        return self.get_codecs(CodecKind.ENCODER)

    def get_decoders(self) -> list[str]:
        return self.get_codecs(CodecKind.DECODER)

    def get_filters(self) -> list[str]:
        """Return the allow-listed filters this build has."""
        try:
            output = self._get_output(["-hide_banner", "-filters"])
        except ProcessExecutionError as e:
            self._logger.error("Error detecting available filters: %s", e)
            return []

        if not output.strip():
            return []

        available = filter_allowed(parse_filter_list(output), REQUIRED_FILTERS)
        self._logger.info("Available filters: %s", ",".join(available))
        return available

    def get_hwaccels(self) -> list[str]:
        """Return every hwaccel type the build reports."""
        try:
            output = self._get_output(["-hwaccels", "-hide_banner"])
        except ProcessExecutionError as e:
            self._logger.error("Error detecting available hwaccel types: %s", e)
            return []

        if not output.strip():
            return []

        found = parse_hwaccel_list(output)
        self._logger.info("Available hwaccel types: %s", "/".join(found))
        return found

    def check_filter_with_option(self, filter_name: str, option: str) -> bool:
        """Check that a filter exists and its help mentions an option.

        Args:
            filter_name: Filter to query, e.g. "scale_cuda".
            option: Text that must appear in the filter's help output.

        Returns:
            True if the filter is available and option appears in its help.
        """
        if not filter_name or not option:
            return False

        try:
            output = self._get_output(["-hide_banner", "-h", f"filter={filter_name}"])
        except ProcessExecutionError as e:
            self._logger.error("Error detecting the given filter: %s", e)
            return False

        header = re.compile(rf"^Filter {re.escape(filter_name)}[ \t]*$", re.MULTILINE)
        if header.search(output):
            return option in output

        self._logger.warning(
            "Filter: %s with option %s is not available", filter_name, option
        )
        return False

    def get_filters_with_option(self) -> dict[int, bool]:
        """Check every FILTER_OPTIONS entry, keyed by its index."""
        return {
            index: self.check_filter_with_option(filter_name, option)
            for index, (filter_name, option) in enumerate(FILTER_OPTIONS)
        }

    def check_vaapi_device_by_driver_name(
        self, driver_name: str, render_node_path: str
    ) -> bool:
        """Check that a VA-API render node is driven by the given driver.

        Only Linux has VA-API render nodes; on any other platform this is
        False without running ffmpeg.

        Args:
            driver_name: Driver name to look for, e.g. "iHD".
            render_node_path: Render node, e.g. "/dev/dri/renderD128".

        Returns:
            True if ffmpeg's device initialization log mentions driver_name.
        """
        if self.platform_family is not PlatformFamily.LINUX:
            return False

        if not driver_name or not render_node_path:
            return False

        # Device initialization is logged to stderr, and ffmpeg exits non-zero
        # because no output is given, so stderr is the payload here.
        output = self._get_output(
            [
                "-v",
                "verbose",
                "-hide_banner",
                "-init_hw_device",
                f"vaapi=va:{render_node_path}",
            ],
            read_stderr=True,
        )
        return driver_name in output
