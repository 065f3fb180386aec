"""Shared test fixtures for ffmpeg-validator."""

from __future__ import annotations

from collections.abc import Sequence
from unittest.mock import MagicMock

import pytest

from ffmpeg_validator.tools.exceptions import ProcessExecutionError
from ffmpeg_validator.tools.runner import CommandResult

FFMPEG_PATH = "/usr/bin/ffmpeg"

VERSION_OUTPUT = """\
ffmpeg version 4.3.1 Copyright (c) 2000-2020 the FFmpeg developers
built with gcc 10 (Debian 10.2.0-9)
configuration: --prefix=/usr --enable-gpl --enable-libx264 --enable-vaapi
libavutil      56. 51.100 / 56. 51.100
libavcodec     58. 91.100 / 58. 91.100
libavformat    58. 45.100 / 58. 45.100
libavdevice    58. 10.100 / 58. 10.100
libavfilter     7. 85.100 /  7. 85.100
libswscale      5.  7.100 /  5.  7.100
libswresample   3.  7.100 /  3.  7.100
libpostproc    55.  7.100 / 55.  7.100
"""

# Git build without a version banner, libraries at or above the 4.0 minimums
LIBRARY_ONLY_OUTPUT = """\
ffmpeg version N-98765-gabcdef1234 Copyright (c) 2000-2019 the FFmpeg developers
built with gcc 9 (Ubuntu 9.2.1-9ubuntu2)
libavutil      56. 31.100 / 56. 31.100
libavcodec     58. 54.100 / 58. 54.100
libavformat    58. 29.100 / 58. 29.100
libavdevice    58.  8.100 / 58.  8.100
libavfilter     7. 57.100 /  7. 57.100
libswscale      5.  5.100 /  5.  5.100
libswresample   3.  5.100 /  3.  5.100
libpostproc    55.  5.100 / 55.  5.100
"""

LIBAV_OUTPUT = """\
avconv version 12.3, Copyright (c) 2000-2018 the Libav developers
libavutil     55. 20. 0 / 55. 20. 0
libavcodec    57. 25. 0 / 57. 25. 0
"""

ENCODERS_OUTPUT = """\
Encoders:
 V..... = Video
 A..... = Audio
 S..... = Subtitle
 .F.... = Frame-level multithreading
 ..S... = Slice-level multithreading
 ...X.. = Codec is experimental
 ....B. = Supports draw_horiz_band
 .....D = Supports direct rendering method 1
 ------
 V....D libx264              libx264 H.264 / AVC / MPEG-4 AVC (codec h264)
 V..... h264_nvenc           NVIDIA NVENC H.264 encoder (codec h264)
 V..... h264_vaapi           H.264/AVC (VAAPI) (codec h264)
 V.S... mpeg2video           MPEG-2 video
 A..... aac                  AAC (Advanced Audio Coding)
 A..... libopus              libopus Opus (codec opus)
 S..... srt                  SubRip subtitle
"""

DECODERS_OUTPUT = """\
Decoders:
 V..... = Video
 ------
 VFS..D h264                 H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10
 V..... h264_cuvid           Nvidia CUVID H264 decoder (codec h264)
 VFS..D hevc                 HEVC (High Efficiency Video Coding)
 VF...D theora               Theora
 V....D libdav1d             dav1d AV1 decoder by VideoLAN (codec av1)
 A....D ac3                  ATSC A/52A (AC-3)
 A....D flac                 FLAC (Free Lossless Audio Codec)
"""

FILTERS_OUTPUT = """\
Filters:
  T.. = Timeline support
  .S. = Slice threading
  ..C = Command support
  A = Audio input/output
  V = Video input/output
 ... abench            A->A       Benchmark part of a filtergraph.
 T.C scale             V->V       Scale the input video size and/or convert the image format.
 ... scale_cuda        V->V       GPU accelerated video resizer
 ... tonemap_opencl    V->V       Perform HDR to SDR conversion with tonemapping.
 ... zscale            V->V       Apply resizing, colorspace and bit depth conversion.
 ... alphasrc          |->V       Generate a video source with an alpha channel.
"""

HWACCELS_OUTPUT = """\
Hardware acceleration methods:
vdpau
cuda
vaapi
qsv
drm
opencl

"""

SCALE_CUDA_HELP_OUTPUT = """\
Filter scale_cuda
  GPU accelerated video resizer
    Inputs:
       #0: default (video)
    Outputs:
       #0: default (video)
scale_cuda AVOptions:
  w                 <string>     ..FV....... Output video width (default "iw")
  h                 <string>     ..FV....... Output video height (default "ih")
  format            <pix_fmt>    ..FV....... Output format (default "same")
"""

VAAPI_INIT_STDERR = """\
[AVHWDeviceContext @ 0x55d1c3a0c8c0] libva: VA-API version 1.17.0
[AVHWDeviceContext @ 0x55d1c3a0c8c0] libva: Trying to open /usr/lib/x86_64-linux-gnu/dri/iHD_drv_video.so
[AVHWDeviceContext @ 0x55d1c3a0c8c0] Initialised VAAPI connection: version 1.17
[AVHWDeviceContext @ 0x55d1c3a0c8c0] VAAPI driver: Intel iHD driver for Intel(R) Gen Graphics - 23.1.1 ().
[AVHWDeviceContext @ 0x55d1c3a0c8c0] Driver not found in known nonstandard list, using standard behaviour.
At least one output file must be specified
"""


class FakeRunner:
    """ProcessRunner returning canned results keyed by the ffmpeg arguments.

    Each response is either a CommandResult-like tuple (stdout, stderr,
    returncode) or an exception to raise. Unknown commands exit 1.
    """

    def __init__(self, responses: dict[tuple[str, ...], object] | None = None):
        self.responses = dict(responses or {})
        self.calls: list[list[str]] = []

    def add(
        self, args: Sequence[str], stdout: str = "", stderr: str = "", rc: int = 0
    ) -> None:
        self.responses[tuple(args)] = (stdout, stderr, rc)

    def run(self, args: Sequence[str]) -> CommandResult:
        self.calls.append(list(args))
        response = self.responses.get(tuple(args[1:]), ("", "unknown command", 1))
        if isinstance(response, Exception):
            raise response
        stdout, stderr, rc = response
        return CommandResult(tuple(args), stdout, stderr, rc)


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Return an empty FakeRunner."""
    return FakeRunner()


@pytest.fixture
def mock_logger() -> MagicMock:
    """Return a MagicMock standing in for the injected logger."""
    return MagicMock()


@pytest.fixture
def missing_binary_error() -> ProcessExecutionError:
    """Error raised by a runner when the binary does not exist."""
    return ProcessExecutionError(
        [FFMPEG_PATH, "-version"], None, reason="not found: ffmpeg"
    )


@pytest.fixture
def ffmpeg_path() -> str:
    return FFMPEG_PATH


@pytest.fixture
def version_output() -> str:
    """``-version`` output of a release build (4.3.1)."""
    return VERSION_OUTPUT


@pytest.fixture
def library_only_output() -> str:
    """``-version`` output of a git build with 4.0-compatible libraries."""
    return LIBRARY_ONLY_OUTPUT


@pytest.fixture
def libav_output() -> str:
    """``-version`` output of the avconv fork."""
    return LIBAV_OUTPUT


@pytest.fixture
def encoders_output() -> str:
    return ENCODERS_OUTPUT


@pytest.fixture
def decoders_output() -> str:
    return DECODERS_OUTPUT


@pytest.fixture
def filters_output() -> str:
    return FILTERS_OUTPUT


@pytest.fixture
def hwaccels_output() -> str:
    return HWACCELS_OUTPUT


@pytest.fixture
def scale_cuda_help_output() -> str:
    """``-h filter=scale_cuda`` output."""
    return SCALE_CUDA_HELP_OUTPUT


@pytest.fixture
def vaapi_init_stderr() -> str:
    """stderr of a verbose VA-API device initialization using iHD."""
    return VAAPI_INIT_STDERR
