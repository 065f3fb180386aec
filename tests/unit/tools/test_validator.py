"""Unit tests for tools/validator.py."""

import pytest

from ffmpeg_validator.tools.validator import VersionValidator
from ffmpeg_validator.tools.version import Version

LIBRARIES_AT_MINIMUM = """\
libavutil 56.31
libavcodec 58.54
libavformat 58.29
libavdevice 58.8
libavfilter 7.57
libswscale 5.5
libswresample 3.5
libpostproc 55.5
"""

DATED_GIT_BANNER = (
    "ffmpeg version 2022-05-23-git-6076dbcb55-full_build-www.gyan.dev "
    "Copyright (c) 2000-2022 the FFmpeg developers"
)

LIBRARIES_WITH_OLD_CODEC = LIBRARIES_AT_MINIMUM.replace(
    "libavcodec 58.54", "libavcodec 58.10"
)


@pytest.fixture
def validator(mock_logger) -> VersionValidator:
    return VersionValidator(mock_logger)


class TestDetermineVersion:
    """Tests for VersionValidator.determine_version()."""

    def test_reads_version_banner(self, validator, version_output) -> None:
        """The banner version is returned exactly."""
        assert validator.determine_version(version_output) == Version(4, 3, 1)

    def test_banner_wins_over_libraries(self, validator) -> None:
        """Library tokens after the banner are ignored."""
        output = "ffmpeg version 4.3.1 Copyright (c)\n" + LIBRARIES_WITH_OLD_CODEC
        assert validator.determine_version(output) == Version(4, 3, 1)

    def test_reads_n_prefixed_banner(self, validator) -> None:
        """Release tags like 'n6.0' are accepted."""
        output = "ffmpeg version n6.0 Copyright (c) 2000-2023 the FFmpeg developers"
        assert validator.determine_version(output) == Version(6, 0)

    def test_banner_must_lead_output(self, validator) -> None:
        """A version line that is not at the start falls back to libraries."""
        output = "some prefix\nffmpeg version 3.0\n" + LIBRARIES_AT_MINIMUM
        assert validator.determine_version(output) == Version(4, 0)

    @pytest.mark.parametrize(
        "banner",
        [
            "ffmpeg version 2022-05-23-git-6076dbcb55-full_build-www.gyan.dev",
            "ffmpeg version 5 Copyright (c)",
        ],
    )
    def test_banner_without_dot_falls_back(self, validator, banner) -> None:
        """A banner without a dotted release number is not a version."""
        output = banner + "\n" + LIBRARIES_AT_MINIMUM
        assert validator.determine_version(output) == Version(4, 0)

    def test_library_fallback_returns_min_version(self, validator) -> None:
        """All libraries at or above minimum yields the configured minimum."""
        assert validator.determine_version(LIBRARIES_AT_MINIMUM) == Version(4, 0)

    def test_library_fallback_for_git_build(
        self, validator, library_only_output
    ) -> None:
        """A git build banner is not a version; libraries decide."""
        assert validator.determine_version(library_only_output) == Version(4, 0)

    def test_library_below_minimum(self, validator, mock_logger) -> None:
        """One old library makes the version unknown."""
        assert validator.determine_version(LIBRARIES_WITH_OLD_CODEC) is None
        mock_logger.warning.assert_any_call(
            "Found %s version %s lower than recommended version %s",
            "libavcodec",
            Version(58, 10),
            Version(58, 18),
        )

    def test_missing_library(self, validator, mock_logger) -> None:
        """A library absent from the output makes the version unknown."""
        output = LIBRARIES_AT_MINIMUM.replace("libpostproc 55.5\n", "")
        assert validator.determine_version(output) is None
        mock_logger.error.assert_any_call("%s version not found", "libpostproc")

    def test_satisfied_libraries_are_logged(self, validator, mock_logger) -> None:
        validator.determine_version(LIBRARIES_AT_MINIMUM)
        mock_logger.info.assert_any_call(
            "Found %s version %s (%s)", "libavutil", Version(56, 31), Version(56, 14)
        )

    def test_custom_minimums(self, mock_logger) -> None:
        """A custom library table and minimum are used together."""
        validator = VersionValidator(
            mock_logger,
            min_version=Version(5, 0),
            library_minimums={"libavutil": Version(57, 17)},
        )
        assert validator.determine_version("libavutil 57.28") == Version(5, 0)
        assert validator.determine_version("libavutil 56.70") is None

    def test_no_version_information(self, validator) -> None:
        assert validator.determine_version("garbage") is None


class TestValidate:
    """Tests for VersionValidator.validate()."""

    def test_release_build_is_valid(self, validator, version_output) -> None:
        assert validator.validate(version_output) is True

    def test_libraries_at_minimum_are_valid(self, validator) -> None:
        assert validator.validate(LIBRARIES_AT_MINIMUM) is True

    def test_old_library_is_invalid(self, validator, mock_logger) -> None:
        """Unknown version fails with a recommendation."""
        assert validator.validate(LIBRARIES_WITH_OLD_CODEC) is False
        mock_logger.warning.assert_any_call(
            "FFmpeg validation: We recommend minimum version %s", Version(4, 0)
        )

    @pytest.mark.parametrize("output", ["", "   ", "\n\t\n"])
    def test_blank_output_is_invalid(self, validator, mock_logger, output) -> None:
        assert validator.validate(output) is False
        mock_logger.error.assert_called_once_with(
            "FFmpeg validation: The process returned no result"
        )

    def test_libav_fork_is_invalid(self, validator, mock_logger, libav_output) -> None:
        """avconv is rejected with its own error message."""
        assert validator.validate(libav_output) is False
        mock_logger.error.assert_called_once_with(
            "FFmpeg validation: avconv instead of ffmpeg is not supported"
        )

    def test_libav_marker_wins_over_version(self, validator) -> None:
        """The fork marker fails validation even with a good version line."""
        output = "ffmpeg version 4.3.1 Copyright (c) the LIBAV Developers"
        assert validator.validate(output) is False

    def test_below_minimum(self, validator, mock_logger) -> None:
        output = "ffmpeg version 3.4.8 Copyright (c) 2000-2020 the FFmpeg developers"
        assert validator.validate(output) is False
        mock_logger.warning.assert_any_call(
            "FFmpeg validation: The minimum recommended version is %s", Version(4, 0)
        )

    def test_exactly_minimum(self, validator) -> None:
        assert validator.validate("ffmpeg version 4.0 Copyright") is True

    def test_above_maximum(self, mock_logger) -> None:
        """The warning names the configured maximum."""
        validator = VersionValidator(mock_logger, max_version=Version(5, 1))
        assert validator.validate("ffmpeg version 6.0 Copyright") is False
        mock_logger.warning.assert_any_call(
            "FFmpeg validation: The maximum recommended version is %s", Version(5, 1)
        )

    def test_dated_git_build_within_maximum(self, mock_logger) -> None:
        """A dated git build is judged by its libraries, not its date."""
        validator = VersionValidator(mock_logger, max_version=Version(7, 1))
        output = DATED_GIT_BANNER + "\n" + LIBRARIES_AT_MINIMUM
        assert validator.validate(output) is True

    def test_within_bounds(self, mock_logger) -> None:
        validator = VersionValidator(mock_logger, max_version=Version(5, 1))
        assert validator.validate("ffmpeg version 5.1 Copyright") is True

    def test_logs_found_version(self, validator, mock_logger, version_output) -> None:
        validator.validate(version_output)
        mock_logger.info.assert_any_call("Found ffmpeg version %s", Version(4, 3, 1))

    def test_logs_unknown_version(self, validator, mock_logger) -> None:
        validator.validate("garbage")
        mock_logger.info.assert_any_call("Found ffmpeg version %s", "unknown")


class TestRecommendation:
    """Tests for the recommendation logged when the version is unknown."""

    def test_exact_version(self, mock_logger) -> None:
        validator = VersionValidator(
            mock_logger, min_version=Version(4, 4), max_version=Version(4, 4)
        )
        validator.validate("garbage")
        mock_logger.warning.assert_any_call(
            "FFmpeg validation: We recommend version %s", Version(4, 4)
        )

    def test_version_range(self, mock_logger) -> None:
        validator = VersionValidator(
            mock_logger, min_version=Version(4, 0), max_version=Version(6, 0)
        )
        validator.validate("garbage")
        mock_logger.warning.assert_any_call(
            "FFmpeg validation: We recommend a minimum of %s and maximum of %s",
            Version(4, 0),
            Version(6, 0),
        )
