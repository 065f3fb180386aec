"""Exit codes for CLI commands."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for ffmpeg-validator commands."""

    SUCCESS = 0

    # Validation errors (10-19)
    CONFIG_ERROR = 11

    # Warning states (60-69)
    WARNINGS = 60
    CRITICAL = 61


DOCTOR_EXIT_CODES = {
    "EXIT_OK": ExitCode.SUCCESS,
    "EXIT_WARNINGS": ExitCode.WARNINGS,
    "EXIT_CRITICAL": ExitCode.CRITICAL,
}
