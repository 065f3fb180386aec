"""Core utilities with no dependencies on the rest of the package."""

from ffmpeg_validator.core.string_utils import compare_strings_ci, contains_ci
from ffmpeg_validator.core.subprocess_utils import run_command

__all__ = [
    "compare_strings_ci",
    "contains_ci",
    "run_command",
]
