"""Configuration data models.

This module defines dataclasses for ffmpeg-validator configuration options.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ffmpeg_validator.tools.version import Version


@dataclass
class EngineConfig:
    """Configuration for the ffmpeg binary and its accepted versions.

    min_version and library_minimums are a pair: library_minimums must hold
    the library versions shipped with min_version. When both are unset the
    built-in pair (ffmpeg 4.0) is used.
    """

    # Path to ffmpeg (None = look up "ffmpeg" in PATH)
    ffmpeg: Path | None = None

    # Version bounds as dotted strings (None = built-in default / no maximum)
    min_version: str | None = None
    max_version: str | None = None

    # Library name -> minimum "major.minor"
    library_minimums: dict[str, str] = field(default_factory=dict)

    # Seconds to wait for each ffmpeg invocation (None = wait indefinitely)
    timeout: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        for name in ("min_version", "max_version"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
        if self.timeout is not None and not isinstance(self.timeout, int):
            raise ValueError(f"timeout must be an integer, got {self.timeout!r}")
        # Version.parse raises ValueError subclasses for malformed values
        self.parsed_min_version()
        self.parsed_max_version()
        self.parsed_library_minimums()
        if self.timeout is not None and self.timeout < 1:
            raise ValueError(f"timeout must be at least 1, got {self.timeout}")

    def parsed_min_version(self) -> Version | None:
        if self.min_version is None:
            return None
        return Version.parse(self.min_version)

    def parsed_max_version(self) -> Version | None:
        if self.max_version is None:
            return None
        return Version.parse(self.max_version)

    def parsed_library_minimums(self) -> dict[str, Version] | None:
        if not self.library_minimums:
            return None
        return {
            name: Version.parse(version)
            for name, version in self.library_minimums.items()
        }


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )


@dataclass
class ValidatorConfig:
    """Top-level configuration."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
