"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (FFMPEG_VALIDATOR_*)
3. Config file (~/.ffmpeg-validator/config.toml)
4. Default values

Environment variables:
- FFMPEG_VALIDATOR_CONFIG_PATH: Path to config file
- FFMPEG_VALIDATOR_FFMPEG_PATH: Path to ffmpeg executable
- FFMPEG_VALIDATOR_MIN_VERSION: Minimum accepted ffmpeg version
- FFMPEG_VALIDATOR_MAX_VERSION: Maximum accepted ffmpeg version
- FFMPEG_VALIDATOR_TIMEOUT: Seconds to wait for each ffmpeg invocation
- FFMPEG_VALIDATOR_LOG_LEVEL: debug, info, warning or error
- FFMPEG_VALIDATOR_LOG_FORMAT: text or json

Example config file::

    [engine]
    ffmpeg = "/usr/lib/jellyfin-ffmpeg/ffmpeg"
    min_version = "4.0"

    [engine.library_minimums]
    libavutil = "56.14"
    libavcodec = "58.18"

    [logging]
    level = "debug"
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from ffmpeg_validator.config.env import EnvReader
from ffmpeg_validator.config.models import EngineConfig, LoggingConfig, ValidatorConfig
from ffmpeg_validator.config.toml_parser import load_toml_file

logger = logging.getLogger(__name__)

ENV_PREFIX = "FFMPEG_VALIDATOR_"

DEFAULT_CONFIG_DIR = Path.home() / ".ffmpeg-validator"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


def get_default_config_path(env: EnvReader | None = None) -> Path:
    """Get the config file path, honouring FFMPEG_VALIDATOR_CONFIG_PATH."""
    reader = env or EnvReader()
    return (
        reader.get_path(f"{ENV_PREFIX}CONFIG_PATH", must_exist=False)
        or DEFAULT_CONFIG_FILE
    )


def load_config_file(path: Path | None = None, env: EnvReader | None = None) -> dict:
    """Load the config file as a dict ({} if missing or unreadable)."""
    return load_toml_file(path or get_default_config_path(env))


def _optional_path(value: object) -> Path | None:
    return Path(str(value)).expanduser() if value else None


# TOML lets users write min_version = 4.1 (a float) or timeout = "30" (a string)
def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _optional_int(value: Any) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"expected an integer, got {value!r}") from e


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    ffmpeg_path: Path | None = None,
    log_level: str | None = None,
    log_format: str | None = None,
    log_file: Path | None = None,
    env: EnvReader | None = None,
) -> ValidatorConfig:
    """Get configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides FFMPEG_VALIDATOR_CONFIG_PATH).
        ffmpeg_path: CLI override for the ffmpeg path.
        log_level: CLI override for the log level.
        log_format: CLI override for the log format.
        log_file: CLI override for the log file.
        env: Environment reader (defaults to os.environ).

    Returns:
        ValidatorConfig with merged configuration.

    Raises:
        ValueError: If a merged value is invalid (e.g. unparseable version).
    """
    reader = env or EnvReader()
    file_config = load_config_file(config_path, reader)

    engine_file = file_config.get("engine", {})
    library_minimums = {
        str(name): str(version)
        for name, version in engine_file.get("library_minimums", {}).items()
    }
    engine = EngineConfig(
        ffmpeg=(
            ffmpeg_path
            or reader.get_path(f"{ENV_PREFIX}FFMPEG_PATH")
            or _optional_path(engine_file.get("ffmpeg"))
        ),
        min_version=reader.get_str(
            f"{ENV_PREFIX}MIN_VERSION", _optional_str(engine_file.get("min_version"))
        ),
        max_version=reader.get_str(
            f"{ENV_PREFIX}MAX_VERSION", _optional_str(engine_file.get("max_version"))
        ),
        library_minimums=library_minimums,
        timeout=reader.get_int(
            f"{ENV_PREFIX}TIMEOUT", _optional_int(engine_file.get("timeout"))
        ),
    )
    if engine.min_version is not None and not engine.library_minimums:
        logger.warning(
            "min_version %s configured without library_minimums; "
            "the built-in ffmpeg 4.0 library minimums will be used",
            engine.min_version,
        )

    logging_file = file_config.get("logging", {})
    logging_config = LoggingConfig(
        level=(
            log_level
            or reader.get_str(f"{ENV_PREFIX}LOG_LEVEL")
            or str(logging_file.get("level", "info"))
        ),
        file=log_file or _optional_path(logging_file.get("file")),
        format=(
            log_format
            or reader.get_str(f"{ENV_PREFIX}LOG_FORMAT")
            or str(logging_file.get("format", "text"))
        ),
        include_stderr=bool(logging_file.get("include_stderr", False)),
        max_bytes=int(logging_file.get("max_bytes", 10_485_760)),
        backup_count=int(logging_file.get("backup_count", 5)),
    )

    return ValidatorConfig(engine=engine, logging=logging_config)
