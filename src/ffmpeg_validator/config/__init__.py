"""Configuration management for ffmpeg-validator.

Precedence: CLI flags, then FFMPEG_VALIDATOR_* environment variables, then
the config file (~/.ffmpeg-validator/config.toml), then defaults.
"""

from ffmpeg_validator.config.env import EnvReader
from ffmpeg_validator.config.loader import (
    DEFAULT_CONFIG_FILE,
    get_config,
    get_default_config_path,
    load_config_file,
)
from ffmpeg_validator.config.models import EngineConfig, LoggingConfig, ValidatorConfig
from ffmpeg_validator.config.toml_parser import load_toml_file, parse_toml

__all__ = [
    # Models
    "EngineConfig",
    "LoggingConfig",
    "ValidatorConfig",
    # Loader
    "DEFAULT_CONFIG_FILE",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    # Helpers
    "EnvReader",
    "load_toml_file",
    "parse_toml",
]
