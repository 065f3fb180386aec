"""TOML config file loading."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML content into a dictionary.

    Raises:
        tomllib.TOMLDecodeError: If content is not valid TOML.
    """
    return tomllib.loads(content)


def load_toml_file(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Parsed dictionary. Returns empty dict if file doesn't exist
        or cannot be parsed.
    """
    if not path.exists():
        logger.debug("TOML file not found: %s", path)
        return {}

    try:
        config = parse_toml(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load TOML file %s: %s", path, e)
        return {}

    logger.debug("Loaded TOML config from %s", path)
    return config
