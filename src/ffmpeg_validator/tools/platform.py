"""Operating system family resolution.

The family is resolved once when a validator is constructed and can be
injected, so platform-gated probes never re-inspect the OS per call.
"""

from __future__ import annotations

import platform
from enum import Enum


class PlatformFamily(Enum):
    """Operating system family of the host running the engine."""

    LINUX = "linux"
    WINDOWS = "windows"
    MACOS = "macos"
    OTHER = "other"

    @classmethod
    def from_system_name(cls, name: str) -> PlatformFamily:
        """Map an OS name (as reported by platform.system()) to a family."""
        normalized = name.casefold()
        if normalized == "linux":
            return cls.LINUX
        if "windows" in normalized:
            return cls.WINDOWS
        if normalized == "darwin":
            return cls.MACOS
        return cls.OTHER


def detect_platform_family() -> PlatformFamily:
    """Return the family of the running operating system."""
    return PlatformFamily.from_system_name(platform.system())
