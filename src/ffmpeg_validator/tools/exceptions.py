"""Exceptions raised by version parsing and engine invocation."""

from __future__ import annotations

from collections.abc import Sequence


class VersionError(ValueError):
    """Base exception for malformed version values."""


class InvalidVersionComponentError(VersionError):
    """A version component is outside its allowed range.

    Attributes:
        component: Name of the offending component (major, minor, ...).
        value: The rejected value.
    """

    def __init__(self, component: str, value: object, reason: str | None = None):
        self.component = component
        self.value = value
        message = reason or f"specified {component} is out of range: {value}"
        super().__init__(message)


class VersionFormatError(VersionError):
    """A version string could not be parsed.

    Attributes:
        text: The input that failed to parse (None if none was given).
    """

    def __init__(self, text: str | None, reason: str) -> None:
        self.text = text
        super().__init__(f"Invalid version string {text!r}: {reason}")


class ProcessExecutionError(Exception):
    """The engine binary could not be run or exited with an error.

    Attributes:
        command: The argv that was executed.
        returncode: Exit status, or None if the process never started.
        stderr: Captured error stream (empty if the process never started).
    """

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        stderr: str = "",
        reason: str | None = None,
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        if reason is None:
            reason = f"exited with code {returncode}"
        super().__init__(f"Command failed: {' '.join(self.command)} ({reason})")
