"""Process runner used to query the engine binary.

The runner is the only place a process is spawned. Everything above it works
on the returned text, so tests inject a fake runner instead of patching
subprocess.
"""

from __future__ import annotations

import subprocess  # nosec B404 - only for TimeoutExpired
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from ffmpeg_validator.core.subprocess_utils import run_command
from ffmpeg_validator.logging.interface import LoggerProtocol
from ffmpeg_validator.tools.exceptions import ProcessExecutionError


@dataclass(frozen=True)
class CommandResult:
    """Captured output of a finished process."""

    args: tuple[str, ...]
    stdout: str
    stderr: str
    returncode: int

    def check_returncode(self) -> None:
        """Raise ProcessExecutionError if the process exited non-zero."""
        if self.returncode != 0:
            raise ProcessExecutionError(self.args, self.returncode, self.stderr)


class ProcessRunner(Protocol):
    """Runs a command to completion and captures its output."""

    def run(self, args: Sequence[str]) -> CommandResult:
        """Run args and return the captured result.

        Raises:
            ProcessExecutionError: If the process could not be started.
        """
        ...


class SubprocessRunner:
    """ProcessRunner backed by subprocess.run.

    Args:
        timeout: Seconds to wait for each command. None waits indefinitely.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    def run(self, args: Sequence[str]) -> CommandResult:
        try:
            stdout, stderr, returncode = run_command(args, timeout=self.timeout)
        except FileNotFoundError as e:
            raise ProcessExecutionError(args, None, reason=f"not found: {e}") from e
        except subprocess.TimeoutExpired as e:
            raise ProcessExecutionError(
                args, None, reason=f"timed out after {e.timeout}s"
            ) from e
        except OSError as e:
            raise ProcessExecutionError(args, None, reason=str(e)) from e
        return CommandResult(tuple(args), stdout, stderr, returncode)


def format_command(encoder_path: str, args: Sequence[str]) -> str:
    """Render a command line for log messages."""
    return " ".join([encoder_path, *args])


def get_process_output(
    runner: ProcessRunner,
    encoder_path: str,
    args: Sequence[str],
    logger: LoggerProtocol,
    read_stderr: bool = False,
) -> str:
    """Run the engine with args and return its output.

    Args:
        runner: Runner that executes the command.
        encoder_path: Path to the engine binary.
        args: Engine arguments.
        logger: Logger for the command and any failure.
        read_stderr: Treat the error stream as a valid payload. On failure
            the captured stderr is returned instead of raising; on success
            stderr is appended to stdout.

    Returns:
        Captured output text.

    Raises:
        ProcessExecutionError: If the command failed and read_stderr is False.
    """
    command = format_command(encoder_path, args)
    logger.info("Running command: %s", command)
    try:
        result = runner.run([encoder_path, *args])
        result.check_returncode()
    except ProcessExecutionError as e:
        logger.error(
            "Error running command: %s: %s",
            command,
            e,
            extra={"command": command, "returncode": e.returncode},
        )
        if not read_stderr:
            raise
        return e.stderr

    if read_stderr:
        return result.stdout + result.stderr
    return result.stdout
