"""Subprocess utilities for engine invocation.

Wraps subprocess.run with the project's conventions: argv lists (never a
shell), text output decoded with replacement, and debug logging of what was
executed and how long it took.
"""

from __future__ import annotations

import logging
import subprocess  # nosec B404 - subprocess is required to query the engine
import time
from collections.abc import Sequence
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def run_command(
    args: Sequence[str | Path],
    timeout: float | None = None,
    errors: str = "replace",
    **kwargs: Any,
) -> tuple[str, str, int]:
    """Run an external command and capture its output.

    Args:
        args: Command and arguments. Path objects are converted to strings.
        timeout: Timeout in seconds. None (default) waits indefinitely.
        errors: Error handling mode for text decoding (default "replace").
        **kwargs: Additional subprocess.run arguments.

    Returns:
        Tuple of (stdout, stderr, returncode).

    Raises:
        FileNotFoundError: If the executable does not exist.
        OSError: If the process could not be started.
        subprocess.TimeoutExpired: If a timeout was given and exceeded.
    """
    str_args = [str(arg) for arg in args]
    command_name = Path(str_args[0]).name if str_args else "unknown"

    logger.debug(
        "Executing command: %s",
        " ".join(str_args),
        extra={"command": command_name, "arg_count": len(str_args)},
    )

    start_time = time.monotonic()
    result = subprocess.run(  # nosec B603 - argv list, no shell
        str_args,
        capture_output=True,
        text=True,
        errors=errors,
        timeout=timeout,
        **kwargs,
    )

    elapsed = time.monotonic() - start_time
    logger.debug(
        "Command completed",
        extra={
            "command": command_name,
            "elapsed_seconds": round(elapsed, 3),
            "returncode": result.returncode,
        },
    )

    return result.stdout or "", result.stderr or "", result.returncode
