"""Logger interface consumed by the validator.

Any object with debug/info/warning/error methods accepting a %-style
message, its arguments and keyword options (``extra=`` for structured
context, ``exc_info=``) can be injected. ``logging.Logger`` satisfies it.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LoggerProtocol(Protocol):
    """Minimal logging capability injected into the validator."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
