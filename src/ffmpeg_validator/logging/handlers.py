"""JSON log output.

Records from the runner carry the ffmpeg command line and exit status via
``extra=``; those are promoted to top-level keys so a failing probe can be
found with a single field lookup.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord has, plus the ones Formatter.format() adds
_RECORD_ATTRS: frozenset[str] = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

# extra= fields emitted as top-level keys rather than under "context"
PROMOTED_FIELDS: tuple[str, ...] = ("command", "returncode")


class JSONFormatter(logging.Formatter):
    """Format each record as one JSON object per line.

    Keys: ``timestamp`` (UTC ISO-8601), ``level``, ``logger``, ``message``,
    ``command`` and ``returncode`` when the record carries them, ``context``
    for any other extra fields, and ``exception`` for tracebacks.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        for field in PROMOTED_FIELDS:
            if field in extra:
                entry[field] = extra.pop(field)
        if extra:
            entry["context"] = extra

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
