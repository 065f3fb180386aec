"""Structured logging for ffmpeg-validator.

Provides configurable logging with JSON format support and file rotation,
and the logger interface the validator accepts.
"""

from ffmpeg_validator.logging.config import configure_logging
from ffmpeg_validator.logging.handlers import JSONFormatter
from ffmpeg_validator.logging.interface import LoggerProtocol

__all__ = [
    "JSONFormatter",
    "LoggerProtocol",
    "configure_logging",
]
