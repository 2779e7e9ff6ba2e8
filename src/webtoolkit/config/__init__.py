"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .formats import (
    DATE_FORMAT,
    END_OF_DAY_NANOSECOND,
    NULL_TOKEN,
    REFERENCE_DATE,
    TIME_FORMAT,
    ZERO_INSTANT,
)
from .logging import LOG_LEVEL_ENV, configure_logging, level_from_environment

__all__ = [
    "DATE_FORMAT",
    "END_OF_DAY_NANOSECOND",
    "LOG_LEVEL_ENV",
    "NULL_TOKEN",
    "REFERENCE_DATE",
    "TIME_FORMAT",
    "ZERO_INSTANT",
    "ConfigurationError",
    "configure_logging",
    "level_from_environment",
]
