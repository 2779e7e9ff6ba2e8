"""Shared logging helpers for webtoolkit."""

from __future__ import annotations

import logging
import os
from typing import Final

from .errors import ConfigurationError

LOG_LEVEL_ENV: Final[str] = "WEBTOOLKIT_LOG_LEVEL"


def level_from_environment(default: int = logging.INFO) -> int:
    """Return the log level named by ``WEBTOOLKIT_LOG_LEVEL`` or ``default``."""

    raw = os.getenv(LOG_LEVEL_ENV)
    if raw is None or not raw.strip():
        return default
    name = raw.strip().upper()
    level = logging.getLevelNamesMapping().get(name)
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_ENV}: {raw}")
    return level


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with sensible defaults.

    Parameters mirror ``logging.basicConfig`` with a simplified contract: the level
    falls back to ``WEBTOOLKIT_LOG_LEVEL`` and then INFO, and the format is terse enough
    for CLI output. Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=level_from_environment() if level is None else level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
