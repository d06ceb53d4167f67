"""Environment-variable-based configuration for the report runner."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"


def _log_level(raw: str) -> str:
    """Return ``raw`` as a logging level name, or the default if unknown."""
    name = raw.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


LOG_LEVEL: str = _log_level(os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL))
TRAINING_SUMMARY: bool = os.environ.get("TRAINING_SUMMARY", "").lower() in ("1", "true", "yes")
