"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    log_level: str = _DEFAULT_LOG_LEVEL
    log_json: bool = False
    default_warehouse: str = "Main"


def load_settings() -> Settings:
    return Settings(
        log_level=_log_level(os.getenv("WMS_LOG_LEVEL", _DEFAULT_LOG_LEVEL)),
        log_json=os.getenv("WMS_LOG_JSON", "").lower() in _TRUTHY,
        default_warehouse=os.getenv("WMS_DEFAULT_WAREHOUSE") or "Main",
    )


def _log_level(raw: str) -> str:
    """Unknown level names fall back to WARNING."""
    level = raw.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return _DEFAULT_LOG_LEVEL
