"""Logging initialization."""

from __future__ import annotations

import os
import logging

from parley.config.logging import (
    ENV_DEBUG,
    LOG_FORMAT,
    ENV_LOG_LEVEL,
    NOISY_LOGGERS,
    DEFAULT_LOG_LEVEL,
    ENV_SHOW_HTTP_LOGS,
)

_TRUTHY = {"1", "true", "yes"}


def debug_enabled() -> bool:
    return (os.getenv(ENV_DEBUG) or "").strip().lower() in _TRUTHY


def configure_logging() -> None:
    # HTTP client libraries log every request at INFO. Keep them tame unless explicitly enabled.
    if (os.getenv(ENV_SHOW_HTTP_LOGS) or "").strip().lower() not in _TRUTHY:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    level = (os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    if debug_enabled():
        logging.getLogger("parley").setLevel(logging.DEBUG)


__all__ = ["configure_logging", "debug_enabled"]
