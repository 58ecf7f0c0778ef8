"""Logging configuration."""

from __future__ import annotations

ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_DEBUG = "DEBUG"
ENV_SHOW_HTTP_LOGS = "SHOW_HTTP_LOGS"

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Third-party loggers that are chatty at INFO.
NOISY_LOGGERS = ("httpx", "httpcore", "websockets")

# Request headers never written to debug logs.
REDACTED_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "ENV_DEBUG",
    "ENV_LOG_LEVEL",
    "ENV_SHOW_HTTP_LOGS",
    "LOG_FORMAT",
    "NOISY_LOGGERS",
    "REDACTED_HEADERS",
]
