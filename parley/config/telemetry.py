"""API call telemetry configuration."""

from __future__ import annotations

ENV_API_LOG_ENABLED = "API_LOG_ENABLED"
DEFAULT_API_LOG_ENABLED = True

API_LOG_KEY = "parley:api_logs"
API_LOG_MAX_ENTRIES = 10_000

ROUTE_TRANSCRIBE = "transcribe"
ROUTE_TRANSLATE = "translate"
ROUTE_TTS = "tts"
ROUTE_EXPLAIN = "explain"

__all__ = [
    "API_LOG_KEY",
    "API_LOG_MAX_ENTRIES",
    "DEFAULT_API_LOG_ENABLED",
    "ENV_API_LOG_ENABLED",
    "ROUTE_EXPLAIN",
    "ROUTE_TRANSCRIBE",
    "ROUTE_TRANSLATE",
    "ROUTE_TTS",
]
