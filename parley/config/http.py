"""HTTP API paths and error codes."""

from __future__ import annotations

API_TRANSCRIBE_PATH = "/api/transcribe"
API_TRANSLATE_PATH = "/api/translate"
API_EXPLAIN_PATH = "/api/explain"
API_TTS_PATH = "/api/tts"

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_MULTIPART = "multipart/form-data"

# Errors (body.code values)
ERROR_UNAUTHORIZED = "UNAUTHORIZED"
ERROR_RATE_LIMITED = "RATE_LIMITED"
ERROR_INVALID_REQUEST = "INVALID_REQUEST"
ERROR_INTERNAL = "INTERNAL_ERROR"

# Provider error codes
ERROR_PROVIDER = "PROVIDER_ERROR"
ERROR_CONFIGURATION = "CONFIGURATION_ERROR"
ERROR_PARSING = "PARSING_ERROR"
ERROR_PROCESSING = "PROCESSING_ERROR"
ERROR_TRANSCRIPTION_FAILED = "TRANSCRIPTION_FAILED"
ERROR_STREAM_TIMEOUT = "STREAM_TIMEOUT"

__all__ = [
    "API_EXPLAIN_PATH",
    "API_TRANSCRIBE_PATH",
    "API_TRANSLATE_PATH",
    "API_TTS_PATH",
    "CONTENT_TYPE_JSON",
    "CONTENT_TYPE_MULTIPART",
    "ERROR_CONFIGURATION",
    "ERROR_INTERNAL",
    "ERROR_INVALID_REQUEST",
    "ERROR_PARSING",
    "ERROR_PROCESSING",
    "ERROR_PROVIDER",
    "ERROR_RATE_LIMITED",
    "ERROR_STREAM_TIMEOUT",
    "ERROR_TRANSCRIPTION_FAILED",
    "ERROR_UNAUTHORIZED",
]
