"""TTS audio relay settings (env names, defaults and wire constants)."""

from __future__ import annotations

ENV_TTS_INACTIVITY_TIMEOUT_S = "TTS_INACTIVITY_TIMEOUT_S"
ENV_TTS_CHANNEL_MAX_CHUNKS = "TTS_CHANNEL_MAX_CHUNKS"

# A relay with no audio for this long is considered stalled.
DEFAULT_TTS_INACTIVITY_TIMEOUT_S: float = 50.0

# Bound on decoded chunks waiting between the provider reader and the response writer.
DEFAULT_TTS_CHANNEL_MAX_CHUNKS: int = 64

DEFAULT_TTS_SAMPLE_RATE: int = 44100
TTS_AUDIO_FORMAT = "pcm_f32le"
TTS_MEDIA_TYPE = "application/octet-stream"

HEADER_SAMPLE_RATE = "X-Sample-Rate"
HEADER_AUDIO_FORMAT = "X-Audio-Format"

# Provider live-synthesis message types
MSG_TYPE_CHUNK = "chunk"
MSG_TYPE_DONE = "done"
MSG_TYPE_ERROR = "error"

__all__ = [
    "DEFAULT_TTS_CHANNEL_MAX_CHUNKS",
    "DEFAULT_TTS_INACTIVITY_TIMEOUT_S",
    "DEFAULT_TTS_SAMPLE_RATE",
    "ENV_TTS_CHANNEL_MAX_CHUNKS",
    "ENV_TTS_INACTIVITY_TIMEOUT_S",
    "HEADER_AUDIO_FORMAT",
    "HEADER_SAMPLE_RATE",
    "MSG_TYPE_CHUNK",
    "MSG_TYPE_DONE",
    "MSG_TYPE_ERROR",
    "TTS_AUDIO_FORMAT",
    "TTS_MEDIA_TYPE",
]
