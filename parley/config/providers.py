"""Hosted AI provider configuration (env names, defaults and endpoints)."""

from __future__ import annotations

PROVIDER_ANTHROPIC = "Anthropic"
PROVIDER_ASSEMBLYAI = "AssemblyAI"
PROVIDER_CARTESIA = "Cartesia"

ENV_PROVIDER_TIMEOUT_S = "PROVIDER_TIMEOUT_S"
DEFAULT_PROVIDER_TIMEOUT_S: float = 60.0

# Anthropic (translation + explanation)
ENV_ANTHROPIC_MODEL = "ANTHROPIC_MODEL"
DEFAULT_ANTHROPIC_MODEL = "claude-3-5-sonnet-20240620"
ANTHROPIC_BASE_URL = "https://api.anthropic.com"
ANTHROPIC_VERSION = "2023-06-01"
ANTHROPIC_MAX_TOKENS = 5463
TRANSLATION_TEMPERATURE = 0.0
EXPLANATION_TEMPERATURE = 0.1

# AssemblyAI (transcription)
ASSEMBLYAI_BASE_URL = "https://api.assemblyai.com"
ENV_ASSEMBLYAI_POLL_INTERVAL_S = "ASSEMBLYAI_POLL_INTERVAL_S"
DEFAULT_ASSEMBLYAI_POLL_INTERVAL_S: float = 1.0
ASSEMBLYAI_MAX_WAIT_S: float = 300.0

# Cartesia (text-to-speech)
CARTESIA_WS_URL = "wss://api.cartesia.ai/tts/websocket"
CARTESIA_VERSION = "2024-06-10"
ENV_CARTESIA_MODEL_ID = "CARTESIA_MODEL_ID"
DEFAULT_CARTESIA_MODEL_ID = "sonic-multilingual"

# Slider thresholds mapping [-1, 1] speed to Cartesia's coarse speed setting.
TTS_SPEED_SLOW_BELOW = -0.3
TTS_SPEED_FAST_ABOVE = 0.3

__all__ = [
    "ANTHROPIC_BASE_URL",
    "ANTHROPIC_MAX_TOKENS",
    "ANTHROPIC_VERSION",
    "ASSEMBLYAI_BASE_URL",
    "ASSEMBLYAI_MAX_WAIT_S",
    "CARTESIA_VERSION",
    "CARTESIA_WS_URL",
    "DEFAULT_ANTHROPIC_MODEL",
    "DEFAULT_ASSEMBLYAI_POLL_INTERVAL_S",
    "DEFAULT_CARTESIA_MODEL_ID",
    "DEFAULT_PROVIDER_TIMEOUT_S",
    "ENV_ANTHROPIC_MODEL",
    "ENV_ASSEMBLYAI_POLL_INTERVAL_S",
    "ENV_CARTESIA_MODEL_ID",
    "ENV_PROVIDER_TIMEOUT_S",
    "EXPLANATION_TEMPERATURE",
    "PROVIDER_ANTHROPIC",
    "PROVIDER_ASSEMBLYAI",
    "PROVIDER_CARTESIA",
    "TRANSLATION_TEMPERATURE",
    "TTS_SPEED_FAST_ABOVE",
    "TTS_SPEED_SLOW_BELOW",
]
