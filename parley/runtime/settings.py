"""Environment parsing for runtime settings.

Names and defaults live in `parley/config/*`; this module resolves them at call
time into the frozen dataclasses from `parley/state/settings.py`.
"""

from __future__ import annotations

import os

from parley.errors import ConfigurationError
from parley.config.session import SESSION_TOKEN_LIFETIME_S, SESSION_RENEWAL_THRESHOLD_S
from parley.config.logging import ENV_DEBUG
from parley.config.environment import ENV_APP_ENV, DEFAULT_APP_ENV, DEVELOPMENT_ENV_VALUES
from parley.config.telemetry import ENV_API_LOG_ENABLED, DEFAULT_API_LOG_ENABLED
from parley.config.secrets import (
    ENV_CARTESIA_API_KEY,
    ENV_ANTHROPIC_API_KEY,
    ENV_ASSEMBLYAI_API_KEY,
    ENV_SESSION_SECRET_KEY,
)
from parley.config.streaming import (
    ENV_TTS_CHANNEL_MAX_CHUNKS,
    ENV_TTS_INACTIVITY_TIMEOUT_S,
    DEFAULT_TTS_CHANNEL_MAX_CHUNKS,
    DEFAULT_TTS_INACTIVITY_TIMEOUT_S,
)
from parley.config.limits import (
    ENV_REDIS_URL,
    ENV_RATE_LIMIT_PREFIX,
    DEFAULT_RATE_LIMIT_PREFIX,
    ENV_RATE_LIMIT_MAX_REQUESTS,
    ENV_RATE_LIMIT_WINDOW_SECONDS,
    DEFAULT_RATE_LIMIT_MAX_REQUESTS,
    DEFAULT_RATE_LIMIT_WINDOW_SECONDS,
)
from parley.config.providers import (
    ENV_ANTHROPIC_MODEL,
    ENV_CARTESIA_MODEL_ID,
    ENV_PROVIDER_TIMEOUT_S,
    DEFAULT_ANTHROPIC_MODEL,
    DEFAULT_CARTESIA_MODEL_ID,
    DEFAULT_PROVIDER_TIMEOUT_S,
    ENV_ASSEMBLYAI_POLL_INTERVAL_S,
    DEFAULT_ASSEMBLYAI_POLL_INTERVAL_S,
)
from parley.state.settings import (
    AppSettings,
    LimitsSettings,
    SessionSettings,
    ProviderSettings,
    SecuritySettings,
    StreamingSettings,
    TelemetrySettings,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _optional_env(name: str) -> str | None:
    v = (os.getenv(name) or "").strip()
    return v or None


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _load_session_settings() -> SessionSettings:
    secret = (os.getenv(ENV_SESSION_SECRET_KEY) or "").strip()
    if not secret:
        raise ConfigurationError(ENV_SESSION_SECRET_KEY, "environment variable is not set")
    return SessionSettings(
        secret_key=secret,
        token_lifetime_s=SESSION_TOKEN_LIFETIME_S,
        renewal_threshold_s=SESSION_RENEWAL_THRESHOLD_S,
    )


def _load_security_settings() -> SecuritySettings:
    app_env = _str_env(ENV_APP_ENV, DEFAULT_APP_ENV).lower()
    return SecuritySettings(development=app_env in DEVELOPMENT_ENV_VALUES)


def _load_limits_settings() -> LimitsSettings:
    max_requests = _int_env(ENV_RATE_LIMIT_MAX_REQUESTS, DEFAULT_RATE_LIMIT_MAX_REQUESTS)
    if max_requests <= 0:
        max_requests = DEFAULT_RATE_LIMIT_MAX_REQUESTS
    window = _float_env(ENV_RATE_LIMIT_WINDOW_SECONDS, DEFAULT_RATE_LIMIT_WINDOW_SECONDS)
    if window <= 0:
        window = DEFAULT_RATE_LIMIT_WINDOW_SECONDS

    return LimitsSettings(
        redis_url=_optional_env(ENV_REDIS_URL),
        max_requests=max_requests,
        window_seconds=window,
        key_prefix=_str_env(ENV_RATE_LIMIT_PREFIX, DEFAULT_RATE_LIMIT_PREFIX),
    )


def _load_streaming_settings() -> StreamingSettings:
    timeout = _float_env(ENV_TTS_INACTIVITY_TIMEOUT_S, DEFAULT_TTS_INACTIVITY_TIMEOUT_S)
    if timeout <= 0:
        timeout = DEFAULT_TTS_INACTIVITY_TIMEOUT_S
    return StreamingSettings(
        inactivity_timeout_s=timeout,
        channel_max_chunks=max(1, _int_env(ENV_TTS_CHANNEL_MAX_CHUNKS, DEFAULT_TTS_CHANNEL_MAX_CHUNKS)),
    )


def _load_provider_settings() -> ProviderSettings:
    return ProviderSettings(
        anthropic_api_key=_optional_env(ENV_ANTHROPIC_API_KEY),
        anthropic_model=_str_env(ENV_ANTHROPIC_MODEL, DEFAULT_ANTHROPIC_MODEL),
        assemblyai_api_key=_optional_env(ENV_ASSEMBLYAI_API_KEY),
        assemblyai_poll_interval_s=max(
            0.1, _float_env(ENV_ASSEMBLYAI_POLL_INTERVAL_S, DEFAULT_ASSEMBLYAI_POLL_INTERVAL_S)
        ),
        cartesia_api_key=_optional_env(ENV_CARTESIA_API_KEY),
        cartesia_model_id=_str_env(ENV_CARTESIA_MODEL_ID, DEFAULT_CARTESIA_MODEL_ID),
        timeout_s=max(1.0, _float_env(ENV_PROVIDER_TIMEOUT_S, DEFAULT_PROVIDER_TIMEOUT_S)),
    )


def _load_telemetry_settings() -> TelemetrySettings:
    return TelemetrySettings(
        enabled=_bool_env(ENV_API_LOG_ENABLED, DEFAULT_API_LOG_ENABLED),
        debug=_bool_env(ENV_DEBUG, False),
    )


def load_settings() -> AppSettings:
    return AppSettings(
        session=_load_session_settings(),
        security=_load_security_settings(),
        limits=_load_limits_settings(),
        streaming=_load_streaming_settings(),
        providers=_load_provider_settings(),
        telemetry=_load_telemetry_settings(),
    )


__all__ = ["load_settings"]
