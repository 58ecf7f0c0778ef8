"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionSettings:
    secret_key: str
    token_lifetime_s: int
    renewal_threshold_s: int


@dataclass(frozen=True, slots=True)
class SecuritySettings:
    development: bool


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    redis_url: str | None
    max_requests: int
    window_seconds: float
    key_prefix: str


@dataclass(frozen=True, slots=True)
class StreamingSettings:
    inactivity_timeout_s: float
    channel_max_chunks: int


@dataclass(frozen=True, slots=True)
class ProviderSettings:
    anthropic_api_key: str | None
    anthropic_model: str
    assemblyai_api_key: str | None
    assemblyai_poll_interval_s: float
    cartesia_api_key: str | None
    cartesia_model_id: str
    timeout_s: float


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    enabled: bool
    debug: bool


@dataclass(frozen=True, slots=True)
class AppSettings:
    session: SessionSettings
    security: SecuritySettings
    limits: LimitsSettings
    streaming: StreamingSettings
    providers: ProviderSettings
    telemetry: TelemetrySettings


__all__ = [
    "AppSettings",
    "LimitsSettings",
    "ProviderSettings",
    "SecuritySettings",
    "SessionSettings",
    "StreamingSettings",
    "TelemetrySettings",
]
