"""Shared error types for the parley server."""

from __future__ import annotations

from dataclasses import dataclass

from parley.config.http import (
    ERROR_PARSING,
    ERROR_PROVIDER,
    ERROR_PROCESSING,
    ERROR_CONFIGURATION,
    ERROR_STREAM_TIMEOUT,
)


@dataclass(slots=True, eq=False)
class ConfigurationError(Exception):
    """Raised when a required secret or credential is missing."""

    setting: str
    message: str = "required setting is not configured"

    def __str__(self) -> str:
        return f"{self.setting}: {self.message}"


@dataclass(slots=True, eq=False)
class AuthError(Exception):
    """Origin check or session token verification failed."""

    reason: str = "unauthorized"

    def __str__(self) -> str:
        return self.reason


@dataclass(slots=True, eq=False)
class RateLimitError(Exception):
    """Raised when a sliding-window rate limiter is saturated."""

    retry_in: float
    limit: int
    window_seconds: float

    def __str__(self) -> str:
        return f"at most {self.limit} requests per {self.window_seconds:g} seconds; retry in {self.retry_in:.1f}s"


@dataclass(slots=True, eq=False)
class ProviderError(Exception):
    """Failure reported by (or while talking to) a hosted AI provider."""

    message: str
    code: str = ERROR_PROVIDER
    provider: str | None = None

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> dict[str, str | None]:
        return {"error": self.message, "code": self.code, "provider": self.provider}


class TranscriptionError(ProviderError):
    pass


class TranslationError(ProviderError):
    pass


class ExplanationError(ProviderError):
    pass


class TTSError(ProviderError):
    pass


class ParsingError(ProviderError):
    """Provider answered, but its payload could not be parsed."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        super().__init__(message, ERROR_PARSING, provider)


class ProviderConfigurationError(ProviderError):
    """A provider client was requested but its credential is missing."""

    def __init__(self, provider: str) -> None:
        super().__init__(f"{provider} is not configured", ERROR_CONFIGURATION, provider)


@dataclass(slots=True, eq=False)
class StreamProcessingError(Exception):
    """A live audio stream failed after the response had started."""

    message: str
    code: str = ERROR_PROCESSING
    provider: str | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True, eq=False)
class StreamTimeoutError(Exception):
    """No audio arrived within the relay's inactivity window."""

    timeout_s: float
    code: str = ERROR_STREAM_TIMEOUT

    def __str__(self) -> str:
        return f"no audio received for {self.timeout_s:g} seconds"


__all__ = [
    "AuthError",
    "ConfigurationError",
    "ExplanationError",
    "ParsingError",
    "ProviderConfigurationError",
    "ProviderError",
    "RateLimitError",
    "StreamProcessingError",
    "StreamTimeoutError",
    "TTSError",
    "TranscriptionError",
    "TranslationError",
]
