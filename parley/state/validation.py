"""Request validation outcome (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass

from parley.errors import AuthError, RateLimitError

from .limits import RateLimitResult


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    accepted: bool
    renewed_token: str | None = None
    error: AuthError | RateLimitError | None = None
    rate_limit: RateLimitResult | None = None


__all__ = ["ValidationOutcome"]
