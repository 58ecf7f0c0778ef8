"""Session token claims and verification results (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionClaims:
    token_id: str
    issued_at: int
    expires_at: int

    def remaining_s(self, now: float) -> float:
        return float(self.expires_at) - float(now)


@dataclass(frozen=True, slots=True)
class TokenVerification:
    valid: bool
    claims: SessionClaims | None = None


__all__ = ["SessionClaims", "TokenVerification"]
