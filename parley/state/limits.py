"""Rate limiter results (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RateLimitResult:
    allowed: bool
    limit: int
    remaining: int
    # Epoch milliseconds at which the oldest counted request leaves the window.
    reset_time: int

    def retry_in_s(self, now: float) -> float:
        return max(0.0, self.reset_time / 1000.0 - float(now))


__all__ = ["RateLimitResult"]
