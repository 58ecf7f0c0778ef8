"""Sliding-window rate limiter backed by a shared counter store."""

from __future__ import annotations

import time
import uuid
import logging
from collections.abc import Callable

from parley.state.limits import RateLimitResult
from parley.state.request import RequestContext
from parley.config.limits import (
    FALLBACK_CLIENT_IP,
    FORWARDED_FOR_HEADER,
    NO_SESSION_IDENTIFIER,
)

from .store import CounterStore

logger = logging.getLogger(__name__)

TimeFn = Callable[[], float]


def client_ip(ctx: RequestContext) -> str:
    forwarded_for = ctx.header(FORWARDED_FOR_HEADER)
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    return ctx.client_host or FALLBACK_CLIENT_IP


def rate_limit_identifier(ctx: RequestContext, session_token: str | None) -> str:
    return f"{client_ip(ctx)}-{session_token or NO_SESSION_IDENTIFIER}"


class RateLimiter:
    """Track requests per identifier over a rolling time window.

    Fails open: with no store, or when the store errors, every request is
    allowed and a warning is logged.
    """

    def __init__(
        self,
        *,
        store: CounterStore | None,
        limit: int,
        window_seconds: float,
        key_prefix: str,
        now_fn: TimeFn | None = None,
    ) -> None:
        self.limit = max(1, int(limit))
        self.window_seconds = max(0.001, float(window_seconds))
        self.key_prefix = key_prefix
        self._store = store
        self._now = now_fn or time.time
        self._warned_unconfigured = False

    @property
    def enabled(self) -> bool:
        return self._store is not None

    def _allow(self, now_ms: int) -> RateLimitResult:
        return RateLimitResult(
            allowed=True,
            limit=self.limit,
            remaining=self.limit,
            reset_time=now_ms + int(self.window_seconds * 1000),
        )

    async def check(self, identifier: str) -> RateLimitResult:
        now_ms = int(self._now() * 1000)

        if self._store is None:
            if not self._warned_unconfigured:
                logger.warning("Rate limiting is not configured; requests are not throttled")
                self._warned_unconfigured = True
            return self._allow(now_ms)

        try:
            allowed, count, reset_ms = await self._store.hit(
                f"{self.key_prefix}:{identifier}",
                now_ms=now_ms,
                window_ms=int(self.window_seconds * 1000),
                limit=self.limit,
                member=f"{now_ms}-{uuid.uuid4().hex[:12]}",
            )
        except Exception:
            logger.warning("Rate limiting error; allowing request", exc_info=True)
            return self._allow(now_ms)

        return RateLimitResult(
            allowed=allowed,
            limit=self.limit,
            remaining=max(0, self.limit - count),
            reset_time=reset_ms,
        )

    def now(self) -> float:
        return self._now()


__all__ = ["RateLimiter", "client_ip", "rate_limit_identifier"]
