"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from parley.state.settings import AppSettings
    from parley.handlers.limits import RateLimiter
    from parley.handlers.tokens import SessionTokenCodec
    from parley.runtime.providers import ProviderRegistry
    from parley.runtime.telemetry import ApiCallLogger


@dataclass(slots=True)
class RuntimeDeps:
    settings: AppSettings
    codec: SessionTokenCodec
    rate_limiter: RateLimiter
    providers: ProviderRegistry
    telemetry: ApiCallLogger
    _redis: Any = None

    async def shutdown(self) -> None:
        try:
            await self.telemetry.drain()
        except Exception:
            logger.exception("telemetry drain failed")
        try:
            await self.providers.aclose()
        except Exception:
            logger.exception("provider shutdown failed")
        if self._redis is not None:
            try:
                await self._redis.aclose()
            except Exception:
                logger.exception("redis shutdown failed")


__all__ = ["RuntimeDeps"]
