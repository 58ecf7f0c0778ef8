"""Runtime dependency construction (token codec, rate limiting, providers, telemetry)."""

from __future__ import annotations

import logging

from parley.state import RuntimeDeps
from parley.state.settings import AppSettings
from parley.handlers.limits import RateLimiter
from parley.handlers.tokens import SessionTokenCodec
from parley.handlers.store import RedisCounterStore, build_redis_client

from .settings import load_settings
from .providers import ProviderRegistry
from .telemetry import ApiCallLogger, LogTelemetrySink, RedisTelemetrySink

logger = logging.getLogger(__name__)


async def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()

    codec = SessionTokenCodec(
        secret_key=settings.session.secret_key,
        lifetime_s=settings.session.token_lifetime_s,
        renewal_threshold_s=settings.session.renewal_threshold_s,
    )

    redis_client = None
    store = None
    if settings.limits.redis_url:
        redis_client = build_redis_client(settings.limits.redis_url)
        try:
            await redis_client.ping()
        except Exception as exc:
            # Requests still go through; the limiter fails open per call.
            logger.warning("rate-limit store unreachable at startup: %s", exc)
        store = RedisCounterStore(redis_client)
    else:
        logger.info("REDIS_URL is not set; rate limiting is disabled")

    rate_limiter = RateLimiter(
        store=store,
        limit=settings.limits.max_requests,
        window_seconds=settings.limits.window_seconds,
        key_prefix=settings.limits.key_prefix,
    )

    sink = RedisTelemetrySink(redis_client) if redis_client is not None else LogTelemetrySink()
    telemetry = ApiCallLogger(sink, enabled=settings.telemetry.enabled)

    return RuntimeDeps(
        settings=settings,
        codec=codec,
        rate_limiter=rate_limiter,
        providers=ProviderRegistry(settings.providers),
        telemetry=telemetry,
        _redis=redis_client,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
