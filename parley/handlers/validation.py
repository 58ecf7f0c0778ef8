"""Per-request gate run by every API route before any provider is touched."""

from __future__ import annotations

import logging

from parley.errors import AuthError, RateLimitError
from parley.state.request import RequestContext
from parley.state.validation import ValidationOutcome
from parley.config.session import BEARER_PREFIX, SESSION_COOKIE_NAME

from .limits import RateLimiter, rate_limit_identifier
from .origin import validate_request_origin
from .tokens import SessionTokenCodec

logger = logging.getLogger(__name__)


def resolve_session_token(ctx: RequestContext) -> str | None:
    # Header wins over cookie; a token minted by the edge middleware for this
    # same request is the last resort for first-touch clients.
    auth = ctx.header("authorization")
    if auth and auth.startswith(BEARER_PREFIX):
        token = auth[len(BEARER_PREFIX):].strip()
        if token:
            return token
    cookie = (ctx.cookies.get(SESSION_COOKIE_NAME) or "").strip()
    if cookie:
        return cookie
    return ctx.issued_token


async def validate_api_request(
    ctx: RequestContext,
    *,
    codec: SessionTokenCodec,
    rate_limiter: RateLimiter,
    development: bool,
) -> ValidationOutcome:
    if not validate_request_origin(ctx, development=development):
        logger.warning(
            "Origin verification failed path=%s origin=%s host=%s",
            ctx.path,
            ctx.header("origin"),
            ctx.header("host"),
        )
        return ValidationOutcome(accepted=False, error=AuthError("origin verification failed"))

    token = resolve_session_token(ctx)
    if token is None:
        logger.warning("No session token found path=%s", ctx.path)
        return ValidationOutcome(accepted=False, error=AuthError("missing session token"))

    verification = codec.verify(token)
    if not verification.valid or verification.claims is None:
        return ValidationOutcome(accepted=False, error=AuthError("invalid or expired session token"))

    # A token minted for this very request identifies nobody yet; clients that
    # never return the cookie share the no-session bucket for their address.
    presented = None if token == ctx.issued_token else token
    result = await rate_limiter.check(rate_limit_identifier(ctx, presented))
    if not result.allowed:
        logger.info("Rate limit exceeded path=%s limit=%d", ctx.path, result.limit)
        error = RateLimitError(
            retry_in=result.retry_in_s(rate_limiter.now()),
            limit=result.limit,
            window_seconds=rate_limiter.window_seconds,
        )
        return ValidationOutcome(accepted=False, error=error, rate_limit=result)

    renewed: str | None = None
    if codec.should_renew(verification.claims):
        renewed = codec.issue()
        logger.info("Renewing session token token_id=%s", verification.claims.token_id)

    return ValidationOutcome(accepted=True, renewed_token=renewed, rate_limit=result)


__all__ = ["resolve_session_token", "validate_api_request"]
