"""Rate limit configuration (env names and defaults only)."""

from __future__ import annotations

ENV_REDIS_URL = "REDIS_URL"

ENV_RATE_LIMIT_MAX_REQUESTS = "RATE_LIMIT_MAX_REQUESTS"
ENV_RATE_LIMIT_WINDOW_SECONDS = "RATE_LIMIT_WINDOW_SECONDS"
ENV_RATE_LIMIT_PREFIX = "RATE_LIMIT_PREFIX"

DEFAULT_RATE_LIMIT_MAX_REQUESTS: int = 10
DEFAULT_RATE_LIMIT_WINDOW_SECONDS: float = 10.0
DEFAULT_RATE_LIMIT_PREFIX = "parley:ratelimit"

# Identity pieces used when the request carries no better information.
FALLBACK_CLIENT_IP = "127.0.0.1"
NO_SESSION_IDENTIFIER = "no-session"

FORWARDED_FOR_HEADER = "x-forwarded-for"

RATE_LIMIT_LIMIT_HEADER = "X-RateLimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"

__all__ = [
    "DEFAULT_RATE_LIMIT_MAX_REQUESTS",
    "DEFAULT_RATE_LIMIT_PREFIX",
    "DEFAULT_RATE_LIMIT_WINDOW_SECONDS",
    "ENV_RATE_LIMIT_MAX_REQUESTS",
    "ENV_RATE_LIMIT_PREFIX",
    "ENV_RATE_LIMIT_WINDOW_SECONDS",
    "ENV_REDIS_URL",
    "FALLBACK_CLIENT_IP",
    "FORWARDED_FOR_HEADER",
    "NO_SESSION_IDENTIFIER",
    "RATE_LIMIT_LIMIT_HEADER",
    "RATE_LIMIT_REMAINING_HEADER",
    "RATE_LIMIT_RESET_HEADER",
]
