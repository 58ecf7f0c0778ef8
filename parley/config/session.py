"""Session token and cookie constants."""

from __future__ import annotations

SESSION_COOKIE_NAME = "session-token"
SESSION_COOKIE_PATH = "/"
SESSION_COOKIE_SAMESITE = "lax"

SESSION_TOKEN_ALGORITHM = "HS256"

# Tokens live for a day; anything with less than an hour left is reissued.
SESSION_TOKEN_LIFETIME_S: int = 24 * 60 * 60
SESSION_RENEWAL_THRESHOLD_S: int = 60 * 60

AUTHORIZATION_HEADER = "Authorization"
BEARER_PREFIX = "Bearer "

__all__ = [
    "AUTHORIZATION_HEADER",
    "BEARER_PREFIX",
    "SESSION_COOKIE_NAME",
    "SESSION_COOKIE_PATH",
    "SESSION_COOKIE_SAMESITE",
    "SESSION_RENEWAL_THRESHOLD_S",
    "SESSION_TOKEN_ALGORITHM",
    "SESSION_TOKEN_LIFETIME_S",
]
