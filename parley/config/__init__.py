"""Configuration module exports (env names, defaults and protocol constants only)."""

from .session import SESSION_COOKIE_NAME, SESSION_TOKEN_LIFETIME_S
from .security import API_PATH_PREFIX, SECURITY_HEADERS

__all__ = [
    "API_PATH_PREFIX",
    "SECURITY_HEADERS",
    "SESSION_COOKIE_NAME",
    "SESSION_TOKEN_LIFETIME_S",
]
