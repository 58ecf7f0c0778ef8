"""Session token transport: cookie plus Authorization header."""

from __future__ import annotations

from starlette.responses import Response

from parley.config.session import (
    BEARER_PREFIX,
    SESSION_COOKIE_NAME,
    SESSION_COOKIE_PATH,
    AUTHORIZATION_HEADER,
    SESSION_COOKIE_SAMESITE,
    SESSION_TOKEN_LIFETIME_S,
)


def attach_session_token(
    response: Response,
    token: str,
    *,
    domain: str | None,
    secure: bool,
    max_age: int = SESSION_TOKEN_LIFETIME_S,
) -> None:
    response.set_cookie(
        SESSION_COOKIE_NAME,
        token,
        max_age=max_age,
        path=SESSION_COOKIE_PATH,
        domain=domain or None,
        secure=secure,
        httponly=True,
        samesite=SESSION_COOKIE_SAMESITE,
    )
    response.headers[AUTHORIZATION_HEADER] = f"{BEARER_PREFIX}{token}"


__all__ = ["attach_session_token"]
