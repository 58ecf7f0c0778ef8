"""Edge middleware: security headers on every response, first-touch sessions on /api."""

from __future__ import annotations

import logging

from fastapi import Request
from starlette.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from parley.handlers.origin import host_hostname
from parley.config.security import API_PATH_PREFIX, SECURITY_HEADERS
from parley.config.session import AUTHORIZATION_HEADER, SESSION_COOKIE_NAME

from .cookies import attach_session_token

logger = logging.getLogger(__name__)


def is_api_path(path: str) -> bool:
    return path == API_PATH_PREFIX or path.startswith(f"{API_PATH_PREFIX}/")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        issued: str | None = None
        try:
            issued = self._mint_session(request)
        except Exception:
            logger.exception("session minting failed; passing request through")
            issued = None
        if issued is not None:
            # Routes pick this up so a first-touch request validates against it.
            request.state.issued_session_token = issued

        response = await call_next(request)

        try:
            self._annotate(request, response, issued)
        except Exception:
            logger.exception("failed to annotate response; passing it through")
        return response

    def _mint_session(self, request: Request) -> str | None:
        if not is_api_path(request.url.path):
            return None
        if request.cookies.get(SESSION_COOKIE_NAME):
            return None
        deps = getattr(request.app.state, "runtime_deps", None)
        if deps is None:
            return None
        logger.info("creating new session token path=%s", request.url.path)
        return deps.codec.issue()

    def _annotate(self, request: Request, response: Response, issued: str | None) -> None:
        # Everything is staged on a scratch response first so a failure part way
        # through leaves the real response untouched.
        staged = Response()
        for name, value in SECURITY_HEADERS.items():
            staged.headers[name] = value
        # Skip when nothing was minted or the route already attached a renewed token.
        if issued is not None and AUTHORIZATION_HEADER not in response.headers:
            deps = request.app.state.runtime_deps
            attach_session_token(
                staged,
                issued,
                domain=host_hostname(request.headers.get("host")),
                secure=not deps.settings.security.development,
                max_age=deps.codec.lifetime_s,
            )

        for name, value in staged.headers.items():
            if name == "content-length":
                continue
            if name == "set-cookie":
                response.headers.append(name, value)
            else:
                response.headers[name] = value


__all__ = ["SecurityHeadersMiddleware", "is_api_path"]
