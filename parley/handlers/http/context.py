"""Build the explicit request context from a Starlette request."""

from __future__ import annotations

import logging

from fastapi import Request

from parley.state import RequestContext
from parley.config.logging import REDACTED_HEADERS

logger = logging.getLogger(__name__)


def build_request_context(request: Request) -> RequestContext:
    client = request.client
    return RequestContext(
        method=request.method,
        path=request.url.path,
        headers={key.lower(): value for key, value in request.headers.items()},
        cookies=dict(request.cookies),
        client_host=client.host if client else None,
        issued_token=getattr(request.state, "issued_session_token", None),
    )


def log_request(ctx: RequestContext, route: str) -> None:
    """Debug-log method, path and headers. Credentials are redacted, bodies never logged."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    headers = {
        key: ("<redacted>" if key in REDACTED_HEADERS else value) for key, value in ctx.headers.items()
    }
    logger.debug("[%s] %s %s headers=%s", route, ctx.method, ctx.path, headers)


__all__ = ["build_request_context", "log_request"]
