"""Origin / referer checks for browser-originated API calls."""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

from parley.state.request import RequestContext
from parley.config.security import LOOPBACK_HOSTNAMES

logger = logging.getLogger(__name__)


def source_hostname(value: str | None) -> str | None:
    """Hostname of an Origin/Referer value; both always carry a scheme."""
    if not value or "://" not in value:
        return None
    try:
        return urlsplit(value.strip()).hostname
    except ValueError:
        return None


def host_hostname(value: str | None) -> str | None:
    if not value:
        return None
    try:
        return urlsplit(f"//{value.strip()}").hostname
    except ValueError:
        return None


def is_loopback(hostname: str | None) -> bool:
    return hostname is not None and hostname in LOOPBACK_HOSTNAMES


def validate_origin(
    *,
    origin: str | None,
    host: str | None,
    referer: str | None = None,
    development: bool = False,
) -> bool:
    sources = [source_hostname(origin), source_hostname(referer)]

    # Local multi-port setups (UI on :3000, API on :8000) never share a host.
    if development and any(is_loopback(name) for name in sources):
        logger.debug("allowing loopback development request origin=%s referer=%s", origin, referer)
        return True

    expected = host_hostname(host)
    if expected is None:
        return False
    return any(name == expected for name in sources if name is not None)


def validate_request_origin(ctx: RequestContext, *, development: bool) -> bool:
    return validate_origin(
        origin=ctx.header("origin"),
        host=ctx.header("host"),
        referer=ctx.header("referer"),
        development=development,
    )


__all__ = [
    "host_hostname",
    "is_loopback",
    "source_hostname",
    "validate_origin",
    "validate_request_origin",
]
