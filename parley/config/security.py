"""Edge security headers and origin checking constants."""

from __future__ import annotations

API_PATH_PREFIX = "/api"

SECURITY_HEADERS: dict[str, str] = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "origin-when-cross-origin",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-DNS-Prefetch-Control": "off",
}

LOOPBACK_HOSTNAMES = frozenset({"localhost", "127.0.0.1", "::1"})

__all__ = ["API_PATH_PREFIX", "LOOPBACK_HOSTNAMES", "SECURITY_HEADERS"]
