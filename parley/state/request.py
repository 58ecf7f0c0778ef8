"""Explicit per-request context threaded through validation."""

from __future__ import annotations

from urllib.parse import urlsplit
from dataclasses import dataclass, field
from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Everything the validation pipeline is allowed to look at.

    Header names are lower-cased. `issued_token` is the token the edge
    middleware minted for this very request, if any.
    """

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    cookies: Mapping[str, str] = field(default_factory=dict)
    client_host: str | None = None
    issued_token: str | None = None

    def header(self, name: str) -> str | None:
        value = self.headers.get(name.lower())
        if value is None:
            return None
        value = value.strip()
        return value or None

    @property
    def hostname(self) -> str | None:
        host = self.header("host")
        if host is None:
            return None
        try:
            return urlsplit(f"//{host}").hostname
        except ValueError:
            return None


__all__ = ["RequestContext"]
