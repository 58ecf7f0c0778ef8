from __future__ import annotations

import pytest

from parley.state import RequestContext
from parley.handlers.origin import validate_origin, source_hostname, validate_request_origin


def test_same_host_origin_is_accepted() -> None:
    assert validate_origin(origin="https://app.example.com", host="app.example.com") is True


def test_port_and_scheme_are_ignored() -> None:
    assert validate_origin(origin="http://app.example.com:3000", host="app.example.com:8443") is True


def test_foreign_origin_is_rejected() -> None:
    assert validate_origin(origin="https://evil.example.net", host="app.example.com") is False


def test_referer_is_checked_when_origin_mismatches() -> None:
    assert (
        validate_origin(
            origin="https://evil.example.net",
            host="app.example.com",
            referer="https://app.example.com/translate",
        )
        is True
    )


def test_referer_alone_is_enough() -> None:
    assert validate_origin(origin=None, host="app.example.com", referer="https://app.example.com/") is True


@pytest.mark.parametrize(
    ("origin", "host", "referer"),
    [
        (None, "app.example.com", None),
        ("https://app.example.com", None, None),
        ("not a url", "app.example.com", None),
        ("", "", ""),
    ],
)
def test_missing_or_malformed_inputs_reject(origin: str | None, host: str | None, referer: str | None) -> None:
    assert validate_origin(origin=origin, host=host, referer=referer) is False


def test_loopback_accepted_only_in_development() -> None:
    kwargs = {"origin": "http://localhost:3000", "host": "api.internal:8000"}
    assert validate_origin(**kwargs, development=True) is True
    assert validate_origin(**kwargs, development=False) is False


def test_ipv6_origin_hostname() -> None:
    assert source_hostname("http://[::1]:3000") == "::1"
    assert validate_origin(origin="http://[::1]:3000", host="[::1]:8000") is True


def test_request_context_headers_are_used() -> None:
    ctx = RequestContext(
        method="POST",
        path="/api/translate",
        headers={"host": "app.example.com", "origin": "https://app.example.com"},
    )
    assert validate_request_origin(ctx, development=False) is True
