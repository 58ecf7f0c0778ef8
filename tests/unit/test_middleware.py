from __future__ import annotations

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from parley.state import RuntimeDeps
from parley.config.security import SECURITY_HEADERS
from parley.handlers.http import middleware
from parley.handlers.tokens import SessionTokenCodec
from tests.fakes import SAME_ORIGIN, Clock

TRANSLATE_BODY = {"text": "Hello", "fromLang": "English", "toLang": "French"}


class _BrokenMintCodec(SessionTokenCodec):
    def issue(self) -> str:
        raise RuntimeError("entropy source unavailable")


def _assert_security_headers(headers) -> None:
    for name, value in SECURITY_HEADERS.items():
        assert headers[name] == value


def test_security_headers_on_non_api_paths(make_client: Callable[..., TestClient]) -> None:
    response = make_client().get("/health")

    assert response.status_code == 200
    _assert_security_headers(response.headers)
    assert "set-cookie" not in response.headers
    assert "authorization" not in response.headers


def test_first_touch_api_request_gets_session_cookie(
    make_client: Callable[..., TestClient],
    make_deps: Callable[..., RuntimeDeps],
) -> None:
    deps = make_deps()
    response = make_client(deps).post("/api/translate", json=TRANSLATE_BODY, headers=SAME_ORIGIN)

    assert response.status_code == 200
    _assert_security_headers(response.headers)
    cookie = response.headers["set-cookie"]
    attributes = [part.strip().lower() for part in cookie.split(";")]
    assert cookie.startswith("session-token=")
    assert "httponly" in attributes
    assert "samesite=lax" in attributes
    assert "secure" in attributes
    assert "max-age=86400" in attributes
    assert "path=/" in attributes
    assert "domain=testserver" in attributes

    token = cookie.split(";")[0].split("=", 1)[1]
    assert response.headers["authorization"] == f"Bearer {token}"
    assert deps.codec.verify(token).valid is True


def test_cookie_not_secure_in_development(
    make_client: Callable[..., TestClient],
    make_deps: Callable[..., RuntimeDeps],
) -> None:
    response = make_client(make_deps(development=True)).post(
        "/api/translate", json=TRANSLATE_BODY, headers=SAME_ORIGIN
    )

    attributes = [part.strip().lower() for part in response.headers["set-cookie"].split(";")]
    assert "secure" not in attributes


def test_existing_cookie_is_left_alone(
    make_client: Callable[..., TestClient],
    make_deps: Callable[..., RuntimeDeps],
) -> None:
    deps = make_deps()
    token = deps.codec.issue()

    response = make_client(deps).post(
        "/api/translate",
        json=TRANSLATE_BODY,
        headers={**SAME_ORIGIN, "cookie": f"session-token={token}"},
    )

    assert response.status_code == 200
    assert "set-cookie" not in response.headers
    assert "authorization" not in response.headers


def test_mint_failure_passes_request_through(
    make_client: Callable[..., TestClient],
    make_deps: Callable[..., RuntimeDeps],
    clock: Clock,
) -> None:
    deps = make_deps()
    token = deps.codec.issue()
    deps.codec = _BrokenMintCodec(secret_key="test-secret", now_fn=clock)

    response = make_client(deps).post(
        "/api/translate",
        json=TRANSLATE_BODY,
        headers={**SAME_ORIGIN, "authorization": f"Bearer {token}"},
    )

    assert response.status_code == 200
    assert "set-cookie" not in response.headers
    _assert_security_headers(response.headers)


def test_annotation_failure_leaves_response_untouched(
    make_client: Callable[..., TestClient],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _broken_attach(*_: object, **__: object) -> None:
        raise RuntimeError("cookie jar unavailable")

    monkeypatch.setattr(middleware, "attach_session_token", _broken_attach)

    response = make_client().post("/api/translate", json=TRANSLATE_BODY, headers=SAME_ORIGIN)

    assert response.status_code == 200
    assert response.json() == {"text": "Bonjour", "confidence": 1.0}
    assert "set-cookie" not in response.headers
    assert "authorization" not in response.headers
    for name in SECURITY_HEADERS:
        assert name not in response.headers
