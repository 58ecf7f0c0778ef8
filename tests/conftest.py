from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from parley.server import create_app
from parley.state import RuntimeDeps
from parley.handlers.limits import RateLimiter
from parley.handlers.tokens import SessionTokenCodec
from parley.runtime.providers import ProviderRegistry
from parley.runtime.telemetry import ApiCallLogger
from tests.fakes import (
    Clock,
    RecordingSink,
    FakeTTSProvider,
    InMemoryCounterStore,
    FakeExplanationProvider,
    FakeTranslationProvider,
    FakeTranscriptionProvider,
    build_settings,
)

@pytest.fixture
def clock() -> Clock:
    return Clock()


@pytest.fixture
def codec(clock: Clock) -> SessionTokenCodec:
    return SessionTokenCodec(secret_key="test-secret", now_fn=clock)


@pytest.fixture
def make_deps(clock: Clock) -> Callable[..., RuntimeDeps]:
    def _make(
        *,
        store: object | None = None,
        tts: FakeTTSProvider | None = None,
        translation: FakeTranslationProvider | None = None,
        sink: RecordingSink | None = None,
        **settings_overrides: object,
    ) -> RuntimeDeps:
        settings = build_settings(**settings_overrides)
        codec = SessionTokenCodec(
            secret_key=settings.session.secret_key,
            lifetime_s=settings.session.token_lifetime_s,
            renewal_threshold_s=settings.session.renewal_threshold_s,
            now_fn=clock,
        )
        limiter = RateLimiter(
            store=store if store is not None else InMemoryCounterStore(),
            limit=settings.limits.max_requests,
            window_seconds=settings.limits.window_seconds,
            key_prefix=settings.limits.key_prefix,
            now_fn=clock,
        )
        providers = ProviderRegistry(
            settings.providers,
            transcription=FakeTranscriptionProvider(),
            translation=translation or FakeTranslationProvider(),
            explanation=FakeExplanationProvider(),
            tts=tts or FakeTTSProvider(),
        )
        telemetry = ApiCallLogger(sink or RecordingSink(), enabled=settings.telemetry.enabled)
        return RuntimeDeps(
            settings=settings,
            codec=codec,
            rate_limiter=limiter,
            providers=providers,
            telemetry=telemetry,
        )

    return _make


@pytest.fixture
def make_client(make_deps: Callable[..., RuntimeDeps]) -> Iterator[Callable[..., TestClient]]:
    clients: list[TestClient] = []

    def _make(deps: RuntimeDeps | None = None) -> TestClient:
        client = TestClient(create_app(deps or make_deps()))
        client.__enter__()
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.__exit__(None, None, None)
