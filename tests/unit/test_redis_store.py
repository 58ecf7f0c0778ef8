from __future__ import annotations

import pytest
from fakeredis import aioredis as fake_aioredis

from parley.handlers.limits import RateLimiter
from parley.handlers.store import RedisCounterStore
from tests.fakes import Clock


def _limiter(clock: Clock, client: fake_aioredis.FakeRedis) -> RateLimiter:
    return RateLimiter(
        store=RedisCounterStore(client),
        limit=10,
        window_seconds=10,
        key_prefix="test",
        now_fn=clock,
    )


@pytest.mark.asyncio
async def test_sliding_window_script_admits_limit_then_rejects() -> None:
    clock = Clock()
    client = fake_aioredis.FakeRedis()
    limiter = _limiter(clock, client)

    admitted = []
    for _ in range(10):
        admitted.append(await limiter.check("1.2.3.4-tok"))
        clock.advance(0.1)
    rejected = await limiter.check("1.2.3.4-tok")

    assert all(result.allowed for result in admitted)
    assert [result.remaining for result in admitted] == list(range(9, -1, -1))
    assert rejected.allowed is False
    assert rejected.reset_time == int(1_700_000_000.0 * 1000) + 10_000
    # Rejected requests are not recorded.
    assert await client.zcard("test:1.2.3.4-tok") == 10
    await client.aclose()


@pytest.mark.asyncio
async def test_sliding_window_script_recovers_after_window() -> None:
    clock = Clock()
    client = fake_aioredis.FakeRedis()
    limiter = _limiter(clock, client)
    for _ in range(10):
        await limiter.check("id")
    assert (await limiter.check("id")).allowed is False

    clock.advance(10.0)
    result = await limiter.check("id")

    assert result.allowed is True
    assert result.remaining == 9
    assert await client.zcard("test:id") == 1
    await client.aclose()


@pytest.mark.asyncio
async def test_sliding_window_script_keeps_identifiers_apart() -> None:
    clock = Clock()
    client = fake_aioredis.FakeRedis()
    limiter = _limiter(clock, client)
    for _ in range(10):
        await limiter.check("1.2.3.4-no-session")

    other = await limiter.check("5.6.7.8-no-session")

    assert other.allowed is True
    assert other.remaining == 9
    await client.aclose()
