"""Shared counter store for the sliding-window rate limiter."""

from __future__ import annotations

from typing import Any, Protocol

import redis.asyncio as redis

# Sliding log in a sorted set: drop entries older than the window, count what is
# left, and only record this request if there is room. Runs atomically on the
# server, so concurrent workers never over-admit.
_SLIDING_WINDOW_LUA = """
local key = KEYS[1]
local now = tonumber(ARGV[1])
local window = tonumber(ARGV[2])
local limit = tonumber(ARGV[3])
local member = ARGV[4]

redis.call('ZREMRANGEBYSCORE', key, '-inf', now - window)
local count = redis.call('ZCARD', key)
local allowed = 0
if count < limit then
  redis.call('ZADD', key, now, member)
  count = count + 1
  allowed = 1
end
redis.call('PEXPIRE', key, window)

local reset = now + window
local oldest = redis.call('ZRANGE', key, 0, 0, 'WITHSCORES')
if oldest[2] then
  reset = tonumber(oldest[2]) + window
end
return {allowed, count, reset}
"""


class CounterStore(Protocol):
    async def hit(
        self,
        key: str,
        *,
        now_ms: int,
        window_ms: int,
        limit: int,
        member: str,
    ) -> tuple[bool, int, int]:
        """Record one request if the window has room.

        Returns (allowed, requests counted in window, reset epoch ms).
        """
        ...


class RedisCounterStore:
    def __init__(self, client: Any) -> None:
        self._client = client
        self._script = client.register_script(_SLIDING_WINDOW_LUA)

    async def hit(
        self,
        key: str,
        *,
        now_ms: int,
        window_ms: int,
        limit: int,
        member: str,
    ) -> tuple[bool, int, int]:
        allowed, count, reset = await self._script(keys=[key], args=[now_ms, window_ms, limit, member])
        return bool(int(allowed)), int(count), int(reset)


def build_redis_client(url: str) -> Any:
    return redis.from_url(url, socket_connect_timeout=2.0, socket_timeout=2.0)


__all__ = ["CounterStore", "RedisCounterStore", "build_redis_client"]
