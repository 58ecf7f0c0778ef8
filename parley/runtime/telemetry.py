"""Fire-and-forget API call logging.

Records land in a capped Redis list when a Redis client is available and in
the process log otherwise. Nothing here may delay or fail a response.
"""

from __future__ import annotations

import time
import asyncio
import logging
from typing import Any, Protocol

import orjson

from parley.state import RequestContext
from parley.config.telemetry import API_LOG_KEY, API_LOG_MAX_ENTRIES

logger = logging.getLogger(__name__)


class TelemetrySink(Protocol):
    async def write(self, record: dict[str, Any]) -> None: ...


class LogTelemetrySink:
    async def write(self, record: dict[str, Any]) -> None:
        logger.info(
            "api call route=%s host=%s input_len=%d output_len=%d",
            record["route_name"],
            record["host_info"],
            len(record["input_text"] or ""),
            len(record["output_text"] or ""),
        )


class RedisTelemetrySink:
    def __init__(self, client: Any, *, key: str = API_LOG_KEY, max_entries: int = API_LOG_MAX_ENTRIES) -> None:
        self._client = client
        self._key = key
        self._max_entries = int(max_entries)

    async def write(self, record: dict[str, Any]) -> None:
        async with self._client.pipeline(transaction=False) as pipe:
            pipe.lpush(self._key, orjson.dumps(record))
            pipe.ltrim(self._key, 0, self._max_entries - 1)
            await pipe.execute()


class ApiCallLogger:
    def __init__(self, sink: TelemetrySink, *, enabled: bool = True) -> None:
        self._sink = sink
        self._enabled = enabled
        self._pending: set[asyncio.Task] = set()

    @property
    def enabled(self) -> bool:
        return self._enabled

    def record(
        self,
        route: str,
        ctx: RequestContext,
        *,
        input_text: str | None = None,
        output_text: str | None = None,
    ) -> asyncio.Task | None:
        """Schedule one log write and return immediately."""
        if not self._enabled:
            return None
        entry = {
            "route_name": route,
            "host_info": ctx.header("host") or "unknown",
            "input_text": input_text or None,
            "output_text": output_text or None,
            "created_at": time.time(),
        }
        task = asyncio.create_task(self._write(entry))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _write(self, entry: dict[str, Any]) -> None:
        try:
            await self._sink.write(entry)
        except Exception:
            logger.warning("failed to log API call route=%s", entry["route_name"], exc_info=True)

    async def drain(self) -> None:
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)


__all__ = ["ApiCallLogger", "LogTelemetrySink", "RedisTelemetrySink", "TelemetrySink"]
