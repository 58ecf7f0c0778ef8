"""Provider audio feed to HTTP response body relay.

A reader task pulls messages off the provider connection, decodes them and
pushes audio into a bounded queue. The response side drains that queue with
an inactivity deadline per chunk. Every terminal path (done, error, timeout,
client disconnect) ends in `close()`, which closes the provider connection
exactly once.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from collections.abc import AsyncIterator

from parley.state import RelayState
from parley.errors import TTSError, ProviderError, StreamTimeoutError, StreamProcessingError
from parley.config.streaming import (
    MSG_TYPE_DONE,
    MSG_TYPE_CHUNK,
    MSG_TYPE_ERROR,
    DEFAULT_TTS_CHANNEL_MAX_CHUNKS,
    DEFAULT_TTS_INACTIVITY_TIMEOUT_S,
)
from parley.providers.base import TTSOptions, TTSMetadata, TTSProvider, TTSConnection

from .messages import decode_provider_message

logger = logging.getLogger(__name__)

_DONE = object()


class AudioRelay:
    def __init__(
        self,
        provider: TTSProvider,
        *,
        inactivity_timeout_s: float | None = None,
        channel_max_chunks: int | None = None,
    ) -> None:
        self._provider = provider
        self._provider_name: str | None = getattr(provider, "name", None)
        self._timeout_s = float(
            DEFAULT_TTS_INACTIVITY_TIMEOUT_S if inactivity_timeout_s is None else inactivity_timeout_s
        )
        max_chunks = DEFAULT_TTS_CHANNEL_MAX_CHUNKS if channel_max_chunks is None else channel_max_chunks
        self._queue: asyncio.Queue[Any] = asyncio.Queue(maxsize=max(1, int(max_chunks)))
        self._state = RelayState.CONNECTING
        self._connection: TTSConnection | None = None
        self._metadata: TTSMetadata | None = None
        self._pump_task: asyncio.Task | None = None
        self._closed = False

    @property
    def state(self) -> RelayState:
        return self._state

    @property
    def metadata(self) -> TTSMetadata | None:
        return self._metadata

    async def open(
        self,
        text: str,
        language: str,
        voice_id: str,
        options: TTSOptions | None = None,
    ) -> TTSMetadata:
        """Open the provider connection. Failures surface as ProviderError."""
        if self._state is not RelayState.CONNECTING:
            raise RuntimeError(f"relay cannot be opened from state {self._state.value}")
        try:
            self._connection = await self._provider.connect(text, language, voice_id, options)
        except ProviderError:
            self._state = RelayState.ERRORED
            raise
        except Exception as exc:
            self._state = RelayState.ERRORED
            raise TTSError(str(exc) or "could not open synthesis stream", provider=self._provider_name) from exc

        self._metadata = self._provider.metadata(options)
        self._state = RelayState.STREAMING
        return self._metadata

    async def stream(self) -> AsyncIterator[bytes]:
        if self._state is not RelayState.STREAMING or self._connection is None:
            raise RuntimeError(f"relay cannot stream from state {self._state.value}")

        self._pump_task = asyncio.create_task(self._pump(self._connection))
        try:
            while True:
                try:
                    item = await asyncio.wait_for(self._queue.get(), timeout=self._timeout_s)
                except TimeoutError:
                    self._state = RelayState.TIMED_OUT
                    logger.warning("TTS stream idle for %.1fs; aborting", self._timeout_s)
                    raise StreamTimeoutError(self._timeout_s) from None

                if item is _DONE:
                    self._state = RelayState.DONE
                    return
                if isinstance(item, Exception):
                    self._state = RelayState.ERRORED
                    logger.warning("TTS stream aborted: %s", item)
                    raise item
                yield item
        except (GeneratorExit, asyncio.CancelledError):
            if not self._state.terminal:
                logger.info("client went away mid-stream; closing provider connection")
                self._state = RelayState.ERRORED
            raise
        finally:
            await self.close()

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if not self._state.terminal:
            self._state = RelayState.ERRORED
        if self._pump_task is not None and not self._pump_task.done():
            self._pump_task.cancel()
        if self._connection is None:
            return
        # Shielded so a cancelled response task still finishes the provider close.
        await asyncio.shield(self._close_connection(self._connection))

    async def _close_connection(self, connection: TTSConnection) -> None:
        try:
            await connection.close()
        except Exception:
            logger.warning("closing TTS provider connection failed", exc_info=True)

    async def _pump(self, connection: TTSConnection) -> None:
        try:
            while True:
                raw = await connection.receive()
                try:
                    message = decode_provider_message(raw)
                except ValueError as exc:
                    await self._queue.put(
                        StreamProcessingError(f"malformed provider message: {exc}", provider=self._provider_name)
                    )
                    return

                if message.type == MSG_TYPE_CHUNK:
                    await self._queue.put(message.audio)
                elif message.type == MSG_TYPE_DONE:
                    await self._queue.put(_DONE)
                    return
                elif message.type == MSG_TYPE_ERROR:
                    await self._queue.put(
                        StreamProcessingError(message.error or "provider error", provider=self._provider_name)
                    )
                    return
                else:
                    logger.debug("ignoring provider message type=%s", message.type)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            await self._queue.put(
                StreamProcessingError(str(exc) or "provider connection failed", provider=self._provider_name)
            )


__all__ = ["AudioRelay"]
