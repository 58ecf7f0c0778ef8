"""Cartesia live text-to-speech over its websocket API."""

from __future__ import annotations

import uuid
import logging
import contextlib
from typing import Any
from urllib.parse import urlencode

import orjson
import websockets

from parley.errors import TTSError
from parley.config.streaming import TTS_AUDIO_FORMAT, DEFAULT_TTS_SAMPLE_RATE
from parley.config.providers import (
    CARTESIA_WS_URL,
    CARTESIA_VERSION,
    PROVIDER_CARTESIA,
    TTS_SPEED_FAST_ABOVE,
    TTS_SPEED_SLOW_BELOW,
    DEFAULT_CARTESIA_MODEL_ID,
)

from .base import TTSOptions, TTSMetadata

logger = logging.getLogger(__name__)


def speed_setting(speed: float | None) -> str:
    if not speed:
        return "normal"
    if speed < TTS_SPEED_SLOW_BELOW:
        return "slowest"
    if speed > TTS_SPEED_FAST_ABOVE:
        return "fastest"
    return "normal"


def emotion_controls(emotion: float | None) -> list[str]:
    if not emotion:
        return []
    if emotion < 0:
        return ["positivity:high", "sadness:low"]
    return ["sadness:high", "positivity:low"]


class CartesiaConnection:
    def __init__(self, ws: Any) -> None:
        self._ws = ws

    async def receive(self) -> str | bytes:
        return await self._ws.recv()

    async def close(self) -> None:
        await self._ws.close()


class CartesiaTTSProvider:
    name = PROVIDER_CARTESIA

    def __init__(
        self,
        *,
        api_key: str,
        model_id: str = DEFAULT_CARTESIA_MODEL_ID,
        url: str = CARTESIA_WS_URL,
        open_timeout_s: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._model_id = model_id
        self._url = url
        self._open_timeout_s = float(open_timeout_s)

    def metadata(self, options: TTSOptions | None = None) -> TTSMetadata:
        sample_rate = options.sample_rate if options and options.sample_rate else DEFAULT_TTS_SAMPLE_RATE
        return TTSMetadata(format=TTS_AUDIO_FORMAT, sample_rate=sample_rate)

    def build_request(
        self,
        text: str,
        language: str,
        voice_id: str,
        options: TTSOptions | None = None,
    ) -> dict[str, Any]:
        opts = options or TTSOptions()
        return {
            "context_id": uuid.uuid4().hex,
            "model_id": self._model_id,
            "transcript": text,
            "language": language,
            "voice": {
                "mode": "id",
                "id": voice_id,
                "__experimental_controls": {
                    "speed": speed_setting(opts.speed),
                    "emotion": emotion_controls(opts.emotion),
                },
            },
            "output_format": {
                "container": "raw",
                "encoding": TTS_AUDIO_FORMAT,
                "sample_rate": self.metadata(opts).sample_rate,
            },
            "continue": False,
        }

    async def connect(
        self,
        text: str,
        language: str,
        voice_id: str,
        options: TTSOptions | None = None,
    ) -> CartesiaConnection:
        query = urlencode({"api_key": self._api_key, "cartesia_version": CARTESIA_VERSION})
        request = self.build_request(text, language, voice_id, options)
        logger.debug(
            "Creating TTS request language=%s voice_id=%s text_len=%d sample_rate=%s",
            language,
            voice_id,
            len(text),
            request["output_format"]["sample_rate"],
        )

        try:
            ws = await websockets.connect(f"{self._url}?{query}", open_timeout=self._open_timeout_s)
        except Exception as exc:
            raise TTSError(str(exc) or "could not connect", provider=PROVIDER_CARTESIA) from exc

        try:
            await ws.send(orjson.dumps(request).decode("utf-8"))
        except Exception as exc:
            with contextlib.suppress(Exception):
                await ws.close()
            raise TTSError(str(exc) or "could not send synthesis request", provider=PROVIDER_CARTESIA) from exc

        return CartesiaConnection(ws)


__all__ = ["CartesiaConnection", "CartesiaTTSProvider", "emotion_controls", "speed_setting"]
