"""AssemblyAI REST adapter for batch transcription."""

from __future__ import annotations

import time
import asyncio
import logging
from typing import Any

import httpx
import orjson
from pydantic import ValidationError

from parley.errors import ParsingError, TranscriptionError
from parley.config.http import ERROR_TRANSCRIPTION_FAILED
from parley.config.providers import (
    PROVIDER_ASSEMBLYAI,
    ASSEMBLYAI_BASE_URL,
    ASSEMBLYAI_MAX_WAIT_S,
    DEFAULT_ASSEMBLYAI_POLL_INTERVAL_S,
)

from .base import TranscribedWord, TranscriptionResult, TranscriptionOptions

logger = logging.getLogger(__name__)

_TERMINAL_STATUSES = {"completed", "error"}


class AssemblyAITranscriptionProvider:
    """Upload audio, create a transcript job, and poll it to completion."""

    def __init__(
        self,
        *,
        api_key: str,
        http: httpx.AsyncClient,
        poll_interval_s: float = DEFAULT_ASSEMBLYAI_POLL_INTERVAL_S,
        max_wait_s: float = ASSEMBLYAI_MAX_WAIT_S,
        base_url: str = ASSEMBLYAI_BASE_URL,
    ) -> None:
        self._http = http
        self._headers = {"authorization": api_key}
        self._poll_interval_s = float(poll_interval_s)
        self._max_wait_s = float(max_wait_s)
        self._base_url = base_url.rstrip("/")

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        headers = {**self._headers, **kwargs.pop("headers", {})}
        try:
            response = await self._http.request(method, f"{self._base_url}{path}", headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            raise TranscriptionError(str(exc) or "request failed", provider=PROVIDER_ASSEMBLYAI) from exc
        try:
            body = orjson.loads(response.content)
        except orjson.JSONDecodeError:
            body = {}
        if response.is_error:
            message = body.get("error") if isinstance(body, dict) else None
            raise TranscriptionError(
                str(message or f"HTTP {response.status_code}"),
                provider=PROVIDER_ASSEMBLYAI,
            )
        if not isinstance(body, dict):
            raise TranscriptionError("unexpected response from AssemblyAI", provider=PROVIDER_ASSEMBLYAI)
        return body

    async def _upload(self, audio: bytes, content_type: str | None) -> str:
        body = await self._request(
            "POST",
            "/v2/upload",
            content=audio,
            headers={"content-type": content_type or "application/octet-stream"},
        )
        upload_url = body.get("upload_url")
        if not isinstance(upload_url, str) or not upload_url:
            raise TranscriptionError("upload did not return a URL", provider=PROVIDER_ASSEMBLYAI)
        return upload_url

    async def _wait_for(self, transcript_id: str) -> dict[str, Any]:
        deadline = time.monotonic() + self._max_wait_s
        while True:
            transcript = await self._request("GET", f"/v2/transcript/{transcript_id}")
            if transcript.get("status") in _TERMINAL_STATUSES:
                return transcript
            if time.monotonic() >= deadline:
                raise TranscriptionError("transcription timed out", provider=PROVIDER_ASSEMBLYAI)
            await asyncio.sleep(self._poll_interval_s)

    async def transcribe(
        self,
        audio: bytes,
        *,
        content_type: str | None = None,
        options: TranscriptionOptions | None = None,
    ) -> TranscriptionResult:
        upload_url = await self._upload(audio, content_type)

        params: dict[str, Any] = {"audio_url": upload_url}
        if options is not None:
            params.update(options.model_dump(exclude_none=True))
        logger.debug("Sending transcription request params=%s", {k: v for k, v in params.items() if k != "audio_url"})

        created = await self._request(
            "POST",
            "/v2/transcript",
            content=orjson.dumps(params),
            headers={"content-type": "application/json"},
        )
        transcript_id = created.get("id")
        if not isinstance(transcript_id, str) or not transcript_id:
            raise TranscriptionError("transcript job has no id", provider=PROVIDER_ASSEMBLYAI)

        transcript = await self._wait_for(transcript_id)
        if transcript.get("status") == "error":
            raise TranscriptionError(
                str(transcript.get("error") or "Unknown transcription error"),
                ERROR_TRANSCRIPTION_FAILED,
                PROVIDER_ASSEMBLYAI,
            )

        words = transcript.get("words")
        try:
            return _build_result(transcript, words)
        except (KeyError, TypeError, ValidationError) as exc:
            raise ParsingError("unexpected transcript payload", PROVIDER_ASSEMBLYAI) from exc


def _build_result(transcript: dict[str, Any], words: Any) -> TranscriptionResult:
    return TranscriptionResult(
        text=transcript.get("text") or "",
        language=transcript.get("language_code"),
        confidence=transcript.get("confidence"),
        words=[
            TranscribedWord(text=w["text"], start=w["start"], end=w["end"], confidence=w["confidence"])
            for w in words
        ]
        if isinstance(words, list)
        else None,
    )


__all__ = ["AssemblyAITranscriptionProvider"]
