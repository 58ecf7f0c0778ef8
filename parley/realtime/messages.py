"""Decoding of provider live-synthesis messages."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

import orjson

from parley.config.streaming import MSG_TYPE_CHUNK, MSG_TYPE_ERROR


@dataclass(frozen=True, slots=True)
class ProviderMessage:
    type: str
    audio: bytes | None = None
    error: str | None = None


def decode_provider_message(raw: str | bytes) -> ProviderMessage:
    """Parse one provider message.

    Raises ValueError for anything that is not a JSON object with a string
    `type`, and for chunk messages whose `data` is missing or not valid base64.
    """
    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise ValueError("message must be a JSON object")

    msg_type = payload.get("type")
    if not isinstance(msg_type, str) or not msg_type:
        raise ValueError("message type is missing")

    if msg_type == MSG_TYPE_CHUNK:
        data = payload.get("data")
        if not isinstance(data, str):
            raise ValueError("chunk message has no audio data")
        try:
            audio = base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError(f"chunk audio is not valid base64: {exc}") from exc
        return ProviderMessage(type=msg_type, audio=audio)

    if msg_type == MSG_TYPE_ERROR:
        error = payload.get("error") or payload.get("message")
        return ProviderMessage(type=msg_type, error=str(error) if error else "provider reported an error")

    return ProviderMessage(type=msg_type)


__all__ = ["ProviderMessage", "decode_provider_message"]
