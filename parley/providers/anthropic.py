"""Anthropic Messages API adapters for translation and explanation."""

from __future__ import annotations

import logging
from typing import Any

import httpx
import orjson
from pydantic import ValidationError

from parley.config.providers import (
    ANTHROPIC_VERSION,
    ANTHROPIC_BASE_URL,
    PROVIDER_ANTHROPIC,
    ANTHROPIC_MAX_TOKENS,
    TRANSLATION_TEMPERATURE,
    EXPLANATION_TEMPERATURE,
)
from parley.errors import ParsingError, ProviderError, ExplanationError, TranslationError

from .base import ExplanationResult, TranslationOptions, TranslationResult
from .prompts import (
    EXPLANATION_PREFILL,
    build_explanation_user_message,
    build_translation_system_prompt,
    build_explanation_system_prompt,
)

logger = logging.getLogger(__name__)

# Anthropic does not report a confidence score for completions.
_TRANSLATION_CONFIDENCE = 1.0


def _error_message(response: httpx.Response) -> str:
    try:
        body = orjson.loads(response.content)
    except orjson.JSONDecodeError:
        return f"HTTP {response.status_code}"
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return f"HTTP {response.status_code}"


class AnthropicMessagesClient:
    """Thin async client for POST /v1/messages returning the first text block."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        http: httpx.AsyncClient,
        base_url: str = ANTHROPIC_BASE_URL,
    ) -> None:
        self._api_key = api_key
        self.model = model
        self._http = http
        self._url = f"{base_url.rstrip('/')}/v1/messages"

    async def create(
        self,
        *,
        system: str,
        messages: list[dict[str, Any]],
        temperature: float,
        max_tokens: int = ANTHROPIC_MAX_TOKENS,
        error_cls: type[ProviderError] = ProviderError,
    ) -> str:
        payload = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "system": system,
            "messages": messages,
        }
        try:
            response = await self._http.post(
                self._url,
                content=orjson.dumps(payload),
                headers={
                    "x-api-key": self._api_key,
                    "anthropic-version": ANTHROPIC_VERSION,
                    "content-type": "application/json",
                },
            )
        except httpx.HTTPError as exc:
            raise error_cls(str(exc) or "request failed", provider=PROVIDER_ANTHROPIC) from exc

        if response.is_error:
            raise error_cls(_error_message(response), provider=PROVIDER_ANTHROPIC)

        try:
            body = orjson.loads(response.content)
            blocks = body["content"]
            return next(block["text"] for block in blocks if block.get("type") == "text")
        except (orjson.JSONDecodeError, KeyError, TypeError, StopIteration) as exc:
            raise ParsingError("unexpected response from Anthropic", PROVIDER_ANTHROPIC) from exc


class AnthropicTranslationProvider:
    def __init__(self, client: AnthropicMessagesClient) -> None:
        self._client = client

    async def translate(
        self,
        text: str,
        from_lang: str,
        to_lang: str,
        options: TranslationOptions | None = None,
    ) -> TranslationResult:
        logger.debug(
            "Creating translation request from=%s to=%s text_len=%d options=%s",
            from_lang,
            to_lang,
            len(text),
            options.to_payload() if options else None,
        )
        translated = await self._client.create(
            system=build_translation_system_prompt(from_lang, to_lang, options),
            messages=[{"role": "user", "content": text}],
            temperature=TRANSLATION_TEMPERATURE,
            error_cls=TranslationError,
        )
        logger.debug("Translation completed original_len=%d translated_len=%d", len(text), len(translated))
        return TranslationResult(text=translated, confidence=_TRANSLATION_CONFIDENCE)


class AnthropicExplanationProvider:
    def __init__(self, client: AnthropicMessagesClient) -> None:
        self._client = client

    async def explain(
        self,
        original_text: str,
        translated_text: str,
        from_lang: str,
        to_lang: str,
    ) -> ExplanationResult:
        completion = await self._client.create(
            system=build_explanation_system_prompt(from_lang, to_lang),
            messages=[
                {"role": "user", "content": build_explanation_user_message(original_text, translated_text)},
                {"role": "assistant", "content": [{"type": "text", "text": EXPLANATION_PREFILL}]},
            ],
            temperature=EXPLANATION_TEMPERATURE,
            error_cls=ExplanationError,
        )
        return parse_explanation(EXPLANATION_PREFILL + completion)


def parse_explanation(raw: str) -> ExplanationResult:
    try:
        return ExplanationResult.model_validate(orjson.loads(raw))
    except (orjson.JSONDecodeError, ValidationError) as exc:
        logger.warning("Failed to parse explanation result: %s", exc)
        raise ParsingError("Failed to parse explanation result", PROVIDER_ANTHROPIC) from exc


__all__ = [
    "AnthropicExplanationProvider",
    "AnthropicMessagesClient",
    "AnthropicTranslationProvider",
    "parse_explanation",
]
