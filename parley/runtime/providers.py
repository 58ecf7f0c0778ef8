"""Lazily constructed provider clients, owned by the runtime deps."""

from __future__ import annotations

import logging

import httpx

from parley.state.settings import ProviderSettings
from parley.errors import ProviderConfigurationError
from parley.config.providers import PROVIDER_CARTESIA, PROVIDER_ANTHROPIC, PROVIDER_ASSEMBLYAI
from parley.providers.base import TTSProvider, ExplanationProvider, TranslationProvider, TranscriptionProvider
from parley.providers.cartesia import CartesiaTTSProvider
from parley.providers.assemblyai import AssemblyAITranscriptionProvider
from parley.providers.anthropic import (
    AnthropicMessagesClient,
    AnthropicTranslationProvider,
    AnthropicExplanationProvider,
)

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Hands out one client per provider kind, built on first use.

    Clients passed in explicitly take precedence; this is how tests swap in fakes.
    A missing API key raises ProviderConfigurationError at request time so the
    route maps it to a structured provider error.
    """

    def __init__(
        self,
        settings: ProviderSettings,
        *,
        transcription: TranscriptionProvider | None = None,
        translation: TranslationProvider | None = None,
        explanation: ExplanationProvider | None = None,
        tts: TTSProvider | None = None,
    ) -> None:
        self._settings = settings
        self._transcription = transcription
        self._translation = translation
        self._explanation = explanation
        self._tts = tts
        self._anthropic: AnthropicMessagesClient | None = None
        self._http: httpx.AsyncClient | None = None

    def _http_client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self._settings.timeout_s)
        return self._http

    def _anthropic_client(self) -> AnthropicMessagesClient:
        if self._anthropic is None:
            api_key = self._settings.anthropic_api_key
            if not api_key:
                raise ProviderConfigurationError(PROVIDER_ANTHROPIC)
            self._anthropic = AnthropicMessagesClient(
                api_key=api_key,
                model=self._settings.anthropic_model,
                http=self._http_client(),
            )
        return self._anthropic

    def transcription(self) -> TranscriptionProvider:
        if self._transcription is None:
            api_key = self._settings.assemblyai_api_key
            if not api_key:
                raise ProviderConfigurationError(PROVIDER_ASSEMBLYAI)
            self._transcription = AssemblyAITranscriptionProvider(
                api_key=api_key,
                http=self._http_client(),
                poll_interval_s=self._settings.assemblyai_poll_interval_s,
            )
        return self._transcription

    def translation(self) -> TranslationProvider:
        if self._translation is None:
            self._translation = AnthropicTranslationProvider(self._anthropic_client())
        return self._translation

    def explanation(self) -> ExplanationProvider:
        if self._explanation is None:
            self._explanation = AnthropicExplanationProvider(self._anthropic_client())
        return self._explanation

    def tts(self) -> TTSProvider:
        if self._tts is None:
            api_key = self._settings.cartesia_api_key
            if not api_key:
                raise ProviderConfigurationError(PROVIDER_CARTESIA)
            self._tts = CartesiaTTSProvider(api_key=api_key, model_id=self._settings.cartesia_model_id)
        return self._tts

    async def aclose(self) -> None:
        if self._http is None:
            return
        http, self._http = self._http, None
        await http.aclose()
        logger.debug("provider HTTP client closed")


__all__ = ["ProviderRegistry"]
