from __future__ import annotations

import httpx
import orjson
import pytest

from parley.providers.base import TTSOptions, TranscriptionOptions
from parley.errors import ParsingError, TranslationError, TranscriptionError
from parley.providers.assemblyai import AssemblyAITranscriptionProvider
from parley.providers.cartesia import CartesiaTTSProvider, speed_setting, emotion_controls
from parley.providers.anthropic import (
    AnthropicMessagesClient,
    AnthropicTranslationProvider,
    AnthropicExplanationProvider,
    parse_explanation,
)


def _anthropic(handler) -> AnthropicMessagesClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AnthropicMessagesClient(api_key="sk-test", model="test-model", http=http)


@pytest.mark.asyncio
async def test_anthropic_translation_reads_first_text_block() -> None:
    seen: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append({"headers": dict(request.headers), "body": orjson.loads(request.content)})
        return httpx.Response(200, json={"content": [{"type": "text", "text": "Bonjour"}]})

    result = await AnthropicTranslationProvider(_anthropic(handler)).translate("Hello", "English", "French")

    assert result.text == "Bonjour"
    assert result.confidence == 1.0
    assert seen[0]["headers"]["x-api-key"] == "sk-test"
    assert seen[0]["body"]["temperature"] == 0.0
    assert seen[0]["body"]["messages"] == [{"role": "user", "content": "Hello"}]


@pytest.mark.asyncio
async def test_anthropic_error_body_becomes_provider_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        error = {"type": "overloaded_error", "message": "Overloaded"}
        return httpx.Response(529, json={"type": "error", "error": error})

    with pytest.raises(TranslationError) as exc:
        await AnthropicTranslationProvider(_anthropic(handler)).translate("Hello", "English", "French")

    assert exc.value.message == "Overloaded"
    assert exc.value.code == "PROVIDER_ERROR"
    assert exc.value.provider == "Anthropic"


@pytest.mark.asyncio
async def test_anthropic_explanation_continues_prefill() -> None:
    completion = '"accurate": false, "possibleMistranslations": false, "idioms": false, "tone": "warm"}'

    def handler(request: httpx.Request) -> httpx.Response:
        messages = orjson.loads(request.content)["messages"]
        assert messages[-1]["role"] == "assistant"
        return httpx.Response(200, json={"content": [{"type": "text", "text": completion}]})

    result = await AnthropicExplanationProvider(_anthropic(handler)).explain("Hi", "Salut", "English", "French")

    assert result.accurate is False
    assert result.tone == "warm"


def test_parse_explanation_rejects_garbage() -> None:
    with pytest.raises(ParsingError):
        parse_explanation("{not json")
    with pytest.raises(ParsingError):
        parse_explanation('{"accurate": true}')


def _assemblyai(handler) -> AssemblyAITranscriptionProvider:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AssemblyAITranscriptionProvider(api_key="aai-test", http=http, poll_interval_s=0.0)


@pytest.mark.asyncio
async def test_assemblyai_upload_create_and_poll() -> None:
    polls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.headers["authorization"] == "aai-test"
        if request.url.path == "/v2/upload":
            return httpx.Response(200, json={"upload_url": "https://cdn.example/audio"})
        if request.url.path == "/v2/transcript":
            body = orjson.loads(request.content)
            assert body == {"audio_url": "https://cdn.example/audio", "language_code": "fr"}
            return httpx.Response(200, json={"id": "t1", "status": "queued"})
        polls["count"] += 1
        if polls["count"] < 2:
            return httpx.Response(200, json={"id": "t1", "status": "processing"})
        return httpx.Response(
            200,
            json={
                "id": "t1",
                "status": "completed",
                "text": "bonjour",
                "language_code": "fr",
                "confidence": 0.8,
                "words": [{"text": "bonjour", "start": 0, "end": 400, "confidence": 0.8}],
            },
        )

    result = await _assemblyai(handler).transcribe(
        b"audio", content_type="audio/webm", options=TranscriptionOptions(language_code="fr")
    )

    assert result.text == "bonjour"
    assert result.language == "fr"
    assert result.words[0].end == 400
    assert polls["count"] == 2


@pytest.mark.asyncio
async def test_assemblyai_error_status_is_transcription_failed() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v2/upload":
            return httpx.Response(200, json={"upload_url": "https://cdn.example/audio"})
        if request.url.path == "/v2/transcript":
            return httpx.Response(200, json={"id": "t1", "status": "queued"})
        return httpx.Response(200, json={"id": "t1", "status": "error", "error": "audio too short"})

    with pytest.raises(TranscriptionError) as exc:
        await _assemblyai(handler).transcribe(b"audio")

    assert exc.value.code == "TRANSCRIPTION_FAILED"
    assert str(exc.value) == "audio too short"


@pytest.mark.parametrize(
    ("speed", "expected"),
    [(None, "normal"), (0.0, "normal"), (-0.3, "normal"), (-0.31, "slowest"), (0.5, "fastest")],
)
def test_cartesia_speed_setting(speed: float | None, expected: str) -> None:
    assert speed_setting(speed) == expected


def test_cartesia_emotion_controls() -> None:
    assert emotion_controls(None) == []
    assert emotion_controls(-0.2) == ["positivity:high", "sadness:low"]
    assert emotion_controls(0.7) == ["sadness:high", "positivity:low"]


def test_cartesia_request_shape() -> None:
    provider = CartesiaTTSProvider(api_key="ck-test", model_id="sonic-multilingual")

    request = provider.build_request("Hola", "es", "voice-9", TTSOptions(speed=0.9, sampleRate=16000))

    assert request["transcript"] == "Hola"
    assert request["voice"] == {
        "mode": "id",
        "id": "voice-9",
        "__experimental_controls": {"speed": "fastest", "emotion": []},
    }
    assert request["output_format"] == {"container": "raw", "encoding": "pcm_f32le", "sample_rate": 16000}
    assert provider.metadata().sample_rate == 44100
