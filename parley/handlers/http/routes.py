"""HTTP API routes.

Every /api route goes through `_run_route`: validate the request, run the
handler, map errors to JSON, then attach a renewed session token and the
rate-limit headers. One policy for all routes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Awaitable

from fastapi import Request, APIRouter
from fastapi.responses import ORJSONResponse
from starlette.responses import Response, StreamingResponse
from starlette.background import BackgroundTask

from parley.errors import AuthError, ProviderError
from parley.state import RuntimeDeps, RequestContext
from parley.realtime import AudioRelay
from parley.providers.base import TranscriptionOptions
from parley.handlers.validation import validate_api_request
from parley.config.http import API_TTS_PATH, API_EXPLAIN_PATH, API_TRANSLATE_PATH, API_TRANSCRIBE_PATH
from parley.config.streaming import TTS_MEDIA_TYPE, HEADER_SAMPLE_RATE, HEADER_AUDIO_FORMAT
from parley.config.telemetry import ROUTE_TTS, ROUTE_EXPLAIN, ROUTE_TRANSLATE, ROUTE_TRANSCRIBE

from .cookies import attach_session_token
from .context import log_request, build_request_context
from .errors import (
    rejection_response,
    internal_error_response,
    apply_rate_limit_headers,
    provider_error_response,
    invalid_request_response,
)
from .bodies import TTSRequest, ExplainRequest, RequestBodyError, TranslateRequest, read_json_body, require_multipart

logger = logging.getLogger(__name__)

RouteHandler = Callable[[Request, RequestContext, RuntimeDeps], Awaitable[Response]]

router = APIRouter()


async def _run_route(request: Request, route: str, handler: RouteHandler) -> Response:
    deps: RuntimeDeps | None = getattr(request.app.state, "runtime_deps", None)
    if deps is None:
        logger.error("Runtime dependencies are not initialized")
        return internal_error_response()

    ctx = build_request_context(request)
    log_request(ctx, route)

    outcome = await validate_api_request(
        ctx,
        codec=deps.codec,
        rate_limiter=deps.rate_limiter,
        development=deps.settings.security.development,
    )
    if not outcome.accepted:
        return rejection_response(outcome.error or AuthError(), outcome.rate_limit)

    try:
        response = await handler(request, ctx, deps)
    except RequestBodyError as exc:
        logger.info("%s: rejected request body: %s", route, exc)
        response = invalid_request_response(str(exc))
    except ProviderError as exc:
        logger.warning("%s: provider error provider=%s code=%s: %s", route, exc.provider, exc.code, exc)
        response = provider_error_response(exc)
    except Exception:
        logger.exception("%s: request failed", route)
        response = internal_error_response()

    if outcome.renewed_token is not None:
        attach_session_token(
            response,
            outcome.renewed_token,
            domain=ctx.hostname,
            secure=not deps.settings.security.development,
            max_age=deps.codec.lifetime_s,
        )
    apply_rate_limit_headers(response, outcome.rate_limit)
    return response


async def _transcribe(request: Request, ctx: RequestContext, deps: RuntimeDeps) -> Response:
    require_multipart(request)
    form = await request.form()
    audio = form.get("audio")
    if audio is None or isinstance(audio, str):
        raise RequestBodyError("No audio file provided")
    language_code = form.get("language_code")
    language_code = language_code if isinstance(language_code, str) and language_code else None

    data = await audio.read()
    logger.debug(
        "transcribe: audio content_type=%s size=%d language_code=%s",
        audio.content_type,
        len(data),
        language_code,
    )
    provider = deps.providers.transcription()
    result = await provider.transcribe(
        data,
        content_type=audio.content_type,
        options=TranscriptionOptions(language_code=language_code),
    )
    logger.info("transcribe: ok text_len=%d language=%s", len(result.text), result.language)
    deps.telemetry.record(ROUTE_TRANSCRIBE, ctx, output_text=result.text)
    return ORJSONResponse(result.to_payload())


async def _translate(request: Request, ctx: RequestContext, deps: RuntimeDeps) -> Response:
    body = await read_json_body(request, TranslateRequest)
    provider = deps.providers.translation()
    result = await provider.translate(body.text, body.from_lang, body.to_lang, body.options)
    logger.info("translate: ok %s -> %s text_len=%d", body.from_lang, body.to_lang, len(result.text))
    deps.telemetry.record(ROUTE_TRANSLATE, ctx, input_text=body.text, output_text=result.text)
    return ORJSONResponse(result.to_payload())


async def _explain(request: Request, ctx: RequestContext, deps: RuntimeDeps) -> Response:
    body = await read_json_body(request, ExplainRequest)
    provider = deps.providers.explanation()
    result = await provider.explain(body.original_text, body.translated_text, body.from_lang, body.to_lang)
    logger.info("explain: ok accurate=%s", result.accurate)
    deps.telemetry.record(ROUTE_EXPLAIN, ctx, input_text=body.original_text, output_text=result.tone)
    return ORJSONResponse(result.to_payload())


async def _tts(request: Request, ctx: RequestContext, deps: RuntimeDeps) -> Response:
    body = await read_json_body(request, TTSRequest)
    logger.info(
        "tts: request language=%s voice_id=%s text_len=%d has_options=%s",
        body.language,
        body.voice_id,
        len(body.text),
        body.options is not None,
    )
    relay = AudioRelay(
        deps.providers.tts(),
        inactivity_timeout_s=deps.settings.streaming.inactivity_timeout_s,
        channel_max_chunks=deps.settings.streaming.channel_max_chunks,
    )
    # Connection failures raise here, before any byte of audio is committed.
    metadata = await relay.open(body.text, body.language, body.voice_id, body.options)
    deps.telemetry.record(ROUTE_TTS, ctx, input_text=body.text)
    return StreamingResponse(
        relay.stream(),
        media_type=TTS_MEDIA_TYPE,
        headers={
            HEADER_SAMPLE_RATE: str(metadata.sample_rate),
            HEADER_AUDIO_FORMAT: metadata.format,
        },
        background=BackgroundTask(relay.close),
    )


@router.post(API_TRANSCRIBE_PATH)
async def transcribe(request: Request) -> Response:
    return await _run_route(request, ROUTE_TRANSCRIBE, _transcribe)


@router.post(API_TRANSLATE_PATH)
async def translate(request: Request) -> Response:
    return await _run_route(request, ROUTE_TRANSLATE, _translate)


@router.post(API_EXPLAIN_PATH)
async def explain(request: Request) -> Response:
    return await _run_route(request, ROUTE_EXPLAIN, _explain)


@router.post(API_TTS_PATH)
async def tts(request: Request) -> Response:
    return await _run_route(request, ROUTE_TTS, _tts)


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


__all__ = ["router"]
