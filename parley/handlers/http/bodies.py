"""Request body parsing and validation for the JSON and multipart routes."""

from __future__ import annotations

from typing import Any, TypeVar

import orjson
from fastapi import Request
from pydantic import Field, BaseModel, ConfigDict, ValidationError

from parley.config.http import CONTENT_TYPE_JSON, CONTENT_TYPE_MULTIPART
from parley.providers.base import TTSOptions, TranslationOptions

_REQUIRED_ERROR_TYPES = {"missing", "string_too_short"}


class RequestBodyError(ValueError):
    """Client sent a body the route cannot use; maps to a 400."""


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TranslateRequest(_Body):
    text: str = Field(min_length=1)
    from_lang: str = Field(alias="fromLang", min_length=1)
    to_lang: str = Field(alias="toLang", min_length=1)
    options: TranslationOptions | None = None


class ExplainRequest(_Body):
    original_text: str = Field(alias="originalText", min_length=1)
    translated_text: str = Field(alias="translatedText", min_length=1)
    from_lang: str = Field(alias="fromLang", min_length=1)
    to_lang: str = Field(alias="toLang", min_length=1)


class TTSRequest(_Body):
    text: str = Field(min_length=1)
    language: str = Field(min_length=1)
    voice_id: str = Field(alias="voiceId", min_length=1)
    options: TTSOptions | None = None


_MISSING_FIELDS_MESSAGES: dict[type[BaseModel], str] = {
    TranslateRequest: "Missing required fields: text, fromLang, or toLang",
    ExplainRequest: "Missing required fields: originalText, translatedText, fromLang, or toLang",
    TTSRequest: "Missing required fields: text, language, or voiceId",
}

BodyT = TypeVar("BodyT", bound=BaseModel)


def _content_type(request: Request) -> str:
    return (request.headers.get("content-type") or "").lower()


def require_json(request: Request) -> None:
    if CONTENT_TYPE_JSON not in _content_type(request):
        raise RequestBodyError("Request must be application/json")


def require_multipart(request: Request) -> None:
    if CONTENT_TYPE_MULTIPART not in _content_type(request):
        raise RequestBodyError("Request must be multipart/form-data")


def parse_body(model: type[BodyT], payload: Any) -> BodyT:
    if not isinstance(payload, dict):
        raise RequestBodyError("Request body must be a JSON object")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        errors = exc.errors()
        # Only top-level fields count as "missing"; nested option errors are schema errors.
        if any(err["type"] in _REQUIRED_ERROR_TYPES and len(err["loc"]) == 1 for err in errors):
            raise RequestBodyError(_MISSING_FIELDS_MESSAGES.get(model, "Missing required fields")) from exc
        first = errors[0]
        where = ".".join(str(part) for part in first["loc"])
        raise RequestBodyError(f"Invalid request body: {where}: {first['msg']}") from exc


async def read_json_body(request: Request, model: type[BodyT]) -> BodyT:
    require_json(request)
    raw = await request.body()
    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise RequestBodyError("Request body is not valid JSON") from exc
    return parse_body(model, payload)


__all__ = [
    "ExplainRequest",
    "RequestBodyError",
    "TTSRequest",
    "TranslateRequest",
    "parse_body",
    "read_json_body",
    "require_json",
    "require_multipart",
]
