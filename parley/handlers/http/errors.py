"""JSON error responses for the HTTP API."""

from __future__ import annotations

import math
from typing import Any

from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from parley.state import RateLimitResult
from parley.errors import AuthError, ProviderError, RateLimitError
from parley.config.limits import RATE_LIMIT_LIMIT_HEADER, RATE_LIMIT_RESET_HEADER, RATE_LIMIT_REMAINING_HEADER
from parley.config.http import ERROR_INTERNAL, ERROR_RATE_LIMITED, ERROR_UNAUTHORIZED, ERROR_INVALID_REQUEST


def error_response(status_code: int, message: str, code: str | None = None, **extra: Any) -> ORJSONResponse:
    payload: dict[str, Any] = {"error": message}
    if code is not None:
        payload["code"] = code
    payload.update({key: value for key, value in extra.items() if value is not None})
    return ORJSONResponse(payload, status_code=status_code)


def apply_rate_limit_headers(response: Response, result: RateLimitResult | None) -> None:
    if result is None:
        return
    response.headers[RATE_LIMIT_LIMIT_HEADER] = str(result.limit)
    response.headers[RATE_LIMIT_REMAINING_HEADER] = str(result.remaining)
    response.headers[RATE_LIMIT_RESET_HEADER] = str(result.reset_time)


def rejection_response(error: AuthError | RateLimitError, rate_limit: RateLimitResult | None = None) -> ORJSONResponse:
    if isinstance(error, RateLimitError):
        response = error_response(429, "Too many requests", ERROR_RATE_LIMITED)
        response.headers["Retry-After"] = str(max(1, math.ceil(error.retry_in)))
        apply_rate_limit_headers(response, rate_limit)
        return response
    return error_response(401, "Unauthorized", ERROR_UNAUTHORIZED)


def provider_error_response(exc: ProviderError) -> ORJSONResponse:
    return ORJSONResponse(exc.to_payload(), status_code=400)


def invalid_request_response(message: str) -> ORJSONResponse:
    return error_response(400, message, ERROR_INVALID_REQUEST)


def internal_error_response() -> ORJSONResponse:
    return error_response(500, "Internal server error", ERROR_INTERNAL)


__all__ = [
    "apply_rate_limit_headers",
    "error_response",
    "internal_error_response",
    "invalid_request_response",
    "provider_error_response",
    "rejection_response",
]
