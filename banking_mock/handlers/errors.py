"""Shaping of errors into the common error envelope."""

from typing import Any

from banking_mock.exceptions import ApiError
from banking_mock.handlers.base import ApiResponse
from banking_mock.handlers.context import RequestContext
from banking_mock.serialization import format_timestamp


def error_body(error: ApiError, context: RequestContext) -> dict[str, Any]:
    """Return ``{"error": {code, message, timestamp, correlationId, details?}}``."""
    payload = error.to_dict()
    body: dict[str, Any] = {
        "code": payload["code"],
        "message": payload["message"],
        "timestamp": format_timestamp(context.request_time),
        "correlationId": context.correlation_id,
    }
    if "details" in payload:
        body["details"] = payload["details"]
    return {"error": body}


def error_response(error: ApiError, context: RequestContext) -> ApiResponse:
    return ApiResponse(status_code=error.status_code, body=error_body(error, context))


def internal_error() -> ApiError:
    """Generic 500 used for unexpected exceptions."""
    return ApiError("An unexpected error occurred")
