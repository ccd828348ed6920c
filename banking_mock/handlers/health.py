"""Health check handler."""

from banking_mock.clock import Clock, utcnow
from banking_mock.handlers.base import ApiResponse, json_response
from banking_mock.serialization import format_timestamp


def health(api_version: str, clock: Clock | None = None) -> ApiResponse:
    """GET /health; never requires authentication."""
    return json_response(
        {
            "status": "UP",
            "timestamp": format_timestamp((clock or utcnow)()),
            "version": api_version,
        }
    )
