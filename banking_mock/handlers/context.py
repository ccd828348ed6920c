"""Per-request context: correlation ID and request timestamp."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping

from banking_mock.clock import Clock, utcnow
from banking_mock.serialization import format_timestamp

CORRELATION_HEADER = "X-Correlation-Id"


def normalize_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    """Lower-case header names so lookups are case-insensitive."""
    return {key.lower(): value for key, value in (headers or {}).items()}


@dataclass(frozen=True)
class RequestContext:
    """Request scoped values shared by logging, auth and error shaping."""

    correlation_id: str
    request_time: datetime
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_headers(
        cls,
        headers: Mapping[str, str] | None = None,
        clock: Clock | None = None,
    ) -> "RequestContext":
        """Reuse the caller's correlation ID or mint a new one."""
        normalized = normalize_headers(headers)
        correlation_id = normalized.get(CORRELATION_HEADER.lower()) or str(uuid.uuid4())
        return cls(
            correlation_id=correlation_id,
            request_time=(clock or utcnow)(),
            headers=normalized,
        )

    def response_headers(self, api_version: str) -> dict[str, str]:
        return {
            CORRELATION_HEADER: self.correlation_id,
            "X-Request-Timestamp": format_timestamp(self.request_time),
            "X-API-Version": api_version,
        }
