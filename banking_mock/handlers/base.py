"""Response type and shared helpers for resource handlers."""

import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from banking_mock.exceptions import (
    EntityNotFoundError,
    InvalidIdError,
    NotFoundError,
    ValidationError,
)
from banking_mock.store.memory import EntityStore


@dataclass
class ApiResponse:
    """Framework independent response.

    ``body`` is the JSON payload; downloads set ``content`` and
    ``media_type`` instead.
    """

    status_code: int = 200
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    media_type: str = "application/json"
    content: bytes | None = None


def json_response(body: Any, status_code: int = 200) -> ApiResponse:
    return ApiResponse(status_code=status_code, body=body)


def no_content() -> ApiResponse:
    return ApiResponse(status_code=204, media_type="")


def request_body(body: Any) -> Mapping[str, Any]:
    """Return a JSON request body as a mapping; a missing body counts as empty."""
    if body is None:
        return {}
    if not isinstance(body, Mapping):
        raise ValidationError([{"field": "body", "message": "Request body must be a JSON object"}])
    return body


def check_id(entity_id: str, pattern: re.Pattern, code: str, message: str) -> None:
    """Raise InvalidIdError unless ``entity_id`` matches ``pattern``."""
    if not isinstance(entity_id, str) or not pattern.fullmatch(entity_id):
        raise InvalidIdError(message, code=code)


def lookup(store: EntityStore, entity_id: str, code: str):
    """Fetch ``entity_id`` from ``store``, translating a miss into a 404."""
    try:
        return store.get(entity_id)
    except EntityNotFoundError as exc:
        raise NotFoundError(str(exc), code=code) from exc


class FieldErrors:
    """Collects field-level validation failures so they are reported together."""

    def __init__(self) -> None:
        self.details: list[dict[str, str]] = []

    def add(self, field_name: str, message: str) -> None:
        self.details.append({"field": field_name, "message": message})

    def required_text(
        self,
        body: Mapping[str, Any],
        field_name: str,
        message: str,
        max_length: int | None = None,
    ) -> str | None:
        """Return a non-blank string field or record why it is unusable."""
        value = body.get(field_name)
        if value is None or (isinstance(value, str) and not value.strip()):
            self.add(field_name, message)
            return None
        if not isinstance(value, str):
            self.add(field_name, f"{field_name} must be a string")
            return None
        if max_length is not None and len(value) > max_length:
            self.add(field_name, f"{field_name} must be at most {max_length} characters")
            return None
        return value

    def optional_text(
        self,
        body: Mapping[str, Any],
        field_name: str,
        pattern: re.Pattern | None = None,
        message: str | None = None,
        max_length: int | None = None,
    ) -> str | None:
        """Return an optional string field; blank counts as absent."""
        value = body.get(field_name)
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            self.add(field_name, f"{field_name} must be a string")
            return None
        if max_length is not None and len(value) > max_length:
            self.add(field_name, f"{field_name} must be at most {max_length} characters")
            return None
        if pattern is not None and not pattern.fullmatch(value):
            self.add(field_name, message or f"{field_name} is invalid")
            return None
        return value

    def raise_if_any(self) -> None:
        if self.details:
            raise ValidationError(self.details)
