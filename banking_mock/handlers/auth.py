"""Authentication stub.

Any credential of plausible length is accepted; there is no token
verification. The checks only reproduce the error codes clients must
handle.
"""

import uuid
from dataclasses import dataclass, field
from typing import Mapping

from banking_mock.exceptions import AuthenticationError
from banking_mock.handlers.context import normalize_headers

MIN_CREDENTIAL_LENGTH = 10

DEFAULT_SCOPES = [
    "accounts:read",
    "accounts:write",
    "transactions:read",
    "payments:read",
    "payments:write",
    "beneficiaries:read",
    "beneficiaries:write",
    "statements:read",
]


@dataclass(frozen=True)
class UserContext:
    user_id: str
    customer_id: str
    scopes: list[str] = field(default_factory=lambda: list(DEFAULT_SCOPES))


def authenticate(headers: Mapping[str, str] | None) -> UserContext:
    """Check request credentials.

    Accepts a Bearer token (``Authorization``), an ``X-API-Key`` or an
    ``X-IBM-Client-Id``.

    Raises
    ------
    AuthenticationError
        ``UNAUTHORIZED`` when no credential is present, ``INVALID_TOKEN``
        for a short bearer token, ``INVALID_CREDENTIALS`` for a short API
        key or client ID.
    """
    normalized = normalize_headers(headers)
    authorization = normalized.get("authorization")
    api_key = normalized.get("x-api-key")
    client_id = normalized.get("x-ibm-client-id")

    if not authorization and not api_key and not client_id:
        raise AuthenticationError(
            "Authentication required. Please provide a valid Bearer token, API key, or Client ID.",
            code="UNAUTHORIZED",
        )

    if authorization:
        token = authorization.removeprefix("Bearer ").strip()
        if len(token) < MIN_CREDENTIAL_LENGTH:
            raise AuthenticationError(
                "Invalid or expired authentication token", code="INVALID_TOKEN"
            )

    if (api_key and len(api_key) < MIN_CREDENTIAL_LENGTH) or (
        client_id and len(client_id) < MIN_CREDENTIAL_LENGTH
    ):
        raise AuthenticationError("Invalid API key or Client ID", code="INVALID_CREDENTIALS")

    return UserContext(
        user_id=f"user-{uuid.uuid4().hex[:8]}",
        customer_id=f"cust-{uuid.uuid4().hex[:8]}",
    )


def describe_credentials(headers: Mapping[str, str] | None) -> str:
    """Summarize supplied credentials for request logs, with bearer tokens truncated."""
    normalized = normalize_headers(headers)
    parts = []
    if normalized.get("authorization"):
        token = normalized["authorization"].removeprefix("Bearer ").strip()
        parts.append(f"Bearer: {token[:10]}...")
    if normalized.get("x-api-key"):
        parts.append(f"API-Key: {normalized['x-api-key'][:4]}...")
    if normalized.get("x-ibm-client-id"):
        parts.append(f"Client-ID: {normalized['x-ibm-client-id']}")
    return ", ".join(parts)
