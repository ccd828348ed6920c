"""Custom exception hierarchy for banking-mock."""

from typing import Any


class MockBankError(Exception):
    """Base exception for all banking-mock errors."""


class EntityNotFoundError(MockBankError):
    """Raised when a store lookup misses."""


class ConfigurationError(MockBankError):
    """Raised when configuration is invalid or missing."""


class SinkError(MockBankError):
    """Raised when a sink operation fails."""


class ApiError(MockBankError):
    """Error that maps onto an API error response.

    Parameters
    ----------
    code : str
        Machine readable error code (e.g. ``ACCOUNT_NOT_FOUND``).
    message : str
        Human readable message.
    details : list[dict[str, str]] | None
        Optional field-level details.
    """

    status_code = 500
    default_code = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: list[dict[str, str]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Return the ``code``/``message``/``details`` part of the error body."""
        body: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            body["details"] = list(self.details)
        return body


class ValidationError(ApiError):
    """One or more request fields failed validation."""

    status_code = 400
    default_code = "VALIDATION_ERROR"

    def __init__(self, details: list[dict[str, str]], message: str = "Request validation failed") -> None:
        super().__init__(message, details=details)


class InvalidParameterError(ApiError):
    """A query parameter is malformed or out of range."""

    status_code = 400
    default_code = "INVALID_PARAMETER"


class InvalidIdError(ApiError):
    """A path identifier does not match the expected format."""

    status_code = 400
    default_code = "INVALID_ID"


class InvalidFormatError(ApiError):
    status_code = 400
    default_code = "INVALID_FORMAT"


class AuthenticationError(ApiError):
    """Missing or rejected credentials."""

    status_code = 401
    default_code = "UNAUTHORIZED"


class NotFoundError(ApiError):
    status_code = 404
    default_code = "NOT_FOUND"


class UnprocessableEntityError(ApiError):
    """Request is well formed but violates a business rule."""

    status_code = 422
    default_code = "UNPROCESSABLE_ENTITY"
