"""Parsing and validation of collection query parameters."""

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from banking_mock.config import PaginationConfig
from banking_mock.exceptions import InvalidParameterError

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


@dataclass(frozen=True)
class PageParams:
    """Validated page request."""

    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def query_value(query: Mapping[str, Any], name: str) -> Any:
    """Return a parameter value, treating empty strings as absent."""
    raw = query.get(name)
    if raw is None or (isinstance(raw, str) and raw.strip() == ""):
        return None
    return raw


def parse_int(query: Mapping[str, Any], name: str, default: int | None = None) -> int | None:
    """Parse an integer parameter.

    Raises
    ------
    InvalidParameterError
        If the value is not a whole number.
    """
    raw = query_value(query, name)
    if raw is None:
        return default
    if isinstance(raw, bool):
        raise InvalidParameterError(f"{name} must be an integer")
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not _INT_RE.fullmatch(text):
        raise InvalidParameterError(f"{name} must be an integer")
    try:
        return int(text)
    except ValueError:
        # above the interpreter's int string conversion limit
        raise InvalidParameterError(f"{name} is out of range") from None


def parse_date(query: Mapping[str, Any], name: str) -> date | None:
    """Parse a ``YYYY-MM-DD`` parameter."""
    raw = query_value(query, name)
    if raw is None:
        return None
    text = str(raw).strip()
    if not _DATE_RE.fullmatch(text):
        raise InvalidParameterError(f"{name} must be a date in YYYY-MM-DD format")
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise InvalidParameterError(f"{name} is not a valid calendar date") from None


def parse_decimal(query: Mapping[str, Any], name: str) -> Decimal | None:
    """Parse a finite decimal parameter."""
    raw = query_value(query, name)
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise InvalidParameterError(f"{name} must be a number")
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation:
        raise InvalidParameterError(f"{name} must be a number") from None
    if not value.is_finite():
        raise InvalidParameterError(f"{name} must be a number")
    return value


def parse_page_params(
    query: Mapping[str, Any],
    config: PaginationConfig | None = None,
) -> PageParams:
    """Parse ``page`` and ``limit``.

    Parameters
    ----------
    query : Mapping[str, Any]
        Raw query parameters.
    config : PaginationConfig | None
        Defaults and the maximum limit.

    Returns
    -------
    PageParams
        Validated page request.

    Raises
    ------
    InvalidParameterError
        If ``page`` < 1 or ``limit`` is outside ``[1, max_limit]``.
    """
    config = config or PaginationConfig()
    page = parse_int(query, "page", config.default_page)
    limit = parse_int(query, "limit", config.default_limit)

    if page < 1:
        raise InvalidParameterError("page must be greater than or equal to 1")
    if not 1 <= limit <= config.max_limit:
        raise InvalidParameterError(f"limit must be between 1 and {config.max_limit}")

    return PageParams(page=page, limit=limit)
