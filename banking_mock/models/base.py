"""Base models shared across resources."""

from dataclasses import dataclass


@dataclass
class BankAddress:
    """Postal address of a bank branch.

    ``country`` is an ISO 3166-1 alpha-2 code (default: ``"GB"``).
    """

    street: str
    city: str
    state: str
    postal_code: str
    country: str = "GB"


@dataclass(frozen=True)
class Pagination:
    """Pagination metadata returned alongside every collection page."""

    page: int
    limit: int
    total_pages: int
    total_records: int
