"""Domain models for the mock banking API."""

from banking_mock.models.base import BankAddress, Pagination

__all__ = ["BankAddress", "Pagination"]
