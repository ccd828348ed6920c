"""Resource handlers for the mock banking API."""

from banking_mock.handlers.accounts import AccountHandler
from banking_mock.handlers.auth import UserContext, authenticate
from banking_mock.handlers.base import ApiResponse
from banking_mock.handlers.beneficiaries import BeneficiaryHandler
from banking_mock.handlers.context import RequestContext
from banking_mock.handlers.health import health
from banking_mock.handlers.payments import PaymentHandler
from banking_mock.handlers.statements import StatementHandler
from banking_mock.handlers.transactions import TransactionHandler

__all__ = [
    "AccountHandler",
    "ApiResponse",
    "BeneficiaryHandler",
    "PaymentHandler",
    "RequestContext",
    "StatementHandler",
    "TransactionHandler",
    "UserContext",
    "authenticate",
    "health",
]
