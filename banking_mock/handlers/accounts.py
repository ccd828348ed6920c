"""Account resource handlers."""

import logging
import re
from decimal import Decimal
from typing import Any, Mapping

from banking_mock.clock import Clock, utcnow
from banking_mock.config import MockBankConfig
from banking_mock.exceptions import InvalidParameterError
from banking_mock.generators.banking import MockDataGenerators
from banking_mock.handlers.base import ApiResponse, check_id, json_response, lookup
from banking_mock.models.banking import Account
from banking_mock.query import CollectionSpec, run_query
from banking_mock.query.params import parse_int
from banking_mock.serialization import dataclass_to_dict, format_timestamp, pick, serialize_value
from banking_mock.store.memory import BankingDataStore

logger = logging.getLogger(__name__)

ACCOUNT_ID_RE = re.compile(r"^acc-[0-9]{9}$")

ACCOUNTS = CollectionSpec(exact=(("accountType", "account_type"),))

ACCOUNT_TRANSACTIONS = CollectionSpec(
    exact=(("transactionType", "transaction_type"),),
    date_attribute="transaction_date",
    amount_attribute="amount",
    sort_attribute="transaction_date",
)

SUMMARY_FIELDS = (
    "account_id",
    "account_number",
    "account_type",
    "currency",
    "status",
    "nickname",
    "opened_date",
)


class AccountHandler:
    """Read-only account endpoints.

    Transactions and statements under an account are generated fresh on
    every request and never stored.
    """

    def __init__(
        self,
        store: BankingDataStore,
        generators: MockDataGenerators,
        config: MockBankConfig,
        clock: Clock | None = None,
    ) -> None:
        self.store = store
        self.generators = generators
        self.config = config
        self.clock = clock or utcnow

    def list_accounts(self, query: Mapping[str, Any] | None = None) -> ApiResponse:
        """GET /accounts"""
        result = run_query(self.store.accounts.list(), query or {}, ACCOUNTS, self.config.pagination)
        return json_response(
            {
                "accounts": [pick(account, *SUMMARY_FIELDS) for account in result.items],
                "pagination": dataclass_to_dict(result.pagination),
            }
        )

    def get_account(self, account_id: str) -> ApiResponse:
        """GET /accounts/{accountId}"""
        return json_response(dataclass_to_dict(self._account(account_id)))

    def get_balance(self, account_id: str) -> ApiResponse:
        """GET /accounts/{accountId}/balance"""
        account = self._account(account_id)
        return json_response(
            {
                **pick(account, "account_id", "currency", "available_balance", "current_balance"),
                "pendingBalance": serialize_value(Decimal("0")),
                "overdraftLimit": serialize_value(account.overdraft_limit),
                "lastUpdated": format_timestamp(self.clock()),
            }
        )

    def list_account_transactions(
        self, account_id: str, query: Mapping[str, Any] | None = None
    ) -> ApiResponse:
        """GET /accounts/{accountId}/transactions"""
        account = self._account(account_id)
        generated = self.generators.transactions.generate_for_account(
            account.account_id, self.config.seed_data.transactions_per_account
        )
        result = run_query(generated, query or {}, ACCOUNT_TRANSACTIONS, self.config.pagination)
        return json_response(
            {
                "transactions": [dataclass_to_dict(txn) for txn in result.items],
                "pagination": dataclass_to_dict(result.pagination),
            }
        )

    def list_account_statements(
        self, account_id: str, query: Mapping[str, Any] | None = None
    ) -> ApiResponse:
        """GET /accounts/{accountId}/statements

        Optional ``year`` and ``month`` narrow the result by period start.
        """
        query = query or {}
        account = self._account(account_id)

        year = parse_int(query, "year")
        month = parse_int(query, "month")
        if year is not None and not 1000 <= year <= 9999:
            raise InvalidParameterError("year must be a four digit year")
        if month is not None and not 1 <= month <= 12:
            raise InvalidParameterError("month must be between 1 and 12")

        statements = self.generators.statements.generate_monthly(
            account.account_id, self.config.seed_data.statements_per_account
        )
        if year is not None:
            statements = [s for s in statements if s.period.start_date.year == year]
        if month is not None:
            statements = [s for s in statements if s.period.start_date.month == month]

        return json_response({"statements": [dataclass_to_dict(s) for s in statements]})

    def _account(self, account_id: str) -> Account:
        check_id(
            account_id,
            ACCOUNT_ID_RE,
            "INVALID_ACCOUNT_ID",
            "Invalid account ID format. Expected format: acc-XXXXXXXXX",
        )
        return lookup(self.store.accounts, account_id, "ACCOUNT_NOT_FOUND")
