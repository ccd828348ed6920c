"""Transaction resource handlers."""

import re
from typing import Any, Mapping

from banking_mock.config import MockBankConfig
from banking_mock.handlers.base import ApiResponse, check_id, json_response, lookup
from banking_mock.query import CollectionSpec, run_query
from banking_mock.serialization import dataclass_to_dict
from banking_mock.store.memory import BankingDataStore

TRANSACTION_ID_RE = re.compile(r"^txn-[A-Za-z0-9-]+$")

TRANSACTIONS = CollectionSpec(
    exact=(
        ("accountId", "account_id"),
        ("transactionType", "transaction_type"),
    ),
    date_attribute="transaction_date",
    amount_attribute="amount",
    sort_attribute="transaction_date",
)


class TransactionHandler:
    """Read-only endpoints over the seeded transaction store."""

    def __init__(self, store: BankingDataStore, config: MockBankConfig) -> None:
        self.store = store
        self.config = config

    def list_transactions(self, query: Mapping[str, Any] | None = None) -> ApiResponse:
        """GET /transactions

        Supports ``accountId``, ``transactionType``, ``startDate``,
        ``endDate``, ``minAmount`` and ``maxAmount``; newest first.
        """
        result = run_query(
            self.store.transactions.list(), query or {}, TRANSACTIONS, self.config.pagination
        )
        return json_response(
            {
                "transactions": [dataclass_to_dict(txn) for txn in result.items],
                "pagination": dataclass_to_dict(result.pagination),
            }
        )

    def get_transaction(self, transaction_id: str) -> ApiResponse:
        """GET /transactions/{transactionId}"""
        check_id(
            transaction_id,
            TRANSACTION_ID_RE,
            "INVALID_TRANSACTION_ID",
            "Invalid transaction ID format. Expected prefix: txn-",
        )
        transaction = lookup(self.store.transactions, transaction_id, "TRANSACTION_NOT_FOUND")
        return json_response(dataclass_to_dict(transaction))
