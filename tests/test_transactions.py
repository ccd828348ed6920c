"""Tests for transaction handlers."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from banking_mock.exceptions import InvalidIdError, InvalidParameterError, NotFoundError
from banking_mock.service import BankingService


class TestListTransactions:
    """Tests for list_transactions."""

    def test_default_page(self, service: BankingService) -> None:
        body = service.transactions.list_transactions({}).body

        assert len(body["transactions"]) == 20
        assert body["pagination"] == {"page": 1, "limit": 20, "totalPages": 1, "totalRecords": 20}

    def test_sorted_newest_first(self, service: BankingService) -> None:
        dates = [t["transactionDate"] for t in service.transactions.list_transactions({}).body["transactions"]]
        assert dates == sorted(dates, reverse=True)

    @pytest.mark.parametrize(
        "query",
        [
            {"accountId": "acc-123456789"},
            {"transactionType": "CREDIT", "startDate": "2025-12-20"},
            {"accountId": "acc-987654321", "transactionType": "DEBIT", "endDate": "2026-01-14"},
            {"minAmount": "50", "maxAmount": "400", "startDate": "2025-12-16", "endDate": "2026-01-15"},
        ],
    )
    def test_sorted_newest_first_with_filters(self, service: BankingService, query: dict) -> None:
        body = service.transactions.list_transactions({**query, "limit": "100"}).body
        dates = [t["transactionDate"] for t in body["transactions"]]
        assert dates == sorted(dates, reverse=True)

    def test_debit_filter_for_account(self, service: BankingService, sample_account_id: str) -> None:
        service.store.transactions.add(
            service.generators.transactions.generate(
                sample_account_id,
                transaction_id="txn-test-debit",
                transaction_type="DEBIT",
                amount=Decimal("42.00"),
            )
        )

        body = service.transactions.list_transactions(
            {"accountId": sample_account_id, "transactionType": "DEBIT"}
        ).body

        assert "txn-test-debit" in {t["transactionId"] for t in body["transactions"]}
        for txn in body["transactions"]:
            assert txn["accountId"] == sample_account_id
            assert txn["transactionType"] == "DEBIT"
            assert txn["amount"] < 0

    def test_date_filter_inclusive(self, service: BankingService, sample_account_id: str) -> None:
        service.store.transactions.add(
            service.generators.transactions.generate(
                sample_account_id,
                transaction_id="txn-test-late",
                transaction_date=datetime(2026, 1, 10, 23, 59, tzinfo=timezone.utc),
            )
        )

        body = service.transactions.list_transactions(
            {"startDate": "2026-01-10", "endDate": "2026-01-10"}
        ).body

        ids = {t["transactionId"] for t in body["transactions"]}
        assert "txn-test-late" in ids
        assert all(t["transactionDate"].startswith("2026-01-10") for t in body["transactions"])

    def test_unknown_type_returns_empty(self, service: BankingService) -> None:
        body = service.transactions.list_transactions({"transactionType": "REFUND"}).body

        assert body["transactions"] == []
        assert body["pagination"]["totalPages"] == 0

    def test_invalid_amount(self, service: BankingService) -> None:
        with pytest.raises(InvalidParameterError):
            service.transactions.list_transactions({"minAmount": "abc"})


class TestGetTransaction:
    def test_seeded_transaction(self, service: BankingService) -> None:
        body = service.transactions.get_transaction("txn-20260109-001").body

        assert body["transactionId"] == "txn-20260109-001"
        assert body["accountId"] == "acc-123456789"
        assert body["merchant"]["name"]
        assert body["metadata"]["authorizationCode"].startswith("AUTH")

    def test_unknown_transaction(self, service: BankingService) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            service.transactions.get_transaction("txn-missing")
        assert exc_info.value.code == "TRANSACTION_NOT_FOUND"

    def test_malformed_id(self, service: BankingService) -> None:
        with pytest.raises(InvalidIdError) as exc_info:
            service.transactions.get_transaction("tx-123")
        assert exc_info.value.code == "INVALID_TRANSACTION_ID"
