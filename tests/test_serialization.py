"""Tests for shared serialization utilities."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum

from banking_mock.models.base import Pagination
from banking_mock.serialization import (
    camel_case,
    dataclass_to_dict,
    format_timestamp,
    pick,
    serialize_value,
    to_dict,
)


class _SampleEnum(str, Enum):
    VALUE_A = "VALUE_A"


@dataclass
class _Inner:
    branch_code: str


@dataclass
class _SampleData:
    account_id: str
    available_balance: Decimal
    opened_date: date
    branch: _Inner


class TestCamelCase:
    def test_snake_to_camel(self) -> None:
        assert camel_case("available_balance") == "availableBalance"
        assert camel_case("card_last4") == "cardLast4"

    def test_single_word(self) -> None:
        assert camel_case("status") == "status"


class TestFormatTimestamp:
    def test_aware_utc(self) -> None:
        value = datetime(2026, 1, 15, 12, 30, 0, 123456, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2026-01-15T12:30:00.123Z"

    def test_aware_other_offset_converted(self) -> None:
        value = datetime(2026, 1, 15, 13, 0, tzinfo=timezone(timedelta(hours=1)))
        assert format_timestamp(value) == "2026-01-15T12:00:00.000Z"

    def test_naive_treated_as_utc(self) -> None:
        assert format_timestamp(datetime(2024, 6, 15, 10, 30)) == "2024-06-15T10:30:00.000Z"


class TestSerializeValue:
    """Tests for serialize_value function."""

    def test_decimal_becomes_number(self) -> None:
        assert serialize_value(Decimal("99.99")) == 99.99

    def test_enum(self) -> None:
        assert serialize_value(_SampleEnum.VALUE_A) == "VALUE_A"

    def test_date(self) -> None:
        assert serialize_value(date(2024, 6, 15)) == "2024-06-15"

    def test_nested_dict_and_list(self) -> None:
        data = {"amounts": [Decimal("10.00"), Decimal("20.50")], "when": date(2024, 1, 1)}
        assert serialize_value(data) == {"amounts": [10.0, 20.5], "when": "2024-01-01"}

    def test_passthrough(self) -> None:
        assert serialize_value("hello") == "hello"
        assert serialize_value(42) == 42
        assert serialize_value(None) is None


class TestDataclassToDict:
    def test_camel_case_keys_and_nested(self) -> None:
        obj = _SampleData(
            account_id="acc-123456789",
            available_balance=Decimal("1500.25"),
            opened_date=date(2025, 3, 1),
            branch=_Inner(branch_code="LMB001"),
        )

        assert dataclass_to_dict(obj) == {
            "accountId": "acc-123456789",
            "availableBalance": 1500.25,
            "openedDate": "2025-03-01",
            "branch": {"branchCode": "LMB001"},
        }

    def test_pagination(self) -> None:
        result = to_dict(Pagination(page=2, limit=10, total_pages=3, total_records=25))
        assert result == {"page": 2, "limit": 10, "totalPages": 3, "totalRecords": 25}


class TestPick:
    def test_selected_fields_in_order(self) -> None:
        obj = _SampleData("acc-1", Decimal("1.00"), date(2025, 1, 1), _Inner("X"))
        assert list(pick(obj, "opened_date", "account_id")) == ["openedDate", "accountId"]


class TestToDict:
    def test_dict_values_serialized(self) -> None:
        assert to_dict({"amount": Decimal("5.00")}) == {"amount": 5.0}

    def test_other_type(self) -> None:
        assert to_dict(42) == {"value": "42"}
