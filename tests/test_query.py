"""Tests for the collection query pipeline."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from itertools import permutations

import pytest

from banking_mock.config import PaginationConfig
from banking_mock.exceptions import InvalidParameterError
from banking_mock.query import (
    CollectionSpec,
    PageParams,
    apply_filters,
    build_filters,
    paginate,
    parse_page_params,
    run_query,
)
from banking_mock.query.params import parse_date, parse_decimal, parse_int


@dataclass
class _Row:
    row_id: str
    kind: str
    amount: Decimal
    when: datetime


SPEC = CollectionSpec(
    exact=(("kind", "kind"),),
    date_attribute="when",
    amount_attribute="amount",
    sort_attribute="when",
)


def _rows() -> list[_Row]:
    return [
        _Row("r1", "DEBIT", Decimal("-50.00"), datetime(2026, 1, 1, 8, 0, tzinfo=timezone.utc)),
        _Row("r2", "CREDIT", Decimal("120.00"), datetime(2026, 1, 5, 23, 59, tzinfo=timezone.utc)),
        _Row("r3", "DEBIT", Decimal("-300.00"), datetime(2026, 1, 10, 0, 0, tzinfo=timezone.utc)),
        _Row("r4", "FEE", Decimal("2.50"), datetime(2026, 1, 3, 12, 0, tzinfo=timezone.utc)),
        _Row("r5", "DEBIT", Decimal("-120.00"), datetime(2026, 1, 7, 9, 30, tzinfo=timezone.utc)),
    ]


class TestParsePageParams:
    """Tests for parse_page_params."""

    def test_defaults(self) -> None:
        params = parse_page_params({})
        assert params == PageParams(page=1, limit=20)

    def test_string_values(self) -> None:
        assert parse_page_params({"page": "3", "limit": "5"}) == PageParams(page=3, limit=5)

    def test_empty_values_use_defaults(self) -> None:
        assert parse_page_params({"page": "", "limit": " "}) == PageParams(page=1, limit=20)

    def test_config_defaults(self) -> None:
        config = PaginationConfig(default_limit=10, max_limit=50)
        assert parse_page_params({}, config).limit == 10

    @pytest.mark.parametrize("page", ["0", "-1", 0])
    def test_page_below_one(self, page) -> None:
        with pytest.raises(InvalidParameterError, match="page must be greater than or equal to 1"):
            parse_page_params({"page": page})

    @pytest.mark.parametrize("limit", ["0", "1001", -5])
    def test_limit_out_of_range(self, limit) -> None:
        with pytest.raises(InvalidParameterError, match="limit must be between 1 and 1000"):
            parse_page_params({"limit": limit})

    def test_oversized_limit(self) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            parse_page_params({"limit": "9" * 5000})

        assert exc_info.value.code == "INVALID_PARAMETER"
        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize("page", ["\u0661\u0662", "2\n3"])
    def test_non_ascii_or_multiline_digits(self, page: str) -> None:
        with pytest.raises(InvalidParameterError, match="page must be an integer"):
            parse_page_params({"page": page})

    def test_limit_bounds_accepted(self) -> None:
        assert parse_page_params({"limit": "1"}).limit == 1
        assert parse_page_params({"limit": "1000"}).limit == 1000

    def test_non_integer(self) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            parse_page_params({"page": "two"})

        assert exc_info.value.code == "INVALID_PARAMETER"
        assert exc_info.value.status_code == 400

    def test_offset(self) -> None:
        assert PageParams(page=3, limit=10).offset == 20


class TestParsers:
    def test_parse_int_rejects_bool_and_float_text(self) -> None:
        with pytest.raises(InvalidParameterError):
            parse_int({"page": True}, "page")
        with pytest.raises(InvalidParameterError):
            parse_int({"page": "1.5"}, "page")

    def test_parse_date(self) -> None:
        assert parse_date({"startDate": "2026-01-05"}, "startDate") == date(2026, 1, 5)
        assert parse_date({}, "startDate") is None

    @pytest.mark.parametrize("value", ["05/01/2026", "2026-1-5", "2026-02-30"])
    def test_parse_date_invalid(self, value: str) -> None:
        with pytest.raises(InvalidParameterError, match="startDate"):
            parse_date({"startDate": value}, "startDate")

    def test_parse_decimal(self) -> None:
        assert parse_decimal({"minAmount": "10.5"}, "minAmount") == Decimal("10.5")

    @pytest.mark.parametrize("value", ["ten", "NaN", "Infinity"])
    def test_parse_decimal_invalid(self, value: str) -> None:
        with pytest.raises(InvalidParameterError, match="minAmount"):
            parse_decimal({"minAmount": value}, "minAmount")


class TestPaginate:
    """Tests for paginate."""

    def test_middle_page(self) -> None:
        items = list(range(25))
        page, meta = paginate(items, PageParams(page=2, limit=10))

        assert page == list(range(10, 20))
        assert meta.total_pages == 3
        assert meta.total_records == 25

    def test_page_past_end_is_empty(self) -> None:
        page, meta = paginate(list(range(5)), PageParams(page=4, limit=2))

        assert page == []
        assert meta.page == 4
        assert meta.total_pages == 3

    def test_empty_collection(self) -> None:
        page, meta = paginate([], PageParams(page=1, limit=20))

        assert page == []
        assert meta.total_pages == 0
        assert meta.total_records == 0

    @pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 37])
    def test_pages_cover_collection(self, total: int) -> None:
        items = list(range(total))
        limit = 10
        _, meta = paginate(items, PageParams(page=1, limit=limit))

        collected = []
        for number in range(1, meta.total_pages + 1):
            page, _ = paginate(items, PageParams(page=number, limit=limit))
            assert len(page) <= limit
            collected.extend(page)

        assert collected == items


class TestFilters:
    """Tests for build_filters and apply_filters."""

    def test_exact_match(self) -> None:
        result = apply_filters(_rows(), build_filters({"kind": "DEBIT"}, SPEC))
        assert [r.row_id for r in result] == ["r1", "r3", "r5"]

    def test_unknown_exact_value_matches_nothing(self) -> None:
        assert apply_filters(_rows(), build_filters({"kind": "REFUND"}, SPEC)) == []

    def test_date_range_inclusive_calendar_days(self) -> None:
        query = {"startDate": "2026-01-05", "endDate": "2026-01-10"}
        result = apply_filters(_rows(), build_filters(query, SPEC))
        assert {r.row_id for r in result} == {"r2", "r3", "r5"}

    def test_amount_range_uses_magnitude(self) -> None:
        query = {"minAmount": "100", "maxAmount": "120"}
        result = apply_filters(_rows(), build_filters(query, SPEC))
        assert {r.row_id for r in result} == {"r2", "r5"}

    def test_invalid_parameter_raises_before_filtering(self) -> None:
        with pytest.raises(InvalidParameterError, match="maxAmount"):
            build_filters({"kind": "DEBIT", "maxAmount": "lots"}, SPEC)

    def test_filter_order_does_not_matter(self) -> None:
        query = {"kind": "DEBIT", "startDate": "2026-01-02", "minAmount": "100"}
        filters = build_filters(query, SPEC)
        expected = {r.row_id for r in apply_filters(_rows(), filters)}

        assert expected == {"r3", "r5"}
        for ordering in permutations(filters):
            assert {r.row_id for r in apply_filters(_rows(), list(ordering))} == expected

    def test_unused_attributes_ignored(self) -> None:
        spec = CollectionSpec(exact=(("kind", "kind"),))
        assert len(build_filters({"startDate": "not-a-date"}, spec)) == 0


class TestRunQuery:
    def test_sorted_newest_first(self) -> None:
        result = run_query(_rows(), {}, SPEC)
        assert [r.row_id for r in result.items] == ["r3", "r5", "r2", "r4", "r1"]

    def test_filter_then_paginate(self) -> None:
        result = run_query(_rows(), {"kind": "DEBIT", "limit": "2", "page": "2"}, SPEC)

        assert [r.row_id for r in result.items] == ["r1"]
        assert result.pagination.total_records == 3
        assert result.pagination.total_pages == 2
        assert result.pagination.limit == 2

    def test_invalid_page_raises(self) -> None:
        with pytest.raises(InvalidParameterError):
            run_query(_rows(), {"page": "0"}, SPEC)
