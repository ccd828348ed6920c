"""Filter predicates for collection queries.

Every predicate tests one condition on one entity and ignores the others,
so the result set does not depend on the order they are applied in.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Iterable, Mapping, TypeVar

from banking_mock.query.params import parse_date, parse_decimal, query_value

T = TypeVar("T")

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class CollectionSpec:
    """What a resource collection can be filtered and sorted on.

    Parameters
    ----------
    exact : tuple[tuple[str, str], ...]
        ``(query parameter, entity attribute)`` pairs matched by equality.
    date_attribute : str | None
        Attribute compared against ``startDate``/``endDate``.
    amount_attribute : str | None
        Attribute whose absolute value is compared against
        ``minAmount``/``maxAmount``.
    sort_attribute : str | None
        Attribute the results are sorted on, newest first.
    """

    exact: tuple[tuple[str, str], ...] = ()
    date_attribute: str | None = None
    amount_attribute: str | None = None
    sort_attribute: str | None = None


def _calendar_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def exact_match(attribute: str, expected: str) -> Predicate:
    """Match entities whose ``attribute`` equals ``expected``."""

    def predicate(entity: Any) -> bool:
        return getattr(entity, attribute) == expected

    return predicate


def date_on_or_after(attribute: str, start: date) -> Predicate:
    def predicate(entity: Any) -> bool:
        return _calendar_date(getattr(entity, attribute)) >= start

    return predicate


def date_on_or_before(attribute: str, end: date) -> Predicate:
    def predicate(entity: Any) -> bool:
        return _calendar_date(getattr(entity, attribute)) <= end

    return predicate


def amount_at_least(attribute: str, minimum: Decimal) -> Predicate:
    def predicate(entity: Any) -> bool:
        return abs(getattr(entity, attribute)) >= minimum

    return predicate


def amount_at_most(attribute: str, maximum: Decimal) -> Predicate:
    def predicate(entity: Any) -> bool:
        return abs(getattr(entity, attribute)) <= maximum

    return predicate


def build_filters(query: Mapping[str, Any], spec: CollectionSpec) -> list[Predicate]:
    """Build the filter chain for a query.

    Exact-match filters come first, then the inclusive date range, then the
    inclusive magnitude range. All parameters are validated before any
    filter runs.

    Raises
    ------
    InvalidParameterError
        If a date or amount parameter is malformed.
    """
    filters: list[Predicate] = []

    for param, attribute in spec.exact:
        value = query_value(query, param)
        if value is not None:
            filters.append(exact_match(attribute, str(value)))

    if spec.date_attribute:
        start = parse_date(query, "startDate")
        end = parse_date(query, "endDate")
        if start is not None:
            filters.append(date_on_or_after(spec.date_attribute, start))
        if end is not None:
            filters.append(date_on_or_before(spec.date_attribute, end))

    if spec.amount_attribute:
        minimum = parse_decimal(query, "minAmount")
        maximum = parse_decimal(query, "maxAmount")
        if minimum is not None:
            filters.append(amount_at_least(spec.amount_attribute, minimum))
        if maximum is not None:
            filters.append(amount_at_most(spec.amount_attribute, maximum))

    return filters


def apply_filters(items: Iterable[T], filters: list[Predicate]) -> list[T]:
    """Keep the items every predicate accepts."""
    return [item for item in items if all(predicate(item) for predicate in filters)]


def sort_descending(items: list[T], attribute: str) -> list[T]:
    """Stable sort, newest/largest first."""
    return sorted(items, key=lambda item: getattr(item, attribute), reverse=True)
