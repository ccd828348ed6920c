"""Collection query pipeline: parse, filter, sort, paginate."""

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Mapping, TypeVar

from banking_mock.config import PaginationConfig
from banking_mock.models.base import Pagination
from banking_mock.query.filters import (
    CollectionSpec,
    apply_filters,
    build_filters,
    sort_descending,
)
from banking_mock.query.pagination import build_pagination, paginate
from banking_mock.query.params import PageParams, parse_page_params

T = TypeVar("T")


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    items: list[T]
    pagination: Pagination


def run_query(
    items: Iterable[T],
    query: Mapping[str, Any],
    spec: CollectionSpec,
    config: PaginationConfig | None = None,
) -> QueryResult[T]:
    """Run the full pipeline over ``items``.

    Parameters
    ----------
    items : Iterable[T]
        Full, unfiltered collection.
    query : Mapping[str, Any]
        Raw query parameters.
    spec : CollectionSpec
        Filters and sort order the collection supports.
    config : PaginationConfig | None
        Page defaults and limits.

    Returns
    -------
    QueryResult[T]
        The requested page and its pagination metadata.
    """
    params = parse_page_params(query, config)
    filtered = apply_filters(items, build_filters(query, spec))
    if spec.sort_attribute:
        filtered = sort_descending(filtered, spec.sort_attribute)
    page, pagination = paginate(filtered, params)
    return QueryResult(items=page, pagination=pagination)


__all__ = [
    "CollectionSpec",
    "PageParams",
    "QueryResult",
    "build_pagination",
    "build_filters",
    "apply_filters",
    "paginate",
    "parse_page_params",
    "run_query",
    "sort_descending",
]
