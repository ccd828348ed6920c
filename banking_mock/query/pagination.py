"""Page slicing and pagination metadata."""

import math
from typing import Sequence, TypeVar

from banking_mock.models.base import Pagination
from banking_mock.query.params import PageParams

T = TypeVar("T")


def build_pagination(params: PageParams, total_records: int) -> Pagination:
    """Return metadata for ``total_records`` split into pages of ``params.limit``."""
    return Pagination(
        page=params.page,
        limit=params.limit,
        total_pages=math.ceil(total_records / params.limit),
        total_records=total_records,
    )


def paginate(items: Sequence[T], params: PageParams) -> tuple[list[T], Pagination]:
    """Slice one page out of ``items``.

    Pages past the end yield an empty slice; the metadata is still
    computed from the full length.
    """
    start = params.offset
    return list(items[start : start + params.limit]), build_pagination(params, len(items))
