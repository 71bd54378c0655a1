"""Paginated queries over Beanie documents."""

import math
from typing import Any, Generic, TypeVar

from beanie import Document
from pydantic import BaseModel, Field
from pymongo import ASCENDING, DESCENDING

from authkit.core.constants import DEFAULT_PAGE_SIZE, DEFAULT_SORT_FIELD


DocumentT = TypeVar("DocumentT", bound=Document)
T = TypeVar("T")


class QueryOptions(BaseModel):
    """Sorting and paging options for a list query.

    Attributes:
        sort_by: Comma-separated ``field:asc|desc`` criteria, e.g. ``"role:desc,name:asc"``
        limit: Maximum number of results per page
        page: Page number (1-indexed)
    """

    sort_by: str | None = None
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    page: int = Field(default=1, ge=1)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


class QueryResult(BaseModel, Generic[T]):
    """One page of query results with paging metadata."""

    results: list[T]
    page: int
    limit: int
    total_pages: int
    total_results: int


def parse_sort(sort_by: str | None) -> list[tuple[str, int]]:
    """Turn ``"name:desc,email"`` into pymongo sort criteria.

    Fields without a direction, or with anything other than ``desc``, sort
    ascending. Falls back to ``createdAt`` ascending.
    """
    criteria: list[tuple[str, int]] = []
    for part in (sort_by or "").split(","):
        key, _, order = part.strip().partition(":")
        if not key:
            continue
        criteria.append((key, DESCENDING if order.strip() == "desc" else ASCENDING))
    return criteria or [(DEFAULT_SORT_FIELD, ASCENDING)]


def total_pages(total_results: int, limit: int) -> int:
    return math.ceil(total_results / limit)


async def paginate(
    document_cls: type[DocumentT],
    filter: dict[str, Any],
    options: QueryOptions,
) -> QueryResult[DocumentT]:
    """Run a sorted, paged find and its matching count.

    Args:
        document_cls: The Beanie document class to query
        filter: MongoDB filter document
        options: Sorting and paging options

    Returns:
        QueryResult for the requested page
    """
    total = await document_cls.find(filter).count()
    results = (
        await document_cls.find(filter)
        .sort(parse_sort(options.sort_by))
        .skip(options.skip)
        .limit(options.limit)
        .to_list()
    )
    return QueryResult(
        results=results,
        page=options.page,
        limit=options.limit,
        total_pages=total_pages(total, options.limit),
        total_results=total,
    )
