"""Database layer - Beanie documents, client lifecycle and pagination."""

from authkit.core.database.base import TimestampedDocument
from authkit.core.database.pagination import QueryOptions, QueryResult, paginate


__all__ = [
    "QueryOptions",
    "QueryResult",
    "TimestampedDocument",
    "paginate",
]
