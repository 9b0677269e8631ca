"""Query errors — caller mistakes reported synchronously by the query surface."""

from __future__ import annotations

from typing import Any

from feature_control.kernel.errors.base import BaseError


class QueryError(BaseError):
    """Invalid query against a resolved feature set."""

    default_code = "query_error"


class InvalidSessionError(QueryError):
    """The session handle is missing, failed to initialise, or was terminated."""

    default_code = "invalid_session"

    def __init__(self, message: str = "Session is not initialized", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class IndexOutOfRangeError(QueryError):
    """A flag index is negative, past the end, or not an integer."""

    default_code = "index_out_of_range"

    def __init__(self, index: object, count: int, **kwargs: Any) -> None:
        super().__init__(
            f"Flag index {index!r} is outside [0, {count})",
            detail={"index": index, "count": count},
            **kwargs,
        )
        self.index = index
        self.count = count


class InvalidAttributeError(QueryError):
    """The requested attribute kind is not recognised."""

    default_code = "invalid_attribute"

    def __init__(self, attribute: object, **kwargs: Any) -> None:
        super().__init__(f"Unrecognized attribute {attribute!r}", **kwargs)
        self.attribute = attribute


__all__ = [
    "IndexOutOfRangeError",
    "InvalidAttributeError",
    "InvalidSessionError",
    "QueryError",
]
