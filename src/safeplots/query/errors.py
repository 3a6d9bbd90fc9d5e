"""Error normalization for the query layer."""

from __future__ import annotations

from typing import Any

DEFAULT_ERROR_MESSAGE = "An error occurred"


class QueryError(Exception):
    """Failure that did not arrive as an exception instance."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGE, cause: Any = None) -> None:
        super().__init__(message)
        self.cause = cause


def normalize_error(failure: Any) -> Exception:
    """Return failure unchanged if it is an Exception, otherwise wrap it in QueryError."""
    if isinstance(failure, Exception):
        return failure
    return QueryError(DEFAULT_ERROR_MESSAGE, cause=failure)


def error_message(error: Exception, fallback: str) -> str:
    """User-facing message for an error, or fallback when it has none."""
    message = str(error)
    return message if message else fallback
