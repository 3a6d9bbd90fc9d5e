"""Response envelopes returned by ApiClient."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from safeplots.api.errors import ApiError

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Outcome of one API call. Failures are values, not exceptions.

    Attributes:
        success: True for a 2xx response with a readable body.
        data: Response payload (the body's ``data`` field when present).
        error: User-facing failure message.
        message: Optional informational message from the server.
        status: HTTP status, 0 for network failures, None when no request was made.
    """

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None
    status: int | None = None

    def unwrap(self) -> T | None:
        """Return data, or raise ApiError for a failed response.

        Lets query functions built on the client reject, so that retries
        and error state kick in.
        """
        if not self.success:
            raise ApiError(self.error or "Request failed", self.status or 0)
        return self.data


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of a server-paginated listing."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[T] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = Field(default=12, alias="pageSize")
    total_pages: int = Field(default=0, alias="totalPages")
