"""Pagination state."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PaginationState:
    """Page/limit/total-count bookkeeping with derived values.

    Attributes:
        page: Current 1-based page.
        limit: Items per page.
        total_count: Total items known on the server.
    """

    page: int = 1
    limit: int = 12
    total_count: int = 0

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.limit <= 0:
            raise ValueError(f"limit must be > 0, got {self.limit}")
        if self.total_count < 0:
            raise ValueError(f"total_count must be >= 0, got {self.total_count}")

    @property
    def total_pages(self) -> int:
        """Number of pages; 0 when there are no items."""
        return math.ceil(self.total_count / self.limit)

    @property
    def has_more(self) -> bool:
        return self.page * self.limit < self.total_count

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def offset(self) -> int:
        """Index of the first item on the current page."""
        return (self.page - 1) * self.limit
