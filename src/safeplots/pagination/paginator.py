"""Paginator: page/limit/count bookkeeping for listing pages.

Usage:
    paginator = Paginator(initial_limit=12)
    params = paginator.get_query_params()       # {"page": 1, "limit": 12}
    response = await client.get("/properties", params=params)
    paginator.set_total_count(response.data["total"])

    paginator.next_page()
    paginator.go_to_page(999)                   # clamped to the last page
    paginator.set_limit(24)                     # back to page 1
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import Any, Generic, TypeVar

from safeplots.config import PaginationSettings
from safeplots.pagination.models import PaginationState
from safeplots.pagination.page_numbers import PageItem, get_page_numbers

T = TypeVar("T")


class Paginator(Generic[T]):
    """Mutable holder of a PaginationState.

    Changing the limit always resets the page to 1: an offset computed under
    one page size is meaningless under another.

    Args:
        initial_page: Page to start on and to return to on ``reset()``.
        initial_limit: Items per page.
        total_count: Known total, usually set later via ``set_total_count``.
        max_visible: Default window width for ``page_numbers()``.
    """

    def __init__(
        self,
        initial_page: int = 1,
        initial_limit: int = 12,
        total_count: int = 0,
        max_visible: int = 5,
    ) -> None:
        self._initial_page = initial_page
        self._max_visible = max_visible
        self._state = PaginationState(page=initial_page, limit=initial_limit, total_count=total_count)

    @classmethod
    def from_settings(cls, settings: PaginationSettings | None = None, **kwargs: Any) -> Paginator[T]:
        settings = settings or PaginationSettings()
        options: dict[str, Any] = {
            "initial_page": settings.initial_page,
            "initial_limit": settings.initial_limit,
            "max_visible": settings.max_visible,
        }
        options.update(kwargs)
        return cls(**options)

    @property
    def state(self) -> PaginationState:
        return self._state

    @property
    def page(self) -> int:
        return self._state.page

    @property
    def limit(self) -> int:
        return self._state.limit

    @property
    def total_count(self) -> int:
        return self._state.total_count

    @property
    def total_pages(self) -> int:
        return self._state.total_pages

    @property
    def has_more(self) -> bool:
        return self._state.has_more

    @property
    def has_previous(self) -> bool:
        return self._state.has_previous

    def set_page(self, page: int) -> None:
        """Set the page without clamping. Use go_to_page for user input."""
        self._state = replace(self._state, page=page)

    def set_limit(self, limit: int) -> None:
        """Change the page size and return to page 1."""
        self._state = replace(self._state, limit=limit, page=1)

    def set_total_count(self, total_count: int) -> None:
        self._state = replace(self._state, total_count=total_count)

    def next_page(self) -> None:
        if self.has_more:
            self._state = replace(self._state, page=self.page + 1)

    def prev_page(self) -> None:
        if self.has_previous:
            self._state = replace(self._state, page=self.page - 1)

    def go_to_page(self, page: int) -> None:
        """Jump to page, clamped into [1, total_pages] (1 when there are no pages)."""
        clamped = max(1, min(page, self.total_pages))
        self._state = replace(self._state, page=clamped)

    def reset(self) -> None:
        """Return to the initial page. Limit and total count are kept."""
        self._state = replace(self._state, page=self._initial_page)

    def paginate_data(self, items: Sequence[T]) -> list[T]:
        """Slice an in-memory list down to the current page."""
        start = self._state.offset
        return list(items[start : start + self.limit])

    def get_query_params(self) -> dict[str, int]:
        """Snapshot of page and limit for building a request."""
        return {"page": self.page, "limit": self.limit}

    def page_numbers(self, max_visible: int | None = None) -> list[PageItem]:
        """Page-number list for the current position."""
        width = self._max_visible if max_visible is None else max_visible
        return get_page_numbers(self.page, self.total_pages, width)
