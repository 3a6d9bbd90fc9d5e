"""Pagination bookkeeping and page-number lists."""

from safeplots.pagination.models import PaginationState
from safeplots.pagination.page_numbers import ELLIPSIS, PageItem, get_page_numbers
from safeplots.pagination.paginator import Paginator

__all__ = [
    "Paginator",
    "PaginationState",
    "get_page_numbers",
    "ELLIPSIS",
    "PageItem",
]
