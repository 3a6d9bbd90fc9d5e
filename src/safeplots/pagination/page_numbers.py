"""Page-number lists for compact pagination bars."""

from __future__ import annotations

from typing import Literal

ELLIPSIS: Literal["ellipsis"] = "ellipsis"

PageItem = int | Literal["ellipsis"]


def get_page_numbers(current_page: int, total_pages: int, max_visible: int = 5) -> list[PageItem]:
    """Build the page numbers to render, collapsing gaps into ELLIPSIS markers.

    The first and last pages are always shown. Between them sits a window
    centered on current_page, pinned to ``[2, max_visible - 1]`` near the
    start and to ``[total_pages - max_visible + 2, total_pages - 1]`` near
    the end.

    Example:
        >>> get_page_numbers(10, 20)
        [1, 'ellipsis', 8, 9, 10, 11, 12, 'ellipsis', 20]
        >>> get_page_numbers(3, 4)
        [1, 2, 3, 4]
    """
    if total_pages <= max_visible:
        return list(range(1, total_pages + 1))

    pages: list[PageItem] = [1]
    half_visible = max_visible // 2

    start = max(2, current_page - half_visible)
    end = min(total_pages - 1, current_page + half_visible)

    if current_page <= half_visible + 1:
        end = min(total_pages - 1, max_visible - 1)
    elif current_page >= total_pages - half_visible:
        start = max(2, total_pages - max_visible + 2)

    if start > 2:
        pages.append(ELLIPSIS)

    pages.extend(range(start, end + 1))

    if end < total_pages - 1:
        pages.append(ELLIPSIS)

    if total_pages > 1:
        pages.append(total_pages)

    return pages
