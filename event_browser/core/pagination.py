from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

PAGE_SIZE = 24
MAX_VISIBLE_PAGES = 7


@dataclass(frozen=True)
class PageLink:
    """
    One entry of the pagination bar.

    kind is one of "prev", "page", "ellipsis", "next". Ellipses carry no
    page and are always disabled.
    """
    kind: str
    label: str
    page: Optional[int] = None
    active: bool = False
    disabled: bool = False


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """ceil(count / page_size), never less than 1."""
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, n_pages: int) -> int:
    return min(max(1, int(page)), max(1, n_pages))


def page_bounds(page: int, count: int, page_size: int = PAGE_SIZE) -> Tuple[int, int]:
    """Zero-based [start, end) offsets of page within count items."""
    start = (page - 1) * page_size
    end = min(count, page * page_size)
    return min(start, count), end


def page_slice(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> List[T]:
    start, end = page_bounds(page, len(items), page_size)
    return list(items[start:end])


def visible_window(current: int, n_pages: int, max_visible: int = MAX_VISIBLE_PAGES) -> Tuple[int, int]:
    """
    Inclusive [start, end] range of numbered links around current.

    The window holds at most max_visible pages, contains current and is
    clamped to [1, n_pages].
    """
    start = max(1, current - max_visible // 2)
    end = min(n_pages, start + max_visible - 1)

    if end - start < max_visible - 1:
        start = max(1, end - max_visible + 1)

    return start, end


def build_page_links(current: int, n_pages: int) -> List[PageLink]:
    """
    Link metadata for the pagination bar. A single page gets no links.
    """
    if n_pages <= 1:
        return []

    current = clamp_page(current, n_pages)
    start, end = visible_window(current, n_pages)

    links: List[PageLink] = [
        PageLink("prev", "Previous", page=current - 1, disabled=current == 1)
    ]

    if start > 1:
        links.append(PageLink("page", "1", page=1))
        if start > 2:
            links.append(PageLink("ellipsis", "...", disabled=True))

    for n in range(start, end + 1):
        links.append(PageLink("page", str(n), page=n, active=n == current))

    if end < n_pages:
        if end < n_pages - 1:
            links.append(PageLink("ellipsis", "...", disabled=True))
        links.append(PageLink("page", str(n_pages), page=n_pages))

    links.append(
        PageLink("next", "Next", page=current + 1, disabled=current == n_pages)
    )
    return links
