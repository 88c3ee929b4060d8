from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from event_browser.core.exceptions import UnknownFilterError
from event_browser.core.filter_engine import apply_filters
from event_browser.core.filter_state import CATEGORY_FIELDS, FilterState
from event_browser.core.pagination import (
    PAGE_SIZE,
    PageLink,
    build_page_links,
    clamp_page,
    page_bounds,
    page_slice,
    total_pages,
)
from event_browser.core.record import BRACKETS, EventRecord
from event_browser.core.sort_engine import DEFAULT_SORT, SortKey, sort_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardView:
    """
    Everything a renderer needs after a command: the page slice, the
    counts for the status line and the pagination links.
    """
    records: Tuple[EventRecord, ...]
    total_count: int
    filtered_count: int
    current_page: int
    total_pages: int
    start_index: int
    end_index: int
    page_links: Tuple[PageLink, ...] = field(default_factory=tuple)

    @property
    def page_count(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return self.filtered_count == 0

    @property
    def status_text(self) -> str:
        if self.is_empty:
            return "No events match your filters."
        return (
            f"Showing {self.start_index}-{self.end_index} of {self.filtered_count} events "
            f"(Page {self.current_page} of {self.total_pages})"
        )


class DashboardSession:
    """
    View state controller over an immutable base collection.

    Predicate changes re-filter from the base collection, reset to page 1
    and re-sort. A sort change re-orders the current working order and
    keeps the page when still valid. Page navigation only re-slices.
    """

    page_size = PAGE_SIZE

    def __init__(
        self,
        records: Sequence[EventRecord],
        filters: Optional[FilterState] = None,
        sort_key: SortKey = DEFAULT_SORT,
    ):
        self._base: Tuple[EventRecord, ...] = tuple(records)
        self._filters = filters or FilterState()
        self._sort_key = SortKey.parse(sort_key)
        self._page = 1
        self._ordered: List[EventRecord] = []
        self._view: Optional[DashboardView] = None
        self._run_pipeline()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def base(self) -> Tuple[EventRecord, ...]:
        return self._base

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def sort_key(self) -> SortKey:
        return self._sort_key

    @property
    def page(self) -> int:
        return self._page

    @property
    def ordered(self) -> Tuple[EventRecord, ...]:
        return tuple(self._ordered)

    def view(self) -> DashboardView:
        return self._view

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def set_search(self, term: Optional[str]) -> DashboardView:
        return self.set_filters(self._filters.with_changes(search=term or ""))

    def set_filter(self, field_name: str, value: Optional[str]) -> DashboardView:
        if field_name not in CATEGORY_FIELDS:
            raise UnknownFilterError(f"Unknown filter field '{field_name}'")
        return self.set_filters(self._filters.with_changes(**{field_name: value or ""}))

    def set_min_score(self, value: Optional[float]) -> DashboardView:
        return self.set_filters(self._filters.with_changes(min_score=float(value or 0)))

    def set_suitability(self, bracket: str, checked: bool) -> DashboardView:
        if bracket not in BRACKETS:
            raise UnknownFilterError(f"Unknown suitability bracket '{bracket}'")
        return self.set_filters(self._filters.with_changes(**{bracket: bool(checked)}))

    def set_filters(self, filters: FilterState) -> DashboardView:
        self._filters = filters
        self._page = 1
        return self._run_pipeline()

    def set_sort(self, key: Optional[str]) -> DashboardView:
        self._sort_key = SortKey.parse(key)
        self._ordered = sort_records(self._ordered, self._sort_key)
        return self._paginate()

    def go_to_page(self, page: int) -> DashboardView:
        target = clamp_page(page, total_pages(len(self._ordered), self.page_size))
        if target == self._page and self._view is not None:
            return self._view
        self._page = target
        return self._paginate()

    def reset(self) -> DashboardView:
        logger.debug("Resetting dashboard filters")
        return self.set_filters(FilterState())

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    def _run_pipeline(self) -> DashboardView:
        filtered = apply_filters(self._base, self._filters)
        self._ordered = sort_records(filtered, self._sort_key)
        return self._paginate()

    def _paginate(self) -> DashboardView:
        count = len(self._ordered)
        n_pages = total_pages(count, self.page_size)
        self._page = clamp_page(self._page, n_pages)

        start, end = page_bounds(self._page, count, self.page_size)

        self._view = DashboardView(
            records=tuple(page_slice(self._ordered, self._page, self.page_size)),
            total_count=len(self._base),
            filtered_count=count,
            current_page=self._page,
            total_pages=n_pages,
            start_index=start + 1 if count else 0,
            end_index=end,
            page_links=tuple(build_page_links(self._page, n_pages)),
        )
        return self._view

    # ------------------------------------------------------------------
    # Persistence in a browser-side store
    # ------------------------------------------------------------------
    def snapshot(self) -> Dict[str, Any]:
        return {
            "filters": self._filters.to_dict(),
            "sort": self._sort_key.value,
            "page": self._page,
            "order": [r.event_id for r in self._ordered],
        }

    @classmethod
    def restore(cls, records: Sequence[EventRecord], data: Optional[Dict[str, Any]]) -> DashboardSession:
        """
        Rebuild a session from snapshot(). Falls back to a fresh session when
        data is empty. Ids that are not in records are ignored.
        """
        if not data:
            return cls(records)

        session = cls(
            records,
            filters=FilterState.from_dict(data.get("filters") or {}),
            sort_key=data.get("sort") or DEFAULT_SORT,
        )

        order = data.get("order")
        if order is not None:
            by_id = {r.event_id: r for r in session._base}
            session._ordered = [by_id[i] for i in order if i in by_id]

        session._page = int(data.get("page") or 1)
        session._paginate()
        return session
