from __future__ import annotations

from typing import Iterable, List, Sequence

from event_browser.core.filter_state import FilterState
from event_browser.core.record import BRACKETS, EventRecord
from event_browser.core.sort_engine import SORT_LABELS, SortKey
from event_browser.views.formatting import format_label

BRACKET_LABELS = {"young": "Youth", "adult": "Adult", "senior": "Senior"}


def category_options(records: Iterable[EventRecord], field: str, pretty: bool = True) -> List[dict]:
    """Dropdown options for the distinct non-empty values of field, sorted."""
    values = sorted({getattr(r, field) for r in records} - {""})
    return [
        {"label": format_label(v) if pretty else v, "value": v}
        for v in values
    ]


def sort_options() -> List[dict]:
    return [{"label": SORT_LABELS[key], "value": key.value} for key in SortKey]


def bracket_options() -> List[dict]:
    return [{"label": f" {BRACKET_LABELS[b]}", "value": b} for b in BRACKETS]


def checked_brackets(filters: FilterState) -> List[str]:
    return [b for b in BRACKETS if filters.checked(b)]


def brackets_from_checklist(values: Sequence[str] | None) -> dict:
    selected = set(values or [])
    return {b: b in selected for b in BRACKETS}
