from __future__ import annotations

from typing import Iterable, List

from event_browser.core.filter_state import CATEGORY_FIELDS, FilterState
from event_browser.core.record import BRACKETS, EventRecord


def matches(record: EventRecord, state: FilterState) -> bool:
    """
    True if the record passes every active predicate.

    Suitability works inverted: an unchecked bracket removes the events that
    ARE suitable for it, so an event suitable for no bracket always passes.
    """
    term = state.search.lower()
    if term and term not in record.name.lower():
        return False

    for field in CATEGORY_FIELDS:
        wanted = getattr(state, field)
        if wanted and getattr(record, field) != wanted:
            return False

    if record.inclusivity_score < state.min_score:
        return False

    for bracket in BRACKETS:
        if not state.checked(bracket) and record.suitable_for(bracket):
            return False

    return True


def apply_filters(records: Iterable[EventRecord], state: FilterState) -> List[EventRecord]:
    """Subset of records matching state, in input order."""
    return [r for r in records if matches(r, state)]
