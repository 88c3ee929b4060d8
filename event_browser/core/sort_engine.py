from __future__ import annotations

import unicodedata
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from event_browser.core.exceptions import InvalidSortKeyError
from event_browser.core.record import EventRecord


class SortKey(str, Enum):
    SCORE_DESC = "score_desc"
    SCORE_ASC = "score_asc"
    NAME_ASC = "name_asc"
    MONTH_ASC = "month_asc"
    NONE = "none"

    @classmethod
    def parse(cls, value: Optional[str]) -> SortKey:
        if isinstance(value, cls):
            return value
        if not value:
            return cls.NONE
        try:
            return cls(value)
        except ValueError:
            raise InvalidSortKeyError(f"Unknown sort key '{value}'") from None


DEFAULT_SORT = SortKey.SCORE_DESC

SORT_LABELS = {
    SortKey.SCORE_DESC: "Score (High to Low)",
    SortKey.SCORE_ASC: "Score (Low to High)",
    SortKey.NAME_ASC: "Name (A-Z)",
    SortKey.MONTH_ASC: "Month",
    SortKey.NONE: "Unsorted",
}


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def collation_key(text: str) -> Tuple[str, str, Tuple[bool, ...]]:
    """
    Sort key comparing text the way a default Unicode collation does.

    Levels: base letters ignoring case and accents, then accents, then
    case with lowercase first. "Art" < "École" < "Zumba", "cote" < "côte",
    "apple" < "Apple".
    """
    folded = unicodedata.normalize("NFKD", text.casefold())
    case_pattern = tuple(c.isupper() for c in unicodedata.normalize("NFKD", text))
    return _strip_accents(folded), folded, case_pattern


def sort_records(records: Iterable[EventRecord], key: SortKey) -> List[EventRecord]:
    """
    Return a new list ordered by key. Ties keep their input order.

    Months sort as plain strings ("April" < "August" < "December"),
    not in calendar order.
    """
    items = list(records)
    key = SortKey.parse(key)

    if key is SortKey.SCORE_DESC:
        return sorted(items, key=lambda r: r.inclusivity_score, reverse=True)
    if key is SortKey.SCORE_ASC:
        return sorted(items, key=lambda r: r.inclusivity_score)
    if key is SortKey.NAME_ASC:
        return sorted(items, key=lambda r: collation_key(r.name))
    if key is SortKey.MONTH_ASC:
        return sorted(items, key=lambda r: collation_key(r.month))
    return items
