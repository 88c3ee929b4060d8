from __future__ import annotations
from dataclasses import dataclass, asdict, replace
from typing import Dict, Any, Tuple

CATEGORY_FIELDS: Tuple[str, ...] = ("month", "cost", "activity_level")


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current predicate parameters chosen by the user.

    Fields:

    - search: case-insensitive substring matched against the event name
    - month / cost / activity_level: exact-match categorical filters, "" means unset
    - min_score: inclusive lower bound on the aggregate score

    - young / adult / senior: age bracket checkboxes. Unchecking a bracket
      hides events that are suitable for it.

    """

    search: str = ""

    month: str = ""
    cost: str = ""
    activity_level: str = ""

    min_score: float = 0

    young: bool = True
    adult: bool = True
    senior: bool = True

    def checked(self, bracket: str) -> bool:
        return getattr(self, bracket)

    def with_changes(self, **changes: Any) -> FilterState:
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        return cls(
            search=str(data.get("search") or ""),
            month=str(data.get("month") or ""),
            cost=str(data.get("cost") or ""),
            activity_level=str(data.get("activity_level") or ""),
            min_score=float(data.get("min_score") or 0),
            young=bool(data.get("young", True)),
            adult=bool(data.get("adult", True)),
            senior=bool(data.get("senior", True)),
        )
