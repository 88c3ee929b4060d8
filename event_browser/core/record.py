from __future__ import annotations

from dataclasses import dataclass
from numbers import Number
from typing import Any, Mapping, Tuple

import numpy as np
import pandas as pd

BRACKETS: Tuple[str, ...] = ("young", "adult", "senior")

# (attribute, detail label, radar label) in display order
COMPONENT_FIELDS: Tuple[Tuple[str, str, str], ...] = (
    ("bus_proximity_score", "Bus Proximity", "Bus Access"),
    ("parking_proximity_score", "Parking Proximity", "Parking Access"),
    ("traffic_score", "Traffic Score", "Low Traffic"),
    ("cost_score", "Cost Accessibility", "Cost Access"),
    ("complexity_score", "Complexity", "Simplicity"),
    ("activity_score", "Activity Level", "Low Activity"),
    ("age_diversity_score", "Age Diversity", "Age Diversity"),
)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return bool(pd.api.types.is_scalar(value) and pd.isna(value))


def parse_flag(value: Any) -> bool:
    """
    Normalise a suitability cell to a bool.

    Accepted truthy encodings: native True, the exact string "True",
    or a number equal to 1. Anything else is False.
    """
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, str):
        return value == "True"
    if isinstance(value, Number) and not _is_missing(value):
        return bool(value == 1)
    return False


def parse_identifier(value: Any) -> str:
    """Return the identifier as a stripped string ("" when missing)."""
    if _is_missing(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _text(value: Any) -> str:
    return "" if _is_missing(value) else str(value)


def _number(value: Any) -> float:
    if _is_missing(value) or value == "":
        return float("nan")
    return float(value)


@dataclass(frozen=True)
class EventRecord:
    """
    One event row of the dataset, typed and immutable.

    Scores arrive precomputed: inclusivity_score is in [0, 100], each of
    the seven component scores is in [0, 1].
    """

    event_id: str
    name: str
    month: str = ""

    cost: str = ""
    activity_level: str = ""
    complexity: str = ""
    noise_level: str = ""
    cultural_type: str = ""
    audience_scope: str = ""

    inclusivity_score: float = 0.0
    bus_proximity_score: float = 0.0
    parking_proximity_score: float = 0.0
    traffic_score: float = 0.0
    cost_score: float = 0.0
    complexity_score: float = 0.0
    activity_score: float = 0.0
    age_diversity_score: float = 0.0

    suitable_for_young: bool = False
    suitable_for_adult: bool = False
    suitable_for_senior: bool = False

    latitude: float = 0.0
    longitude: float = 0.0
    nearest_bus_stop_km: float = 0.0
    nearest_parking_lot_name: str = ""
    nearest_parking_lot_km: float = 0.0

    def suitable_for(self, bracket: str) -> bool:
        if bracket not in BRACKETS:
            raise KeyError(f"Unknown suitability bracket '{bracket}'")
        return getattr(self, f"suitable_for_{bracket}")

    def component_scores(self) -> Tuple[float, ...]:
        return tuple(getattr(self, attr) for attr, _, _ in COMPONENT_FIELDS)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> EventRecord:
        """
        Build a record from one parsed CSV row (column name -> value).

        The dataset's aggregate column is 'inclusivity_score_100'.
        """
        return cls(
            event_id=parse_identifier(row.get("event_id")),
            name=_text(row.get("name")),
            month=_text(row.get("month")),
            cost=_text(row.get("cost")),
            activity_level=_text(row.get("activity_level")),
            complexity=_text(row.get("complexity")),
            noise_level=_text(row.get("noise_level")),
            cultural_type=_text(row.get("cultural_type")),
            audience_scope=_text(row.get("audience_scope")),
            inclusivity_score=_number(row.get("inclusivity_score_100")),
            bus_proximity_score=_number(row.get("bus_proximity_score")),
            parking_proximity_score=_number(row.get("parking_proximity_score")),
            traffic_score=_number(row.get("traffic_score")),
            cost_score=_number(row.get("cost_score")),
            complexity_score=_number(row.get("complexity_score")),
            activity_score=_number(row.get("activity_score")),
            age_diversity_score=_number(row.get("age_diversity_score")),
            suitable_for_young=parse_flag(row.get("suitable_for_young")),
            suitable_for_adult=parse_flag(row.get("suitable_for_adult")),
            suitable_for_senior=parse_flag(row.get("suitable_for_senior")),
            latitude=_number(row.get("latitude")),
            longitude=_number(row.get("longitude")),
            nearest_bus_stop_km=_number(row.get("nearest_bus_stop_km")),
            nearest_parking_lot_name=_text(row.get("nearest_parking_lot_name")),
            nearest_parking_lot_km=_number(row.get("nearest_parking_lot_km")),
        )
