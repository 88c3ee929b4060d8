from __future__ import annotations

import math

import numpy as np
import pytest

from event_browser.core.record import EventRecord, parse_flag, parse_identifier


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, True),
        (np.bool_(True), True),
        ("True", True),
        (1, True),
        (1.0, True),
        (np.int64(1), True),
        (np.float64(1.0), True),
        (np.int64(0), False),
        (False, False),
        ("true", False),
        ("TRUE", False),
        ("False", False),
        (0, False),
        (2, False),
        (None, False),
        (float("nan"), False),
        ("", False),
    ],
)
def test_parse_flag_accepts_only_known_truthy_encodings(value, expected):
    assert parse_flag(value) is expected


def test_parse_identifier_normalises_missing_and_numeric_ids():
    assert parse_identifier(None) == ""
    assert parse_identifier(float("nan")) == ""
    assert parse_identifier("   ") == ""
    assert parse_identifier(" EV1 ") == "EV1"
    assert parse_identifier(12.0) == "12"
    assert parse_identifier(7) == "7"


def test_from_row_maps_columns_and_normalises_flags():
    row = {
        "event_id": "EV0001",
        "name": "Harbour Festival",
        "month": "July",
        "cost": "free",
        "activity_level": "low",
        "complexity": "simple",
        "noise_level": None,
        "inclusivity_score_100": 72.5,
        "bus_proximity_score": 0.9,
        "age_diversity_score": 0.4,
        "suitable_for_young": "True",
        "suitable_for_adult": 1,
        "suitable_for_senior": False,
        "latitude": 44.65,
        "longitude": -63.57,
        "nearest_parking_lot_name": "Lot A",
        "nearest_parking_lot_km": 0.25,
    }

    record = EventRecord.from_row(row)

    assert record.event_id == "EV0001"
    assert record.name == "Harbour Festival"
    assert record.inclusivity_score == 72.5
    assert record.noise_level == ""
    assert record.suitable_for_young is True
    assert record.suitable_for_adult is True
    assert record.suitable_for_senior is False
    # absent numeric columns become NaN rather than a fake zero
    assert math.isnan(record.traffic_score)


def test_suitable_for_and_component_order():
    record = EventRecord(
        event_id="1",
        name="x",
        bus_proximity_score=0.1,
        parking_proximity_score=0.2,
        traffic_score=0.3,
        cost_score=0.4,
        complexity_score=0.5,
        activity_score=0.6,
        age_diversity_score=0.7,
        suitable_for_adult=True,
    )

    assert record.suitable_for("adult") is True
    assert record.suitable_for("young") is False
    assert record.component_scores() == (0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7)

    with pytest.raises(KeyError):
        record.suitable_for("toddler")


def test_record_is_immutable():
    record = EventRecord(event_id="1", name="x")
    with pytest.raises(Exception):
        record.name = "y"
