from __future__ import annotations

import pandas as pd
import pytest

from event_browser.core.dataset_loader import infer_cell, load_events
from event_browser.core.exceptions import DatasetLoadError


def _write_events_csv(tmp_path, rows):
    path = tmp_path / "events.csv"
    pd.DataFrame(rows).to_csv(path, index=False)
    return path


def _row(event_id, name="Event", **overrides):
    row = {
        "event_id": event_id,
        "name": name,
        "month": "May",
        "cost": "free",
        "activity_level": "low",
        "inclusivity_score_100": 50.0,
        "suitable_for_young": True,
        "suitable_for_adult": True,
        "suitable_for_senior": False,
    }
    row.update(overrides)
    return row


def test_load_events_drops_rows_without_identifier(tmp_path):
    path = _write_events_csv(
        tmp_path,
        [_row("EV1", "A"), _row(None, "B"), _row("EV3", "C")],
    )

    records = load_events(path)

    assert [r.event_id for r in records] == ["EV1", "EV3"]
    assert [r.name for r in records] == ["A", "C"]


def test_load_events_keeps_numeric_ids_as_written(tmp_path):
    path = tmp_path / "numeric_ids.csv"
    path.write_text(
        "event_id,name,inclusivity_score_100\n"
        "7,A,10\n"
        ",B,20\n"
        "012,C,30\n"
    )

    records = load_events(path)

    assert [r.event_id for r in records] == ["7", "012"]


def test_load_events_normalises_mixed_flag_encodings(tmp_path):
    path = _write_events_csv(
        tmp_path,
        [
            _row("a", suitable_for_young=True),
            _row("b", suitable_for_young="True"),
            _row("c", suitable_for_young=1),
            _row("d", suitable_for_young=0),
            _row("e", suitable_for_young="False"),
        ],
    )

    records = load_events(path)

    assert [r.suitable_for_young for r in records] == [True, True, True, False, False]


def test_load_events_missing_file_raises(tmp_path):
    with pytest.raises(DatasetLoadError, match="not found"):
        load_events(tmp_path / "nope.csv")


def test_load_events_empty_file_raises(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")

    with pytest.raises(DatasetLoadError, match="empty"):
        load_events(path)


def test_load_events_without_id_column_raises(tmp_path):
    path = tmp_path / "no_id.csv"
    path.write_text("name,month\nA,May\n")

    with pytest.raises(DatasetLoadError, match="event_id"):
        load_events(path)


def test_infer_cell_only_types_numeric_text():
    assert infer_cell("1") == 1.0
    assert infer_cell(" 0 ") == 0.0
    assert infer_cell("True") == "True"
    assert infer_cell(True) is True


def test_load_events_integer_flag_column_gives_plain_bools(tmp_path):
    path = tmp_path / "int_flags.csv"
    path.write_text(
        "event_id,name,suitable_for_young,suitable_for_adult,suitable_for_senior\n"
        "a,A,1,0,1\n"
        "b,B,0,1,0\n"
    )

    records = load_events(path)

    flags = [(r.suitable_for_young, r.suitable_for_adult, r.suitable_for_senior) for r in records]
    assert flags == [(True, False, True), (False, True, False)]
    assert all(type(flag) is bool for row in flags for flag in row)
