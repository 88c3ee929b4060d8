from __future__ import annotations

from event_browser.core.filter_engine import apply_filters, matches
from event_browser.core.filter_state import FilterState
from event_browser.core.record import EventRecord


def _make_record(event_id: str, **overrides) -> EventRecord:
    fields = dict(
        event_id=event_id,
        name=f"Event {event_id}",
        month="May",
        cost="free",
        activity_level="low",
        inclusivity_score=50.0,
    )
    fields.update(overrides)
    return EventRecord(**fields)


def _make_records():
    return [
        _make_record("1", name="Harbour Jazz Night", month="July", cost="paid", inclusivity_score=82.0,
                     suitable_for_adult=True),
        _make_record("2", name="Kids Science Fair", month="March", inclusivity_score=64.5,
                     suitable_for_young=True),
        _make_record("3", name="Seniors Tea Dance", month="July", activity_level="moderate",
                     inclusivity_score=40.0, suitable_for_senior=True),
        _make_record("4", name="Open Air Cinema", month="August", inclusivity_score=12.0),
        _make_record("5", name="Family JAZZ picnic", month="July", inclusivity_score=91.0,
                     suitable_for_young=True, suitable_for_senior=True),
    ]


def _ids(records):
    return [r.event_id for r in records]


def test_default_state_keeps_everything_in_order():
    records = _make_records()
    assert apply_filters(records, FilterState()) == records


def test_search_is_case_insensitive_substring_on_name():
    records = _make_records()
    state = FilterState(search="jAzZ")
    assert _ids(apply_filters(records, state)) == ["1", "5"]


def test_categorical_filters_are_exact_and_case_sensitive():
    records = _make_records()

    assert _ids(apply_filters(records, FilterState(month="July"))) == ["1", "3", "5"]
    assert _ids(apply_filters(records, FilterState(month="july"))) == []
    assert _ids(apply_filters(records, FilterState(cost="paid"))) == ["1"]
    assert _ids(apply_filters(records, FilterState(activity_level="moderate"))) == ["3"]


def test_min_score_is_inclusive():
    records = _make_records()
    assert _ids(apply_filters(records, FilterState(min_score=64.5))) == ["1", "2", "5"]
    assert _ids(apply_filters(records, FilterState(min_score=0))) == ["1", "2", "3", "4", "5"]


def test_unchecking_bracket_removes_events_suitable_for_it():
    records = _make_records()
    state = FilterState(young=False)
    assert _ids(apply_filters(records, state)) == ["1", "3", "4"]


def test_event_suitable_for_no_bracket_survives_any_checkbox_state():
    record = _make_record("x")
    state = FilterState(young=False, adult=False, senior=False)
    assert matches(record, state)


def test_young_and_senior_event_excluded_when_only_young_checked():
    record = _make_record("x", suitable_for_young=True, suitable_for_senior=True)
    state = FilterState(young=True, adult=False, senior=False)
    assert not matches(record, state)


def test_predicates_combine_conjunctively():
    records = _make_records()
    state = FilterState(search="jazz", month="July", min_score=85)
    assert _ids(apply_filters(records, state)) == ["5"]


def test_filtering_is_a_subset_and_idempotent():
    records = _make_records()
    state = FilterState(search="a", senior=False, min_score=30)

    once = apply_filters(records, state)
    twice = apply_filters(once, state)

    assert set(_ids(once)) <= set(_ids(records))
    assert once == twice
    assert once == apply_filters(records, state)


def test_membership_is_decided_per_record():
    records = _make_records()
    state = FilterState(month="July", young=False)

    full = _ids(apply_filters(records, state))
    one_by_one = [r.event_id for r in records if apply_filters([r], state)]
    reversed_run = _ids(apply_filters(list(reversed(records)), state))

    assert full == one_by_one
    assert sorted(full) == sorted(reversed_run)
