from __future__ import annotations

from event_browser.services.dataset_service import EventDatasetService, LoadStatus


def _write_csv(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text(
        "event_id,name,inclusivity_score_100,suitable_for_young\n"
        "EV1,Harbour Festival,70,True\n"
        ",Nameless,10,False\n"
        "EV2,Night Market,55,1\n"
    )
    return path


def test_service_starts_loading_then_ready(tmp_path):
    service = EventDatasetService(_write_csv(tmp_path))
    assert service.status is LoadStatus.LOADING

    result = service.load()

    assert result.ok
    assert service.status is LoadStatus.READY
    assert [r.event_id for r in result.records] == ["EV1", "EV2"]
    assert result.records[1].suitable_for_young is True


def test_service_caches_the_first_outcome(tmp_path):
    path = _write_csv(tmp_path)
    service = EventDatasetService(path)
    first = service.load()

    path.unlink()

    assert service.load() is first
    assert service.records() == first.records


def test_failed_load_is_an_error_state_without_records(tmp_path):
    service = EventDatasetService(tmp_path / "missing.csv")

    result = service.load()

    assert result.status is LoadStatus.ERROR
    assert not result.ok
    assert result.records == ()
    assert "not found" in result.error
    assert service.records() == ()
