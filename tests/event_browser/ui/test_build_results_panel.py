from __future__ import annotations

from dash import html

from event_browser.core.pagination import build_page_links
from event_browser.core.record import EventRecord
from event_browser.ui.ids import IDs
from event_browser.ui.layout.build_results_panel import build_event_card, build_pagination


def _items(nav):
    return nav.children.children


def test_single_page_renders_no_pagination():
    assert build_pagination(build_page_links(1, 1)) == []


def test_pagination_marks_active_and_disabled_items():
    [nav] = build_pagination(build_page_links(1, 3))
    items = _items(nav)

    prev, first, second, third, nxt = items
    assert "disabled" in prev.className
    assert isinstance(prev.children, html.Span)

    assert "active" in first.className
    assert first.children.id == {"type": IDs.Pattern.PAGE_LINK, "index": "page:1"}

    assert "disabled" not in nxt.className
    assert nxt.children.id == {"type": IDs.Pattern.PAGE_LINK, "index": "next:2"}


def test_pagination_ids_are_unique():
    [nav] = build_pagination(build_page_links(5, 20))
    ids = [
        str(item.children.id)
        for item in _items(nav)
        if isinstance(item.children, html.A)
    ]
    assert len(ids) == len(set(ids))


def test_event_card_is_clickable_by_event_id():
    record = EventRecord(
        event_id="EV7",
        name="Night Market",
        month="June",
        inclusivity_score=81.25,
        suitable_for_young=True,
    )

    col = build_event_card(record)
    clickable = col.children

    assert clickable.id == {"type": IDs.Pattern.EVENT_CARD, "index": "EV7"}
    assert clickable.n_clicks == 0
