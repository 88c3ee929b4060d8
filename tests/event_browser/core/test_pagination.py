from __future__ import annotations

import math

import pytest

from event_browser.core.pagination import (
    MAX_VISIBLE_PAGES,
    PAGE_SIZE,
    build_page_links,
    clamp_page,
    page_bounds,
    page_slice,
    total_pages,
    visible_window,
)


@pytest.mark.parametrize("count", [0, 1, 23, 24, 25, 48, 49, 30, 1000])
def test_total_pages_is_ceil_with_minimum_one(count):
    assert total_pages(count) == max(1, math.ceil(count / PAGE_SIZE))
    assert total_pages(count) >= 1


def test_clamp_page():
    assert clamp_page(0, 3) == 1
    assert clamp_page(-4, 3) == 1
    assert clamp_page(2, 3) == 2
    assert clamp_page(9, 3) == 3
    assert clamp_page(5, 0) == 1


def test_page_bounds_and_slice_for_thirty_items():
    items = list(range(1, 31))

    assert page_bounds(1, 30) == (0, 24)
    assert page_bounds(2, 30) == (24, 30)
    assert page_slice(items, 1) == list(range(1, 25))
    assert page_slice(items, 2) == list(range(25, 31))


def test_page_slice_of_empty_collection():
    assert page_slice([], 1) == []
    assert page_bounds(1, 0) == (0, 0)


def test_single_page_has_no_links():
    assert build_page_links(1, 1) == []
    assert build_page_links(1, 0) == []


def _numbers(links):
    return [link.label for link in links if link.kind in ("page", "ellipsis")]


def test_links_for_few_pages_show_every_page():
    links = build_page_links(2, 3)

    assert _numbers(links) == ["1", "2", "3"]
    assert links[0].kind == "prev" and not links[0].disabled and links[0].page == 1
    assert links[-1].kind == "next" and not links[-1].disabled and links[-1].page == 3
    assert [link.label for link in links if link.active] == ["2"]


def test_prev_disabled_on_first_and_next_disabled_on_last():
    first = build_page_links(1, 5)
    last = build_page_links(5, 5)

    assert first[0].disabled and not first[-1].disabled
    assert last[-1].disabled and not last[0].disabled


def test_window_in_the_middle_has_both_ellipses():
    links = build_page_links(10, 20)
    assert _numbers(links) == ["1", "...", "7", "8", "9", "10", "11", "12", "13", "...", "20"]


def test_window_clamped_at_start():
    links = build_page_links(1, 20)
    assert _numbers(links) == ["1", "2", "3", "4", "5", "6", "7", "...", "20"]


def test_window_clamped_at_end():
    links = build_page_links(20, 20)
    assert _numbers(links) == ["1", "...", "14", "15", "16", "17", "18", "19", "20"]


def test_no_ellipsis_when_gap_is_a_single_link():
    links = build_page_links(5, 9)
    assert _numbers(links) == ["1", "2", "3", "4", "5", "6", "7", "8", "9"]

    links = build_page_links(4, 8)
    assert _numbers(links) == ["1", "2", "3", "4", "5", "6", "7", "8"]


@pytest.mark.parametrize("n_pages", [2, 3, 7, 8, 15, 40])
def test_window_properties_hold_for_every_page(n_pages):
    for current in range(1, n_pages + 1):
        start, end = visible_window(current, n_pages)

        assert end - start + 1 <= MAX_VISIBLE_PAGES
        assert start <= current <= end
        assert 1 <= start and end <= n_pages

        links = build_page_links(current, n_pages)
        active = [link for link in links if link.active]
        assert len(active) == 1 and active[0].page == current
        assert all(link.page is None for link in links if link.kind == "ellipsis")
