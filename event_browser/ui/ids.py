from __future__ import annotations

__all__ = ["IDs", "page_link_id", "parse_page_link", "event_card_id"]


class IDs:
    class Store:
        SESSION_STATE = "session-state"

    class Control:
        # Filters
        SEARCH_BOX = "search-box"
        MONTH_SELECT = "month-select"
        COST_SELECT = "cost-select"
        ACTIVITY_SELECT = "activity-select"
        SCORE_SLIDER = "score-slider"
        SCORE_VALUE = "score-value"
        AGE_CHECKLIST = "age-checklist"
        SORT_SELECT = "sort-select"
        RESET_BTN = "reset-filters-btn"

        # Results
        RESULT_COUNT = "result-count"
        EVENTS_CONTAINER = "events-container"
        PAGINATION = "pagination-controls"

        # Detail modal
        DETAIL_MODAL = "event-modal"
        DETAIL_TITLE = "modal-event-name"
        DETAIL_BODY = "modal-event-details"
        RADAR_GRAPH = "radar-chart"

    class Pattern:
        # pattern-matching "type" strings
        PAGE_LINK = "page-link"
        EVENT_CARD = "event-card"


def page_link_id(role: str, page: int) -> dict:
    # role keeps "Next" and the numbered link for the same page distinct
    return {"type": IDs.Pattern.PAGE_LINK, "index": f"{role}:{page}"}


def parse_page_link(component_id: dict) -> int:
    return int(str(component_id["index"]).rsplit(":", 1)[1])


def event_card_id(event_id: str) -> dict:
    return {"type": IDs.Pattern.EVENT_CARD, "index": event_id}
