from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output

from event_browser.ui.callbacks.callbacks_utils import restore_session
from event_browser.ui.ids import IDs
from event_browser.ui.layout.build_results_panel import (
    build_event_cards,
    build_pagination,
    empty_message,
    error_message,
)

if TYPE_CHECKING:
    from event_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Stored session -> cards, status line, pagination bar
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.EVENTS_CONTAINER, "children"),
        Output(IDs.Control.RESULT_COUNT, "children"),
        Output(IDs.Control.PAGINATION, "children"),
        Input(IDs.Store.SESSION_STATE, "data"),
    )
    def render_events(stored: Optional[dict[str, Any]]):
        result = ctx.dataset_service.load()
        if not result.ok:
            return error_message(result.error or "unknown error"), "", []

        view = restore_session(ctx, stored).view()

        logger.debug(
            "render_events",
            extra={
                "filtered": view.filtered_count,
                "page": view.current_page,
                "total_pages": view.total_pages,
            },
        )

        if view.is_empty:
            return empty_message(), view.status_text, []

        return (
            build_event_cards(view.records),
            view.status_text,
            build_pagination(view.page_links),
        )
