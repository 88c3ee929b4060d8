from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output
from dash.exceptions import PreventUpdate

from event_browser.ui.ids import IDs
from event_browser.ui.layout.build_detail_modal import build_detail_body
from event_browser.views.event_detail_view import EventDetailView

if TYPE_CHECKING:
    from event_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_detail_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Card click -> detail modal
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DETAIL_MODAL, "is_open"),
        Output(IDs.Control.DETAIL_TITLE, "children"),
        Output(IDs.Control.DETAIL_BODY, "children"),
        Output(IDs.Control.RADAR_GRAPH, "figure"),
        Input({"type": IDs.Pattern.EVENT_CARD, "index": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def show_event_details(_clicks):
        trigger = dash.ctx.triggered_id
        # Freshly rendered cards arrive with n_clicks=0
        if not isinstance(trigger, dict) or not dash.ctx.triggered[0]["value"]:
            raise PreventUpdate

        record = ctx.record_by_id(trigger["index"])
        if record is None:
            logger.warning("Clicked event not found", extra={"event_id": trigger["index"]})
            raise PreventUpdate

        data, figure = EventDetailView(record).render()
        return True, data["name"], build_detail_body(data), figure
