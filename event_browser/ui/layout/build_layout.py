from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from event_browser.ui.ids import IDs
from event_browser.ui.layout.build_detail_modal import build_detail_modal
from event_browser.ui.layout.build_filter_panel import build_filter_panel
from event_browser.ui.layout.build_navbar import build_navbar
from event_browser.ui.layout.build_results_panel import build_results_panel

if TYPE_CHECKING:
    from event_browser.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    records = ctx.dataset_service.records()

    return dbc.Container(
        fluid=True,
        className="evb-root",
        children=[
            build_navbar(ctx.global_config, len(records)),

            # View state lives for the page only, never across sessions
            dcc.Store(id=IDs.Store.SESSION_STATE, storage_type="memory"),

            dbc.Row(
                [
                    dbc.Col(build_filter_panel(records), md=3, className="mt-3"),
                    dbc.Col(build_results_panel(), md=9, className="mt-3"),
                ],
                className="gx-3",
            ),
            build_detail_modal(),
        ],
    )
