from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from event_browser.config.model import GlobalConfig


def build_navbar(global_config: GlobalConfig, n_events: int) -> dbc.Navbar:
    title = getattr(global_config, "ui_title", "Inclusive Events Browser")
    subtitle = getattr(global_config, "subtitle", "")

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(subtitle, className="text-muted", id="navbar-subtitle"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    f"{n_events} events",
                    className="ms-auto navbar-event-total text-muted",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm evb-navbar",
    )
