from __future__ import annotations

from typing import Any, Dict

import dash_bootstrap_components as dbc
from dash import dcc, html

from event_browser.ui.ids import IDs


def build_detail_body(data: Dict[str, Any]) -> list:
    """Children for the modal body from EventDetailView.compute_data()."""
    return [
        html.H6("Overall Inclusivity Score"),
        html.H2(f"{data['score']} / 100", className="text-primary"),
        html.Hr(),
        html.H6("Event Characteristics"),
        html.Ul(
            [html.Li([html.Strong(f"{label}: "), value]) for label, value in data["characteristics"]],
            className="list-unstyled",
        ),
        html.Hr(),
        html.H6("Score Components"),
        html.Div(
            [
                html.Div(
                    [
                        html.Span(f"{label}:"),
                        html.Span(f"{pct:.1f}%", className="text-primary fw-bold"),
                    ],
                    className="factor-item d-flex justify-content-between",
                )
                for label, pct in data["components"]
            ]
        ),
        html.Hr(),
        html.H6("Location Details"),
        html.Ul(
            [html.Li([html.Strong(f"{label}: "), value]) for label, value in data["location"]],
            className="list-unstyled",
        ),
    ]


def build_detail_modal() -> dbc.Modal:
    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle(id=IDs.Control.DETAIL_TITLE)),
            dbc.ModalBody(
                dbc.Row(
                    [
                        dbc.Col(html.Div(id=IDs.Control.DETAIL_BODY), md=6),
                        dbc.Col(
                            dcc.Graph(
                                id=IDs.Control.RADAR_GRAPH,
                                config={"displayModeBar": False},
                            ),
                            md=6,
                        ),
                    ]
                )
            ),
        ],
        id=IDs.Control.DETAIL_MODAL,
        is_open=False,
        size="xl",
        scrollable=True,
    )
