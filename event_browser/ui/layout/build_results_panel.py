from __future__ import annotations

import math
from typing import Iterable, List

import dash_bootstrap_components as dbc
from dash import html

from event_browser.core.pagination import PageLink
from event_browser.core.record import BRACKETS, EventRecord
from event_browser.ui.helpers import BRACKET_LABELS
from event_browser.ui.ids import IDs, event_card_id, page_link_id
from event_browser.views.formatting import format_label, score_class

# (attribute, tooltip, bar colour) for the small bars on each card
KEY_FACTORS = (
    ("bus_proximity_score", "Accessibility", "success"),
    ("cost_score", "Cost Score", "info"),
    ("age_diversity_score", "Age Diversity", "warning"),
)


def _percent(score: float) -> float:
    return 0.0 if math.isnan(score) else score * 100


def loading_message() -> html.Div:
    return html.Div("Loading events...", className="col-12 loading")


def error_message(message: str) -> dbc.Alert:
    return dbc.Alert(f"Error loading data: {message}", color="danger", className="col-12")


def empty_message() -> dbc.Alert:
    return dbc.Alert("No events match your filters.", color="info", className="col-12")


def build_event_card(record: EventRecord) -> dbc.Col:
    suitability = [
        dbc.Badge(BRACKET_LABELS[b], color="success", className="age-badge me-1")
        for b in BRACKETS
        if record.suitable_for(b)
    ]

    factors = [
        html.Div(
            dbc.Progress(
                value=_percent(getattr(record, attr)),
                color=colour,
                style={"height": "8px"},
            ),
            title=title,
            className="mb-1",
        )
        for attr, title, colour in KEY_FACTORS
    ]

    return dbc.Col(
        html.Div(
            dbc.Card(
                dbc.CardBody(
                    [
                        html.Div(
                            [
                                html.H5(record.name, className="card-title"),
                                html.Span(
                                    f"{record.inclusivity_score:.1f}",
                                    className=f"badge score-badge {score_class(record.inclusivity_score)}",
                                ),
                            ],
                            className="d-flex justify-content-between align-items-start mb-3",
                        ),
                        html.P(html.Small(record.month), className="text-muted mb-2"),
                        html.Div(
                            [
                                dbc.Badge(format_label(record.cost), color="primary", pill=True, className="me-1"),
                                dbc.Badge(format_label(record.activity_level), color="info", pill=True, className="me-1"),
                                dbc.Badge(format_label(record.complexity), color="secondary", pill=True),
                            ],
                            className="mb-3",
                        ),
                        html.Div(
                            [html.Strong("Suitable for:"), html.Br(), *suitability],
                            className="mb-2",
                        ),
                        html.Div(
                            [html.Small(html.Strong("Key Factors:")), *factors],
                            className="mt-3",
                        ),
                    ]
                ),
                className="event-card h-100",
            ),
            id=event_card_id(record.event_id),
            n_clicks=0,
            className="h-100",
        ),
        md=6,
        lg=4,
        className="mb-4",
    )


def build_event_cards(records: Iterable[EventRecord]) -> List[dbc.Col]:
    return [build_event_card(r) for r in records]


def _page_item(link: PageLink) -> html.Li:
    classes = ["page-item"]
    if link.active:
        classes.append("active")
    if link.disabled:
        classes.append("disabled")

    if link.disabled or link.page is None:
        inner = html.Span(link.label, className="page-link")
    else:
        inner = html.A(
            link.label,
            id=page_link_id(link.kind, link.page),
            className="page-link",
            n_clicks=0,
        )
    return html.Li(inner, className=" ".join(classes))


def build_pagination(links: Iterable[PageLink]) -> list:
    """Single page (no links) renders nothing."""
    links = list(links)
    if not links:
        return []
    return [
        html.Nav(
            html.Ul(
                [_page_item(link) for link in links],
                className="pagination justify-content-center",
            )
        )
    ]


def build_results_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Strong("Events"),
                        html.Span(id=IDs.Control.RESULT_COUNT, className="ms-auto text-muted"),
                    ],
                    className="d-flex align-items-center",
                ),
                className="p-2",
            ),
            dbc.CardBody(
                [
                    dbc.Row(
                        loading_message(),
                        id=IDs.Control.EVENTS_CONTAINER,
                    ),
                    html.Div(id=IDs.Control.PAGINATION, className="mt-2"),
                ],
                className="evb-main-body",
            ),
        ],
        className="evb-maincard",
    )
