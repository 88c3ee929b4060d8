from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from event_browser.core.filter_state import FilterState
from event_browser.core.record import EventRecord
from event_browser.core.sort_engine import DEFAULT_SORT
from event_browser.ui.helpers import (
    bracket_options,
    category_options,
    checked_brackets,
    sort_options,
)
from event_browser.ui.ids import IDs


def _dropdown(label: str, component_id: str, options: list, placeholder: str) -> html.Div:
    return html.Div(
        [
            html.Label(label, className="form-label"),
            dcc.Dropdown(
                id=component_id,
                options=options,
                placeholder=placeholder,
                className="mb-3",
            ),
        ]
    )


def build_filter_panel(records: Sequence[EventRecord]) -> dbc.Card:
    defaults = FilterState()

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Label("Search", className="form-label"),
                    dbc.Input(
                        id=IDs.Control.SEARCH_BOX,
                        type="text",
                        placeholder="Search event names...",
                        value=defaults.search,
                        debounce=False,
                        className="mb-3",
                    ),
                    _dropdown(
                        "Month",
                        IDs.Control.MONTH_SELECT,
                        category_options(records, "month", pretty=False),
                        "All months",
                    ),
                    _dropdown(
                        "Cost",
                        IDs.Control.COST_SELECT,
                        category_options(records, "cost"),
                        "Any cost",
                    ),
                    _dropdown(
                        "Activity level",
                        IDs.Control.ACTIVITY_SELECT,
                        category_options(records, "activity_level"),
                        "Any activity level",
                    ),
                    html.Label(
                        [
                            "Minimum score: ",
                            html.Span(str(int(defaults.min_score)), id=IDs.Control.SCORE_VALUE),
                        ],
                        className="form-label",
                    ),
                    dcc.Slider(
                        id=IDs.Control.SCORE_SLIDER,
                        min=0,
                        max=100,
                        step=1,
                        value=defaults.min_score,
                        marks={v: str(v) for v in range(0, 101, 20)},
                        className="mb-3",
                    ),
                    html.Label("Suitable for", className="form-label"),
                    dbc.Checklist(
                        id=IDs.Control.AGE_CHECKLIST,
                        options=bracket_options(),
                        value=checked_brackets(defaults),
                        switch=True,
                        className="mb-3",
                    ),
                    html.Hr(),
                    html.Label("Sort by", className="form-label"),
                    dcc.Dropdown(
                        id=IDs.Control.SORT_SELECT,
                        options=sort_options(),
                        value=DEFAULT_SORT.value,
                        clearable=False,
                        className="mb-3",
                    ),
                    dbc.Button(
                        "Reset filters",
                        id=IDs.Control.RESET_BTN,
                        color="secondary",
                        outline=True,
                        size="sm",
                        className="w-100",
                    ),
                ]
            ),
        ],
        className="evb-sidebar",
    )
