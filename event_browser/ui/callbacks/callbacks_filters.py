from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence, Tuple, Union

import dash
from dash import ALL, Input, Output, State
from dash.exceptions import PreventUpdate

from event_browser.core.filter_state import FilterState
from event_browser.core.session import DashboardSession
from event_browser.ui.callbacks.callbacks_utils import restore_session
from event_browser.ui.helpers import brackets_from_checklist, checked_brackets
from event_browser.ui.ids import IDs, parse_page_link

if TYPE_CHECKING:
    from event_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)

CATEGORY_CONTROLS = {
    IDs.Control.MONTH_SELECT: "month",
    IDs.Control.COST_SELECT: "cost",
    IDs.Control.ACTIVITY_SELECT: "activity_level",
}


@dataclass(frozen=True)
class ControlValues:
    """Current values of the filter sidebar controls, as Dash sends them."""

    search: Optional[str] = None
    month: Optional[str] = None
    cost: Optional[str] = None
    activity_level: Optional[str] = None
    min_score: Optional[float] = None
    brackets: Optional[Sequence[str]] = None
    sort_key: Optional[str] = None

    def to_filters(self) -> FilterState:
        return FilterState(
            search=self.search or "",
            month=self.month or "",
            cost=self.cost or "",
            activity_level=self.activity_level or "",
            min_score=float(self.min_score or 0),
            **brackets_from_checklist(self.brackets),
        )


def apply_control_change(
    session: DashboardSession,
    trigger: Union[str, Dict[str, Any], None],
    trigger_value: Any,
    stored: Optional[Dict[str, Any]],
    controls: ControlValues,
) -> Tuple[Any, ...]:
    """
    Run the session command for one control change.

    Returns (snapshot, search, month, cost, activity, min_score, brackets);
    control values are dash.no_update except after a reset. Raises
    PreventUpdate when nothing should change.
    """
    unchanged = (dash.no_update,) * 6

    if trigger is None:
        # Re-fired because new page links entered the layout
        if stored is not None:
            raise PreventUpdate

        # Initial call: adopt whatever the controls currently show
        filters = controls.to_filters()
        if filters != session.filters:
            session.set_filters(filters)
        session.set_sort(controls.sort_key)
        return (session.snapshot(), *unchanged)

    if isinstance(trigger, dict) and trigger.get("type") == IDs.Pattern.PAGE_LINK:
        # New links are created with n_clicks=0 whenever the bar re-renders
        if not trigger_value:
            raise PreventUpdate
        session.go_to_page(parse_page_link(trigger))
    elif trigger == IDs.Control.RESET_BTN:
        session.reset()
        defaults = session.filters
        logger.info("Filters reset")
        return (
            session.snapshot(),
            defaults.search,
            None,
            None,
            None,
            defaults.min_score,
            checked_brackets(defaults),
        )
    elif trigger == IDs.Control.SEARCH_BOX:
        session.set_search(controls.search)
    elif trigger in CATEGORY_CONTROLS:
        field_name = CATEGORY_CONTROLS[trigger]
        session.set_filter(field_name, getattr(controls, field_name))
    elif trigger == IDs.Control.SCORE_SLIDER:
        session.set_min_score(controls.min_score)
    elif trigger == IDs.Control.AGE_CHECKLIST:
        session.set_filters(
            session.filters.with_changes(**brackets_from_checklist(controls.brackets))
        )
    elif trigger == IDs.Control.SORT_SELECT:
        session.set_sort(controls.sort_key)
    else:
        raise PreventUpdate

    logger.debug(
        "Session updated",
        extra={"trigger": str(trigger), "page": session.page},
    )
    return (session.snapshot(), *unchanged)


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Slider label
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SCORE_VALUE, "children"),
        Input(IDs.Control.SCORE_SLIDER, "value"),
    )
    def update_score_label(value):
        return str(int(value or 0))

    # ---------------------------------------------------------
    # User input -> session command -> stored snapshot
    #
    # Reset writes the control values back, so the controls are both
    # inputs and outputs of this one callback.
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SESSION_STATE, "data"),
        Output(IDs.Control.SEARCH_BOX, "value"),
        Output(IDs.Control.MONTH_SELECT, "value"),
        Output(IDs.Control.COST_SELECT, "value"),
        Output(IDs.Control.ACTIVITY_SELECT, "value"),
        Output(IDs.Control.SCORE_SLIDER, "value"),
        Output(IDs.Control.AGE_CHECKLIST, "value"),
        Input(IDs.Control.SEARCH_BOX, "value"),
        Input(IDs.Control.MONTH_SELECT, "value"),
        Input(IDs.Control.COST_SELECT, "value"),
        Input(IDs.Control.ACTIVITY_SELECT, "value"),
        Input(IDs.Control.SCORE_SLIDER, "value"),
        Input(IDs.Control.AGE_CHECKLIST, "value"),
        Input(IDs.Control.SORT_SELECT, "value"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        Input({"type": IDs.Pattern.PAGE_LINK, "index": ALL}, "n_clicks"),
        State(IDs.Store.SESSION_STATE, "data"),
    )
    def handle_controls(
        search, month, cost, activity, min_score, brackets, sort_key,
        _reset_clicks, _page_clicks, stored,
    ):
        if not ctx.dataset_service.load().ok:
            raise PreventUpdate

        trigger = dash.ctx.triggered_id
        trigger_value = dash.ctx.triggered[0]["value"] if trigger is not None else None
        controls = ControlValues(
            search=search,
            month=month,
            cost=cost,
            activity_level=activity,
            min_score=min_score,
            brackets=brackets,
            sort_key=sort_key,
        )
        return apply_control_change(
            restore_session(ctx, stored), trigger, trigger_value, stored, controls
        )
