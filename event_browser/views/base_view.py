from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Tuple

import plotly.graph_objs as go

from event_browser.core.record import EventRecord


class BaseView(ABC):
    """
    A read-only presentation of a single EventRecord.

    Subclasses split the work in two: compute_data turns the record into
    plain display values (strings, percentages, labels) and render_figure
    turns those values into a Plotly figure. Neither step touches the
    dashboard session.
    """

    id: str = ""
    label: str = ""

    def __init__(self, record: EventRecord):
        self.record = record

    @abstractmethod
    def compute_data(self) -> Any:
        """Display values for self.record."""

    @abstractmethod
    def render_figure(self, data: Any) -> go.Figure:
        """Figure for the values returned by compute_data."""

    def render(self) -> Tuple[Any, go.Figure]:
        data = self.compute_data()
        return data, self.render_figure(data)

    @staticmethod
    def empty_figure(message: str) -> go.Figure:
        """Blank figure with the message as its title and no axes."""
        fig = go.Figure()
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
        )
        return fig
