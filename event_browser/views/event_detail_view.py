# event_browser/views/event_detail_view.py

from __future__ import annotations

import math
from typing import Any, Dict, List, Tuple

import plotly.graph_objects as go

from event_browser.core.record import COMPONENT_FIELDS
from event_browser.views.base_view import BaseView
from event_browser.views.formatting import format_label

RADAR_COLOUR = "rgba(54, 162, 235, 1)"
RADAR_FILL = "rgba(54, 162, 235, 0.2)"


def _fixed(value: float, digits: int) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "n/a"
    return f"{value:.{digits}f}"


class EventDetailView(BaseView):
    """
    Full detail for one event.

    Shows:
      - overall score out of 100
      - categorical characteristics (cost, complexity, ...)
      - the seven component scores as percentages
      - location details
      - radar chart of the component scores
    """

    id = "event_detail"
    label = "Event Details"

    def compute_data(self) -> Dict[str, Any]:
        r = self.record

        characteristics: List[Tuple[str, str]] = [
            ("Month", r.month),
            ("Cost", format_label(r.cost)),
            ("Complexity", format_label(r.complexity)),
            ("Activity Level", format_label(r.activity_level)),
            ("Noise Level", format_label(r.noise_level)),
            ("Type", format_label(r.cultural_type)),
            ("Scope", format_label(r.audience_scope)),
        ]

        components: List[Tuple[str, float]] = [
            (detail_label, value * 100)
            for (_, detail_label, _), value in zip(COMPONENT_FIELDS, r.component_scores())
        ]

        location: List[Tuple[str, str]] = [
            ("Nearest Bus Stop", f"{_fixed(r.nearest_bus_stop_km, 3)} km"),
            (
                "Nearest Parking",
                f"{r.nearest_parking_lot_name} ({_fixed(r.nearest_parking_lot_km, 3)} km)",
            ),
            ("Coordinates", f"{_fixed(r.latitude, 6)}, {_fixed(r.longitude, 6)}"),
        ]

        return {
            "event_id": r.event_id,
            "name": r.name,
            "score": _fixed(r.inclusivity_score, 2),
            "characteristics": characteristics,
            "components": components,
            "radar_labels": [radar_label for _, _, radar_label in COMPONENT_FIELDS],
            "location": location,
        }

    def render_figure(self, data: Dict[str, Any]) -> go.Figure:
        if not data:
            return self.empty_figure("No event selected")

        labels = list(data["radar_labels"])
        values = [pct for _, pct in data["components"]]

        # Repeat the first point so the polygon closes
        fig = go.Figure(
            go.Scatterpolar(
                r=values + values[:1],
                theta=labels + labels[:1],
                fill="toself",
                fillcolor=RADAR_FILL,
                line=dict(color=RADAR_COLOUR, width=2),
                marker=dict(color=RADAR_COLOUR, line=dict(color="#fff", width=1)),
                name="Inclusivity Factors",
            )
        )

        fig.update_layout(
            polar=dict(
                radialaxis=dict(range=[0, 100], dtick=20, visible=True),
            ),
            showlegend=False,
            margin=dict(l=40, r=40, t=40, b=40),
            height=380,
        )
        return fig
