"""
src/layout/components/stress_panel.py
─────────────────────────────────────
Ocean stress panel: numeric value, proportional bar and severity label.
"""
from __future__ import annotations

from dash import html

from src.analytics.stress_index import bar_width_pct
from src.data.models import StressSnapshot

MUTED = "#84a5b8"


def stress_panel(snapshot: StressSnapshot) -> html.Div:
    """Stress value (one decimal), progress bar (stress × 10 %) and tier label."""
    color = snapshot.tier_color
    return html.Div(
        [
            html.Div("Ocean Stress Index", style={"fontSize": ".68rem", "color": MUTED, "textTransform": "uppercase", "letterSpacing": ".06em"}),
            html.Div(
                [
                    html.Span(snapshot.stress_label, id="stress-value", style={"fontSize": "2rem", "fontWeight": "700", "color": color}),
                    html.Span(" / 10", style={"fontSize": ".8rem", "color": MUTED}),
                ]
            ),
            html.Div(
                html.Div(
                    id="danger-progress",
                    style={
                        "width": f"{bar_width_pct(snapshot.stress)}%",
                        "height": "100%",
                        "backgroundColor": color,
                        "borderRadius": "3px",
                        "transition": "width .6s ease",
                    },
                ),
                style={"height": "6px", "backgroundColor": "rgba(255,255,255,0.08)", "borderRadius": "3px", "margin": "6px 0"},
            ),
            html.Div(snapshot.tier.value, id="stress-status", style={"fontSize": ".8rem", "fontWeight": "700", "color": color, "letterSpacing": ".08em"}),
        ]
    )
