"""
src/layout/components/stress_chart.py
──────────────────────────────────────
Single-dataset line chart for the 8-point stress display series.
"""
from __future__ import annotations

import plotly.graph_objects as go

from src.analytics.stress_index import CHART_LABELS

CARD_BG = "#0b1a24"
MUTED = "#84a5b8"
ACCENT = "#00f3ff"


def build_stress_chart(series: list[float], height: int = 160) -> go.Figure:
    fig = go.Figure()
    fig.add_scatter(
        x=CHART_LABELS,
        y=series,
        mode="lines",
        line={"color": ACCENT, "width": 2, "shape": "spline", "smoothing": 0.8},
        fill="tozeroy",
        fillcolor="rgba(0, 243, 255, 0.1)",
        name="Wave Energy",
        hovertemplate="%{x}: %{y:.1f}<extra></extra>",
    )
    fig.update_layout(
        paper_bgcolor=CARD_BG,
        plot_bgcolor=CARD_BG,
        margin={"l": 6, "r": 6, "t": 6, "b": 20},
        height=height,
        showlegend=False,
        xaxis={"showgrid": False, "tickfont": {"color": MUTED, "size": 8}},
        yaxis={"visible": False},
    )
    return fig
