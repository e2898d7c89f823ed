"""
src/callbacks/dashboard.py
───────────────────────────
Dashboard callbacks: render the latest engine snapshot, the visible map
layers, the status line and the clock.

Collaborators are injected through `register`; nothing here owns state.
"""
from __future__ import annotations

from datetime import datetime

from dash import Input, Output, html

from src.analytics.engine import AggregationEngine
from src.layers.registry import LayerRegistry
from src.layout.components.alert_feed import alert_feed
from src.layout.components.kpi_card import statistics_grid
from src.layout.components.map_surface import build_map_figure
from src.layout.components.stress_chart import build_stress_chart
from src.layout.components.stress_panel import stress_panel
from src.orchestrator import ObservationCycle

_STATUS_COLORS = {
    "cyan": "#00f3ff",
    "blue": "#66ccff",
    "green": "#39ff14",
    "red": "#ff3333",
}


def register(app, engine: AggregationEngine, registry: LayerRegistry, cycle: ObservationCycle) -> None:
    """Register dashboard callbacks against the given collaborators."""

    # ── Analytics panel ───────────────────────────────────────────────────────
    @app.callback(
        [
            Output("stress-panel", "children"),
            Output("stress-statistics", "children"),
            Output("ocean-chart", "figure"),
            Output("alert-feed", "children"),
        ],
        Input("interval-live", "n_intervals"),
    )
    def update_analytics(n_intervals: int):
        snapshot = engine.latest
        return (
            stress_panel(snapshot),
            statistics_grid(snapshot.statistics),
            build_stress_chart(snapshot.chart_series),
            alert_feed(engine.feed.entries()),
        )

    # ── Map ───────────────────────────────────────────────────────────────────
    @app.callback(
        Output("ocean-map", "figure"),
        Input("layer-toggles", "value"),
        Input("interval-live", "n_intervals"),
    )
    def update_map(visible: list[str] | None, n_intervals: int):
        # Toggling only changes visibility; layers are rebuilt by the cycle
        registry.set_visible(visible or [])
        return build_map_figure(registry.visible_layers())

    # ── Status line ───────────────────────────────────────────────────────────
    @app.callback(
        [
            Output("system-status", "children"),
            Output("system-status", "style"),
            Output("system-info", "children"),
            Output("last-update", "children"),
        ],
        Input("interval-live", "n_intervals"),
    )
    def update_status(n_intervals: int):
        status = cycle.status
        style = {"fontSize": ".75rem", "fontWeight": "700", "color": _STATUS_COLORS.get(status.color, status.color)}
        info = [html.Div(f"🛰️ {status.satellite_link}")]
        if status.thermocline:
            info.append(html.Div(f"Thermocline: {status.thermocline}"))
        last = status.last_update.astimezone().strftime("%H:%M:%S") if status.last_update else "--:--:--"
        return status.text, style, info, last

    # ── Clock ─────────────────────────────────────────────────────────────────
    @app.callback(
        Output("clock", "children"),
        Input("interval-clock", "n_intervals"),
    )
    def update_clock(n_intervals: int) -> str:
        return datetime.now().strftime("%H:%M:%S")
