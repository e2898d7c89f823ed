"""
src/layout/components/kpi_card.py
──────────────────────────────────
Compact statistic cards for the aggregation summary.
"""
from dash import html

from src.data.models import Statistics

MUTED = "#84a5b8"


def mini_kpi(label: str, value: str, color: str = "#c9e6f5") -> html.Div:
    return html.Div([
        html.Div(label, style={"fontSize": ".62rem", "color": MUTED, "textTransform": "uppercase"}),
        html.Div(value, style={"fontSize": ".85rem", "fontWeight": "700", "color": color}),
    ])


def statistics_grid(stats: Statistics) -> html.Div:
    """2×2 grid: avg wave, max wind, min pressure, max UV."""
    return html.Div(
        [
            mini_kpi("Avg Wave", f"{stats.avg_wave:.1f} m"),
            mini_kpi("Max Wind", f"{stats.max_wind:.0f} km/h"),
            mini_kpi("Min Pressure", f"{stats.min_pressure:.0f} hPa"),
            mini_kpi("Max UV", f"{stats.max_uv:.1f}"),
        ],
        style={"display": "grid", "gridTemplateColumns": "1fr 1fr", "gap": "8px", "marginTop": "10px"},
    )
