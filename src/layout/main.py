"""
src/layout/main.py
───────────────────
Main application layout composition.

Contains:
  - dcc.Interval for snapshot polling
  - dcc.Interval for the clock
  - Navbar + dashboard page
"""
from dash import dcc, html

from config.settings import settings
from src.layout.navbar import create_navbar
from src.pages import overview


def create_layout(visible_layers: list[str]) -> html.Div:
    """Assemble the root application layout."""
    return html.Div(
        [
            # ── Intervals ─────────────────────────────────────────────────────
            dcc.Interval(id="interval-live", interval=settings.UI_INTERVAL_MS, n_intervals=0),
            dcc.Interval(id="interval-clock", interval=1_000, n_intervals=0),

            # ── Navigation bar ────────────────────────────────────────────────
            create_navbar(),

            # ── Page content ──────────────────────────────────────────────────
            html.Div(
                overview.layout(visible_layers),
                id="page-content",
                style={"minHeight": "calc(100vh - 60px)"},
            ),

            # ── Footer ────────────────────────────────────────────────────────
            html.Footer(
                [
                    html.Span("Ocean Stress Monitor"),
                    html.Span(" · "),
                    html.Span("Open-Meteo · NASA GIBS"),
                    html.Span(" · "),
                    html.Span("Heuristic index, not for navigation"),
                ],
                style={
                    "textAlign": "center",
                    "padding": ".7rem",
                    "fontSize": ".72rem",
                    "color": "#84a5b8",
                    "borderTop": "1px solid #1f3a4d",
                    "marginTop": "2rem",
                },
            ),
        ],
        style={"backgroundColor": "#050d14", "minHeight": "100vh", "color": "#c9e6f5"},
    )
