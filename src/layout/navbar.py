"""
src/layout/navbar.py
─────────────────────
Top bar with brand and live UTC/local clock.
"""

import dash_bootstrap_components as dbc
from dash import html

NAV_BG = "#050d14"
BORDER = "#1f3a4d"
ACCENT = "#00f3ff"
MUTED = "#84a5b8"


def create_navbar() -> dbc.Navbar:
    return dbc.Navbar(
        dbc.Container(
            [
                dbc.NavbarBrand(
                    [
                        html.Span("🌊", style={"marginRight": "8px", "fontSize": "1.1rem"}),
                        html.Span(
                            "Ocean Stress Monitor", style={"fontWeight": "700", "letterSpacing": ".04em"}
                        ),
                    ],
                    href="/",
                    style={"color": ACCENT, "textDecoration": "none"},
                ),
                html.Div(
                    [
                        html.Span("LAST UPDATE ", style={"color": MUTED}),
                        html.Span("--:--:--", id="last-update", style={"marginRight": "16px"}),
                        html.Span(id="clock", style={"color": ACCENT, "fontWeight": "700"}),
                    ],
                    className="ms-auto",
                    style={"fontSize": ".75rem", "fontFamily": "monospace", "color": "#c9e6f5"},
                ),
            ],
            fluid=True,
        ),
        color=NAV_BG,
        dark=True,
        sticky="top",
        style={"borderBottom": f"1px solid {BORDER}", "padding": ".5rem 1rem"},
    )
