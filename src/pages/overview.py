"""
src/pages/overview.py
──────────────────────
Observation dashboard page.

Static structure; map, stress panel, chart, feed and status are filled by
callbacks.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html

from src.layers.builders import layer_options

CARD_BG = "#0b1a24"
BORDER = "#1f3a4d"
MUTED = "#84a5b8"

_CARD = {
    "backgroundColor": CARD_BG,
    "border": f"1px solid {BORDER}",
    "borderRadius": "8px",
    "padding": "14px",
}


def _card_title(text: str) -> html.Div:
    return html.Div(
        text,
        style={"fontSize": ".68rem", "color": MUTED, "textTransform": "uppercase", "letterSpacing": ".08em", "marginBottom": "8px"},
    )


def layout(visible_layers: list[str]) -> html.Div:
    return html.Div(
        [
            dbc.Row(
                [
                    # ── Map + layer toggles ───────────────────────────────────
                    dbc.Col(
                        [
                            html.Div(
                                dcc.Graph(id="ocean-map", config={"displayModeBar": False, "scrollZoom": True}),
                                style={**_CARD, "padding": "0", "overflow": "hidden"},
                            ),
                            html.Div(
                                [
                                    _card_title("Layers"),
                                    dbc.Checklist(
                                        id="layer-toggles",
                                        options=layer_options(),
                                        value=visible_layers,
                                        inline=True,
                                        switch=True,
                                        style={"fontSize": ".8rem", "color": "#c9e6f5"},
                                    ),
                                ],
                                style={**_CARD, "marginTop": "12px"},
                            ),
                        ],
                        md=8,
                    ),
                    # ── Analytics column ──────────────────────────────────────
                    dbc.Col(
                        [
                            html.Div(
                                [html.Div(id="stress-panel"), html.Div(id="stress-statistics")],
                                style=_CARD,
                            ),
                            html.Div(
                                [
                                    _card_title("Wave Energy"),
                                    dcc.Graph(id="ocean-chart", config={"displayModeBar": False}),
                                ],
                                style={**_CARD, "marginTop": "12px"},
                            ),
                            html.Div(
                                [_card_title("Alert Feed"), html.Div(id="alert-feed")],
                                style={**_CARD, "marginTop": "12px"},
                            ),
                            html.Div(
                                [
                                    html.Div(id="system-status", style={"fontSize": ".75rem", "fontWeight": "700"}),
                                    html.Div(id="system-info", style={"fontSize": ".65rem", "color": MUTED, "marginTop": "4px"}),
                                ],
                                className="system-info-compact",
                                style={**_CARD, "marginTop": "12px"},
                            ),
                        ],
                        md=4,
                    ),
                ],
                className="g-3",
            ),
        ],
        style={"padding": "1.2rem"},
    )
