"""
src/layout/components/alert_feed.py
────────────────────────────────────
Alert feed list: most recent first, each entry timestamped.
"""

from dash import html

from src.data.models import AlertEntry

DIM = "#84a5b8"


def alert_item(entry: AlertEntry) -> html.Div:
    """One feed line; muted entries render small and faded."""
    message_style = {"fontSize": ".5rem", "opacity": 0.5} if entry.muted else {}
    return html.Div(
        [
            html.Span(entry.timestamp.astimezone().strftime("%H:%M:%S"), style={"color": DIM, "marginRight": "6px"}),
            html.Span(entry.message, style=message_style),
        ],
        className="alert-item",
        style={
            "fontSize": ".75rem",
            "padding": "4px 0",
            "borderBottom": "1px solid rgba(255,255,255,0.05)",
        },
    )


def alert_feed(entries: list[AlertEntry]) -> list[html.Div]:
    if not entries:
        return [html.Div("No alerts.", style={"color": DIM, "fontSize": ".72rem"})]
    return [alert_item(e) for e in entries]
