"""
src/layout/components/map_surface.py
─────────────────────────────────────
Map surface: render visible layers onto a Plotly MapLibre figure.

Marker layers become Scattermap traces (size = 2 × radius, popup text on
hover); tile layers become raster sources beneath the traces.
"""
from __future__ import annotations

import plotly.graph_objects as go

from config.stations import MAP_CENTER, MAP_ZOOM
from src.layers.builders import Layer

CARD_BG = "#050d14"
BASEMAP_STYLE = "carto-darkmatter"


def build_map_figure(layers: list[Layer], height: int = 560) -> go.Figure:
    fig = go.Figure()
    raster_layers: list[dict] = []

    for layer in layers:
        if layer.kind == "tiles" and layer.tile_url:
            raster_layers.append({
                "sourcetype": "raster",
                "source": [layer.tile_url],
                "below": "traces",
                "opacity": layer.opacity,
                "name": layer.key,
            })
            continue

        df = layer.markers
        if df is None or df.empty:
            continue
        fig.add_trace(go.Scattermap(
            lat=df["lat"],
            lon=df["lon"],
            mode="markers",
            name=layer.label,
            marker={
                "size": (df["radius"] * 2).tolist(),
                "color": df["color"].tolist(),
                "opacity": 0.75,
            },
            text=df["popup"],
            hovertemplate="%{text}<extra></extra>",
        ))

    fig.update_layout(
        map={
            "style": BASEMAP_STYLE,
            "center": MAP_CENTER,
            "zoom": MAP_ZOOM,
            "layers": raster_layers,
        },
        paper_bgcolor=CARD_BG,
        margin={"l": 0, "r": 0, "t": 0, "b": 0},
        height=height,
        showlegend=False,
        uirevision="map",  # keep pan/zoom across refreshes
    )
    return fig
