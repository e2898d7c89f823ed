"""
src/layers/builders.py
──────────────────────
Layer builders: turn readings into map overlays.

Marker layers carry a DataFrame with one row per sample point:
  lat, lon, source, <phenomenon columns>, radius, color, popup
Radius and color encode magnitude. Tile layers carry a WMS URL template
with a `{bbox-epsg-3857}` placeholder that the map surface fills in.

Builders are independent of the aggregation engine; they reuse the readings a
source already fetched, so one fetch can feed several layers (wind and
pressure share the atmosphere fetch).
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import urlencode

import numpy as np
import pandas as pd

from config.settings import settings
from config.stations import TILE_OVERLAYS, TileOverlay
from src.data.models import Phenomenon, Reading

CYAN = "#00f3ff"
AMBER = "#ffaa00"
RED = "#ff3333"
GREEN = "#39ff14"
SKY = "#66ccff"
WHITE = "#ffffff"

# key → toggle label; order is the toggle-list order
MARKER_LABELS: dict[str, str] = {
    "waves": "Wave Dynamics",
    "wind": "Wind",
    "pressure": "Pressure (MSL)",
    "salinity": "Currents / Flow",
    "radiation": "Radiation",
}


@dataclass(frozen=True, eq=False)
class Layer:
    key: str
    label: str
    kind: str                          # "markers" | "tiles"
    markers: pd.DataFrame | None = None
    tile_url: str | None = None
    opacity: float = 1.0

    @property
    def size(self) -> int:
        return 0 if self.markers is None else len(self.markers)


# ── Helpers ───────────────────────────────────────────────────────────────────

def readings_frame(readings: list[Reading], phenomena: list[Phenomenon]) -> pd.DataFrame:
    """
    Pivot readings to one row per coordinate and one column per phenomenon.

    Absent values become NaN; row order follows first arrival.
    """
    rows: dict[tuple[float, float], dict] = {}
    for r in readings:
        if r.phenomenon not in phenomena:
            continue
        row = rows.setdefault(
            (r.latitude, r.longitude),
            {"lat": r.latitude, "lon": r.longitude, "source": r.source},
        )
        row[r.phenomenon.value] = r.value

    value_cols = [p.value for p in phenomena]
    df = pd.DataFrame(list(rows.values()), columns=["lat", "lon", "source", *value_cols])
    df[value_cols] = df[value_cols].astype(float)
    return df


def _num(value: float) -> str:
    return "n/a" if pd.isna(value) else f"{value:g}"


# ── Marker layers ─────────────────────────────────────────────────────────────

def build_wave_layer(readings: list[Reading]) -> Layer:
    df = readings_frame(readings, [Phenomenon.WAVE_HEIGHT, Phenomenon.WAVE_PERIOD])
    h = df["wave_height"]
    df["color"] = np.select([h > 6, h > 3], [RED, AMBER], default=CYAN)
    df["radius"] = (5 + h.fillna(0)).clip(lower=1)
    df["popup"] = [
        f"<b>🌊 {src}</b><br>Wave: <b>{_num(wh)} m</b> | Period: <b>{_num(wp)} s</b>"
        for src, wh, wp in zip(df["source"], df["wave_height"], df["wave_period"], strict=True)
    ]
    return Layer(key="waves", label=MARKER_LABELS["waves"], kind="markers", markers=df)


def build_wind_layer(readings: list[Reading]) -> Layer:
    df = readings_frame(readings, [Phenomenon.WIND_SPEED, Phenomenon.WIND_DIRECTION])
    s = df["wind_speed"]
    df["color"] = SKY
    df["radius"] = 4 + s.fillna(0) / 10
    df["popup"] = [
        f"<b>WIND</b><br>{_num(ws)} km/h<br>{_num(wd)}°"
        for ws, wd in zip(df["wind_speed"], df["wind_direction"], strict=True)
    ]
    return Layer(key="wind", label=MARKER_LABELS["wind"], kind="markers", markers=df)


def build_pressure_layer(readings: list[Reading]) -> Layer:
    df = readings_frame(readings, [Phenomenon.PRESSURE])
    p = df["pressure"]
    df["color"] = np.select([p < 980, p < 1000], [RED, AMBER], default=WHITE)
    df["radius"] = 3.0
    df["popup"] = [f"<b>PRESSURE</b><br>{_num(v)} hPa" for v in p]
    return Layer(key="pressure", label=MARKER_LABELS["pressure"], kind="markers", markers=df)


def build_current_layer(readings: list[Reading]) -> Layer:
    df = readings_frame(readings, [Phenomenon.CURRENT_VELOCITY])
    v = df["ocean_current_velocity"]
    df["color"] = GREEN
    df["radius"] = v.fillna(0) * 10
    df["popup"] = [f"<b>FLOW</b><br>Velocity: {_num(x)} m/s" for x in v]
    return Layer(key="salinity", label=MARKER_LABELS["salinity"], kind="markers", markers=df)


def build_radiation_layer(readings: list[Reading]) -> Layer:
    df = readings_frame(readings, [Phenomenon.RADIATION])
    v = df["radiation"]
    df["color"] = np.where(v > 0.20, AMBER, GREEN)
    df["radius"] = 4.0
    df["popup"] = [
        f"<b>☢️ RADIATION</b><br>Loc: {src}<br>Level: <b>{_num(x)} µSv/h</b>"
        for src, x in zip(df["source"], v, strict=True)
    ]
    return Layer(key="radiation", label=MARKER_LABELS["radiation"], kind="markers", markers=df)


# ── Tile layers ───────────────────────────────────────────────────────────────

def wms_tile_url(wms_layer: str, base_url: str = settings.GIBS_WMS_URL) -> str:
    query = urlencode({
        "SERVICE": "WMS",
        "REQUEST": "GetMap",
        "VERSION": "1.1.1",
        "LAYERS": wms_layer,
        "STYLES": "",
        "FORMAT": "image/png",
        "TRANSPARENT": "true",
        "SRS": "EPSG:3857",
        "WIDTH": 256,
        "HEIGHT": 256,
    })
    return f"{base_url}?{query}&BBOX={{bbox-epsg-3857}}"


def build_tile_layer(overlay: TileOverlay) -> Layer:
    return Layer(
        key=overlay.key,
        label=overlay.label,
        kind="tiles",
        tile_url=wms_tile_url(overlay.wms_layer),
        opacity=overlay.opacity,
    )


def build_tile_layers() -> list[Layer]:
    return [build_tile_layer(o) for o in TILE_OVERLAYS]


LayerBuilder = Callable[[list[Reading]], Layer]


def layer_options() -> list[dict[str, str]]:
    """Toggle options for every layer, marker layers first."""
    options = [{"label": label, "value": key} for key, label in MARKER_LABELS.items()]
    options += [{"label": o.label, "value": o.key} for o in TILE_OVERLAYS]
    return options
