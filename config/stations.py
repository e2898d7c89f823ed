"""
config/stations.py
──────────────────
Geographic sample points queried by each reading source, the static
radiation reference sensors, and the WMS tile overlays.

Grids are regular lat/lon lattices (inclusive bounds):
  wind/pressure  lat −50..50 step 20 × lon −160..160 step 40  (54 points)
  uv             lat −40..40 step 20 × lon −120..120 step 60  (25 points)
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class SamplePoint:
    lat: float
    lon: float
    name: str | None = None


@dataclass(frozen=True)
class StaticSensor:
    """Fixed reference sensor; value is a constant, never fetched."""
    name: str
    lat: float
    lon: float
    value: float  # µSv/h


@dataclass(frozen=True)
class TileOverlay:
    key: str
    label: str
    wms_layer: str
    opacity: float


def _grid(lat_range: tuple[int, int, int], lon_range: tuple[int, int, int]) -> tuple[SamplePoint, ...]:
    lat_start, lat_stop, lat_step = lat_range
    lon_start, lon_stop, lon_step = lon_range
    return tuple(
        SamplePoint(lat=float(lat), lon=float(lon))
        for lat in range(lat_start, lat_stop + 1, lat_step)
        for lon in range(lon_start, lon_stop + 1, lon_step)
    )


# ── Wave buoys (one request per buoy) ─────────────────────────────────────────
WAVE_BUOYS: tuple[SamplePoint, ...] = (
    SamplePoint(50.0, -30.0, "N. Atlantic"),
    SamplePoint(21.0, -157.0, "Hawaii"),
    SamplePoint(-55.0, 120.0, "Southern"),
    SamplePoint(-35.0, 18.0, "Cape G. Hope"),
    SamplePoint(58.0, -175.0, "Bering"),
    SamplePoint(25.0, -90.0, "Gulf Mex"),
    SamplePoint(35.0, 15.0, "Med Sea"),
    SamplePoint(-15.0, 155.0, "Coral Sea"),
    SamplePoint(35.0, 140.0, "Japan"),
    SamplePoint(-15.0, -80.0, "Peru"),
)

# ── Batched grids ─────────────────────────────────────────────────────────────
WIND_GRID = _grid((-50, 50, 20), (-160, 160, 40))
UV_GRID = _grid((-40, 40, 20), (-120, 120, 60))

CURRENT_BUOYS: tuple[SamplePoint, ...] = (
    SamplePoint(25.0, -80.0),
    SamplePoint(35.0, 140.0),
    SamplePoint(-34.0, 18.0),
    SamplePoint(0.0, -10.0),
    SamplePoint(-10.0, 100.0),
    SamplePoint(50.0, -40.0),
)

# ── Radiation reference sensors ───────────────────────────────────────────────
RADIATION_SENSORS: tuple[StaticSensor, ...] = (
    StaticSensor("Fukushima Buoy", 37.42, 141.03, 0.12),
    StaticSensor("Cherbourg (FR)", 49.63, -1.62, 0.08),
    StaticSensor("Sellafield (UK)", 54.42, -3.49, 0.15),
    StaticSensor("Murmansk", 68.95, 33.08, 0.09),
)

# ── NASA GIBS WMS overlays ────────────────────────────────────────────────────
TILE_OVERLAYS: tuple[TileOverlay, ...] = (
    TileOverlay("sst", "Sea Surface Temp", "GHRSST_L4_MUR_Sea_Surface_Temperature", 0.6),
    TileOverlay("chloro", "Chlorophyll", "MODIS_Aqua_L2_Chlorophyll_A", 0.6),
    TileOverlay("sealevel", "Sea Level Anomaly", "GHRSST_L4_MUR_Sea_Surface_Temperature_Anomalies", 0.5),
)

# ── Map surface defaults ──────────────────────────────────────────────────────
MAP_CENTER = {"lat": 20.0, "lon": -40.0}  # Atlantic focus
MAP_ZOOM = 1.6
DEFAULT_VISIBLE_LAYERS = ("waves", "wind", "pressure")
