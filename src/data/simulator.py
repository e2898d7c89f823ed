"""
src/data/simulator.py
─────────────────────
Synthetic Open-Meteo payload generator for offline demos.

`SimulatedClient` stands in for `HttpClient`: it answers the same
`get_json(url, params)` calls with payloads of the same shape, so the
sources, schema validation and aggregation run unchanged.

Design:
  - Reproducible with SIMULATION_SEED for consistent demos
  - Latitude-dependent baselines (rougher seas and stronger winds toward the
    poles, stronger UV near the equator)
  - A small share of points carry null fields or lose their `current` block,
    exercising the validity predicates and per-point schema checks
"""
from __future__ import annotations

from typing import Any

import numpy as np

from config.settings import settings

NULL_FIELD_P = 0.03     # a field comes back null
MALFORMED_POINT_P = 0.02  # the point has no `current` block

# Noise scales (σ) per field
NOISE: dict[str, float] = {
    "wave_height": 0.6,
    "wave_period": 1.5,
    "wind_speed_10m": 6.0,
    "wind_direction_10m": 40.0,
    "pressure_msl": 7.0,
    "ocean_current_velocity": 0.08,
    "uv_index": 1.2,
}


def _baseline(field: str, lat: float) -> float:
    polar = abs(lat) / 90.0
    if field == "wave_height":
        return 1.2 + 3.0 * polar
    if field == "wave_period":
        return 8.0 + 4.0 * polar
    if field == "wind_speed_10m":
        return 12.0 + 30.0 * polar
    if field == "wind_direction_10m":
        # Trade easterlies in the tropics, westerlies at mid-latitudes
        return 90.0 if abs(lat) < 30 else 270.0
    if field == "pressure_msl":
        return 1014.0 - 18.0 * polar
    if field == "ocean_current_velocity":
        return 0.35
    if field == "uv_index":
        return max(0.0, 10.0 * (1.0 - polar * 1.4))
    return 0.0


def _coords(raw: Any) -> list[float]:
    return [float(v) for v in str(raw).split(",") if v.strip()]


class SimulatedClient:
    def __init__(self, seed: int = settings.SIMULATION_SEED):
        self.rng = np.random.default_rng(seed)

    def _value(self, field: str, lat: float) -> float | None:
        if self.rng.random() < NULL_FIELD_P:
            return None
        value = _baseline(field, lat) + self.rng.normal(0.0, NOISE.get(field, 1.0))
        if field == "wind_direction_10m":
            return round(float(value % 360.0), 0)
        if field == "pressure_msl":
            return round(float(np.clip(value, 930.0, 1060.0)), 1)
        return round(float(max(0.0, value)), 2)

    def _point(self, lat: float, lon: float, fields: list[str]) -> dict[str, Any]:
        point: dict[str, Any] = {"latitude": lat, "longitude": lon}
        if self.rng.random() >= MALFORMED_POINT_P:
            point["current"] = {f: self._value(f, lat) for f in fields}
        return point

    def get_json(self, url: str, params: dict[str, Any]) -> Any:
        lats = _coords(params.get("latitude", ""))
        lons = _coords(params.get("longitude", ""))
        fields = [f for f in str(params.get("current", "")).split(",") if f]

        points = [self._point(lat, lon, fields) for lat, lon in zip(lats, lons, strict=True)]
        if len(points) == 1:
            return points[0]
        return points
