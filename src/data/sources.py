"""
src/data/sources.py
───────────────────
Reading sources: one fetcher per upstream query.

  WaveSource        marine API, one request per buoy (wave height + period)
  AtmosphereSource  forecast API, one batched request (wind speed/dir + MSL pressure)
  CurrentSource     marine API, one batched request (ocean current velocity)
  UVSource          forecast API, one batched request (UV index)
  RadiationSource   static reference sensors, no I/O

Failure handling:
  - A point that fails (network, HTTP status, bad JSON, wrong shape) is dropped.
  - A per-point source where every point failed raises SourceUnavailable.
  - A batched source whose single request fails raises SourceUnavailable; the
    caller keeps the previous buffers for that cycle.

Blocking HTTP calls run through `asyncio.to_thread`, so sources suspend only
at their I/O boundary and can be gathered concurrently.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any

import requests

from config.settings import settings
from config.stations import (
    CURRENT_BUOYS,
    RADIATION_SENSORS,
    UV_GRID,
    WAVE_BUOYS,
    WIND_GRID,
    SamplePoint,
    StaticSensor,
)
from src.data.models import Phenomenon, Reading
from src.data.schemas import ForecastPoint, MarinePoint, parse_points

LOG = logging.getLogger(__name__)

MARINE_PROVIDER = "Open-Meteo Marine"
FORECAST_PROVIDER = "Open-Meteo Forecast"


class SourceUnavailable(RuntimeError):
    """A batched fetch failed as a whole."""


# ── HTTP client ───────────────────────────────────────────────────────────────

class HttpClient:
    """Thin JSON-over-GET wrapper around a requests.Session."""

    def __init__(self, session: requests.Session | None = None, timeout: float = settings.FETCH_TIMEOUT_S):
        self.session = session or requests.Session()
        self.timeout = timeout

    def get_json(self, url: str, params: dict[str, Any]) -> Any:
        r = self.session.get(url, params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()


def _fmt_coord(value: float) -> str:
    return f"{value:g}"


def batch_params(points: tuple[SamplePoint, ...], current: list[str]) -> dict[str, str]:
    """Comma-joined coordinates for a multi-location request."""
    return {
        "latitude": ",".join(_fmt_coord(p.lat) for p in points),
        "longitude": ",".join(_fmt_coord(p.lon) for p in points),
        "current": ",".join(current),
    }


# ── Sources ───────────────────────────────────────────────────────────────────

class ReadingSource:
    name: str = "source"

    async def fetch(self) -> list[Reading]:
        raise NotImplementedError


class WaveSource(ReadingSource):
    name = "waves"
    current = ["wave_height", "wave_period"]

    def __init__(self, client: HttpClient, points: tuple[SamplePoint, ...] = WAVE_BUOYS,
                 url: str = settings.MARINE_API_URL):
        self.client = client
        self.points = points
        self.url = url

    async def _fetch_point(self, point: SamplePoint) -> list[Reading]:
        params = {
            "latitude": _fmt_coord(point.lat),
            "longitude": _fmt_coord(point.lon),
            "current": ",".join(self.current),
            "timezone": "auto",
        }
        try:
            payload = await asyncio.to_thread(self.client.get_json, self.url, params)
        except (requests.RequestException, ValueError) as e:
            LOG.warning(f"Wave fetch failed @({point.lat:.2f},{point.lon:.2f}): {e}")
            return []

        valid, _ = parse_points(payload, MarinePoint)
        if not valid:
            LOG.warning(f"Wave response malformed @({point.lat:.2f},{point.lon:.2f}); point dropped")
            return []

        current = valid[0].current
        label = point.name or MARINE_PROVIDER
        return [
            Reading(phenomenon=Phenomenon.WAVE_HEIGHT, latitude=point.lat, longitude=point.lon,
                    value=current.wave_height, source=label),
            Reading(phenomenon=Phenomenon.WAVE_PERIOD, latitude=point.lat, longitude=point.lon,
                    value=current.wave_period, source=label),
        ]

    async def fetch(self) -> list[Reading]:
        per_point = await asyncio.gather(*(self._fetch_point(p) for p in self.points))
        readings = [r for chunk in per_point for r in chunk]
        if self.points and not readings:
            raise SourceUnavailable(f"waves: all {len(self.points)} buoy fetches failed")
        LOG.info("✅ Waves: loaded %d/%d buoys", len(readings) // 2, len(self.points))
        return readings


class _BatchedSource(ReadingSource):
    schema: type = ForecastPoint
    current: list[str] = []

    def __init__(self, client: HttpClient, points: tuple[SamplePoint, ...], url: str):
        self.client = client
        self.points = points
        self.url = url

    def _readings(self, point: Any) -> list[Reading]:
        raise NotImplementedError

    async def fetch(self) -> list[Reading]:
        params = batch_params(self.points, self.current)
        try:
            payload = await asyncio.to_thread(self.client.get_json, self.url, params)
        except (requests.RequestException, ValueError) as e:
            raise SourceUnavailable(f"{self.name} fetch failed: {e}") from e

        valid, dropped = parse_points(payload, self.schema)
        if dropped:
            LOG.warning("%s: dropped %d malformed point(s)", self.name, dropped)

        readings = [r for point in valid for r in self._readings(point)]
        LOG.info("✅ %s: loaded %d point(s)", self.name.capitalize(), len(valid))
        return readings


class AtmosphereSource(_BatchedSource):
    """Wind and pressure share this single fetch."""

    name = "wind"
    schema = ForecastPoint
    current = ["wind_speed_10m", "wind_direction_10m", "pressure_msl"]

    def __init__(self, client: HttpClient, points: tuple[SamplePoint, ...] = WIND_GRID,
                 url: str = settings.FORECAST_API_URL):
        super().__init__(client, points, url)

    def _readings(self, point: ForecastPoint) -> list[Reading]:
        c = point.current
        return [
            Reading(phenomenon=Phenomenon.WIND_SPEED, latitude=point.latitude, longitude=point.longitude,
                    value=c.wind_speed_10m, source=FORECAST_PROVIDER),
            Reading(phenomenon=Phenomenon.WIND_DIRECTION, latitude=point.latitude, longitude=point.longitude,
                    value=c.wind_direction_10m, source=FORECAST_PROVIDER),
            Reading(phenomenon=Phenomenon.PRESSURE, latitude=point.latitude, longitude=point.longitude,
                    value=c.pressure_msl, source=FORECAST_PROVIDER),
        ]


class CurrentSource(_BatchedSource):
    name = "salinity"
    schema = MarinePoint
    current = ["ocean_current_velocity"]

    def __init__(self, client: HttpClient, points: tuple[SamplePoint, ...] = CURRENT_BUOYS,
                 url: str = settings.MARINE_API_URL):
        super().__init__(client, points, url)

    def _readings(self, point: MarinePoint) -> list[Reading]:
        return [
            Reading(phenomenon=Phenomenon.CURRENT_VELOCITY, latitude=point.latitude, longitude=point.longitude,
                    value=point.current.ocean_current_velocity, source=MARINE_PROVIDER),
        ]


class UVSource(_BatchedSource):
    name = "uv"
    schema = ForecastPoint
    current = ["uv_index"]

    def __init__(self, client: HttpClient, points: tuple[SamplePoint, ...] = UV_GRID,
                 url: str = settings.FORECAST_API_URL):
        super().__init__(client, points, url)

    def _readings(self, point: ForecastPoint) -> list[Reading]:
        return [
            Reading(phenomenon=Phenomenon.UV_INDEX, latitude=point.latitude, longitude=point.longitude,
                    value=point.current.uv_index, source=FORECAST_PROVIDER),
        ]


class RadiationSource(ReadingSource):
    name = "radiation"

    def __init__(self, sensors: tuple[StaticSensor, ...] = RADIATION_SENSORS):
        self.sensors = sensors

    async def fetch(self) -> list[Reading]:
        return [
            Reading(phenomenon=Phenomenon.RADIATION, latitude=s.lat, longitude=s.lon, value=s.value, source=s.name)
            for s in self.sensors
        ]


def values_of(readings: list[Reading], phenomenon: Phenomenon) -> list[float | None]:
    """Raw values (absences included) in arrival order."""
    return [r.value for r in readings if r.phenomenon == phenomenon]
