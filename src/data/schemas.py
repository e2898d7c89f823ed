"""
src/data/schemas.py
───────────────────
Expected shape of Open-Meteo point responses.

Each point is validated on its own; a point that does not match is dropped
and the rest of the batch is kept. Individual `current` fields are optional:
a present-but-null value becomes an absent reading, which the aggregation
validity predicates filter out later.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore")


class MarineCurrent(_Lenient):
    wave_height: float | None = None
    wave_period: float | None = None
    ocean_current_velocity: float | None = None


class ForecastCurrent(_Lenient):
    wind_speed_10m: float | None = None
    wind_direction_10m: float | None = None
    pressure_msl: float | None = None
    uv_index: float | None = None


class MarinePoint(_Lenient):
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    current: MarineCurrent


class ForecastPoint(_Lenient):
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    current: ForecastCurrent


def as_point_list(payload: Any) -> list[Any]:
    """Batched requests return a list; single-point requests return an object."""
    if isinstance(payload, list):
        return payload
    return [payload]


def parse_points(payload: Any, schema: type[_Lenient]) -> tuple[list[Any], int]:
    """
    Validate every point of a (possibly batched) response.

    Returns:
        (valid_points, dropped_count)
    """
    valid: list[Any] = []
    dropped = 0
    for raw in as_point_list(payload):
        try:
            valid.append(schema.model_validate(raw))
        except ValidationError:
            dropped += 1
    return valid, dropped
