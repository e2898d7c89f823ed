"""
src/analytics/thresholds.py
────────────────────────────
Validity predicates and alert threshold evaluation.

Provides:
  - Per-buffer validity predicates (drop, never substitute)
  - validate(): filter a raw sample buffer through a predicate
  - evaluate_alerts(): which alert conditions hold for a set of statistics
  - Alert message formatting
"""
from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from config.alerts import (
    ALERT_ICONS,
    EXTREME_UV_INDEX,
    GALE_WIND_KMH,
    HIGH_SEAS_WAVE_M,
    STORM_PRESSURE_HPA,
    AlertKind,
)
from src.data.models import BufferKey, Statistics

# Sea-level pressure has never been recorded below ~870 hPa; anything at or
# under this floor is a sensor fault encoding.
PRESSURE_SANITY_FLOOR_HPA = 850.0

Predicate = Callable[[float | None], bool]


def _is_number(value: float | None) -> bool:
    return value is not None and not isinstance(value, bool) and not math.isnan(value)


def is_valid_wave(value: float | None) -> bool:
    return _is_number(value) and value >= 0.0


def is_valid_wind(value: float | None) -> bool:
    return _is_number(value) and value >= 0.0


def is_valid_pressure(value: float | None) -> bool:
    return _is_number(value) and value > PRESSURE_SANITY_FLOOR_HPA


def is_valid_uv(value: float | None) -> bool:
    return _is_number(value) and value >= 0.0


VALIDITY_PREDICATES: dict[BufferKey, Predicate] = {
    BufferKey.WAVES: is_valid_wave,
    BufferKey.WIND: is_valid_wind,
    BufferKey.PRESSURE: is_valid_pressure,
    BufferKey.UV: is_valid_uv,
}


def validate(values: Iterable[float | None], predicate: Predicate) -> list[float]:
    """Keep the values satisfying `predicate`, in their original order."""
    return [float(v) for v in values if predicate(v)]


# ── Alert conditions ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class AlertCondition:
    kind: AlertKind
    active: bool
    message: str


def _fmt(value: float) -> str:
    """Render like a JS number: 50.0 → "50", 12.5 → "12.5"."""
    return f"{value:g}"


def evaluate_alerts(
    avg_wave: float,
    max_wind: float,
    min_pressure: float,
    max_uv: float,
) -> list[AlertCondition]:
    """
    Evaluate the four alert conditions independently.

    Returns one AlertCondition per kind, in a fixed order
    (gale, storm, high seas, extreme UV), active or not.
    """
    return [
        AlertCondition(
            AlertKind.GALE,
            max_wind > GALE_WIND_KMH,
            f"{ALERT_ICONS[AlertKind.GALE]} GALE FORCE: {_fmt(max_wind)} km/h",
        ),
        AlertCondition(
            AlertKind.STORM,
            min_pressure < STORM_PRESSURE_HPA,
            f"{ALERT_ICONS[AlertKind.STORM]} LOW PRESSURE: {_fmt(min_pressure)} hPa",
        ),
        AlertCondition(
            AlertKind.HIGH_SEAS,
            avg_wave > HIGH_SEAS_WAVE_M,
            f"{ALERT_ICONS[AlertKind.HIGH_SEAS]} HIGH SEAS: {avg_wave:.1f}m",
        ),
        AlertCondition(
            AlertKind.EXTREME_UV,
            max_uv > EXTREME_UV_INDEX,
            f"{ALERT_ICONS[AlertKind.EXTREME_UV]} EXTREME UV: {_fmt(max_uv)}",
        ),
    ]


def active_alerts(stats: Statistics) -> list[AlertCondition]:
    return [
        c
        for c in evaluate_alerts(stats.avg_wave, stats.max_wind, stats.min_pressure, stats.max_uv)
        if c.active
    ]
