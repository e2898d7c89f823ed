"""
src/analytics/stress_index.py
──────────────────────────────
Composite Ocean Stress Index calculation.

stress ∈ [0, 10] where 0 = calm, 10 = severe.

Each term normalises one phenomenon against an approximate "significant"
level, and the terms are summed into one unitless scalar:

  avg wave height      / 3 m
  max wind speed       / 60 km/h
  pressure deficit     (1015 − min pressure) / 25 hPa
  max UV index         / 12, weighted ×1.5

This is a heuristic composite, not a physically validated index. The
coefficients are fixed.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

import numpy as np

from config.alerts import HIGH_ALERT_ABOVE, UNSTABLE_ABOVE, SeverityTier
from src.data.models import BufferKey, Statistics

STRESS_MIN = 0.0
STRESS_MAX = 10.0

WAVE_REF_M = 3.0
WIND_REF_KMH = 60.0
PRESSURE_REF_HPA = 1015.0
PRESSURE_DEFICIT_REF_HPA = 25.0
UV_REF = 12.0
UV_WEIGHT = 1.5

STANDARD_ATMOSPHERE_HPA = 1013.0

CHART_LABELS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]


# ── Statistics ────────────────────────────────────────────────────────────────

def compute_statistics(validated: Mapping[BufferKey, Sequence[float]]) -> Statistics:
    """
    Summarise validated buffers.

    Empty (or missing) buffers fall back to calm defaults so the index
    degrades toward "calm" while a source has not responded yet.
    """
    waves = validated.get(BufferKey.WAVES) or []
    wind = validated.get(BufferKey.WIND) or []
    pressure = validated.get(BufferKey.PRESSURE) or []
    uv = validated.get(BufferKey.UV) or []

    return Statistics(
        avg_wave=float(np.mean(waves)) if len(waves) else 0.0,
        max_wind=float(np.max(wind)) if len(wind) else 0.0,
        min_pressure=float(np.min(pressure)) if len(pressure) else STANDARD_ATMOSPHERE_HPA,
        max_uv=float(np.max(uv)) if len(uv) else 0.0,
    )


# ── Index ─────────────────────────────────────────────────────────────────────

def compute_stress_index(
    avg_wave: float,
    max_wind: float,
    min_pressure: float,
    max_uv: float,
) -> float:
    """Composite stress index, hard-clamped to [0, 10]."""
    stress = (
        avg_wave / WAVE_REF_M
        + max_wind / WIND_REF_KMH
        + (PRESSURE_REF_HPA - min_pressure) / PRESSURE_DEFICIT_REF_HPA
    )
    stress += (max_uv / UV_REF) * UV_WEIGHT

    # Opposing infinities are the only way to reach NaN here
    if math.isnan(stress):
        return STRESS_MIN
    return float(np.clip(stress, STRESS_MIN, STRESS_MAX))


def classify_severity(stress: float) -> SeverityTier:
    """Ties at 3 and 6 resolve to the lower tier."""
    if stress > HIGH_ALERT_ABOVE:
        return SeverityTier.HIGH_ALERT
    if stress > UNSTABLE_ABOVE:
        return SeverityTier.UNSTABLE
    return SeverityTier.STABLE


def derive_chart_series(
    stress: float,
    avg_wave: float,
    max_wind: float,
    min_pressure: float,
    max_uv: float,
) -> list[float]:
    """Fixed linear scalings for the 8-point display series (N … NW)."""
    return [
        stress * 8,
        avg_wave * 10,
        max_wind / 2,
        (STANDARD_ATMOSPHERE_HPA - min_pressure) * 5,
        stress * 5,
        avg_wave * 5,
        max_wind / 3,
        max_uv * 2,
    ]


def bar_width_pct(stress: float) -> float:
    """Progress-bar width; stress is already clamped so the max is 100%."""
    return stress * 10.0
