"""
config/alerts.py
────────────────
Severity tiers, alert kinds, alert thresholds and display configuration.

Tier boundaries on the stress index (0–10):
  stress ≤ 3       → STABLE
  3 < stress ≤ 6   → UNSTABLE
  stress > 6       → HIGH ALERT
"""

from enum import Enum


class SeverityTier(str, Enum):
    STABLE = "STABLE"
    UNSTABLE = "UNSTABLE"
    HIGH_ALERT = "HIGH ALERT"


class AlertKind(str, Enum):
    GALE = "gale"
    STORM = "storm"
    HIGH_SEAS = "high_seas"
    EXTREME_UV = "extreme_uv"
    SYSTEM = "system"


UNSTABLE_ABOVE = 3.0
HIGH_ALERT_ABOVE = 6.0

TIER_COLORS: dict[str, str] = {
    SeverityTier.STABLE: "#00f3ff",
    SeverityTier.UNSTABLE: "#ffaa00",
    SeverityTier.HIGH_ALERT: "#ff3333",
}

# ── Alert thresholds (all strict comparisons) ────────────────────────────────
GALE_WIND_KMH = 40.0          # max wind  >  40 km/h
STORM_PRESSURE_HPA = 990.0    # min press <  990 hPa
HIGH_SEAS_WAVE_M = 3.5        # avg wave  >  3.5 m
EXTREME_UV_INDEX = 8.0        # max uv    >  8

ALERT_ICONS: dict[str, str] = {
    AlertKind.GALE: "💨",
    AlertKind.STORM: "📉",
    AlertKind.HIGH_SEAS: "🌊",
    AlertKind.EXTREME_UV: "☀️",
    AlertKind.SYSTEM: "",
}

STARTUP_MESSAGE = "SYSTEM STARTUP: Calibrating sensors..."
FAILURE_MESSAGE = "CRITICAL: System initialization failed."
SYSTEM_CHECK_MESSAGE = "SYSTEM CHECK: Sensors active..."

