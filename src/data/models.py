"""
src/data/models.py
──────────────────
Pydantic v2 data models for readings, alert entries and stress snapshots.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from config.alerts import TIER_COLORS, AlertKind, SeverityTier


class Phenomenon(str, Enum):
    WAVE_HEIGHT = "wave_height"
    WAVE_PERIOD = "wave_period"
    WIND_SPEED = "wind_speed"
    WIND_DIRECTION = "wind_direction"
    PRESSURE = "pressure"
    CURRENT_VELOCITY = "ocean_current_velocity"
    UV_INDEX = "uv_index"
    RADIATION = "radiation"


class BufferKey(str, Enum):
    WAVES = "waves"
    WIND = "wind"
    PRESSURE = "pressure"
    UV = "uv"


class Reading(BaseModel):
    model_config = ConfigDict(frozen=True)

    phenomenon: Phenomenon
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    value: float | None = None  # None → sensor unavailable
    source: str | None = None


class AlertEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    kind: AlertKind
    message: str
    muted: bool = False


class Statistics(BaseModel):
    avg_wave: float = 0.0
    max_wind: float = 0.0
    min_pressure: float = 1013.0
    max_uv: float = 0.0


class StressSnapshot(BaseModel):
    timestamp: datetime
    statistics: Statistics = Field(default_factory=Statistics)
    stress: float = Field(default=0.0, ge=0.0, le=10.0)
    tier: SeverityTier = SeverityTier.STABLE
    chart_series: list[float] = Field(default_factory=lambda: [0.0] * 8)
    alerts: list[AlertEntry] = Field(default_factory=list)

    @property
    def stress_label(self) -> str:
        return f"{self.stress:.1f}"

    @property
    def tier_color(self) -> str:
        return TIER_COLORS[self.tier]


class CycleStatus(BaseModel):
    text: str = "INITIALIZING..."
    color: str = "cyan"
    last_update: datetime | None = None
    satellite_link: str = "SAT LINK: ACTIVE (Sentinel-6)"
    thermocline: str | None = None
