"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass


@dataclass
class Settings:
    # Server
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"
    PORT: int = int(os.getenv("PORT", "8050"))
    HOST: str = os.getenv("HOST", "0.0.0.0")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Dashboard poll interval in milliseconds (reads the latest snapshot)
    UI_INTERVAL_MS: int = int(os.getenv("UI_INTERVAL_MS", "2000"))

    # Full fetch cycle period in seconds; 0 → fetch once at startup
    REFRESH_INTERVAL_S: int = int(os.getenv("REFRESH_INTERVAL_S", "900"))

    # Per-request HTTP timeout for the reading sources
    FETCH_TIMEOUT_S: float = float(os.getenv("FETCH_TIMEOUT_S", "20"))

    # Offline demo: synthetic payloads instead of HTTP
    OFFLINE_MODE: bool = os.getenv("OFFLINE_MODE", "false").lower() == "true"
    SIMULATION_SEED: int = int(os.getenv("SIMULATION_SEED", "42"))

    # Alerts
    ALERT_FEED_CAPACITY: int = int(os.getenv("ALERT_FEED_CAPACITY", "5"))
    EDGE_TRIGGERED_ALERTS: bool = os.getenv("EDGE_TRIGGERED_ALERTS", "false").lower() == "true"
    SYSTEM_CHECK_PROBABILITY: float = float(os.getenv("SYSTEM_CHECK_PROBABILITY", "0.05"))

    # Upstream endpoints
    MARINE_API_URL: str = os.getenv("MARINE_API_URL", "https://marine-api.open-meteo.com/v1/marine")
    FORECAST_API_URL: str = os.getenv("FORECAST_API_URL", "https://api.open-meteo.com/v1/forecast")
    GIBS_WMS_URL: str = os.getenv("GIBS_WMS_URL", "https://gibs.earthdata.nasa.gov/wms/epsg3857/best/wms.cgi")


settings = Settings()
