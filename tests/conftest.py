"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the Ocean Stress Monitor test suite.
"""
import os
from datetime import datetime, timezone

import numpy as np
import pytest

# Never touch the network from tests
os.environ.setdefault("OFFLINE_MODE", "true")
os.environ.setdefault("SIMULATION_SEED", "42")
os.environ.setdefault("SYSTEM_CHECK_PROBABILITY", "0")


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def feed():
    from src.data.feed import AlertFeed
    return AlertFeed(capacity=5)


@pytest.fixture
def engine(feed):
    """Level-triggered engine without the random system-check filler."""
    from src.analytics.engine import AggregationEngine
    return AggregationEngine(feed=feed, edge_triggered=False, system_check_probability=0.0)


@pytest.fixture
def scenario_buffers() -> dict:
    return {
        "waves": [2.0, 4.0, None, 8.0],
        "wind": [10.0, 50.0],
        "pressure": [995.0, 1005.0],
        "uv": [3.0, 9.0],
    }


class FakeClient:
    """Stand-in for HttpClient: canned payloads keyed by URL, or an exception."""

    def __init__(self, responses: dict | None = None, error: Exception | None = None):
        self.responses = responses or {}
        self.error = error
        self.calls: list[tuple[str, dict]] = []

    def get_json(self, url, params):
        self.calls.append((url, params))
        if self.error is not None:
            raise self.error
        response = self.responses[url]
        return response(params) if callable(response) else response


@pytest.fixture
def fake_client_cls():
    return FakeClient


@pytest.fixture
def forecast_point():
    def _point(lat, lon, **current):
        return {"latitude": lat, "longitude": lon, "current": current}
    return _point
