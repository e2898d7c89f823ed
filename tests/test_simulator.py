"""
tests/test_simulator.py
────────────────────────
Tests for the offline payload generator.
"""
import asyncio

from config.stations import WIND_GRID
from src.data.models import Phenomenon
from src.data.schemas import ForecastPoint, parse_points
from src.data.simulator import SimulatedClient
from src.data.sources import AtmosphereSource, WaveSource, batch_params, values_of

FIELDS = ["wind_speed_10m", "wind_direction_10m", "pressure_msl"]


class TestSimulatedClient:
    def test_single_point_is_an_object(self):
        payload = SimulatedClient(seed=1).get_json("x", {"latitude": "50", "longitude": "-30", "current": "wave_height"})
        assert isinstance(payload, dict)
        assert payload["latitude"] == 50.0

    def test_batch_is_a_list(self):
        payload = SimulatedClient(seed=1).get_json("x", batch_params(WIND_GRID, FIELDS))
        assert isinstance(payload, list)
        assert len(payload) == len(WIND_GRID)

    def test_reproducible_with_seed(self):
        params = batch_params(WIND_GRID, FIELDS)
        assert SimulatedClient(seed=7).get_json("x", params) == SimulatedClient(seed=7).get_json("x", params)

    def test_values_in_physical_ranges(self):
        payload = SimulatedClient(seed=3).get_json("x", batch_params(WIND_GRID, FIELDS))
        valid, _ = parse_points(payload, ForecastPoint)
        for point in valid:
            c = point.current
            if c.wind_speed_10m is not None:
                assert c.wind_speed_10m >= 0
            if c.pressure_msl is not None:
                assert 930.0 <= c.pressure_msl <= 1060.0
            if c.wind_direction_10m is not None:
                assert 0 <= c.wind_direction_10m <= 360

    def test_most_points_are_well_formed(self):
        payload = SimulatedClient(seed=3).get_json("x", batch_params(WIND_GRID, FIELDS))
        valid, dropped = parse_points(payload, ForecastPoint)
        assert len(valid) > dropped


class TestSourcesOffline:
    def test_atmosphere_source_runs_offline(self):
        readings = asyncio.run(AtmosphereSource(SimulatedClient(seed=5)).fetch())
        assert values_of(readings, Phenomenon.WIND_SPEED)
        assert values_of(readings, Phenomenon.PRESSURE)

    def test_wave_source_runs_offline(self):
        readings = asyncio.run(WaveSource(SimulatedClient(seed=5)).fetch())
        assert values_of(readings, Phenomenon.WAVE_HEIGHT)
