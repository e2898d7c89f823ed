"""
tests/test_orchestrator.py
───────────────────────────
Tests for the observation cycle: concurrent fetch, completion-order reduction,
multiplexing and failure isolation.
"""
import asyncio

import requests

from config.alerts import FAILURE_MESSAGE, STARTUP_MESSAGE, AlertKind
from src.data.models import BufferKey, Phenomenon, Reading
from src.data.simulator import SimulatedClient
from src.data.sources import ReadingSource, SourceUnavailable, WaveSource
from src.layers.builders import build_pressure_layer, build_wave_layer, build_wind_layer
from src.layers.registry import LayerRegistry
from src.orchestrator import ObservationCycle, SourceBinding, default_bindings


class StubSource(ReadingSource):
    """Returns canned readings after an optional delay, or raises."""

    def __init__(self, name, readings=None, delay=0.0, error=None, log=None):
        self.name = name
        self.readings = readings or []
        self.delay = delay
        self.error = error
        self.log = log if log is not None else []

    async def fetch(self):
        await asyncio.sleep(self.delay)
        self.log.append(self.name)
        if self.error is not None:
            raise self.error
        return self.readings


def _r(phenomenon, value, lat=0.0):
    return Reading(phenomenon=phenomenon, latitude=lat, longitude=0.0, value=value)


def _cycle(engine, bindings):
    return ObservationCycle(engine, LayerRegistry(), bindings=bindings)


class TestRunOnce:
    def test_startup_message_first(self, engine):
        engine.feed.push("stale")
        asyncio.run(_cycle(engine, []).run_once())
        assert [e.message for e in engine.feed.entries()] == [STARTUP_MESSAGE]

    def test_status_after_launch(self, engine):
        cycle = _cycle(engine, [])
        asyncio.run(cycle.run_once())
        assert cycle.status.text == "OCEAN OBSERVATION ACTIVE"
        assert cycle.status.last_update is not None
        assert cycle.status.thermocline == "Stable Stratification"

    def test_tile_layers_registered(self, engine):
        cycle = _cycle(engine, [])
        asyncio.run(cycle.run_once())
        assert {"sst", "chloro", "sealevel"} <= set(cycle.registry.keys())

    def test_results_applied_in_completion_order(self, engine):
        log = []
        bindings = [
            SourceBinding(StubSource("slow", [_r(Phenomenon.WAVE_HEIGHT, 2.0)], delay=0.05, log=log),
                          buffers={BufferKey.WAVES: Phenomenon.WAVE_HEIGHT}),
            SourceBinding(StubSource("fast", [_r(Phenomenon.UV_INDEX, 9.0)], log=log),
                          buffers={BufferKey.UV: Phenomenon.UV_INDEX}),
        ]
        asyncio.run(_cycle(engine, bindings).run_once())
        assert log == ["fast", "slow"]
        assert engine.buffer("waves") == (2.0,)
        assert engine.buffer("uv") == (9.0,)

    def test_one_fetch_feeds_two_buffers_and_layers(self, engine):
        readings = [
            _r(Phenomenon.WIND_SPEED, 55.0),
            _r(Phenomenon.WIND_DIRECTION, 270.0),
            _r(Phenomenon.PRESSURE, 985.0),
        ]
        binding = SourceBinding(
            StubSource("wind", readings),
            buffers={BufferKey.WIND: Phenomenon.WIND_SPEED, BufferKey.PRESSURE: Phenomenon.PRESSURE},
            builders=[build_wind_layer, build_pressure_layer],
        )
        cycle = _cycle(engine, [binding])
        asyncio.run(cycle.run_once())

        assert engine.buffer("wind") == (55.0,)
        assert engine.buffer("pressure") == (985.0,)
        assert cycle.registry.get("wind").size == 1
        assert cycle.registry.get("pressure").size == 1
        # both buffers landed in one recompute: each alert fires once
        kinds = [e.kind for e in engine.feed.entries()]
        assert kinds.count(AlertKind.GALE) == 1
        assert kinds.count(AlertKind.STORM) == 1

    def test_unavailable_source_keeps_previous_buffers(self, engine):
        engine.ingest("uv", [4.0])
        bindings = [
            SourceBinding(StubSource("uv", error=SourceUnavailable("down")), buffers={BufferKey.UV: Phenomenon.UV_INDEX}),
            SourceBinding(StubSource("waves", [_r(Phenomenon.WAVE_HEIGHT, 1.0)]),
                          buffers={BufferKey.WAVES: Phenomenon.WAVE_HEIGHT}, builders=[build_wave_layer]),
        ]
        cycle = _cycle(engine, bindings)
        asyncio.run(cycle.run_once())
        assert engine.buffer("uv") == (4.0,)
        assert engine.buffer("waves") == (1.0,)
        assert cycle.status.text == "OCEAN OBSERVATION ACTIVE"

    def test_crashing_source_is_isolated(self, engine):
        bindings = [
            SourceBinding(StubSource("broken", error=KeyError("x")), buffers={BufferKey.WIND: Phenomenon.WIND_SPEED}),
            SourceBinding(StubSource("uv", [_r(Phenomenon.UV_INDEX, 2.0)]), buffers={BufferKey.UV: Phenomenon.UV_INDEX}),
        ]
        asyncio.run(_cycle(engine, bindings).run_once())
        assert engine.buffer("wind") == ()
        assert engine.buffer("uv") == (2.0,)

    def test_failure_during_launch(self, engine, monkeypatch):
        def explode():
            raise RuntimeError("tiles")

        monkeypatch.setattr("src.orchestrator.build_tile_layers", explode)
        cycle = _cycle(engine, [])
        asyncio.run(cycle.run_once())
        assert cycle.status.text == "SYSTEM CRITICAL FAILURE"
        assert engine.feed.entries()[0].message == FAILURE_MESSAGE

    def test_refresh_does_not_clear_feed(self, engine):
        cycle = _cycle(engine, [])
        asyncio.run(cycle.run_once())
        engine.feed.push("kept")
        asyncio.run(cycle.run_once(startup=False))
        assert [e.message for e in engine.feed.entries()] == ["kept", STARTUP_MESSAGE]

    def test_total_wave_outage_keeps_previous_waves(self, engine, fake_client_cls):
        engine.ingest("waves", [4.0, 5.0])
        registry = LayerRegistry()
        registry.put(build_wave_layer([_r(Phenomenon.WAVE_HEIGHT, 4.0), _r(Phenomenon.WAVE_HEIGHT, 5.0, lat=1.0)]))
        binding = SourceBinding(
            WaveSource(fake_client_cls(error=requests.Timeout("slow"))),
            buffers={BufferKey.WAVES: Phenomenon.WAVE_HEIGHT},
            builders=[build_wave_layer],
        )
        asyncio.run(ObservationCycle(engine, registry, bindings=[binding]).run_once(startup=False))

        assert engine.buffer("waves") == (4.0, 5.0)
        assert registry.get("waves").size == 2
        assert engine.latest.statistics.avg_wave == 4.5


class TestDefaultBindings:
    def test_offline_cycle_populates_everything(self, engine):
        cycle = ObservationCycle(engine, LayerRegistry(), bindings=default_bindings(SimulatedClient(seed=11)))
        asyncio.run(cycle.run_once())

        for key in BufferKey:
            assert engine.buffer(key), key
        assert {"waves", "wind", "pressure", "salinity", "radiation"} <= set(cycle.registry.keys())
        assert 0.0 <= engine.latest.stress <= 10.0

    def test_wave_layer_built_from_wave_source(self):
        bindings = default_bindings(SimulatedClient(seed=1))
        assert bindings[0].builders == [build_wave_layer]
        assert set(bindings[1].buffers) == {BufferKey.WIND, BufferKey.PRESSURE}


class TestBackground:
    def test_single_cycle_when_interval_zero(self, engine):
        bindings = [SourceBinding(StubSource("uv", [_r(Phenomenon.UV_INDEX, 3.0)]),
                                  buffers={BufferKey.UV: Phenomenon.UV_INDEX})]
        cycle = _cycle(engine, bindings)
        thread = cycle.start_background(interval_s=0)
        thread.join(timeout=5)
        assert not thread.is_alive()
        assert engine.buffer("uv") == (3.0,)

    def test_stop_joins_running_thread(self, engine):
        cycle = _cycle(engine, [])
        thread = cycle.start_background(interval_s=60)
        cycle.stop(timeout=5)
        assert not thread.is_alive()
