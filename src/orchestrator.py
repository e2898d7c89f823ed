"""
src/orchestrator.py
───────────────────
Observation cycle: fire every reading source concurrently and reduce each
result into the aggregation engine and the layer registry as it arrives.

Each source runs as its own asyncio task. Completions are consumed one at a
time on the event loop, so the engine sees a single writer and needs no
ordering between phenomena. One fetch can feed several buffers and several
layer builders (the atmosphere fetch feeds wind + pressure).

A source that raises SourceUnavailable leaves its buffers as they were.
There is no timeout at this level; a fetch that never resolves leaves its
buffers stale.
"""
from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime

from config.alerts import FAILURE_MESSAGE, STARTUP_MESSAGE
from config.settings import settings
from src.analytics.engine import AggregationEngine
from src.data.models import BufferKey, CycleStatus, Phenomenon, Reading
from src.data.simulator import SimulatedClient
from src.data.sources import (
    AtmosphereSource,
    CurrentSource,
    HttpClient,
    RadiationSource,
    ReadingSource,
    SourceUnavailable,
    UVSource,
    WaveSource,
    values_of,
)
from src.layers.builders import (
    LayerBuilder,
    build_current_layer,
    build_pressure_layer,
    build_radiation_layer,
    build_tile_layers,
    build_wave_layer,
    build_wind_layer,
)
from src.layers.registry import LayerRegistry

LOG = logging.getLogger(__name__)


@dataclass
class SourceBinding:
    """Where one source's readings go: engine buffers and layer builders."""
    source: ReadingSource
    buffers: dict[BufferKey, Phenomenon] = field(default_factory=dict)
    builders: list[LayerBuilder] = field(default_factory=list)
    status: tuple[str, str] | None = None  # (text, color) shown at launch


def make_client() -> HttpClient | SimulatedClient:
    return SimulatedClient() if settings.OFFLINE_MODE else HttpClient()


def default_bindings(client: HttpClient | SimulatedClient) -> list[SourceBinding]:
    return [
        SourceBinding(
            WaveSource(client),
            buffers={BufferKey.WAVES: Phenomenon.WAVE_HEIGHT},
            builders=[build_wave_layer],
            status=("Loading Wave Dynamics...", "cyan"),
        ),
        SourceBinding(
            AtmosphereSource(client),
            buffers={BufferKey.WIND: Phenomenon.WIND_SPEED, BufferKey.PRESSURE: Phenomenon.PRESSURE},
            builders=[build_wind_layer, build_pressure_layer],
            status=("Analyzing Global Winds...", "blue"),
        ),
        SourceBinding(CurrentSource(client), builders=[build_current_layer]),
        SourceBinding(UVSource(client), buffers={BufferKey.UV: Phenomenon.UV_INDEX}),
        SourceBinding(RadiationSource(), builders=[build_radiation_layer]),
    ]


class ObservationCycle:
    def __init__(
        self,
        engine: AggregationEngine,
        registry: LayerRegistry,
        bindings: list[SourceBinding] | None = None,
        status: CycleStatus | None = None,
    ):
        self.engine = engine
        self.registry = registry
        self.bindings = bindings if bindings is not None else default_bindings(make_client())
        self.status = status or CycleStatus()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def _set_status(self, text: str, color: str) -> None:
        self.status.text = text
        self.status.color = color
        LOG.info("status: %s", text)

    def apply(self, binding: SourceBinding, readings: list[Reading]) -> None:
        """Multiplex one completed fetch into its layers and buffers."""
        for builder in binding.builders:
            self.registry.put(builder(readings))
        updates = {key: values_of(readings, phenomenon) for key, phenomenon in binding.buffers.items()}
        if updates:
            self.engine.ingest_many(updates)

    @staticmethod
    async def _fetch(binding: SourceBinding) -> tuple[SourceBinding, list[Reading]]:
        return binding, await binding.source.fetch()

    async def run_once(self, startup: bool = True) -> None:
        """
        One observation cycle.

        On startup the alert feed is cleared and the startup message logged.
        Results are applied in completion order, not launch order.
        """
        try:
            if startup:
                self.engine.feed.clear()
                self.engine.feed.push(STARTUP_MESSAGE)

            for layer in build_tile_layers():
                self.registry.put(layer)

            tasks = []
            for binding in self.bindings:
                if binding.status:
                    self._set_status(*binding.status)
                tasks.append(asyncio.create_task(self._fetch(binding), name=binding.source.name))

            self._set_status("OCEAN OBSERVATION ACTIVE", "green")
            self.status.last_update = datetime.now(tz=UTC)
            self.status.thermocline = "Stable Stratification"
        except Exception:
            LOG.exception("Observation cycle failed to start")
            self._set_status("SYSTEM CRITICAL FAILURE", "red")
            self.engine.feed.push(FAILURE_MESSAGE)
            return

        for finished in asyncio.as_completed(tasks):
            try:
                binding, readings = await finished
            except SourceUnavailable as e:
                LOG.warning("%s; keeping previous buffers", e)
                continue
            except Exception:
                LOG.exception("Reading source crashed; keeping previous buffers")
                continue
            self.apply(binding, readings)

    # ── Background scheduling ─────────────────────────────────────────────────

    async def _run_forever(self, interval_s: float) -> None:
        startup = True
        while not self._stop.is_set():
            await self.run_once(startup=startup)
            startup = False
            if interval_s <= 0:
                break
            await asyncio.to_thread(self._stop.wait, interval_s)

    def start_background(self, interval_s: float = settings.REFRESH_INTERVAL_S) -> threading.Thread:
        """Run cycles on a daemon thread with its own event loop."""
        if self._thread is not None and self._thread.is_alive():
            return self._thread
        self._stop.clear()
        self._thread = threading.Thread(
            target=lambda: asyncio.run(self._run_forever(interval_s)),
            name="observation-cycle",
            daemon=True,
        )
        self._thread.start()
        return self._thread

    def stop(self, timeout: float | None = 5.0) -> None:
        """Signal the loop to stop and wait for the cycle in flight to finish."""
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                LOG.warning("Observation cycle still running after %ss", timeout)
