"""
src/analytics/engine.py
────────────────────────
Aggregation engine: owns the per-phenomenon sample buffers and derives the
stress index, severity tier, chart series and alert entries from them.

Buffers are replaced wholesale on every ingest and the engine recomputes
synchronously afterwards. Recomputation depends only on the current set of
buffers, so ingests may arrive redundantly and in any order; empty buffers
mean "no data yet".

Alerting is level-triggered by default: a condition that holds fires again on
every recomputation. `edge_triggered=True` fires once per transition into
the condition instead.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime

import numpy as np

from config.alerts import SYSTEM_CHECK_MESSAGE, AlertKind
from config.settings import settings
from src.analytics.stress_index import (
    classify_severity,
    compute_statistics,
    compute_stress_index,
    derive_chart_series,
)
from src.analytics.thresholds import VALIDITY_PREDICATES, Predicate, active_alerts, validate
from src.data.feed import AlertFeed
from src.data.models import AlertEntry, BufferKey, Statistics, StressSnapshot

LOG = logging.getLogger(__name__)


class AggregationEngine:
    def __init__(
        self,
        feed: AlertFeed | None = None,
        edge_triggered: bool = settings.EDGE_TRIGGERED_ALERTS,
        system_check_probability: float = settings.SYSTEM_CHECK_PROBABILITY,
        rng: np.random.Generator | None = None,
    ):
        self.feed = feed if feed is not None else AlertFeed()
        self.edge_triggered = edge_triggered
        self.system_check_probability = system_check_probability
        self._rng = rng if rng is not None else np.random.default_rng()
        self._buffers: dict[BufferKey, tuple[float | None, ...]] = {key: () for key in BufferKey}
        self._active_kinds: set[AlertKind] = set()
        self._latest = StressSnapshot(timestamp=datetime.now(tz=UTC))
        self._lock = threading.RLock()

    # ── Mutators ──────────────────────────────────────────────────────────────

    def ingest(self, phenomenon: BufferKey | str, values: Iterable[float | None]) -> None:
        """Replace one sample buffer and recompute."""
        self.ingest_many({phenomenon: values})

    def ingest_many(self, updates: Mapping[BufferKey | str, Iterable[float | None]]) -> None:
        """Replace several buffers in one step, then recompute once."""
        swapped: dict[BufferKey, tuple[float | None, ...]] = {}
        for raw_key, values in updates.items():
            try:
                key = BufferKey(raw_key)
            except ValueError:
                LOG.warning("Ignoring ingest for unknown phenomenon %r", raw_key)
                continue
            swapped[key] = tuple(values) if values is not None else ()

        if not swapped:
            return

        with self._lock:
            self._buffers.update(swapped)
            LOG.debug("Ingested %s", {k.value: len(v) for k, v in swapped.items()})
            self.recompute()

    def recompute(self) -> StressSnapshot:
        """Derive statistics, index, tier, chart series and alerts from the current buffers."""
        with self._lock:
            validated = {key: self.validated(key) for key in BufferKey}
            stats = compute_statistics(validated)
            if any(validated.values()):
                stress = compute_stress_index(stats.avg_wave, stats.max_wind, stats.min_pressure, stats.max_uv)
            else:
                # No data at all yet: report calm, not the 1013 hPa default offset
                stress = 0.0
            tier = classify_severity(stress)
            series = derive_chart_series(stress, stats.avg_wave, stats.max_wind, stats.min_pressure, stats.max_uv)
            fired = self._fire_alerts(stats)

            self._latest = StressSnapshot(
                timestamp=datetime.now(tz=UTC),
                statistics=stats,
                stress=stress,
                tier=tier,
                chart_series=series,
                alerts=fired,
            )
            LOG.debug("Stress %.2f (%s), %d alert(s)", stress, tier.value, len(fired))
            return self._latest

    # ── Derivations ───────────────────────────────────────────────────────────

    @staticmethod
    def validate(values: Iterable[float | None], predicate: Predicate) -> list[float]:
        return validate(values, predicate)

    def validated(self, key: BufferKey | str) -> list[float]:
        key = BufferKey(key)
        with self._lock:
            raw = self._buffers[key]
        return validate(raw, VALIDITY_PREDICATES[key])

    def compute_statistics(self) -> Statistics:
        with self._lock:
            return compute_statistics({key: self.validated(key) for key in BufferKey})

    def _fire_alerts(self, stats: Statistics) -> list[AlertEntry]:
        conditions = active_alerts(stats)
        now_active = {c.kind for c in conditions}

        if self.edge_triggered:
            to_fire = [c for c in conditions if c.kind not in self._active_kinds]
        else:
            to_fire = conditions
        self._active_kinds = now_active

        fired = [self.feed.push(c.message, kind=c.kind) for c in to_fire]

        if self.system_check_probability > 0 and self._rng.random() < self.system_check_probability:
            fired.append(self.feed.push(SYSTEM_CHECK_MESSAGE, kind=AlertKind.SYSTEM, muted=True))
        return fired

    # ── Accessors ─────────────────────────────────────────────────────────────

    @property
    def latest(self) -> StressSnapshot:
        with self._lock:
            return self._latest

    def buffer(self, key: BufferKey | str) -> tuple[float | None, ...]:
        with self._lock:
            return self._buffers[BufferKey(key)]
