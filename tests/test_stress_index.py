"""
tests/test_stress_index.py
───────────────────────────
Tests for statistics, the stress index formula, tiers and the chart series.
"""

import math

import pytest

from config.alerts import SeverityTier
from src.analytics.stress_index import (
    bar_width_pct,
    classify_severity,
    compute_statistics,
    compute_stress_index,
    derive_chart_series,
)
from src.data.models import BufferKey


class TestComputeStatistics:
    def test_empty_buffers_yield_defaults(self):
        stats = compute_statistics({})
        assert stats.avg_wave == 0.0
        assert stats.max_wind == 0.0
        assert stats.min_pressure == 1013.0
        assert stats.max_uv == 0.0

    def test_partial_buffers(self):
        stats = compute_statistics({BufferKey.WIND: [12.0, 33.0]})
        assert stats.max_wind == 33.0
        assert stats.avg_wave == 0.0
        assert stats.min_pressure == 1013.0

    def test_mean_max_min(self):
        stats = compute_statistics({
            BufferKey.WAVES: [2.0, 4.0, 8.0],
            BufferKey.WIND: [10.0, 50.0],
            BufferKey.PRESSURE: [995.0, 1005.0],
            BufferKey.UV: [3.0, 9.0],
        })
        assert stats.avg_wave == pytest.approx(14.0 / 3)
        assert stats.max_wind == 50.0
        assert stats.min_pressure == 995.0
        assert stats.max_uv == 9.0


class TestComputeStressIndex:
    def test_default_pressure_leaves_small_offset(self):
        # (1015 - 1013) / 25 = 0.08
        assert compute_stress_index(0.0, 0.0, 1013.0, 0.0) == pytest.approx(0.08)

    def test_formula_terms(self):
        stress = compute_stress_index(3.0, 60.0, 990.0, 12.0)
        assert stress == pytest.approx(1.0 + 1.0 + 1.0 + 1.5)

    def test_scenario_value(self):
        stress = compute_stress_index(14.0 / 3, 50.0, 995.0, 9.0)
        assert stress == pytest.approx(4.3139, abs=1e-3)

    @pytest.mark.parametrize(
        "inputs",
        [
            (100.0, 500.0, 800.0, 40.0),
            (1e9, 1e9, -1e9, 1e9),
            (math.inf, 0.0, 1013.0, 0.0),
        ],
    )
    def test_clamped_to_ten(self, inputs):
        assert compute_stress_index(*inputs) == 10.0

    @pytest.mark.parametrize(
        "inputs",
        [
            (-50.0, -100.0, 1100.0, -5.0),
            (0.0, 0.0, 1e9, 0.0),
        ],
    )
    def test_clamped_to_zero(self, inputs):
        assert compute_stress_index(*inputs) == 0.0

    def test_opposing_infinities_do_not_escape_range(self):
        stress = compute_stress_index(math.inf, 0.0, math.inf, 0.0)
        assert 0.0 <= stress <= 10.0


class TestClassifySeverity:
    @pytest.mark.parametrize(
        "stress, tier",
        [
            (0.0, SeverityTier.STABLE),
            (2.99, SeverityTier.STABLE),
            (3.0, SeverityTier.STABLE),
            (3.01, SeverityTier.UNSTABLE),
            (6.0, SeverityTier.UNSTABLE),
            (6.01, SeverityTier.HIGH_ALERT),
            (10.0, SeverityTier.HIGH_ALERT),
        ],
    )
    def test_boundaries(self, stress, tier):
        assert classify_severity(stress) == tier

    def test_partition_is_total(self):
        for i in range(0, 1001):
            assert classify_severity(i / 100) in set(SeverityTier)


class TestDeriveChartSeries:
    def test_reference_example(self):
        assert derive_chart_series(5, 2, 30, 1000, 6) == [40, 20, 15, 65, 25, 10, 10, 12]

    def test_calm_series_is_zero(self):
        assert derive_chart_series(0.0, 0.0, 0.0, 1013.0, 0.0) == [0.0] * 8

    def test_has_eight_points(self):
        assert len(derive_chart_series(1.0, 1.0, 1.0, 1.0, 1.0)) == 8


class TestBarWidth:
    def test_max_is_hundred_percent(self):
        assert bar_width_pct(10.0) == 100.0

    def test_proportional(self):
        assert bar_width_pct(4.3) == pytest.approx(43.0)
