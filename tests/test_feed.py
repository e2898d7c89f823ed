"""
tests/test_feed.py
───────────────────
Tests for the bounded alert feed.
"""
from datetime import timedelta

import pytest

from config.alerts import AlertKind
from src.data.feed import AlertFeed


class TestAlertFeed:
    def test_most_recent_first(self, feed):
        feed.push("first")
        feed.push("second")
        assert [e.message for e in feed.entries()] == ["second", "first"]

    def test_never_exceeds_capacity(self, feed):
        for i in range(12):
            feed.push(f"alert {i}")
            assert len(feed) <= 5
        assert len(feed) == 5

    def test_oldest_evicted_first(self, feed):
        for i in range(7):
            feed.push(f"alert {i}")
        assert [e.message for e in feed.entries()] == [f"alert {i}" for i in (6, 5, 4, 3, 2)]

    def test_entries_are_timestamped(self, feed):
        entry = feed.push("gale", kind=AlertKind.GALE)
        assert entry.timestamp.tzinfo is not None
        assert entry.kind == AlertKind.GALE

    def test_explicit_timestamp(self, feed, now):
        feed.push("a", timestamp=now)
        feed.push("b", timestamp=now + timedelta(seconds=1))
        assert feed.entries()[0].timestamp == now + timedelta(seconds=1)

    def test_muted_flag(self, feed):
        assert feed.push("filler", muted=True).muted

    def test_clear(self, feed):
        feed.push("x")
        feed.clear()
        assert feed.entries() == []

    def test_entries_is_a_snapshot(self, feed):
        feed.push("x")
        snapshot = feed.entries()
        feed.push("y")
        assert len(snapshot) == 1

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            AlertFeed(capacity=0)
