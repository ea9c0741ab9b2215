"""Tests for metrics collection."""

from cqlbridge.observability import (
    Counter,
    Histogram,
    get_metrics,
    reset_metrics,
)


class TestCounter:
    """Tests for Counter metric."""

    def test_starts_at_zero(self):
        counter = Counter("test", "Test counter")
        assert counter.value == 0

    def test_increment_by_amount(self):
        counter = Counter("test", "Test counter")
        counter.inc()
        counter.inc(4)
        assert counter.value == 5

    def test_reset(self):
        counter = Counter("test", "Test counter")
        counter.inc(10)
        counter.reset()
        assert counter.value == 0


class TestHistogram:
    """Tests for Histogram metric."""

    def test_empty_histogram(self):
        """Empty histogram reports zeros."""
        hist = Histogram("test")
        assert hist.count == 0
        assert hist.avg == 0.0
        assert hist.min == 0.0
        assert hist.max == 0.0

    def test_observations(self):
        hist = Histogram("test")
        for value in (0.5, 1.5, 1.0):
            hist.observe(value)

        stats = hist.to_dict()
        assert stats["count"] == 3
        assert stats["avg"] == 1.0
        assert stats["min"] == 0.5
        assert stats["max"] == 1.5


class TestMetricsRegistry:
    """Tests for the global registry."""

    def test_registry_is_shared(self):
        get_metrics().runs_total.inc()
        assert get_metrics().runs_total.value == 1

    def test_reset_metrics(self):
        metrics = get_metrics()
        metrics.option_probes_skipped.inc(3)
        metrics.library_resolutions.inc()

        reset_metrics()

        assert metrics.option_probes_skipped.value == 0
        assert metrics.library_resolutions.value == 0

    def test_to_dict_sections(self):
        data = get_metrics().to_dict()
        assert set(data) == {"runs", "capabilities", "libraries"}
        assert data["libraries"] == {"resolved": 0, "missed": 0}
