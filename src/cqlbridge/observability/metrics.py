"""
Metrics — In-process counters for the binding layer.

Tracks how often capabilities were found, strategies tried, and
libraries resolved, so verbose runs can summarize engine coverage.
"""

from dataclasses import dataclass, field
from threading import Lock
from typing import Any


class Counter:
    """Monotonically increasing counter."""

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description
        self._value = 0.0
        self._lock = Lock()

    def inc(self, amount: float = 1.0) -> None:
        """Increment counter."""
        with self._lock:
            self._value += amount

    @property
    def value(self) -> float:
        return self._value

    def reset(self) -> None:
        """Reset counter (for testing)."""
        with self._lock:
            self._value = 0.0


class Histogram:
    """
    Simple histogram for tracking distributions.

    Tracks count, sum, min, max for calculating stats.
    """

    def __init__(self, name: str, description: str = ""):
        self.name = name
        self.description = description
        self._count = 0
        self._sum = 0.0
        self._min = float("inf")
        self._max = float("-inf")
        self._lock = Lock()

    def observe(self, value: float) -> None:
        """Record an observation."""
        with self._lock:
            self._count += 1
            self._sum += value
            self._min = min(self._min, value)
            self._max = max(self._max, value)

    @property
    def count(self) -> int:
        return self._count

    @property
    def avg(self) -> float:
        if self._count == 0:
            return 0.0
        return self._sum / self._count

    @property
    def min(self) -> float:
        return self._min if self._count > 0 else 0.0

    @property
    def max(self) -> float:
        return self._max if self._count > 0 else 0.0

    def reset(self) -> None:
        with self._lock:
            self._count = 0
            self._sum = 0.0
            self._min = float("inf")
            self._max = float("-inf")

    def to_dict(self) -> dict[str, float]:
        return {
            "count": self._count,
            "avg": self.avg,
            "min": self.min,
            "max": self.max,
        }


@dataclass
class MetricsRegistry:
    """
    Registry for all cqlbridge metrics.
    """
    # Run metrics
    runs_total: Counter = field(
        default_factory=lambda: Counter("runs_total", "Translation runs started")
    )
    runs_succeeded: Counter = field(
        default_factory=lambda: Counter("runs_succeeded", "Runs that wrote output")
    )
    runs_failed: Counter = field(
        default_factory=lambda: Counter("runs_failed", "Runs ending in any failure status")
    )
    compile_duration_seconds: Histogram = field(
        default_factory=lambda: Histogram("compile_duration_seconds", "Strategy selection time")
    )

    # Capability metrics
    option_probes_applied: Counter = field(
        default_factory=lambda: Counter("option_probes_applied", "Options set on the engine")
    )
    option_probes_skipped: Counter = field(
        default_factory=lambda: Counter("option_probes_skipped", "Options the engine lacks")
    )
    strategy_attempts: Counter = field(
        default_factory=lambda: Counter("strategy_attempts", "Invocation strategies tried")
    )

    # Resolution metrics
    library_resolutions: Counter = field(
        default_factory=lambda: Counter("library_resolutions", "Libraries served from disk")
    )
    library_misses: Counter = field(
        default_factory=lambda: Counter("library_misses", "Library requests answered with absence")
    )

    def to_dict(self) -> dict[str, Any]:
        """Export all metrics as dict."""
        return {
            "runs": {
                "total": self.runs_total.value,
                "succeeded": self.runs_succeeded.value,
                "failed": self.runs_failed.value,
                "compile_duration": self.compile_duration_seconds.to_dict(),
            },
            "capabilities": {
                "options_applied": self.option_probes_applied.value,
                "options_skipped": self.option_probes_skipped.value,
                "strategy_attempts": self.strategy_attempts.value,
            },
            "libraries": {
                "resolved": self.library_resolutions.value,
                "missed": self.library_misses.value,
            },
        }

    def reset(self) -> None:
        """Reset all metrics (for testing)."""
        self.runs_total.reset()
        self.runs_succeeded.reset()
        self.runs_failed.reset()
        self.compile_duration_seconds.reset()
        self.option_probes_applied.reset()
        self.option_probes_skipped.reset()
        self.strategy_attempts.reset()
        self.library_resolutions.reset()
        self.library_misses.reset()


# Global metrics registry
_metrics = MetricsRegistry()


def get_metrics() -> MetricsRegistry:
    """Get global metrics registry."""
    return _metrics


def reset_metrics() -> None:
    """Reset all metrics (for testing)."""
    _metrics.reset()
