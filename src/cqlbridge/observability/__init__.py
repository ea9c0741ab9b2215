"""
Observability — Logging and metrics for cqlbridge.

Provides:
- Structured logging with run ID
- Metrics collection (counters, histograms)
"""

from cqlbridge.observability.logging import (
    set_run_id,
    get_run_id,
    configure_logging,
    get_logger,
    LogContext,
    JSONFormatter,
    ReadableFormatter,
)
from cqlbridge.observability.metrics import (
    Counter,
    Histogram,
    MetricsRegistry,
    get_metrics,
    reset_metrics,
)

__all__ = [
    # Logging
    "set_run_id",
    "get_run_id",
    "configure_logging",
    "get_logger",
    "LogContext",
    "JSONFormatter",
    "ReadableFormatter",
    # Metrics
    "Counter",
    "Histogram",
    "MetricsRegistry",
    "get_metrics",
    "reset_metrics",
]
