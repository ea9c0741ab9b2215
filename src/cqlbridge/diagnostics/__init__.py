"""
Diagnostics — Grouping and reporting of engine diagnostics.
"""

from cqlbridge.diagnostics.context import (
    SourceContext,
    extract_declarations,
    collect_source_context,
)
from cqlbridge.diagnostics.aggregator import (
    DEFAULT_DISPLAY_LIMIT,
    KNOWN_PATTERNS,
    normalize_message,
    DiagnosticGroup,
    group_diagnostics,
    DiagnosticsReport,
)

__all__ = [
    # Context
    "SourceContext",
    "extract_declarations",
    "collect_source_context",
    # Aggregation
    "DEFAULT_DISPLAY_LIMIT",
    "KNOWN_PATTERNS",
    "normalize_message",
    "DiagnosticGroup",
    "group_diagnostics",
    "DiagnosticsReport",
]
