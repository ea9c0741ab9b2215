"""
Orchestrator — Runs one translation end to end.
"""

from cqlbridge.orchestrator.runner import (
    RunResult,
    TranslationRunner,
    EngineLoader,
    status_for_error,
    create_runner,
)

__all__ = [
    "RunResult",
    "TranslationRunner",
    "EngineLoader",
    "status_for_error",
    "create_runner",
]
