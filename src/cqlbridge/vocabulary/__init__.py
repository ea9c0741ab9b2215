"""
Vocabulary — Shared enumerations for the binding layer.
"""

from cqlbridge.vocabulary.enums import (
    SignatureLevel,
    OutputFormat,
    ContentType,
    ProbeOutcome,
    RunStatus,
)

__all__ = [
    "SignatureLevel",
    "OutputFormat",
    "ContentType",
    "ProbeOutcome",
    "RunStatus",
]
