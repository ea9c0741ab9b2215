"""
Vocabulary enums — the shared language of the binding layer.

All enumerated types referenced by the configuration record, the
capability probe, the resolver, and the runner.
"""

from enum import Enum


# =============================================================================
# COMPILER OPTIONS
# =============================================================================

class SignatureLevel(str, Enum):
    """
    How much operator signature information the engine writes into ELM.

    Values match the names accepted on the command line.
    """
    NONE = "None"
    DIFFERING = "Differing"
    OVERLOADS = "Overloads"
    ALL = "All"

    @property
    def engine_constant(self) -> str:
        """Name of the matching constant on the engine's enumeration."""
        return self.name


class OutputFormat(str, Enum):
    """Serialized form of the translation result."""
    XML = "XML"    # Structured markup
    JSON = "JSON"  # Structured object

    @property
    def extension(self) -> str:
        return ".json" if self is OutputFormat.JSON else ".xml"

    @property
    def other(self) -> "OutputFormat":
        return OutputFormat.XML if self is OutputFormat.JSON else OutputFormat.JSON


# =============================================================================
# LIBRARY RESOLUTION
# =============================================================================

class ContentType(str, Enum):
    """
    Representation the engine asks for when requesting a library.

    Only CQL is served; anything else makes the engine compile from source.
    """
    CQL = "CQL"
    XML = "XML"
    JSON = "JSON"
    COFFEE = "COFFEE"


# =============================================================================
# CAPABILITY PROBING
# =============================================================================

class ProbeOutcome(str, Enum):
    """Result classification for a single capability probe."""
    APPLIED = "APPLIED"                      # Operation found and call succeeded
    SKIPPED_MISSING = "SKIPPED_MISSING"      # Target has no such operation
    SKIPPED_SIGNATURE = "SKIPPED_SIGNATURE"  # Operation exists, shape differs
    SKIPPED_ERROR = "SKIPPED_ERROR"          # Call raised

    @property
    def applied(self) -> bool:
        return self is ProbeOutcome.APPLIED


# =============================================================================
# RUN STATUS
# =============================================================================

class RunStatus(str, Enum):
    """Terminal status of one translation run."""
    SUCCESS = "SUCCESS"
    COMPILATION_FAILED = "COMPILATION_FAILED"
    STRATEGY_EXHAUSTED = "STRATEGY_EXHAUSTED"
    ENGINE_ERROR = "ENGINE_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"
    IO_ERROR = "IO_ERROR"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES = {
    RunStatus.SUCCESS: 0,
    RunStatus.COMPILATION_FAILED: 1,
    RunStatus.CONFIG_ERROR: 2,
    RunStatus.ENGINE_ERROR: 3,
    RunStatus.STRATEGY_EXHAUSTED: 3,
    RunStatus.IO_ERROR: 4,
}
