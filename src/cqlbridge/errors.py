"""
Errors — Exception hierarchy for the binding layer.

Every failure the runner can report derives from BridgeError so callers
can convert it into a terminal run status in one place.
"""


class BridgeError(Exception):
    """Base exception for all binding-layer errors."""
    pass


class ConfigurationError(BridgeError):
    """
    Raised when run configuration cannot be built.

    Examples:
    - Unrecognized signature level
    - Unknown strategy name
    """
    pass


class EngineUnavailableError(BridgeError):
    """
    Raised when the translation engine cannot be loaded or constructed.

    Covers JVM startup failure, missing engine classes, and exceptions
    thrown by the model or library manager constructors.
    """
    pass


class CapabilityMissingError(BridgeError):
    """
    Raised when the loaded engine does not expose a required operation.

    Strategies treat this as "not supported here" and move on.
    """

    def __init__(self, capability: str, detail: str = ""):
        self.capability = capability
        message = f"Engine does not support {capability}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class StrategyExhaustedError(BridgeError):
    """Raised when no invocation strategy produced a translator."""
    pass


class CompilationFailedError(BridgeError):
    """Raised when the engine reports diagnostics for the input."""

    def __init__(self, message: str, diagnostics: list | None = None):
        super().__init__(message)
        self.diagnostics = list(diagnostics or [])


class OutputWriteError(BridgeError):
    """Raised when reading the input or writing the output artifact fails."""
    pass
