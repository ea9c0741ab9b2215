"""
Capabilities — Runtime probing of the engine's optional operations.
"""

from cqlbridge.capabilities.probe import (
    ProbeResult,
    signature_accepts,
    probe_call,
    set_option_if_available,
    set_signature_level,
)
from cqlbridge.capabilities.options import (
    OPTION_SETTERS,
    apply_compiler_options,
)

__all__ = [
    "ProbeResult",
    "signature_accepts",
    "probe_call",
    "set_option_if_available",
    "set_signature_level",
    "OPTION_SETTERS",
    "apply_compiler_options",
]
