"""
Schemas — Validated configuration models.

Provides:
- CompilerOptions: translator option configuration record
- RunConfig: settings for a single translation run
"""

from cqlbridge.schemas.options import CompilerOptions
from cqlbridge.schemas.run_config import (
    RunConfig,
    DEFAULT_OUTPUT,
    DEFAULT_STRATEGIES,
)

__all__ = [
    "CompilerOptions",
    "RunConfig",
    "DEFAULT_OUTPUT",
    "DEFAULT_STRATEGIES",
]
