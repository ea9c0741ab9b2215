"""
cqlbridge — Adaptive binding to the CQL-to-ELM translation engine.

Drives an engine whose API shape varies between versions:
- Probes optional translator options and entry points at runtime
- Resolves dependent libraries from a directory on disk
- Condenses engine diagnostics into a readable report
"""

__version__ = "0.1.0"
