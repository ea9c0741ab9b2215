"""
Capability Probe — Guarded invocation of optional engine operations.

The engine's API differs between releases, so any operation may be
absent, take different parameters, or reject a value. A probe attempts
the call and reports what happened instead of raising.
"""

import inspect
from dataclasses import dataclass
from typing import Any

from cqlbridge.vocabulary import ProbeOutcome, SignatureLevel
from cqlbridge.observability import get_logger


logger = get_logger("capabilities")


@dataclass
class ProbeResult:
    """
    Outcome of one capability probe.

    `value` holds the call's return value when applied; `error` holds a
    short reason when skipped.
    """
    operation: str
    outcome: ProbeOutcome
    value: Any = None
    error: str | None = None

    @property
    def applied(self) -> bool:
        return self.outcome.applied

    @classmethod
    def ok(cls, operation: str, value: Any = None) -> "ProbeResult":
        return cls(operation=operation, outcome=ProbeOutcome.APPLIED, value=value)

    @classmethod
    def skipped(cls, operation: str, outcome: ProbeOutcome, error: str) -> "ProbeResult":
        return cls(operation=operation, outcome=outcome, error=error)


def signature_accepts(func: Any, args: tuple) -> bool | None:
    """
    Check whether `func` can be called with `args` positionally.

    Returns None when the signature cannot be introspected (Java methods
    exposed through JPype, C builtins); the call itself is the test then.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    try:
        sig.bind(*args)
    except TypeError:
        return False
    return True


def probe_call(target: Any, operation: str, *args: Any) -> ProbeResult:
    """
    Attempt `target.operation(*args)` without ever raising.

    Args:
        target: Engine object (instance or class) of uncertain shape
        operation: Attribute name of the operation
        *args: Positional arguments for the call

    Returns:
        ProbeResult; APPLIED only when the call completed
    """
    if target is None:
        return ProbeResult.skipped(operation, ProbeOutcome.SKIPPED_MISSING, "no target")

    func = getattr(target, operation, None)
    if func is None or not callable(func):
        logger.debug("Capability %s not available on %s", operation, type(target).__name__)
        return ProbeResult.skipped(operation, ProbeOutcome.SKIPPED_MISSING, "not available")

    if signature_accepts(func, args) is False:
        logger.debug("Capability %s does not take %d argument(s)", operation, len(args))
        return ProbeResult.skipped(
            operation,
            ProbeOutcome.SKIPPED_SIGNATURE,
            f"does not accept {len(args)} argument(s)",
        )

    try:
        value = func(*args)
    except Exception as e:
        logger.debug("Capability %s failed: %s", operation, e)
        return ProbeResult.skipped(operation, ProbeOutcome.SKIPPED_ERROR, str(e) or type(e).__name__)

    return ProbeResult.ok(operation, value)


def set_option_if_available(target: Any, setter: str, value: Any) -> ProbeResult:
    """Set one option through `setter` if the engine exposes it."""
    return probe_call(target, setter, value)


def set_signature_level(
    target: Any,
    level: SignatureLevel,
    enum_type: Any = None,
    setter: str = "setSignatureLevel",
) -> ProbeResult:
    """
    Set the signature level, trying a string value first.

    Older engines accept the level name directly. Newer ones only take
    their own enumeration; when `enum_type` is given the level is mapped
    onto its constant and the setter is tried again.
    """
    result = probe_call(target, setter, level.value)
    if result.applied or enum_type is None:
        return result

    constant = getattr(enum_type, level.engine_constant, None)
    if constant is None:
        return ProbeResult.skipped(
            setter,
            ProbeOutcome.SKIPPED_MISSING,
            f"engine enumeration has no {level.engine_constant}",
        )
    return probe_call(target, setter, constant)
