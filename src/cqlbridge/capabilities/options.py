"""
Option application — Pushes the configuration record onto engine options.
"""

from typing import Any

from cqlbridge.schemas import CompilerOptions
from cqlbridge.observability import get_logger, get_metrics
from cqlbridge.capabilities.probe import (
    ProbeResult,
    set_option_if_available,
    set_signature_level,
)


logger = get_logger("capabilities.options")


# Record field -> engine setter. Order is the order options are applied.
OPTION_SETTERS: dict[str, str] = {
    "date_range_optimization": "setEnableDateRangeOptimization",
    "annotations": "setEnableAnnotations",
    "locators": "setEnableLocators",
    "result_types": "setEnableResultTypes",
    "detailed_errors": "setEnableDetailedErrors",
    "disable_list_traversal": "setDisableListTraversal",
    "disable_list_demotion": "setDisableListDemotion",
    "disable_list_promotion": "setDisableListPromotion",
    "enable_interval_demotion": "setEnableIntervalDemotion",
    "enable_interval_promotion": "setEnableIntervalPromotion",
    "disable_method_invocation": "setDisableMethodInvocation",
    "require_from_keyword": "setRequireFromKeyword",
    "strict": "setStrict",
    "debug": "setDebug",
    "validate_units": "setValidateUnits",
}


def apply_compiler_options(
    target: Any,
    options: CompilerOptions,
    signature_enum: Any = None,
) -> list[ProbeResult]:
    """
    Apply every field of `options` to an engine options object.

    Options the engine lacks are skipped; nothing here raises.

    Args:
        target: Engine-native options instance
        options: The run's option configuration record
        signature_enum: Engine enumeration for signature levels, if known

    Returns:
        One ProbeResult per field, in application order
    """
    metrics = get_metrics()
    results = []

    for field_name, setter in OPTION_SETTERS.items():
        results.append(set_option_if_available(target, setter, getattr(options, field_name)))

    results.append(set_signature_level(target, options.signature_level, signature_enum))

    for result in results:
        if result.applied:
            metrics.option_probes_applied.inc()
        else:
            metrics.option_probes_skipped.inc()

    skipped = [r.operation for r in results if not r.applied]
    if skipped:
        logger.debug("Engine options not available: %s", ", ".join(skipped))

    return results
