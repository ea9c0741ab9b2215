"""
Strategy Selector — Picks the first invocation strategy the engine supports.

Strategies are tried strictly in order; the first that returns a
translator wins. Failures are recorded, never raised.
"""

from dataclasses import dataclass, field
from typing import Any

from cqlbridge.engine import EngineBinding
from cqlbridge.errors import ConfigurationError
from cqlbridge.observability import get_logger, get_metrics
from cqlbridge.schemas import DEFAULT_STRATEGIES
from cqlbridge.strategies.base import (
    TranslatorStrategy,
    TranslationRequest,
    StrategyAttempt,
)
from cqlbridge.strategies.builtin import BUILTIN_STRATEGIES


logger = get_logger("strategies")


@dataclass
class SelectionResult:
    """
    Result of strategy selection.

    `handle` is None when every strategy failed.
    """
    handle: Any = None
    strategy: str | None = None
    attempts: list[StrategyAttempt] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.handle is not None

    def failure_summary(self) -> str:
        """One line per failed attempt."""
        return "\n".join(
            f"  {a.strategy}: {a.reason}" for a in self.attempts if not a.succeeded
        )


class StrategySelector:
    """
    Ordered list of invocation strategies.

    Usage:
        selector = StrategySelector.from_names(["options-file", "basic-file"])
        result = selector.select(binding, request)
    """

    def __init__(self, strategies: list[TranslatorStrategy] | None = None):
        if strategies is None:
            strategies = [BUILTIN_STRATEGIES[name]() for name in DEFAULT_STRATEGIES]
        self.strategies = list(strategies)

    @classmethod
    def from_names(cls, names: list[str] | tuple[str, ...]) -> "StrategySelector":
        """
        Build a selector from strategy names.

        Raises:
            ConfigurationError: Unknown name
        """
        unknown = [name for name in names if name not in BUILTIN_STRATEGIES]
        if unknown:
            raise ConfigurationError(
                f"Unknown strategy: {', '.join(unknown)} "
                f"(available: {', '.join(BUILTIN_STRATEGIES)})"
            )
        return cls([BUILTIN_STRATEGIES[name]() for name in names])

    @property
    def names(self) -> list[str]:
        return [s.name for s in self.strategies]

    def select(self, binding: EngineBinding, request: TranslationRequest) -> SelectionResult:
        """
        Try each strategy until one yields a translator.

        Args:
            binding: Loaded engine
            request: Input file, library manager, and options

        Returns:
            SelectionResult with the translator handle or all failures
        """
        metrics = get_metrics()
        result = SelectionResult()

        for strategy in self.strategies:
            metrics.strategy_attempts.inc()
            try:
                outcome = strategy.invoke(binding, request)
            except Exception as e:
                reason = str(e) or type(e).__name__
                logger.debug("Strategy %s failed: %s", strategy.name, reason)
                result.attempts.append(
                    StrategyAttempt(strategy.name, False, reason, description=strategy.description)
                )
                continue

            if outcome.handle is None:
                logger.debug("Strategy %s returned no translator", strategy.name)
                result.attempts.append(
                    StrategyAttempt(
                        strategy.name, False, "no translator returned", outcome.probes,
                        description=strategy.description,
                    )
                )
                continue

            logger.debug("Using strategy %s", strategy.name)
            result.attempts.append(StrategyAttempt(
                strategy.name, True, probes=outcome.probes, description=strategy.description,
            ))
            result.handle = outcome.handle
            result.strategy = strategy.name
            return result

        return result


def create_selector(names: list[str] | tuple[str, ...] | None = None) -> StrategySelector:
    """Factory for a selector over built-in strategies."""
    if names is None:
        return StrategySelector()
    return StrategySelector.from_names(names)
