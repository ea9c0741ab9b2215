"""
Strategies — Translator invocation strategies and their selector.
"""

from cqlbridge.strategies.base import (
    TranslationRequest,
    StrategyOutcome,
    StrategyAttempt,
    TranslatorStrategy,
)
from cqlbridge.strategies.builtin import (
    OptionsFileStrategy,
    BasicFileStrategy,
    TextStrategy,
    BUILTIN_STRATEGIES,
)
from cqlbridge.strategies.selector import (
    SelectionResult,
    StrategySelector,
    create_selector,
)

__all__ = [
    # Base
    "TranslationRequest",
    "StrategyOutcome",
    "StrategyAttempt",
    "TranslatorStrategy",
    # Built-in strategies
    "OptionsFileStrategy",
    "BasicFileStrategy",
    "TextStrategy",
    "BUILTIN_STRATEGIES",
    # Selection
    "SelectionResult",
    "StrategySelector",
    "create_selector",
]
