"""
Strategy Infrastructure — Base types for translator invocation strategies.

A strategy is one way of asking the engine to compile the input. The
selector tries strategies in order until one yields a translator.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from cqlbridge.schemas import CompilerOptions
from cqlbridge.capabilities import ProbeResult
from cqlbridge.engine import EngineBinding


@dataclass
class TranslationRequest:
    """Inputs shared by every strategy for one run."""
    input_path: Path
    library_manager: Any
    options: CompilerOptions = field(default_factory=CompilerOptions)


@dataclass
class StrategyOutcome:
    """What a strategy produced: the translator plus any option probes."""
    handle: Any
    probes: list[ProbeResult] = field(default_factory=list)


@dataclass
class StrategyAttempt:
    """Record of one strategy being tried."""
    strategy: str
    succeeded: bool
    reason: str | None = None
    probes: list[ProbeResult] = field(default_factory=list)
    description: str = ""


class TranslatorStrategy(ABC):
    """
    Abstract base class for invocation strategies.

    Subclasses implement invoke(), raising on any failure.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def invoke(self, binding: EngineBinding, request: TranslationRequest) -> StrategyOutcome:
        pass

    def __repr__(self) -> str:
        return f"<Strategy:{self.name}>"
