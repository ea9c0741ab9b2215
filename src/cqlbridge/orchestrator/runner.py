"""
Translation Runner — Sequences one CQL-to-ELM translation.

Coordinates engine loading, library resolution, strategy selection,
diagnostics, and output writing. Every failure ends as a RunResult;
nothing escapes run().
"""

import time
import traceback
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable
from uuid import uuid4

from cqlbridge.vocabulary import RunStatus
from cqlbridge.errors import (
    BridgeError,
    ConfigurationError,
    EngineUnavailableError,
    CapabilityMissingError,
    StrategyExhaustedError,
    CompilationFailedError,
    OutputWriteError,
)
from cqlbridge.schemas import RunConfig
from cqlbridge.engine import EngineBinding
from cqlbridge.resolver import DirectoryLibrarySourceProvider
from cqlbridge.strategies import (
    StrategySelector,
    StrategyAttempt,
    TranslationRequest,
)
from cqlbridge.diagnostics import DiagnosticsReport, collect_source_context
from cqlbridge.observability import get_logger, get_metrics, LogContext


logger = get_logger("orchestrator")

EngineLoader = Callable[[], EngineBinding]


# =============================================================================
# RUN RESULT
# =============================================================================

@dataclass
class RunResult:
    """Terminal status and everything worth reporting about one run."""
    status: RunStatus
    message: str
    run_id: str = ""
    output_path: Path | None = None
    bytes_written: int = 0
    characters_written: int = 0
    profile: str | None = None
    strategy: str | None = None
    attempts: list[StrategyAttempt] = field(default_factory=list)
    report: DiagnosticsReport | None = None
    detail: str | None = None  # Traceback, verbose runs only

    @property
    def success(self) -> bool:
        return self.status is RunStatus.SUCCESS

    @property
    def exit_code(self) -> int:
        return self.status.exit_code


_STATUS_FOR_ERROR: list[tuple[type[BaseException], RunStatus]] = [
    (ConfigurationError, RunStatus.CONFIG_ERROR),
    (EngineUnavailableError, RunStatus.ENGINE_ERROR),
    (CapabilityMissingError, RunStatus.ENGINE_ERROR),
    (StrategyExhaustedError, RunStatus.STRATEGY_EXHAUSTED),
    (CompilationFailedError, RunStatus.COMPILATION_FAILED),
    (OutputWriteError, RunStatus.IO_ERROR),
    (OSError, RunStatus.IO_ERROR),
]


def status_for_error(error: BaseException) -> RunStatus:
    """Map an exception onto a terminal run status."""
    for error_type, status in _STATUS_FOR_ERROR:
        if isinstance(error, error_type):
            return status
    # Anything else was thrown by the engine
    return RunStatus.ENGINE_ERROR


@dataclass
class _RunState:
    """Facts gathered while a run progresses."""
    profile: str | None = None
    strategy: str | None = None
    attempts: list[StrategyAttempt] = field(default_factory=list)
    report: DiagnosticsReport | None = None


# =============================================================================
# TRANSLATION RUNNER
# =============================================================================

class TranslationRunner:
    """
    Runs translations against an engine.

    Each run builds fresh engine managers and a fresh library provider;
    nothing carries over between runs. The metrics registry is the
    exception: its counters are process-wide and accumulate across runs
    (reset with reset_metrics()).

    Usage:
        runner = TranslationRunner(load_jvm_engine)
        result = runner.run(RunConfig(input_path=Path("Main.cql")))
    """

    def __init__(
        self,
        engine_loader: EngineLoader,
        selector: StrategySelector | None = None,
    ):
        """
        Initialize runner.

        Args:
            engine_loader: Returns a binding for the engine to use
            selector: Strategy selector (default: built from each run's
                configured strategy names)
        """
        self.engine_loader = engine_loader
        self.selector = selector

    def run(self, config: RunConfig) -> RunResult:
        """
        Translate `config.input_path` and write the result.

        Returns:
            RunResult; status SUCCESS only when output was written
        """
        metrics = get_metrics()
        run_id = str(uuid4())
        state = _RunState()

        with LogContext(run_id):
            metrics.runs_total.inc()
            try:
                result = self._execute(config, state)
            except Exception as e:
                status = status_for_error(e)
                message = str(e) or type(e).__name__
                if status is RunStatus.ENGINE_ERROR and not isinstance(e, BridgeError):
                    message = f"Error during translation: {message}"
                logger.debug("Run failed with %s", status.value, exc_info=True)
                result = RunResult(
                    status=status,
                    message=message,
                    detail=traceback.format_exc() if config.verbose else None,
                )

            result.run_id = run_id
            result.profile = state.profile
            result.strategy = state.strategy
            result.attempts = state.attempts
            result.report = state.report

            if result.success:
                metrics.runs_succeeded.inc()
            else:
                metrics.runs_failed.inc()

        return result

    def _execute(self, config: RunConfig, state: _RunState) -> RunResult:
        selector = self.selector or StrategySelector.from_names(config.strategies)

        binding = self._load_engine()
        state.profile = binding.profile

        try:
            model_manager = binding.create_model_manager()
            library_manager = binding.create_library_manager(model_manager)
        except Exception as e:
            raise EngineUnavailableError(f"Could not construct engine: {e}") from e

        library_path = config.effective_library_path
        logger.debug("Library path: %s", library_path)
        provider = DirectoryLibrarySourceProvider(library_path, binding.stream_factory)
        binding.register_source_provider(library_manager, provider)

        request = TranslationRequest(
            input_path=config.input_path,
            library_manager=library_manager,
            options=config.options,
        )

        started = time.perf_counter()
        selection = selector.select(binding, request)
        get_metrics().compile_duration_seconds.observe(time.perf_counter() - started)
        state.attempts = selection.attempts

        if not selection.succeeded:
            raise StrategyExhaustedError(
                "Could not create CqlTranslator; no invocation strategy succeeded:\n"
                + selection.failure_summary()
            )
        state.strategy = selection.strategy

        report = DiagnosticsReport.from_diagnostics(binding.get_errors(selection.handle))
        state.report = report
        if not report.is_success:
            if config.verbose_diagnostics:
                context = collect_source_context(config.input_path, library_path)
                text = report.render_verbose(context)
            else:
                text = report.render_short()
            raise CompilationFailedError(text, report.messages)

        output = binding.serialize(selection.handle, config.output_format)
        output_path = config.resolved_output_path()
        bytes_written = self._write_output(output_path, output)

        logger.info("Wrote %d bytes to %s", bytes_written, output_path)
        return RunResult(
            status=RunStatus.SUCCESS,
            message="Translation successful!",
            output_path=output_path,
            bytes_written=bytes_written,
            characters_written=len(output),
        )

    def _load_engine(self) -> EngineBinding:
        try:
            return self.engine_loader()
        except BridgeError:
            raise
        except Exception as e:
            raise EngineUnavailableError(f"Could not load engine: {e}") from e

    def _write_output(self, path: Path, output: str) -> int:
        data = output.encode("utf-8")
        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise OutputWriteError(f"Could not write output {path}: {e}") from e
        return len(data)


def create_runner(
    engine_loader: EngineLoader,
    selector: StrategySelector | None = None,
) -> TranslationRunner:
    """Factory for translation runner."""
    return TranslationRunner(engine_loader, selector)
