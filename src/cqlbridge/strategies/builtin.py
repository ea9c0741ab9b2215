"""
Built-in Strategies — The engine's three known compile entry points.

Order of preference:
- options-file: fromFile(file, library manager, options)
- basic-file: fromFile(file, library manager)
- text: fromText(source text, library manager)
"""

from cqlbridge.capabilities import apply_compiler_options
from cqlbridge.engine import EngineBinding
from cqlbridge.errors import CapabilityMissingError
from cqlbridge.strategies.base import (
    TranslatorStrategy,
    TranslationRequest,
    StrategyOutcome,
)


class OptionsFileStrategy(TranslatorStrategy):
    """Compile the file with an engine options object built from the record."""

    @property
    def name(self) -> str:
        return "options-file"

    @property
    def description(self) -> str:
        return "Compile from file with translator options"

    def invoke(self, binding: EngineBinding, request: TranslationRequest) -> StrategyOutcome:
        engine_options = binding.new_options()
        if engine_options is None:
            raise CapabilityMissingError("compile-from-file-with-options", "no options object")

        probes = apply_compiler_options(engine_options, request.options, binding.signature_enum)
        handle = binding.compile_file_with_options(
            request.input_path,
            request.library_manager,
            engine_options,
        )
        return StrategyOutcome(handle=handle, probes=probes)


class BasicFileStrategy(TranslatorStrategy):
    """Compile the file with engine defaults; options are not applied."""

    @property
    def name(self) -> str:
        return "basic-file"

    @property
    def description(self) -> str:
        return "Compile from file"

    def invoke(self, binding: EngineBinding, request: TranslationRequest) -> StrategyOutcome:
        handle = binding.compile_file(request.input_path, request.library_manager)
        return StrategyOutcome(handle=handle)


class TextStrategy(TranslatorStrategy):
    """Read the file and compile its text."""

    @property
    def name(self) -> str:
        return "text"

    @property
    def description(self) -> str:
        return "Compile from source text"

    def invoke(self, binding: EngineBinding, request: TranslationRequest) -> StrategyOutcome:
        text = request.input_path.read_text(encoding="utf-8")
        handle = binding.compile_text(text, request.library_manager)
        return StrategyOutcome(handle=handle)


BUILTIN_STRATEGIES: dict[str, type[TranslatorStrategy]] = {
    "options-file": OptionsFileStrategy,
    "basic-file": BasicFileStrategy,
    "text": TextStrategy,
}
