"""
Run Configuration — Everything one translation run needs.

Wraps the compiler options together with the input, output, and
diagnostic settings chosen on the command line.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from cqlbridge.vocabulary import OutputFormat
from cqlbridge.schemas.options import CompilerOptions


DEFAULT_OUTPUT = "output.xml"
DEFAULT_STRATEGIES = ("options-file", "basic-file", "text")


class RunConfig(BaseModel):
    """
    Complete configuration for one run.

    Immutable; the runner never modifies it.
    """

    input_path: Path = Field(
        ...,
        description="CQL source file to translate"
    )

    output_path: Path = Field(
        default=Path(DEFAULT_OUTPUT),
        description="Destination for the serialized ELM"
    )

    output_format: OutputFormat = Field(
        default=OutputFormat.XML,
        description="XML (structured markup) or JSON (structured object)"
    )

    library_path: Path | None = Field(
        default=None,
        description="Directory searched for dependent libraries (default: input's directory)"
    )

    verbose: bool = False
    verbose_diagnostics: bool = False

    options: CompilerOptions = Field(default_factory=CompilerOptions)

    strategies: tuple[str, ...] = Field(
        default=DEFAULT_STRATEGIES,
        description="Invocation strategies in preference order"
    )

    model_config = {"frozen": True}

    @field_validator("output_format", mode="before")
    @classmethod
    def coerce_output_format(cls, v):
        """Accept format names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def effective_library_path(self) -> Path:
        """Library search directory, auto-detected from the input when unset."""
        if self.library_path is not None:
            return self.library_path
        return self.input_path.absolute().parent

    def resolved_output_path(self) -> Path:
        """
        Output path with its extension matched to the output format.

        Only swaps the extension when the path still carries the other
        format's default extension; any other name is left untouched.
        """
        path = self.output_path
        other = self.output_format.other
        if path.suffix.lower() == other.extension:
            return path.with_suffix(self.output_format.extension)
        return path
