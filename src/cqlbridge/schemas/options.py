"""
Compiler Options — The option configuration record for one run.

Flat set of named translator switches with documented defaults.
Built once from command-line input and read-only afterwards.
"""

from pydantic import BaseModel, Field, field_validator

from cqlbridge.vocabulary import SignatureLevel


class CompilerOptions(BaseModel):
    """
    Translator behavior switches.

    Each boolean maps to one engine setter (see
    cqlbridge.capabilities.options.OPTION_SETTERS). Fields are
    independent: changing one never affects another.
    """

    date_range_optimization: bool = Field(
        default=False,
        description="Optimize date range filters in retrieves"
    )

    annotations: bool = Field(
        default=True,
        description="Include source annotations in ELM"
    )

    locators: bool = Field(
        default=True,
        description="Include source locators in ELM"
    )

    result_types: bool = Field(
        default=False,
        description="Include result types in ELM"
    )

    detailed_errors: bool = Field(
        default=False,
        description="Report detailed error messages"
    )

    disable_list_traversal: bool = Field(default=False)
    disable_list_demotion: bool = Field(default=False)
    disable_list_promotion: bool = Field(default=False)
    enable_interval_demotion: bool = Field(default=False)
    enable_interval_promotion: bool = Field(default=False)
    disable_method_invocation: bool = Field(default=False)
    require_from_keyword: bool = Field(default=False)

    strict: bool = Field(
        default=False,
        description="Disable implicit conversions that are not required by the language"
    )

    debug: bool = Field(
        default=False,
        description="Engine debug mode"
    )

    validate_units: bool = Field(
        default=False,
        description="Validate UCUM units in quantity literals"
    )

    signature_level: SignatureLevel = Field(
        default=SignatureLevel.NONE,
        description="Signature information emitted for invocations"
    )

    model_config = {"frozen": True}

    @field_validator("signature_level", mode="before")
    @classmethod
    def coerce_signature_level(cls, v):
        """Accept the four level names case-insensitively."""
        if isinstance(v, SignatureLevel):
            return v
        if isinstance(v, str):
            for level in SignatureLevel:
                if level.value.lower() == v.strip().lower():
                    return level
        allowed = ", ".join(level.value for level in SignatureLevel)
        raise ValueError(f"Unrecognized signature level {v!r} (expected one of {allowed})")

    def describe(self) -> dict[str, str]:
        """Flatten into printable name/value pairs."""
        return {
            name: (value.value if isinstance(value, SignatureLevel) else str(value).lower())
            for name, value in self.model_dump().items()
        }
