"""
Engine Profiles — Known engine generations and how to recognize them.

A profile names the classes one generation of the engine exposes. At
startup profiles are tried in priority order and the first whose
classes all load is used.
"""

import io
from dataclasses import dataclass
from typing import Any, Callable

from cqlbridge.errors import EngineUnavailableError
from cqlbridge.observability import get_logger


logger = get_logger("engine.profiles")


ENGINE_PACKAGE = "org.cqframework.cql.cql2elm"

MODEL_MANAGER_CLASS = f"{ENGINE_PACKAGE}.ModelManager"
LIBRARY_MANAGER_CLASS = f"{ENGINE_PACKAGE}.LibraryManager"
TRANSLATOR_CLASS = f"{ENGINE_PACKAGE}.CqlTranslator"
PROVIDER_INTERFACE = f"{ENGINE_PACKAGE}.LibrarySourceProvider"
SIGNATURE_LEVEL_ENUM = f"{ENGINE_PACKAGE}.LibraryBuilder$SignatureLevel"


def _identity(value: Any) -> Any:
    return value


@dataclass
class EngineProfile:
    """
    Class names describing one engine generation.

    `options_class` is None for engines without an options object.
    """
    name: str
    description: str
    options_class: str | None = None
    signature_enum: str | None = SIGNATURE_LEVEL_ENUM

    @property
    def required_classes(self) -> list[str]:
        required = [MODEL_MANAGER_CLASS, LIBRARY_MANAGER_CLASS, TRANSLATOR_CLASS]
        if self.options_class:
            required.append(self.options_class)
        return required


@dataclass
class EngineNamespace:
    """
    Loaded engine classes plus the conversions the engine needs.

    The factories turn Python values into engine-side values (paths to
    java.io.File, bytes to input streams, the provider to an interface
    implementation). Defaults pass values through unchanged.
    """
    profile: EngineProfile
    model_manager_cls: Any
    library_manager_cls: Any
    translator_cls: Any
    options_cls: Any = None
    signature_enum: Any = None
    make_file: Callable[[Any], Any] = _identity
    make_stream: Callable[[bytes], Any] = io.BytesIO
    wrap_provider: Callable[[Any], Any] = _identity


# Highest priority first
PROFILES: tuple[EngineProfile, ...] = (
    EngineProfile(
        name="compiler-options",
        description="Engine with CqlCompilerOptions",
        options_class=f"{ENGINE_PACKAGE}.CqlCompilerOptions",
    ),
    EngineProfile(
        name="translator-options",
        description="Engine with CqlTranslatorOptions",
        options_class=f"{ENGINE_PACKAGE}.CqlTranslatorOptions",
    ),
    EngineProfile(
        name="core",
        description="Engine without an options object",
    ),
)


def select_profile(
    load_class: Callable[[str], Any | None],
    profiles: tuple[EngineProfile, ...] = PROFILES,
) -> tuple[EngineProfile, dict[str, Any]]:
    """
    Pick the first profile whose required classes all load.

    Args:
        load_class: Returns the class for a name, or None if unavailable
        profiles: Candidates in priority order

    Returns:
        (profile, loaded classes by name)

    Raises:
        EngineUnavailableError: No profile matched
    """
    cache: dict[str, Any | None] = {}

    def lookup(name: str) -> Any | None:
        if name not in cache:
            cache[name] = load_class(name)
        return cache[name]

    for profile in profiles:
        missing = [name for name in profile.required_classes if lookup(name) is None]
        if missing:
            logger.debug("Profile %s unavailable, missing: %s", profile.name, ", ".join(missing))
            continue

        classes = {name: lookup(name) for name in profile.required_classes}
        if profile.signature_enum:
            classes[profile.signature_enum] = lookup(profile.signature_enum)
        logger.debug("Selected engine profile %s", profile.name)
        return profile, classes

    raise EngineUnavailableError(
        "No supported CQL-to-ELM engine found; "
        f"tried profiles: {', '.join(p.name for p in profiles)}"
    )


def build_namespace(
    load_class: Callable[[str], Any | None],
    profiles: tuple[EngineProfile, ...] = PROFILES,
    **factories: Any,
) -> EngineNamespace:
    """Select a profile and assemble its namespace."""
    profile, classes = select_profile(load_class, profiles)
    return EngineNamespace(
        profile=profile,
        model_manager_cls=classes[MODEL_MANAGER_CLASS],
        library_manager_cls=classes[LIBRARY_MANAGER_CLASS],
        translator_cls=classes[TRANSLATOR_CLASS],
        options_cls=classes.get(profile.options_class) if profile.options_class else None,
        signature_enum=classes.get(profile.signature_enum) if profile.signature_enum else None,
        **factories,
    )
