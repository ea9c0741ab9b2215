"""Tests for engine profile selection."""

import pytest

from cqlbridge.engine import (
    PROFILES,
    EngineNamespace,
    build_namespace,
    select_profile,
)
from cqlbridge.engine.profiles import (
    ENGINE_PACKAGE,
    MODEL_MANAGER_CLASS,
    LIBRARY_MANAGER_CLASS,
    TRANSLATOR_CLASS,
    SIGNATURE_LEVEL_ENUM,
)
from cqlbridge.errors import EngineUnavailableError


def loader_for(*names):
    """load_class over a fixed set of available class names."""
    available = {name: type(name.rsplit(".", 1)[-1], (), {}) for name in names}
    requested = []

    def load_class(name):
        requested.append(name)
        return available.get(name)

    load_class.requested = requested
    return load_class


CORE = (MODEL_MANAGER_CLASS, LIBRARY_MANAGER_CLASS, TRANSLATOR_CLASS)


class TestSelectProfile:

    def test_newest_generation_preferred(self):
        load = loader_for(
            *CORE,
            f"{ENGINE_PACKAGE}.CqlCompilerOptions",
            f"{ENGINE_PACKAGE}.CqlTranslatorOptions",
        )
        profile, _ = select_profile(load)
        assert profile.name == "compiler-options"

    def test_falls_back_to_translator_options(self):
        load = loader_for(*CORE, f"{ENGINE_PACKAGE}.CqlTranslatorOptions", SIGNATURE_LEVEL_ENUM)
        profile, classes = select_profile(load)
        assert profile.name == "translator-options"
        assert classes[SIGNATURE_LEVEL_ENUM] is not None

    def test_core_without_options(self):
        profile, _ = select_profile(loader_for(*CORE))
        assert profile.name == "core"
        assert profile.options_class is None

    def test_each_class_loaded_once(self):
        load = loader_for(*CORE)
        select_profile(load)
        assert len(load.requested) == len(set(load.requested))

    def test_nothing_matches(self):
        with pytest.raises(EngineUnavailableError) as exc:
            select_profile(loader_for(MODEL_MANAGER_CLASS))
        assert "compiler-options" in str(exc.value)


class TestBuildNamespace:

    def test_namespace_fields(self):
        """Namespace holds loaded classes and value converters only."""
        assert set(EngineNamespace.__dataclass_fields__) == {
            "profile",
            "model_manager_cls",
            "library_manager_cls",
            "translator_cls",
            "options_cls",
            "signature_enum",
            "make_file",
            "make_stream",
            "wrap_provider",
        }

    def test_namespace_classes(self):
        namespace = build_namespace(loader_for(*CORE))
        assert namespace.profile is PROFILES[-1]
        assert namespace.options_cls is None
        assert namespace.translator_cls.__name__ == "CqlTranslator"

    def test_factories_passed_through(self):
        namespace = build_namespace(loader_for(*CORE), make_file=str)
        assert namespace.make_file is str
