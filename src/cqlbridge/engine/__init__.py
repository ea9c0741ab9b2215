"""
Engine — Binding to the external CQL-to-ELM translation engine.

Provides:
- EngineBinding: one method per engine capability
- ReflectiveBinding: name-based implementation for every profile
- Engine profiles selected at startup by class availability
- JVM loader for the Java engine
"""

from cqlbridge.engine.base import EngineBinding
from cqlbridge.engine.profiles import (
    ENGINE_PACKAGE,
    PROVIDER_INTERFACE,
    EngineProfile,
    EngineNamespace,
    PROFILES,
    select_profile,
    build_namespace,
)
from cqlbridge.engine.reflective import ReflectiveBinding, SERIALIZERS
from cqlbridge.engine.jvm import (
    EngineConfig,
    load_jvm_engine,
)

__all__ = [
    # Interface
    "EngineBinding",
    # Profiles
    "ENGINE_PACKAGE",
    "PROVIDER_INTERFACE",
    "EngineProfile",
    "EngineNamespace",
    "PROFILES",
    "select_profile",
    "build_namespace",
    # Bindings
    "ReflectiveBinding",
    "SERIALIZERS",
    "EngineConfig",
    "load_jvm_engine",
]
