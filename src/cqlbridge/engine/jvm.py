"""
JVM Engine Loader — Loads the Java CQL-to-ELM engine through JPype.

Starts the JVM once per process, selects an engine profile from the
classes on the classpath, and returns a binding for it.
"""

import os
from dataclasses import dataclass, field
from typing import Any

try:
    import jpype
    JPYPE_AVAILABLE = True
except ImportError:
    JPYPE_AVAILABLE = False

from cqlbridge.errors import EngineUnavailableError
from cqlbridge.observability import get_logger
from cqlbridge.engine.profiles import PROFILES, PROVIDER_INTERFACE, EngineProfile, build_namespace
from cqlbridge.engine.reflective import ReflectiveBinding


logger = get_logger("engine.jvm")

ENV_CLASSPATH = "CQLBRIDGE_CLASSPATH"
ENV_JVM_PATH = "CQLBRIDGE_JVM_PATH"

PROVIDER_METHODS = ("getLibrarySource", "getLibraryContent")


@dataclass
class EngineConfig:
    """Configuration for loading the engine."""
    classpath: list[str] = field(default_factory=list)  # Falls back to CQLBRIDGE_CLASSPATH
    jvm_path: str | None = None  # Falls back to CQLBRIDGE_JVM_PATH, then JPype's default
    jvm_args: list[str] = field(default_factory=list)

    @classmethod
    def from_env(cls, classpath: list[str] | None = None, **kwargs: Any) -> "EngineConfig":
        """Build config, filling unset values from the environment."""
        if not classpath:
            env_value = os.environ.get(ENV_CLASSPATH, "")
            classpath = [entry for entry in env_value.split(os.pathsep) if entry]
        jvm_path = kwargs.pop("jvm_path", None) or os.environ.get(ENV_JVM_PATH) or None
        return cls(classpath=list(classpath), jvm_path=jvm_path, **kwargs)


def start_jvm(config: EngineConfig) -> None:
    """
    Start the JVM if it is not running yet.

    JPype allows one JVM per process; later calls reuse it and ignore
    classpath changes.

    Raises:
        EngineUnavailableError: JPype missing or JVM failed to start
    """
    if not JPYPE_AVAILABLE:
        raise EngineUnavailableError(
            "JPype package not installed. "
            "Install with: pip install JPype1"
        )

    if jpype.isJVMStarted():
        return

    jvm_path = config.jvm_path or jpype.getDefaultJVMPath()
    logger.debug("Starting JVM %s with classpath %s", jvm_path, config.classpath)
    try:
        jpype.startJVM(
            jvm_path,
            *config.jvm_args,
            classpath=config.classpath,
            convertStrings=False,
        )
    except Exception as e:
        raise EngineUnavailableError(f"Could not start JVM: {e}") from e


def load_class(name: str) -> Any | None:
    """Load a Java class by binary name, or None if it is not on the classpath."""
    try:
        return jpype.JClass(name)
    except Exception:
        return None


def _provider_wrapper(interface_name: str):
    """
    Build a function exposing a Python provider as a Java interface.

    Only methods the interface actually declares are overridden, so the
    wrapper works with engines that predate getLibraryContent.
    """
    interface = jpype.JClass(interface_name)
    declared = {str(method.getName()) for method in interface.class_.getMethods()}

    def delegate(method_name: str):
        def call(self, *args):
            return getattr(self._provider, method_name)(*args)
        call.__name__ = method_name
        return jpype.JOverride(call)

    def init(self, provider):
        self._provider = provider

    attrs: dict[str, Any] = {"__init__": init}
    for method_name in PROVIDER_METHODS:
        if method_name in declared:
            attrs[method_name] = delegate(method_name)

    java_provider = jpype.JImplements(interface_name)(
        type("JavaLibrarySourceProvider", (), attrs)
    )
    return java_provider


def load_jvm_engine(
    config: EngineConfig | None = None,
    profiles: tuple[EngineProfile, ...] = PROFILES,
) -> ReflectiveBinding:
    """
    Load the engine from the JVM classpath.

    Args:
        config: Classpath and JVM settings (default: from environment)
        profiles: Engine profiles in priority order

    Returns:
        Binding for the first profile the classpath satisfies

    Raises:
        EngineUnavailableError: JVM or engine classes unavailable
    """
    config = config or EngineConfig.from_env()
    start_jvm(config)

    file_cls = jpype.JClass("java.io.File")
    stream_cls = jpype.JClass("java.io.ByteArrayInputStream")

    if load_class(PROVIDER_INTERFACE) is None:
        raise EngineUnavailableError(f"Engine interface {PROVIDER_INTERFACE} not on classpath")
    wrap_provider = _provider_wrapper(PROVIDER_INTERFACE)

    namespace = build_namespace(
        load_class,
        profiles,
        make_file=lambda path: file_cls(str(path)),
        make_stream=lambda data: stream_cls(data),
        wrap_provider=wrap_provider,
    )
    logger.info("Loaded engine profile %s", namespace.profile.name)
    return ReflectiveBinding(namespace)
