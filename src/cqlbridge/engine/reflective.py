"""
Reflective Binding — EngineBinding over a namespace of engine classes.

Looks operations up by name at call time, so one implementation
serves every engine profile. Entry points whose shape does not match
are reported as missing capabilities without being called.
"""

from pathlib import Path
from typing import Any, Callable

from cqlbridge.vocabulary import OutputFormat
from cqlbridge.errors import CapabilityMissingError
from cqlbridge.capabilities import probe_call, signature_accepts
from cqlbridge.observability import get_logger
from cqlbridge.engine.base import EngineBinding
from cqlbridge.engine.profiles import EngineNamespace


logger = get_logger("engine")


SERIALIZERS = {
    OutputFormat.XML: "toXml",
    OutputFormat.JSON: "toJson",
}


class ReflectiveBinding(EngineBinding):
    """
    Binding that resolves every capability by name on the engine classes.

    Usage:
        binding = ReflectiveBinding(namespace)
        model = binding.create_model_manager()
        manager = binding.create_library_manager(model)
    """

    def __init__(self, namespace: EngineNamespace):
        self.namespace = namespace

    @property
    def profile(self) -> str:
        return self.namespace.profile.name

    @property
    def signature_enum(self) -> Any | None:
        return self.namespace.signature_enum

    @property
    def stream_factory(self) -> Callable[[bytes], Any]:
        return self.namespace.make_stream

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    def create_model_manager(self) -> Any:
        return self.namespace.model_manager_cls()

    def create_library_manager(self, model_manager: Any) -> Any:
        return self.namespace.library_manager_cls(model_manager)

    def register_source_provider(self, library_manager: Any, provider: Any) -> bool:
        loader = self._source_loader(library_manager)
        if loader is None:
            logger.warning("Engine exposes no library source loader; dependencies will not resolve")
            return False

        result = probe_call(loader, "registerProvider", self.namespace.wrap_provider(provider))
        if not result.applied:
            logger.warning("Could not register library source provider: %s", result.error)
            return False
        return True

    def _source_loader(self, library_manager: Any) -> Any | None:
        result = probe_call(library_manager, "getLibrarySourceLoader")
        if result.applied and result.value is not None:
            return result.value
        return getattr(library_manager, "librarySourceLoader", None)

    def new_options(self) -> Any | None:
        if self.namespace.options_cls is None:
            return None
        try:
            return self.namespace.options_cls()
        except Exception as e:
            logger.debug("Could not construct engine options: %s", e)
            return None

    # -------------------------------------------------------------------------
    # Compilation entry points
    # -------------------------------------------------------------------------

    def _entry_point(self, operation: str, label: str, *args: Any) -> Any:
        """
        Invoke a static translator entry point of a known shape.

        Raises:
            CapabilityMissingError: Absent, or present with another shape
        """
        func = getattr(self.namespace.translator_cls, operation, None)
        if func is None or not callable(func):
            raise CapabilityMissingError(label)

        shape = signature_accepts(func, args)
        if shape is False:
            raise CapabilityMissingError(label, f"{operation} does not take {len(args)} arguments")

        try:
            return func(*args)
        except TypeError as e:
            # Overloads that cannot be introspected report a shape
            # mismatch as TypeError at call time.
            if shape is None:
                raise CapabilityMissingError(label, str(e)) from e
            raise

    def compile_file_with_options(self, path: Path, library_manager: Any, options: Any) -> Any:
        if options is None:
            raise CapabilityMissingError("compile-from-file-with-options", "no options object")
        return self._entry_point(
            "fromFile",
            "compile-from-file-with-options",
            self.namespace.make_file(path),
            library_manager,
            options,
        )

    def compile_file(self, path: Path, library_manager: Any) -> Any:
        return self._entry_point(
            "fromFile",
            "compile-from-file",
            self.namespace.make_file(path),
            library_manager,
        )

    def compile_text(self, text: str, library_manager: Any) -> Any:
        return self._entry_point("fromText", "compile-from-text", text, library_manager)

    # -------------------------------------------------------------------------
    # Results
    # -------------------------------------------------------------------------

    def get_errors(self, handle: Any) -> list[Any]:
        result = probe_call(handle, "getErrors")
        if not result.applied:
            raise CapabilityMissingError("get-diagnostics", result.error or "")
        return list(result.value or [])

    def serialize(self, handle: Any, output_format: OutputFormat) -> str:
        operation = SERIALIZERS[output_format]
        result = probe_call(handle, operation)
        if not result.applied:
            raise CapabilityMissingError(f"serialize-{output_format.value.lower()}", result.error or "")
        if result.value is None:
            return ""
        return str(result.value)
