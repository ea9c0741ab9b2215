"""
Engine Binding — Capability-set interface over the translation engine.

Each capability the runner needs is one method. Implementations raise
CapabilityMissingError when the loaded engine lacks an operation, and
let engine exceptions propagate otherwise.
"""

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable

from cqlbridge.vocabulary import OutputFormat


class EngineBinding(ABC):
    """
    Abstract binding to one loaded engine.

    Capabilities:
    - construct-model / construct-library-manager
    - register-source-provider
    - compile-from-file-with-options / compile-from-file / compile-from-text
    - get-diagnostics / serialize
    """

    @property
    @abstractmethod
    def profile(self) -> str:
        """Name of the engine profile this binding was built for."""
        pass

    @abstractmethod
    def create_model_manager(self) -> Any:
        pass

    @abstractmethod
    def create_library_manager(self, model_manager: Any) -> Any:
        pass

    @abstractmethod
    def register_source_provider(self, library_manager: Any, provider: Any) -> bool:
        """Register a library source provider; False if the engine has no loader."""
        pass

    @abstractmethod
    def new_options(self) -> Any | None:
        """Fresh engine-native options object, or None if unsupported."""
        pass

    @property
    def signature_enum(self) -> Any | None:
        """Engine enumeration type for signature levels, if known."""
        return None

    @property
    def stream_factory(self) -> Callable[[bytes], Any]:
        """Wraps library source bytes in the stream type the engine reads."""
        return io.BytesIO

    @abstractmethod
    def compile_file_with_options(self, path: Path, library_manager: Any, options: Any) -> Any:
        pass

    @abstractmethod
    def compile_file(self, path: Path, library_manager: Any) -> Any:
        pass

    @abstractmethod
    def compile_text(self, text: str, library_manager: Any) -> Any:
        pass

    @abstractmethod
    def get_errors(self, handle: Any) -> list[Any]:
        pass

    @abstractmethod
    def serialize(self, handle: Any, output_format: OutputFormat) -> str:
        pass

    def __repr__(self) -> str:
        return f"<EngineBinding profile={self.profile}>"
