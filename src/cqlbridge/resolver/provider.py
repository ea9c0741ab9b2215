"""
Directory Library Source Provider — Serves dependent libraries from disk.

Registered with the engine's source loader once per run. The engine
calls back into it, possibly re-entrantly, whenever an `include` names
another library.
"""

import io
from pathlib import Path
from typing import Any, Callable

from cqlbridge.vocabulary import ContentType
from cqlbridge.observability import get_logger, get_metrics
from cqlbridge.resolver.references import extract_library_name, extract_library_version


logger = get_logger("resolver")

CQL_EXTENSION = ".cql"


def is_source_request(content_type: Any) -> bool:
    """
    True when the engine asks for CQL source (or gives no hint).

    Engine enumerations are compared by their textual form.
    """
    if content_type is None:
        return True
    if isinstance(content_type, ContentType):
        return content_type is ContentType.CQL
    return str(content_type).strip().upper() == ContentType.CQL.value


class DirectoryLibrarySourceProvider:
    """
    Library source provider backed by a single directory.

    A reference named `Common` resolves to `<base_dir>/Common.cql`.
    Read failures only affect the library being read.

    Usage:
        provider = DirectoryLibrarySourceProvider(Path("cql"))
        stream = provider.load("Common")
    """

    def __init__(
        self,
        base_dir: Path | str,
        stream_factory: Callable[[bytes], Any] = io.BytesIO,
    ):
        """
        Initialize provider.

        Args:
            base_dir: Directory holding `<Library>.cql` files
            stream_factory: Wraps source bytes in the stream type the
                engine expects (java.io.ByteArrayInputStream for the JVM)
        """
        self.base_dir = Path(base_dir)
        self.stream_factory = stream_factory

    def path_for(self, name: str) -> Path:
        """Candidate file for a library name."""
        return self.base_dir / f"{name}{CQL_EXTENSION}"

    def read_source(self, reference: Any) -> bytes | None:
        """
        Read the source for `reference` as UTF-8 bytes.

        Returns None when no name can be extracted, the file does not
        exist, or it cannot be read.
        """
        name = extract_library_name(reference)
        if name is None:
            logger.debug("Could not extract a library name from %r", reference)
            return None

        path = self.path_for(name)
        if not path.is_file():
            logger.debug("Library %s not found at %s", name, path)
            return None

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Could not read library %s: %s", path, e)
            return None

        return text.encode("utf-8")

    def load(self, reference: Any, content_type: Any = None) -> Any:
        """
        Resolve a library reference to a source stream.

        Args:
            reference: Engine library identifier
            content_type: Representation requested by the engine, if any

        Returns:
            Stream over the CQL source, or None for "not found". Requests
            for a non-source representation always get None so the engine
            compiles the dependency from source.
        """
        metrics = get_metrics()

        source = self.read_source(reference)
        if source is None or not is_source_request(content_type):
            metrics.library_misses.inc()
            return None

        version = extract_library_version(reference)
        logger.debug(
            "Resolved library %s%s from %s",
            extract_library_name(reference),
            f" version {version}" if version else "",
            self.base_dir,
        )
        metrics.library_resolutions.inc()
        return self.stream_factory(source)

    # Engine-facing names (LibrarySourceProvider interface)

    def getLibrarySource(self, reference: Any) -> Any:
        return self.load(reference)

    def getLibraryContent(self, reference: Any, content_type: Any) -> Any:
        return self.load(reference, content_type)

    def __repr__(self) -> str:
        return f"<DirectoryLibrarySourceProvider base_dir={str(self.base_dir)!r}>"
