"""
Resolver — Library source resolution for the engine.
"""

from cqlbridge.resolver.references import (
    extract_library_name,
    extract_library_version,
)
from cqlbridge.resolver.provider import (
    CQL_EXTENSION,
    DirectoryLibrarySourceProvider,
    is_source_request,
)

__all__ = [
    "extract_library_name",
    "extract_library_version",
    "CQL_EXTENSION",
    "DirectoryLibrarySourceProvider",
    "is_source_request",
]
