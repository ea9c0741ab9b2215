"""Tests for the directory library source provider."""

from cqlbridge.resolver import DirectoryLibrarySourceProvider, is_source_request
from cqlbridge.vocabulary import ContentType
from cqlbridge.observability import get_metrics

from fake_engine import VersionedIdentifier


class TestIsSourceRequest:

    def test_cql_and_no_hint(self):
        assert is_source_request(None)
        assert is_source_request(ContentType.CQL)
        assert is_source_request("cql")

    def test_other_representations(self):
        assert not is_source_request(ContentType.XML)
        assert not is_source_request("JSON")


class TestDirectoryLibrarySourceProvider:

    def test_resolves_file_bytes(self, cql_dir):
        """Stream yields exactly the file's UTF-8 bytes."""
        provider = DirectoryLibrarySourceProvider(cql_dir)
        stream = provider.getLibrarySource(VersionedIdentifier("Common"))
        assert stream.read() == (cql_dir / "Common.cql").read_bytes()
        assert get_metrics().library_resolutions.value == 1

    def test_absent_library(self, cql_dir):
        provider = DirectoryLibrarySourceProvider(cql_dir)
        assert provider.load("Missing") is None
        assert get_metrics().library_misses.value == 1

    def test_non_source_request(self, cql_dir):
        """Existing library requested as ELM is reported absent."""
        provider = DirectoryLibrarySourceProvider(cql_dir)
        assert provider.getLibraryContent("Common", ContentType.JSON) is None
        assert provider.getLibraryContent("Common", "CQL") is not None

    def test_unreadable_file(self, tmp_path):
        (tmp_path / "Bad.cql").write_bytes(b"\xff\xfe\xfa")
        provider = DirectoryLibrarySourceProvider(tmp_path)
        assert provider.load("Bad") is None

    def test_directory_named_like_library(self, tmp_path):
        (tmp_path / "Dir.cql").mkdir()
        assert DirectoryLibrarySourceProvider(tmp_path).load("Dir") is None

    def test_stream_factory(self, cql_dir):
        wrapped = []
        provider = DirectoryLibrarySourceProvider(cql_dir, stream_factory=lambda b: wrapped.append(b) or "stream")
        assert provider.load("Common") == "stream"
        assert wrapped == [(cql_dir / "Common.cql").read_bytes()]

    def test_reentrant_loads(self, cql_dir):
        """One provider serves several libraries in one run."""
        provider = DirectoryLibrarySourceProvider(cql_dir)
        assert provider.load("Other") is not None
        assert provider.load("Common") is not None
        assert get_metrics().library_resolutions.value == 2
