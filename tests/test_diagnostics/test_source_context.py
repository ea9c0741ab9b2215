"""Tests for verbose diagnostic context."""

from cqlbridge.diagnostics import collect_source_context, extract_declarations


class TestExtractDeclarations:

    def test_declaration_lines(self):
        text = (
            "library Main version '1.0.0'\n"
            "using FHIR version '4.0.1'\n"
            "  include Other called O\n"
            "define Included: true\n"
        )
        assert extract_declarations(text) == [
            "library Main version '1.0.0'",
            "using FHIR version '4.0.1'",
            "include Other called O",
        ]


class TestCollectSourceContext:

    def test_collects_facts(self, cql_dir):
        context = collect_source_context(cql_dir / "Main.cql")
        assert context.input_size == (cql_dir / "Main.cql").stat().st_size
        assert context.sibling_libraries == ["Common.cql", "Main.cql", "Other.cql", "Test.cql"]
        assert "include Other version '1.0.0'" in context.declarations
        assert "Libraries found (4):" in context.render()

    def test_missing_input(self, tmp_path):
        context = collect_source_context(tmp_path / "Gone.cql", tmp_path / "nowhere")
        assert context.input_size is None
        assert context.sibling_libraries == []
        assert "unreadable" in context.render()
