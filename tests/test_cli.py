"""Tests for the command-line interface."""

from cqlbridge.cli import build_config, build_parser, main, parse_bool
from cqlbridge.engine import ReflectiveBinding
from cqlbridge.vocabulary import SignatureLevel

import fake_engine


def fake_loader():
    return ReflectiveBinding(fake_engine.make_namespace())


class TestParsing:

    def test_parse_bool(self):
        assert parse_bool("true") is True
        assert parse_bool("YES") is True
        assert parse_bool("false") is False
        assert parse_bool("maybe") is False

    def test_flag_without_value(self):
        args = build_parser().parse_args(["-i", "Main.cql", "--strict", "--annotations", "false"])
        config = build_config(args)
        assert config.options.strict is True
        assert config.options.annotations is False
        assert config.options.locators is True

    def test_abbreviation_is_unknown(self):
        """Long options must be spelled out in full."""
        args, unknown = build_parser().parse_known_args(["-i", "x.cql", "--deb"])
        assert unknown == ["--deb"]
        assert args.debug is False

    def test_flag_missing_value_dropped(self):
        parser = build_parser()
        kept, dropped = parser.drop_incomplete_options(
            ["-i", "x.cql", "--output", "--strict", "--signatures"]
        )
        assert kept == ["-i", "x.cql", "--strict"]
        assert dropped == ["--output", "--signatures"]

    def test_dash_value_kept(self):
        kept, dropped = build_parser().drop_incomplete_options(["-o", "-"])
        assert kept == ["-o", "-"]
        assert dropped == []

    def test_signatures_and_strategies(self):
        args = build_parser().parse_args(
            ["-i", "Main.cql", "--signatures", "all", "--strategies", "basic-file, text"]
        )
        config = build_config(args)
        assert config.options.signature_level is SignatureLevel.ALL
        assert config.strategies == ("basic-file", "text")


class TestMain:

    def test_no_input_prints_help(self, capsys):
        assert main([], engine_loader=fake_loader) == 0
        assert "CQL-to-ELM Translator" in capsys.readouterr().out

    def test_unknown_option_ignored(self, capsys):
        assert main(["--frobnicate"], engine_loader=fake_loader) == 0
        assert "Unknown option: --frobnicate" in capsys.readouterr().err

    def test_missing_input_file(self, tmp_path, capsys):
        code = main(["-i", str(tmp_path / "Nope.cql")], engine_loader=fake_loader)
        assert code == 1
        assert "CQL file not found:" in capsys.readouterr().err

    def test_invalid_signature_level(self, cql_dir, capsys):
        code = main(["-i", str(cql_dir / "Test.cql"), "--signatures", "Some"], engine_loader=fake_loader)
        assert code == 2
        assert "Invalid configuration" in capsys.readouterr().err

    def test_successful_translation(self, cql_dir, capsys):
        output = cql_dir / "main.json"
        code = main(
            ["-i", str(cql_dir / "Main.cql"), "-o", str(output), "-f", "JSON"],
            engine_loader=fake_loader,
        )
        out = capsys.readouterr().out
        assert code == 0
        assert "Attempting to translate CQL to ELM..." in out
        assert "Translation successful!" in out
        assert "Format: JSON" in out
        assert output.exists()

    def test_compilation_failure(self, cql_dir, capsys):
        (cql_dir / "Other.cql").unlink()
        code = main(
            ["-i", str(cql_dir / "Main.cql"), "-o", str(cql_dir / "out.xml")],
            engine_loader=fake_loader,
        )
        err = capsys.readouterr().err
        assert code == 1
        assert "Could not load source for library Other, version 1.0.0." in err
        assert "Use --verbose" not in err

    def test_verbose_prints_metrics(self, cql_dir, capsys):
        code = main(
            ["-i", str(cql_dir / "Test.cql"), "-o", str(cql_dir / "out.xml"), "-v"],
            engine_loader=fake_loader,
        )
        out = capsys.readouterr().out
        assert code == 0
        assert "Engine profile: translator-options" in out
        assert "Strategy options-file (Compile from file with translator options): ok" in out
        assert '"runs"' in out

    def test_ambiguous_prefix_reported(self, cql_dir, capsys):
        """A prefix of two flags is reported and the run continues."""
        output = cql_dir / "out.xml"
        code = main(
            ["-i", str(cql_dir / "Test.cql"), "-o", str(output), "--verb"],
            engine_loader=fake_loader,
        )
        captured = capsys.readouterr()
        assert code == 0
        assert "Unknown option: --verb" in captured.err
        assert "Translation successful!" in captured.out
        assert output.exists()

    def test_abbreviated_flag_reported(self, cql_dir, capsys):
        code = main(
            ["-i", str(cql_dir / "Test.cql"), "-o", str(cql_dir / "out.xml"), "--deb"],
            engine_loader=fake_loader,
        )
        assert code == 0
        assert "Unknown option: --deb" in capsys.readouterr().err

    def test_missing_value_reported(self, cql_dir, capsys):
        """Trailing flag without its value is reported and ignored."""
        output = cql_dir / "out.xml"
        code = main(
            ["-i", str(cql_dir / "Test.cql"), "-o", str(output), "--signatures"],
            engine_loader=fake_loader,
        )
        captured = capsys.readouterr()
        assert code == 0
        assert "Unknown option: --signatures" in captured.err
        assert output.exists()
