"""
cqlbridge CLI

Translates a CQL library to ELM using the CQL-to-ELM engine on the JVM
classpath.

Usage:
    cqlbridge --input Main.cql                         # XML to output.xml
    cqlbridge -i Main.cql --format JSON                # JSON to output.json
    cqlbridge -i Main.cql --verbose --detailed-errors  # Verbose run
    cqlbridge --help                                   # Show help
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from pydantic import ValidationError

from cqlbridge import __version__
from cqlbridge.schemas import CompilerOptions, RunConfig, DEFAULT_OUTPUT, DEFAULT_STRATEGIES
from cqlbridge.engine import EngineConfig, load_jvm_engine
from cqlbridge.orchestrator import RunResult, TranslationRunner
from cqlbridge.observability import configure_logging, get_metrics
from cqlbridge.vocabulary import RunStatus


EXAMPLES = """\
Examples:
  # Basic XML output
  cqlbridge --input MainLibrary.cql

  # JSON output with annotations and locators
  cqlbridge --input main.cql --format JSON --output main.json

  # Verbose mode with detailed errors
  cqlbridge --input test.cql --verbose --detailed-errors

Engine jars are taken from --classpath or the CQLBRIDGE_CLASSPATH
environment variable.
"""

# (flag, record field, help) for boolean compiler options
BOOLEAN_OPTION_FLAGS = [
    ("--annotations", "annotations", "Include source annotations (default: true)"),
    ("--locators", "locators", "Include source locators (default: true)"),
    ("--detailed-errors", "detailed_errors", "Enable detailed errors (default: false)"),
    ("--date-range-optimization", "date_range_optimization", "Optimize date range filters (default: false)"),
    ("--result-types", "result_types", "Include result types (default: false)"),
    ("--disable-list-traversal", "disable_list_traversal", "(default: false)"),
    ("--disable-list-demotion", "disable_list_demotion", "(default: false)"),
    ("--disable-list-promotion", "disable_list_promotion", "(default: false)"),
    ("--enable-interval-demotion", "enable_interval_demotion", "(default: false)"),
    ("--enable-interval-promotion", "enable_interval_promotion", "(default: false)"),
    ("--disable-method-invocation", "disable_method_invocation", "(default: false)"),
    ("--require-from-keyword", "require_from_keyword", "(default: false)"),
    ("--strict", "strict", "Strict conversions (default: false)"),
    ("--debug", "debug", "Engine debug mode (default: false)"),
    ("--validate-units", "validate_units", "Validate UCUM units (default: false)"),
]


def parse_bool(value: str) -> bool:
    """Parse a flag value; anything but a true-like word is false."""
    return value.strip().lower() in {"true", "yes", "on", "1"}


class CliArgumentParser(argparse.ArgumentParser):
    """
    Argument parser that never exits the process on bad input.

    Long options must be spelled out; abbreviations are unknown options.
    Parse errors raise argparse.ArgumentError for main() to report.
    """

    def __init__(self, *args, **kwargs):
        # Flags taking exactly one value; filled as arguments are added
        self.value_flags: set[str] = set()
        kwargs.setdefault("allow_abbrev", False)
        kwargs.setdefault("exit_on_error", False)
        super().__init__(*args, **kwargs)

    def add_argument(self, *args, **kwargs):
        action = super().add_argument(*args, **kwargs)
        if action.option_strings and action.nargs is None:
            self.value_flags.update(action.option_strings)
        return action

    def error(self, message):
        raise argparse.ArgumentError(None, message)

    def drop_incomplete_options(self, argv: list[str]) -> tuple[list[str], list[str]]:
        """
        Remove value-taking flags that have no value after them.

        Returns:
            (remaining arguments, dropped flags)
        """
        kept: list[str] = []
        dropped: list[str] = []
        i = 0
        while i < len(argv):
            token = argv[i]
            if token == "--":
                kept.extend(argv[i:])
                break
            if token in self.value_flags:
                following = argv[i + 1] if i + 1 < len(argv) else None
                if following is None or (following.startswith("-") and len(following) > 1):
                    dropped.append(token)
                    i += 1
                    continue
                kept.extend((token, following))
                i += 2
                continue
            kept.append(token)
            i += 1
        return kept, dropped


def build_parser() -> CliArgumentParser:
    """Build the argument parser."""
    parser = CliArgumentParser(
        prog="cqlbridge",
        description="CQL-to-ELM Translator",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--input", "-i", metavar="FILE", help="Input CQL file (REQUIRED)")
    parser.add_argument(
        "--output", "-o", metavar="FILE", default=DEFAULT_OUTPUT,
        help=f"Output ELM file (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--format", "-f", metavar="FORMAT", default="XML",
        help="Output format: XML or JSON (default: XML)",
    )
    parser.add_argument(
        "--library-path", "-L", metavar="DIR",
        help="Directory with dependent libraries (default: input's directory)",
    )
    parser.add_argument(
        "--classpath", metavar="PATH",
        help="Engine classpath, os.pathsep-separated (default: $CQLBRIDGE_CLASSPATH)",
    )
    parser.add_argument(
        "--strategies", metavar="NAMES", default=",".join(DEFAULT_STRATEGIES),
        help=f"Invocation strategies in order (default: {','.join(DEFAULT_STRATEGIES)})",
    )
    parser.add_argument(
        "--signatures", metavar="LEVEL", default="None",
        help="Signature level: None|Differing|Overloads|All (default: None)",
    )

    defaults = CompilerOptions()
    for flag, field_name, help_text in BOOLEAN_OPTION_FLAGS:
        parser.add_argument(
            flag,
            dest=field_name,
            nargs="?",
            const=True,
            default=getattr(defaults, field_name),
            type=parse_bool,
            metavar="true|false",
            help=help_text,
        )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument(
        "--verbose-diagnostics", action="store_true",
        help="Group diagnostics and show source context on failure",
    )
    parser.add_argument("--log-json", action="store_true", help="Emit log records as JSON")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_config(args: argparse.Namespace) -> RunConfig:
    """
    Build the run configuration from parsed arguments.

    Raises:
        ValidationError: Invalid option value
    """
    options = CompilerOptions(
        signature_level=args.signatures,
        **{field_name: getattr(args, field_name) for _, field_name, _ in BOOLEAN_OPTION_FLAGS},
    )
    return RunConfig(
        input_path=Path(args.input),
        output_path=Path(args.output),
        output_format=args.format,
        library_path=Path(args.library_path) if args.library_path else None,
        verbose=args.verbose,
        verbose_diagnostics=args.verbose_diagnostics,
        options=options,
        strategies=tuple(name.strip() for name in args.strategies.split(",") if name.strip()),
    )


def print_settings(config: RunConfig) -> None:
    """Print resolved settings (verbose mode)."""
    print(f"Input file: {config.input_path.absolute()}")
    print(f"Output file: {config.output_path}")
    print(f"Output format: {config.output_format.value}")
    print(f"Library path: {config.effective_library_path}")
    print(f"Strategies: {', '.join(config.strategies)}")
    for name, value in config.options.describe().items():
        print(f"  {name}: {value}")


def print_result(result: RunResult, config: RunConfig) -> None:
    """Print the outcome of a run."""
    if config.verbose:
        if result.profile:
            print(f"Engine profile: {result.profile}")
        for attempt in result.attempts:
            state = "ok" if attempt.succeeded else f"failed ({attempt.reason})"
            label = attempt.strategy
            if attempt.description:
                label += f" ({attempt.description})"
            print(f"Strategy {label}: {state}")

    if result.success:
        fmt = config.output_format.value
        print(result.message)
        print(f"Input: {config.input_path.absolute()}")
        print(f"Output: {result.output_path.absolute()}")
        print(f"Format: {fmt}")
        print(f"Generated {result.characters_written} characters of ELM {fmt.lower()}")
    else:
        print(result.message, file=sys.stderr)
        if config.verbose and result.detail:
            print(result.detail, file=sys.stderr)
        elif not config.verbose and result.status is not RunStatus.COMPILATION_FAILED:
            print("Use --verbose for more details", file=sys.stderr)

    if config.verbose:
        print("Metrics:")
        print(json.dumps(get_metrics().to_dict(), indent=2))


def main(argv: list[str] | None = None, engine_loader=None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Arguments (default: sys.argv[1:])
        engine_loader: Engine factory (default: the JVM engine)

    Returns:
        Process exit code
    """
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else list(argv)
    argv, incomplete = parser.drop_incomplete_options(argv)
    try:
        args, unknown = parser.parse_known_args(argv)
    except argparse.ArgumentError as e:
        print(f"Invalid arguments: {e}", file=sys.stderr)
        return RunStatus.CONFIG_ERROR.exit_code

    for arg in incomplete + unknown:
        print(f"Unknown option: {arg}", file=sys.stderr)

    if not args.input:
        parser.print_help()
        return 0

    configure_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        json_format=args.log_json,
    )

    try:
        config = build_config(args)
    except ValidationError as e:
        for error in e.errors():
            print(f"Invalid configuration: {error['msg']}", file=sys.stderr)
        return RunStatus.CONFIG_ERROR.exit_code

    if not config.input_path.exists():
        print(f"CQL file not found: {config.input_path.absolute()}", file=sys.stderr)
        return 1

    if config.verbose:
        print_settings(config)

    print("Attempting to translate CQL to ELM...")

    if engine_loader is None:
        classpath = args.classpath.split(os.pathsep) if args.classpath else None
        engine_loader = lambda: load_jvm_engine(EngineConfig.from_env(classpath=classpath))

    runner = TranslationRunner(engine_loader)
    result = runner.run(config)
    print_result(result, config)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
