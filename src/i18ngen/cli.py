"""Command-line interface.

Usage:
    i18ngen generate [--config i18ngen.yaml] [--locales en,ja] [--output-dir DIR]
    i18ngen check    [--config i18ngen.yaml]

Flags override values from the configuration file.

Exit Codes:
    0   Success (generate wrote or confirmed output; check found it current)
    1   check: generated output is missing or stale
    2   Configuration, source, model, or generation error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from i18ngen import __version__
from i18ngen.config import GeneratorConfig, load_config
from i18ngen.constants import DEFAULT_CONFIG_FILE
from i18ngen.diagnostics import DiagnosticFormatter, I18nGenError, OutputFormat
from i18ngen.enums import Backend
from i18ngen.generator import generate

__all__ = ["build_parser", "main", "resolve_config"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_STALE = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the ``i18ngen`` command."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        "-c",
        default=DEFAULT_CONFIG_FILE,
        help=f"Configuration file (default: {DEFAULT_CONFIG_FILE}; missing file uses defaults)",
    )
    common.add_argument("--locales", help="Comma-separated locales, primary first")
    common.add_argument("--messages", help="Glob pattern for message files")
    common.add_argument("--placeholders", help="Glob pattern for placeholder files")
    common.add_argument("--output-dir", help="Directory receiving the generated module")
    common.add_argument("--module", dest="output_module", help="Generated module name")
    common.add_argument(
        "--plural-placeholders",
        help="Comma-separated placeholder names treated as the plural count",
    )
    common.add_argument(
        "--backend",
        choices=[backend.value for backend in Backend],
        help="Rendering backend for generated code",
    )
    common.add_argument(
        "--compound",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Placeholder files hold every locale (--no-compound: one file per locale)",
    )
    common.add_argument(
        "--format",
        dest="output_format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Error output format (default: rust)",
    )
    verbosity = common.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Errors only")

    parser = argparse.ArgumentParser(
        prog="i18ngen",
        description="Generate typed Python localization code from message catalogs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate using ./i18ngen.yaml:
  i18ngen generate

  # Override locales and output:
  i18ngen generate --locales en,ja,fr --output-dir src/app --module messages

  # Fail CI when the committed module is stale:
  i18ngen check
""",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("generate", parents=[common], help="Generate the localization module")
    commands.add_parser(
        "check", parents=[common], help="Verify the generated module is up to date"
    )
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def resolve_config(args: argparse.Namespace) -> GeneratorConfig:
    """Load the configuration file and apply command-line overrides.

    Raises:
        ConfigurationError: If the file or an override is invalid
    """
    config = load_config(args.config).merge(
        locales=args.locales,
        messages=args.messages,
        placeholders=args.placeholders,
        output_dir=args.output_dir,
        output_module=args.output_module,
        plural_placeholders=args.plural_placeholders,
        backend=args.backend,
    )
    if args.compound is not None:
        config = replace(config, compound=args.compound)
    return config.validate()


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``i18ngen`` command."""
    args = build_parser().parse_args(argv)
    _configure_logging(args)
    formatter = DiagnosticFormatter(output_format=OutputFormat(args.output_format))
    check = args.command == "check"

    try:
        result = generate(resolve_config(args), check=check)
    except I18nGenError as exc:
        if exc.diagnostic is not None:
            print(formatter.format(exc.diagnostic), file=sys.stderr)
        else:
            print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if check and not result.up_to_date:
        logger.error("%s is out of date; run 'i18ngen generate'", result.output_path)
        return EXIT_STALE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
