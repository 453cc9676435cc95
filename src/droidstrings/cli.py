"""Command-line interface.

Usage:
    droidstrings [INPUT] [-o OUTPUT] [options]
    python -m droidstrings [INPUT] [-o OUTPUT] [options]

Reads a JSON localization map from INPUT (standard input when omitted or
"-") and writes Android string-resources XML to standard output, or to
OUTPUT once the whole conversion has succeeded.

Exit Codes:
    0: Conversion succeeded
    1: Input, decode, serialize or output failure
    2: Invalid command line (reported by argparse)
    3: Configuration error (unknown locale, Babel missing)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from droidstrings import __version__
from droidstrings.config import ConversionConfig
from droidstrings.converter import convert, read_input
from droidstrings.core.babel_compat import BabelImportError
from droidstrings.diagnostics import (
    ConfigurationError,
    ConversionError,
    DiagnosticFormatter,
    OutputFormat,
)
from droidstrings.enums import KeyOrder, PluralsTag

__all__ = ["build_parser", "main", "make_logger"]

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 3

_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)

STDOUT_TARGET = "<stdout>"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="droidstrings",
        description="Convert a JSON localization map to Android string resources XML.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="JSON file to convert (default: standard input)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="write XML to this file instead of standard output",
    )
    parser.add_argument(
        "--android-plurals",
        action="store_true",
        help="emit the Android-standard <plurals> element instead of <plural>",
    )
    parser.add_argument(
        "--sort-keys",
        action="store_true",
        help="order entries by JSON key instead of document order",
    )
    parser.add_argument(
        "--strict-placeholders",
        action="store_true",
        help="fail on nested, unmatched or unterminated placeholders",
    )
    parser.add_argument(
        "--no-xml-declaration",
        dest="xml_declaration",
        action="store_false",
        help="omit the <?xml ...?> declaration",
    )
    parser.add_argument(
        "--locale",
        default=None,
        help="warn about plurals missing categories used by LOCALE (requires Babel)",
    )
    parser.add_argument(
        "--error-format",
        choices=[str(fmt) for fmt in OutputFormat],
        default=str(OutputFormat.RUST),
        help="diagnostic style on standard error (default: rust)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="log progress (-v) or every entry (-vv) to standard error",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def make_logger(verbosity: int = 0) -> logging.Logger:
    """Create the process diagnostic sink writing to standard error.

    The logger is not registered with the logging module, so repeated calls
    never stack handlers on shared state.
    """
    logger = logging.Logger("droidstrings", _LEVELS[min(verbosity, len(_LEVELS) - 1)])
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def config_from_args(args: argparse.Namespace) -> ConversionConfig:
    """Translate parsed arguments into a ConversionConfig."""
    return ConversionConfig(
        plurals_tag=PluralsTag.PLURALS if args.android_plurals else PluralsTag.PLURAL,
        key_order=KeyOrder.SORTED if args.sort_keys else KeyOrder.SOURCE,
        strict_placeholders=args.strict_placeholders,
        xml_declaration=args.xml_declaration,
        locale=args.locale,
    )


def main(argv: Sequence[str] | None = None, *, logger: logging.Logger | None = None) -> int:
    """Run the converter.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])
        logger: Diagnostic sink (default: a fresh stderr logger)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    if logger is None:
        logger = make_logger(args.verbose)
    output_format = OutputFormat(args.error_format)
    formatter = DiagnosticFormatter(
        output_format=output_format,
        color=output_format is OutputFormat.RUST and sys.stderr.isatty(),
    )

    try:
        config = config_from_args(args)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return EXIT_CONFIG

    try:
        data, source = read_input(args.input, logger=logger)
        xml = convert(data, config, source=source, logger=logger)
    except ConfigurationError as e:
        _report(logger, formatter, e)
        return EXIT_CONFIG
    except BabelImportError as e:
        logger.error("%s", e)
        return EXIT_CONFIG
    except ConversionError as e:
        _report(logger, formatter, e)
        return EXIT_FAILURE

    if args.output is None:
        try:
            sys.stdout.buffer.write(xml)
            sys.stdout.flush()
        except OSError as e:
            logger.error("Cannot write output '%s': %s", STDOUT_TARGET, e.strerror or e)
            if isinstance(e, BrokenPipeError):
                _discard_stdout()
            return EXIT_FAILURE
        return EXIT_OK

    try:
        args.output.write_bytes(xml)
    except OSError as e:
        logger.error("Cannot write output '%s': %s", args.output, e.strerror or e)
        return EXIT_FAILURE
    logger.info("Wrote %d bytes to %s", len(xml), args.output)
    return EXIT_OK


def _discard_stdout() -> None:
    """Point standard output at the null device.

    The unwritten bytes stay buffered after a broken pipe; without this the
    interpreter's final flush fails again and prints a second traceback.
    """
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, sys.stdout.fileno())
    finally:
        os.close(devnull)


def _report(logger: logging.Logger, formatter: DiagnosticFormatter, error: ConversionError) -> None:
    if error.diagnostic is not None:
        logger.error("%s", formatter.format(error.diagnostic))
    else:
        logger.error("%s", error)


if __name__ == "__main__":
    sys.exit(main())
