from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema, the flag compatibility rules and the
translation of parsed arguments into a RunConfig. Parsing never exits the
process: every problem surfaces as a CliUsageError for the app layer to
report.
"""

import argparse
from typing import List, NoReturn, Optional

from qtree.domain.config import RunConfig, get_default_config
from qtree.domain.constants import APP_NAME, OutputFormat

FORMAT_CONFLICT_MSG = "Error: Incompatible flags --json and --xml or duplicate flags."
INCOMPATIBLE_FLAGS_MSG = "Error: Incompatible flags."

USAGE_TEXT = (
    f"Usage: {APP_NAME} [options] <directory>\n"
    "Options:\n"
    "  -j, --json      Output as JSON\n"
    "  -x, --xml       Output as XML\n"
    "  -h, --help      Show this help message\n"
    "  -v, --version   Show version information\n"
    "  -o, --output    Specify output file\n"
)


class CliUsageError(Exception):
    """
    Invalid command line.

    Attributes:
        message: Text to print, or empty when only the usage is shown.
        show_usage: Whether the usage text should be printed.
        detail: Parser diagnostic for stderr, e.g. an unknown option.
    """

    def __init__(self, message: str = "", show_usage: bool = False, detail: str = "") -> None:
        super().__init__(message or detail or "invalid usage")
        self.message = message
        self.show_usage = show_usage
        self.detail = detail


class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing to stderr and exiting."""

    def error(self, message: str) -> NoReturn:
        raise CliUsageError(show_usage=True, detail=message)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the qtree CLI.

    Format, help and version flags are counted rather than stored so that
    duplicates can be rejected by `validate_args`.
    """
    p = _RaisingArgumentParser(prog=APP_NAME, add_help=False)

    # --- Format Selection ---
    p.add_argument("-j", "--json", dest="json", action="count", default=0)
    p.add_argument("-x", "--xml", dest="xml", action="count", default=0)

    # --- Informational ---
    p.add_argument("-h", "--help", dest="help", action="count", default=0)
    p.add_argument("-v", "--version", dest="version", action="count", default=0)

    # --- Output ---
    p.add_argument("-o", "--output", dest="output_file", default=None)

    # --- Diagnostics ---
    p.add_argument("--debug", action="store_true")
    p.add_argument("--log-file", dest="log_file", default=None)

    p.add_argument("paths", nargs="*")

    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse and validate the command line.

    Options may precede or follow the directory. A "--" ends option
    parsing, so directories whose names start with "-" can be listed.

    Raises:
        CliUsageError: On unknown options, missing option values or
            incompatible flags.
    """
    args = build_parser().parse_args(argv)
    validate_args(args)
    return args


def validate_args(args: argparse.Namespace) -> None:
    """
    Enforce the flag compatibility rules.

    --json and --xml may each appear once and never together. --help and
    --version exclude every other selection flag and each other.
    Positional arguments are checked later, after help/version had a
    chance to short-circuit.
    """
    if args.json + args.xml > 1:
        raise CliUsageError(FORMAT_CONFLICT_MSG)

    informational = args.help + args.version
    if informational == 0:
        return
    if informational > 1 or args.json or args.xml or args.output_file is not None:
        raise CliUsageError(INCOMPATIBLE_FLAGS_MSG)

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_config(args: argparse.Namespace) -> RunConfig:
    """
    Translate validated arguments into a RunConfig.

    Raises:
        CliUsageError: Unless exactly one directory path was given.
    """
    if len(args.paths) != 1:
        raise CliUsageError(show_usage=True)

    defaults = get_default_config()

    output_format = defaults["output_format"]
    if args.json:
        output_format = OutputFormat.JSON
    elif args.xml:
        output_format = OutputFormat.XML

    return RunConfig(
        root_path=args.paths[0],
        output_format=output_format,
        output_file=args.output_file,
        debug=bool(args.debug),
        log_file=args.log_file or defaults["log_file"],
    )
