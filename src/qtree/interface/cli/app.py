from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument validation, logging bootstrap,
tree construction, and rendering to the selected sink. Maps every outcome
to a process exit code.
"""

import os
import sys
from typing import List, Optional

from qtree.core.analysis.tree_generator import build_tree
from qtree.core.analysis.tree_renderer import render
from qtree.domain.config import RunConfig
from qtree.domain.constants import APP_NAME, VERSION_STRING
from qtree.domain.tree_models import TraversalError
from qtree.infra.fs import open_output_sink
from qtree.infra.logging import LoggingConfig, configure_logging, get_logger
from qtree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments without the program name.
            Defaults to sys.argv[1:].

    Returns:
        int: Process exit code (0 for success, 1 for failure).
    """
    # 1. Argument parsing phase (no filesystem access before this passes)
    try:
        args = cli_args.parse_args(argv)
    except cli_args.CliUsageError as e:
        _print_usage_error(e)
        return EXIT_FAILURE

    # 2. Informational short-circuits
    if args.version:
        print(VERSION_STRING)
        return EXIT_OK
    if args.help:
        sys.stdout.write(cli_args.USAGE_TEXT)
        return EXIT_OK

    try:
        config = cli_args.args_to_config(args)
    except cli_args.CliUsageError as e:
        _print_usage_error(e)
        return EXIT_FAILURE

    # 3. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig(
        level="DEBUG" if config.debug else "WARNING",
        console=True,
        log_file=config.log_file,
    ))

    # 4. Listing
    return run_listing(config)


def run_listing(config: RunConfig) -> int:
    """
    Build the tree for the configured root and render it.

    Unreadable directories are reported but do not change the exit code.
    A MemoryError discards the partial tree: nothing is rendered.

    Returns:
        int: Process exit code.
    """
    errors: List[TraversalError] = []
    logger.debug(f"Listing '{config.root_path}' as {config.output_format.value}")

    try:
        tree = build_tree(config.root_path, errors)
    except MemoryError:
        logger.critical(f"Out of memory while walking '{config.root_path}'. No output written.")
        return EXIT_FAILURE

    try:
        with open_output_sink(config.output_file) as sink:
            render(tree, config.output_format, sink)
    except BrokenPipeError:
        _silence_stdout()
        return EXIT_OK
    except OSError as e:
        target = config.output_file if config.output_file is not None else "<stdout>"
        logger.error(f"Cannot write output to '{target}': {e.strerror or e}")
        return EXIT_FAILURE
    except MemoryError:
        logger.critical("Out of memory while rendering the listing.")
        return EXIT_FAILURE

    if errors:
        logger.debug(f"{len(errors)} directories could not be read")
    return EXIT_OK

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _print_usage_error(error: cli_args.CliUsageError) -> None:
    """
    Argument errors are reported on stdout. Parser diagnostics, such as an
    unknown option, go to stderr ahead of the usage text.
    """
    if error.detail:
        sys.stderr.write(f"{APP_NAME}: {error.detail}\n")
    if error.message:
        print(error.message)
    if error.show_usage:
        sys.stdout.write(cli_args.USAGE_TEXT)


def _silence_stdout() -> None:
    """
    Point stdout at devnull after the reader went away, so the interpreter
    does not raise again while flushing at shutdown.
    """
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
