from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from markup_lint.controllers.lint_controller import LintController
from markup_lint.dom.registry import get_all_possible_codes
from markup_lint.report import Report
from markup_lint_cli.managers.config_manager import config_manager
from markup_lint_cli.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

STDIN_LABEL = "<stdin>"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Exit statuses wrap modulo 256; clamp so a large count never reads as success
MAX_EXIT_STATUS = 255

HELP_DESCRIPTION = """\
Analyzes HTML files for style, completeness, and overall deliciousness.

If no files are given, analyzes the standard input. Every violation is
printed as one line; the exit status is the number of violations (capped
at 255)."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markup-lint",
        description=HELP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("files", nargs="*", type=Path, help="HTML files to lint.")
    parser.add_argument("--list-codes", action="store_true", help="List every diagnostic code and exit.")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None,
        help="Override the configured log level."
    )
    parser.add_argument("--no-progress", action="store_true", help="Disable the progress bar.")
    return parser


def _output_stream():
    if config_manager.get_nested("output.stream", "stderr") == "stdout":
        return sys.stdout
    return sys.stderr


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point of the markup-lint command.

    Returns:
        int: The process exit status (the diagnostic count, clamped).
    """
    args = build_parser().parse_args(argv)

    if args.log_level:
        config_manager.set_nested("debug.level", args.log_level)
    if args.no_progress:
        config_manager.set_nested("output.progress", False)

    configure_logger(
        config_manager.get_nested("debug.level", "WARNING"),
        silenced_loggers=config_manager.get_nested("debug.silenced_loggers", {}),
    )

    if args.list_codes:
        for code in get_all_possible_codes():
            print(code)
        return 0

    report = Report(stream=_output_stream())
    controller = LintController(
        report,
        encoding=config_manager.get_nested("input.encoding", "utf-8"),
        progress=bool(config_manager.get_nested("output.progress", True)),
    )

    if args.files:
        controller.lint_paths(args.files)
    else:
        logger.debug("No files given; reading standard input.")
        controller.lint_bytes(sys.stdin.buffer.read(), STDIN_LABEL)

    return min(report.count, MAX_EXIT_STATUS)


def run() -> None:
    """Console-script wrapper around main()."""
    sys.exit(main())


if __name__ == "__main__":
    run()
