"""
romancalc CLI entrypoint.

This module provides the command-line interface for the Roman numeral desk
calculator. It can run the interactive shell, evaluate a single expression, or
evaluate a script file line by line.

Features:
    - Launch the interactive shell (default when no arguments are given).
    - Evaluate one inline expression with `-s`.
    - Evaluate every line of a file in order, carrying the previous result
      from line to line exactly as the shell does.
    - Select the logging level with `--log-level` or ROMANCALC_LOG_LEVEL.

Example usage:
    romancalc
    romancalc -s "MCMXCIV + VI"
    romancalc sums.txt
    romancalc --repl --no-banner --log-level DEBUG

Functions:
    run_romancalc(source: str, is_string: bool = False) -> int:
        Evaluates an expression or a script file and returns the number of failed lines.

    main() -> None:
        Parses CLI arguments and invokes the appropriate action.
"""

import argparse
import logging
import os
import sys

from romancalc.roman_constants import (
    DEFAULT_LOG_LEVEL,
    DIGIT_ZERO_MESSAGE,
    LOG_LEVEL_ENV,
    RESULT_MARKER,
)
from romancalc.roman_repl import LineSession, handle_line, print_message

logger = logging.getLogger(__name__)


def run_romancalc(source: str, is_string: bool = False) -> int:
    """
    Evaluate an inline expression or every line of a script file.

    Args:
        source (str): The expression, or the path of a file with one expression per line.
        is_string (bool): If True, treats `source` as an expression instead of a path.

    Returns:
        int: The number of lines that were rejected.

    Raises:
        OSError: If the script file cannot be read.

    Side Effects:
        Prints one "[] "-prefixed message per evaluated line to stdout.
    """
    if is_string:
        lines = [source]
    else:
        with open(source, encoding="utf-8") as f:
            lines = [
                line
                for line in f.read().splitlines()
                if line.strip() not in ("", RESULT_MARKER)
            ]
        logger.debug("Read %d lines from %s", len(lines), source)

    session = LineSession()
    failures = 0
    for raw in lines:
        outcome = handle_line(raw, session)
        print_message(outcome.message)
        if outcome.quit:
            break
        if outcome.error is not None or outcome.message == DIGIT_ZERO_MESSAGE:
            failures += 1
    return failures


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="romancalc", description="Roman numeral desk calculator"
    )
    parser.add_argument(
        "source", nargs="?", help="File of expressions, or an expression (with -s)"
    )
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as an expression"
    )
    parser.add_argument(
        "--repl", action="store_true", help="Launch the interactive shell"
    )
    parser.add_argument(
        "--no-banner",
        dest="banner",
        action="store_false",
        help="Do not print the welcome text in the shell",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """
    Entry point for the romancalc CLI.

    - Launches the shell if no source is given or `--repl` is specified.
    - Otherwise evaluates the expression or file and exits with status 1 if
      any line was rejected.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.repl or args.source is None:
        from romancalc.roman_repl import start_repl

        start_repl(banner=args.banner)
        return

    failures = run_romancalc(source=args.source, is_string=args.string)
    if failures:
        sys.exit(1)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
