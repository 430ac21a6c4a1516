"""
Command-Line Interface for the GPA calculator.

This module provides the interactive CLI. It handles user input and
orchestrates the display of results.

MODES:
------
1. ONE-SHOT: pass every score with --score CODE=VALUE, get the report once
2. INTERACTIVE: type scores one at a time; the report is reprinted after
   every change

NOTE: Don't run this file directly. Run from the project root:
    python3 -m semester_gpa
"""

import argparse
import logging
import sys

from .config import DEFAULT_LOG_LEVEL, LOG_FORMAT, STRICT_SCORE_PARSING
from .calculator import GpaCalculator
from .data import DEFAULT_CATALOG, CatalogLoader
from .errors import GpaCalculatorError, CatalogError
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2

QUIT_COMMANDS = {"quit", "exit", "q"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="semester-gpa",
        description="Semester GPA calculator: enter a 0-100 score per course.",
    )
    parser.add_argument(
        "--catalog",
        metavar="PATH",
        help="JSON catalog file to use instead of the built-in course list",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=STRICT_SCORE_PARSING,
        help="only accept scores that are entirely numeric (\"12abc\" is ignored)",
    )
    parser.add_argument(
        "--score",
        action="append",
        default=[],
        metavar="CODE=VALUE",
        help="score for one course; repeat for more courses. Prints the report and exits.",
    )
    parser.add_argument(
        "--log-level",
        default=logging.getLevelName(DEFAULT_LOG_LEVEL),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: %(default)s)",
    )
    return parser


def _split_score_arg(arg: str) -> tuple:
    """Split "CODE=VALUE" into (code, value); the value may be blank."""
    code, sep, value = arg.partition("=")
    if not sep or not code.strip():
        raise ValueError(f"Expected CODE=VALUE, got {arg!r}")
    return code.strip(), value.strip()


def _handle_command(calculator: GpaCalculator, line: str) -> bool:
    """
    Apply one interactive command.

    COMMANDS:
    ---------
        PHY113 91    set a score (anything after the code is the raw input)
        PHY113       clear that score
        reset        clear every score
        show         reprint the table
        help         list the commands
        quit / exit  stop

    Returns:
        False when the loop should stop, True otherwise
    """
    display = calculator.display
    command = line.strip()
    if not command:
        return True

    keyword = command.lower()
    if keyword in QUIT_COMMANDS:
        return False
    if keyword == "help":
        display.print_help()
        return True
    if keyword == "show":
        calculator.show()
        return True
    if keyword == "reset":
        calculator.reset()
        display.print_notice("All scores cleared.")
        calculator.show()
        return True

    parts = command.split(None, 1)
    code = parts[0]
    raw = parts[1] if len(parts) > 1 else ""
    try:
        calculator.set_score(code, raw.strip())
    except GpaCalculatorError as e:
        logger.warning("Rejected command %r: %s", command, e)
        display.print_error(str(e))
        return True

    calculator.show()
    return True


def run_interactive(calculator: GpaCalculator):
    """Read commands until quit or end of input."""
    display = calculator.display
    display.print_banner()
    calculator.show()
    display.print_help()

    while True:
        try:
            line = input(f"{display.BOLD}> {display.RESET}")
        except EOFError:
            print()
            break
        if not _handle_command(calculator, line):
            break


def main(argv=None) -> int:
    """
    Command-line entry point.

    ═══════════════════════════════════════════════════════════════════════════
    EXAMPLES
    ═══════════════════════════════════════════════════════════════════════════

        python -m semester_gpa
        python -m semester_gpa --score PHY113=90 --score BMS112=80
        python -m semester_gpa --catalog my_semester.json --strict

    ═══════════════════════════════════════════════════════════════════════════

    Returns:
        Process exit status
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    display = TerminalDisplay()

    catalog = DEFAULT_CATALOG
    if args.catalog:
        try:
            catalog = CatalogLoader().load(args.catalog)
        except CatalogError as e:
            display.print_error(str(e))
            return EXIT_USAGE

    calculator = GpaCalculator(catalog=catalog, strict=args.strict, display=display)

    if not args.score:
        run_interactive(calculator)
        return EXIT_OK

    for arg in args.score:
        try:
            code, value = _split_score_arg(arg)
            calculator.set_score(code, value)
        except (ValueError, GpaCalculatorError) as e:
            display.print_error(str(e))
            return EXIT_USAGE

    display.print_banner()
    calculator.show()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
