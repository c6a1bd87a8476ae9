"""
Advent of Code 2022 Solutions - Entry Point

Runs one puzzle part, both parts of a day, or every solution, printing one
timed line per solution.

Example:
    python main.py all
    python main.py 10            # Both parts of day 10
    python main.py 1 a           # Day 1, part A
    python main.py 1 a --input sample.txt
"""

import sys
import logging
import argparse
from typing import List, Optional

from aoc.inputs import FileInputLoader
from aoc.runner import TimedRunner
from aoc.report import Reporter
from aoc.settings import load_settings
from aoc.solver import (
    Part,
    RegistrationError,
    Selection,
    SelectionNotFound,
    build_registry,
)


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def configure_logging(debug: bool, log_file: Optional[str] = None) -> None:
    """
    Configure logging to stderr and, optionally, a log file.

    Args:
        debug: Log at DEBUG level instead of WARNING
        log_file: Path of a log file to write alongside the console
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]  # Console output (stderr)
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Advent of Code 2022 - timed puzzle solutions"
    )
    parser.add_argument(
        "day",
        nargs="?",
        help='"all" or a day number (1-25)'
    )
    parser.add_argument(
        "part",
        nargs="?",
        help="Puzzle part, a or b (default: both)"
    )
    parser.add_argument(
        "--input", "-i",
        help="Read this input file instead of the input directory"
    )
    parser.add_argument(
        "--input-dir",
        help="Directory containing {day}.txt input files (default: from config, else input)"
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Settings file (default: config.json)"
    )
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List the registered solutions and exit"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging and save rendered displays as images"
    )
    args = parser.parse_args(argv)

    if not args.list:
        args.selection = build_selection(parser, args)
        if args.input and args.selection.is_all:
            parser.error("--input cannot be used with all")
    return args


def build_selection(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Selection:
    """
    Turn the positional arguments into a Selection.

    Exits with a usage error if they are missing or malformed.
    """
    if args.day is None:
        parser.error('a day number or "all" is required')

    if args.day.lower() == "all":
        if args.part is not None:
            parser.error('a part cannot be combined with "all"')
        return Selection.all()

    try:
        day = int(args.day)
    except ValueError:
        parser.error(f'day must be a number or "all", got {args.day!r}')

    if args.part is None:
        return Selection.one_day(day)

    try:
        part = Part.parse(args.part)
    except ValueError as e:
        parser.error(str(e))
    return Selection.one_part(day, part)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the selected solutions.

    Returns:
        Exit code
    """
    args = parse_args(argv)

    # Load persistent settings; CLI flags override them
    settings = load_settings(args.config)
    debug = args.debug or bool(settings.get("debug_enabled", False))
    configure_logging(debug, settings.get("log_file"))

    input_dir = args.input_dir or settings.get("input_dir") or "input"
    loader = FileInputLoader(input_dir, override=args.input)

    try:
        registry = build_registry(loader)
    except RegistrationError as e:
        logger.critical(f"Solver catalogue is inconsistent: {e}")
        return EXIT_FAILURE

    if args.list:
        reporter = Reporter(sys.stdout)
        for info in registry.describe():
            reporter.listing(info["day"], info["part"], info["description"])
        return EXIT_OK

    selection = args.selection
    try:
        entries = registry.resolve(selection)
    except SelectionNotFound as e:
        logger.error(f"Cannot run {selection}: {e}")
        return EXIT_FAILURE

    logger.info(f"Running {len(entries)} solution(s) for {selection} with the {loader.name} loader ({input_dir})")
    runner = TimedRunner(out=sys.stdout, debug=debug)
    summary = runner.run(entries, selection)

    if summary.failed and selection.is_single:
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
