"""Command line entry point: analyze every game in a game file."""

import argparse
import logging
import sys
from typing import List, Optional

from .analytics.service import AnalysisService
from .core.config import DEFAULT_GAMES_FILE, DEFAULT_OUTPUT_FORMAT, LOG_LEVEL, OUTPUT_FORMATS
from .core.errors import GameFileError
from .games import builtin_game_file, load_game_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="normalform",
        description="Dominant strategy, Nash and Pareto analysis of 2x2 games",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=DEFAULT_GAMES_FILE,
        help=f"Game file in TOML format (default: {DEFAULT_GAMES_FILE})",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output format (default: {DEFAULT_OUTPUT_FORMAT})",
    )
    parser.add_argument("--builtin", action="store_true", help="Analyze the built-in textbook games")
    parser.add_argument("--no-labels", action="store_true", help="Do not print descriptive game names")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_log_level(name: str) -> Optional[int]:
    """Map a level name such as "INFO" to its number, None if it is not a level."""
    return logging.getLevelNamesMapping().get(name.strip().upper())


def configure_logging(verbose: bool = False, level_name: str = LOG_LEVEL) -> None:
    level = resolve_log_level(level_name)
    logging.basicConfig(
        level=logging.DEBUG if verbose else (logging.WARNING if level is None else level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    if level is None:
        logger.warning("Unknown log level %r, using WARNING", level_name)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the analysis and write the report to stdout.

    Returns:
        0 on success, 1 if the game file cannot be read or parsed.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    service = AnalysisService(labels={} if args.no_labels else None)
    try:
        if args.builtin:
            game_file = builtin_game_file()
        else:
            game_file = load_game_file(args.file)
    except GameFileError as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1

    if args.no_labels:
        analyses = service.analyze(game_file.games)
    else:
        analyses = service.analyze_game_file(game_file)
    sys.stdout.write(service.render(analyses, args.output_format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
