"""
Maze solver CLI - route Wolverine from W to the $ through stacked mazes.

Usage:
    mazewalk --Stack maps/easy1.txt
    mazewalk --Queue --Incoordinate maps/coordinate.txt
    mazewalk --Opt --Time maps/multilevel.txt
    mazewalk --Queue --Outcoordinate maps/easy1.txt

Routing (exactly one):
    --Stack         Stack-based (depth-first) path search
    --Queue         Queue-based (breadth-first) path search
    --Opt           Shortest (optimal) path search

Options:
    --Incoordinate  Input is in coordinate format (default: text map)
    --Outcoordinate Output in coordinate format (default: text map)
    --Time          Print the search runtime
    --Help          Print this message and exit
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from dotenv import load_dotenv

from mazewalk.config import ENV_FILE, LOG_DATE_FORMAT, LOG_FORMAT, RUNTIME_FORMAT, get_log_level
from mazewalk.errors import IllegalCommandLineInputsError, MazeError
from mazewalk.formats import read_coordinate_file, read_map_file, render_result
from mazewalk.grid import Grid
from mazewalk.search import SearchStats, Strategy, get_solver

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mazewalk",
        description="Find a path through a stack of mazes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
        add_help=False,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        "--Help",
        action="help",
        help="Show this message and exit",
    )
    parser.add_argument("--Stack", dest="stack", action="store_true", help="Stack-based search")
    parser.add_argument("--Queue", dest="queue", action="store_true", help="Queue-based search")
    parser.add_argument("--Opt", dest="opt", action="store_true", help="Shortest-path search")
    parser.add_argument(
        "--Incoordinate",
        dest="in_coordinate",
        action="store_true",
        help="Read the input file as a coordinate list",
    )
    parser.add_argument(
        "--Outcoordinate",
        dest="out_coordinate",
        action="store_true",
        help="Print the path as a coordinate list",
    )
    parser.add_argument(
        "--Time",
        dest="time",
        action="store_true",
        help="Print the search runtime",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument("inputfile", nargs="?", help="Maze file to solve")

    return parser


def parse_args(argv: list[str] | None = None) -> tuple[argparse.Namespace, list[str]]:
    """Parse command line arguments, returning unrecognized switches separately."""
    return build_parser().parse_known_args(argv)


def select_strategy(args: argparse.Namespace) -> Strategy:
    """
    Pick the routing strategy from the parsed switches.

    Raises:
        IllegalCommandLineInputsError: If not exactly one routing switch is set
    """
    chosen = [
        strategy
        for strategy, flag in (
            (Strategy.STACK, args.stack),
            (Strategy.QUEUE, args.queue),
            (Strategy.OPTIMAL, args.opt),
        )
        if flag
    ]
    if len(chosen) != 1:
        raise IllegalCommandLineInputsError(
            "You must specify exactly one of --Stack, --Queue, or --Opt. "
            f"Found {len(chosen)} routing mode(s)."
        )
    return chosen[0]


def require_inputfile(args: argparse.Namespace) -> str:
    """
    Return the input file argument.

    Raises:
        IllegalCommandLineInputsError: If no input file was given
    """
    if not args.inputfile:
        raise IllegalCommandLineInputsError("No input file given. The maze file must be the last argument.")
    return args.inputfile


def load_grid(path: str, coordinates: bool) -> Grid:
    """Read the input file in the selected format."""
    if coordinates:
        return read_coordinate_file(path)
    return read_map_file(path)


def error_kind(error: MazeError) -> str:
    """Short label for an error class, e.g. 'IncompleteMap'."""
    return type(error).__name__.removesuffix("Error")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv(ENV_FILE)
    args, unknown = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else get_log_level()
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    for switch in unknown:
        logger.warning(f"Unrecognized switch {switch!r}; ignoring")

    try:
        strategy = select_strategy(args)
        grid = load_grid(require_inputfile(args), args.in_coordinate)
    except FileNotFoundError:
        print(f"Error: File not found: {args.inputfile!r}", file=sys.stderr)
        return 1
    except MazeError as e:
        print(f"Error ({error_kind(e)}): {e}", file=sys.stderr)
        return 1

    # Time only the search, not reading or printing
    solver = get_solver(strategy)
    stats = SearchStats()
    started = time.perf_counter()
    path = solver(grid, stats)
    elapsed = time.perf_counter() - started

    logger.info(
        f"{strategy.value} search: {stats.path_length} positions in path, "
        f"{stats.expanded} expanded, {stats.discovered} discovered, "
        f"frontier peak {stats.frontier_peak}"
    )

    for line in render_result(grid, path, coordinates=args.out_coordinate):
        print(line)

    if args.time:
        print(RUNTIME_FORMAT.format(seconds=elapsed))

    return 0


if __name__ == "__main__":
    sys.exit(main())
