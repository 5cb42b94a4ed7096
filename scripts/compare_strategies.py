#!/usr/bin/env python3
"""
Compare the three routing strategies on a set of maze files.

Usage:
    python scripts/compare_strategies.py                 # every map under maps/
    python scripts/compare_strategies.py a.txt b.txt
    python scripts/compare_strategies.py --coordinate maps/coordinate.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from mazewalk.config import LOG_DATE_FORMAT, LOG_FORMAT, list_sample_maps  # noqa: E402
from mazewalk.errors import MazeError  # noqa: E402
from mazewalk.formats import read_coordinate_file, read_map_file  # noqa: E402
from mazewalk.search import SearchStats, Strategy, solve  # noqa: E402


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare stack, queue and optimal search on maze files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "maps",
        nargs="*",
        type=Path,
        help="Maze files (default: every sample map)",
    )
    parser.add_argument(
        "--coordinate",
        action="store_true",
        help="Read the files as coordinate lists",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args()


def compare(path: Path, coordinate: bool) -> None:
    """Run every strategy on one file and print a row per strategy."""
    reader = read_coordinate_file if coordinate else read_map_file
    grid = reader(path)

    print(f"\n{path.name}  {grid.levels} level(s) x {grid.rows} x {grid.cols}")
    print("-" * 60)

    for strategy in Strategy:
        stats = SearchStats()
        started = time.perf_counter()
        result = solve(grid, strategy, stats)
        elapsed_ms = (time.perf_counter() - started) * 1000

        length = f"{len(result) - 1:3} steps" if result else " no path "
        print(
            f"  {strategy.value:6} : {length}  "
            f"expanded {stats.expanded:5}  peak {stats.frontier_peak:4}  ({elapsed_ms:.3f}ms)"
        )


def main() -> int:
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    paths = args.maps
    if not paths:
        # Coordinate samples need the other reader
        paths = [p for p in list_sample_maps() if "coordinate" not in p.stem]
    if not paths:
        print("No maze files to compare", file=sys.stderr)
        return 1

    print("=" * 60)
    print("Strategy Comparison")
    print("=" * 60)

    failures = 0
    for path in paths:
        try:
            compare(path, args.coordinate)
        except (FileNotFoundError, MazeError) as e:
            print(f"\n{path}: ERROR - {e}")
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
