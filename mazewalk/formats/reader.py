"""
Maze file readers.

Two input formats share the same header line "M N R" (rows per level,
columns per row, number of levels):

Text map - R*M rows follow, levels stacked top to bottom. Only the first
N characters of each row count:

    3 4 2
    W...
    .@@.
    ...|
    ....
    .@@.
    ...$

Coordinate list - any number of "CHAR ROW COL LEVEL" entries follow.
Cells not listed are open:

    3 4 2
    W 0 0 0
    | 2 3 0
    $ 2 3 1

Both readers validate everything the search engine relies on and raise a
named MapFormatError subclass otherwise.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import numpy as np

from mazewalk.config import DEFAULT_CELL_CHAR, GRID_DTYPE
from mazewalk.errors import IllegalMapCharacterError, IncompleteMapError, IncorrectMapFormatError
from mazewalk.grid import Cell, Grid

logger = logging.getLogger(__name__)

HEADER_HELP = "First line must contain three positive integers (M N R)."


# =============================================================================
# Public API
# =============================================================================

def read_map_file(path: str | Path) -> Grid:
    """
    Read a text-map maze file.

    Raises:
        FileNotFoundError: If path does not exist
        IncorrectMapFormatError: If the header is missing or malformed
        IllegalMapCharacterError: If a cell character is unknown
        IncompleteMapError: If rows are missing or too short
    """
    path = Path(path)
    logger.info(f"Reading text map from {path}...")
    with open(path, encoding="utf-8") as f:
        grid = parse_map_text(f.read(), source=str(path))
    logger.info(f"Loaded {grid!r}")
    return grid


def read_coordinate_file(path: str | Path) -> Grid:
    """
    Read a coordinate-list maze file.

    Raises:
        FileNotFoundError: If path does not exist
        IncorrectMapFormatError: If the header or a coordinate is malformed
        IllegalMapCharacterError: If an entry's cell character is unknown
        IncompleteMapError: If an entry lies outside the declared dimensions
    """
    path = Path(path)
    logger.info(f"Reading coordinate map from {path}...")
    with open(path, encoding="utf-8") as f:
        grid = parse_coordinate_text(f.read(), source=str(path))
    logger.info(f"Loaded {grid!r}")
    return grid


def parse_map_text(text: str, source: str = "<string>") -> Grid:
    """Parse text-map content; see read_map_file."""
    lines = _iter_lines(text)
    rows, cols, levels = _parse_header(lines, source)

    cells = np.empty((levels, rows, cols), dtype=GRID_DTYPE)
    for level in range(levels):
        for row in range(rows):
            line = next(lines, None)
            if line is None:
                raise IncompleteMapError(
                    f"Ran out of input inside level {level} at row {row}. "
                    f"Expected {rows} rows per level.",
                    source=source,
                )
            if len(line) < cols:
                raise IncompleteMapError(
                    f"Level {level}, row {row} has {len(line)} character(s) but needs {cols}.",
                    source=source,
                )

            # Characters past column N are ignored
            for col, ch in enumerate(line[:cols]):
                if not Cell.is_valid_char(ch):
                    raise IllegalMapCharacterError(
                        f"Illegal character {ch!r} found at level {level}, "
                        f"row {row}, col {col}.",
                        source=source,
                    )
                cells[level, row, col] = ch

    return Grid(cells)


def parse_coordinate_text(text: str, source: str = "<string>") -> Grid:
    """Parse coordinate-list content; see read_coordinate_file."""
    lines = _iter_lines(text)
    rows, cols, levels = _parse_header(lines, source)

    cells = np.full((levels, rows, cols), DEFAULT_CELL_CHAR, dtype=GRID_DTYPE)
    for raw in lines:
        line = raw.strip()
        tokens = line.split()

        # Blank and short lines carry no entry
        if len(tokens) < 4:
            if line:
                logger.warning(f"{source}: skipping incomplete entry {line!r}")
            continue

        ch = tokens[0][0]
        if not Cell.is_valid_char(ch):
            raise IllegalMapCharacterError(
                f"Illegal character {ch!r} in coordinate entry: {line!r}",
                source=source,
            )

        try:
            row, col, level = (int(token) for token in tokens[1:4])
        except ValueError:
            raise IncorrectMapFormatError(
                f"Expected integers for ROW, COL, LEVEL in: {line!r}",
                source=source,
            ) from None

        if not (0 <= level < levels and 0 <= row < rows and 0 <= col < cols):
            raise IncompleteMapError(
                f"Coordinate out of bounds in entry: {line!r}. "
                f"Valid range: row 0-{rows - 1}, col 0-{cols - 1}, level 0-{levels - 1}.",
                source=source,
            )

        cells[level, row, col] = ch

    return Grid(cells)


# =============================================================================
# Helpers
# =============================================================================

def _iter_lines(text: str) -> Iterator[str]:
    """Yield lines without their line endings."""
    return iter(text.splitlines())


def _parse_header(lines: Iterator[str], source: str) -> tuple[int, int, int]:
    """Consume the "M N R" header and return (rows, cols, levels)."""
    header = next(lines, None)
    if header is None:
        raise IncorrectMapFormatError(f"File {source!r} is empty. {HEADER_HELP}", source=source)

    parts = header.split()
    if len(parts) < 3:
        raise IncorrectMapFormatError(
            f"{HEADER_HELP} Found: {header.strip()!r}",
            source=source,
        )

    try:
        rows, cols, levels = (int(part) for part in parts[:3])
    except ValueError:
        raise IncorrectMapFormatError(
            f"{HEADER_HELP} Found non-integer value in: {header.strip()!r}",
            source=source,
        ) from None

    if rows <= 0 or cols <= 0 or levels <= 0:
        raise IncorrectMapFormatError(
            f"M, N, and R must all be positive non-zero integers. "
            f"Found: M={rows}, N={cols}, R={levels}",
            source=source,
        )

    return rows, cols, levels
