"""
Renderers for a solved (or unsolved) maze.

Both renderers return lists of lines and leave printing to the caller.
"""

from __future__ import annotations

from collections.abc import Sequence

from mazewalk.config import NO_PATH_MESSAGE, PATH_MARKER
from mazewalk.grid import Grid, Position


def render_map(grid: Grid, path: Sequence[Position]) -> list[str]:
    """
    Draw the grid with the path marked.

    Every position between the first (start) and the last (goal) is
    replaced by PATH_MARKER on a copy of the grid; start and goal keep
    their own characters. All levels are returned top to bottom, one row
    per line, without the dimension header.
    """
    display = grid.to_array()
    for pos in path[1:-1]:
        display[pos.level, pos.row, pos.col] = PATH_MARKER

    return ["".join(row) for level in display for row in level]


def render_coordinates(path: Sequence[Position]) -> list[str]:
    """
    List the path as "+ROW COL LEVEL" lines.

    The start position is skipped; the goal is included.
    """
    return [f"{PATH_MARKER}{pos.row} {pos.col} {pos.level}" for pos in path[1:]]


def render_result(
    grid: Grid,
    path: Sequence[Position] | None,
    coordinates: bool = False,
) -> list[str]:
    """Render a search result in the requested format, or the no-path message."""
    if path is None:
        return [NO_PATH_MESSAGE]
    if coordinates:
        return render_coordinates(path)
    return render_map(grid, path)
