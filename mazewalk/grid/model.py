"""
Read-only grid model over a stack of equally sized maze levels.

The grid is stored as a numpy array of single-character cell codes with
shape (levels, rows, cols). It answers the queries the search strategies
need: what is in a cell, where the start is, and which moves leave a
position.

Usage:
    from mazewalk.grid import Grid, Position

    grid = Grid.from_levels([["W.$"]])
    grid.find_start()                 # Position(level=0, row=0, col=0)
    grid.neighbors(Position(0, 0, 1)) # moves West and East
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from mazewalk.config import GRID_DTYPE, START_CHAR
from mazewalk.errors import OutOfBoundsError
from mazewalk.grid.cells import Cell, Position

logger = logging.getLogger(__name__)

# Movement deltas (row, col) in compass order: North, South, East, West
COMPASS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, 1), (0, -1))


@dataclass(frozen=True)
class Move:
    """
    A single step out of a position.

    Attributes:
        target: Same-level cell entered by the step
        transition: Cell on the next level reached through the target when
            it is a walkway, else None
    """

    target: Position
    transition: Position | None = None


class Grid:
    """
    Immutable R x M x N grid of cells.

    The caller's array is copied and the copy is marked read-only, so
    nothing done through this object can change the caller's data.

    Attributes:
        levels: Number of stacked levels (R)
        rows: Rows per level (M)
        cols: Columns per row (N)
    """

    def __init__(self, cells: np.ndarray | Sequence) -> None:
        array = np.array(cells, dtype=GRID_DTYPE)
        if array.ndim != 3:
            raise ValueError(f"Grid needs 3 dimensions (levels, rows, cols), got {array.ndim}")
        if 0 in array.shape:
            raise ValueError(f"Grid dimensions must be non-zero, got {array.shape}")

        array.setflags(write=False)
        self._cells = array
        self._levels, self._rows, self._cols = array.shape

    @classmethod
    def from_levels(cls, levels: Iterable[Sequence[str]]) -> Grid:
        """
        Build a grid from row strings, one list of rows per level.

        Args:
            levels: e.g. [["W|", "@@"], [".$", ".."]]

        Raises:
            ValueError: If levels or rows have mismatched sizes
        """
        rows = [[list(row) for row in level] for level in levels]
        widths = {len(row) for level in rows for row in level}
        heights = {len(level) for level in rows}
        if len(widths) > 1 or len(heights) > 1:
            raise ValueError(
                f"All levels must share one shape; got heights {sorted(heights)}, "
                f"widths {sorted(widths)}"
            )
        return cls(rows)

    # =========================================================================
    # Dimensions
    # =========================================================================

    @property
    def levels(self) -> int:
        return self._levels

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int, int]:
        return (self._levels, self._rows, self._cols)

    def in_bounds(self, row: int, col: int) -> bool:
        """True if (row, col) lies inside a level. Levels are checked separately."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def in_levels(self, level: int) -> bool:
        """True if level indexes an existing level."""
        return 0 <= level < self._levels

    # =========================================================================
    # Cell Queries
    # =========================================================================

    def cell_at(self, pos: Position) -> Cell:
        """
        Get the cell kind at a position.

        Raises:
            OutOfBoundsError: If pos lies outside the grid
        """
        if not (self.in_levels(pos.level) and self.in_bounds(pos.row, pos.col)):
            raise OutOfBoundsError(f"Position {pos} outside grid of shape {self.shape}")
        return Cell.from_char(str(self._cells[pos.level, pos.row, pos.col]))

    def find_start(self) -> Position | None:
        """
        Locate the start cell.

        Scans level by level, then row by row, then column by column and
        returns the first start cell, or None when the grid has none.
        """
        # argwhere yields indices in C (level-major) order
        hits = np.argwhere(self._cells == START_CHAR)
        if len(hits) == 0:
            return None
        if len(hits) > 1:
            logger.warning(f"Grid has {len(hits)} start cells; using the first")
        level, row, col = (int(i) for i in hits[0])
        return Position(level, row, col)

    def neighbors(self, pos: Position) -> list[Move]:
        """
        List the moves out of pos in compass order (N, S, E, W).

        Off-grid and wall cells are dropped. A move onto a walkway also
        carries the cell at the same row/col one level down, if that level
        exists and the cell there is not a wall. Levels are only ever
        entered downward; there is no move back up.
        """
        moves: list[Move] = []
        for dr, dc in COMPASS:
            row, col = pos.row + dr, pos.col + dc
            if not self.in_bounds(row, col):
                continue

            target = Position(pos.level, row, col)
            cell = self.cell_at(target)
            if not cell.is_passable:
                continue

            transition = None
            if cell is Cell.WALKWAY and self.in_levels(pos.level + 1):
                below = Position(pos.level + 1, row, col)
                # A wall below blocks the drop; walls are never entered, even from above
                if self.cell_at(below).is_passable:
                    transition = below

            moves.append(Move(target=target, transition=transition))
        return moves

    # =========================================================================
    # Export
    # =========================================================================

    def to_array(self) -> np.ndarray:
        """Return a writable copy of the underlying character array."""
        return self._cells.copy()

    def level_rows(self, level: int) -> list[str]:
        """Rows of one level as strings."""
        if not self.in_levels(level):
            raise OutOfBoundsError(f"Level {level} outside range [0, {self._levels})")
        return ["".join(row) for row in self._cells[level]]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Grid(levels={self._levels}, rows={self._rows}, cols={self._cols})"
