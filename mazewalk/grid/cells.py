"""
Cell kinds and grid positions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mazewalk.config import GOAL_CHAR, OPEN_CHAR, START_CHAR, WALKWAY_CHAR, WALL_CHAR
from mazewalk.errors import IllegalMapCharacterError


class Cell(str, Enum):
    """
    The five kinds of grid cell, valued by their map character.

    Every kind except WALL can be stepped on. A WALKWAY behaves like an
    open cell and additionally leads one level down the stack.
    """

    OPEN = OPEN_CHAR
    WALL = WALL_CHAR
    START = START_CHAR
    GOAL = GOAL_CHAR
    WALKWAY = WALKWAY_CHAR

    @classmethod
    def from_char(cls, ch: str) -> Cell:
        """
        Look up the cell kind for a map character.

        Raises:
            IllegalMapCharacterError: If ch is not a known cell code
        """
        try:
            return cls(ch)
        except ValueError:
            raise IllegalMapCharacterError(f"Illegal character {ch!r}") from None

    @classmethod
    def is_valid_char(cls, ch: str) -> bool:
        return any(ch == cell.value for cell in cls)

    @property
    def is_passable(self) -> bool:
        return self is not Cell.WALL


@dataclass(frozen=True, order=True)
class Position:
    """
    Immutable (level, row, col) address of a cell, 0-indexed.

    Attributes:
        level: Index of the grid level in the stack
        row: Row within the level
        col: Column within the row
    """

    level: int
    row: int
    col: int

    def flat_index(self, rows: int, cols: int) -> int:
        """Index of this position in a level-major flattened R*M*N array."""
        return self.level * rows * cols + self.row * cols + self.col

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.level, self.row, self.col)

    def __str__(self) -> str:
        return f"({self.level}, {self.row}, {self.col})"
