"""
Grid model module.

Provides the read-only maze representation:
- Cell: cell kinds (open, wall, start, goal, walkway)
- Position: immutable (level, row, col) address
- Grid: numpy-backed level stack with adjacency queries
- Move: one step out of a position, with its optional level transition
"""

from mazewalk.grid.cells import Cell, Position
from mazewalk.grid.model import COMPASS, Grid, Move

__all__ = [
    "COMPASS",
    "Cell",
    "Grid",
    "Move",
    "Position",
]
