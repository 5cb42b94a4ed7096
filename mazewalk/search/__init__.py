"""
Search strategies module.

Provides three ways to route from the start cell to a goal:
- solve_depth_first: stack frontier, North explored first
- solve_breadth_first: queue frontier, compass order
- solve_shortest: queue frontier, fewest steps on open same-level grids

Each function takes a Grid, never modifies it, and returns the path as a
list of Positions, or None when no goal can be reached.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from mazewalk.grid import Grid
from mazewalk.search.engine import Path, SearchStats, reconstruct_path, search
from mazewalk.search.frontier import Frontier, QueueFrontier, StackFrontier

__all__ = [
    "Frontier",
    "Path",
    "QueueFrontier",
    "SearchStats",
    "StackFrontier",
    "Strategy",
    "get_solver",
    "reconstruct_path",
    "search",
    "solve",
    "solve_breadth_first",
    "solve_depth_first",
    "solve_shortest",
]

Solver = Callable[..., Path | None]


class Strategy(str, Enum):
    """Routing strategy selector, valued by its command-line name."""

    STACK = "stack"
    QUEUE = "queue"
    OPTIMAL = "opt"


def solve_depth_first(grid: Grid, stats: SearchStats | None = None) -> Path | None:
    """Find a path with a stack; not necessarily the shortest."""
    return search(grid, StackFrontier(), stats)


def solve_breadth_first(grid: Grid, stats: SearchStats | None = None) -> Path | None:
    """Find a path with a queue, expanding neighbors in compass order."""
    return search(grid, QueueFrontier(), stats)


def solve_shortest(grid: Grid, stats: SearchStats | None = None) -> Path | None:
    """
    Find a shortest path by breadth-first layering.

    Every step costs the same, so the first goal discovered layer by layer
    is a fewest-steps goal within a level.
    """
    return search(grid, QueueFrontier(), stats)


_SOLVERS: dict[Strategy, Solver] = {
    Strategy.STACK: solve_depth_first,
    Strategy.QUEUE: solve_breadth_first,
    Strategy.OPTIMAL: solve_shortest,
}


def solve(
    grid: Grid,
    strategy: Strategy | str,
    stats: SearchStats | None = None,
) -> Path | None:
    """Run the given strategy (a Strategy or its name) on grid."""
    return get_solver(strategy)(grid, stats)


def get_solver(name: Strategy | str) -> Solver:
    """
    Get a solver function by strategy name.

    Args:
        name: Strategy or identifier (stack, queue, opt)

    Returns:
        The matching solve_* function

    Raises:
        ValueError: If name is unknown
    """
    try:
        strategy = Strategy(name)
    except ValueError:
        available = ", ".join(s.value for s in Strategy)
        raise ValueError(f"Unknown strategy '{name}'. Available: {available}") from None
    return _SOLVERS[strategy]
