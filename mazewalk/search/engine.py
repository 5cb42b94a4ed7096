"""
Generic visited-marking graph search over a maze grid.

All strategies run the same loop; the frontier passed in decides the
exploration order. Positions are marked visited the moment they are
discovered, and the search stops as soon as a goal cell is discovered,
so the first goal reached in the strategy's order is the one returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mazewalk.grid import Cell, Grid, Position
from mazewalk.search.frontier import Frontier

logger = logging.getLogger(__name__)

# Ordered positions from start to goal, both inclusive
Path = list[Position]

# Visited position -> position that discovered it (None for the start)
ParentMap = dict[Position, Position | None]


@dataclass
class SearchStats:
    """
    Counters collected during one search call.

    Attributes:
        expanded: Positions removed from the frontier and expanded
        discovered: Positions marked visited (including the start)
        frontier_peak: Largest frontier size seen
        path_length: Number of positions in the returned path (0 if none)
    """

    expanded: int = 0
    discovered: int = 0
    frontier_peak: int = 0
    path_length: int = 0

    @property
    def found(self) -> bool:
        return self.path_length > 0


def search(
    grid: Grid,
    frontier: Frontier,
    stats: SearchStats | None = None,
) -> Path | None:
    """
    Search from the grid's start cell until a goal cell is discovered.

    Args:
        grid: Maze to search (never modified)
        frontier: Empty frontier; its discipline sets the strategy
        stats: Optional counters to fill in

    Returns:
        Path from start to the first goal discovered, or None if there is
        no start cell or no reachable goal
    """
    if stats is None:
        stats = SearchStats()
    stats.expanded = stats.discovered = stats.frontier_peak = stats.path_length = 0

    start = grid.find_start()
    if start is None:
        logger.debug("No start cell in grid; nothing to search")
        return None

    parents: ParentMap = {start: None}
    frontier.push(start)
    stats.discovered = 1

    logger.debug(f"Searching {grid!r} from {start} with {frontier.name} frontier")

    while frontier:
        current = frontier.pop()
        stats.expanded += 1

        moves = grid.neighbors(current)
        if frontier.reverse_neighbors:
            moves.reverse()

        for move in moves:
            if move.target in parents:
                continue

            parents[move.target] = current
            stats.discovered += 1
            reached = [move.target]

            # The level below is reached through the walkway cell itself
            transition = move.transition
            if transition is not None and transition not in parents:
                parents[transition] = move.target
                stats.discovered += 1
                reached.append(transition)
            else:
                transition = None

            for pos in reached:
                if grid.cell_at(pos) is Cell.GOAL:
                    path = reconstruct_path(parents, pos)
                    stats.frontier_peak = frontier.peak
                    stats.path_length = len(path)
                    logger.debug(
                        f"Goal {pos} found by {frontier.name} search: "
                        f"{len(path)} positions, {stats.expanded} expanded"
                    )
                    return path

            if transition is not None:
                frontier.push(transition)
            frontier.push(move.target)

    stats.frontier_peak = frontier.peak
    logger.debug(
        f"No goal reachable by {frontier.name} search "
        f"({stats.expanded} expanded, {stats.discovered} discovered)"
    )
    return None


def reconstruct_path(parents: ParentMap, goal: Position) -> Path:
    """
    Walk the parent chain back from goal and return it in start-to-goal order.

    Raises:
        KeyError: If goal (or any ancestor) was never recorded in parents
    """
    if goal not in parents:
        raise KeyError(f"Goal {goal} was never visited")

    path: Path = []
    node: Position | None = goal
    while node is not None:
        path.append(node)
        node = parents[node]

    path.reverse()
    return path
