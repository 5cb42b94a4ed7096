"""
Unit tests for the search strategies and path reconstruction.
"""

import pytest

from mazewalk.formats import read_map_file
from mazewalk.grid import Cell, Grid, Position
from mazewalk.search import (
    QueueFrontier,
    SearchStats,
    StackFrontier,
    Strategy,
    get_solver,
    reconstruct_path,
    solve,
    solve_breadth_first,
    solve_depth_first,
    solve_shortest,
)


def P(level: int, row: int, col: int) -> Position:
    return Position(level, row, col)


def assert_connected(grid: Grid, path: list[Position]) -> None:
    """Each step should be a same-level neighbor or a drop through a walkway."""
    for prev, nxt in zip(path, path[1:]):
        same_level = any(move.target == nxt for move in grid.neighbors(prev))
        dropped = grid.cell_at(prev) is Cell.WALKWAY and nxt == P(prev.level + 1, prev.row, prev.col)
        assert same_level or dropped, f"{prev} -> {nxt} is not a move"


class TestCommonProperties:
    """Properties every strategy must satisfy."""

    def test_no_start_returns_none(self, solver):
        grid = Grid.from_levels([["..$", "..."]])
        assert solver(grid) is None

    def test_adjacent_goal(self, solver):
        """Start next to goal yields a two-position path."""
        grid = Grid.from_levels([["...", ".W$", "..."]])
        assert solver(grid) == [P(0, 1, 1), P(0, 1, 2)]

    def test_single_row(self, solver, straight_grid):
        assert solver(straight_grid) == [P(0, 0, 0), P(0, 0, 1), P(0, 0, 2)]

    def test_enclosed_start(self, solver):
        """Walls all around the start leave no path."""
        grid = Grid.from_levels([["@@@.", "@W@.", "@@@$"]])
        assert solver(grid) is None

    def test_no_goal(self, solver):
        grid = Grid.from_levels([["W..", "...", "..|"], ["...", "...", "..."]])
        assert solver(grid) is None

    def test_idempotent(self, solver):
        """Repeated calls on the same grid give the same path."""
        grid = Grid.from_levels([["W...", ".@@.", "...$"]])
        assert solver(grid) == solver(grid)

    def test_grid_not_modified(self, solver, walkway_grid):
        before = walkway_grid.to_array()
        solver(walkway_grid)
        assert (walkway_grid.to_array() == before).all()

    def test_path_starts_at_start_and_ends_at_goal(self, solver, maps_dir):
        grid = read_map_file(maps_dir / "medium1.txt")
        path = solver(grid)
        assert path[0] == grid.find_start()
        assert grid.cell_at(path[-1]).value == "$"
        assert len(set(path)) == len(path)
        assert_connected(grid, path)


class TestWalkways:
    """Test level transitions."""

    def test_goal_directly_below_walkway(self, solver):
        """The walkway cell is an intermediate step before the level-1 goal."""
        grid = Grid.from_levels([["W|"], [".$"]])
        assert solver(grid) == [P(0, 0, 0), P(0, 0, 1), P(1, 0, 1)]

    def test_two_by_two_levels(self, solver):
        grid = Grid.from_levels([["W|", ".."], [".$", ".."]])
        path = solver(grid)
        assert len(path) == 3
        assert path[1] == P(0, 0, 1)
        assert path[-1] == P(1, 0, 1)

    def test_walk_on_after_landing(self, solver, walkway_grid):
        assert solver(walkway_grid) == [P(0, 0, 0), P(0, 0, 1), P(1, 0, 1), P(1, 0, 2)]

    def test_last_level_walkway_is_open_cell(self, solver):
        """A walkway with no level below is still walkable."""
        grid = Grid.from_levels([["W|$"]])
        assert solver(grid) == [P(0, 0, 0), P(0, 0, 1), P(0, 0, 2)]

    def test_no_climbing_back_up(self, solver):
        """Levels are only entered downward."""
        grid = Grid.from_levels([["$.."], ["W|."]])
        assert solver(grid) is None

    def test_wall_below_walkway_blocks_transition(self, solver):
        grid = Grid.from_levels([["W|"], ["$@"]])
        assert solver(grid) is None

    def test_multi_level_chain(self, solver):
        """Three levels joined by two walkways."""
        grid = Grid.from_levels(
            [
                ["W.|"],
                ["|.."],
                ["$.."],
            ]
        )
        path = solver(grid)
        assert path == [
            P(0, 0, 0),
            P(0, 0, 1),
            P(0, 0, 2),
            P(1, 0, 2),
            P(1, 0, 1),
            P(1, 0, 0),
            P(2, 0, 0),
        ]
        assert_connected(grid, path)

    def test_transition_queued_before_walkway(self):
        """A queue expands the lower level first, a stack the walkway cell."""
        grid = Grid.from_levels([["W|$"], ["..$"]])
        assert solve_breadth_first(grid) == [P(0, 0, 0), P(0, 0, 1), P(1, 0, 1), P(1, 0, 2)]
        assert solve_depth_first(grid) == [P(0, 0, 0), P(0, 0, 1), P(0, 0, 2)]


class TestStrategyDifferences:
    """Test where strategy order changes the result."""

    def test_depth_first_takes_the_northern_detour(self):
        grid = Grid.from_levels([["...", "...", "W.$"]])
        assert solve_depth_first(grid) == [
            P(0, 2, 0),
            P(0, 1, 0),
            P(0, 0, 0),
            P(0, 0, 1),
            P(0, 0, 2),
            P(0, 1, 2),
            P(0, 2, 2),
        ]

    def test_shortest_is_minimal(self):
        grid = Grid.from_levels([["...", "...", "W.$"]])
        assert solve_shortest(grid) == [P(0, 2, 0), P(0, 2, 1), P(0, 2, 2)]

    def test_depth_first_never_shorter_than_shortest(self, maps_dir):
        for name in ("easy1.txt", "medium1.txt"):
            grid = read_map_file(maps_dir / name)
            shortest = solve_shortest(grid)
            assert len(solve_depth_first(grid)) >= len(shortest)
            assert len(solve_breadth_first(grid)) >= len(shortest)

    def test_shortest_around_wall(self):
        """The only route climbs to the top row and back down."""
        grid = Grid.from_levels([["W@...", ".@.@.", "...@$"]])
        path = solve_shortest(grid)
        assert len(path) == 11

    def test_first_goal_discovered_wins(self):
        """Queue looks East before West; stack looks West first."""
        grid = Grid.from_levels([["$W$"]])
        assert solve_breadth_first(grid) == [P(0, 0, 1), P(0, 0, 2)]
        assert solve_depth_first(grid) == [P(0, 0, 1), P(0, 0, 0)]


class TestStats:
    """Test the optional search counters."""

    def test_stats_filled_on_success(self, straight_grid):
        stats = SearchStats()
        solve_shortest(straight_grid, stats)
        assert stats.found is True
        assert stats.path_length == 3
        assert stats.expanded == 2
        assert stats.discovered == 3
        assert stats.frontier_peak >= 1

    def test_stats_on_failure(self):
        stats = SearchStats()
        solve_depth_first(Grid.from_levels([["W@$"]]), stats)
        assert stats.found is False
        assert stats.expanded == 1
        assert stats.discovered == 1

    def test_walkway_counts_both_cells(self, walkway_grid):
        """One move onto a walkway discovers two positions."""
        stats = SearchStats()
        solve_breadth_first(walkway_grid, stats)
        assert stats.discovered == 4
        assert stats.frontier_peak == 2

    def test_stats_reset_between_runs(self, straight_grid):
        """Reusing one SearchStats does not carry counts over."""
        stats = SearchStats()
        solve_breadth_first(straight_grid, stats)
        solve_breadth_first(Grid.from_levels([["W@$"]]), stats)
        assert stats.found is False
        assert stats.path_length == 0
        assert stats.expanded == 1
        assert stats.discovered == 1
        assert stats.frontier_peak == 1


class TestFrontiers:
    """Test frontier disciplines."""

    def test_stack_is_lifo(self):
        frontier = StackFrontier()
        frontier.push(P(0, 0, 0))
        frontier.push(P(0, 0, 1))
        assert frontier.pop() == P(0, 0, 1)
        assert frontier.reverse_neighbors is True

    def test_queue_is_fifo(self):
        frontier = QueueFrontier()
        frontier.push(P(0, 0, 0))
        frontier.push(P(0, 0, 1))
        assert frontier.pop() == P(0, 0, 0)
        assert frontier.reverse_neighbors is False

    def test_len_and_peak(self):
        frontier = QueueFrontier()
        assert not frontier
        frontier.push(P(0, 0, 0))
        frontier.push(P(0, 0, 1))
        frontier.pop()
        assert len(frontier) == 1
        assert frontier.peak == 2


class TestReconstructPath:
    """Test parent-chain walking."""

    def test_reverses_chain(self):
        parents = {P(0, 0, 0): None, P(0, 0, 1): P(0, 0, 0), P(1, 0, 1): P(0, 0, 1)}
        assert reconstruct_path(parents, P(1, 0, 1)) == [P(0, 0, 0), P(0, 0, 1), P(1, 0, 1)]

    def test_goal_equal_to_start(self):
        """A start that is its own goal gives a one-position path."""
        assert reconstruct_path({P(0, 0, 0): None}, P(0, 0, 0)) == [P(0, 0, 0)]

    def test_unknown_goal_raises(self):
        with pytest.raises(KeyError):
            reconstruct_path({P(0, 0, 0): None}, P(0, 0, 1))


class TestRegistry:
    """Test strategy lookup."""

    @pytest.mark.parametrize(
        "name, expected",
        [("stack", solve_depth_first), ("queue", solve_breadth_first), ("opt", solve_shortest)],
    )
    def test_get_solver_by_name(self, name, expected):
        assert get_solver(name) is expected

    def test_get_solver_by_enum(self):
        assert get_solver(Strategy.OPTIMAL) is solve_shortest

    def test_get_solver_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown strategy"):
            get_solver("astar")

    def test_solve_dispatches(self, straight_grid):
        assert solve(straight_grid, "queue") == solve_breadth_first(straight_grid)
