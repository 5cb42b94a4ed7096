"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from mazewalk.grid import Grid
from mazewalk.search import solve_breadth_first, solve_depth_first, solve_shortest


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def maps_dir(project_root: Path) -> Path:
    """Return the sample maps directory."""
    return project_root / "maps"


@pytest.fixture(
    params=[solve_depth_first, solve_breadth_first, solve_shortest],
    ids=["stack", "queue", "opt"],
)
def solver(request):
    """Each of the three routing strategies in turn."""
    return request.param


@pytest.fixture
def straight_grid() -> Grid:
    """Single row: start, open, goal."""
    return Grid.from_levels([["W.$"]])


@pytest.fixture
def walkway_grid() -> Grid:
    """Two levels joined by a walkway; the goal sits past the landing cell."""
    return Grid.from_levels([["W|@"], ["@.$"]])


@pytest.fixture
def write_maze(tmp_path: Path):
    """Write maze text to a temporary file and return its path."""

    def _write(text: str, name: str = "maze.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
