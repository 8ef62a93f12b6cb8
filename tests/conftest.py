"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from gridpath.algorithms import available_algorithms
from gridpath.grid import Grid, parse_grid


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def empty_grid() -> Grid:
    """5x5 grid without walls, start (0, 0), end (4, 4)."""
    grid = Grid(5, 5)
    grid.set_start(0, 0)
    grid.set_end(4, 4)
    return grid


@pytest.fixture
def adjacent_grid() -> Grid:
    """Start and end next to each other."""
    return parse_grid(
        """
        .....
        .SE..
        .....
        """
    )


@pytest.fixture
def enclosed_grid() -> Grid:
    """End node fully surrounded by walls."""
    return parse_grid(
        """
        S........
        .........
        ......###
        ......#E#
        ......###
        """
    )


@pytest.fixture
def detour_grid() -> Grid:
    """A wall forces a detour around the direct route."""
    return parse_grid(
        """
        S.#..
        ..#..
        ..#.E
        .....
        """
    )


@pytest.fixture(params=available_algorithms())
def algorithm_name(request) -> str:
    """Each algorithm identifier in turn."""
    return request.param


