"""
Unit tests for BFS, Dijkstra and A*.
"""

import pytest

from gridpath.algorithms import (
    AStar,
    BFS,
    Dijkstra,
    available_algorithms,
    get_algorithm,
    reconstruct_path,
)
from gridpath.errors import ConfigurationError
from gridpath.grid import Grid, parse_grid, random_grid
from gridpath.heuristics import manhattan


def solve(grid, name):
    """
    Run an algorithm and snapshot its output.

    Returns:
        (trace positions, path positions, whether the end was reached)
    """
    trace = get_algorithm(name).run(grid)
    path = reconstruct_path(grid, grid.end)
    return (
        [node.position for node in trace],
        [node.position for node in path],
        grid.end.is_visited,
    )


def assert_valid_path(grid, path):
    """Path starts at start, ends at end, moves one orthogonal step at a time over open cells."""
    assert path[0] == grid.start.position
    assert path[-1] == grid.end.position
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1
    assert not any(grid.node(r, c).is_wall for r, c in path)


class TestRegistry:
    """Test algorithm lookup."""

    def test_available(self):
        assert available_algorithms() == ["bfs", "dijkstra", "astar"]

    def test_get_algorithm_types(self):
        assert isinstance(get_algorithm("bfs"), BFS)
        assert isinstance(get_algorithm("dijkstra"), Dijkstra)
        assert isinstance(get_algorithm("astar"), AStar)

    def test_unknown_algorithm(self):
        with pytest.raises(ConfigurationError, match="Unknown algorithm"):
            get_algorithm("dfs")

    def test_descriptions(self, algorithm_name):
        algorithm = get_algorithm(algorithm_name)
        assert algorithm.name == algorithm_name
        assert algorithm.description

    def test_run_requires_start_and_end(self, algorithm_name):
        grid = Grid(3, 3)
        grid.set_start(0, 0)
        with pytest.raises(ConfigurationError):
            get_algorithm(algorithm_name).run(grid)

    def test_run_rejects_walled_start(self, empty_grid, algorithm_name):
        empty_grid.start.is_wall = True
        with pytest.raises(ConfigurationError, match="walls"):
            get_algorithm(algorithm_name).run(empty_grid)
        assert not any(node.is_visited for node in empty_grid)

    def test_unhashable_name_is_unknown(self):
        with pytest.raises(ConfigurationError, match="Unknown algorithm"):
            get_algorithm(["bfs"])


class TestScenarios:
    """Fixed grids with known answers, for every algorithm."""

    def test_empty_grid_path_length(self, empty_grid, algorithm_name):
        """5x5 empty grid, corner to corner: 8 moves."""
        trace, path, found = solve(empty_grid, algorithm_name)
        assert found
        assert len(path) - 1 == 8
        assert_valid_path(empty_grid, path)
        assert len(trace) <= 25

    def test_adjacent(self, adjacent_grid, algorithm_name):
        trace, path, found = solve(adjacent_grid, algorithm_name)
        assert found
        assert path == [(1, 1), (1, 2)]

    def test_enclosed_end(self, enclosed_grid, algorithm_name):
        """Walled-off end: search terminates, trace excludes end, no path."""
        trace, path, found = solve(enclosed_grid, algorithm_name)
        assert not found
        assert enclosed_grid.end.position not in trace
        assert path == [enclosed_grid.end.position]

    def test_enclosed_end_explores_reachable_region(self, enclosed_grid, algorithm_name):
        """Every reachable open cell is finalized exactly once."""
        trace, _, _ = solve(enclosed_grid, algorithm_name)
        open_cells = 9 * 5 - len(enclosed_grid.walls()) - 1
        assert len(trace) == open_cells
        assert len(set(trace)) == len(trace)

    def test_detour(self, detour_grid, algorithm_name):
        trace, path, found = solve(detour_grid, algorithm_name)
        assert found
        assert len(path) - 1 == 8
        assert_valid_path(detour_grid, path)

    def test_start_equals_end(self, algorithm_name):
        grid = Grid(3, 3)
        grid.set_start(1, 1)
        grid.set_end(1, 1)
        trace, path, found = solve(grid, algorithm_name)
        assert found
        assert trace == [(1, 1)]
        assert path == [(1, 1)]

    def test_trace_never_contains_walls(self, detour_grid, algorithm_name):
        trace, _, _ = solve(detour_grid, algorithm_name)
        walls = set(detour_grid.walls())
        assert not walls.intersection(trace)

    def test_trace_starts_with_start_and_ends_with_end(self, detour_grid, algorithm_name):
        trace, _, _ = solve(detour_grid, algorithm_name)
        assert trace[0] == detour_grid.start.position
        assert trace[-1] == detour_grid.end.position

    def test_rerun_resets_state(self, empty_grid, algorithm_name):
        """Running twice on the same grid gives the same answer."""
        first = solve(empty_grid, algorithm_name)
        second = solve(empty_grid, algorithm_name)
        assert first == second


class TestBFS:
    """BFS-specific ordering."""

    def test_exact_order_2x2(self):
        grid = parse_grid("S.\n.E")
        trace, path, _ = solve(grid, "bfs")
        assert trace == [(0, 0), (1, 0), (0, 1), (1, 1)]
        assert path == [(0, 0), (1, 0), (1, 1)]

    def test_layers_nondecreasing(self, empty_grid):
        """Trace visits hop-count layers in order; end sits at layer = Manhattan distance."""
        trace = BFS().run(empty_grid)
        layers = [node.distance for node in trace]
        assert layers == sorted(layers)
        assert trace[-1] is empty_grid.end
        assert empty_grid.end.distance == manhattan(empty_grid.start, empty_grid.end)

    def test_empty_grid_visits_everything(self, empty_grid):
        """End is the single farthest cell, so BFS finalizes all 25 first."""
        trace, _, _ = solve(empty_grid, "bfs")
        assert len(trace) == 25


class TestDijkstra:
    """Dijkstra-specific behavior."""

    def test_exact_order_2x2(self):
        grid = parse_grid("S.\n.E")
        trace, path, _ = solve(grid, "dijkstra")
        assert trace == [(0, 0), (1, 0), (0, 1), (1, 1)]
        assert path == [(0, 0), (1, 0), (1, 1)]

    def test_distances_are_hop_counts(self, detour_grid):
        trace = Dijkstra().run(detour_grid)
        for node in trace:
            assert node.distance >= manhattan(detour_grid.start, node)
        assert detour_grid.end.distance == 8

    def test_walls_not_marked_visited(self, detour_grid):
        Dijkstra().run(detour_grid)
        for row, col in detour_grid.walls():
            assert not detour_grid.node(row, col).is_visited

    def test_empty_grid_trace(self, empty_grid):
        trace, _, _ = solve(empty_grid, "dijkstra")
        assert len(trace) == 25


class TestAStar:
    """A*-specific behavior."""

    def test_empty_grid_goes_straight(self, empty_grid):
        """All cells tie on f; lowest heuristic first means only path cells are expanded."""
        trace, path, _ = solve(empty_grid, "astar")
        assert len(trace) == 9
        assert trace == path

    def test_goal_included_in_trace(self, detour_grid):
        trace = AStar().run(detour_grid)
        assert trace[-1] is detour_grid.end
        assert detour_grid.end.is_visited

    def test_zero_heuristic_matches_dijkstra_length(self, detour_grid):
        AStar(heuristic=lambda node, target: 0).run(detour_grid)
        assert detour_grid.end.distance == 8

    def test_fewer_nodes_than_dijkstra(self, empty_grid):
        astar_trace, _, _ = solve(empty_grid, "astar")
        dijkstra_trace, _, _ = solve(empty_grid, "dijkstra")
        assert len(astar_trace) < len(dijkstra_trace)


class TestRandomGridProperties:
    """Cross-algorithm invariants on seeded random grids."""

    @pytest.mark.parametrize("seed", range(40))
    def test_invariants(self, seed):
        grid = random_grid(12, 15, density=0.3, seed=seed)

        bfs_trace, bfs_path, bfs_found = solve(grid, "bfs")
        dij_trace, dij_path, dij_found = solve(grid, "dijkstra")
        ast_trace, ast_path, ast_found = solve(grid, "astar")

        assert bfs_found == dij_found == ast_found

        if bfs_found:
            assert len(bfs_path) == len(dij_path) == len(ast_path)
            for path in (bfs_path, dij_path, ast_path):
                assert_valid_path(grid, path)
            assert len(ast_trace) <= len(dij_trace)
            assert set(ast_trace) <= set(dij_trace)
        else:
            end = grid.end.position
            assert end not in bfs_trace
            assert end not in dij_trace
            assert end not in ast_trace
            # Unreachable end: every algorithm exhausts the same component
            assert set(bfs_trace) == set(dij_trace) == set(ast_trace)

    @pytest.mark.parametrize("seed", range(10))
    def test_open_grid_path_is_manhattan(self, seed, algorithm_name):
        grid = random_grid(10, 10, density=0.0, seed=seed, start=(seed % 10, 0), end=(9 - seed % 10, 9))
        _, path, found = solve(grid, algorithm_name)
        assert found
        assert len(path) - 1 == manhattan(grid.start, grid.end)
