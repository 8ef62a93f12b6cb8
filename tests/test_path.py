"""
Unit tests for path reconstruction.
"""

from gridpath.algorithms import BFS, Dijkstra, reconstruct_path
from gridpath.grid import Grid


class TestReconstructPath:
    """Test walking backlinks from the end node."""

    def test_unreached_end(self):
        """No backlink: the path is just the end node."""
        grid = Grid(3, 3)
        grid.set_start(0, 0)
        end = grid.set_end(2, 2)
        grid.reset_search_state()

        assert reconstruct_path(grid, end) == [end]
        assert not end.is_visited

    def test_manual_chain(self):
        grid = Grid(1, 4)
        a, b, c, d = grid.nodes()
        grid.link(b, a)
        grid.link(c, b)
        grid.link(d, c)

        assert reconstruct_path(grid, d) == [a, b, c, d]
        assert reconstruct_path(grid, b) == [a, b]

    def test_every_visited_node_round_trips(self, detour_grid):
        """Any node reached by the search reconstructs from start to itself."""
        trace = BFS().run(detour_grid)
        for node in trace:
            path = reconstruct_path(detour_grid, node)
            assert path[0] is detour_grid.start
            assert path[-1] is node
            assert len(path) - 1 == node.distance

    def test_path_after_dijkstra(self, empty_grid):
        Dijkstra().run(empty_grid)
        path = reconstruct_path(empty_grid, empty_grid.end)
        assert path[0] is empty_grid.start
        assert path[-1] is empty_grid.end
        assert len(path) == 9
