"""
Tests for the Plotly comparison charts.
"""

import plotly.graph_objects as go

from gridpath.run import SearchEngine
from ui.components.charts import create_comparison_chart, create_time_chart, create_trace_heatmap


def test_comparison_chart(empty_grid):
    engine = SearchEngine()
    results = [engine.search(empty_grid, name) for name in ("bfs", "dijkstra", "astar")]

    fig = create_comparison_chart(results)

    assert isinstance(fig, go.Figure)
    visited, path = fig.data
    assert list(visited.x) == ["bfs", "dijkstra", "astar"]
    assert list(visited.y) == [25, 25, 9]
    assert list(path.y) == [8, 8, 8]


def test_time_chart(empty_grid):
    result = SearchEngine().search(empty_grid, "bfs")
    fig = create_time_chart([result])
    assert list(fig.data[0].y) == [result.execution_time_ms]


def test_trace_heatmap(adjacent_grid):
    result = SearchEngine().search(adjacent_grid, "bfs")
    fig = create_trace_heatmap(result, adjacent_grid.rows, adjacent_grid.cols)

    heatmap, path = fig.data
    assert heatmap.z[1][1] == 0
    assert list(path.x) == [1, 2]
    assert list(path.y) == [1, 1]
