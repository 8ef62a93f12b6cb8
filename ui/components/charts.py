"""
Plotly chart components for comparing algorithms on the same grid.
"""

import plotly.graph_objects as go

from gridpath.run.state import SearchResult

COLORS = {"bfs": "#3498db", "dijkstra": "#9b59b6", "astar": "#2ecc71"}


def _color(result: SearchResult) -> str:
    return COLORS.get(result.algorithm, "#95a5a6")


def create_comparison_chart(results: list[SearchResult]) -> go.Figure:
    """Grouped bars: nodes visited and path length per algorithm."""
    labels = [r.algorithm for r in results]

    fig = go.Figure(data=[
        go.Bar(name="Nodes visited", x=labels, y=[r.nodes_visited for r in results], marker_color="#88c0d0"),
        go.Bar(name="Path length", x=labels, y=[r.path_length for r in results], marker_color="#f1c40f"),
    ])

    fig.update_layout(
        title="Nodes Visited vs Path Length",
        barmode="group",
        yaxis_title="Cells",
        height=320,
        margin=dict(t=35, b=45, l=45, r=15),
    )
    return fig


def create_time_chart(results: list[SearchResult]) -> go.Figure:
    """Bar chart of search execution time."""
    fig = go.Figure(data=[
        go.Bar(
            x=[r.algorithm for r in results],
            y=[r.execution_time_ms for r in results],
            marker_color=[_color(r) for r in results],
            hovertemplate="<b>%{x}</b><br>%{y:.2f} ms<extra></extra>",
        )
    ])

    fig.update_layout(
        title="Execution Time",
        yaxis_title="ms",
        showlegend=False,
        height=280,
        margin=dict(t=35, b=45, l=45, r=15),
    )
    return fig


def create_trace_heatmap(result: SearchResult, rows: int, cols: int) -> go.Figure:
    """Heatmap of visitation order (darker = finalized earlier); unvisited cells are blank."""
    order: list[list[float | None]] = [[None] * cols for _ in range(rows)]
    for i, (row, col) in enumerate(result.visited):
        order[row][col] = i

    fig = go.Figure(data=go.Heatmap(
        z=order,
        colorscale="Blues",
        reversescale=True,
        hovertemplate="row %{y}, col %{x}<br>step %{z}<extra></extra>",
    ))

    path_rows = [row for row, _ in result.path] if result.path_found else []
    path_cols = [col for _, col in result.path] if result.path_found else []
    fig.add_trace(go.Scatter(
        x=path_cols,
        y=path_rows,
        mode="lines+markers",
        line=dict(color="#f1c40f", width=3),
        marker=dict(size=6),
        name="path",
    ))

    fig.update_layout(
        title=f"{result.algorithm} visitation order",
        yaxis=dict(autorange="reversed", scaleanchor="x"),
        showlegend=False,
        height=420,
        margin=dict(t=35, b=30, l=30, r=15),
    )
    return fig
