"""
Flask-based grid pathfinding visualizer with clickable cells.

The server owns the grid and runs the searches; the browser only renders
cells and replays the timed events returned by /visualize.
"""

import logging
import threading

from flask import Flask, jsonify, render_template_string, request

from gridpath.algorithms import ALGORITHMS, get_algorithm
from gridpath.config import (
    DEFAULT_ALGORITHM,
    FLASK_PORT,
    GRID_COLS,
    GRID_ROWS,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from gridpath.errors import ConfigurationError, RunInProgressError
from gridpath.grid.model import Grid
from gridpath.playback.scheduler import PlaybackScheduler
from gridpath.run.engine import SearchEngine

logger = logging.getLogger(__name__)

DEFAULT_EXPLANATION = "Select an algorithm to see its explanation here."

ALGORITHM_LABELS = {"bfs": "BFS", "dijkstra": "Dijkstra", "astar": "A*"}

# HTML Template
BASE_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Pathfinding Visualizer</title>
    <style>
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body { font-family: system-ui, -apple-system, sans-serif; background: #f5f5f5; min-height: 100vh; }
        .header { background: #1a1a2e; color: white; padding: 15px 30px; display: flex; justify-content: space-between; align-items: center; }
        .header h1 { font-size: 1.5rem; }
        .container { max-width: 1000px; margin: 0 auto; padding: 20px; display: flex; gap: 20px; flex-wrap: wrap; }
        .card { background: white; border-radius: 12px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); padding: 20px; }
        .controls { display: flex; gap: 10px; align-items: center; margin-bottom: 15px; }
        select { padding: 10px; border: 2px solid #ddd; border-radius: 8px; font-size: 15px; }
        button { background: #4ecdc4; color: white; border: none; padding: 10px 24px; border-radius: 8px; font-size: 15px; cursor: pointer; }
        button:hover { background: #45b7aa; }
        .btn-danger { background: #e74c3c; }
        .btn-danger:hover { background: #c0392b; }
        #grid-container { display: grid; grid-template-columns: repeat({{ cols }}, 25px); gap: 1px; background: #ddd; border: 1px solid #ddd; width: fit-content; }
        .cell { width: 25px; height: 25px; background: white; cursor: pointer; }
        .cell.start { background: #2ecc71; }
        .cell.end { background: #e74c3c; }
        .cell.wall { background: #1a1a2e; }
        .cell.visited { background: #88c0d0; transition: background 0.3s; }
        .cell.path { background: #f1c40f; transition: background 0.3s; }
        .cell.start.visited, .cell.start.path { background: #2ecc71; }
        .cell.end.visited, .cell.end.path { background: #e74c3c; }
        .stats { min-width: 260px; }
        .stats h2 { margin-bottom: 15px; color: #1a1a2e; font-size: 1.2rem; }
        .stat { display: flex; justify-content: space-between; margin-bottom: 10px; }
        .stat-value { font-weight: 600; color: #4ecdc4; }
        #explanation { margin-top: 20px; color: #666; line-height: 1.5; }
        #error { margin-top: 10px; color: #e74c3c; }
    </style>
</head>
<body>
    <div class="header">
        <h1>Pathfinding Visualizer</h1>
        <span>Click to place start, then end, then walls</span>
    </div>
    <div class="container">
        <div class="card">
            <div class="controls">
                <select id="algorithm">
                    {% for algorithm in algorithms %}
                    <option value="{{ algorithm.name }}" {% if algorithm.name == default_algorithm %}selected{% endif %}>{{ algorithm.label }}</option>
                    {% endfor %}
                </select>
                <button id="visualize-btn">Visualize</button>
                <button id="reset-btn" class="btn-danger">Reset</button>
            </div>
            <div id="grid-container">
                {% for row in cells %}{% for cell in row %}<div class="cell {{ cell.css }}" data-row="{{ cell.row }}" data-col="{{ cell.col }}"></div>{% endfor %}{% endfor %}
            </div>
        </div>
        <div class="card stats">
            <h2>Statistics</h2>
            <div class="stat"><span>Nodes visited</span><span class="stat-value" id="nodes-visited">0</span></div>
            <div class="stat"><span>Path length</span><span class="stat-value" id="path-length">0</span></div>
            <div class="stat"><span>Execution time (ms)</span><span class="stat-value" id="execution-time">0</span></div>
            <p id="explanation">{{ explanation }}</p>
            <p id="error"></p>
        </div>
    </div>
    <script>
        const cellAt = (row, col) => document.querySelector(`.cell[data-row="${row}"][data-col="${col}"]`);
        const errorEl = document.getElementById('error');

        function updateStats(nodesVisited, pathLength, executionTime) {
            document.getElementById('nodes-visited').innerText = nodesVisited;
            document.getElementById('path-length').innerText = pathLength;
            document.getElementById('execution-time').innerText = executionTime;
        }

        async function post(url, body) {
            const resp = await fetch(url, {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify(body || {}),
            });
            const data = await resp.json();
            if (!resp.ok) throw new Error(data.error || resp.statusText);
            return data;
        }

        document.querySelectorAll('.cell').forEach(cell => {
            cell.addEventListener('click', async () => {
                try {
                    const data = await post('/click', {row: +cell.dataset.row, col: +cell.dataset.col});
                    if (data.role === 'ignored') return;
                    cell.classList.remove('wall');
                    if (data.role !== 'open') cell.classList.add(data.role);
                } catch (e) {
                    errorEl.innerText = e.message;
                }
            });
        });

        document.getElementById('reset-btn').addEventListener('click', async () => {
            await post('/reset');
            document.querySelectorAll('.cell').forEach(c => c.className = 'cell');
            updateStats(0, 0, 0);
            document.getElementById('explanation').innerText = {{ default_explanation | tojson }};
            errorEl.innerText = '';
        });

        document.getElementById('visualize-btn').addEventListener('click', async () => {
            errorEl.innerText = '';
            let data;
            try {
                data = await post('/visualize', {algorithm: document.getElementById('algorithm').value});
            } catch (e) {
                alert(e.message);
                return;
            }
            document.querySelectorAll('.cell').forEach(c => c.classList.remove('visited', 'path'));
            document.getElementById('explanation').innerText = data.explanation;
            for (const event of data.events) {
                setTimeout(() => {
                    if (event.type === 'stats') {
                        updateStats(event.nodes_visited, event.path_length, event.execution_time_ms.toFixed(2));
                    } else {
                        cellAt(event.row, event.col).classList.add(event.type);
                    }
                }, event.at_ms);
            }
        });
    </script>
</body>
</html>
"""


def _cell_css(grid: Grid, row: int, col: int) -> str:
    node = grid.node(row, col)
    if node is grid.start:
        return "start"
    if node is grid.end:
        return "end"
    return "wall" if node.is_wall else ""


def create_app(rows: int = GRID_ROWS, cols: int = GRID_COLS) -> Flask:
    """
    Build the Flask app around a fresh grid.

    Args:
        rows: Grid height
        cols: Grid width
    """
    app = Flask(__name__)
    grid = Grid(rows, cols)
    engine = SearchEngine()

    # Held by every handler that edits or searches the shared grid
    grid_lock = threading.Lock()
    app.config["GRID_LOCK"] = grid_lock

    @app.errorhandler(ConfigurationError)
    def configuration_error(e):
        logger.warning(f"Rejected request: {e}")
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(RunInProgressError)
    def run_in_progress(e):
        return jsonify({"error": str(e)}), 409

    @app.route("/")
    def index():
        """Render the grid page."""
        cells = [
            [{"row": r, "col": c, "css": _cell_css(grid, r, c)} for c in range(grid.cols)]
            for r in range(grid.rows)
        ]
        algorithms = [
            {"name": name, "label": ALGORITHM_LABELS.get(name, name)} for name in ALGORITHMS
        ]
        return render_template_string(
            BASE_TEMPLATE,
            cells=cells,
            cols=grid.cols,
            algorithms=algorithms,
            default_algorithm=DEFAULT_ALGORITHM,
            explanation=DEFAULT_EXPLANATION,
            default_explanation=DEFAULT_EXPLANATION,
        )

    @app.route("/algorithms")
    def algorithms():
        return jsonify([
            {"name": name, "description": get_algorithm(name).description}
            for name in ALGORITHMS
        ])

    @app.route("/grid")
    def grid_state():
        with grid_lock:
            start, end = grid.start, grid.end
            walls = grid.walls()
        return jsonify({
            "rows": grid.rows,
            "cols": grid.cols,
            "start": list(start.position) if start else None,
            "end": list(end.position) if end else None,
            "walls": [list(cell) for cell in walls],
        })

    @app.route("/click", methods=["POST"])
    def click():
        data = request.get_json(silent=True) or {}
        try:
            row, col = int(data["row"]), int(data["col"])
        except (KeyError, TypeError, ValueError):
            raise ConfigurationError("Click needs integer 'row' and 'col'")

        with grid_lock:
            role = grid.handle_click(row, col)
        logger.debug(f"Click ({row}, {col}) -> {role}")
        return jsonify({"row": row, "col": col, "role": role})

    @app.route("/reset", methods=["POST"])
    def reset():
        with grid_lock:
            grid.reset()
        return jsonify({"status": "ok"})

    @app.route("/visualize", methods=["POST"])
    def visualize():
        data = request.get_json(silent=True) or {}
        name = data.get("algorithm", DEFAULT_ALGORITHM)
        algorithm = get_algorithm(name)

        with grid_lock:
            result = engine.search(grid, algorithm)

        # The browser owns the real-time clock; ship the whole timeline
        scheduler = PlaybackScheduler()
        scheduler.schedule_result(result)
        events = scheduler.drain()

        return jsonify({
            "algorithm": result.algorithm,
            "explanation": algorithm.description,
            "events": [event.to_dict() for event in events],
            "stats": result.to_stats().to_dict(),
        })

    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    print("\n=== Pathfinding Visualizer ===")
    print(f"Open http://localhost:{FLASK_PORT} in your browser\n")
    app.run(debug=True, port=FLASK_PORT)
