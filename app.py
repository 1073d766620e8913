"""
Sokobot: Flask JSON API around the tracked-box solver.

Solving runs in a background thread; clients poll the job for the result.
This module only calls parse_level(), State.from_level(), solve_level() and
the replay helpers.  It never touches solver internals.
"""

import logging
import threading
import uuid

from flask import Flask, jsonify, request

from config import SolverConfig, configure_logging
from levels import parse_level
from puzzles import PUZZLES, get_puzzle_names
from replay import push_steps, reconstruct_path
from search import SearchLimitExceeded, solve_level
from state import State, get_heuristic

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config["SOLVER"] = SolverConfig()

# In-memory job store: job_id -> job dict
jobs: dict[str, dict] = {}


# ---------------------------------------------------------------------------
# API endpoints
# ---------------------------------------------------------------------------

@app.route("/api/levels", methods=["GET"])
def get_levels():
    """Return the built-in puzzle catalog."""
    levels = []
    for name in get_puzzle_names():
        rows = PUZZLES[name]
        root = State.from_level(rows)
        levels.append({
            "name": name,
            "rows": rows,
            "boxes": len(root.boxes),
        })
    return jsonify(levels)


@app.route("/api/solve", methods=["POST"])
def start_solve():
    """Validate a level synchronously, then solve in a background thread."""
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify(status="error",
                       message="Request body must be a JSON object."), 400

    name = data.get("name")
    raw = data.get("level")
    if raw is None and name is not None:
        if name not in PUZZLES:
            return jsonify(status="error",
                           message=f"Unknown puzzle '{name}'."), 404
        raw = PUZZLES[name]
    if not raw:
        return jsonify(status="error",
                       message="Missing 'level' field."), 400

    config: SolverConfig = app.config["SOLVER"]
    heuristic_name = data.get("heuristic", config.heuristic)

    # Validate synchronously so bad input fails fast
    try:
        rows = parse_level(raw)
        heuristic = get_heuristic(heuristic_name)
    except (ValueError, TypeError) as e:
        return jsonify(status="error", message=str(e)), 400

    job_id = uuid.uuid4().hex
    job: dict = {
        "status": "searching",
        "states_explored": 0,
        "pushes": None,
        "actions": None,
        "boards": None,
    }
    jobs[job_id] = job

    def run_solver():
        def on_progress(n):
            job["states_explored"] = n

        result_holder = [None]
        error_holder = [None]

        def do_solve():
            try:
                root = State.from_level(rows, heuristic=heuristic)
                result_holder[0] = solve_level(
                    root, max_states=config.max_states,
                    progress_callback=on_progress,
                    progress_interval=config.progress_interval,
                )
            except SearchLimitExceeded as e:
                job["states_explored"] = e.nodes_explored
                error_holder[0] = str(e)
            except Exception as e:
                logger.exception("Solver failed for job %s", job_id)
                error_holder[0] = str(e)

        thread = threading.Thread(target=do_solve, daemon=True)
        thread.start()
        thread.join(timeout=config.solve_timeout)

        if thread.is_alive():
            job["status"] = "error"
            job["message"] = "Solver timed out."
        elif error_holder[0]:
            job["status"] = "error"
            job["message"] = error_holder[0]
        elif not result_holder[0].solved:
            job["status"] = "no_solution"
            job["states_explored"] = result_holder[0].nodes_explored
        else:
            result = result_holder[0]
            path = reconstruct_path(result.goal)
            pushes = push_steps(path)
            job["status"] = "solved"
            job["states_explored"] = result.nodes_explored
            job["pushes"] = result.goal.g_cost
            job["actions"] = [s.action for s in path[1:]]
            job["boards"] = [path[0].render()] + [s.render() for s in pushes]

    threading.Thread(target=run_solver, daemon=True).start()

    return jsonify(status="ok", job_id=job_id)


@app.route("/api/solve/<job_id>", methods=["GET"])
def poll_solve(job_id):
    """Poll for the result of a solve job."""
    job = jobs.get(job_id)
    if job is None:
        return jsonify(status="error", message="Job not found."), 404
    return jsonify(job)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app.config["SOLVER"] = SolverConfig.from_env()
    configure_logging(app.config["SOLVER"].log_level)
    app.run(debug=True, use_reloader=False, port=5000)
