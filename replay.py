"""
Solution replay: walk a goal state back to the root and print the pushes.

Run as a script to solve the two demo levels and show their traces.
"""

from __future__ import annotations

import logging
import time

from config import SolverConfig, configure_logging
from levels import parse_level
from puzzles import DEMO_LEVELS, get_puzzle
from state import State
from search import SearchLimitExceeded, solve

logger = logging.getLogger(__name__)


def reconstruct_path(goal: State) -> list[State]:
    """Root-first list of states ending at `goal`."""
    if goal.arena is not None:
        return goal.arena.path_to(goal)
    return [goal]


def push_steps(path: list[State]) -> list[State]:
    """Only the states produced by a push; moves are free and skipped."""
    return [s for s in path if s.action is not None and s.action.startswith("PUSH")]


def format_solution(goal: State, name: str, elapsed: float | None = None) -> str:
    """Trace of a solution: push count, the initial board, then each push."""
    path = reconstruct_path(goal)
    lines = [f"{name} - solution found!"]
    if elapsed is not None:
        lines.append(f"Solve time: {elapsed * 1000:.0f} ms")
    lines.append(f"Optimal solution length: {goal.g_cost} pushes")
    lines.append("")
    lines.append("--- INITIAL STATE ---")
    lines.append(path[0].render())

    for i, step in enumerate(push_steps(path), start=1):
        lines.append("")
        lines.append(f"{i}. {step.action}")
        lines.append(step.render())

    lines.append("")
    lines.append("--- END OF SOLUTION ---")
    return "\n".join(lines)


def run(name: str, rows: list[str], config: SolverConfig) -> State | None:
    level = parse_level(rows)
    t0 = time.perf_counter()
    try:
        goal = solve(level, heuristic=config.heuristic,
                     max_states=config.max_states)
    except SearchLimitExceeded as e:
        logger.warning("%s: %s", name, e)
        return None
    elapsed = time.perf_counter() - t0

    if goal is None:
        print(f"{name} - no solution found.")
    else:
        print(format_solution(goal, name, elapsed))
    return goal


if __name__ == "__main__":
    config = SolverConfig.from_env()
    configure_logging(config.log_level)

    for name in DEMO_LEVELS:
        print(f"\n--- Solving: {name} ---")
        run(name, get_puzzle(name), config)
