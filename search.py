"""
A* search over States, minimising the number of pushes.

Duplicate-tolerant: the same configuration may sit in the open set several
times with different costs.  The visited check happens when a state is
popped, so the cheapest copy always wins.
"""

from __future__ import annotations

import heapq
import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from grid import GridModel
from state import State, get_heuristic

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 5000


class SearchLimitExceeded(RuntimeError):
    """Raised when a node budget runs out before the search finishes."""

    def __init__(self, nodes_explored: int):
        super().__init__(
            f"Search stopped after exploring {nodes_explored} states."
        )
        self.nodes_explored = nodes_explored


@dataclass
class SearchResult:
    goal: State | None
    nodes_explored: int
    states_generated: int
    elapsed: float

    @property
    def solved(self) -> bool:
        return self.goal is not None


def solve(
    level: Sequence[str],
    heuristic: str = "nearest_target",
    max_states: int | None = None,
    progress_callback: Callable[[int], None] | None = None,
) -> State | None:
    """Solve a level given as equal-length rows.

    Returns the goal State reached with the fewest pushes, or None when no
    solution exists.  Walk `state.parent` (or `state.arena.path_to`) to
    recover the solution.
    """
    root = State.from_level(
        level, grid=GridModel.from_level(level), heuristic=get_heuristic(heuristic)
    )
    return solve_level(root, max_states, progress_callback).goal


def solve_level(
    root: State,
    max_states: int | None = None,
    progress_callback: Callable[[int], None] | None = None,
    progress_interval: int = PROGRESS_INTERVAL,
) -> SearchResult:
    """Run A* from an already built root state."""
    t0 = time.perf_counter()

    if root.is_goal():
        logger.info("Level already solved.")
        return SearchResult(root, 0, 1, time.perf_counter() - t0)

    # Priority queue: (f, insertion order, state); FIFO among equal f
    counter = 0
    open_heap: list[tuple[int, int, State]] = [(root.f_cost, counter, root)]
    visited: set[str] = set()
    nodes_explored = 0
    states_generated = 1

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        key = current.unique_key()

        if key in visited:
            continue

        nodes_explored += 1
        if max_states is not None and nodes_explored > max_states:
            logger.warning("Node limit of %d reached.", max_states)
            raise SearchLimitExceeded(nodes_explored - 1)

        if progress_callback and nodes_explored % progress_interval == 0:
            progress_callback(nodes_explored)

        if current.is_goal():
            elapsed = time.perf_counter() - t0
            logger.info("Solved in %d pushes, %d states explored, %.3fs.",
                        current.g_cost, nodes_explored, elapsed)
            return SearchResult(current, nodes_explored, states_generated, elapsed)

        visited.add(key)

        for nxt in current.successors():
            states_generated += 1
            if nxt.unique_key() not in visited:
                counter += 1
                heapq.heappush(open_heap, (nxt.f_cost, counter, nxt))

    elapsed = time.perf_counter() - t0
    logger.info("No solution; %d states explored, %.3fs.", nodes_explored, elapsed)
    return SearchResult(None, nodes_explored, states_generated, elapsed)
