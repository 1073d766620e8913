"""
Search states for the tracked-box solver.

A State is one snapshot of the board: player position, the set of lettered
boxes, a display grid for rendering, and the A* costs.  States of one solve
live in a StateArena and point at their parent by integer handle, which is
all path reconstruction needs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from itertools import permutations

from boxes import BoxIdentity
from glyphs import (
    DIRECTIONS,
    PLAYER,
    PLAYER_ON_TARGET,
    Direction,
    box_glyph,
    box_letter,
    is_box_glyph,
    player_glyph,
)
from grid import GridModel, Pos

logger = logging.getLogger(__name__)

Heuristic = Callable[[Iterable[BoxIdentity], GridModel], int]


# ---------------------------------------------------------------------------
# Heuristics
# ---------------------------------------------------------------------------

def manhattan(a: Pos, b: Pos) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def nearest_target(boxes: Iterable[BoxIdentity], grid: GridModel) -> int:
    """Sum of each box's Manhattan distance to its closest target.

    Targets are not reserved, so two boxes may both count the same target.
    Player travel is ignored; pushes are the only cost.
    """
    if not grid.targets:
        return 0
    total = 0
    for box in boxes:
        pos = box.position
        if pos in grid.targets:
            continue
        total += min(manhattan(pos, t) for t in grid.targets)
    return total


def assignment(boxes: Iterable[BoxIdentity], grid: GridModel) -> int:
    """Minimum total Manhattan distance over one-to-one box-to-target
    assignments.  At most four boxes, so brute force over permutations."""
    boxes = list(boxes)
    targets = sorted(grid.targets)
    if not boxes or len(targets) < len(boxes):
        return nearest_target(boxes, grid)

    positions = [box.position for box in boxes]
    dists = [[manhattan(p, t) for t in targets] for p in positions]
    best = None
    for perm in permutations(range(len(targets)), len(positions)):
        cost = sum(dists[i][j] for i, j in enumerate(perm))
        if best is None or cost < best:
            best = cost
    return best


HEURISTICS: dict[str, Heuristic] = {
    "nearest_target": nearest_target,
    "assignment": assignment,
}


def get_heuristic(name: str) -> Heuristic:
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic {name!r}; choose from {sorted(HEURISTICS)}"
        ) from None


# ---------------------------------------------------------------------------
# State arena
# ---------------------------------------------------------------------------

class StateArena:
    """Append-only store of every State created during one solve."""

    def __init__(self) -> None:
        self._states: list[State] = []

    def add(self, state: State) -> int:
        handle = len(self._states)
        self._states.append(state)
        state.handle = handle
        state.arena = self
        return handle

    def get(self, handle: int) -> State:
        return self._states[handle]

    def __len__(self) -> int:
        return len(self._states)

    def path_to(self, state: State) -> list[State]:
        """Root-first list of states ending at `state`."""
        path = [state]
        while path[-1].parent_handle is not None:
            path.append(self._states[path[-1].parent_handle])
        path.reverse()
        return path


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------

class State:
    """Player position, lettered boxes and A* costs for one configuration.

    Use `State.from_level` for the root and `State.from_parent` (or
    `successors`) for everything else.
    """

    def __init__(self, grid: GridModel, heuristic: Heuristic = nearest_target):
        self.grid = grid
        self.heuristic = heuristic
        self.player_row = 0
        self.player_col = 0
        self.boxes: set[BoxIdentity] = set()
        self.display_grid: list[list[str]] = []
        self.g_cost = 0
        self.h_cost = 0
        self.f_cost = 0
        self.parent_handle: int | None = None
        self.action: str | None = None
        self.handle: int | None = None
        self.arena: StateArena | None = None

    # -- construction -------------------------------------------------------

    @classmethod
    def from_level(
        cls,
        level: Sequence[str],
        grid: GridModel | None = None,
        heuristic: Heuristic = nearest_target,
        arena: StateArena | None = None,
    ) -> State:
        """Build the root state from level rows.

        The Grid Model is built here unless one is passed in.  Box glyphs in
        either case map to the same lowercase box identity.
        """
        if grid is None:
            grid = GridModel.from_level(level)
        state = cls(grid, heuristic)

        for r, line in enumerate(level):
            row: list[str] = []
            for c, ch in enumerate(line):
                pos = (r, c)
                on_target = grid.is_target(pos)
                if ch in (PLAYER, PLAYER_ON_TARGET):
                    state.player_row, state.player_col = r, c
                    row.append(player_glyph(on_target))
                elif is_box_glyph(ch):
                    letter = box_letter(ch)
                    state.boxes.add(BoxIdentity(letter, r, c))
                    row.append(box_glyph(letter, on_target))
                else:
                    row.append(grid.static_glyph(pos))
            state.display_grid.append(row)

        state.g_cost = 0
        state._update_costs()
        (arena if arena is not None else StateArena()).add(state)
        return state

    @classmethod
    def from_parent(cls, parent: State) -> State:
        """Independent copy of `parent` whose parent link points back at it.

        The caller applies one action to the copy before publishing it.
        """
        state = cls(parent.grid, parent.heuristic)
        state.player_row = parent.player_row
        state.player_col = parent.player_col
        state.boxes = set(parent.boxes)
        state.display_grid = [row[:] for row in parent.display_grid]
        state.g_cost = parent.g_cost
        state.h_cost = parent.h_cost
        state.f_cost = parent.f_cost
        state.parent_handle = parent.handle
        if parent.arena is not None:
            parent.arena.add(state)
        return state

    # -- queries ------------------------------------------------------------

    @property
    def player(self) -> Pos:
        return (self.player_row, self.player_col)

    @property
    def parent(self) -> State | None:
        if self.parent_handle is None or self.arena is None:
            return None
        return self.arena.get(self.parent_handle)

    def is_goal(self) -> bool:
        """True when every box sits on a target."""
        return all(box.position in self.grid.targets for box in self.boxes)

    def unique_key(self) -> str:
        """Canonical key: player position then boxes in sorted order.

        Costs, parent, action and the display grid are not part of it, so
        the same configuration reached by different paths collides.
        """
        parts = [f"P{self.player_row},{self.player_col}"]
        parts.extend(box.key_fragment() for box in sorted(self.boxes))
        return "".join(parts)

    def render(self) -> str:
        return "\n".join("".join(row) for row in self.display_grid)

    # -- successor generation -------------------------------------------------

    def successors(self) -> list[State]:
        """States reachable by one player step, in UP, DOWN, LEFT, RIGHT order.

        Stepping onto a box pushes it (one push of cost); any other step onto
        a free cell is a free move.
        """
        result: list[State] = []
        occupied = {box.position: box for box in self.boxes}

        for d in DIRECTIONS:
            nxt = (self.player_row + d.dr, self.player_col + d.dc)
            if self.grid.is_wall(nxt):
                continue

            box = occupied.get(nxt)
            if box is None:
                result.append(self._apply_move(nxt, d))
                continue

            beyond = (nxt[0] + d.dr, nxt[1] + d.dc)
            if self.grid.is_wall(beyond):
                logger.debug("Push of %r %s blocked by wall at %s",
                             box.letter, d.name, beyond)
                continue
            if beyond in occupied:
                logger.debug("Push of %r %s blocked by box at %s",
                             box.letter, d.name, beyond)
                continue
            result.append(self._apply_push(box, nxt, beyond, d))

        return result

    def _apply_move(self, nxt: Pos, d: Direction) -> State:
        child = State.from_parent(self)
        child.action = f"MOVE {d.name}"
        child._place_player(self.player, nxt)
        child._update_costs()
        return child

    def _apply_push(self, box: BoxIdentity, nxt: Pos, beyond: Pos,
                    d: Direction) -> State:
        child = State.from_parent(self)
        child.g_cost += 1
        child.action = f"PUSH '{box.letter}' {d.name}"

        child.boxes.remove(box)
        child.boxes.add(box.moved_to(*beyond))

        child._place_player(self.player, nxt)
        br, bc = beyond
        child.display_grid[br][bc] = box_glyph(
            box.letter, self.grid.is_target(beyond))

        child._update_costs()
        return child

    def _place_player(self, old: Pos, new: Pos) -> None:
        self.player_row, self.player_col = new
        self.display_grid[old[0]][old[1]] = self.grid.static_glyph(old)
        self.display_grid[new[0]][new[1]] = player_glyph(self.grid.is_target(new))

    def _update_costs(self) -> None:
        self.h_cost = self.heuristic(self.boxes, self.grid)
        self.f_cost = self.g_cost + self.h_cost

    def __repr__(self) -> str:
        return (f"State({self.unique_key()}, g={self.g_cost}, "
                f"h={self.h_cost}, action={self.action!r})")
