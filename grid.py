"""Static Wall/Floor/Target classification of a level, built once per solve."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from glyphs import FLOOR, TARGET, TARGET_GLYPHS, WALL


Pos = tuple[int, int]


class Cell(Enum):
    WALL = WALL
    FLOOR = FLOOR
    TARGET = TARGET


@dataclass(frozen=True)
class GridModel:
    """Immutable per-cell classification shared read-only by every State
    of one solve."""
    rows: int
    cols: int
    cells: tuple[tuple[Cell, ...], ...]
    targets: frozenset[Pos]

    @classmethod
    def from_level(cls, level: Sequence[str]) -> GridModel:
        """Classify every cell of a rectangular level.

        A wall glyph is a Wall; a target, a player on a target or a box on
        a target is a Target; anything else is Floor.
        """
        cells: list[tuple[Cell, ...]] = []
        targets: set[Pos] = set()
        for r, line in enumerate(level):
            row: list[Cell] = []
            for c, ch in enumerate(line):
                if ch == WALL:
                    row.append(Cell.WALL)
                elif ch in TARGET_GLYPHS:
                    row.append(Cell.TARGET)
                    targets.add((r, c))
                else:
                    row.append(Cell.FLOOR)
            cells.append(tuple(row))

        return cls(
            rows=len(cells),
            cols=len(cells[0]) if cells else 0,
            cells=tuple(cells),
            targets=frozenset(targets),
        )

    def cell(self, pos: Pos) -> Cell:
        r, c = pos
        return self.cells[r][c]

    def in_bounds(self, pos: Pos) -> bool:
        r, c = pos
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_wall(self, pos: Pos) -> bool:
        """Cells outside the grid count as walls."""
        return not self.in_bounds(pos) or self.cell(pos) is Cell.WALL

    def is_target(self, pos: Pos) -> bool:
        return pos in self.targets

    def static_glyph(self, pos: Pos) -> str:
        """Glyph drawn for the cell once nothing mobile stands on it."""
        return self.cell(pos).value
