"""Box identity: a lettered box at a grid position."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class BoxIdentity:
    """One box, ordered by letter, then row, then column.

    Field order drives the generated comparisons, so sorting a box set
    always yields the same sequence whatever order the set iterates in.
    """
    letter: str
    row: int
    col: int

    def __post_init__(self) -> None:
        # Boxes on a target are written uppercase; identity is always lowercase
        object.__setattr__(self, "letter", self.letter.lower())

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    def moved_to(self, row: int, col: int) -> BoxIdentity:
        return BoxIdentity(self.letter, row, col)

    def key_fragment(self) -> str:
        return f"_B{self.letter}({self.row},{self.col})"
