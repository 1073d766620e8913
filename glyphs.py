"""
Glyph alphabet and movement directions shared by the solver and the harness.

  ■ = wall, □ = floor, T = target, @ = player, + = player on target,
  a-d = box off target, A-D = the same box sitting on a target
"""

from typing import NamedTuple


WALL = "■"
FLOOR = "□"
TARGET = "T"
PLAYER = "@"
PLAYER_ON_TARGET = "+"

BOX_LETTERS = ("a", "b", "c", "d")
BOX_ON_TARGET_LETTERS = tuple(letter.upper() for letter in BOX_LETTERS)
BOX_GLYPHS = frozenset(BOX_LETTERS + BOX_ON_TARGET_LETTERS)

# Glyphs that mark a cell as a target in the static classification
TARGET_GLYPHS = frozenset((TARGET, PLAYER_ON_TARGET) + BOX_ON_TARGET_LETTERS)

# Alternate spellings accepted on input, folded before parsing
ALIASES = {
    "#": WALL,
    " ": FLOOR,
    "-": FLOOR,
    "_": FLOOR,
}

ALL_GLYPHS = frozenset((WALL, FLOOR, TARGET, PLAYER, PLAYER_ON_TARGET)) | BOX_GLYPHS


# ---------------------------------------------------------------------------
# Direction helpers
# ---------------------------------------------------------------------------

class Direction(NamedTuple):
    dr: int
    dc: int
    name: str

UP    = Direction(-1,  0, "UP")
DOWN  = Direction( 1,  0, "DOWN")
LEFT  = Direction( 0, -1, "LEFT")
RIGHT = Direction( 0,  1, "RIGHT")
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


# ---------------------------------------------------------------------------
# Glyph helpers
# ---------------------------------------------------------------------------

def is_box_glyph(ch: str) -> bool:
    return ch in BOX_GLYPHS


def box_letter(ch: str) -> str:
    """Return the canonical (lowercase) identity of a box glyph."""
    if ch not in BOX_GLYPHS:
        raise ValueError(f"Not a box glyph: {ch!r}")
    return ch.lower()


def box_glyph(letter: str, on_target: bool) -> str:
    return letter.upper() if on_target else letter.lower()


def player_glyph(on_target: bool) -> str:
    return PLAYER_ON_TARGET if on_target else PLAYER
