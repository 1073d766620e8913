"""
Built-in level collection.

Boxes are individually lettered a-d (uppercase when already on a target).

  ■ = wall, □ = floor, T = target, @ = player, + = player on target
"""

PUZZLES: dict[str, list[str]] = {}

# ------------------------------------------------------------------
# Teaching levels  (tiny, solved in well under a second)
# ------------------------------------------------------------------

PUZZLES["Corridor"] = [
    "■■■■■■",
    "■@aT□■",
    "■■■■■■",
]

PUZZLES["Already Solved"] = [
    "■■■■■",
    "■@A□■",
    "■■■■■",
]

PUZZLES["Three Across"] = [
    "■■■■■■■",
    "■□□□□□■",
    "■□a□□T■",
    "■□@□□□■",
    "■■■■■■■",
]

PUZZLES["Round the Corner"] = [
    "■■■■■■",
    "■□□□T■",
    "■□a□□■",
    "■□@□□■",
    "■■■■■■",
]

PUZZLES["Two Down"] = [
    "■■■■■■■",
    "■□□□□□■",
    "■□a□b□■",
    "■□□□□□■",
    "■□T□T□■",
    "■□□@□□■",
    "■■■■■■■",
]

PUZZLES["Sealed Box"] = [
    "■■■■■■■",
    "■a■□□T■",
    "■■■□@□■",
    "■■■■■■■",
]

# ------------------------------------------------------------------
# Demo levels  (four boxes in a 10x10 room)
# ------------------------------------------------------------------

PUZZLES["Test 1"] = [
    "■■■■■■■■■■",
    "■□□□□□□□□■",
    "■□■■□■■□□■",
    "■□a□T□b□□■",
    "■□■□@□■□□■",
    "■□c□T□d□□■",
    "■□■■□■■□□■",
    "■□□T□□T□□■",
    "■□□□□□□□□■",
    "■■■■■■■■■■",
]

PUZZLES["Test 2"] = [
    "■■■■■■■■■■",
    "■T□■□□■□T■",
    "■□■a□□b■□■",
    "■□■□□□□■□■",
    "■□□□@□□□□■",
    "■□■□□□□■□■",
    "■□■c□□d■□■",
    "■T□■□□■□T■",
    "■□□□□□□□□■",
    "■■■■■■■■■■",
]

DEMO_LEVELS = ("Test 1", "Test 2")


def get_puzzle_names() -> list[str]:
    """Return all puzzle names in order."""
    return list(PUZZLES.keys())


def get_puzzle(name: str) -> list[str]:
    """Return a copy of the rows for a named puzzle."""
    return list(PUZZLES[name])
