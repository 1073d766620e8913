"""
Level text parsing and validation.

The solver assumes a well-formed level; everything that can go wrong with
user-supplied text is caught here first.
"""

from __future__ import annotations

from collections.abc import Sequence

from glyphs import (
    ALIASES,
    ALL_GLYPHS,
    BOX_GLYPHS,
    PLAYER,
    PLAYER_ON_TARGET,
    TARGET_GLYPHS,
    box_letter,
)


class LevelError(ValueError):
    """The level text is not a playable level."""


def parse_level(level: str | Sequence[str]) -> list[str]:
    """Normalise a level given as one multi-line string or a list of rows.

    Alternate glyphs ('#' for walls, ' ' or '-' for floor) are folded into
    the canonical alphabet.  Returns the validated rows.
    """
    if isinstance(level, str):
        lines = level.strip("\n").split("\n")
    else:
        lines = list(level)
        if not all(isinstance(line, str) for line in lines):
            raise LevelError("Level rows must be strings.")

    rows = ["".join(ALIASES.get(ch, ch) for ch in line.rstrip("\r\n"))
            for line in lines]
    validate_level(rows)
    return rows


def validate_level(rows: Sequence[str]) -> None:
    """Raise LevelError unless `rows` describe a solvable-shaped level."""
    if not rows or not rows[0]:
        raise LevelError("Level is empty.")

    width = len(rows[0])
    for r, line in enumerate(rows):
        if len(line) != width:
            raise LevelError(
                f"Row {r} has {len(line)} cells, expected {width}."
            )

    players = 0
    letters: list[str] = []
    targets = 0
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            if ch not in ALL_GLYPHS:
                raise LevelError(f"Unknown glyph {ch!r} at ({r}, {c}).")
            if ch in (PLAYER, PLAYER_ON_TARGET):
                players += 1
            if ch in BOX_GLYPHS:
                letters.append(box_letter(ch))
            if ch in TARGET_GLYPHS:
                targets += 1

    if players == 0:
        raise LevelError("Level has no player (@ or +).")
    if players > 1:
        raise LevelError(f"Level has {players} players; expected one.")
    if not letters:
        raise LevelError("Level has no boxes (a-d or A-D).")

    duplicates = sorted({x for x in letters if letters.count(x) > 1})
    if duplicates:
        raise LevelError(f"Duplicate box letters: {', '.join(duplicates)}.")
    if targets < len(letters):
        raise LevelError(
            f"Target count ({targets}) is less than box count ({len(letters)})."
        )
