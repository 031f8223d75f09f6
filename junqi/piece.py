"""A single square of the board and the piece standing on it."""

from __future__ import annotations

from dataclasses import dataclass

ENGINEER = 1
COMMANDER = 9
BOMB = 10
MINE = 11
FLAG = 12
EMPTY = 13

NOBODY = 0
TOP = 1
BOTTOM = 2


@dataclass
class Piece:
    """What occupies one square: rank, owner, whether it is revealed, and where it is.

    An empty square is a piece of level ``EMPTY``; it keeps the owner and
    face-up flag it was last given, which the encoded board state relies on.
    """

    level: int = 0
    player: int = NOBODY
    face_up: bool = False
    x: int = 0
    y: int = 0

    def is_empty(self) -> bool:
        """True when no piece stands on this square."""
        return self.level == EMPTY