"""One game of the flag game: turns, selections, the computer's turn and the end."""

from __future__ import annotations

import logging
import random
from enum import IntEnum

from .ai import Step, Strategy, parse_state
from .board import COLS, ROWS, Board, IllegalMoveError
from .difficult_ai import DifficultAI
from .easy_ai import EasyAI
from .piece import BOMB, BOTTOM, ENGINEER, FLAG, TOP

log = logging.getLogger(__name__)

_TOP_FLAG = (0, 3)
_BOTTOM_FLAG = (11, 1)
_STRATEGIES: dict[int, type[Strategy]] = {2: EasyAI, 3: DifficultAI}


class Selection(IntEnum):
    """What choosing a square did."""

    INVALID = 0
    REVEALED = 1
    SELECTED = 2


def _other(player: int) -> int:
    return TOP if player == BOTTOM else BOTTOM


class Game:
    """A game in one of three modes: 1 two players, 2 easy computer, 3 hard computer.

    The bottom side always moves first; the computer plays the top side.
    """

    def __init__(self, mode: int = 1, rng: random.Random | None = None) -> None:
        self.mode = mode
        self.board = Board()
        self.board.initialize(mode, rng)
        self.current_player = BOTTOM
        strategy = _STRATEGIES.get(mode)
        self.ai: Strategy | None = strategy() if strategy is not None else None
        self.selected: tuple[int, int] | None = None

    def choose_piece(self, x: int, y: int) -> Selection:
        """Reveal a hidden piece of the side to play, or select one of its revealed pieces.

        Revealing a piece ends the turn; selecting one prepares a move.
        """
        if not (0 <= x < ROWS and 0 <= y < COLS) or not self.board.has_piece(x, y):
            return Selection.INVALID
        if self.board.player_at(x, y) != self.current_player:
            return Selection.INVALID
        if not self.board.is_face_up(x, y):
            self.current_player = _other(self.current_player)
            self.board.reveal(x, y)
            return Selection.REVEALED
        self.selected = (x, y)
        return Selection.SELECTED

    def move_piece(self, next_x: int, next_y: int) -> bool:
        """Move the selected piece; True when the move was made and the turn passed."""
        if self.selected is None:
            return False
        current_x, current_y = self.selected
        log.debug("move from (%d, %d) to (%d, %d)", current_x, current_y, next_x, next_y)
        try:
            self.board.move(current_x, current_y, next_x, next_y)
        except (IllegalMoveError, IndexError) as exc:
            log.debug("move refused: %s", exc)
            return False
        self.current_player = _other(self.current_player)
        return True

    def board_state(self) -> str:
        """The encoded board, as ``Board.state`` gives it."""
        return self.board.state()

    def ai_turn(self) -> Step:
        """Let the computer play the top side once, then hand the turn to the bottom side."""
        if self.ai is None:
            raise RuntimeError("this game has no computer player")
        step = self.ai.next_step(self.board)
        if step.is_pass:
            log.warning("the computer found nothing to do")
        elif step.is_reveal:
            log.info("computer reveals (%d, %d)", step.x, step.y)
            self.board.reveal(step.x, step.y)
        else:
            log.info(
                "computer moves (%d, %d) to (%d, %d)",
                step.x, step.y, step.next_x, step.next_y,
            )
            try:
                self.board.move(step.x, step.y, step.next_x, step.next_y)
            except (IllegalMoveError, IndexError) as exc:
                log.warning("computer move refused: %s", exc)
        self.current_player = BOTTOM
        return step

    def _movable_count(self, player: int) -> int:
        return sum(
            1
            for x in range(ROWS)
            for y in range(COLS)
            if self.board.player_at(x, y) == player
            and ENGINEER <= self.board.level_at(x, y) <= BOMB
        )

    def is_over(self) -> bool:
        """True when a side has no movable pieces left or a flag has been taken."""
        if self._movable_count(TOP) == 0:
            log.info("the top side has no movable pieces and loses")
            return True
        if self._movable_count(BOTTOM) == 0:
            log.info("the bottom side has no movable pieces and loses")
            return True
        if self.board.level_at(*_TOP_FLAG) != FLAG:
            log.info("the bottom side took the flag and wins")
            return True
        if self.board.level_at(*_BOTTOM_FLAG) != FLAG:
            log.info("the top side took the flag and wins")
            return True
        return False

    def render(self) -> str:
        """The encoded board as a text grid, one row per line, followed by a blank line."""
        rows = parse_state(self.board_state())
        return "".join("".join(f"{code}  " for code in row) + "\n" for row in rows) + "\n"