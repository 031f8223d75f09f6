"""The 12 x 5 board: setting up, moving and capturing, and state encoding."""

from __future__ import annotations

import random
from collections.abc import Iterable

from .piece import (
    BOMB,
    BOTTOM,
    COMMANDER,
    EMPTY,
    ENGINEER,
    FLAG,
    MINE,
    NOBODY,
    TOP,
    Piece,
)

ROWS = 12
COLS = 5

CAMPS = frozenset(
    {(2, 1), (2, 3), (3, 2), (4, 1), (4, 3), (7, 1), (7, 3), (8, 2), (9, 1), (9, 3)}
)
RAIL_ROWS = frozenset({1, 5, 6, 10})
RAIL_COLS = frozenset({0, 4})
RIVER_BRIDGES = frozenset({0, 2, 4})

_STANDARD_SET = (9, 8, 7, 7, 6, 6, 5, 5, 4, 4, 3, 3, 3, 2, 2, 2, 1, 1, 1, 10, 10, 11)
_EASY_TOP_SET = (8, 7, 7, 6, 6, 5, 5, 4, 4, 3, 3, 3, 2, 2, 2, 1, 1, 1, 10, 10, 11)
_HARD_TOP_SET = (8, 7, 7, 6, 6, 5, 5, 4, 4, 3, 3, 3, 2, 2, 2, 1, 1, 1, 11)

_TOP_FLAG = (0, 3)
_TOP_MINES = frozenset({(0, 2), (0, 4)})
_BOTTOM_FLAG = (11, 1)
_BOTTOM_MINES = frozenset({(11, 0), (11, 2)})

MODES = (1, 2, 3)


class IllegalMoveError(ValueError):
    """Raised when a move breaks the rules of the board."""


def is_camp(x: int, y: int) -> bool:
    """True when (x, y) is one of the ten camps."""
    return (x, y) in CAMPS


def _crosses_river(from_x: int, to_x: int) -> bool:
    return (from_x <= 5 < to_x) or (to_x <= 5 < from_x)


class Board:
    """The playing field, indexed by ``board[x, y]`` with x the row."""

    def __init__(self) -> None:
        self._grid = [
            [Piece(EMPTY, NOBODY, False, x, y) for y in range(COLS)] for x in range(ROWS)
        ]

    def __getitem__(self, pos: tuple[int, int]) -> Piece:
        x, y = pos
        return self._cell(x, y)

    def _cell(self, x: int, y: int) -> Piece:
        if not (0 <= x < ROWS and 0 <= y < COLS):
            raise IndexError(f"square ({x}, {y}) is off the board")
        return self._grid[x][y]

    # -- setting up -------------------------------------------------------

    def initialize(self, mode: int, rng: random.Random | None = None) -> None:
        """Deal a fresh game.

        Mode 1 is two players, 2 the easy computer, 3 the hard computer; the
        computer modes fix some top pieces in place before dealing the rest.
        """
        if mode not in MODES:
            raise ValueError(f"unknown game mode: {mode}")
        rng = rng if rng is not None else random.Random()
        self._grid = [
            [Piece(EMPTY, NOBODY, False, x, y) for y in range(COLS)] for x in range(ROWS)
        ]

        fixed: dict[tuple[int, int], int] = {}
        if mode == 1:
            top_pool: Iterable[int] = _STANDARD_SET
        elif mode == 2:
            fixed[(1, rng.randrange(COLS))] = COMMANDER
            top_pool = _EASY_TOP_SET
        else:
            commander_col = rng.randrange(COLS)
            first_bomb_col = rng.randrange(COLS)
            second_bomb_col = rng.randrange(COLS)
            fixed[(1, first_bomb_col)] = BOMB
            fixed[(1, second_bomb_col)] = BOMB
            fixed[(5, commander_col)] = COMMANDER
            top_pool = _HARD_TOP_SET

        self._deploy(TOP, range(0, 6), _TOP_FLAG, _TOP_MINES, fixed, top_pool, rng)
        self._deploy(BOTTOM, range(6, ROWS), _BOTTOM_FLAG, _BOTTOM_MINES, {}, _STANDARD_SET, rng)

    def _deploy(
        self,
        player: int,
        rows: Iterable[int],
        flag: tuple[int, int],
        mines: frozenset[tuple[int, int]],
        fixed: dict[tuple[int, int], int],
        pool: Iterable[int],
        rng: random.Random,
    ) -> None:
        remaining = list(pool)
        for x in rows:
            for y in range(COLS):
                pos = (x, y)
                if pos == flag:
                    piece = Piece(FLAG, player, True, x, y)
                elif pos in fixed:
                    piece = Piece(fixed[pos], player, False, x, y)
                elif pos in mines:
                    piece = Piece(MINE, player, True, x, y)
                elif is_camp(x, y):
                    piece = Piece(EMPTY, player, True, x, y)
                elif remaining:
                    level = remaining.pop(rng.randrange(len(remaining)))
                    piece = Piece(level, player, False, x, y)
                else:
                    continue
                self._grid[x][y] = piece

    # -- display and queries ---------------------------------------------

    def render(self) -> str:
        """The level of every square, one board row per line."""
        return "".join(
            " ".join(str(piece.level) for piece in row) + "\n" for row in self._grid
        )

    def is_face_up(self, x: int, y: int) -> bool:
        return self._cell(x, y).face_up

    def player_at(self, x: int, y: int) -> int:
        return self._cell(x, y).player

    def has_piece(self, x: int, y: int) -> bool:
        return not self._cell(x, y).is_empty()

    def level_at(self, x: int, y: int) -> int:
        return self._cell(x, y).level

    def reveal(self, x: int, y: int) -> None:
        self._cell(x, y).face_up = True

    def state(self) -> str:
        """Comma-terminated codes, row by row.

        A revealed square is ``(player - 1) * 13 + level``; a hidden one is 0.
        """
        return "".join(
            f"{((piece.player - 1) * EMPTY + piece.level) * int(piece.face_up)},"
            for row in self._grid
            for piece in row
        )

    # -- moving -----------------------------------------------------------

    def move(self, current_x: int, current_y: int, next_x: int, next_y: int) -> None:
        """Move the piece at the current square to the next one, resolving any fight.

        Raises IllegalMoveError when the move is not allowed.
        """
        src = self._cell(current_x, current_y)
        dst = self._cell(next_x, next_y)

        if (
            _crosses_river(current_x, next_x)
            and current_y == next_y
            and next_y not in RIVER_BRIDGES
        ):
            raise IllegalMoveError("the river can only be crossed on the three bridges")

        if src.player == dst.player and not dst.is_empty():
            raise IllegalMoveError("cannot move onto a piece of the same side")

        reachable = self._reachable(current_x, current_y, next_x, next_y)

        if is_camp(next_x, next_y) and not dst.is_empty():
            raise IllegalMoveError("the camp is already occupied")
        if not reachable:
            raise IllegalMoveError("the destination cannot be reached")

        self._resolve(src, dst)

    def _reachable(self, cx: int, cy: int, nx: int, ny: int) -> bool:
        dx, dy = nx - cx, ny - cy
        diff = abs(dx + dy)
        if diff == 0:
            if dx == 0:
                raise IllegalMoveError("the piece did not move")
            return self._camp_step(cx, cy, nx, ny)
        if diff == 1:
            return True
        if abs(dx) == 1 and abs(dy) == 1 and self._camp_step(cx, cy, nx, ny):
            return True
        if dx == 0 and cx in RAIL_ROWS and self._row_clear(cx, cy, ny):
            return True
        if (
            dy == 0
            and 0 < cx < ROWS
            and 0 < nx < ROWS
            and cy in RAIL_COLS
            and self._column_clear(cy, cx, nx)
        ):
            return True
        return False

    def _camp_step(self, cx: int, cy: int, nx: int, ny: int) -> bool:
        if is_camp(nx, ny) and self._grid[nx][ny].is_empty():
            return True
        return is_camp(cx, cy)

    def _row_clear(self, x: int, y1: int, y2: int) -> bool:
        low, high = sorted((y1, y2))
        return all(self._grid[x][y].is_empty() for y in range(low + 1, high))

    def _column_clear(self, y: int, x1: int, x2: int) -> bool:
        low, high = sorted((x1, x2))
        return all(self._grid[x][y].is_empty() for x in range(low + 1, high))

    def _resolve(self, src: Piece, dst: Piece) -> None:
        attacker, defender = src.level, dst.level
        if attacker in (MINE, FLAG):
            raise IllegalMoveError("mines and flags cannot move")
        if attacker < defender:
            if defender in (BOMB, MINE):
                if attacker == ENGINEER:
                    self._advance(src, dst)
                else:
                    self._trade(src, dst)
            elif defender in (FLAG, EMPTY):
                self._advance(src, dst)
            elif not dst.face_up:
                src.level = EMPTY
            else:
                raise IllegalMoveError("the piece is outranked by the revealed defender")
        elif attacker == defender or attacker == BOMB:
            self._trade(src, dst)
        else:
            self._advance(src, dst)

    @staticmethod
    def _advance(src: Piece, dst: Piece) -> None:
        dst.level = src.level
        dst.player = src.player
        dst.face_up = src.face_up
        src.level = EMPTY

    @staticmethod
    def _trade(src: Piece, dst: Piece) -> None:
        src.level = EMPTY
        dst.level = EMPTY
        dst.face_up = True