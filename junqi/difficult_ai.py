"""The hard computer player: it guards its half, shelters pieces in camps and raids the flag."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import TYPE_CHECKING

from .ai import Step, Strategy, parse_state
from .board import BOMB, CAMPS, COLS, ROWS
from .rules import BOTTOM_EMPTY, TOP_EMPTY, Grid, is_valid_move
from .search import Position, a_star_route

if TYPE_CHECKING:
    from .board import Board

FLAG_SQUARE = (11, 1)
TOP_CAMPS = ((2, 1), (2, 3), (3, 2), (4, 1), (4, 3))
_NO_ROUTE = (-1, 0, -1, -1)
_NO_ENEMY = (-1, -1)
_HOME = (0, 3)
_NEAR_RADIUS = 5
_FLAG_RUSH = 3
_INTRUDER_RUSH = 3
_FAR_RUSH = 4
_FLAG_HUNTERS = range(1, 10)
_ATTACKERS = range(1, 11)


def near_camp(piece_x: int, piece_y: int, camp_x: int, camp_y: int) -> bool:
    """True when the camp is one of the eight squares around the piece, or its own square."""
    return abs(piece_x - camp_x) <= 1 and abs(piece_y - camp_y) <= 1


def _cells(grid: Grid) -> Iterator[tuple[int, int, int]]:
    for x in range(ROWS):
        for y in range(COLS):
            yield x, y, grid[x][y]


def _intruders(grid: Grid) -> tuple[Position | None, Position | None]:
    """Revealed enemies in the top half outside the camps, near the home flag and far from it.

    Both are ranked against the best far level seen so far, so a later, weaker
    enemy close to home can replace a stronger one.
    """
    near: Position | None = None
    far: Position | None = None
    far_level = 0
    for x in range(6):
        for y in range(COLS):
            code = grid[x][y]
            if not (TOP_EMPTY < code < BOTTOM_EMPTY) or code - TOP_EMPTY <= far_level:
                continue
            if (x, y) in CAMPS:
                continue
            if abs(_HOME[0] - x) + abs(_HOME[1] - y) <= _NEAR_RADIUS:
                near = (x, y)
            else:
                far_level = code - TOP_EMPTY
                far = (x, y)
    return near, far


def _quickest(grid: Grid, target: Position | None, levels: range) -> tuple[float, list[int]]:
    """Fewest moves any own piece with a level in ``levels`` needs to reach ``target``."""
    best_steps: float = math.inf
    best = list(_NO_ROUTE)
    if target is None:
        return best_steps, best
    for x, y, code in _cells(grid):
        if code not in levels:
            continue
        route = a_star_route(grid, (x, y), target)
        if route is not None and route.steps < best_steps:
            best_steps = route.steps
            best = [*route.start, *route.first_step]
    return best_steps, best


def _free_bomb(grid: Grid) -> Position | None:
    """The last revealed own bomb in the top half that is not sitting in a camp."""
    found: Position | None = None
    for x in range(6):
        for y in range(COLS):
            if grid[x][y] == BOMB and (x, y) not in CAMPS:
                found = (x, y)
    return found


def _shelter(grid: Grid, piece: Position) -> Position | None:
    """The first top camp next to ``piece`` that it may step into."""
    px, py = piece
    level = grid[px][py]
    for cx, cy in TOP_CAMPS:
        if is_valid_move(grid, cx, cy, level, px, py) and near_camp(px, py, cx, cy):
            return cx, cy
    return None


def _ring_reveal(grid: Grid, enemy: Position) -> Position | None:
    """A hidden own square exactly two squares away from ``enemy``; the last one scanned."""
    ex, ey = enemy
    chosen: Position | None = None
    for x in range(ex + 2, ex - 3, -1):
        for y in range(ey - 2, ey + 3):
            if not (0 <= x <= 5 and 0 <= y < COLS):
                continue
            if (abs(x - ex) > 1 or abs(y - ey) > 1) and grid[x][y] == 0:
                chosen = (x, y)
    return chosen


def _nearest_hidden(grid: Grid) -> Position | None:
    """The hidden own square closest to the enemy flag."""
    hidden = [(x, y) for x in range(6) for y in range(COLS) if grid[x][y] == 0]
    return min(hidden, key=lambda pos: 11 - pos[0] + abs(pos[1] - 1), default=None)


def _reveal_into(grid: Grid, step: list[int]) -> None:
    """Point the first half of ``step`` at the square to turn over, or at nothing."""
    hidden = _nearest_hidden(grid)
    step[0], step[1] = hidden if hidden is not None else _NO_ENEMY


def _decide(grid: Grid) -> Step:
    near, far = _intruders(grid)
    flag_steps, flag_step = _quickest(grid, FLAG_SQUARE, _FLAG_HUNTERS)
    near_steps, near_step = _quickest(grid, near, _ATTACKERS)
    far_steps, far_step = _quickest(grid, far, _ATTACKERS)
    bomb = _free_bomb(grid)
    final = [-1, -1, -1, -1]

    # Defend against an enemy close to home (this also runs when there is none).
    if flag_steps < _FLAG_RUSH:
        return Step(*flag_step)
    if near_steps < _INTRUDER_RUSH:
        final = list(near_step)
        if final[3] != -1:
            return Step(*final)
    if final[3] == -1:
        ring = _ring_reveal(grid, near if near is not None else _NO_ENEMY)
        if ring is not None:
            final[0], final[1] = ring
        if final[0] == -1:
            if near_steps < flag_steps:
                final = list(near_step)
            else:
                final = list(flag_step)
                if final[2] == -1:
                    _reveal_into(grid, final)

    # An enemy deeper in: shelter a bomb, strike quickly, or press on.
    if far is not None:
        if bomb is not None:
            camp = _shelter(grid, bomb)
            if camp is not None:
                final[2], final[3] = camp
            if final[3] != -1:
                final[0], final[1] = bomb
                return Step(*final)
        if far_steps < _FAR_RUSH:
            return Step(*(flag_step if flag_steps < far_steps else far_step))
        if flag_step[2] != -1:
            final = list(flag_step)
        else:
            _reveal_into(grid, final)
        return Step(*final)

    people_highest = max(
        (code - TOP_EMPTY for _, _, code in _cells(grid) if TOP_EMPTY < code < 23),
        default=0,
    )
    own_highest = max((code for _, _, code in _cells(grid) if 0 < code < 11), default=0)

    if people_highest > own_highest:
        if final[3] == -1:
            _reveal_into(grid, final)
    elif flag_step[2] != -1:
        return Step(*(flag_step if flag_steps < far_steps else far_step))
    else:
        _reveal_into(grid, final)
    return Step(*final)


class DifficultAI(Strategy):
    """Plays the top side with guarded A* routes and camp sheltering."""

    def next_step(self, board: Board) -> Step:
        """Pick a reveal or a move for the top side of ``board``."""
        return _decide(parse_state(board.state()))