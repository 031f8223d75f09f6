"""The easy computer player: it chases intruders and heads for the enemy flag."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import replace
from typing import TYPE_CHECKING

from .ai import PASS, Step, Strategy, parse_state
from .board import CAMPS, COLS, ROWS
from .rules import BOTTOM_EMPTY, TOP_EMPTY, Grid
from .search import Position, bfs_route

if TYPE_CHECKING:
    from .board import Board

FLAG_SQUARE = (11, 1)
_NO_ROUTE = Step(0, 0)
_STRONG_INTRUDER = 5
_CLOSE_ENOUGH = 3


def _intruder(grid: Grid) -> tuple[Position | None, int]:
    """The highest revealed enemy in the top half outside the camps, and its level."""
    found: Position | None = None
    highest = 0
    for x in range(6):
        for y in range(COLS):
            code = grid[x][y]
            if (
                TOP_EMPTY < code < BOTTOM_EMPTY
                and code - TOP_EMPTY > highest
                and (x, y) not in CAMPS
            ):
                highest = code - TOP_EMPTY
                found = (x, y)
    return found, highest


def _cells(grid: Grid) -> Iterator[tuple[int, int, int]]:
    for x in range(ROWS):
        for y in range(COLS):
            yield x, y, grid[x][y]


def _quickest(grid: Grid, target: Position) -> tuple[float, Step]:
    """Fewest moves any own piece needs to reach ``target``, and its first move."""
    routes = [
        route
        for x, y, code in _cells(grid)
        if 1 <= code <= 10
        for route in [bfs_route(grid, (x, y), target)]
        if route is not None
    ]
    if not routes:
        return math.inf, _NO_ROUTE
    best = min(routes, key=lambda route: route.steps)
    return best.steps, Step(*best.start, *best.first_step)


def _nearest_hidden(grid: Grid) -> Position | None:
    """The hidden own square closest to the enemy flag."""
    hidden = [(x, y) for x in range(6) for y in range(COLS) if grid[x][y] == 0]
    return min(hidden, key=lambda pos: 11 - pos[0] + abs(pos[1] - 1), default=None)


def _reveal_nearest(grid: Grid) -> Step:
    pos = _nearest_hidden(grid)
    return Step(*pos) if pos is not None else PASS


def _ring_reveal(grid: Grid, enemy: Position) -> Position | None:
    """A hidden own square exactly two squares away from ``enemy``; the last one scanned."""
    ex, ey = enemy
    chosen: Position | None = None
    for x in range(ex + 2, ex - 3, -1):
        for y in range(ey - 2, ey + 3):
            if not (0 <= x <= 5 and 0 <= y < COLS):
                continue
            if abs(x - ex) > 1 or abs(y - ey) > 1:
                if grid[x][y] == 0:
                    chosen = (x, y)
    return chosen


def _flag_or_reveal(grid: Grid, flag_step: Step) -> Step:
    return flag_step if flag_step.next_x != -1 else _reveal_nearest(grid)


def _decide(grid: Grid) -> Step:
    intruder, intruder_level = _intruder(grid)
    flag_steps, flag_step = _quickest(grid, FLAG_SQUARE)

    if intruder is not None:
        enemy_steps, enemy_step = _quickest(grid, intruder)
        if enemy_steps <= _CLOSE_ENOUGH:
            return enemy_step if enemy_steps < flag_steps else flag_step
        if intruder_level >= _STRONG_INTRUDER:
            ring = _ring_reveal(grid, intruder)
            if ring is not None:
                return Step(*ring)
            if enemy_steps < flag_steps:
                return enemy_step
        return _flag_or_reveal(grid, flag_step)

    cells = list(_cells(grid))
    people_highest = max(
        (code - TOP_EMPTY for _, _, code in cells if TOP_EMPTY < code < 23), default=0
    )
    own_highest = max((code for _, _, code in cells if 0 < code < 11), default=0)

    if people_highest > own_highest:
        hidden = _nearest_hidden(grid)
        if hidden is not None:
            return Step(*hidden)
        if flag_step.next_x != -1:
            return flag_step
        return replace(flag_step, x=-1)
    return _flag_or_reveal(grid, flag_step)


class EasyAI(Strategy):
    """Plays the top side with simple shortest-route rules."""

    def next_step(self, board: Board) -> Step:
        """Pick a reveal or a move for the top side of ``board``."""
        return _decide(parse_state(board.state()))