"""Movement rules used by the computer players, working on a decoded board grid.

The grid is 12 rows of 5 codes as produced by ``Board.state``: 0 for a hidden
square, 1-13 for a revealed top square (13 empty), and 14-26 for a revealed
bottom square (26 empty).
"""

from __future__ import annotations

from collections.abc import Sequence

from .board import CAMPS, COLS, ROWS

Grid = Sequence[Sequence[int]]

TOP_EMPTY = 13
BOTTOM_EMPTY = 26
BOTTOM_BOMB = 23
BOTTOM_MINE = 24
BOTTOM_FLAG = 25

# Rows on which a square at column 1 or 3 lies on a railway, so no diagonal
# step may start or end there.
_DIAGONAL_BLOCKED_ROWS = frozenset({1, 3, 5, 6, 8, 10})
_RAIL_ROWS = frozenset({1, 5, 6, 10})
_RAIL_COLS = frozenset({0, 4})

# The eight neighbours; the first four are the straight directions.
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1), (-1, -1), (-1, 1), (1, -1), (1, 1))
STRAIGHT = DIRECTIONS[:4]
MAX_JUMP = 9


def _on_board(x: int, y: int) -> bool:
    return 0 <= x < ROWS and 0 <= y < COLS


def _is_clear(code: int) -> bool:
    return code in (TOP_EMPTY, BOTTOM_EMPTY)


def _crosses_river_off_bridge(x: int, y: int, prev_x: int) -> bool:
    crosses = (x > 5 and prev_x <= 5) or (x <= 5 and prev_x > 5)
    return crosses and y in (1, 3)


def _step_allowed(x: int, y: int, prev_x: int, prev_y: int) -> bool:
    """Whether a single step from (prev_x, prev_y) to (x, y) follows the lines."""
    if abs(x - prev_x) == 1 and abs(y - prev_y) == 1:
        same_top_half = 1 <= x <= 5 and 1 <= prev_x <= 5
        same_bottom_half = 6 <= x <= 10 and 6 <= prev_x <= 10
        if not same_top_half and not same_bottom_half:
            return False
        if y in (1, 3) and x in _DIAGONAL_BLOCKED_ROWS:
            return False
        if prev_y in (1, 3) and prev_x in _DIAGONAL_BLOCKED_ROWS:
            return False
    return not _crosses_river_off_bridge(x, y, prev_x)


def is_valid_move(grid: Grid, x: int, y: int, level: int, prev_x: int, prev_y: int) -> bool:
    """Whether a top piece of ``level`` may go from (prev_x, prev_y) onto (x, y)."""
    target = grid[x][y]
    if (x, y) in CAMPS and not _is_clear(target):
        return False
    if 0 < target < TOP_EMPTY:
        return False
    if target in (TOP_EMPTY, BOTTOM_EMPTY, BOTTOM_MINE, BOTTOM_FLAG):
        if not _step_allowed(x, y, prev_x, prev_y):
            return False
    if target == 0:
        if x < 6:
            return False
        if not _step_allowed(x, y, prev_x, prev_y):
            return False
    if 14 <= target <= 22:
        if level <= target - TOP_EMPTY:
            return False
        if not _step_allowed(x, y, prev_x, prev_y):
            return False
    if target == BOTTOM_BOMB:
        if level > 6:
            return False
        if not _step_allowed(x, y, prev_x, prev_y):
            return False
    return True


def is_valid_jump(grid: Grid, x: int, y: int, prev_x: int, prev_y: int) -> bool:
    """Whether (x, y) is reachable from (prev_x, prev_y) along a clear railway line."""
    if y != prev_y:
        if x in _RAIL_ROWS:
            low, high = sorted((prev_y, y))
            return all(_is_clear(grid[x][i]) for i in range(low + 1, high))
        return False
    if y in _RAIL_COLS and 1 <= x <= 10 and 1 <= prev_x <= 10:
        low, high = sorted((prev_x, x))
        return all(_is_clear(grid[i][y]) for i in range(low + 1, high))
    return False


def _is_threat(code: int, level: int) -> bool:
    return 14 < code <= BOTTOM_BOMB and code - TOP_EMPTY > level


def can_be_captured(grid: Grid, x: int, y: int, level: int) -> bool:
    """Whether a revealed bottom piece could take a top piece of ``level`` at (x, y) in one move."""
    if (x, y) in CAMPS:
        return False

    for dx, dy in DIRECTIONS:
        nx, ny = x + dx, y + dy
        if not _on_board(nx, ny) or not _is_threat(grid[nx][ny], level):
            continue
        if _step_allowed(nx, ny, x, y):
            return True

    for dx, dy in STRAIGHT:
        for jump in range(2, MAX_JUMP + 1):
            nx, ny = x + dx * jump, y + dy * jump
            if not _on_board(nx, ny) or not is_valid_jump(grid, nx, ny, x, y):
                break
            if _crosses_river_off_bridge(nx, ny, x):
                break
            if _is_threat(grid[nx][ny], level):
                return True
    return False