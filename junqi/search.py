"""Shortest-route searches that the computer players use on a decoded board grid."""

from __future__ import annotations

import heapq
import itertools
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from .board import BOMB, COLS, ROWS
from .rules import (
    BOTTOM_EMPTY,
    DIRECTIONS,
    MAX_JUMP,
    STRAIGHT,
    TOP_EMPTY,
    Grid,
    can_be_captured,
    is_valid_jump,
    is_valid_move,
)

Position = tuple[int, int]


@dataclass(frozen=True)
class Route:
    """The start of a route, the first square it moves to, and how many moves it takes."""

    start: Position
    first_step: Position
    steps: int


def _on_board(x: int, y: int) -> bool:
    return 0 <= x < ROWS and 0 <= y < COLS


def _expansions(
    grid: Grid, x: int, y: int, level: int, visited: set[Position]
) -> Iterator[Position]:
    """Unvisited squares reachable from (x, y) in one move, in search order.

    The visited set is read lazily, so squares the caller marks while
    consuming the iterator are skipped afterwards.
    """
    for dx, dy in DIRECTIONS:
        nx, ny = x + dx, y + dy
        if (
            _on_board(nx, ny)
            and (nx, ny) not in visited
            and is_valid_move(grid, nx, ny, level, x, y)
        ):
            yield nx, ny
    for dx, dy in STRAIGHT:
        for jump in range(2, MAX_JUMP + 1):
            nx, ny = x + dx * jump, y + dy * jump
            if not _on_board(nx, ny):
                break
            if not (
                is_valid_jump(grid, nx, ny, x, y)
                and is_valid_move(grid, nx, ny, level, x, y)
            ):
                break
            if (nx, ny) not in visited:
                yield nx, ny


def _first_step(prev: dict[Position, Position], start: Position, target: Position) -> Position | None:
    """Walk back from the target and return the square right after the start."""
    if target == start:
        return None
    current = target
    while prev[current] != start:
        current = prev[current]
    return current


def _risky_first_step(grid: Grid, pos: Position, level: int) -> bool:
    x, y = pos
    if not can_be_captured(grid, x, y, level):
        return False
    if level > 5 and level != BOMB:
        return True
    return grid[x][y] in (TOP_EMPTY, BOTTOM_EMPTY)


def bfs_route(grid: Grid, start: Position, target: Position) -> Route | None:
    """Breadth-first shortest route for the piece at ``start``; None if there is none."""
    sx, sy = start
    start = (sx, sy)
    target = (target[0], target[1])
    level = grid[sx][sy]
    visited = {start}
    distance = {start: 0}
    prev: dict[Position, Position] = {}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        if pos == target:
            first = _first_step(prev, start, target)
            if first is None:
                return None
            return Route(start, first, distance[target])
        for nxt in _expansions(grid, pos[0], pos[1], level, visited):
            visited.add(nxt)
            distance[nxt] = distance[pos] + 1
            prev[nxt] = pos
            queue.append(nxt)
    return None


def a_star_route(grid: Grid, start: Position, target: Position) -> Route | None:
    """A* route for the piece at ``start`` guided by Manhattan distance.

    A first move onto a square where a revealed enemy could take the piece
    straight away is never made by an officer above rank 5 (bombs excepted),
    and by others only when it is an attack rather than a move onto an empty
    square. Returns None when no route is found.
    """
    sx, sy = start
    start = (sx, sy)
    tx, ty = target
    target = (tx, ty)
    level = grid[sx][sy]
    visited = {start}
    prev: dict[Position, Position] = {}
    order = itertools.count(1)
    heap: list[tuple[int, int, int, Position]] = [(0, 0, 0, start)]
    while heap:
        _, _, g, pos = heapq.heappop(heap)
        if pos == target:
            first = _first_step(prev, start, target)
            if first is None:
                return None
            return Route(start, first, g)
        for nxt in _expansions(grid, pos[0], pos[1], level, visited):
            visited.add(nxt)
            cost = g + 1
            if cost == 1 and _risky_first_step(grid, nxt, level):
                continue
            estimate = abs(nxt[0] - tx) + abs(nxt[1] - ty)
            heapq.heappush(heap, (cost + estimate, next(order), cost, nxt))
            prev[nxt] = pos
    return None