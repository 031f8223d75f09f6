"""What a computer player decides, and the text forms it is exchanged in."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .board import COLS, ROWS

if TYPE_CHECKING:
    from .board import Board

NONE = -1


@dataclass(frozen=True)
class Step:
    """A decision: reveal (x, y), or move from (x, y) to (next_x, next_y).

    ``x == -1`` means no action at all; ``next_x == -1`` means a reveal.
    """

    x: int
    y: int
    next_x: int = NONE
    next_y: int = NONE

    @property
    def is_pass(self) -> bool:
        """True when the step does nothing."""
        return self.x == NONE

    @property
    def is_reveal(self) -> bool:
        """True when the step turns over the piece at (x, y)."""
        return not self.is_pass and self.next_x == NONE

    @property
    def is_move(self) -> bool:
        """True when the step moves the piece at (x, y) to (next_x, next_y)."""
        return not self.is_pass and self.next_x != NONE


PASS = Step(NONE, NONE)


class Strategy(ABC):
    """A computer player."""

    @abstractmethod
    def next_step(self, board: Board) -> Step:
        """Decide what to do on ``board``."""


def _parse_ints(text: str, count: int, what: str) -> list[int]:
    fields = text.split(",")
    if fields and not fields[-1].strip():
        fields.pop()
    try:
        values = [int(field) for field in fields]
    except ValueError as exc:
        raise ValueError(f"malformed {what}: {text!r}") from exc
    if len(values) != count:
        raise ValueError(f"{what} needs {count} values, got {len(values)}")
    return values


def format_step(step: Step) -> str:
    """The comma-terminated text form of a step."""
    return "".join(f"{value}," for value in (step.x, step.y, step.next_x, step.next_y))


def parse_step(text: str) -> Step:
    """Read a step from its comma-separated text form."""
    return Step(*_parse_ints(text, 4, "step"))


def parse_state(state: str) -> list[list[int]]:
    """Turn a board state string into 12 rows of 5 codes."""
    values = _parse_ints(state, ROWS * COLS, "board state")
    return [values[row * COLS:(row + 1) * COLS] for row in range(ROWS)]