import random

import pytest

from junqi.ai import PASS, Step, Strategy, format_step, parse_state, parse_step
from junqi.board import Board


def test_format_step_is_comma_terminated():
    assert format_step(Step(3, 0, 4, 0)) == "3,0,4,0,"


@pytest.mark.parametrize(
    "step",
    [Step(3, 0, 4, 0), Step(5, 1), PASS, Step(-1, 0), Step(11, 4, 10, 4)],
)
def test_step_round_trip(step):
    assert parse_step(format_step(step)) == step


def test_parse_step_accepts_spaces_and_no_trailing_comma():
    assert parse_step(" 1, 2 ,3,4") == Step(1, 2, 3, 4)


@pytest.mark.parametrize("text", ["1,2,3", "1,2,3,4,5,", "a,b,c,d,", ""])
def test_parse_step_rejects_bad_text(text):
    with pytest.raises(ValueError):
        parse_step(text)


def test_step_kinds():
    assert PASS.is_pass and not PASS.is_reveal and not PASS.is_move
    reveal = Step(5, 1)
    assert reveal.is_reveal and not reveal.is_move and not reveal.is_pass
    move = Step(10, 1, 11, 1)
    assert move.is_move and not move.is_reveal and not move.is_pass


def test_parse_state_of_fresh_board_is_all_hidden():
    assert parse_state(Board().state()) == [[0] * 5 for _ in range(12)]


def test_parse_state_matches_board_shape_and_flags():
    board = Board()
    board.initialize(1, random.Random(7))
    grid = parse_state(board.state())
    assert len(grid) == 12
    assert all(len(row) == 5 for row in grid)
    assert grid[0][3] == 12
    assert grid[11][1] == 25


def test_parse_state_round_trips_through_text():
    board = Board()
    board.initialize(3, random.Random(3))
    grid = parse_state(board.state())
    text = "".join(f"{code}," for row in grid for code in row)
    assert text == board.state()


@pytest.mark.parametrize("state", ["1,2,3,", "x," * 60, "0," * 61])
def test_parse_state_rejects_bad_text(state):
    with pytest.raises(ValueError):
        parse_state(state)


def test_strategy_is_abstract():
    with pytest.raises(TypeError):
        Strategy()


def test_strategy_subclass_returns_its_step():
    class Fixed(Strategy):
        def next_step(self, board):
            return Step(2, 0, 3, 0)

    assert Fixed().next_step(Board()) == Step(2, 0, 3, 0)