import random

from junqi.ai import PASS, Step
from junqi.board import Board
from junqi.difficult_ai import DifficultAI, near_camp
from junqi.piece import BOTTOM, TOP


def make_board(codes):
    """A board whose state decodes to ``codes``; unlisted squares are empty (13)."""
    board = Board()
    for x in range(12):
        for y in range(5):
            code = codes.get((x, y), 13)
            piece = board[x, y]
            if code == 0:
                piece.level, piece.player, piece.face_up = 7, TOP, False
            elif code <= 13:
                piece.level, piece.player, piece.face_up = code, TOP, True
            else:
                piece.level, piece.player, piece.face_up = code - 13, BOTTOM, True
    return board


def test_near_camp_adjacent_and_diagonal():
    assert near_camp(1, 1, 2, 1) is True
    assert near_camp(2, 2, 3, 2) is True


def test_near_camp_too_far():
    assert near_camp(0, 3, 2, 3) is False
    assert near_camp(1, 0, 1, 2) is False


def test_reveals_hidden_square_nearest_enemy_flag():
    board = make_board({(0, 0): 0, (5, 1): 0})
    step = DifficultAI().next_step(board)
    assert step == Step(5, 1, -1, -1)
    assert step.is_reveal


def test_passes_when_nothing_to_do():
    board = make_board({})
    assert DifficultAI().next_step(board) == PASS


def test_takes_flag_within_reach():
    board = make_board({(10, 1): 5, (11, 1): 25})
    step = DifficultAI().next_step(board)
    assert step == Step(10, 1, 11, 1)


def test_attacks_adjacent_intruder_near_home():
    board = make_board({(1, 2): 9, (1, 3): 16})
    step = DifficultAI().next_step(board)
    assert step == Step(1, 2, 1, 3)


def test_bomb_shelters_in_camp_when_enemy_is_deep():
    board = make_board({(1, 1): 10, (5, 0): 16})
    step = DifficultAI().next_step(board)
    assert step == Step(1, 1, 2, 1)
    assert step.is_move


def test_strikes_far_intruder_within_reach():
    board = make_board({(5, 1): 9, (5, 0): 16, (11, 1): 25})
    step = DifficultAI().next_step(board)
    assert step == Step(5, 1, 5, 0)


def test_bomb_already_in_camp_goes_hunting():
    board = make_board({(2, 1): 10, (5, 0): 16})
    step = DifficultAI().next_step(board)
    assert step.is_move
    assert (step.x, step.y) == (2, 1)
    assert (step.next_x, step.next_y) != (2, 1)


def test_fresh_hard_game_reveals_own_hidden_piece():
    board = Board()
    board.initialize(3, random.Random(7))
    step = DifficultAI().next_step(board)
    assert step.is_reveal
    assert 0 <= step.x <= 5
    assert board.player_at(step.x, step.y) == TOP
    assert board.is_face_up(step.x, step.y) is False


def test_decision_does_not_change_board():
    board = make_board({(1, 2): 9, (1, 3): 16, (0, 0): 0})
    before = board.state()
    DifficultAI().next_step(board)
    assert board.state() == before