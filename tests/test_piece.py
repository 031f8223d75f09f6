from junqi.piece import EMPTY, FLAG, Piece


def test_default_piece_is_level_zero_hidden_unowned():
    piece = Piece()
    assert (piece.level, piece.player, piece.face_up, piece.x, piece.y) == (0, 0, False, 0, 0)


def test_empty_level_is_empty():
    assert Piece(EMPTY, 1, True, 2, 1).is_empty() is True


def test_flag_is_not_empty():
    assert Piece(FLAG, 2, True, 11, 1).is_empty() is False


def test_fields_are_mutable():
    piece = Piece(5, 2, False, 6, 0)
    piece.level = EMPTY
    assert piece.is_empty()
    assert piece.player == 2