"""
Board model tests.
"""

import pytest
import numpy as np

from game import (
    ALL_POSITIONS,
    EMPTY_BOARD,
    Board,
    Move,
    NoMovesAvailable,
    OccupiedCell,
    Player,
    Position,
    after,
    board_from,
    winner,
)

X, O = Player.X, Player.O


class TestBoardBasics:
    """Basic board operations."""

    def test_empty_board(self):
        assert EMPTY_BOARD.is_empty()
        assert not EMPTY_BOARD.is_full()
        assert EMPTY_BOARD.winner() is None
        assert len(EMPTY_BOARD.available_moves()) == 9

    def test_available_moves_sorted(self):
        assert EMPTY_BOARD.available_moves() == list(ALL_POSITIONS)
        assert ALL_POSITIONS[0] == Position(0, 0)
        assert ALL_POSITIONS[1] == Position(0, 1)

    def test_apply_move_returns_new_board(self):
        board = EMPTY_BOARD.apply_move(Move(1, 2, X))
        assert board.cell(1, 2) == X
        assert board.occupied(Position(1, 2))
        # Original untouched
        assert not EMPTY_BOARD.occupied(Position(1, 2))
        assert Position(1, 2) not in board.available_moves()
        assert len(board.available_moves()) == 8

    def test_board_is_read_only(self):
        board = EMPTY_BOARD.apply_move(Move(0, 0, X))
        with pytest.raises(ValueError):
            board.cells[1, 1] = O

    def test_occupied_cell_raises(self):
        board = EMPTY_BOARD.apply_move(Move(1, 1, X))
        with pytest.raises(OccupiedCell):
            board.apply_move(Move(1, 1, O))
        # Illegal moves are ValueErrors
        with pytest.raises(ValueError):
            board.apply_move(Move(1, 1, X))

    def test_out_of_bounds_rejected(self):
        for x, y in [(-1, 0), (0, -1), (3, 0), (0, 3)]:
            with pytest.raises(ValueError):
                EMPTY_BOARD.apply_move(Move(x, y, X))

    def test_empty_player_rejected(self):
        with pytest.raises(ValueError):
            EMPTY_BOARD.apply_move(Move(0, 0, Player.NONE))

    def test_error_types(self):
        assert issubclass(OccupiedCell, ValueError)
        assert issubclass(NoMovesAvailable, ValueError)

    def test_after_applies_in_order(self):
        moves = [Move(0, 0, X), Move(1, 1, O), Move(2, 2, X)]
        board = after(moves, EMPTY_BOARD)
        assert board == board_from(moves)
        assert board == Board.from_moves(moves)
        assert board.count(X) == 2
        assert board.count(O) == 1

    def test_after_stops_on_occupied(self):
        with pytest.raises(OccupiedCell):
            board_from([Move(0, 0, X), Move(0, 0, O)])

    def test_equality_and_hash(self):
        a = board_from([Move(0, 0, X), Move(2, 1, O)])
        b = board_from([Move(2, 1, O), Move(0, 0, X)])
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1
        assert a != EMPTY_BOARD

    def test_from_symbols(self):
        board = Board.from_symbols([["x", "_", "_"], ["_", "o", "_"], ["_", "_", "_"]])
        assert board.cell(0, 0) == X
        assert board.cell(1, 1) == O
        assert board.to_symbols() == [["x", "_", "_"], ["_", "o", "_"], ["_", "_", "_"]]

    def test_invalid_shape(self):
        with pytest.raises(ValueError):
            Board(np.zeros((2, 3)))

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            Board([[0, 0, 0], [0, 3, 0], [0, 0, 0]])


class TestPlayer:

    def test_opponent(self):
        assert X.opponent is O
        assert O.opponent is X
        assert Player.NONE.opponent is Player.NONE

    def test_symbols(self):
        assert X.symbol == "x"
        assert O.symbol == "o"
        assert Player.NONE.symbol == "_"

    def test_move_position(self):
        mv = Move(2, 0, O)
        assert mv.position == Position(2, 0)
        assert mv.player is O


class TestTriplets:
    """Rows, columns and diagonals of the column-major board."""

    def test_cols_are_first_index(self):
        board = EMPTY_BOARD.apply_move(Move(0, 1, X))
        assert board.cols()[0] == (0, 1, 0)

    def test_rows_are_transposed(self):
        board = EMPTY_BOARD.apply_move(Move(0, 1, X))
        assert board.rows()[1] == (1, 0, 0)
        assert board.rows()[0] == (0, 0, 0)

    def test_diags(self):
        board = board_from([Move(0, 2, X), Move(2, 0, O)])
        main, anti = board.diags()
        assert main == (0, 0, 0)
        assert anti == (1, 0, 2)

    def test_eight_triplets(self):
        assert len(EMPTY_BOARD.triplets()) == 8


class TestWinner:
    """Winner detection over all eight lines."""

    def test_column_win(self):
        moves = [Move(0, 0, X), Move(1, 1, O), Move(0, 1, X), Move(1, 0, O), Move(0, 2, X)]
        assert winner(moves) is X

    def test_row_win(self):
        moves = [Move(0, 1, X), Move(0, 0, O), Move(1, 1, X), Move(1, 0, O),
                 Move(2, 2, X), Move(2, 0, O)]
        assert winner(moves) is O

    def test_main_diagonal(self):
        board = board_from([Move(0, 0, X), Move(1, 1, X), Move(2, 2, X)])
        assert board.winner() is X

    def test_anti_diagonal(self):
        board = board_from([Move(0, 2, O), Move(1, 1, O), Move(2, 0, O)])
        assert board.winner() is O

    def test_no_winner(self):
        moves = [Move(0, 0, X), Move(1, 1, O), Move(0, 1, X), Move(0, 2, O)]
        assert winner(moves) is None

    def test_mixed_line_not_a_win(self):
        board = board_from([Move(0, 0, X), Move(0, 1, X), Move(0, 2, O)])
        assert board.winner() is None


class TestVisualize:

    def test_visualize_rows_joined(self):
        board = board_from([Move(0, 0, X), Move(1, 0, O)])
        assert board.visualize() == " x | o | _\n _ | _ | _\n _ | _ | _"

    def test_full_board(self):
        board = board_from([Move(x, y, X if (x + y) % 2 == 0 else O) for x in range(3) for y in range(3)])
        assert board.is_full()
        assert board.available_moves() == []
