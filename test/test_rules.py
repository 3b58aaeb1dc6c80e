"""
Tests for move-sequence rules and random games.
"""

import random

import pytest

from game import Move, NoMovesAvailable, Player, board_from
from game.rules import (
    Outcome,
    cur_player,
    full_or_win,
    is_full,
    last_player,
    outcome,
    rand_game,
    rand_valid_move,
)

X, O = Player.X, Player.O

# x o x
# x o o
# o x x
DRAW_MOVES = [
    Move(0, 0, X), Move(1, 0, O), Move(2, 0, X),
    Move(1, 1, O), Move(0, 1, X), Move(2, 1, O),
    Move(1, 2, X), Move(0, 2, O), Move(2, 2, X),
]


class TestPlayers:

    def test_cur_player_alternates(self):
        assert cur_player([]) is X
        assert cur_player([Move(0, 0, X)]) is O
        assert cur_player([Move(0, 0, X), Move(1, 1, O)]) is X

    def test_last_player(self):
        assert last_player([]) is Player.NONE
        assert last_player([Move(0, 0, X)]) is X
        assert last_player([Move(0, 0, X), Move(1, 1, O)]) is O


class TestOutcome:

    def test_ongoing(self):
        assert outcome([Move(0, 0, X)]) is Outcome.ONGOING
        assert not full_or_win([Move(0, 0, X)])

    def test_x_win(self):
        moves = [Move(0, 0, X), Move(1, 1, O), Move(0, 1, X), Move(1, 0, O), Move(0, 2, X)]
        assert outcome(moves) is Outcome.X_WIN
        assert full_or_win(moves)

    def test_o_win(self):
        moves = [Move(0, 0, X), Move(1, 0, O), Move(2, 2, X), Move(1, 1, O),
                 Move(0, 2, X), Move(1, 2, O)]
        assert outcome(moves) is Outcome.O_WIN

    def test_draw(self):
        assert board_from(DRAW_MOVES).winner() is None
        assert is_full(DRAW_MOVES)
        assert outcome(DRAW_MOVES) is Outcome.DRAW
        assert full_or_win(DRAW_MOVES)


class TestRandomGames:

    def test_rand_valid_move_appends(self):
        moves = rand_valid_move([], rng=random.Random(0))
        assert len(moves) == 1
        assert moves[0].player is X

    def test_rand_valid_move_forced_player(self):
        moves = rand_valid_move([Move(1, 1, X)], player=X, rng=random.Random(0))
        assert moves[-1].player is X
        assert moves[-1].position != (1, 1)

    def test_rand_valid_move_full_board(self):
        with pytest.raises(NoMovesAvailable):
            rand_valid_move(DRAW_MOVES)

    @pytest.mark.parametrize("seed", range(20))
    def test_rand_game_ends_in_win_or_full(self, seed):
        game = rand_game(random.Random(seed))
        assert full_or_win(game)
        # No earlier prefix is finished
        assert not any(full_or_win(game[:i]) for i in range(len(game)))
        # Alternating players, X first, no cell twice
        assert [mv.player for mv in game] == [cur_player(game[:i]) for i in range(len(game))]
        assert len({mv.position for mv in game}) == len(game)
