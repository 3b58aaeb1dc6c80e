from .board import (
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
from .rules import Outcome, cur_player, full_or_win, is_full, last_player, outcome, rand_game, rand_valid_move

__all__ = [
    'ALL_POSITIONS', 'EMPTY_BOARD', 'Board', 'Move', 'Position', 'Player',
    'OccupiedCell', 'NoMovesAvailable', 'after', 'board_from', 'winner',
    'Outcome', 'cur_player', 'last_player', 'is_full', 'full_or_win', 'outcome',
    'rand_game', 'rand_valid_move',
]
