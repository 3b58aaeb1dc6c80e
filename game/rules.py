"""
Game rules over move sequences.

A game is a sequence of Move(x, y, player). X always moves first in a
random game; move trees may start with either player.
"""

import random
from enum import Enum
from typing import List, Optional, Sequence

from .board import Move, NoMovesAvailable, Player, board_from, winner


class Outcome(Enum):
    ONGOING = "ongoing"
    X_WIN = "x_win"
    O_WIN = "o_win"
    DRAW = "draw"


def cur_player(moves: Sequence[Move]) -> Player:
    return (Player.X, Player.O)[len(moves) % 2]


def last_player(moves: Sequence[Move]) -> Player:
    """Player tag of the last move, Player.NONE before any move."""
    if not moves:
        return Player.NONE
    return Player(moves[-1].player)


def is_full(moves: Sequence[Move]) -> bool:
    return len(moves) >= 9


def full_or_win(moves: Sequence[Move]) -> bool:
    return is_full(moves) or winner(moves) is not None


def outcome(moves: Sequence[Move]) -> Outcome:
    w = winner(moves)
    if w is Player.X:
        return Outcome.X_WIN
    if w is Player.O:
        return Outcome.O_WIN
    if is_full(moves):
        return Outcome.DRAW
    return Outcome.ONGOING


def rand_valid_move(moves: Sequence[Move], player: Optional[Player] = None,
                    rng: Optional[random.Random] = None) -> List[Move]:
    """Return moves with one random legal move appended."""
    rng = rng or random
    board = board_from(moves)
    avl_moves = board.available_moves()
    if not avl_moves:
        raise NoMovesAvailable(f"No valid moves left on {board.to_symbols()}")
    x, y = rng.choice(avl_moves)
    return list(moves) + [Move(x, y, player or cur_player(moves))]


def rand_game(rng: Optional[random.Random] = None) -> List[Move]:
    """
    Return a game consisting of a sequence of valid moves ending in a win or a
    full board.
    """
    moves: List[Move] = []
    while not full_or_win(moves):
        moves = rand_valid_move(moves, rng=rng)
    return moves
