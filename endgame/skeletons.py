"""
Winning skeletons: the 8 board-states that represent a win, before any move
from the losing player is added.

X is the winner in every skeleton; the O-winning half is the same table with
X and O swapped (see utils.BoardSymmetry.swap_players).

Boards are column-major, so a skeleton whose first sub-list is [x, x, x] is
column 0.
"""

from enum import Enum
from typing import Tuple

from game import Board, Player


class SkeletonShape(Enum):
    COLUMN = "column"
    ROW = "row"
    DIAGONAL = "diagonal"


WIN_SKELETONS: Tuple[Board, ...] = tuple(Board.from_symbols(cols) for cols in (
    # columns
    [["x", "x", "x"], ["_", "_", "_"], ["_", "_", "_"]],
    [["_", "_", "_"], ["x", "x", "x"], ["_", "_", "_"]],
    [["_", "_", "_"], ["_", "_", "_"], ["x", "x", "x"]],
    # rows
    [["x", "_", "_"], ["x", "_", "_"], ["x", "_", "_"]],
    [["_", "x", "_"], ["_", "x", "_"], ["_", "x", "_"]],
    [["_", "_", "x"], ["_", "_", "x"], ["_", "_", "x"]],
    # diagonals
    [["x", "_", "_"], ["_", "x", "_"], ["_", "_", "x"]],
    [["_", "_", "x"], ["_", "x", "_"], ["x", "_", "_"]],
))


def _is_full_line(triplet) -> bool:
    return triplet[0] != Player.NONE and all(v == triplet[0] for v in triplet)


def skeleton_winner(skeleton: Board) -> Player:
    """
    The player owning the skeleton's 3 cells.

    Raises ValueError unless the board holds exactly one winning line of
    3 cells and nothing else.
    """
    filled = 9 - len(skeleton.available_moves())
    winner = skeleton.winner()
    if filled != 3 or winner is None:
        raise ValueError(f"Not a winning skeleton: {skeleton.to_symbols()}")
    return winner


def skeleton_shape(skeleton: Board) -> SkeletonShape:
    skeleton_winner(skeleton)
    if any(_is_full_line(col) for col in skeleton.cols()):
        return SkeletonShape.COLUMN
    if any(_is_full_line(row) for row in skeleton.rows()):
        return SkeletonShape.ROW
    return SkeletonShape.DIAGONAL
