"""
Minimal won end-games for 3x3 Tic-Tac-Toe.

Generated from the 8 winning skeletons by adding the losing player's moves.
"""

from .skeletons import WIN_SKELETONS, SkeletonShape, skeleton_shape, skeleton_winner
from .generator import (
    BoardSequence,
    EndgameGenerator,
    diff_columns,
    diff_rows,
    permute_three_opposing_moves,
    permute_two_opposing_moves,
    safe_moves_filter,
)

__all__ = [
    'WIN_SKELETONS',
    'SkeletonShape',
    'skeleton_shape',
    'skeleton_winner',
    'BoardSequence',
    'EndgameGenerator',
    'diff_columns',
    'diff_rows',
    'permute_two_opposing_moves',
    'permute_three_opposing_moves',
    'safe_moves_filter',
]
