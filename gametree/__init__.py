"""
Move trees for 3x3 Tic-Tac-Toe.

Every ordered move sequence is grown lazily into a cursor tree, stopping a
branch once a player has won.
"""

from .cursor import Cursor, CursorTree, TreeNode
from .state import GameState
from .builder import MoveTreeBuilder, build_move_tree, MIN_WIN_CHECK_DEPTH
from .summary import TreeSummary, summarize
from .display import format_tree, print_tree

__all__ = [
    'Cursor',
    'CursorTree',
    'TreeNode',
    'GameState',
    'MoveTreeBuilder',
    'build_move_tree',
    'MIN_WIN_CHECK_DEPTH',
    'TreeSummary',
    'summarize',
    'format_tree',
    'print_tree',
]
