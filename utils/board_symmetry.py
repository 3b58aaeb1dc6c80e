"""
board symmetry transformation and normalization
Tic-Tac-Toe has D4 symmetry group (8 symmetries) plus X-O swap symmetry
"""
import numpy as np
from game import Board, Player


class BoardSymmetry:
    """board symmetry transformation and normalization"""

    @staticmethod
    def get_all_symmetries(board: Board):
        """
        apply all symmetries

        Args:
            board: Board object

        Returns:
            list of 8 Boards (identity first)
        """
        arr = board.cells

        return [
            Board(arr),
            Board(np.fliplr(arr)),
            Board(np.flipud(arr)),
            Board(np.rot90(arr, k=2)),
            Board(np.rot90(arr, k=-1)),
            Board(np.rot90(arr, k=1)),
            Board(arr.T),
            Board(np.rot90(arr.T, k=2)),
        ]

    @staticmethod
    def swap_players(board: Board) -> Board:
        """
        Create a new board with X and O swapped.
        Used to derive O-winning endgames from X-winning ones.
        """
        arr = board.cells.copy()
        arr[board.cells == Player.X] = Player.O
        arr[board.cells == Player.O] = Player.X
        return Board(arr)

    @staticmethod
    def canonical_key(board: Board) -> bytes:
        """Minimum bytes over the 8 D4 images (no X-O swap)."""
        return min(sym.cells.tobytes() for sym in BoardSymmetry.get_all_symmetries(board))

    @staticmethod
    def canonical_key_with_swap(board: Board) -> bytes:
        """
        Returns min(canonical(board), canonical(swap_players(board))).
        """
        original_key = BoardSymmetry.canonical_key(board)
        swapped_key = BoardSymmetry.canonical_key(BoardSymmetry.swap_players(board))
        return min(original_key, swapped_key)
