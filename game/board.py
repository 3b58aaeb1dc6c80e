"""
Board model for 3x3 Tic-Tac-Toe.

Board is stored column-by-row: board[x][y] where x is the column and y the row.
Each sub-array is one column's values, not one row's values.
Cell values: Player.NONE (0) empty, Player.X (1), Player.O (2).
"""

from enum import IntEnum
from typing import Iterable, List, NamedTuple, Optional, Tuple

import numpy as np


class OccupiedCell(ValueError):
    """Move targets a cell that is already filled."""


class NoMovesAvailable(ValueError):
    """A move was requested on a full board."""


class Player(IntEnum):
    NONE = 0
    X = 1
    O = 2

    @property
    def opponent(self) -> "Player":
        if self is Player.NONE:
            return Player.NONE
        return Player(3 - self)

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Player.NONE: "_", Player.X: "x", Player.O: "o"}


class Position(NamedTuple):
    x: int
    y: int


class Move(NamedTuple):
    x: int
    y: int
    player: Player

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)


ALL_POSITIONS: Tuple[Position, ...] = tuple(Position(x, y) for x in range(3) for y in range(3))


class Board:
    """Immutable 3x3 board. Every move returns a new Board."""

    __slots__ = ("cells",)

    def __init__(self, cells=None):
        if cells is None:
            arr = np.zeros((3, 3), dtype=np.int8)
        else:
            arr = np.array(cells, dtype=np.int8)
            if arr.shape != (3, 3):
                raise ValueError(f"Board must be 3x3, got shape {arr.shape}")
            if not np.isin(arr, (0, 1, 2)).all():
                raise ValueError(f"Invalid cell values: {arr.tolist()}")
        arr.setflags(write=False)
        self.cells = arr

    @classmethod
    def from_moves(cls, moves: Iterable[Move]) -> "Board":
        return EMPTY_BOARD.after(moves)

    @classmethod
    def from_symbols(cls, columns) -> "Board":
        """Build a board from nested 'x'/'o'/'_' strings, column by column."""
        lookup = {s: int(p) for p, s in _SYMBOLS.items()}
        return cls([[lookup[v] for v in col] for col in columns])

    def __getitem__(self, x: int):
        return self.cells[x]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __hash__(self) -> int:
        return hash(self.cells.tobytes())

    def __repr__(self) -> str:
        return f"Board({self.to_symbols()})"

    def cell(self, x: int, y: int) -> Player:
        return Player(int(self.cells[x, y]))

    def occupied(self, position: Position) -> bool:
        x, y = position
        return bool(self.cells[x, y] != Player.NONE)

    def available_moves(self) -> List[Position]:
        """Return all empty positions as Position(x, y), sorted."""
        xs, ys = np.nonzero(self.cells == Player.NONE)
        return [Position(int(x), int(y)) for x, y in zip(xs, ys)]

    def apply_move(self, move: Move) -> "Board":
        x, y, player = move
        if not (0 <= x < 3 and 0 <= y < 3):
            raise ValueError(f"Position out of bounds: {x} {y}")
        if player not in (Player.X, Player.O):
            raise ValueError(f"Move needs player X or O, got {player!r}")
        if self.occupied((x, y)):
            raise OccupiedCell(f"Can't move to occupied space: {self.to_symbols()} {x} {y} {Player(player).symbol}")
        arr = self.cells.copy()
        arr[x, y] = player
        return Board(arr)

    def after(self, moves: Iterable[Move]) -> "Board":
        board = self
        for mv in moves:
            board = board.apply_move(mv)
        return board

    def count(self, player: Player) -> int:
        return int(np.count_nonzero(self.cells == player))

    def is_full(self) -> bool:
        return not bool(np.any(self.cells == Player.NONE))

    def is_empty(self) -> bool:
        return not bool(np.any(self.cells))

    def cols(self) -> List[Tuple[int, ...]]:
        return [tuple(int(v) for v in col) for col in self.cells]

    def rows(self) -> List[Tuple[int, ...]]:
        # Transposing the column-major grid gives rows
        return [tuple(int(v) for v in row) for row in self.cells.T]

    def diags(self) -> List[Tuple[int, ...]]:
        main = np.diagonal(self.cells)
        anti = self.cells[np.arange(3), np.arange(2, -1, -1)]
        return [tuple(int(v) for v in main), tuple(int(v) for v in anti)]

    def triplets(self) -> List[Tuple[int, ...]]:
        """All triplets that could qualify as a win: rows, columns, diagonals."""
        return self.rows() + self.cols() + self.diags()

    def winner(self) -> Optional[Player]:
        for triplet in self.triplets():
            first = triplet[0]
            if first != Player.NONE and all(v == first for v in triplet):
                return Player(first)
        return None

    def to_symbols(self) -> List[List[str]]:
        return [[Player(int(v)).symbol for v in col] for col in self.cells]

    def visualize(self) -> str:
        # Printing happens rows-then-columns
        return "\n".join(" " + " | ".join(Player(v).symbol for v in row) for row in self.rows())


EMPTY_BOARD = Board()


def board_from(moves: Iterable[Move]) -> Board:
    return EMPTY_BOARD.after(moves)


def after(moves: Iterable[Move], board: Board) -> Board:
    return board.after(moves)


def winner(moves: Iterable[Move]) -> Optional[Player]:
    """Given a list of moves, return the winning player (or None if none)."""
    return board_from(moves).winner()
