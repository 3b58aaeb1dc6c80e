"""
Endgame Generator

Builds minimal won end-game boards from a winning skeleton by filling in the
losing player's moves.

The minimum number of played positions for a won game is 5: 3 for the
winner, who moved first, and 2 for the loser. If the second player wins, the
minimum is 6 with 3 positions each. So every skeleton has two minimal
completions:

- 5 moves: any 2 of the 6 empty cells go to the loser. Two cells can never
  make a line, so every combination is kept.
- 6 moves: any 3 of the 6 empty cells go to the loser, except the ones that
  would give the loser a line too.

Not implemented: 7, 8 and 9 move won end-games and drawn end-games.
"""

from collections import defaultdict
from itertools import combinations
from typing import Callable, Iterable, Iterator, List, Sequence

from tqdm import tqdm

from game import Board, Move, Position
from utils import BoardSymmetry

from .skeletons import WIN_SKELETONS, SkeletonShape, skeleton_shape, skeleton_winner


class BoardSequence:
    """
    Lazy, finite and restartable sequence of boards.

    Each iteration calls the factory again, so the sequence can be walked
    any number of times.
    """

    def __init__(self, factory: Callable[[], Iterator[Board]]):
        self._factory = factory

    def __iter__(self) -> Iterator[Board]:
        return self._factory()

    def __len__(self) -> int:
        return sum(1 for _ in self)


def diff_columns(positions: Sequence[Position]) -> bool:
    """True if the positions span more than one column."""
    return len({p[0] for p in positions}) != 1


def diff_rows(positions: Sequence[Position]) -> bool:
    """True if the positions span more than one row."""
    return len({p[1] for p in positions}) != 1


def _keep_all(positions: Sequence[Position]) -> bool:
    return True


def safe_moves_filter(skeleton: Board) -> Callable[[Sequence[Position]], bool]:
    """
    Filter for loser combinations that don't give the loser a line.

    If the winner holds a column, the loser can't be allowed all three moves
    in one column; same for rows. A diagonal winner leaves no loser line
    possible, so every combination passes.
    """
    shape = skeleton_shape(skeleton)
    if shape is SkeletonShape.COLUMN:
        return diff_columns
    if shape is SkeletonShape.ROW:
        return diff_rows
    return _keep_all


def _opposing_boards(skeleton: Board, count: int, keep) -> Iterator[Board]:
    loser = skeleton_winner(skeleton).opponent
    for combo in combinations(skeleton.available_moves(), count):
        if keep(combo):
            yield skeleton.after(Move(p.x, p.y, loser) for p in combo)


def permute_two_opposing_moves(skeleton: Board) -> BoardSequence:
    """Every 5-move end-game reachable from the skeleton."""
    skeleton_winner(skeleton)
    return BoardSequence(lambda: _opposing_boards(skeleton, 2, _keep_all))


def permute_three_opposing_moves(skeleton: Board) -> BoardSequence:
    """Every 6-move end-game reachable from the skeleton where only the winner has a line."""
    safe_mvs = safe_moves_filter(skeleton)
    return BoardSequence(lambda: _opposing_boards(skeleton, 3, safe_mvs))


class EndgameGenerator:
    """Generate the minimal won end-games over all winning skeletons."""

    def __init__(self, include_swapped: bool = False, show_progress: bool = False):
        """
        Args:
            include_swapped: Also generate the O-winning half (X and O swapped)
            show_progress: Show a tqdm bar over skeletons
        """
        self.include_swapped = include_swapped
        self.show_progress = show_progress
        self.stats = defaultdict(int)

    def skeletons(self) -> List[Board]:
        skeletons = list(WIN_SKELETONS)
        if self.include_swapped:
            skeletons += [BoardSymmetry.swap_players(s) for s in WIN_SKELETONS]
        return skeletons

    def _generate(self, permute, label: str) -> Iterator[Board]:
        self.stats.clear()
        skeletons = self.skeletons()
        if self.show_progress:
            skeletons = tqdm(skeletons, desc=f"{label} end-games")
        for skeleton in skeletons:
            self.stats['skeletons'] += 1
            for board in permute(skeleton):
                self.stats[label] += 1
                yield board

    def five_move_endgames(self) -> Iterator[Board]:
        return self._generate(permute_two_opposing_moves, "five_move")

    def six_move_endgames(self) -> Iterator[Board]:
        return self._generate(permute_three_opposing_moves, "six_move")

    def endgames(self, moves: int) -> Iterator[Board]:
        if moves == 5:
            return self.five_move_endgames()
        if moves == 6:
            return self.six_move_endgames()
        if 7 <= moves <= 9:
            raise NotImplementedError(f"{moves}-move end-games are not generated")
        raise ValueError(f"A won game has 5 to 9 moves, got {moves}")

    @staticmethod
    def unique_count(boards: Iterable[Board]) -> int:
        """Number of boards distinct up to rotation and reflection."""
        return len({BoardSymmetry.canonical_key(b) for b in boards})
