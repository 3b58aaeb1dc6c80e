"""
Move Tree Builder

Generates every ordered move sequence as a tree, up to a given depth.

This differs from all possible board-states: a single board-state can be
reached by many move orders, so the tree is much larger than the set of
boards it represents.

Depth is the number of moves made to reach a node; the empty board has depth 0.
A node is expanded while its depth is <= max_depth, so the deepest level
holds max_depth + 1 moves.
"""

import time
from collections import defaultdict

from tqdm import tqdm

from .cursor import Cursor, CursorTree
from .state import GameState


# A win needs at least 5 moves (3 for the winner, 2 for the loser), so
# testing for a winner below this depth is always negative.
MIN_WIN_CHECK_DEPTH = 4
MIN_WIN_MOVES = 5


class MoveTreeBuilder:
    """
    Grow a move tree with a single pre-order walk.

    The walk both expands and visits the tree: children appended to the
    current node are reached by the following `next()` calls, so one loop
    builds every level. A branch stops growing at the depth limit or once a
    player has won.
    """

    def __init__(self, max_depth: int = 4, win_check_from: int = MIN_WIN_CHECK_DEPTH,
                 show_progress: bool = False, verbose: bool = False):
        """
        Args:
            max_depth: Deepest move count that is still expanded
            win_check_from: Move count from which branches are checked for a winner
            show_progress: Show a tqdm bar over visited nodes
            verbose: Print a build summary
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        if not 0 <= win_check_from <= MIN_WIN_MOVES:
            raise ValueError(f"win_check_from must be in [0, {MIN_WIN_MOVES}], got {win_check_from}")
        self.max_depth = max_depth
        self.win_check_from = win_check_from
        self.show_progress = show_progress
        self.verbose = verbose
        self.stats = defaultdict(int)

    def build(self) -> Cursor:
        """Build the tree from the empty board and return a cursor at its root."""
        start_time = time.time()
        self.stats.clear()

        tree = CursorTree(GameState.initial())
        location = tree.root()
        pbar = tqdm(desc="Building move tree", unit="node") if self.show_progress else None

        while not location.is_end:
            self.stats['visited'] += 1
            if self._should_expand(location.content):
                self._expand(location)
                self.stats['expanded'] += 1
            location = location.next()

            if pbar is not None:
                pbar.update(1)

        if pbar is not None:
            pbar.close()

        self.stats['nodes'] = len(tree)

        if self.verbose:
            elapsed = time.time() - start_time
            print("=" * 60)
            print(f"Move tree built: max depth {self.max_depth}")
            print(f"  Nodes: {self.stats['nodes']:,}")
            print(f"  Expanded: {self.stats['expanded']:,}")
            print(f"  Stopped at depth limit: {self.stats['depth_limited']:,}")
            print(f"  Stopped after a win: {self.stats['win_pruned']:,}")
            print(f"  Time: {elapsed:.2f}s")
            print("=" * 60)

        return tree.root()

    def _should_expand(self, state: GameState) -> bool:
        depth = state.depth
        if depth > self.max_depth:
            self.stats['depth_limited'] += 1
            return False
        # Only run the win test when a win is possible at all
        if depth >= self.win_check_from and state.winner() is not None:
            self.stats['win_pruned'] += 1
            return False
        return True

    def _expand(self, location: Cursor) -> None:
        """
        Append one child per open position and per legal next player.

        At the root nobody has moved, so both X and O get a child for every
        position; elsewhere only the opponent of the last mover does.
        """
        state = location.content
        players = state.next_players()
        for position in sorted(state.open):
            for player in players:
                location.append_child(state.play(position, player))


def build_move_tree(max_depth: int, **kwargs) -> Cursor:
    """Build every ordered move sequence up to max_depth; returns the root cursor."""
    return MoveTreeBuilder(max_depth=max_depth, **kwargs).build()
