"""Summary statistics and terminal-state classification for a built move tree."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict

from game.rules import Outcome, outcome

from .cursor import Cursor


@dataclass
class TreeSummary:
    nodes: int = 0
    leaves: int = 0
    max_depth: int = 0
    nodes_by_depth: Dict[int, int] = field(default_factory=dict)
    outcomes: Counter = field(default_factory=Counter)

    @property
    def x_wins(self) -> int:
        return self.outcomes[Outcome.X_WIN]

    @property
    def o_wins(self) -> int:
        return self.outcomes[Outcome.O_WIN]

    @property
    def draws(self) -> int:
        return self.outcomes[Outcome.DRAW]

    @property
    def terminal(self) -> int:
        return self.x_wins + self.o_wins + self.draws

    def as_dict(self) -> Dict:
        return {
            'nodes': self.nodes,
            'leaves': self.leaves,
            'max_depth': self.max_depth,
            'nodes_by_depth': dict(self.nodes_by_depth),
            'x_wins': self.x_wins,
            'o_wins': self.o_wins,
            'draws': self.draws,
        }


def summarize(root: Cursor) -> TreeSummary:
    """
    Count nodes per depth and classify leaves.

    Only leaves are classified: an expanded node can't be terminal, since the
    builder stops at the first win and a full board has no open positions.
    """
    summary = TreeSummary()
    by_depth = Counter()

    for loc in root.iter_subtree():
        depth = loc.depth
        by_depth[depth] += 1
        summary.nodes += 1
        summary.max_depth = max(summary.max_depth, depth)

        if loc.is_leaf:
            summary.leaves += 1
            result = outcome(loc.content.played)
            if result is not Outcome.ONGOING:
                summary.outcomes[result] += 1

    summary.nodes_by_depth = dict(sorted(by_depth.items()))
    return summary
