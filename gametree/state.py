"""
Game state stored in each move-tree node.

We store both the played moves and the open positions so that expanding a
node does not have to recompute the available positions from a board.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from game import ALL_POSITIONS, Board, Move, Player, Position, board_from, winner
from game.rules import last_player


@dataclass(frozen=True)
class GameState:
    played: Tuple[Move, ...]
    open: FrozenSet[Position]

    def __post_init__(self):
        played_positions = {mv.position for mv in self.played}
        if len(played_positions) != len(self.played):
            raise ValueError(f"Position played twice: {self.played}")
        if played_positions & self.open or len(self.played) + len(self.open) != 9:
            raise ValueError(f"Played and open positions must partition the board: {self}")

    @classmethod
    def initial(cls) -> "GameState":
        """State before any move has been made."""
        return cls(played=(), open=frozenset(ALL_POSITIONS))

    @property
    def depth(self) -> int:
        """Number of moves played; the empty board has depth 0."""
        return len(self.played)

    @property
    def previous_player(self) -> Player:
        return last_player(self.played)

    def next_players(self) -> Tuple[Player, ...]:
        """
        Players that may move next.

        Before any move both players may open the game; afterwards only the
        opponent of the last mover.
        """
        prev = self.previous_player
        players = ()
        if prev is Player.O or prev is Player.NONE:
            players += (Player.X,)
        if prev is Player.X or prev is Player.NONE:
            players += (Player.O,)
        return players

    def play(self, position: Position, player: Player) -> "GameState":
        """
        New state with player placed at position.

        N.B. the only validation is the partition check in __post_init__, so
        pass positions taken from `open`.
        """
        position = Position(*position)
        return GameState(
            played=self.played + (Move(position.x, position.y, player),),
            open=self.open - {position},
        )

    def winner(self) -> Optional[Player]:
        return winner(self.played)

    def board(self) -> Board:
        return board_from(self.played)

    def __str__(self) -> str:
        moves = " ".join(f"[{mv.x} {mv.y} {Player(mv.player).symbol}]" for mv in self.played)
        cells = " ".join(f"[{p.x} {p.y}]" for p in sorted(self.open))
        return f"played: [{moves}] open: #{{{cells}}}"
