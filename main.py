"""
Command-line usage examples.

    python main.py random --seed 7
    python main.py tree --depth 3 --print
    python main.py endgames --moves 6 --swapped --limit 10
"""

import argparse
import random

from config import Config, DisplayConfig, EndgameConfig, TreeConfig
from game import board_from, rand_game, winner
from gametree import MoveTreeBuilder, print_tree, summarize
from endgame import EndgameGenerator


def run_random(args):
    game = rand_game(random.Random(args.seed))
    print(f"moves: {[(mv.x, mv.y, mv.player.symbol) for mv in game]}")
    print(f"board at end of random game:\n{board_from(game).visualize()}")
    w = winner(game)
    print(f"winner: {w.symbol if w is not None else None}")
    last = game[-1]
    print(f"final move: ({last.x}, {last.y}, {last.player.symbol})")


def run_tree(args, config: Config):
    builder = MoveTreeBuilder(
        max_depth=config.tree.max_depth,
        win_check_from=config.tree.win_check_from,
        show_progress=config.tree.show_progress,
        verbose=config.tree.verbose
    )
    root = builder.build()

    if args.print:
        print_tree(root, max_lines=config.display.max_tree_lines)

    summary = summarize(root)
    print(f"\n{'─' * 60}")
    print(f"Nodes by depth: {summary.nodes_by_depth}")
    print(f"Leaves: {summary.leaves:,}")
    print(f"X wins: {summary.x_wins:,} | O wins: {summary.o_wins:,} | Draws: {summary.draws:,}")
    print(f"{'─' * 60}")


def run_endgames(args, config: Config):
    generator = EndgameGenerator(
        include_swapped=config.endgame.include_swapped,
        show_progress=config.endgame.show_progress
    )
    boards = list(generator.endgames(args.moves))

    for board in boards[:config.display.max_boards]:
        print(f"\n{board.visualize()}")

    print(f"\n{'=' * 60}")
    print(f"{args.moves}-move end-games: {len(boards)}")
    print(f"  Unique up to symmetry: {generator.unique_count(boards)}")
    print(f"  Skeletons: {len(generator.skeletons())}")
    print(f"{'=' * 60}")


def main():
    parser = argparse.ArgumentParser(description='Tic-Tac-Toe move trees and end-games')
    sub = parser.add_subparsers(dest='command', required=True)

    p_random = sub.add_parser('random', help='Play one random game')
    p_random.add_argument('--seed', type=int, default=None, help='Random seed')

    p_tree = sub.add_parser('tree', help='Build the move tree')
    p_tree.add_argument('--depth', type=int, default=TreeConfig.max_depth, help='Deepest move count still expanded')
    p_tree.add_argument('--print', action='store_true', help='Print the tree')
    p_tree.add_argument('--progress', action='store_true', help='Show progress bar')

    p_end = sub.add_parser('endgames', help='Generate minimal won end-games')
    p_end.add_argument('--moves', type=int, choices=[5, 6], default=5, help='Total moves on the board')
    p_end.add_argument('--swapped', action='store_true', help='Include O-winning end-games')
    p_end.add_argument('--limit', type=int, default=DisplayConfig.max_boards, help='Boards to print')
    p_end.add_argument('--progress', action='store_true', help='Show progress bar')

    args = parser.parse_args()

    if args.command == 'random':
        run_random(args)
    elif args.command == 'tree':
        config = Config(tree=TreeConfig(max_depth=args.depth, show_progress=args.progress))
        run_tree(args, config)
    else:
        config = Config(
            endgame=EndgameConfig(include_swapped=args.swapped, show_progress=args.progress),
            display=DisplayConfig(max_boards=args.limit)
        )
        run_endgames(args, config)


if __name__ == '__main__':
    main()
