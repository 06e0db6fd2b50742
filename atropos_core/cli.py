from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional

from .codec import format_move, parse_board
from .config import SearchConfig
from .errors import MalformedInput
from .search import Side, best_move


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Atropos player: prints the next move for a board')
    parser.add_argument('board', help='Board encoding, e.g. "[13][302][1003][30002][1212]LastPlay:null"')
    parser.add_argument('--depth', type=int, default=None, help='Search depth (default: ATROPOS_MAX_DEPTH or 4)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for tie-breaking')
    parser.add_argument('--show-board', action='store_true', help='Print the parsed board to stderr')
    args = parser.parse_args(argv)

    try:
        config = SearchConfig.from_env()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if args.depth is not None:
        if args.depth < 1:
            parser.error('--depth must be at least 1')
        config = SearchConfig(
            max_depth=args.depth,
            endgame_tactic=config.endgame_tactic,
        )

    try:
        board = parse_board(args.board)
    except MalformedInput as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.show_board:
        print(board.pretty(), file=sys.stderr)

    move = best_move(board, config.max_depth, Side.MAX, rng=random.Random(args.seed), config=config)
    sys.stdout.write(format_move(move))
    sys.stdout.flush()
    return 0
