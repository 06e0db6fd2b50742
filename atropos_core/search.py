from __future__ import annotations

import random
import sys
from enum import Enum
from typing import Iterable, Optional, Protocol

from .board import RED, Board
from .config import DEFAULT_CONFIG, SearchConfig, debug_enabled
from .move import Move
from .moves import adjacent_moves, apply_move, fallback_move, free_moves


class RandomSource(Protocol):
    def random(self) -> float: ...


class Side(Enum):
    """Whose turn is being evaluated. Scores never flip sign between plies."""
    MAX = 1
    MIN = -1

    @property
    def sign(self) -> int:
        return self.value

    @property
    def other(self) -> 'Side':
        return Side.MIN if self is Side.MAX else Side.MAX

    def improves(self, score: int, best: int) -> bool:
        if self is Side.MAX:
            return score > best
        return score < best


def _trace(msg: str) -> None:
    print(f"[search] {msg}", file=sys.stderr)


def choose_best(
    scored: Iterable[Move],
    side: Side,
    rng: RandomSource,
    config: SearchConfig = DEFAULT_CONFIG,
) -> Move:
    """
    Pick the best scored move for ``side``, first found wins unless a later
    move is strictly better. On an exact tie the later move takes over with
    probability ``config.tie_break_probability``, drawn independently per tie.
    """
    best = Move.dummy(-side.sign * config.sentinel)
    for move in scored:
        if side.improves(move.score, best.score):
            best = move
        elif move.score == best.score and rng.random() < config.tie_break_probability:
            best = move
    return best


def score_move(
    move: Move,
    board: Board,
    depth: int,
    side: Side,
    rng: Optional[RandomSource] = None,
    config: SearchConfig = DEFAULT_CONFIG,
) -> Move:
    """
    Score ``move`` played by ``side`` on ``board`` with ``depth`` plies left.
    A frontier node (no depth left) is neutral; otherwise the move takes the
    score of the opponent's best reply.
    """
    if depth <= 0:
        return move.with_score(0)
    if rng is None:
        rng = random.Random()
    successor = apply_move(board, move)
    reply = best_move(successor, depth - 1, side.other, rng=rng, config=config)
    return move.with_score(reply.score)


def best_move(
    board: Board,
    depth: int,
    side: Side = Side.MAX,
    rng: Optional[RandomSource] = None,
    config: Optional[SearchConfig] = None,
) -> Move:
    """
    Depth-limited minimax over the moves answering ``board.last_move``.

    A call with ``depth >= config.max_depth`` is the root and always returns a
    concrete placement while one exists. Deeper calls may return a score-only
    dummy move when the position is judged without looking at concrete cells.
    """
    if config is None:
        config = DEFAULT_CONFIG
    if rng is None:
        rng = random.Random()
    is_root = depth >= config.max_depth

    if board.last_move is None:
        # First move of the game.
        return Move(RED, 1, 1, board.size)

    children = adjacent_moves(board)
    if children is None:
        free = board.count_free_cells()
        if free > config.endgame_tactic and not is_root:
            # Whoever moves here gets to play anywhere.
            return Move.dummy(side.sign * config.free_move_score)
        children = free_moves(board)
        if free > config.endgame_tactic:
            depth = min(depth, config.wide_search_depth)

    if not children:
        if not is_root:
            return Move.dummy(side.sign * config.lose_score)
        losing = fallback_move(board)
        if losing is None:
            # Nothing left to color.
            return Move.dummy(side.sign * config.lose_score)
        if debug_enabled():
            _trace(f"no safe move, conceding with {losing}")
        return losing.with_score(side.sign * config.lose_score)

    if is_root and debug_enabled():
        _trace(f"depth={depth} side={side.name} children={len(children)}")

    scored = (score_move(child, board, depth, side, rng=rng, config=config) for child in children)
    best = choose_best(scored, side, rng, config)

    if is_root and debug_enabled():
        _trace(f"chose {best} score={best.score}")
    return best
