from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from .board import COLORS, RED, UNCOLORED, Board, third_color
from .errors import IllegalPlacement
from .move import Coord, Move


def safe_colors(board: Board, x: int, y: int) -> List[int]:
    """
    Colors that can be placed at (x, y) without closing a three-color triangle.

    Each pair of adjacent neighbors (the ring wraps around) with two different
    colors forbids the remaining third color.
    """
    ring = board.neighbor_colors(x, y)
    ring.append(ring[0])
    forbidden = set()
    for c1, c2 in zip(ring, ring[1:]):
        if c1 != UNCOLORED and c2 != UNCOLORED and c1 != c2:
            forbidden.add(third_color(c1, c2))
    return [c for c in COLORS if c not in forbidden]


def _moves_at(board: Board, x: int, y: int) -> List[Move]:
    z = board.z_of(x, y)
    return [Move(color, x, y, z) for color in safe_colors(board, x, y)]


def _free_neighbors(board: Board, last: Move) -> List[Coord]:
    return [
        (nx, ny, nz)
        for nx, ny, nz in board.neighbors(last.x, last.y)
        if board.is_interior(nx, ny) and board.color_at(nx, ny) == UNCOLORED
    ]


def adjacent_moves(board: Board) -> Optional[List[Move]]:
    """
    Non-losing moves next to the last move.

    Returns None when no neighbor of the last move is uncolored (the player
    gets a free move), and an empty list when every placement would lose.
    """
    if board.last_move is None:
        raise ValueError('adjacent_moves requires a board with a last move')
    around = _free_neighbors(board, board.last_move)
    if not around:
        return None
    moves: List[Move] = []
    for x, y, _ in around:
        moves.extend(_moves_at(board, x, y))
    return moves


def free_moves(board: Board) -> List[Move]:
    """Non-losing moves anywhere on the playable board."""
    moves: List[Move] = []
    for x, y, _ in board.interior_coords():
        if board.color_at(x, y) == UNCOLORED:
            moves.extend(_moves_at(board, x, y))
    return moves


def playable_cells(board: Board) -> List[Coord]:
    """
    Circles the player to move may color under the adjacency rule: the free
    neighbors of the last move, or every free circle when there are none.
    """
    if board.last_move is not None:
        around = _free_neighbors(board, board.last_move)
        if around:
            return around
    return [(x, y, z) for x, y, z in board.interior_coords() if board.color_at(x, y) == UNCOLORED]


def fallback_move(board: Board) -> Optional[Move]:
    """Some placement the rules allow, used only when every move loses."""
    cells = playable_cells(board)
    if not cells:
        return None
    x, y, z = cells[0]
    return Move(RED, x, y, z)


def completes_triangle(board: Board, move: Move) -> bool:
    """True when placing ``move`` closes a triangle of three different colors."""
    return move.color not in safe_colors(board, move.x, move.y)


def apply_move(board: Board, move: Move) -> Board:
    """Returns the board after ``move``, with ``move`` as its last move."""
    if move.is_dummy:
        raise IllegalPlacement('cannot place a score-only move')
    if move.color not in COLORS:
        raise IllegalPlacement(f'invalid color {move.color} in {move}')
    if move.x + move.y + move.z != board.size + 2 or not board.is_interior(move.x, move.y):
        raise IllegalPlacement(f'{move} is not a playable circle on a size {board.size} board')
    current = board.color_at(move.x, move.y)
    if current != UNCOLORED:
        raise IllegalPlacement(f'{move} targets a circle already colored {current}')
    placed = board.with_color(move.x, move.y, move.color)
    return replace(placed, last_move=move.with_score(0))
