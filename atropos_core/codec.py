from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from .board import COLORS, Board
from .errors import MalformedInput
from .move import Move

DIGITS = '0123'


def format_move(move: Move) -> str:
    """Renders a move as the "(color,x,y,z)" tuple expected by the referee."""
    return str(move)


def _parse_last_move(segment: str, board: Board) -> Optional[Move]:
    # Anything without a tuple ("LastPlay:null", "") means no move has been played.
    start = segment.find('(')
    if start < 0:
        return None
    end = segment.find(')', start)
    if end < 0:
        raise MalformedInput(f'unterminated last move: {segment!r}')
    parts = [p.strip() for p in segment[start + 1:end].split(',')]
    if len(parts) != 4:
        raise MalformedInput(f'last move must have 4 fields, got {len(parts)}: {segment!r}')
    try:
        color, x, y, z = (int(p) for p in parts)
    except ValueError:
        raise MalformedInput(f'last move fields must be integers: {segment!r}')
    if color not in COLORS:
        raise MalformedInput(f'last move color must be 1, 2 or 3, got {color}')
    if x + y + z != board.size + 2:
        raise MalformedInput(f'last move ({x},{y},{z}) does not satisfy x+y+z={board.size + 2}')
    if not board.is_interior(x, y):
        raise MalformedInput(f'last move ({x},{y},{z}) is not a playable circle')
    if board.color_at(x, y) != color:
        raise MalformedInput(f'last move color {color} does not match the board at ({x},{y},{z})')
    return Move(color, x, y, z)


def parse_board(text: str) -> Board:
    """
    Parses the referee's board encoding, e.g.
    "[13][302][1003][30002][1212]LastPlay:(1,1,2,2)".

    Rows run from the top of the triangle down. Each upper row holds the left
    border circle, the playable circles and the right border circle; the last
    row is the bottom border. Whatever follows the final "]" describes the
    opponent's last move.
    """
    if not isinstance(text, str):
        raise MalformedInput(f'board must be text, got {type(text).__name__}')
    parts = text.strip().split(']')
    rows, tail = parts[:-1], parts[-1]
    if len(rows) < 3:
        raise MalformedInput(f'expected at least 3 rows, got {len(rows)}')
    size = len(rows) - 2
    board = Board.blank(size)
    grid: List[List[int]] = [list(r) for r in board.grid]

    for i, raw in enumerate(rows):
        raw = raw.strip()
        if not raw.startswith('['):
            raise MalformedInput(f'row {i + 1} must start with "[": {raw!r}')
        digits = raw[1:]
        x = size + 1 - i
        ys = board.row_cells(x)
        if len(digits) != len(ys):
            raise MalformedInput(f'row {i + 1} should hold {len(ys)} circles, got {len(digits)}')
        for y, ch in zip(ys, digits):
            if ch not in DIGITS:
                raise MalformedInput(f'row {i + 1} has invalid color {ch!r}')
            if ch == '0' and not board.is_interior(x, y):
                raise MalformedInput(f'border circle ({x},{y},{board.z_of(x, y)}) is uncolored')
            grid[x][y] = int(ch)

    board = replace(board, grid=tuple(tuple(r) for r in grid))
    return replace(board, last_move=_parse_last_move(tail, board))


def board_to_text(board: Board) -> str:
    """Encodes a board in the format read by :func:`parse_board`."""
    rows = []
    for x in range(board.size + 1, -1, -1):
        rows.append('[' + ''.join(str(board.color_at(x, y)) for y in board.row_cells(x)) + ']')
    last = 'null' if board.last_move is None else format_move(board.last_move)
    return ''.join(rows) + 'LastPlay:' + last
