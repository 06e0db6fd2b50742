from __future__ import annotations

from .board import BLUE, GREEN, RED, Board


def initial_board(size: int) -> Board:
    """
    Creates an empty board of the given size with the standard border.

    Reading from the top corner, the left edge alternates red and green, the
    right edge alternates green and blue, and the bottom edge alternates red
    and blue from left to right.
    """
    if size < 1:
        raise ValueError(f'board size must be at least 1, got {size}')
    board = Board.blank(size)
    for x in range(1, size + 2):
        steps_from_top = size + 1 - x
        board = board.with_color(x, 0, RED if steps_from_top % 2 == 0 else GREEN)
        board = board.with_color(x, size + 2 - x, GREEN if steps_from_top % 2 == 0 else BLUE)
    for y in range(1, size + 2):
        board = board.with_color(0, y, RED if y % 2 == 1 else BLUE)
    return board
