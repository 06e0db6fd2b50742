from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, List, Optional, Tuple

from .move import Coord, Move

UNCOLORED = 0
RED = 1
BLUE = 2
GREEN = 3
COLORS = (RED, BLUE, GREEN)

# Neighbor offsets as (dx, dy, dz), starting upper right and turning clockwise.
# Consecutive entries (and the last with the first) are adjacent to each other.
NEIGHBOR_DELTAS: Tuple[Coord, ...] = (
    (1, 0, -1),
    (0, 1, -1),
    (-1, 1, 0),
    (-1, 0, 1),
    (0, -1, 1),
    (1, -1, 0),
)

Grid = Tuple[Tuple[int, ...], ...]


def third_color(c1: int, c2: int) -> int:
    """The color completing a three-color triangle with two distinct colors."""
    return 6 - c1 - c2


@dataclass(frozen=True)
class Board:
    """
    A triangular Atropos board of a given playable size.

    ``grid[x][y]`` holds the color of circle (x, y, size + 2 - x - y). Index 0
    and the cells with z == 0 form the pre-colored border. ``last_move`` is the
    opponent's latest placement, or None before the first move of the game.
    """
    size: int
    grid: Grid
    last_move: Optional[Move] = None

    @classmethod
    def blank(cls, size: int) -> 'Board':
        n = size + 2
        return cls(size=size, grid=tuple(tuple(0 for _ in range(n)) for _ in range(n)))

    def z_of(self, x: int, y: int) -> int:
        return self.size + 2 - x - y

    def color_at(self, x: int, y: int) -> int:
        return self.grid[x][y]

    def is_interior(self, x: int, y: int) -> bool:
        return x >= 1 and y >= 1 and self.z_of(x, y) >= 1

    def neighbors(self, x: int, y: int) -> List[Coord]:
        """The six circles around (x, y) in rotational order."""
        z = self.z_of(x, y)
        return [(x + dx, y + dy, z + dz) for dx, dy, dz in NEIGHBOR_DELTAS]

    def neighbor_colors(self, x: int, y: int) -> List[int]:
        return [self.grid[nx][ny] for nx, ny, _ in self.neighbors(x, y)]

    def interior_coords(self) -> Iterator[Coord]:
        """Playable circles, top row first, each row left to right."""
        for x in range(self.size, 0, -1):
            for y in range(1, self.size - x + 2):
                yield (x, y, self.z_of(x, y))

    def count_free_cells(self) -> int:
        return sum(1 for x, y, _ in self.interior_coords() if self.grid[x][y] == UNCOLORED)

    def row_cells(self, x: int) -> range:
        """The y values present in row x of the textual layout, border included."""
        if x == 0:
            return range(1, self.size + 2)
        return range(0, self.size + 3 - x)

    def with_color(self, x: int, y: int, color: int) -> 'Board':
        """A copy of this board with one circle recolored; last_move is kept."""
        row = list(self.grid[x])
        row[y] = color
        grid = self.grid[:x] + (tuple(row),) + self.grid[x + 1:]
        return replace(self, grid=grid)

    def pretty(self) -> str:
        """Generates a human-readable triangle, top row first."""
        lines: List[str] = []
        for x in range(self.size + 1, -1, -1):
            # Circle (x, y) sits at column x + 2y so both upper neighbors straddle it.
            line = [" "] * (x + 2 * (self.size + 2))
            for y in self.row_cells(x):
                c = self.grid[x][y]
                line[x + 2 * y] = str(c) if c else "."
            lines.append("".join(line).rstrip())
        if self.last_move is not None:
            lines.append(f"last: {self.last_move}")
        return "\n".join(lines)
