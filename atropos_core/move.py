from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

Coord = Tuple[int, int, int]  # (x, y, z) with x + y + z == size + 2


@dataclass(frozen=True)
class Move:
    """
    A placement of one color on one circle, doubling as a search node.

    ``score`` is signed from the maximizer's point of view: positive favors
    the maximizer, negative the minimizer, 0 means nothing was learned.
    A move built with :meth:`dummy` only carries a score and has no cell.
    """
    color: int
    x: int
    y: int
    z: int
    score: int = 0

    @classmethod
    def dummy(cls, score: int) -> 'Move':
        return cls(0, 0, 0, 0, score)

    @property
    def is_dummy(self) -> bool:
        return self.color == 0

    @property
    def coord(self) -> Coord:
        return (self.x, self.y, self.z)

    def with_score(self, score: int) -> 'Move':
        return replace(self, score=score)

    def __str__(self) -> str:
        return f"({self.color},{self.x},{self.y},{self.z})"
