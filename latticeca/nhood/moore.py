"""Eight-neighbor topology (orthogonal plus diagonal)."""

from typing import List

from ..core.coord import GridCoord
from .base import Nhood

# (dx, dy) in reading order, center skipped
_OFFSETS = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if not (dx == 0 and dy == 0)]


class MooreNhood(Nhood):
    """All eight surrounding cells in reading order.

    Slots::

        0 1 2
        3   4
        5 6 7

    i.e. NW, N, NE, W, E, SW, S, SE.
    """

    name = "moore"

    def neighbors(self, coord: GridCoord) -> List[GridCoord]:
        x, y = coord
        return [GridCoord(x + dx, y + dy) for dx, dy in _OFFSETS]

    def neighbors_count(self) -> int:
        return 8
