"""Four-neighbor orthogonal topology."""

from typing import List

from ..core.coord import GridCoord
from .base import Nhood


class VonNeumannNhood(Nhood):
    """Orthogonal neighbors in reading order.

    Slots::

          0
        1   2
          3

    i.e. N, W, E, S.
    """

    name = "von_neumann"

    def neighbors(self, coord: GridCoord) -> List[GridCoord]:
        x, y = coord
        return [
            GridCoord(x, y - 1),
            GridCoord(x - 1, y),
            GridCoord(x + 1, y),
            GridCoord(x, y + 1),
        ]

    def neighbors_count(self) -> int:
        return 4
