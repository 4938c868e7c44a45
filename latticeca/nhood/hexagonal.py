"""Six-neighbor hexagonal topology on an offset-row lattice.

Hexagons are stored in an ordinary rows x cols array; every other row is
drawn shifted half a cell to the right. With ``offset_rows="even"`` the
even rows are the shifted ones::

    row 0:   . . . .
    row 1:  . . . .
    row 2:   . . . .

so a cell on an odd row reaches up-left to ``(x-1, y-1)`` while a cell on
an even row reaches up-left to ``(x, y-1)``. This keeps the relation
symmetric: B is A's neighbor in direction d exactly when A is B's
neighbor in the opposite direction.
"""

from typing import List

from ..core.coord import GridCoord
from .base import Nhood

OFFSET_ROWS = ("even", "odd")


class HexagonalNhood(Nhood):
    """Hexagonal neighbors in slot order NW, NE, W, E, SW, SE.

    Slots::

         0 1
        2   3
         4 5

    Only the unshifted rows use the fixed ``(x-1, y-1), (x, y-1), (x-1, y),
    (x+1, y), (x-1, y+1), (x, y+1)`` offsets; on shifted rows the diagonal
    slots move one column right, so code expecting one offset list for
    every row gets different neighbors there.

    Args:
        offset_rows: Which row parity is drawn shifted right, "even" or "odd"

    Raises:
        ValueError: If offset_rows is not a known parity
    """

    name = "hexagonal"

    def __init__(self, offset_rows: str = "even"):
        if offset_rows not in OFFSET_ROWS:
            raise ValueError(f"offset_rows must be one of {OFFSET_ROWS}, got {offset_rows!r}")
        self.offset_rows = offset_rows
        self._shifted_parity = 0 if offset_rows == "even" else 1

    def neighbors(self, coord: GridCoord) -> List[GridCoord]:
        x, y = coord
        # Shifted rows reach one column further right on the diagonals
        left = x if y % 2 == self._shifted_parity else x - 1

        return [
            GridCoord(left, y - 1),
            GridCoord(left + 1, y - 1),

            GridCoord(x - 1, y),
            GridCoord(x + 1, y),

            GridCoord(left, y + 1),
            GridCoord(left + 1, y + 1),
        ]

    def neighbors_count(self) -> int:
        return 6

    def __repr__(self) -> str:
        return f"HexagonalNhood(offset_rows={self.offset_rows!r})"
