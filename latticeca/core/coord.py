"""Integer lattice coordinates.

A coordinate is a plain (x, y) value. Conversion to and from the linear
offset used for cell storage assumes row-major layout inside a fixed
rows x cols rectangle. No bounds checking happens here; coordinates outside
the rectangle are legal values and are how off-grid neighbors are detected.
"""

from typing import NamedTuple


class GridCoord(NamedTuple):
    """2D integer coordinate (x = column, y = row).

    Being a NamedTuple, a GridCoord compares equal to the plain tuple
    ``(x, y)`` and can be used as a dict key.
    """

    x: int
    y: int

    @classmethod
    def from_2d(cls, x: int, y: int) -> 'GridCoord':
        """Build a coordinate from column and row."""
        return cls(int(x), int(y))

    @classmethod
    def from_offset(cls, offset: int, rows: int, cols: int) -> 'GridCoord':
        """Inverse of :meth:`offset` for a rows x cols lattice.

        Args:
            offset: Linear row-major offset
            rows: Lattice height (kept for symmetry with the grid signature)
            cols: Lattice width

        Returns:
            Coordinate whose offset is ``offset``
        """
        y, x = divmod(offset, cols)
        return cls(x, y)

    def offset(self, cols: int) -> int:
        """Linear row-major offset: ``y * cols + x``."""
        return self.y * cols + self.x

    def in_bounds(self, rows: int, cols: int) -> bool:
        """Check whether the coordinate lies inside a rows x cols lattice."""
        return 0 <= self.x < cols and 0 <= self.y < rows

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
