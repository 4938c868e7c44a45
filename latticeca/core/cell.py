"""Cell contract for lattice rules.

A concrete rule subclasses :class:`Cell` and supplies a pure transition
function plus a pair of representation hooks. The grid owns every cell;
rules never hold references to other cells across generations.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from .coord import GridCoord

CoordLike = Union[GridCoord, Tuple[int, int]]


class Cell(ABC):
    """Base class for one lattice site.

    Subclasses must keep ``step`` free of side effects: it receives the
    previous generation and returns a brand-new cell. In-place changes are
    only allowed through ``from_repr`` and ``set_coord``, which the grid
    calls between generations.
    """

    def __init__(self, coord: CoordLike = (0, 0)):
        self._coord = GridCoord.from_2d(*coord)

    @classmethod
    def with_coord(cls, coord: CoordLike) -> 'Cell':
        """Create a cell with default state at the given coordinate."""
        return cls(coord=coord)

    @property
    def coord(self) -> GridCoord:
        """Location of this cell inside its grid."""
        return self._coord

    def set_coord(self, coord: CoordLike) -> None:
        self._coord = GridCoord.from_2d(*coord)

    @abstractmethod
    def step(self, neighbors: Sequence[Optional['Cell']]) -> 'Cell':
        """Compute the next-generation cell.

        Args:
            neighbors: One entry per neighborhood slot, in the order the
                grid's neighborhood defines. ``None`` marks a slot that
                falls outside the grid; how to treat it is up to the rule.

        Returns:
            New cell for the next generation (``self`` is left untouched)
        """

    @abstractmethod
    def repr(self, state: Dict[str, Any]) -> None:
        """Write this cell's state into a snapshot mapping."""

    @abstractmethod
    def from_repr(self, state: Mapping[str, Any]) -> None:
        """Overwrite this cell's state from a snapshot mapping."""
