"""Neighborhood topology contract."""

from abc import ABC, abstractmethod
from typing import List

from ..core.coord import GridCoord


class Nhood(ABC):
    """Maps a coordinate to its ordered list of candidate neighbors.

    The order of the returned list is the slot order a rule sees in
    ``Cell.step``. Returned coordinates may lie outside any grid; the grid
    decides which ones are real cells.
    """

    name: str = "nhood"

    @abstractmethod
    def neighbors(self, coord: GridCoord) -> List[GridCoord]:
        """Candidate neighbor coordinates of ``coord`` in slot order."""

    @abstractmethod
    def neighbors_count(self) -> int:
        """Number of slots returned by :meth:`neighbors`."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
