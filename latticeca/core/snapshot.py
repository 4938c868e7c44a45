"""Type-erased snapshots of grid state.

Consumers such as visualizers and test harnesses read grid state through
these types instead of the concrete cell classes. Each cell contributes a
schema-less ``state`` dict through its repr hook, so different rules can
populate different fields.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

from .coord import GridCoord


@dataclass
class CellRepr:
    """Snapshot of one cell: its coordinate and opaque state fields."""

    coord: GridCoord
    state: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"coord": [self.coord.x, self.coord.y], "state": copy.deepcopy(self.state)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CellRepr':
        x, y = data["coord"]
        return cls(GridCoord.from_2d(x, y), copy.deepcopy(dict(data.get("state", {}))))


@dataclass
class GridRepr:
    """Snapshot of a whole rows x cols grid.

    Attributes:
        rows: Grid height in cells
        cols: Grid width in cells
        cells: Cell snapshots; a grid keeps them in row-major offset order,
            external snapshots may list any subset in any order
    """

    rows: int
    cols: int
    cells: List[CellRepr] = field(default_factory=list)

    @classmethod
    def empty(cls, rows: int, cols: int) -> 'GridRepr':
        """Create a snapshot with one empty-state entry per coordinate."""
        cells = [CellRepr(GridCoord.from_offset(offset, rows, cols))
                 for offset in range(rows * cols)]
        return cls(rows, cols, cells)

    def copy(self) -> 'GridRepr':
        """Deep copy detached from the grid that produced it."""
        return GridRepr(self.rows, self.cols,
                        [CellRepr(c.coord, copy.deepcopy(c.state)) for c in self.cells])

    def cell(self, x: int, y: int) -> CellRepr:
        """Find the snapshot of the cell at (x, y).

        Raises:
            KeyError: If the snapshot holds no entry for that coordinate
        """
        coord = GridCoord.from_2d(x, y)
        if coord.in_bounds(self.rows, self.cols):
            offset = coord.offset(self.cols)
            if offset < len(self.cells) and self.cells[offset].coord == coord:
                return self.cells[offset]

        for cell_repr in self.cells:
            if cell_repr.coord == coord:
                return cell_repr

        raise KeyError(f"No cell snapshot at {coord}")

    def to_array(self, key: str, dtype: Optional[Any] = None, fill: Any = 0) -> np.ndarray:
        """Collect one state field into a (rows, cols) array.

        Args:
            key: State field to extract
            dtype: Optional numpy dtype of the result
            fill: Value used for cells missing the field

        Returns:
            Array indexed as ``array[y, x]``
        """
        values = [[fill] * self.cols for _ in range(self.rows)]
        for cell_repr in self.cells:
            if cell_repr.coord.in_bounds(self.rows, self.cols):
                values[cell_repr.coord.y][cell_repr.coord.x] = cell_repr.state.get(key, fill)

        return np.array(values, dtype=dtype)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view built from lists, dicts and scalars."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "cells": [c.to_dict() for c in self.cells],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GridRepr':
        return cls(int(data["rows"]), int(data["cols"]),
                   [CellRepr.from_dict(c) for c in data.get("cells", [])])

    def __len__(self) -> int:
        return len(self.cells)
