"""Rectangular lattice of cells advanced in synchronous generations.

The grid owns every cell, precomputes which cells neighbor which once at
construction, and steps the whole lattice using two cell buffers so no cell
ever sees a neighbor that was already updated in the same generation. A
type-erased snapshot (:class:`GridRepr`) is kept in sync with the live
cells for consumers that should not depend on the concrete cell type.
"""

import logging
from typing import Iterable, List, Optional, Tuple, Type

import numpy as np

from .cell import Cell
from .coord import GridCoord
from .snapshot import CellRepr, GridRepr
from ..nhood.base import Nhood

logger = logging.getLogger(__name__)


class SquareGrid:
    """rows x cols lattice with a pluggable neighborhood.

    Attributes:
        rows: Grid height in cells
        cols: Grid width in cells
        nhood: Neighborhood topology shared by all cells
        generation: Number of completed steps
    """

    def __init__(self, rows: int, cols: int, nhood: Nhood, cell_type: Type[Cell]):
        """Allocate cells, the neighbor table and the snapshot.

        Args:
            rows: Grid height (cells)
            cols: Grid width (cells)
            nhood: Neighborhood topology
            cell_type: Cell subclass used to build default cells

        Raises:
            ValueError: If dimensions are not positive or the neighborhood
                returns a different number of slots than it declares
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self._rows = rows
        self._cols = cols
        self._nhood = nhood
        self._cell_type = cell_type
        self.generation = 0

        size = rows * cols
        self._cells: List[Cell] = [cell_type.with_coord(self._coord(offset)) for offset in range(size)]
        self._previous: List[Cell] = list(self._cells)

        self._neighbors = self._init_neighbors()
        self._repr = self._init_repr()

        logger.debug(f"Created {rows}x{cols} grid of {cell_type.__name__} with {nhood!r}")

    def _coord(self, offset: int) -> GridCoord:
        return GridCoord.from_offset(offset, self._rows, self._cols)

    def _init_neighbors(self) -> Tuple[Tuple[Optional[int], ...], ...]:
        """Resolve every neighbor slot of every cell to an offset or None."""
        expected = self._nhood.neighbors_count()
        table = []

        for offset in range(self._rows * self._cols):
            coord = self._coord(offset)
            candidates = self._nhood.neighbors(coord)

            if len(candidates) != expected:
                raise ValueError(
                    f"{self._nhood!r} returned {len(candidates)} neighbors for {coord} "
                    f"but declares neighbors_count() == {expected}")

            row = []
            for candidate in candidates:
                candidate = GridCoord.from_2d(*candidate)
                if candidate.in_bounds(self._rows, self._cols):
                    row.append(candidate.offset(self._cols))
                else:
                    row.append(None)

            table.append(tuple(row))

        return tuple(table)

    def _init_repr(self) -> GridRepr:
        grid_repr = GridRepr(self._rows, self._cols)
        for offset, cell in enumerate(self._cells):
            cell_repr = CellRepr(self._coord(offset))
            cell.repr(cell_repr.state)
            grid_repr.cells.append(cell_repr)
        return grid_repr

    def _refresh_repr(self, offset: int) -> None:
        state = self._repr.cells[offset].state
        state.clear()
        self._cells[offset].repr(state)

    def _offset_of(self, coord: GridCoord) -> int:
        if not coord.in_bounds(self._rows, self._cols):
            raise IndexError(f"Coordinates {coord} out of bounds for {self._rows}x{self._cols} grid")
        return coord.offset(self._cols)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def nhood(self) -> Nhood:
        return self._nhood

    @property
    def cell_type(self) -> Type[Cell]:
        return self._cell_type

    @property
    def neighbor_table(self) -> Tuple[Tuple[Optional[int], ...], ...]:
        """Per-cell neighbor offsets in slot order (None = off grid)."""
        return self._neighbors

    def step(self) -> None:
        """Advance the whole lattice by exactly one generation.

        The next generation is written into the back buffer and only swapped
        in once every cell has stepped. If a rule raises, the exception
        propagates and the grid, its snapshot and ``generation`` are left
        exactly as they were before the call.
        """
        current = self._cells
        back = self._previous

        for offset, neighbors in enumerate(self._neighbors):
            neighbor_cells = [current[n] if n is not None else None for n in neighbors]
            back[offset] = current[offset].step(neighbor_cells)

        self._previous, self._cells = current, back
        for offset in range(len(back)):
            self._refresh_repr(offset)

        self.generation += 1

    def repr(self) -> GridRepr:
        """Live snapshot of the current generation.

        The returned object is updated in place by the next ``step()``; use
        ``GridRepr.copy()`` to keep it.
        """
        return self._repr

    def from_repr(self, grid_repr: GridRepr) -> None:
        """Overwrite live cell state from a snapshot.

        Args:
            grid_repr: Snapshot with the same dimensions as this grid; it may
                cover all cells or only some of them

        Raises:
            ValueError: If the snapshot dimensions differ from the grid's
            IndexError: If a snapshot coordinate lies outside the grid
        """
        if (grid_repr.rows, grid_repr.cols) != (self._rows, self._cols):
            raise ValueError(
                f"Snapshot shape {grid_repr.rows}x{grid_repr.cols} doesn't match "
                f"grid size {self._rows}x{self._cols}")

        for cell_repr in grid_repr.cells:
            offset = self._offset_of(GridCoord.from_2d(*cell_repr.coord))
            self._cells[offset].from_repr(cell_repr.state)
            self._refresh_repr(offset)

        logger.debug(f"Imported {len(grid_repr.cells)} cell snapshots into {self._rows}x{self._cols} grid")

    def cells(self) -> List[Cell]:
        """Current generation in row-major order (a copy of the buffer)."""
        return list(self._cells)

    def cell_at(self, x: int, y: int) -> Cell:
        """Get the cell at (x, y).

        Raises:
            IndexError: If coordinates are out of bounds
        """
        return self._cells[self._offset_of(GridCoord.from_2d(x, y))]

    def set_cells(self, cells: Iterable[Cell]) -> None:
        """Place caller-built cells at their own coordinates.

        Cells not mentioned keep their current value.

        Raises:
            TypeError: If a cell is not an instance of the grid's cell type
            IndexError: If a cell's coordinate lies outside the grid
        """
        for cell in cells:
            if not isinstance(cell, self._cell_type):
                raise TypeError(f"Expected {self._cell_type.__name__}, got {type(cell).__name__}")
            offset = self._offset_of(cell.coord)
            self._cells[offset] = cell
            self._refresh_repr(offset)

    def to_array(self, key: str, dtype=None) -> np.ndarray:
        """Array view of one state field, indexed as ``array[y, x]``."""
        return self._repr.to_array(key, dtype=dtype)

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, key: Tuple[int, int]) -> Cell:
        """Access a cell using grid[x, y] syntax."""
        x, y = key
        return self.cell_at(x, y)

    def __repr__(self) -> str:
        return (f"SquareGrid({self._rows}x{self._cols}, cell={self._cell_type.__name__}, "
                f"nhood={self._nhood!r}, generation={self.generation})")
