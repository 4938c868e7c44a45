"""Lattice core: coordinates, cells, snapshots and the stepping grid."""

from .coord import GridCoord
from .cell import Cell
from .snapshot import CellRepr, GridRepr
from .grid import SquareGrid

__all__ = [
    'GridCoord',
    'Cell',
    'CellRepr',
    'GridRepr',
    'SquareGrid',
]
