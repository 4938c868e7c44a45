"""
latticeca: generic cellular-automaton engine

Square lattices with pluggable neighborhoods, stepped in synchronous
generations, with a type-erased snapshot layer for consumers.
"""

from .core import Cell, CellRepr, GridCoord, GridRepr, SquareGrid
from .nhood import HexagonalNhood, MooreNhood, Nhood, VonNeumannNhood, create_nhood
from .engine import Consumer, Engine, LoggingConsumer, ReprRecorder, Sequential

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'CellRepr',
    'GridCoord',
    'GridRepr',
    'SquareGrid',
    'Nhood',
    'VonNeumannNhood',
    'MooreNhood',
    'HexagonalNhood',
    'create_nhood',
    'Consumer',
    'Engine',
    'Sequential',
    'ReprRecorder',
    'LoggingConsumer',
]
