"""Shared grid fixtures."""

import pytest

from latticeca.core.grid import SquareGrid
from latticeca.nhood import HexagonalNhood, MooreNhood
from latticeca.rules import fhp, life
from latticeca.rules.fhp import FHPCell
from latticeca.rules.life import LifeCell


@pytest.fixture
def life_grid():
    """6x7 Moore grid of randomly seeded LifeCells."""
    grid = SquareGrid(6, 7, MooreNhood(), LifeCell)
    life.randomize(grid, density=0.4, seed=7)
    return grid


@pytest.fixture
def fhp_grid():
    """5x6 hexagonal grid of randomly filled FHPCells."""
    grid = SquareGrid(5, 6, HexagonalNhood(), FHPCell)
    fhp.randomize(grid, density=0.3, seed=11)
    return grid


@pytest.fixture
def blinker_grid():
    """5x5 Moore grid with a horizontal blinker at (1, 2)."""
    grid = SquareGrid(5, 5, MooreNhood(), LifeCell)
    life.load_pattern(grid, life.create_blinker_pattern(), 1, 2)
    return grid
