"""
Conway's Game of Life as a lattice rule

Each cell is alive or dead and follows the birth/survival sets in
``LifeCell.rule_params``. The rule works with any neighborhood, but the
classic behavior (gliders, blinkers, blocks) needs MooreNhood. Neighbor
slots outside the grid count as dead: there is no wrap-around.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..core.cell import Cell, CoordLike
from ..core.grid import SquareGrid
from .conway_rules import ConwayRuleParams

logger = logging.getLogger(__name__)


class LifeCell(Cell):
    """Alive/dead lattice site.

    Attributes:
        alive: Current cell state
        rule_params: Class-level rule sets shared by every cell of the class;
            subclass to run a different life-like rule on the same grid type
    """

    rule_params = ConwayRuleParams.standard()

    def __init__(self, coord: CoordLike = (0, 0), alive: bool = False):
        super().__init__(coord)
        self.alive = bool(alive)

    def step(self, neighbors: Sequence[Optional['LifeCell']]) -> 'LifeCell':
        live_neighbors = sum(1 for n in neighbors if n is not None and n.alive)
        return type(self)(self.coord, self.rule_params.update_cell(self.alive, live_neighbors))

    def repr(self, state: Dict[str, Any]) -> None:
        state["alive"] = self.alive

    def from_repr(self, state: Mapping[str, Any]) -> None:
        self.alive = bool(state.get("alive", False))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LifeCell):
            return NotImplemented
        return self.coord == other.coord and self.alive == other.alive

    def __repr__(self) -> str:
        return f"LifeCell({self.coord}, alive={self.alive})"


def load_pattern(grid: SquareGrid, pattern: np.ndarray, x: int, y: int) -> int:
    """Switch on the live cells of a pattern with its top-left corner at (x, y).

    Parts of the pattern falling outside the grid are dropped.

    Args:
        grid: Grid of LifeCell
        pattern: 2D boolean array indexed as pattern[row, col]
        x: Top-left x-coordinate for placement
        y: Top-left y-coordinate for placement

    Returns:
        Number of cells switched on
    """
    pattern = np.asarray(pattern, dtype=bool)
    cells = []

    for py, px in zip(*np.nonzero(pattern)):
        gx, gy = x + int(px), y + int(py)
        if 0 <= gx < grid.cols and 0 <= gy < grid.rows:
            cells.append(grid.cell_type((gx, gy), alive=True))

    grid.set_cells(cells)

    dropped = int(pattern.sum()) - len(cells)
    if dropped:
        logger.debug(f"Pattern at ({x}, {y}) clipped: {dropped} cells outside {grid.rows}x{grid.cols} grid")

    return len(cells)


def randomize(grid: SquareGrid, density: float = 0.3, seed: Optional[int] = None) -> None:
    """Randomize grid with given live cell density.

    Args:
        grid: Grid of LifeCell
        density: Fraction of cells to make alive (0.0 to 1.0)
        seed: Optional seed for reproducible layouts
    """
    density = max(0.0, min(1.0, density))
    rng = np.random.default_rng(seed)
    alive = rng.random((grid.rows, grid.cols)) < density

    grid.set_cells(grid.cell_type((x, y), alive=bool(alive[y, x]))
                   for y in range(grid.rows) for x in range(grid.cols))


def live_count(grid: SquareGrid) -> int:
    """Get total number of live cells."""
    return int(np.sum(grid.to_array("alive", dtype=bool)))


def center_of_mass(grid: SquareGrid) -> Tuple[float, float]:
    """Calculate center of mass of live cells.

    Returns:
        (x, y) coordinates of live cell centroid
    """
    live_coords = np.where(grid.to_array("alive", dtype=bool))
    if len(live_coords[0]) == 0:
        return (0.0, 0.0)

    # live_coords[1] is x coordinates, live_coords[0] is y coordinates
    center_x = float(np.mean(live_coords[1]))
    center_y = float(np.mean(live_coords[0]))

    return (center_x, center_y)


def render(grid: SquareGrid) -> str:
    """String picture showing live cells as X."""
    alive = grid.to_array("alive", dtype=bool)
    return "\n".join("".join("X" if cell else "." for cell in row) for row in alive)


# Classic Conway test patterns
def create_glider_pattern() -> np.ndarray:
    """Create classic Conway glider heading south-east."""
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)


def create_blinker_pattern() -> np.ndarray:
    """Create horizontal blinker pattern (3 cells)."""
    return np.array([[True, True, True]], dtype=bool)


def create_block_pattern() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)
