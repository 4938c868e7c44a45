"""
FHP lattice gas

Implementation of the FHP-I model (https://en.wikipedia.org/wiki/FHP_model)
on a HexagonalNhood. Every site holds up to six particles, one per lattice
direction. A physical time step is two grid generations: a local collision
stage followed by a transport stage that moves every particle one site
along its direction. Walls (neighbor slots outside the grid) bounce
particles straight back, so the particle count never changes.
"""

import logging
import math
from enum import Enum, IntEnum
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..core.cell import Cell, CoordLike
from ..core.grid import SquareGrid

logger = logging.getLogger(__name__)


class Stage(Enum):
    """Which half of the time step a cell performs next."""
    COLLISION = "collision"
    TRANSPORT = "transport"


#      N
#   NW   NE
# W         E
#   SW   SE
#      S

class Direction(IntEnum):
    """Particle directions; values match HexagonalNhood slot order."""
    NW = 0
    NE = 1
    W = 2
    E = 3
    SW = 4
    SE = 5

    def opposite(self) -> 'Direction':
        return _RING[(_RING.index(self) + 3) % 6]

    def rotate(self, steps: int) -> 'Direction':
        """Turn by 60 degree steps, clockwise for positive steps."""
        return _RING[(_RING.index(self) + steps) % 6]

    @property
    def velocity(self) -> Tuple[float, float]:
        """Unit velocity (x right, y down)."""
        return _VELOCITIES[self]


# Clockwise order around the hexagon, screen coordinates (y grows downwards)
_RING = (Direction.NE, Direction.E, Direction.SE, Direction.SW, Direction.W, Direction.NW)

_H = math.sqrt(3) / 2
_VELOCITIES = {
    Direction.NW: (-0.5, -_H),
    Direction.NE: (0.5, -_H),
    Direction.W: (-1.0, 0.0),
    Direction.E: (1.0, 0.0),
    Direction.SW: (-0.5, _H),
    Direction.SE: (0.5, _H),
}

NO_PARTICLES: Tuple[bool, ...] = (False,) * 6

# Ring positions of the two symmetric three-particle configurations
_TRIPLES = (frozenset({0, 2, 4}), frozenset({1, 3, 5}))


class FHPCell(Cell):
    """One hexagonal site of the lattice gas.

    Attributes:
        particles: Six flags indexed by Direction
        stage: Stage the cell performs on its next step
    """

    def __init__(self, coord: CoordLike = (0, 0),
                 particles: Iterable[bool] = NO_PARTICLES,
                 stage: Stage = Stage.COLLISION):
        super().__init__(coord)
        self.particles: Tuple[bool, ...] = tuple(bool(p) for p in particles)
        if len(self.particles) != 6:
            raise ValueError(f"FHP cell needs 6 particle flags, got {len(self.particles)}")
        self.stage = Stage(stage)

    @classmethod
    def with_particles(cls, coord: CoordLike, directions: Iterable[Direction],
                       stage: Stage = Stage.COLLISION) -> 'FHPCell':
        """Build a cell holding particles moving in the given directions."""
        directions = set(directions)
        return cls(coord, [d in directions for d in Direction], stage)

    def particle(self, direction: Direction) -> bool:
        return self.particles[direction]

    def directions(self) -> Tuple[Direction, ...]:
        """Directions of the particles present in this cell."""
        return tuple(d for d in Direction if self.particles[d])

    def step(self, neighbors: Sequence[Optional['FHPCell']]) -> 'FHPCell':
        if self.stage is Stage.COLLISION:
            return self.collision()
        return self.transport(neighbors)

    def collision(self) -> 'FHPCell':
        """Resolve head-on pairs and symmetric triples inside the site."""
        present = self.directions()
        outgoing = present

        if len(present) == 2 and present[0].opposite() == present[1]:
            # Alternate the turning sense across the lattice to avoid a chiral bias
            turn = 1 if (self.coord.x + self.coord.y) % 2 == 0 else -1
            outgoing = tuple(d.rotate(turn) for d in present)

        elif len(present) == 3:
            positions = frozenset(_RING.index(d) for d in present)
            if positions in _TRIPLES:
                outgoing = tuple(d.rotate(1) for d in present)

        return type(self).with_particles(self.coord, outgoing, Stage.TRANSPORT)

    def transport(self, neighbors: Sequence[Optional['FHPCell']]) -> 'FHPCell':
        """Pull in the particles heading towards this site."""
        particles = []

        for direction in Direction:
            # A particle moving in `direction` arrives from the opposite side
            source = neighbors[direction.opposite()]
            if source is not None:
                particles.append(source.particles[direction])
            else:
                # Rebound off the wall
                particles.append(self.particles[direction.opposite()])

        return type(self)(self.coord, particles, Stage.COLLISION)

    def repr(self, state: Dict[str, Any]) -> None:
        state["particles"] = list(self.particles)
        state["stage"] = self.stage.value

    def from_repr(self, state: Mapping[str, Any]) -> None:
        particles = tuple(bool(p) for p in state.get("particles", NO_PARTICLES))
        if len(particles) != 6:
            raise ValueError(f"FHP snapshot needs 6 particle flags, got {len(particles)}")
        self.particles = particles
        self.stage = Stage(state.get("stage", Stage.COLLISION.value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FHPCell):
            return NotImplemented
        return (self.coord == other.coord and self.particles == other.particles
                and self.stage is other.stage)

    def __repr__(self) -> str:
        names = ",".join(d.name for d in self.directions())
        return f"FHPCell({self.coord}, particles=[{names}], stage={self.stage.value})"


def particle_count(grid: SquareGrid) -> int:
    """Total number of particles on the lattice."""
    return sum(sum(c.state.get("particles", ())) for c in grid.repr().cells)


def momentum(grid: SquareGrid) -> Tuple[float, float]:
    """Total momentum (x, y) of all particles, unit mass per particle."""
    px = py = 0.0
    for cell_repr in grid.repr().cells:
        for direction, present in zip(Direction, cell_repr.state.get("particles", ())):
            if present:
                vx, vy = direction.velocity
                px += vx
                py += vy
    return (px, py)


def randomize(grid: SquareGrid, density: float = 0.2, seed: Optional[int] = None) -> None:
    """Fill each particle slot with probability ``density``.

    Args:
        grid: Grid of FHPCell
        density: Occupation probability per slot (0.0 to 1.0)
        seed: Optional seed for reproducible layouts
    """
    density = max(0.0, min(1.0, density))
    rng = np.random.default_rng(seed)
    occupied = rng.random((grid.rows, grid.cols, 6)) < density

    grid.set_cells(grid.cell_type((x, y), occupied[y, x].tolist())
                   for y in range(grid.rows) for x in range(grid.cols))
    logger.debug(f"Randomized FHP grid {grid.rows}x{grid.cols}: {int(occupied.sum())} particles")
