"""Driver and observer contracts around a grid."""

from abc import ABC, abstractmethod

from ..core.grid import SquareGrid


class Consumer(ABC):
    """Observer called once after every completed generation."""

    @abstractmethod
    def consume(self, grid: SquareGrid) -> None:
        """Inspect (or mutate) the grid after a generation.

        Consumers may read ``grid.repr()`` or ``grid.cells()`` but must not
        rely on the layout of the neighbor table.
        """


class Engine(ABC):
    """Drives repeated grid steps."""

    @abstractmethod
    def run_times(self, times: int) -> None:
        """Run exactly ``times`` generations."""
