"""Single-threaded engine and stock consumers."""

import logging
from typing import Callable, List, Optional

from ..core.grid import SquareGrid
from ..core.snapshot import GridRepr
from .base import Consumer, Engine

logger = logging.getLogger(__name__)


class Sequential(Engine):
    """Steps a grid generation by generation and notifies a consumer.

    A generation always completes before the consumer sees the grid, so
    ``run_times`` can only be interrupted between generations.
    """

    def __init__(self, grid: SquareGrid, consumer: Consumer):
        self.grid = grid
        self.consumer = consumer

    def run_times(self, times: int) -> None:
        """Run ``times`` generations, calling the consumer after each.

        Raises:
            ValueError: If times is negative
        """
        if times < 0:
            raise ValueError(f"Number of generations must be non-negative, got {times}")

        logger.debug(f"Running {times} generations from generation {self.grid.generation}")

        for _ in range(times):
            self.grid.step()
            self.consumer.consume(self.grid)


class ReprRecorder(Consumer):
    """Keeps a detached snapshot of every generation it sees.

    Args:
        limit: Keep at most this many most recent snapshots (None = all)
    """

    def __init__(self, limit: Optional[int] = None):
        if limit is not None and limit < 1:
            raise ValueError("limit must be a positive integer")
        self.limit = limit
        self.history: List[GridRepr] = []
        self.generations: List[int] = []

    def consume(self, grid: SquareGrid) -> None:
        self.history.append(grid.repr().copy())
        self.generations.append(grid.generation)

        if self.limit is not None and len(self.history) > self.limit:
            del self.history[0]
            del self.generations[0]

    @property
    def latest(self) -> Optional[GridRepr]:
        return self.history[-1] if self.history else None

    def clear(self) -> None:
        self.history.clear()
        self.generations.clear()


class LoggingConsumer(Consumer):
    """Logs one line per generation, optionally with a summary value.

    Args:
        summary: Optional function computing a value to log from the grid
        interval: Only log every ``interval`` generations
        level: Logging level used for the messages
    """

    def __init__(self, summary: Optional[Callable[[SquareGrid], object]] = None,
                 interval: int = 1, level: int = logging.INFO):
        if interval < 1:
            raise ValueError("interval must be a positive integer")
        self.summary = summary
        self.interval = interval
        self.level = level

    def consume(self, grid: SquareGrid) -> None:
        if grid.generation % self.interval != 0:
            return

        if self.summary is None:
            logger.log(self.level, f"Generation {grid.generation}")
        else:
            logger.log(self.level, f"Generation {grid.generation}: {self.summary(grid)}")
