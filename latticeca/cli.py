#!/usr/bin/env python3
"""
Command-line simulation runner

Builds a grid from a SimulationConfig, seeds it randomly, runs it with the
sequential engine and prints a JSON summary of the run.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import SimulationConfig
from .core.grid import SquareGrid
from .engine import Consumer, LoggingConsumer, Sequential
from .rules import fhp, life

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _population(grid: SquareGrid) -> int:
    if issubclass(grid.cell_type, fhp.FHPCell):
        return fhp.particle_count(grid)
    return life.live_count(grid)


class PopulationTracker(Consumer):
    """Records the population (live cells or particles) after each generation."""

    def __init__(self, log_interval: int = 10):
        self.history: List[int] = []
        self._logger = LoggingConsumer(summary=_population, interval=log_interval)

    def consume(self, grid: SquareGrid) -> None:
        self.history.append(_population(grid))
        self._logger.consume(grid)


def run_simulation(config: SimulationConfig, log_interval: int = 10) -> Dict[str, Any]:
    """Run a simulation and return summary metrics."""
    logger.info(f"=== {config.rule.upper()} SIMULATION ===")
    logger.info(f"Grid size: {config.rows}x{config.cols}, neighborhood: {config.nhood}")
    logger.info(f"Evolution steps: {config.steps}")

    grid = config.build_grid()
    if config.rule == "fhp":
        fhp.randomize(grid, config.density, config.seed)
    else:
        life.randomize(grid, config.density, config.seed)

    initial_population = _population(grid)
    logger.info(f"Initial population: {initial_population}")

    tracker = PopulationTracker(log_interval)
    Sequential(grid, tracker).run_times(config.steps)

    results = {
        "config": config.to_dict(),
        "generation": grid.generation,
        "initial_population": initial_population,
        "final_population": tracker.history[-1] if tracker.history else initial_population,
        "population_history": tracker.history,
    }

    logger.info(f"Final population: {results['final_population']} after {grid.generation} generations")
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a cellular automaton simulation")
    parser.add_argument("--config", help="JSON file with simulation settings")
    parser.add_argument("--rule", choices=["life", "fhp"], help="Cell rule")
    parser.add_argument("--rows", type=int, help="Grid height")
    parser.add_argument("--cols", type=int, help="Grid width")
    parser.add_argument("--nhood", help="Neighborhood (von_neumann, moore, hexagonal)")
    parser.add_argument("--steps", type=int, help="Evolution steps")
    parser.add_argument("--density", type=float, help="Initial fill density")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--log-interval", type=int, default=10, help="Log every N generations")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING",
                        help="Logging level")
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Merge a config file (if any) with command-line overrides."""
    data: Dict[str, Any] = {}
    if args.config:
        data = SimulationConfig.from_json_file(args.config).to_dict()
        if args.rule and args.nhood is None and args.rule != data.get("rule"):
            data["nhood"] = None

    for key in ("rule", "rows", "cols", "nhood", "steps", "density", "seed"):
        value = getattr(args, key)
        if value is not None:
            data[key] = value

    return SimulationConfig.from_dict(data)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = config_from_args(args)
        results = run_simulation(config, log_interval=args.log_interval)
    except (ValueError, OSError) as e:
        logger.error(f"Simulation failed: {e}")
        return 1

    print(json.dumps(results, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
