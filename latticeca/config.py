"""Simulation configuration.

Bundles everything needed to build and run a grid from plain data, so runs
can be described in a JSON file or on the command line.
"""

import json
import logging
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .core.grid import SquareGrid
from .nhood import NHOODS, create_nhood
from .rules import RULES

logger = logging.getLogger(__name__)

# Natural neighborhood for each rule when none is given
DEFAULT_NHOODS = {
    "life": "moore",
    "fhp": "hexagonal",
}


@dataclass
class SimulationConfig:
    """Parameters of one simulation run.

    Attributes:
        rule: Rule name ("life" or "fhp")
        rows: Grid height in cells
        cols: Grid width in cells
        nhood: Neighborhood name; defaults to the rule's natural topology
        steps: Number of generations to run
        density: Initial random fill probability (0.0-1.0)
        seed: Optional random seed for the initial state
    """

    rule: str = "life"
    rows: int = 32
    cols: int = 32
    nhood: Optional[str] = None
    steps: int = 100
    density: float = 0.3
    seed: Optional[int] = None
    nhood_options: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Fill in defaults and validate."""
        if self.nhood is None and isinstance(self.rule, str):
            self.nhood = DEFAULT_NHOODS.get(self.rule)
        self._validate()

    def _validate(self):
        if not isinstance(self.rule, str) or self.rule not in RULES:
            raise ValueError(f"Unknown rule {self.rule!r}; expected one of {sorted(RULES)}")

        if not isinstance(self.nhood, str) or self.nhood not in NHOODS:
            raise ValueError(f"Unknown neighborhood {self.nhood!r}; expected one of {sorted(NHOODS)}")

        if self.rule == "fhp" and self.nhood != "hexagonal":
            raise ValueError("FHP rule requires the hexagonal neighborhood")

        # Values loaded from JSON arrive unchecked
        for name in ("rows", "cols", "steps"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")

        if isinstance(self.density, bool) or not isinstance(self.density, (int, float)):
            raise ValueError(f"density must be a number, got {self.density!r}")

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an integer or null, got {self.seed!r}")

        if not isinstance(self.nhood_options, dict):
            raise ValueError(f"nhood_options must be a mapping, got {self.nhood_options!r}")

        if self.rows < 1 or self.cols < 1:
            raise ValueError("Grid dimensions must be positive")

        if self.steps < 0:
            raise ValueError("steps must be non-negative")

        if not (0.0 <= self.density <= 1.0):
            raise ValueError("density must be between 0.0 and 1.0")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationConfig':
        """Build a config from a mapping, ignoring unknown keys.

        Raises:
            ValueError: If a value is invalid
        """
        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> 'SimulationConfig':
        """Load a config from a JSON file."""
        with open(path, 'r') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        logger.debug(f"Loaded simulation config from {path}")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def copy(self, **changes) -> 'SimulationConfig':
        """Copy with some fields replaced (validated again)."""
        return replace(self, **changes)

    def build_grid(self) -> SquareGrid:
        """Create an empty grid for this configuration."""
        nhood = create_nhood(self.nhood, **self.nhood_options)
        return SquareGrid(self.rows, self.cols, nhood, RULES[self.rule])
