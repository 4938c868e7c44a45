"""
Conway's Game of Life rule parameters

Birth/survival rule sets in the usual B/S notation. Standard Conway rules
are B3/S23; other life-like rules are expressed by changing the sets.
"""

from typing import Iterable, Optional, Set


# Standard Conway rules - unmodified
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


class ConwayRuleParams:
    """Birth and survival sets for a life-like rule.

    Defaults to standard Conway rules.
    """

    def __init__(self,
                 survival_set: Optional[Iterable[int]] = None,
                 birth_set: Optional[Iterable[int]] = None):
        """Initialize rule parameters.

        Args:
            survival_set: Neighbor counts for live cell survival (default {2,3})
            birth_set: Neighbor counts for dead cell birth (default {3})

        Raises:
            ValueError: If a neighbor count is negative
        """
        self.survival_set: Set[int] = set(survival_set) if survival_set is not None else SURVIVAL_SET.copy()
        self.birth_set: Set[int] = set(birth_set) if birth_set is not None else BIRTH_SET.copy()

        if any(n < 0 for n in self.survival_set | self.birth_set):
            raise ValueError("Neighbor counts must be non-negative")

    @classmethod
    def standard(cls) -> 'ConwayRuleParams':
        """Create standard Conway rules."""
        return cls(SURVIVAL_SET.copy(), BIRTH_SET.copy())

    @classmethod
    def from_notation(cls, notation: str) -> 'ConwayRuleParams':
        """Parse a rule string such as "B3/S23" or "B36/S23".

        Raises:
            ValueError: If the string is not in B.../S... form
        """
        parts = notation.upper().replace(" ", "").split("/")
        if len(parts) != 2 or not parts[0].startswith("B") or not parts[1].startswith("S"):
            raise ValueError(f"Rule notation must look like 'B3/S23', got {notation!r}")

        birth, survival = parts[0][1:], parts[1][1:]
        digits = birth + survival
        if digits and not digits.isdigit():
            raise ValueError(f"Rule notation must only contain digits, got {notation!r}")

        return cls({int(c) for c in survival}, {int(c) for c in birth})

    def update_cell(self, alive: bool, live_neighbors: int) -> bool:
        """Apply these rule parameters to a cell.

        Args:
            alive: Current cell state
            live_neighbors: Number of live neighbors

        Returns:
            Next cell state
        """
        if alive:
            return live_neighbors in self.survival_set
        else:
            return live_neighbors in self.birth_set

    def copy(self) -> 'ConwayRuleParams':
        return ConwayRuleParams(self.survival_set.copy(), self.birth_set.copy())

    @property
    def notation(self) -> str:
        birth = "".join(str(n) for n in sorted(self.birth_set))
        survival = "".join(str(n) for n in sorted(self.survival_set))
        return f"B{birth}/S{survival}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConwayRuleParams):
            return NotImplemented
        return self.survival_set == other.survival_set and self.birth_set == other.birth_set

    def __repr__(self) -> str:
        return f"ConwayRuleParams(survival={self.survival_set}, birth={self.birth_set})"
