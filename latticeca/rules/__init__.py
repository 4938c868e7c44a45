"""Example lattice rules built on the Cell contract."""

from .conway_rules import ConwayRuleParams
from .life import LifeCell
from .fhp import Direction, FHPCell, Stage

RULES = {
    "life": LifeCell,
    "fhp": FHPCell,
}

__all__ = [
    'ConwayRuleParams',
    'LifeCell',
    'FHPCell',
    'Direction',
    'Stage',
    'RULES',
]
