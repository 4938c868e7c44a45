"""Neighborhood topologies for square-lattice grids."""

from .base import Nhood
from .von_neumann import VonNeumannNhood
from .moore import MooreNhood
from .hexagonal import HexagonalNhood

NHOODS = {
    VonNeumannNhood.name: VonNeumannNhood,
    MooreNhood.name: MooreNhood,
    HexagonalNhood.name: HexagonalNhood,
}


def create_nhood(name: str, **kwargs) -> Nhood:
    """Factory for neighborhoods by name ("von_neumann", "moore", "hexagonal").

    Raises:
        ValueError: If the name is unknown or the options don't fit the class
    """
    try:
        nhood_cls = NHOODS[name]
    except KeyError:
        raise ValueError(f"Unknown neighborhood {name!r}; expected one of {sorted(NHOODS)}") from None
    try:
        return nhood_cls(**kwargs)
    except TypeError as e:
        raise ValueError(f"Invalid options for neighborhood {name!r}: {e}") from e


__all__ = [
    'Nhood',
    'VonNeumannNhood',
    'MooreNhood',
    'HexagonalNhood',
    'NHOODS',
    'create_nhood',
]
