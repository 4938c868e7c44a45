"""Tests for the grid snapshot (repr) layer.

Covers export/import round trips, determinism from a shared snapshot and
the plain-data and array views of a snapshot.
"""

import numpy as np
import pytest

from latticeca.core.coord import GridCoord
from latticeca.core.grid import SquareGrid
from latticeca.core.snapshot import CellRepr, GridRepr
from latticeca.nhood import HexagonalNhood, MooreNhood
from latticeca.rules import fhp, life
from latticeca.rules.fhp import FHPCell, Stage
from latticeca.rules.life import LifeCell


class TestRoundTrip:
    """Exporting and importing reproduces identical cell state."""

    def test_life_round_trip(self, life_grid):
        life_grid.step()
        life_grid.step()

        fresh = SquareGrid(6, 7, MooreNhood(), LifeCell)
        fresh.from_repr(life_grid.repr())

        assert fresh.cells() == life_grid.cells()
        assert fresh.repr().to_dict() == life_grid.repr().to_dict()

    def test_fhp_round_trip_keeps_stage(self, fhp_grid):
        fhp_grid.step()  # now in transport stage

        fresh = SquareGrid(5, 6, HexagonalNhood(), FHPCell)
        fresh.from_repr(fhp_grid.repr().copy())

        assert fresh.cells() == fhp_grid.cells()
        assert all(c.stage is Stage.TRANSPORT for c in fresh.cells())

    def test_round_trip_through_plain_data(self, fhp_grid):
        """to_dict/from_dict carries everything needed for an import."""
        data = fhp_grid.repr().to_dict()

        fresh = SquareGrid(5, 6, HexagonalNhood(), FHPCell)
        fresh.from_repr(GridRepr.from_dict(data))

        assert fresh.cells() == fhp_grid.cells()

    def test_partial_import(self):
        """A snapshot may cover only some cells; the rest keep their state."""
        grid = SquareGrid(3, 3, MooreNhood(), LifeCell)
        partial = GridRepr(3, 3, [CellRepr(GridCoord(2, 1), {"alive": True})])

        grid.from_repr(partial)

        assert grid.cell_at(2, 1).alive is True
        assert life.live_count(grid) == 1
        assert grid.repr().cell(2, 1).state == {"alive": True}

    def test_import_dimension_mismatch(self, life_grid):
        other = SquareGrid(7, 6, MooreNhood(), LifeCell)

        with pytest.raises(ValueError, match="doesn't match"):
            other.from_repr(life_grid.repr())

    def test_import_out_of_bounds_coord(self):
        grid = SquareGrid(2, 2, MooreNhood(), LifeCell)
        bad = GridRepr(2, 2, [CellRepr(GridCoord(2, 0), {"alive": True})])

        with pytest.raises(IndexError):
            grid.from_repr(bad)


class TestDeterminism:

    def test_same_snapshot_same_history(self, fhp_grid):
        """Two runs from the same snapshot produce identical snapshots."""
        start = fhp_grid.repr().copy()
        results = []

        for _ in range(2):
            grid = SquareGrid(5, 6, HexagonalNhood(), FHPCell)
            grid.from_repr(start)
            for _ in range(12):
                grid.step()
            results.append(grid.repr().to_dict())

        assert results[0] == results[1]


class TestGridRepr:
    """Test snapshot helpers."""

    def test_live_repr_changes_copy_does_not(self):
        grid = SquareGrid(5, 5, MooreNhood(), LifeCell)
        life.load_pattern(grid, life.create_blinker_pattern(), 1, 2)

        live = grid.repr()
        frozen = live.copy()
        grid.step()

        assert live is grid.repr()
        assert live.cell(1, 2).state["alive"] is False
        assert frozen.cell(1, 2).state["alive"] is True

    def test_empty(self):
        grid_repr = GridRepr.empty(2, 3)
        assert len(grid_repr) == 6
        assert [c.coord for c in grid_repr.cells][-1] == (2, 1)
        assert all(c.state == {} for c in grid_repr.cells)

    def test_cell_lookup_unordered(self):
        grid_repr = GridRepr(2, 2, [CellRepr(GridCoord(1, 1), {"alive": True}),
                                    CellRepr(GridCoord(0, 0), {"alive": False})])

        assert grid_repr.cell(1, 1).state["alive"] is True
        assert grid_repr.cell(0, 0).state["alive"] is False
        with pytest.raises(KeyError):
            grid_repr.cell(1, 0)

    def test_to_array_bool(self):
        grid = SquareGrid(4, 5, MooreNhood(), LifeCell)
        life.load_pattern(grid, life.create_block_pattern(), 3, 2)

        alive = grid.to_array("alive", dtype=bool)

        assert alive.shape == (4, 5)
        assert alive.dtype == bool
        assert alive[2, 3] and alive[3, 4]
        assert int(alive.sum()) == 4

    def test_to_array_nested_fields(self, fhp_grid):
        """List-valued fields become an extra array axis."""
        particles = fhp_grid.to_array("particles")

        assert particles.shape == (5, 6, 6)
        assert int(particles.sum()) == fhp.particle_count(fhp_grid)

    def test_to_dict_is_plain_data(self, life_grid):
        data = life_grid.repr().to_dict()

        assert data["rows"] == 6
        assert data["cols"] == 7
        assert data["cells"][0] == {"coord": [0, 0], "state": {"alive": life_grid.cell_at(0, 0).alive}}
        assert isinstance(data["cells"][0]["coord"], list)

    def test_to_array_missing_field_uses_fill(self):
        grid_repr = GridRepr.empty(2, 2)
        np.testing.assert_array_equal(grid_repr.to_array("value", fill=-1), np.full((2, 2), -1))
