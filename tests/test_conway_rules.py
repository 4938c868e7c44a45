"""Tests for Conway rule parameters and the LifeCell transition.

Checks every (state, neighbor count) combination, the B/S rule notation
and how a LifeCell treats neighbor slots that fall off the grid.
"""

import pytest

from latticeca.rules.conway_rules import BIRTH_SET, SURVIVAL_SET, ConwayRuleParams
from latticeca.rules.life import LifeCell


def _neighbors(alive_count, total=8, missing=0):
    cells = [LifeCell(alive=True) for _ in range(alive_count)]
    cells += [LifeCell(alive=False) for _ in range(total - alive_count - missing)]
    cells += [None] * missing
    return cells


class TestRuleTable:
    """Test Conway rules for all neighbor counts."""

    @pytest.fixture
    def params(self):
        return ConwayRuleParams.standard()

    @pytest.mark.parametrize("neighbors", range(9))
    def test_live_cell(self, params, neighbors):
        """Live cell survives with 2-3 neighbors, dies otherwise."""
        assert params.update_cell(True, neighbors) is (neighbors in (2, 3))

    @pytest.mark.parametrize("neighbors", range(9))
    def test_dead_cell(self, params, neighbors):
        """Dead cell is born with exactly 3 neighbors."""
        assert params.update_cell(False, neighbors) is (neighbors == 3)

    def test_life_cell_follows_params(self, params):
        """LifeCell transitions agree with the rule table for every count."""
        for alive in (False, True):
            for neighbors in range(9):
                cell = LifeCell(alive=alive)
                new = cell.step(_neighbors(neighbors))
                assert new.alive is params.update_cell(alive, neighbors)


class TestConwayRuleParams:

    def test_defaults(self):
        params = ConwayRuleParams()
        assert params.survival_set == SURVIVAL_SET
        assert params.birth_set == BIRTH_SET
        assert params.notation == "B3/S23"

    def test_defaults_are_copies(self):
        params = ConwayRuleParams()
        params.birth_set.add(6)
        assert BIRTH_SET == {3}

    def test_from_notation(self):
        params = ConwayRuleParams.from_notation("B36/S23")
        assert params.birth_set == {3, 6}
        assert params.survival_set == {2, 3}
        assert params == ConwayRuleParams({2, 3}, {3, 6})

    def test_from_notation_empty_sets(self):
        params = ConwayRuleParams.from_notation("B/S")
        assert params.birth_set == set()
        assert params.survival_set == set()

    @pytest.mark.parametrize("notation", ["23/3", "B3S23", "Bx/S23", "S23/B3"])
    def test_invalid_notation(self, notation):
        with pytest.raises(ValueError):
            ConwayRuleParams.from_notation(notation)

    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError):
            ConwayRuleParams({-1}, {3})

    def test_copy_is_independent(self):
        params = ConwayRuleParams.standard()
        copied = params.copy()
        copied.survival_set.add(4)
        assert params.survival_set == {2, 3}


class TestLifeCell:
    """Test the cell transition on hand-built neighbor lists."""

    def test_birth(self):
        cell = LifeCell((4, 5), alive=False)
        new = cell.step(_neighbors(3))

        assert new.alive is True
        assert new.coord == (4, 5)

    def test_survival_and_death(self):
        cell = LifeCell((1, 1), alive=True)

        assert cell.step(_neighbors(2)).alive is True
        assert cell.step(_neighbors(1)).alive is False
        assert cell.step(_neighbors(4)).alive is False

    def test_step_is_pure(self):
        cell = LifeCell((0, 0), alive=False)
        neighbors = _neighbors(3)

        new = cell.step(neighbors)

        assert new is not cell
        assert cell.alive is False
        assert sum(n.alive for n in neighbors) == 3

    def test_missing_neighbors_count_as_dead(self):
        """Edge slots (None) never contribute live neighbors."""
        cell = LifeCell((0, 0), alive=True)

        assert cell.step([None] * 8).alive is False
        assert cell.step(_neighbors(2, missing=5)).alive is True

    def test_repr_hooks(self):
        cell = LifeCell((2, 3), alive=True)
        state = {}
        cell.repr(state)
        assert state == {"alive": True}

        other = LifeCell.with_coord((2, 3))
        other.from_repr(state)
        assert other == cell

    def test_subclass_rules(self):
        """A subclass with different params keeps its own class across steps."""

        class HighLifeCell(LifeCell):
            rule_params = ConwayRuleParams.from_notation("B36/S23")

        cell = HighLifeCell((0, 0), alive=False)
        new = cell.step(_neighbors(6))

        assert isinstance(new, HighLifeCell)
        assert new.alive is True
        assert LifeCell((0, 0)).step(_neighbors(6)).alive is False
