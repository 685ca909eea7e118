"""Tests for data models."""

import pytest
from pydantic import ValidationError

from fiveyearplan.models import (
    Allocation,
    FlagDelta,
    Flags,
    GameState,
    Goal,
    ModifierDelta,
    Modifiers,
    Phase,
    Sector,
    SectorIndices,
)


class TestSectorIndices:
    """Tests for SectorIndices."""

    def test_defaults(self) -> None:
        indices = SectorIndices()
        assert (indices.heavy, indices.light, indices.agri) == (100.0, 150.0, 750.0)
        assert indices.total == 1000.0

    def test_growth_ratio_against_initial(self) -> None:
        """Ratios are measured against the fixed 1953 indices."""
        indices = SectorIndices(heavy=250.0, light=187.5, agri=675.0)

        assert indices.growth_ratio(Sector.HEAVY) == pytest.approx(1.5)
        assert indices.growth_ratio(Sector.LIGHT) == pytest.approx(0.25)
        assert indices.growth_ratio(Sector.AGRI) == pytest.approx(-0.1)

    def test_growth_ratio_custom_baseline(self) -> None:
        indices = SectorIndices(heavy=300.0)
        baseline = {"heavy": 200.0, "light": 150.0, "agri": 750.0}
        assert indices.growth_ratio(Sector.HEAVY, baseline) == pytest.approx(0.5)

    def test_growth_ratios_all_sectors(self) -> None:
        ratios = SectorIndices().growth_ratios()
        assert ratios == {Sector.HEAVY: 0.0, Sector.LIGHT: 0.0, Sector.AGRI: 0.0}

    def test_get_by_string(self) -> None:
        assert SectorIndices().get("agri") == 750.0


class TestAllocation:
    """Tests for Allocation."""

    def test_total_and_balance(self, industrial_allocation: Allocation) -> None:
        assert industrial_allocation.total == 100
        assert industrial_allocation.is_balanced

    def test_unbalanced(self) -> None:
        allocation = Allocation(heavy=60, light=25, agri=20)
        assert allocation.total == 105
        assert not allocation.is_balanced

    @pytest.mark.parametrize("value", [4, 91, -5, 100])
    def test_out_of_range_rejected(self, value: int) -> None:
        with pytest.raises(ValidationError):
            Allocation(heavy=value, light=25, agri=20)

    def test_bounds_accepted(self) -> None:
        assert Allocation(heavy=90, light=5, agri=5).is_balanced

    def test_with_sector_returns_copy(self, industrial_allocation: Allocation) -> None:
        changed = industrial_allocation.with_sector(Sector.HEAVY, 60)

        assert changed.heavy == 60
        assert industrial_allocation.heavy == 55

    def test_with_sector_validates(self, industrial_allocation: Allocation) -> None:
        with pytest.raises(ValidationError):
            industrial_allocation.with_sector(Sector.AGRI, 95)

    def test_for_goal(self) -> None:
        industrial = Allocation.for_goal(Goal.INDUSTRIAL)
        agricultural = Allocation.for_goal(Goal.AGRICULTURAL)

        assert (industrial.heavy, industrial.light, industrial.agri) == (55, 25, 20)
        assert (agricultural.heavy, agricultural.light, agricultural.agri) == (30, 35, 35)


class TestModifiersAndFlags:
    """Tests for the delta reducers on Modifiers and Flags."""

    def test_modifier_defaults(self, default_modifiers: Modifiers) -> None:
        assert default_modifiers.heavy_efficiency == 1.0
        assert default_modifiers.agri_efficiency == 1.0
        assert default_modifiers.heavy_bonus == 0.0
        assert default_modifiers.stability == 1.0

    def test_modifier_delta_adds(self, default_modifiers: Modifiers) -> None:
        """Deltas add to prior values rather than replacing them."""
        delta = ModifierDelta(heavy_efficiency_add=0.5, agri_efficiency_add=-0.3)
        once = default_modifiers.apply(delta)
        twice = once.apply(delta)

        assert once.heavy_efficiency == pytest.approx(1.5)
        assert twice.heavy_efficiency == pytest.approx(2.0)
        assert twice.agri_efficiency == pytest.approx(0.4)
        # Source unchanged
        assert default_modifiers.heavy_efficiency == 1.0

    def test_flags_only_turn_on(self) -> None:
        flags = Flags(great_leap=True)
        updated = flags.apply(FlagDelta(set_soviet_split=True))

        assert updated.great_leap
        assert updated.soviet_split
        # An empty delta never clears a flag
        assert updated.apply(FlagDelta()) == updated

    def test_active_flags(self) -> None:
        assert Flags().active == []
        assert Flags(soviet_split=True).active == ["soviet_split"]

    def test_empty_deltas(self) -> None:
        assert ModifierDelta().is_empty
        assert FlagDelta().is_empty
        assert not ModifierDelta(stability_add=0.1).is_empty
        assert not FlagDelta(set_great_leap=True).is_empty


class TestGameState:
    """Tests for GameState."""

    def test_create_new(self) -> None:
        state = GameState.create_new()

        assert state.year == 1953
        assert state.phase == Phase.SETUP
        assert state.indices == SectorIndices()
        assert state.selected_goal is None
        assert not state.rocket_program_started
        assert not state.rocket_launched
        assert state.modifiers == Modifiers()
        assert state.flags == Flags()
        assert state.report is None
        assert state.history == []

    def test_create_new_custom_indices(self) -> None:
        state = GameState.create_new(
            start_year=1949,
            initial_indices={"heavy": 50.0, "light": 80.0, "agri": 600.0},
        )
        assert state.year == 1949
        assert state.indices.heavy == 50.0

    def test_soviet_aid_withdrawn(self) -> None:
        """Withdrawn by date or by the split flag."""
        assert not GameState(year=1959).soviet_aid_withdrawn()
        assert GameState(year=1960).soviet_aid_withdrawn()
        assert GameState(year=1955, flags=Flags(soviet_split=True)).soviet_aid_withdrawn()

    def test_pending_event_outside_report(self) -> None:
        assert GameState().pending_event is None
