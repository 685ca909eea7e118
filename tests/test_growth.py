"""Tests for the economic growth model."""

import pytest

from fiveyearplan.config.schema import PlanConfig
from fiveyearplan.engine.growth import apply_growth, compute_growth, soviet_aid
from fiveyearplan.models.modifiers import Flags, Modifiers
from fiveyearplan.models.sectors import Allocation, SectorIndices, SectorRates


class TestSovietAid:
    """Tests for the heavy industry aid term."""

    def test_aid_before_cutoff(self, default_flags: Flags) -> None:
        assert soviet_aid(1953, default_flags) == 0.08
        assert soviet_aid(1959, default_flags) == 0.08

    @pytest.mark.parametrize("year", [1960, 1961, 1962])
    def test_no_aid_from_cutoff(self, year: int, default_flags: Flags) -> None:
        """Aid ends in 1960 even if the split was never accepted."""
        assert soviet_aid(year, default_flags) == 0.0

    def test_no_aid_after_split(self) -> None:
        assert soviet_aid(1955, Flags(soviet_split=True)) == 0.0


class TestComputeGrowth:
    """Tests for compute_growth."""

    def test_first_year_industrial(
        self,
        industrial_allocation: Allocation,
        default_modifiers: Modifiers,
        default_flags: Flags,
    ) -> None:
        """1953 with the industrial preset, aid included."""
        rates = compute_growth(
            SectorIndices(), industrial_allocation, 1953, default_modifiers, default_flags
        )

        # (0.12 + 0.08) * 0.55 * 2.2 * 1.1
        assert rates.heavy == pytest.approx(0.2662)
        assert rates.light == pytest.approx(0.035)
        assert rates.agri == pytest.approx(0.008)

    def test_first_year_without_aid(
        self,
        industrial_allocation: Allocation,
        default_modifiers: Modifiers,
    ) -> None:
        rates = compute_growth(
            SectorIndices(),
            industrial_allocation,
            1953,
            default_modifiers,
            Flags(soviet_split=True),
        )
        assert rates.heavy == pytest.approx(0.15972)

    def test_threshold_is_strict(
        self,
        default_modifiers: Modifiers,
        default_flags: Flags,
    ) -> None:
        """Exactly 45% heavy earns no concentrated-investment bonus."""
        at_threshold = compute_growth(
            SectorIndices(),
            Allocation(heavy=45, light=30, agri=25),
            1953,
            default_modifiers,
            default_flags,
        )
        above = compute_growth(
            SectorIndices(),
            Allocation(heavy=46, light=29, agri=25),
            1953,
            default_modifiers,
            default_flags,
        )

        assert at_threshold.heavy == pytest.approx(0.2 * 0.45 * 2.2)
        assert above.heavy == pytest.approx(0.2 * 0.46 * 2.2 * 1.1)

    def test_modifiers_apply_to_heavy_and_agri(
        self,
        industrial_allocation: Allocation,
        default_flags: Flags,
    ) -> None:
        modifiers = Modifiers(heavy_efficiency=1.5, agri_efficiency=0.85, heavy_bonus=0.05)
        rates = compute_growth(
            SectorIndices(), industrial_allocation, 1957, modifiers, default_flags
        )

        assert rates.heavy == pytest.approx((0.12 + 0.08 + 0.05) * 0.55 * 2.2 * 1.5 * 1.1)
        assert rates.agri == pytest.approx(0.008 * 0.85)

    def test_light_ignores_modifiers(
        self,
        industrial_allocation: Allocation,
        default_flags: Flags,
    ) -> None:
        modifiers = Modifiers(
            heavy_efficiency=3.0, agri_efficiency=0.1, heavy_bonus=1.0, stability=2.0
        )
        rates = compute_growth(
            SectorIndices(), industrial_allocation, 1954, modifiers, default_flags
        )
        assert rates.light == pytest.approx(0.035)

    @pytest.mark.parametrize("year", [1959, 1960, 1961])
    def test_famine_penalty(
        self,
        year: int,
        industrial_allocation: Allocation,
        default_modifiers: Modifiers,
        default_flags: Flags,
    ) -> None:
        rates = compute_growth(
            SectorIndices(), industrial_allocation, year, default_modifiers, default_flags
        )
        assert rates.agri == pytest.approx(0.008 - 0.04)

    @pytest.mark.parametrize("year", [1958, 1962])
    def test_no_famine_outside_window(
        self,
        year: int,
        industrial_allocation: Allocation,
        default_modifiers: Modifiers,
        default_flags: Flags,
    ) -> None:
        rates = compute_growth(
            SectorIndices(), industrial_allocation, year, default_modifiers, default_flags
        )
        assert rates.agri == pytest.approx(0.008)

    def test_rates_independent_of_indices(
        self,
        industrial_allocation: Allocation,
        default_modifiers: Modifiers,
        default_flags: Flags,
    ) -> None:
        small = compute_growth(
            SectorIndices(), industrial_allocation, 1954, default_modifiers, default_flags
        )
        large = compute_growth(
            SectorIndices(heavy=900.0, light=400.0, agri=2000.0),
            industrial_allocation,
            1954,
            default_modifiers,
            default_flags,
        )
        assert small == large

    def test_custom_config(
        self,
        industrial_allocation: Allocation,
        default_modifiers: Modifiers,
        default_flags: Flags,
    ) -> None:
        config = PlanConfig.from_dict({"growth": {"soviet_aid": 0.0}})
        rates = compute_growth(
            SectorIndices(),
            industrial_allocation,
            1953,
            default_modifiers,
            default_flags,
            config,
        )
        assert rates.heavy == pytest.approx(0.15972)


class TestApplyGrowth:
    """Tests for apply_growth."""

    def test_multiplies_prior_index(self) -> None:
        indices = apply_growth(
            SectorIndices(),
            SectorRates(heavy=0.2662, light=0.035, agri=0.008),
        )

        assert indices.heavy == pytest.approx(126.62)
        assert indices.light == pytest.approx(155.25)
        assert indices.agri == pytest.approx(756.0)

    def test_floor_clamp(self) -> None:
        """Indices never fall below the floor."""
        indices = apply_growth(
            SectorIndices(heavy=15.0, light=12.0, agri=11.0),
            SectorRates(heavy=-0.5, light=-0.99, agri=-0.2),
        )

        assert indices.heavy == 10.0
        assert indices.light == 10.0
        assert indices.agri == 10.0

    def test_custom_floor(self) -> None:
        indices = apply_growth(
            SectorIndices(heavy=100.0, light=100.0, agri=100.0),
            SectorRates(heavy=-0.9, light=0.0, agri=0.0),
            floor=25.0,
        )
        assert indices.heavy == 25.0
        assert indices.light == 100.0

    def test_inputs_unchanged(self) -> None:
        before = SectorIndices()
        apply_growth(before, SectorRates(heavy=1.0, light=1.0, agri=1.0))
        assert before == SectorIndices()
