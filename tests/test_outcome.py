"""Tests for ending and achievement classification."""

import pytest

from fiveyearplan.engine.outcome import classify, classify_ending, evaluate_achievements
from fiveyearplan.models.game import GameState
from fiveyearplan.models.modifiers import Flags
from fiveyearplan.models.outcome import Achievement, Ending
from fiveyearplan.models.sectors import SectorIndices


def _final(
    heavy: float,
    light: float = 150.0,
    agri: float = 750.0,
    **updates,
) -> GameState:
    state = GameState(year=1962, indices=SectorIndices(heavy=heavy, light=light, agri=agri))
    return state.model_copy(update=updates)


class TestClassifyEnding:
    """Tests for ending priority."""

    def test_launch_wins_over_everything(self) -> None:
        state = _final(heavy=500.0, agri=300.0, rocket_program_started=True, rocket_launched=True)
        assert classify_ending(state) == Ending.STRATEGIC_TRIUMPH

    def test_agricultural_neglect(self) -> None:
        """agri 637.5 is a ratio of -0.15."""
        assert classify_ending(_final(heavy=500.0, agri=637.5)) == Ending.AGRICULTURAL_NEGLECT

    def test_neglect_threshold_is_strict(self) -> None:
        # ratio exactly -0.1
        assert classify_ending(_final(heavy=150.0, agri=675.0)) == Ending.DIFFICULT_STRUGGLE

    def test_industrial_giant(self) -> None:
        assert classify_ending(_final(heavy=450.0)) == Ending.INDUSTRIAL_GIANT

    def test_neglect_beats_giant(self) -> None:
        assert classify_ending(_final(heavy=900.0, agri=600.0)) == Ending.AGRICULTURAL_NEGLECT

    def test_balanced_prosperity(self) -> None:
        assert classify_ending(_final(heavy=250.0, agri=1200.0)) == Ending.BALANCED_PROSPERITY

    def test_balanced_needs_both(self) -> None:
        assert classify_ending(_final(heavy=190.0, agri=1200.0)) == Ending.DIFFICULT_STRUGGLE
        assert classify_ending(_final(heavy=250.0, agri=1100.0)) == Ending.DIFFICULT_STRUGGLE

    def test_difficult_struggle(self) -> None:
        assert classify_ending(_final(heavy=299.4, agri=763.8)) == Ending.DIFFICULT_STRUGGLE


class TestAchievements:
    """Tests for achievement evaluation."""

    def test_none(self) -> None:
        assert evaluate_achievements(_final(heavy=300.0)) == []

    def test_all_in_fixed_order(self) -> None:
        state = _final(
            heavy=650.0,
            light=520.0,
            agri=1300.0,
            rocket_program_started=True,
            rocket_launched=True,
            flags=Flags(soviet_split=True),
        )

        assert evaluate_achievements(state) == [
            Achievement.STEEL_TORRENT,
            Achievement.NATIONAL_GRANARY,
            Achievement.HUNDRED_FLOWERS,
            Achievement.THE_EAST_IS_RED,
            Achievement.SELF_RELIANCE,
        ]

    def test_thresholds_are_strict(self) -> None:
        state = _final(heavy=500.0, light=500.0, agri=1200.0)
        assert evaluate_achievements(state) == []

    def test_self_reliance_needs_split(self) -> None:
        assert Achievement.SELF_RELIANCE not in evaluate_achievements(_final(heavy=350.0))
        assert evaluate_achievements(_final(heavy=350.0, flags=Flags(soviet_split=True))) == [
            Achievement.SELF_RELIANCE
        ]

    def test_self_reliance_needs_industry(self) -> None:
        state = _final(heavy=300.0, flags=Flags(soviet_split=True))
        assert evaluate_achievements(state) == []


class TestClassify:
    """Tests for the combined outcome."""

    def test_outcome_ratios(self) -> None:
        outcome = classify(_final(heavy=450.0, light=300.0, agri=600.0))

        assert outcome.heavy_ratio == pytest.approx(3.5)
        assert outcome.light_ratio == pytest.approx(1.0)
        assert outcome.agri_ratio == pytest.approx(-0.2)
        assert outcome.ending == Ending.AGRICULTURAL_NEGLECT
        assert outcome.achievements == []

    def test_triumph_with_medals(self) -> None:
        outcome = classify(
            _final(heavy=813.9, light=211.6, rocket_program_started=True, rocket_launched=True)
        )

        assert outcome.ending == Ending.STRATEGIC_TRIUMPH
        assert outcome.achievements == [Achievement.STEEL_TORRENT, Achievement.THE_EAST_IS_RED]
