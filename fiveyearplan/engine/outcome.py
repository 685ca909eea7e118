"""
End-of-game classification.

The ending is picked by the first matching rule:

1. Satellite launched                         -> strategic triumph
2. Agriculture ratio < -0.1                   -> agricultural neglect
3. Heavy ratio > 3.0                          -> industrial giant
4. Agriculture ratio > 0.5 and heavy > 1.0    -> balanced prosperity
5. Otherwise                                  -> difficult struggle

Achievements are evaluated independently on absolute final indices and
reported in a fixed order.
"""

import logging
from typing import Optional

from fiveyearplan.config.schema import PlanConfig, get_default_config
from fiveyearplan.models.game import GameState
from fiveyearplan.models.outcome import Achievement, Ending, Outcome
from fiveyearplan.models.sectors import Sector

logger = logging.getLogger(__name__)


def classify_ending(
    state: GameState,
    config: Optional[PlanConfig] = None,
) -> Ending:
    """Pick the narrative ending for a finished game."""
    config = config or get_default_config()
    thresholds = config.outcome.endings
    baseline = config.indices.initial

    heavy_ratio = state.indices.growth_ratio(Sector.HEAVY, baseline)
    agri_ratio = state.indices.growth_ratio(Sector.AGRI, baseline)

    if state.rocket_launched:
        return Ending.STRATEGIC_TRIUMPH
    if agri_ratio < thresholds.agri_neglect_ratio:
        return Ending.AGRICULTURAL_NEGLECT
    if heavy_ratio > thresholds.industrial_giant_ratio:
        return Ending.INDUSTRIAL_GIANT
    if (
        agri_ratio > thresholds.balanced_agri_ratio
        and heavy_ratio > thresholds.balanced_heavy_ratio
    ):
        return Ending.BALANCED_PROSPERITY
    return Ending.DIFFICULT_STRUGGLE


def evaluate_achievements(
    state: GameState,
    config: Optional[PlanConfig] = None,
) -> list[Achievement]:
    """List the achievements earned, in display order."""
    thresholds = (config or get_default_config()).outcome.achievements
    indices = state.indices

    earned = []
    if indices.heavy > thresholds.heavy:
        earned.append(Achievement.STEEL_TORRENT)
    if indices.agri > thresholds.agri:
        earned.append(Achievement.NATIONAL_GRANARY)
    if indices.light > thresholds.light:
        earned.append(Achievement.HUNDRED_FLOWERS)
    if state.rocket_launched:
        earned.append(Achievement.THE_EAST_IS_RED)
    if state.flags.soviet_split and indices.heavy > thresholds.self_reliance_heavy:
        earned.append(Achievement.SELF_RELIANCE)
    return earned


def classify(
    state: GameState,
    config: Optional[PlanConfig] = None,
) -> Outcome:
    """Classify a finished game into an ending and its achievements.

    Args:
        state: Final game state
        config: Simulation configuration (defaults if None)

    Returns:
        Outcome with ending, achievements and final growth ratios
    """
    config = config or get_default_config()
    ratios = state.indices.growth_ratios(config.indices.initial)

    outcome = Outcome(
        ending=classify_ending(state, config),
        achievements=evaluate_achievements(state, config),
        heavy_ratio=ratios[Sector.HEAVY],
        light_ratio=ratios[Sector.LIGHT],
        agri_ratio=ratios[Sector.AGRI],
    )
    logger.info(
        "Game classified: %s with %d achievement(s)",
        outcome.ending.value, len(outcome.achievements),
    )
    return outcome
