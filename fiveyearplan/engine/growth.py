"""
Economic growth model.

Computes the yearly growth rate of each sector from the budget allocation,
the year, and the modifiers and flags set by accepted events:

    aid        = 0.08 if year < 1960 and no Soviet split, else 0
    heavy_rate = (0.12 + aid + heavy_bonus) * heavy% * 2.2 * heavy_efficiency
                 (* 1.1 when heavy% > 45)
    light_rate = 0.10 * light% * 1.4
    agri_rate  = 0.04 * agri% * 1.0 * agri_efficiency
                 (- 0.04 flat in 1959-1961)

Light industry is deliberately untouched by modifiers. Rates are computed
against the prior index; the floor clamp only applies to the stored index.
"""

import logging
from typing import Optional

from fiveyearplan.config.schema import PlanConfig, get_default_config
from fiveyearplan.models.modifiers import Flags, Modifiers
from fiveyearplan.models.sectors import Allocation, SectorIndices, SectorRates

logger = logging.getLogger(__name__)


def soviet_aid(
    year: int,
    flags: Flags,
    config: Optional[PlanConfig] = None,
) -> float:
    """Aid added to the heavy industry base rate.

    Aid is zero from the cut-off year on, whether or not the split
    event was accepted, and zero before it once the split is accepted.
    """
    growth = (config or get_default_config()).growth
    if year < growth.soviet_aid_cutoff_year and not flags.soviet_split:
        return growth.soviet_aid
    return 0.0


def compute_growth(
    indices: SectorIndices,
    allocation: Allocation,
    year: int,
    modifiers: Modifiers,
    flags: Flags,
    config: Optional[PlanConfig] = None,
) -> SectorRates:
    """Compute this year's growth rate for every sector.

    Args:
        indices: Current sector indices (the rates do not depend on them,
            they are accepted so callers pass a full turn context)
        allocation: Budget shares for the turn
        year: Year being played
        modifiers: Active modifiers
        flags: Active flags
        config: Simulation configuration (defaults if None)

    Returns:
        SectorRates for the turn
    """
    config = config or get_default_config()
    growth = config.growth

    aid = soviet_aid(year, flags, config)

    heavy_rate = (
        (growth.heavy.base_rate + aid + modifiers.heavy_bonus)
        * (allocation.heavy / 100)
        * growth.heavy.multiplier
        * modifiers.heavy_efficiency
    )
    if allocation.heavy > growth.heavy.threshold:
        heavy_rate *= growth.heavy.threshold_bonus

    light_rate = growth.light.base_rate * (allocation.light / 100) * growth.light.multiplier

    agri_rate = (
        growth.agri.base_rate
        * (allocation.agri / 100)
        * growth.agri.multiplier
        * modifiers.agri_efficiency
    )
    if growth.is_famine_year(year):
        agri_rate -= growth.famine_penalty

    rates = SectorRates(heavy=heavy_rate, light=light_rate, agri=agri_rate)
    logger.debug(
        "Growth %d: heavy=%.4f light=%.4f agri=%.4f (aid=%.2f)",
        year, heavy_rate, light_rate, agri_rate, aid,
    )
    return rates


def apply_growth(
    indices: SectorIndices,
    rates: SectorRates,
    floor: Optional[float] = None,
) -> SectorIndices:
    """Grow each index by its rate, clamping the result at the floor.

    Args:
        indices: Indices before growth
        rates: Rates for the turn
        floor: Minimum stored index (configured floor if None)

    Returns:
        New SectorIndices, every value >= floor
    """
    if floor is None:
        floor = get_default_config().indices.floor

    return SectorIndices(
        heavy=max(floor, indices.heavy * (1 + rates.heavy)),
        light=max(floor, indices.light * (1 + rates.light)),
        agri=max(floor, indices.agri * (1 + rates.agri)),
    )
