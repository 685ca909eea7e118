"""
Rocket program ("two bombs, one satellite") triggers.

Two one-way latches are checked on every year transition, using the
indices as they stand before the year is incremented:

- The program starts once the next year is at least 1958, heavy industry
  is more than 150% above its 1953 index and light industry more than 25%.
- The launch succeeds when the program is running, heavy industry is more
  than 300% above its 1953 index, and the transition is the final one out
  of END_YEAR into the closing summary.

Once either latch is set it never resets within a session.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fiveyearplan.config.schema import PlanConfig, get_default_config
from fiveyearplan.models.sectors import Sector, SectorIndices

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RocketStatus:
    """State of both latches after a transition."""

    started: bool
    launched: bool


def evaluate_rocket(
    indices: SectorIndices,
    next_year: int,
    started: bool,
    launched: bool,
    config: Optional[PlanConfig] = None,
) -> RocketStatus:
    """Evaluate both rocket latches for a year transition.

    Args:
        indices: Sector indices before the year increment
        next_year: Year being transitioned into
        started: Whether the program is already running
        launched: Whether the launch already succeeded
        config: Simulation configuration (defaults if None)

    Returns:
        RocketStatus with the latched values
    """
    config = config or get_default_config()
    rocket = config.rocket
    baseline = config.indices.initial

    heavy_ratio = indices.growth_ratio(Sector.HEAVY, baseline)
    light_ratio = indices.growth_ratio(Sector.LIGHT, baseline)

    if (
        not started
        and next_year >= rocket.earliest_year
        and heavy_ratio > rocket.heavy_ratio_to_start
        and light_ratio > rocket.light_ratio_to_start
    ):
        started = True
        logger.info(
            "Rocket program started for %d (heavy %+.2f, light %+.2f)",
            next_year, heavy_ratio, light_ratio,
        )

    if (
        not launched
        and started
        and heavy_ratio > rocket.heavy_ratio_to_launch
        and next_year > config.timeline.end_year
    ):
        launched = True
        logger.info("Satellite launched at the close of %d (heavy %+.2f)", next_year - 1, heavy_ratio)

    return RocketStatus(started=started, launched=launched)
