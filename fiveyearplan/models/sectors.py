"""
Sector models for the Five-Year Plan simulation.

Three economic sectors share the budget each year:
- Heavy industry (steel, machinery, defence base)
- Light industry (consumer goods)
- Agriculture (grain, the base everything else rests on)

SectorIndices carry the running output measure of each sector. Growth
ratios are always taken against the fixed initial indices, so a ratio of
1.5 means "150% above where the country started in 1953".
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from fiveyearplan.config.defaults import (
    ALLOCATION_MAX,
    ALLOCATION_MIN,
    ALLOCATION_TOTAL,
    GOAL_ALLOCATIONS,
    INITIAL_INDICES,
)


class Sector(str, Enum):
    """Economic sector."""

    HEAVY = "heavy"
    LIGHT = "light"
    AGRI = "agri"


class Goal(str, Enum):
    """Development goal chosen at the start of the game."""

    INDUSTRIAL = "industrial"
    AGRICULTURAL = "agricultural"


class SectorIndices(BaseModel):
    """Running output index of every sector."""

    heavy: float = Field(default=INITIAL_INDICES["heavy"], gt=0, description="Heavy industry index")
    light: float = Field(default=INITIAL_INDICES["light"], gt=0, description="Light industry index")
    agri: float = Field(default=INITIAL_INDICES["agri"], gt=0, description="Agriculture index")

    def get(self, sector: Sector) -> float:
        """Get index by sector."""
        return getattr(self, Sector(sector).value)

    @property
    def total(self) -> float:
        """Combined national output."""
        return self.heavy + self.light + self.agri

    def growth_ratio(
        self,
        sector: Sector,
        baseline: Optional[dict[str, float]] = None,
    ) -> float:
        """Growth of a sector relative to its starting index.

        Args:
            sector: Sector to measure
            baseline: Starting indices by sector name (stock 1953 values if None)

        Returns:
            current / initial - 1
        """
        baseline = baseline or INITIAL_INDICES
        sector = Sector(sector)
        return self.get(sector) / baseline[sector.value] - 1

    def growth_ratios(self, baseline: Optional[dict[str, float]] = None) -> dict[Sector, float]:
        """Growth ratio of all three sectors."""
        return {sector: self.growth_ratio(sector, baseline) for sector in Sector}


class SectorRates(BaseModel):
    """Growth rates of a single turn (0.16 means +16%)."""

    heavy: float = Field(description="Heavy industry growth rate")
    light: float = Field(description="Light industry growth rate")
    agri: float = Field(description="Agriculture growth rate (can be negative)")

    def get(self, sector: Sector) -> float:
        """Get rate by sector."""
        return getattr(self, Sector(sector).value)


class Allocation(BaseModel):
    """Percentage of the yearly budget given to each sector.

    This is transient player input: it is never part of the game state
    and only matters for the turn it is committed on.
    """

    heavy: int = Field(ge=ALLOCATION_MIN, le=ALLOCATION_MAX, description="Heavy industry share (%)")
    light: int = Field(ge=ALLOCATION_MIN, le=ALLOCATION_MAX, description="Light industry share (%)")
    agri: int = Field(ge=ALLOCATION_MIN, le=ALLOCATION_MAX, description="Agriculture share (%)")

    @property
    def total(self) -> int:
        """Sum of the three shares."""
        return self.heavy + self.light + self.agri

    @property
    def is_balanced(self) -> bool:
        """Check whether the shares add up to exactly 100%."""
        return self.total == ALLOCATION_TOTAL

    def get(self, sector: Sector) -> int:
        """Get share by sector."""
        return getattr(self, Sector(sector).value)

    def with_sector(self, sector: Sector, percent: int) -> "Allocation":
        """Return a copy with one sector's share replaced.

        Raises:
            pydantic.ValidationError: If the percent is outside the slider range
        """
        data = self.model_dump()
        data[Sector(sector).value] = percent
        return Allocation.model_validate(data)

    @classmethod
    def for_goal(
        cls,
        goal: Goal,
        presets: Optional[dict[str, dict[str, int]]] = None,
    ) -> "Allocation":
        """Default allocation seeded when a goal is selected."""
        presets = presets or GOAL_ALLOCATIONS
        return cls.model_validate(presets[Goal(goal).value])
