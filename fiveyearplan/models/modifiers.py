"""
Modifier and flag models.

Modifiers adjust the growth formulas; flags record permanent historical
milestones. Both change only when the player accepts a scripted event,
and only through the typed deltas defined here: a delta adds to the prior
modifier value and can only ever raise a flag, never clear it.
"""

from pydantic import BaseModel, Field


class Modifiers(BaseModel):
    """Efficiency adjustments applied by the growth model."""

    heavy_efficiency: float = Field(default=1.0, description="Multiplier on the heavy industry rate")
    agri_efficiency: float = Field(default=1.0, description="Multiplier on the agriculture rate")
    heavy_bonus: float = Field(default=0.0, description="Added to the heavy industry base rate")
    # Not read by any growth formula yet
    stability: float = Field(default=1.0, description="Planning system stability")

    def apply(self, delta: "ModifierDelta") -> "Modifiers":
        """Return new modifiers with a delta added."""
        return Modifiers(
            heavy_efficiency=self.heavy_efficiency + delta.heavy_efficiency_add,
            agri_efficiency=self.agri_efficiency + delta.agri_efficiency_add,
            heavy_bonus=self.heavy_bonus + delta.heavy_bonus_add,
            stability=self.stability + delta.stability_add,
        )


class Flags(BaseModel):
    """Permanent milestone markers."""

    great_leap: bool = Field(default=False, description="Great Leap Forward was launched")
    soviet_split: bool = Field(default=False, description="Sino-Soviet split was accepted")

    def apply(self, delta: "FlagDelta") -> "Flags":
        """Return new flags with a delta applied (flags only ever turn on)."""
        return Flags(
            great_leap=self.great_leap or delta.set_great_leap,
            soviet_split=self.soviet_split or delta.set_soviet_split,
        )

    @property
    def active(self) -> list[str]:
        """Names of the flags that are set."""
        return [name for name, value in self.model_dump().items() if value]


class ModifierDelta(BaseModel):
    """Additive change to each modifier (zero means untouched)."""

    heavy_efficiency_add: float = 0.0
    agri_efficiency_add: float = 0.0
    heavy_bonus_add: float = 0.0
    stability_add: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not any(self.model_dump().values())


class FlagDelta(BaseModel):
    """Flags raised by an effect."""

    set_great_leap: bool = False
    set_soviet_split: bool = False

    @property
    def is_empty(self) -> bool:
        return not any(self.model_dump().values())
