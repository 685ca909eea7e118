"""
End-of-game outcome models.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Ending(str, Enum):
    """Narrative ending, in decision-list priority order."""

    STRATEGIC_TRIUMPH = "strategic_triumph"
    AGRICULTURAL_NEGLECT = "agricultural_neglect"
    INDUSTRIAL_GIANT = "industrial_giant"
    BALANCED_PROSPERITY = "balanced_prosperity"
    DIFFICULT_STRUGGLE = "difficult_struggle"


class Achievement(str, Enum):
    """Achievement badges, in display order."""

    STEEL_TORRENT = "steel_torrent"
    NATIONAL_GRANARY = "national_granary"
    HUNDRED_FLOWERS = "hundred_flowers"
    THE_EAST_IS_RED = "the_east_is_red"
    SELF_RELIANCE = "self_reliance"


class Outcome(BaseModel):
    """Classification of a finished game."""

    ending: Ending
    achievements: list[Achievement] = Field(default_factory=list)
    heavy_ratio: float = Field(description="Final heavy growth ratio")
    light_ratio: float = Field(description="Final light growth ratio")
    agri_ratio: float = Field(description="Final agriculture growth ratio")
