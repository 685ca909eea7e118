"""
Game state model for the Five-Year Plan simulation.

GameState is the durable record of a session. It is created once in the
setup phase and replaced (never edited in place) by the turn controller
after every player action.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from fiveyearplan.config.defaults import SOVIET_AID_CUTOFF_YEAR, START_YEAR
from fiveyearplan.models.events import EventId
from fiveyearplan.models.modifiers import Flags, Modifiers
from fiveyearplan.models.sectors import Allocation, Goal, SectorIndices, SectorRates


class Phase(str, Enum):
    """Engine phase; decides which player actions are valid."""

    SETUP = "setup"
    PLAYING = "playing"
    REPORT = "report"
    SUMMARY = "summary"


class ReportData(BaseModel):
    """Annual report shown after a budget is committed."""

    year: int = Field(description="Year the report covers")
    rates: SectorRates = Field(description="Growth rates achieved this year")
    event: Optional[EventId] = Field(default=None, description="Event offered with the report")


class TurnRecord(BaseModel):
    """One completed year, kept for the end-of-game review."""

    year: int
    allocation: Allocation
    rates: SectorRates
    indices: SectorIndices = Field(description="Indices after this year's growth")
    event: Optional[EventId] = None
    accepted: Optional[bool] = Field(
        default=None,
        description="Player decision on the event (None if no event)",
    )


class GameState(BaseModel):
    """Complete state of one game session."""

    year: int = Field(default=START_YEAR, ge=1, description="Current simulation year")
    indices: SectorIndices = Field(default_factory=SectorIndices)
    selected_goal: Optional[Goal] = Field(default=None, description="Goal picked during setup")
    rocket_program_started: bool = Field(default=False)
    rocket_launched: bool = Field(default=False)
    modifiers: Modifiers = Field(default_factory=Modifiers)
    flags: Flags = Field(default_factory=Flags)
    phase: Phase = Field(default=Phase.SETUP)
    report: Optional[ReportData] = Field(
        default=None,
        description="Only present during the report phase",
    )
    history: list[TurnRecord] = Field(default_factory=list)

    def soviet_aid_withdrawn(self, cutoff_year: int = SOVIET_AID_CUTOFF_YEAR) -> bool:
        """Whether Soviet aid has stopped, by date or by the split."""
        return self.year >= cutoff_year or self.flags.soviet_split

    @property
    def pending_event(self) -> Optional[EventId]:
        """Event awaiting a decision, if any."""
        if self.phase != Phase.REPORT or self.report is None:
            return None
        return self.report.event

    @classmethod
    def create_new(
        cls,
        start_year: int = START_YEAR,
        initial_indices: Optional[dict[str, float]] = None,
    ) -> "GameState":
        """Create a fresh state in the setup phase.

        Args:
            start_year: First playable year
            initial_indices: Starting sector indices (stock values if None)

        Returns:
            New GameState with default modifiers and cleared flags
        """
        indices = (
            SectorIndices.model_validate(initial_indices)
            if initial_indices
            else SectorIndices()
        )
        return cls(year=start_year, indices=indices)
