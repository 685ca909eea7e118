"""
Data models for the Five-Year Plan simulation.

This module contains Pydantic models representing:
- Sectors, indices, rates and budget allocations
- Modifiers, flags and their deltas
- Scripted event identifiers and effects
- Game state and yearly reports
- End-of-game outcomes
"""

from fiveyearplan.models.sectors import (
    Allocation,
    Goal,
    Sector,
    SectorIndices,
    SectorRates,
)
from fiveyearplan.models.modifiers import (
    FlagDelta,
    Flags,
    ModifierDelta,
    Modifiers,
)
from fiveyearplan.models.events import (
    EventEffect,
    EventId,
    ScriptedEvent,
)
from fiveyearplan.models.game import (
    GameState,
    Phase,
    ReportData,
    TurnRecord,
)
from fiveyearplan.models.outcome import (
    Achievement,
    Ending,
    Outcome,
)

__all__ = [
    # Sectors
    "Allocation",
    "Goal",
    "Sector",
    "SectorIndices",
    "SectorRates",
    # Modifiers
    "FlagDelta",
    "Flags",
    "ModifierDelta",
    "Modifiers",
    # Events
    "EventEffect",
    "EventId",
    "ScriptedEvent",
    # Game
    "GameState",
    "Phase",
    "ReportData",
    "TurnRecord",
    # Outcome
    "Achievement",
    "Ending",
    "Outcome",
]
