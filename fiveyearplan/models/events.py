"""
Scripted event identifiers and their declarative effects.

The narrative text for each event lives in the locale files; this module
only carries what the engine needs to mutate state.
"""

from enum import Enum

from pydantic import BaseModel, Field

from fiveyearplan.models.modifiers import FlagDelta, ModifierDelta


class EventId(str, Enum):
    """Scripted historical events, one per trigger year."""

    AGRICULTURAL_COLLECTIVIZATION = "agricultural_collectivization"
    SOCIALIST_TRANSFORMATION = "socialist_transformation"
    GREAT_LEAP_FORWARD = "great_leap_forward"
    SOVIET_WITHDRAWAL = "soviet_withdrawal"


class EventEffect(BaseModel):
    """What accepting an event does to modifiers and flags."""

    modifiers: ModifierDelta = Field(default_factory=ModifierDelta)
    flags: FlagDelta = Field(default_factory=FlagDelta)


class ScriptedEvent(BaseModel):
    """An entry in the event registry."""

    event_id: EventId
    year: int = Field(description="Year whose report offers this event")
    effect: EventEffect = Field(default_factory=EventEffect)
