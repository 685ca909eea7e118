"""
Scripted historical events.

Each event is registered under an EventId with the year whose annual
report offers it and a declarative effect. Accepting an event runs its
effect through ``apply_effect``; declining (or a year without an event)
changes nothing.

    1955  Agricultural collectivization   agri efficiency +0.15, heavy bonus +0.05
    1956  Socialist transformation        stability +0.1
    1958  Great Leap Forward              heavy efficiency +0.5, agri efficiency -0.3,
                                          sets great_leap
    1960  Soviet withdrawal               heavy efficiency +0.1, sets soviet_split
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fiveyearplan.i18n import t
from fiveyearplan.models.events import EventEffect, EventId, ScriptedEvent
from fiveyearplan.models.modifiers import FlagDelta, Flags, ModifierDelta, Modifiers

logger = logging.getLogger(__name__)


EVENT_REGISTRY: dict[EventId, ScriptedEvent] = {
    EventId.AGRICULTURAL_COLLECTIVIZATION: ScriptedEvent(
        event_id=EventId.AGRICULTURAL_COLLECTIVIZATION,
        year=1955,
        effect=EventEffect(
            modifiers=ModifierDelta(agri_efficiency_add=0.15, heavy_bonus_add=0.05),
        ),
    ),
    EventId.SOCIALIST_TRANSFORMATION: ScriptedEvent(
        event_id=EventId.SOCIALIST_TRANSFORMATION,
        year=1956,
        effect=EventEffect(
            modifiers=ModifierDelta(stability_add=0.1),
        ),
    ),
    EventId.GREAT_LEAP_FORWARD: ScriptedEvent(
        event_id=EventId.GREAT_LEAP_FORWARD,
        year=1958,
        effect=EventEffect(
            modifiers=ModifierDelta(heavy_efficiency_add=0.5, agri_efficiency_add=-0.3),
            flags=FlagDelta(set_great_leap=True),
        ),
    ),
    EventId.SOVIET_WITHDRAWAL: ScriptedEvent(
        event_id=EventId.SOVIET_WITHDRAWAL,
        year=1960,
        effect=EventEffect(
            modifiers=ModifierDelta(heavy_efficiency_add=0.1),
            flags=FlagDelta(set_soviet_split=True),
        ),
    ),
}

_EVENTS_BY_YEAR: dict[int, EventId] = {
    event.year: event_id for event_id, event in EVENT_REGISTRY.items()
}


@dataclass
class EventText:
    """Narrative copy for an event, looked up from the locale."""

    title: str
    description: str
    accept_label: str
    decline_label: str
    result: str


def event_for_year(year: int) -> Optional[EventId]:
    """Event offered in the report of a given year, if any."""
    return _EVENTS_BY_YEAR.get(year)


def effect_for(event_id: EventId) -> EventEffect:
    """Effect of accepting an event."""
    return EVENT_REGISTRY[EventId(event_id)].effect


def apply_effect(
    modifiers: Modifiers,
    flags: Flags,
    effect: EventEffect,
) -> tuple[Modifiers, Flags]:
    """Apply an event effect to modifiers and flags.

    Modifier deltas are added to the prior values; flag deltas can only
    raise a flag. The inputs are not changed.

    Returns:
        Tuple of (new modifiers, new flags)
    """
    new_modifiers = modifiers.apply(effect.modifiers)
    new_flags = flags.apply(effect.flags)
    logger.debug(
        "Applied effect %s / %s -> %s / %s",
        effect.modifiers.model_dump(),
        effect.flags.model_dump(),
        new_modifiers.model_dump(),
        new_flags.active,
    )
    return new_modifiers, new_flags


def describe(event_id: EventId) -> EventText:
    """Narrative text of an event in the current locale."""
    key = f"events.{EventId(event_id).value}"
    return EventText(
        title=t(f"{key}.title"),
        description=t(f"{key}.description"),
        accept_label=t(f"{key}.accept"),
        decline_label=t(f"{key}.decline"),
        result=t(f"{key}.result"),
    )
