"""
Five-Year Plan simulation engine.

This module contains the core simulation logic:
- Growth model (per-sector yearly rates, floor clamp)
- Scripted event registry and effect reducer
- Rocket program latches
- Outcome classification (endings and achievements)
- Allocation validation
- Turn controller (Session state machine)
"""

from fiveyearplan.engine.errors import (
    InvalidAllocationError,
    InvalidPhaseError,
)
from fiveyearplan.engine.events import (
    EVENT_REGISTRY,
    EventText,
    apply_effect,
    describe,
    effect_for,
    event_for_year,
)
from fiveyearplan.engine.growth import (
    apply_growth,
    compute_growth,
    soviet_aid,
)
from fiveyearplan.engine.outcome import (
    classify,
    classify_ending,
    evaluate_achievements,
)
from fiveyearplan.engine.rocket import (
    RocketStatus,
    evaluate_rocket,
)
from fiveyearplan.engine.validation import (
    ValidationError,
    ValidationResult,
    validate_allocation,
)

__all__ = [
    # Errors
    "InvalidAllocationError",
    "InvalidPhaseError",
    # Events
    "EVENT_REGISTRY",
    "EventText",
    "apply_effect",
    "describe",
    "effect_for",
    "event_for_year",
    # Growth
    "apply_growth",
    "compute_growth",
    "soviet_aid",
    # Outcome
    "classify",
    "classify_ending",
    "evaluate_achievements",
    # Rocket
    "RocketStatus",
    "evaluate_rocket",
    # Validation
    "ValidationError",
    "ValidationResult",
    "validate_allocation",
    # Session
    "Session",
]

from fiveyearplan.engine.simulation import Session
