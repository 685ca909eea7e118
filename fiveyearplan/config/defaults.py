"""
Default tuning constants for the Five-Year Plan simulation.

Every value here is part of the documented game balance. The pydantic
schema in ``fiveyearplan.config.schema`` uses these as its defaults, so an
engine built from ``get_default_config()`` plays exactly the stock game.

Growth ratios used by milestones and endings are always measured against
INITIAL_INDICES, never against the previous turn.
"""

from typing import Any

# =============================================================================
# TIMELINE
# =============================================================================

START_YEAR = 1953
END_YEAR = 1962

# Entering this year ends the first plan and shows the checkpoint summary
CHECKPOINT_YEAR = 1958

# =============================================================================
# SECTOR INDICES
# =============================================================================

INITIAL_INDICES: dict[str, float] = {
    "heavy": 100.0,
    "light": 150.0,
    "agri": 750.0,
}

# No sector index may fall below this after a growth step
INDEX_FLOOR = 10.0

# =============================================================================
# GROWTH MODEL
# =============================================================================

HEAVY_GROWTH: dict[str, float] = {
    "base_rate": 0.12,
    "multiplier": 2.2,
    # Allocation strictly above this earns the investment bonus
    "threshold": 45,
    "threshold_bonus": 1.1,
}

LIGHT_GROWTH: dict[str, float] = {
    "base_rate": 0.10,
    "multiplier": 1.4,
}

AGRI_GROWTH: dict[str, float] = {
    "base_rate": 0.04,
    "multiplier": 1.0,
}

# Soviet aid adds to the heavy base rate until the cut-off year or the split
SOVIET_AID = 0.08
SOVIET_AID_CUTOFF_YEAR = 1960

# Flat agricultural penalty applied after the efficiency multiplier
FAMINE_PENALTY = 0.04
FAMINE_START_YEAR = 1959
FAMINE_END_YEAR = 1961

# =============================================================================
# ROCKET PROGRAM
# =============================================================================

ROCKET_PROGRAM: dict[str, Any] = {
    "earliest_year": 1958,
    "heavy_ratio_to_start": 1.5,
    "light_ratio_to_start": 0.25,
    "heavy_ratio_to_launch": 3.0,
}

# =============================================================================
# ENDINGS AND ACHIEVEMENTS
# =============================================================================

ENDING_THRESHOLDS: dict[str, float] = {
    "agri_neglect_ratio": -0.1,
    "industrial_giant_ratio": 3.0,
    "balanced_agri_ratio": 0.5,
    "balanced_heavy_ratio": 1.0,
}

# Absolute final index thresholds, not ratios
ACHIEVEMENT_THRESHOLDS: dict[str, float] = {
    "heavy": 500.0,
    "agri": 1200.0,
    "light": 500.0,
    "self_reliance_heavy": 300.0,
}

# =============================================================================
# ALLOCATION
# =============================================================================

ALLOCATION_MIN = 5
ALLOCATION_MAX = 90
ALLOCATION_TOTAL = 100

GOAL_ALLOCATIONS: dict[str, dict[str, int]] = {
    "industrial": {"heavy": 55, "light": 25, "agri": 20},
    "agricultural": {"heavy": 30, "light": 35, "agri": 35},
}

# Agriculture share below this during the famine years draws a warning
FAMINE_AGRI_WARNING = 20


# =============================================================================
# CONSOLIDATED CONFIG
# =============================================================================

DEFAULT_CONFIG: dict[str, Any] = {
    "timeline": {
        "start_year": START_YEAR,
        "end_year": END_YEAR,
        "checkpoint_year": CHECKPOINT_YEAR,
    },
    "indices": {
        "initial": INITIAL_INDICES,
        "floor": INDEX_FLOOR,
    },
    "growth": {
        "heavy": HEAVY_GROWTH,
        "light": LIGHT_GROWTH,
        "agri": AGRI_GROWTH,
        "soviet_aid": SOVIET_AID,
        "soviet_aid_cutoff_year": SOVIET_AID_CUTOFF_YEAR,
        "famine_penalty": FAMINE_PENALTY,
        "famine_years": (FAMINE_START_YEAR, FAMINE_END_YEAR),
    },
    "rocket": ROCKET_PROGRAM,
    "outcome": {
        "endings": ENDING_THRESHOLDS,
        "achievements": ACHIEVEMENT_THRESHOLDS,
    },
    "allocation": {
        "minimum": ALLOCATION_MIN,
        "maximum": ALLOCATION_MAX,
        "total": ALLOCATION_TOTAL,
        "goal_defaults": GOAL_ALLOCATIONS,
        "famine_agri_warning": FAMINE_AGRI_WARNING,
    },
}
