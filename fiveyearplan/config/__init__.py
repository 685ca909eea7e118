"""
Configuration management for the Five-Year Plan simulation.

This module provides:
- Default tuning constants
- Configuration schema and validation
- Support for custom configuration files (JSON/YAML)
"""

from fiveyearplan.config.defaults import DEFAULT_CONFIG
from fiveyearplan.config.schema import (
    AchievementThresholdsConfig,
    AllocationConfig,
    EndingThresholdsConfig,
    GrowthConfig,
    HeavyGrowthConfig,
    IndicesConfig,
    OutcomeConfig,
    PlanConfig,
    RocketConfig,
    SectorGrowthConfig,
    TimelineConfig,
    get_default_config,
)

__all__ = [
    # Plain constants
    "DEFAULT_CONFIG",
    # Pydantic config classes
    "AchievementThresholdsConfig",
    "AllocationConfig",
    "EndingThresholdsConfig",
    "GrowthConfig",
    "HeavyGrowthConfig",
    "IndicesConfig",
    "OutcomeConfig",
    "PlanConfig",
    "RocketConfig",
    "SectorGrowthConfig",
    "TimelineConfig",
    # Functions
    "get_default_config",
]
