"""
Configuration schema for the Five-Year Plan simulation.

Provides Pydantic models for configuration validation and type safety.
Defaults come from ``fiveyearplan.config.defaults`` and reproduce the
stock game exactly; a file or dict only needs the values it changes.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from fiveyearplan.config import defaults


class TimelineConfig(BaseModel):
    """Simulation horizon."""

    start_year: int = Field(
        default=defaults.START_YEAR,
        description="First playable year",
    )
    end_year: int = Field(
        default=defaults.END_YEAR,
        description="Last playable year",
    )
    checkpoint_year: int = Field(
        default=defaults.CHECKPOINT_YEAR,
        description="Entering this year shows the mid-horizon summary",
    )

    @model_validator(mode="after")
    def check_order(self) -> "TimelineConfig":
        """Ensure start <= checkpoint <= end."""
        if self.end_year < self.start_year:
            raise ValueError(
                f"end_year {self.end_year} is before start_year {self.start_year}"
            )
        if not self.start_year < self.checkpoint_year <= self.end_year:
            raise ValueError(
                f"checkpoint_year {self.checkpoint_year} must fall after "
                f"{self.start_year} and no later than {self.end_year}"
            )
        return self


class IndicesConfig(BaseModel):
    """Initial sector indices and the floor clamp."""

    initial: dict[str, float] = Field(
        default_factory=lambda: dict(defaults.INITIAL_INDICES),
        description="Starting index per sector; also the baseline for growth ratios",
    )
    floor: float = Field(
        default=defaults.INDEX_FLOOR,
        gt=0.0,
        description="Minimum stored value of any sector index",
    )

    @field_validator("initial", mode="before")
    @classmethod
    def fill_missing_sectors(cls, v: Any) -> Any:
        """Sectors left out of a partial config keep their stock index."""
        if isinstance(v, dict):
            return {**defaults.INITIAL_INDICES, **v}
        return v


class SectorGrowthConfig(BaseModel):
    """Linear growth coefficients for one sector."""

    base_rate: float = Field(ge=0.0, description="Base growth rate at 100% allocation")
    multiplier: float = Field(ge=0.0, description="Sector scale factor")


class HeavyGrowthConfig(SectorGrowthConfig):
    """Heavy industry growth, with the investment-threshold bonus."""

    base_rate: float = Field(default=defaults.HEAVY_GROWTH["base_rate"], ge=0.0)
    multiplier: float = Field(default=defaults.HEAVY_GROWTH["multiplier"], ge=0.0)
    threshold: int = Field(
        default=int(defaults.HEAVY_GROWTH["threshold"]),
        ge=0,
        le=100,
        description="Allocation strictly above this earns the bonus",
    )
    threshold_bonus: float = Field(
        default=defaults.HEAVY_GROWTH["threshold_bonus"],
        ge=1.0,
        description="Multiplier applied to the heavy rate above the threshold",
    )


def _light_default() -> SectorGrowthConfig:
    return SectorGrowthConfig(**defaults.LIGHT_GROWTH)


def _agri_default() -> SectorGrowthConfig:
    return SectorGrowthConfig(**defaults.AGRI_GROWTH)


class GrowthConfig(BaseModel):
    """Economic model coefficients."""

    heavy: HeavyGrowthConfig = Field(default_factory=HeavyGrowthConfig)
    light: SectorGrowthConfig = Field(default_factory=_light_default)
    agri: SectorGrowthConfig = Field(default_factory=_agri_default)
    soviet_aid: float = Field(
        default=defaults.SOVIET_AID,
        ge=0.0,
        description="Added to the heavy base rate while aid flows",
    )
    soviet_aid_cutoff_year: int = Field(
        default=defaults.SOVIET_AID_CUTOFF_YEAR,
        description="Aid stops from this year on, split or not",
    )
    famine_penalty: float = Field(
        default=defaults.FAMINE_PENALTY,
        ge=0.0,
        description="Flat amount subtracted from the agriculture rate",
    )
    famine_years: tuple[int, int] = Field(
        default=(defaults.FAMINE_START_YEAR, defaults.FAMINE_END_YEAR),
        description="Inclusive year range of the famine penalty",
    )

    def is_famine_year(self, year: int) -> bool:
        """Check whether the agriculture penalty applies in a year."""
        first, last = self.famine_years
        return first <= year <= last


class RocketConfig(BaseModel):
    """Rocket program trigger thresholds (growth ratios)."""

    earliest_year: int = Field(default=defaults.ROCKET_PROGRAM["earliest_year"])
    heavy_ratio_to_start: float = Field(default=defaults.ROCKET_PROGRAM["heavy_ratio_to_start"])
    light_ratio_to_start: float = Field(default=defaults.ROCKET_PROGRAM["light_ratio_to_start"])
    heavy_ratio_to_launch: float = Field(default=defaults.ROCKET_PROGRAM["heavy_ratio_to_launch"])


class EndingThresholdsConfig(BaseModel):
    """Growth-ratio thresholds of the ending decision list."""

    agri_neglect_ratio: float = Field(default=defaults.ENDING_THRESHOLDS["agri_neglect_ratio"])
    industrial_giant_ratio: float = Field(
        default=defaults.ENDING_THRESHOLDS["industrial_giant_ratio"]
    )
    balanced_agri_ratio: float = Field(default=defaults.ENDING_THRESHOLDS["balanced_agri_ratio"])
    balanced_heavy_ratio: float = Field(default=defaults.ENDING_THRESHOLDS["balanced_heavy_ratio"])


class AchievementThresholdsConfig(BaseModel):
    """Absolute final index thresholds for achievements."""

    heavy: float = Field(default=defaults.ACHIEVEMENT_THRESHOLDS["heavy"], ge=0.0)
    agri: float = Field(default=defaults.ACHIEVEMENT_THRESHOLDS["agri"], ge=0.0)
    light: float = Field(default=defaults.ACHIEVEMENT_THRESHOLDS["light"], ge=0.0)
    self_reliance_heavy: float = Field(
        default=defaults.ACHIEVEMENT_THRESHOLDS["self_reliance_heavy"], ge=0.0
    )


class OutcomeConfig(BaseModel):
    """End-game classification thresholds."""

    endings: EndingThresholdsConfig = Field(default_factory=EndingThresholdsConfig)
    achievements: AchievementThresholdsConfig = Field(default_factory=AchievementThresholdsConfig)


class AllocationConfig(BaseModel):
    """Budget allocation bounds and goal presets.

    ``minimum`` and ``maximum`` can only tighten the 5-90% slider range: shares
    outside it are rejected by ``Allocation`` before validation runs.
    """

    minimum: int = Field(default=defaults.ALLOCATION_MIN, ge=0)
    maximum: int = Field(default=defaults.ALLOCATION_MAX, le=100)
    total: int = Field(
        default=defaults.ALLOCATION_TOTAL,
        description="Required sum of the three shares",
    )
    goal_defaults: dict[str, dict[str, int]] = Field(
        default_factory=lambda: {k: dict(v) for k, v in defaults.GOAL_ALLOCATIONS.items()},
        description="Allocation seeded when a goal is selected",
    )
    famine_agri_warning: int = Field(
        default=defaults.FAMINE_AGRI_WARNING,
        ge=0,
        le=100,
        description="Warn when agriculture gets less than this in a famine year",
    )

    @field_validator("goal_defaults", mode="before")
    @classmethod
    def fill_missing_goals(cls, v: Any) -> Any:
        """Goals and shares left out of a partial config keep their presets."""
        if not isinstance(v, dict):
            return v
        presets = {k: dict(p) for k, p in defaults.GOAL_ALLOCATIONS.items()}
        for goal, shares in v.items():
            if isinstance(shares, dict):
                presets[goal] = {**presets.get(goal, {}), **shares}
            else:
                presets[goal] = shares
        return presets


class PlanConfig(BaseModel):
    """Complete Five-Year Plan configuration.

    This is the top-level configuration object that contains all
    simulation parameters.
    """

    timeline: TimelineConfig = Field(default_factory=TimelineConfig)
    indices: IndicesConfig = Field(default_factory=IndicesConfig)
    growth: GrowthConfig = Field(default_factory=GrowthConfig)
    rocket: RocketConfig = Field(default_factory=RocketConfig)
    outcome: OutcomeConfig = Field(default_factory=OutcomeConfig)
    allocation: AllocationConfig = Field(default_factory=AllocationConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlanConfig":
        """Create configuration from a dictionary.

        Args:
            data: Configuration dictionary (can be partial)

        Returns:
            PlanConfig with defaults for any missing values
        """
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "PlanConfig":
        """Load configuration from a JSON or YAML file.

        Args:
            path: Path to configuration file (.json or .yaml/.yml)

        Returns:
            Parsed configuration

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file format is not supported
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        suffix = path.suffix.lower()

        if suffix == ".json":
            import json

            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        elif suffix in (".yaml", ".yml"):
            import yaml  # type: ignore[import-untyped]

            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        else:
            raise ValueError(
                f"Unsupported config file format: {suffix}. "
                "Use .json or .yaml/.yml"
            )

        return cls.from_dict(data or {})

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain (JSON-compatible) dictionary."""
        return self.model_dump(mode="json")

    def to_file(self, path: str | Path) -> None:
        """Save configuration to a JSON or YAML file.

        Args:
            path: Path to save configuration to

        Raises:
            ValueError: If file format is not supported
        """
        path = Path(path)
        suffix = path.suffix.lower()
        data = self.to_dict()

        if suffix == ".json":
            import json

            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        elif suffix in (".yaml", ".yml"):
            import yaml  # type: ignore[import-untyped]

            with open(path, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            raise ValueError(
                f"Unsupported config file format: {suffix}. "
                "Use .json or .yaml/.yml"
            )

    def merge(self, overrides: dict[str, Any]) -> "PlanConfig":
        """Create a new config with overrides applied.

        Args:
            overrides: Dictionary of values to override

        Returns:
            New PlanConfig with overrides merged in
        """
        base = self.to_dict()
        _deep_merge(base, overrides)
        return PlanConfig.from_dict(base)


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> None:
    """Deep merge overrides into base dict (in place)."""
    for key, value in overrides.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def get_default_config() -> PlanConfig:
    """Get the default configuration.

    Returns:
        PlanConfig with all default values
    """
    return PlanConfig()
