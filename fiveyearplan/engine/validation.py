"""
Budget allocation validation.

Checks an allocation before it is committed. A sum other than 100% is a
recoverable error: the budget is simply not executed and the player is
asked to correct it. Warnings point out choices that are legal but cost
growth; they never block a commit.
"""

from dataclasses import dataclass, field
from typing import Optional

from fiveyearplan.config.schema import PlanConfig, get_default_config
from fiveyearplan.models.sectors import Allocation, Sector


@dataclass
class ValidationError:
    """A single validation error or warning."""

    field: str
    message: str
    value: Optional[str] = None
    suggestion: Optional[str] = None

    def __str__(self) -> str:
        msg = f"{self.field}: {self.message}"
        if self.value:
            msg += f" (got: {self.value})"
        if self.suggestion:
            msg += f" - {self.suggestion}"
        return msg


@dataclass
class ValidationResult:
    """Result of validating an allocation."""

    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @classmethod
    def success(cls) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(valid=True)

    @classmethod
    def failure(cls, errors: list[ValidationError]) -> "ValidationResult":
        """Create a failed validation result."""
        return cls(valid=False, errors=errors)

    def add_error(self, error: ValidationError) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.valid = False

    def add_warning(self, warning: ValidationError) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(warning)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another result into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        if not other.valid:
            self.valid = False


def validate_allocation(
    allocation: Allocation,
    year: int,
    config: Optional[PlanConfig] = None,
) -> ValidationResult:
    """Validate an allocation for the given year.

    Args:
        allocation: Budget shares to validate
        year: Year the budget would be executed in
        config: Simulation configuration (defaults if None)

    Returns:
        ValidationResult with any errors/warnings
    """
    config = config or get_default_config()
    result = ValidationResult(valid=True)

    result.merge(_validate_ranges(allocation, config))
    result.merge(_validate_total(allocation, config))
    result.merge(_check_heavy_threshold(allocation, config))
    result.merge(_check_famine_agriculture(allocation, year, config))

    return result


def _validate_ranges(allocation: Allocation, config: PlanConfig) -> ValidationResult:
    """Validate every share is within the configured slider range."""
    result = ValidationResult(valid=True)
    bounds = config.allocation

    for sector in Sector:
        share = allocation.get(sector)
        if not bounds.minimum <= share <= bounds.maximum:
            result.add_error(ValidationError(
                field=sector.value,
                message="Share is outside the allowed range",
                value=f"{share}%",
                suggestion=f"Use a value between {bounds.minimum}% and {bounds.maximum}%",
            ))

    return result


def _validate_total(allocation: Allocation, config: PlanConfig) -> ValidationResult:
    """Validate the shares add up to the full budget."""
    result = ValidationResult(valid=True)
    required = config.allocation.total

    if allocation.total != required:
        difference = required - allocation.total
        action = "Add" if difference > 0 else "Remove"
        result.add_error(ValidationError(
            field="total",
            message=f"Allocation must total exactly {required}%",
            value=f"{allocation.total}%",
            suggestion=f"{action} {abs(difference)}% across the sectors",
        ))

    return result


def _check_heavy_threshold(allocation: Allocation, config: PlanConfig) -> ValidationResult:
    """Warn when heavy industry misses the investment bonus."""
    result = ValidationResult(valid=True)
    threshold = config.growth.heavy.threshold

    if allocation.heavy <= threshold:
        result.add_warning(ValidationError(
            field=Sector.HEAVY.value,
            message="Heavy industry share earns no concentrated-investment bonus",
            value=f"{allocation.heavy}%",
            suggestion=f"Allocate more than {threshold}% to gain the bonus",
        ))

    return result


def _check_famine_agriculture(
    allocation: Allocation,
    year: int,
    config: PlanConfig,
) -> ValidationResult:
    """Warn about a thin agriculture budget during the famine years."""
    result = ValidationResult(valid=True)
    minimum = config.allocation.famine_agri_warning

    if config.growth.is_famine_year(year) and allocation.agri < minimum:
        result.add_warning(ValidationError(
            field=Sector.AGRI.value,
            message="Agriculture is underfunded during a natural disaster year",
            value=f"{allocation.agri}%",
            suggestion=f"Consider at least {minimum}% for agriculture",
        ))

    return result
