"""
Exceptions raised by the turn controller.
"""

from typing import Iterable

from fiveyearplan.models.game import Phase


class InvalidPhaseError(Exception):
    """An operation was called in a phase that does not allow it.

    This is an integration error on the caller's side; the session state
    is left exactly as it was.
    """

    def __init__(
        self,
        operation: str,
        phase: Phase,
        allowed: Iterable[Phase] = (),
        reason: str = "",
    ):
        self.operation = operation
        self.phase = phase
        self.allowed = tuple(allowed)
        self.reason = reason

        if reason:
            msg = f"{operation}() not allowed: {reason}"
        else:
            allowed_str = ", ".join(p.value for p in self.allowed) or "none"
            msg = (
                f"{operation}() not allowed in phase '{phase.value}' "
                f"(allowed: {allowed_str})"
            )
        super().__init__(msg)


class InvalidAllocationError(ValueError):
    """A budget share is outside the allowed range or names no sector."""

    def __init__(self, message: str, sector: str = "", value: object = None):
        self.sector = sector
        self.value = value
        super().__init__(message)
