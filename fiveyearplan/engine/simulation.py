"""
Turn controller for the Five-Year Plan simulation.

The Session owns the durable GameState and drives it through the phases:

    setup --select_goal--> playing --commit_budget--> report
    report --resolve_event / advance_year--> playing | summary
    summary (1958 checkpoint) --continue_to_phase2--> playing
    summary (after END_YEAR) is terminal; only restart() leaves it

Each year:
1. The player commits a budget allocation (must total exactly 100%)
2. The growth model computes the year's rates and new indices
3. The event registry is consulted for the year
4. The player accepts or declines the event (if any)
5. Rocket latches are evaluated on the indices before the year increments
6. The year advances, possibly into a summary

The budget allocation is transient player input. The session keeps the
pending one for convenience, but it is never part of GameState.
"""

import logging
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from fiveyearplan.config.schema import PlanConfig, get_default_config
from fiveyearplan.engine.errors import InvalidAllocationError, InvalidPhaseError
from fiveyearplan.engine.events import apply_effect, effect_for, event_for_year
from fiveyearplan.engine.growth import apply_growth, compute_growth
from fiveyearplan.engine.outcome import classify
from fiveyearplan.engine.rocket import evaluate_rocket
from fiveyearplan.engine.validation import ValidationResult, validate_allocation
from fiveyearplan.models.game import GameState, Phase, ReportData, TurnRecord
from fiveyearplan.models.outcome import Outcome
from fiveyearplan.models.sectors import Allocation, Goal, Sector

logger = logging.getLogger(__name__)


class Session:
    """A single game session, from goal selection to the final summary.

    Usage:
        session = Session()
        session.select_goal(Goal.INDUSTRIAL)
        result = session.commit_budget()
        if result.valid:
            session.resolve_event(accept=True)
    """

    def __init__(self, config: Optional[PlanConfig] = None):
        """Initialize a new session in the setup phase.

        Args:
            config: Simulation configuration (uses defaults if None)
        """
        self.config = config or get_default_config()
        self._state = self._new_state()
        self._allocation: Optional[Allocation] = None
        self._outcome: Optional[Outcome] = None

    def _new_state(self) -> GameState:
        return GameState.create_new(
            start_year=self.config.timeline.start_year,
            initial_indices=self.config.indices.initial,
        )

    # =========================================================================
    # Read-only projections
    # =========================================================================

    @property
    def state(self) -> GameState:
        """Current game state (replaced, never edited, on every action)."""
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def year(self) -> int:
        return self._state.year

    @property
    def allocation(self) -> Optional[Allocation]:
        """Pending budget allocation (None before a goal is selected)."""
        return self._allocation

    @property
    def is_checkpoint(self) -> bool:
        """In the mid-horizon summary that closes the first plan."""
        return (
            self._state.phase == Phase.SUMMARY
            and self._state.year == self.config.timeline.checkpoint_year
            and self._outcome is None
        )

    @property
    def is_final(self) -> bool:
        """In the terminal summary after the last year."""
        return self._state.phase == Phase.SUMMARY and self._outcome is not None

    def snapshot(self) -> GameState:
        """Deep copy of the state for presentation code."""
        return self._state.model_copy(deep=True)

    def outcome(self) -> Outcome:
        """Ending and achievements of a finished game.

        Raises:
            InvalidPhaseError: If the game has not reached its final summary
        """
        if not self.is_final or self._outcome is None:
            raise InvalidPhaseError(
                "outcome", self.phase, reason="the game has not finished yet"
            )
        return self._outcome

    # =========================================================================
    # Player actions
    # =========================================================================

    def _require(self, operation: str, *allowed: Phase) -> None:
        if self._state.phase not in allowed:
            raise InvalidPhaseError(operation, self._state.phase, allowed)

    def _pending_allocation(self, operation: str) -> Allocation:
        if self._allocation is None:
            raise InvalidPhaseError(
                operation, self._state.phase, reason="no allocation, select a goal first"
            )
        return self._allocation

    def select_goal(self, goal: Goal) -> None:
        """Pick the development goal and start playing.

        Seeds the pending allocation with the goal's preset.
        """
        self._require("select_goal", Phase.SETUP)
        goal = Goal(goal)

        self._allocation = Allocation.for_goal(goal, self.config.allocation.goal_defaults)
        self._state = self._state.model_copy(
            update={"selected_goal": goal, "phase": Phase.PLAYING}
        )
        logger.info("Goal selected: %s, playing %d", goal.value, self._state.year)

    def set_allocation(self, sector: Sector, percent: int) -> Allocation:
        """Change one sector's share of the pending allocation.

        Never touches the game state.

        Returns:
            The new pending Allocation

        Raises:
            InvalidAllocationError: Unknown sector or share outside 5-90%
        """
        self._require("set_allocation", Phase.PLAYING)
        current = self._pending_allocation("set_allocation")

        try:
            sector = Sector(sector)
        except ValueError as e:
            raise InvalidAllocationError(
                f"Unknown sector: {sector!r}", sector=str(sector), value=percent
            ) from e

        try:
            self._allocation = current.with_sector(sector, percent)
        except PydanticValidationError as e:
            raise InvalidAllocationError(
                f"Invalid share for {sector.value}: {percent!r}",
                sector=sector.value,
                value=percent,
            ) from e

        return self._allocation

    def commit_budget(self, allocation: Optional[Allocation] = None) -> ValidationResult:
        """Execute the year's budget.

        Args:
            allocation: Allocation to commit (the pending one if None)

        Returns:
            ValidationResult; when not valid, nothing in the game state
            has changed and the player should correct the allocation
        """
        self._require("commit_budget", Phase.PLAYING)
        if allocation is not None:
            self._allocation = allocation
        allocation = self._pending_allocation("commit_budget")

        state = self._state
        result = validate_allocation(allocation, state.year, self.config)
        if not result.valid:
            logger.info(
                "Budget for %d rejected: %s",
                state.year, "; ".join(str(e) for e in result.errors),
            )
            return result

        rates = compute_growth(
            state.indices,
            allocation,
            state.year,
            state.modifiers,
            state.flags,
            self.config,
        )
        indices = apply_growth(state.indices, rates, self.config.indices.floor)
        event = event_for_year(state.year)

        record = TurnRecord(
            year=state.year,
            allocation=allocation,
            rates=rates,
            indices=indices,
            event=event,
        )
        self._state = state.model_copy(
            update={
                "indices": indices,
                "phase": Phase.REPORT,
                "report": ReportData(year=state.year, rates=rates, event=event),
                "history": state.history + [record],
            }
        )
        logger.debug(
            "Indices after %d: heavy=%.2f light=%.2f agri=%.2f",
            state.year, indices.heavy, indices.light, indices.agri,
        )
        return result

    def resolve_event(self, accept: bool) -> None:
        """Answer the report's event and move on to the next year.

        A declined event, or a report without one, changes nothing
        before the year transition.
        """
        self._require("resolve_event", Phase.REPORT)
        state = self._state
        event = state.pending_event
        if event is not None:
            update: dict = {
                "history": state.history[:-1]
                + [state.history[-1].model_copy(update={"accepted": accept})],
            }
            if accept:
                modifiers, flags = apply_effect(state.modifiers, state.flags, effect_for(event))
                update["modifiers"] = modifiers
                update["flags"] = flags
            self._state = state.model_copy(update=update)
            logger.info("Event %s %s", event.value, "accepted" if accept else "declined")

        self._next_year()

    def advance_year(self) -> None:
        """Continue from a report that offered no event.

        Raises:
            InvalidPhaseError: Outside the report phase, or while an event
                still awaits a decision
        """
        self._require("advance_year", Phase.REPORT)
        if self._state.pending_event is not None:
            raise InvalidPhaseError(
                "advance_year",
                self._state.phase,
                reason=f"event '{self._state.pending_event.value}' awaits a decision",
            )
        self._next_year()

    def continue_to_phase2(self) -> None:
        """Leave the checkpoint summary and start the second plan."""
        if not self.is_checkpoint:
            raise InvalidPhaseError(
                "continue_to_phase2",
                self.phase,
                reason="only available at the mid-horizon summary",
            )
        self._state = self._state.model_copy(update={"phase": Phase.PLAYING})
        logger.info("Second plan started in %d", self._state.year)

    def restart(self) -> None:
        """Discard everything and return to the setup phase."""
        self._state = self._new_state()
        self._allocation = None
        self._outcome = None
        logger.info("Session restarted")

    # =========================================================================
    # Year transition
    # =========================================================================

    def _next_year(self) -> None:
        """Advance past the current year.

        Rocket latches are evaluated on the indices before the increment.
        """
        state = self._state
        timeline = self.config.timeline
        next_year = state.year + 1

        rocket = evaluate_rocket(
            state.indices,
            next_year,
            state.rocket_program_started,
            state.rocket_launched,
            self.config,
        )

        if next_year > timeline.end_year:
            self._state = state.model_copy(
                update={
                    "rocket_program_started": rocket.started,
                    "rocket_launched": rocket.launched,
                    "phase": Phase.SUMMARY,
                    "report": None,
                }
            )
            self._outcome = classify(self._state, self.config)
            logger.info("Plan complete after %d", state.year)
        elif next_year == timeline.checkpoint_year:
            self._state = state.model_copy(
                update={
                    "year": next_year,
                    "rocket_program_started": rocket.started,
                    "phase": Phase.SUMMARY,
                    "report": None,
                }
            )
            logger.info("First plan complete, checkpoint summary for %d", next_year)
        else:
            self._state = state.model_copy(
                update={
                    "year": next_year,
                    "rocket_program_started": rocket.started,
                    "phase": Phase.PLAYING,
                    "report": None,
                }
            )
            logger.debug("Advanced to %d", next_year)
