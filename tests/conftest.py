"""
Pytest configuration and fixtures for Five-Year Plan tests.
"""

import pytest

from fiveyearplan.config.schema import PlanConfig, get_default_config
from fiveyearplan.engine.simulation import Session
from fiveyearplan.models.game import GameState, Phase, ReportData
from fiveyearplan.models.modifiers import Flags, Modifiers
from fiveyearplan.models.sectors import Allocation, Goal, SectorIndices, SectorRates


@pytest.fixture
def config() -> PlanConfig:
    """Return the stock configuration."""
    return get_default_config()


@pytest.fixture
def session() -> Session:
    """Return a fresh session in the setup phase."""
    return Session()


@pytest.fixture
def industrial_session(session: Session) -> Session:
    """Return a session playing 1953 with the industrial goal."""
    session.select_goal(Goal.INDUSTRIAL)
    return session


@pytest.fixture
def industrial_allocation() -> Allocation:
    """Return the industrial goal preset (55/25/20)."""
    return Allocation(heavy=55, light=25, agri=20)


@pytest.fixture
def default_modifiers() -> Modifiers:
    return Modifiers()


@pytest.fixture
def default_flags() -> Flags:
    return Flags()


def report_state(
    year: int,
    heavy: float,
    light: float,
    agri: float = 750.0,
    **updates,
) -> GameState:
    """Build a state sitting in an event-free report phase."""
    state = GameState(
        year=year,
        indices=SectorIndices(heavy=heavy, light=light, agri=agri),
        selected_goal=Goal.INDUSTRIAL,
        phase=Phase.REPORT,
        report=ReportData(
            year=year,
            rates=SectorRates(heavy=0.0, light=0.0, agri=0.0),
            event=None,
        ),
    )
    return state.model_copy(update=updates)
