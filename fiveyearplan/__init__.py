"""
Five-Year Plan Simulator - A turn-based economic planning game

Allocate the national budget between heavy industry, light industry and
agriculture through 1953-1962, answer the decade's historical turning
points, and see what kind of country you have built.

This package provides:
- Core yearly simulation engine (growth model, events, endings)
- Session state machine for presentation layers
- CLI interface for playing the game
- Configurable parameters for simulation tuning
"""

__version__ = "0.1.0"

from fiveyearplan.config.defaults import DEFAULT_CONFIG
from fiveyearplan.engine.simulation import Session

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
    "Session",
]
