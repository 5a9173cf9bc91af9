"""Tick-based combat simulation engine.

Usage::

    from tbc_sim.sim import Simulation

    sim = Simulation(stats, ["Icon of the Silver Crescent"], options)
    metrics = sim.run()
"""

from .engine import Simulation
from .errors import ConfigurationError, InvariantViolation, SimulationError
from .metrics import SimMetrics
from .runner import BatchRunner

__all__ = [
    "Simulation",
    "BatchRunner",
    "SimMetrics",
    "SimulationError",
    "ConfigurationError",
    "InvariantViolation",
]
