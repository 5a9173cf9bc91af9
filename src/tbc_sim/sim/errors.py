"""Simulation errors."""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for errors raised by the simulator."""


class ConfigurationError(SimulationError, ValueError):
    """The options cannot produce a usable simulation (e.g. empty rotation)."""


class InvariantViolation(SimulationError):
    """Runtime state reached an impossible value.

    Signals a defect in resolution or advance logic, never a valid
    encounter state.  The in-progress run is discarded.
    """
