"""Tick-based combat rotation simulator for an elemental caster."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
