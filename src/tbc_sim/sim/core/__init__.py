"""Core simulation primitives for the caster simulator."""

from tbc_sim.sim.core.aura import Aura
from tbc_sim.sim.core.cast import Cast
from tbc_sim.sim.core.clock import (
    NEVER_EXPIRES,
    TICKS_PER_SECOND,
    seconds_to_ticks,
    ticks_to_seconds,
)
from tbc_sim.sim.core.combat_log import CombatLog
from tbc_sim.sim.core.rng import SimRNG

__all__ = [
    # rng
    "SimRNG",
    # clock
    "NEVER_EXPIRES",
    "TICKS_PER_SECOND",
    "seconds_to_ticks",
    "ticks_to_seconds",
    # runtime values
    "Aura",
    "Cast",
    # logging
    "CombatLog",
]
