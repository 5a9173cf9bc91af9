"""Combat log -- logging adapter that stamps records with simulated time."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, MutableMapping

from tbc_sim.sim.core.clock import TICKS_PER_SECOND

if TYPE_CHECKING:
    from tbc_sim.sim.engine import Simulation

DEFAULT_LOGGER = logging.getLogger("tbc_sim.sim.combat")


class CombatLog(logging.LoggerAdapter):
    """Prefix every message with ``[seconds]`` of the owning simulation.

    The wrapped logger is silent unless the application configures
    logging, so a simulation built without one does no formatting work.
    """

    def __init__(self, logger: logging.Logger, sim: Simulation) -> None:
        super().__init__(logger, {})
        self._sim = sim

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any],
    ) -> tuple[Any, MutableMapping[str, Any]]:
        seconds = self._sim.current_tick / TICKS_PER_SECOND
        return f"[{seconds:0.1f}] {msg}", kwargs
