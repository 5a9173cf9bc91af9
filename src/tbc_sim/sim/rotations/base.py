"""Base class for spell selection strategies.

The engine calls :meth:`Rotation.choose` whenever the caster is idle.  A
rotation either commits a cast (by setting ``sim.casting``) and returns its
cast time in ticks, or commits nothing and returns how many ticks to wait
before the next decision.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from tbc_sim.sim.core.clock import TICKS_PER_SECOND

if TYPE_CHECKING:
    from tbc_sim.ir.spells import SpellDefinition
    from tbc_sim.sim.core.cast import Cast
    from tbc_sim.sim.engine import Simulation


class Rotation(ABC):
    """Picks the next spell for an idle caster."""

    def __init__(self, spells: list[SpellDefinition]) -> None:
        self.spells = spells

    @property
    def names(self) -> list[str]:
        return [spell.name for spell in self.spells]

    @abstractmethod
    def choose(self, sim: Simulation) -> int:
        """Commit the next cast or decide to wait.

        Returns
        -------
        int
            Ticks to advance.  The cast time of a committed cast (``0`` for
            an instant, which then resolves on the next decision step), or
            the wait until something becomes castable.
        """

    def reset(self) -> None:
        """Forget any per-run position.  Called at every simulation reset."""

    def _commit(self, sim: Simulation, cast: Cast) -> int:
        sim.casting = cast
        sim.log.debug(
            "Casting %s (%0.0f mana, %d ticks)",
            cast.spell.name, cast.mana_cost, cast.ticks_until_cast,
        )
        return cast.ticks_until_cast

    def _record_oom(self, sim: Simulation) -> None:
        if not sim.metrics.ran_out_of_mana:
            sim.log.debug("Out of mana at %0.0f", sim.current_mana)
        sim.metrics.record_oom(sim.current_tick, TICKS_PER_SECOND)
