"""Fixed-order rotation: cycle through the list, waiting on the current entry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tbc_sim.sim.mechanics.casting import new_cast
from tbc_sim.sim.mechanics.cooldowns import remaining
from tbc_sim.sim.mechanics.mana import ticks_until_affordable
from tbc_sim.sim.rotations.base import Rotation

if TYPE_CHECKING:
    from tbc_sim.ir.spells import SpellDefinition
    from tbc_sim.sim.engine import Simulation


class FixedOrderRotation(Rotation):
    """Casts ``spells`` in order, wrapping around at the end.

    The rotation never skips an entry: if the current spell is on cooldown
    or unaffordable, the caster waits for it.
    """

    def __init__(self, spells: list[SpellDefinition]) -> None:
        super().__init__(spells)
        self.index = 0

    def reset(self) -> None:
        self.index = 0

    def choose(self, sim: Simulation) -> int:
        spell = self.spells[self.index]

        wait = remaining(sim.cooldowns, spell.id)
        if wait >= 1:
            return wait

        cast = new_cast(sim, spell)
        if cast.mana_cost <= sim.current_mana:
            self.index = (self.index + 1) % len(self.spells)
            return self._commit(sim, cast)

        self._record_oom(sim)
        return ticks_until_affordable(sim, cast.mana_cost)
