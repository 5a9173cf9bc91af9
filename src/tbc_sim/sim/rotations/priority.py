"""Priority rotation: cast the first spell in the list that is castable now."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tbc_sim.sim.mechanics.casting import new_cast
from tbc_sim.sim.mechanics.cooldowns import remaining
from tbc_sim.sim.mechanics.mana import ticks_until_affordable
from tbc_sim.sim.rotations.base import Rotation

if TYPE_CHECKING:
    from tbc_sim.sim.engine import Simulation


class PriorityRotation(Rotation):
    """Evaluates every spell in list order at each decision.

    When nothing is castable the caster waits for whichever comes first:
    the shortest remaining cooldown, or enough regeneration to afford a
    spell that is off cooldown.  The out-of-mana event is recorded only
    when a spell was ready but unaffordable.
    """

    def choose(self, sim: Simulation) -> int:
        cooldown_waits: list[int] = []
        mana_waits: list[int] = []

        for spell in self.spells:
            wait = remaining(sim.cooldowns, spell.id)
            if wait >= 1:
                cooldown_waits.append(wait)
                continue

            cast = new_cast(sim, spell)
            if cast.mana_cost <= sim.current_mana:
                return self._commit(sim, cast)
            mana_waits.append(ticks_until_affordable(sim, cast.mana_cost))

        if mana_waits:
            self._record_oom(sim)
        return min(cooldown_waits + mana_waits)
