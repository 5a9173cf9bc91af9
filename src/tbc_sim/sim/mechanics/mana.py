"""Mana economy -- regeneration, restores, consumables and affordability.

Mana regenerates continuously from MP5 (mana per five seconds), spread
evenly over ticks.  Current mana is clamped to the stat bundle's maximum
whenever it is added; it is only ever reduced by completed casts.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from tbc_sim.ir.stats import Stat
from tbc_sim.sim.core.clock import TICKS_PER_SECOND, seconds_to_ticks
from tbc_sim.sim.mechanics.cooldowns import arm_cooldown, is_ready

if TYPE_CHECKING:
    from tbc_sim.sim.engine import Simulation


def mana_regen_per_tick(sim: Simulation) -> float:
    """Mana restored per tick: ``(base MP5 + buffed MP5) / 5 / ticks per second``."""
    return (sim.stats[Stat.MP5] + sim.buffs[Stat.MP5]) / 5.0 / TICKS_PER_SECOND


def regenerate(sim: Simulation, ticks: int) -> None:
    """Apply *ticks* worth of regeneration, capped at max mana."""
    restore_mana(sim, mana_regen_per_tick(sim) * ticks)


def restore_mana(sim: Simulation, amount: float) -> None:
    """Add *amount* mana, capped at the stat bundle's maximum."""
    sim.current_mana = min(sim.current_mana + amount, sim.stats[Stat.MANA])


def mana_deficit(sim: Simulation) -> float:
    """Missing mana plus one MP5 tick -- what a consumable may fill."""
    return sim.stats[Stat.MANA] - sim.current_mana + sim.stats[Stat.MP5]


def ticks_until_affordable(sim: Simulation, cost: float) -> int:
    """Ticks of regeneration needed before *cost* can be paid.

    Without any regeneration the caster waits out the rest of the
    encounter.  Always at least one tick.
    """
    regen = mana_regen_per_tick(sim)
    if regen <= 0:
        return max(1, sim.ticks_remaining)
    return max(1, math.ceil((cost - sim.current_mana) / regen))


def use_consumables(sim: Simulation) -> None:
    """Use every consumable whose threshold and cooldown allow it.

    Consumables are evaluated in catalog order and are not mutually
    exclusive: a large enough deficit can trigger several in one step.
    """
    for consumable in sim.registry.consumables:
        if mana_deficit(sim) < consumable.threshold:
            continue
        if not is_ready(sim.cooldowns, consumable.key):
            continue

        spread = consumable.max_restore - consumable.min_restore
        amount = consumable.min_restore + sim.rng.random_below(spread)
        restore_mana(sim, amount)
        arm_cooldown(sim.cooldowns, consumable.key, seconds_to_ticks(consumable.cooldown))
        sim.log.debug("Used %s (+%d mana)", consumable.name, amount)
