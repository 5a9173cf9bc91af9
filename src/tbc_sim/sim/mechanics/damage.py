"""Damage rolls and proc resolution.

Implements the damage pipeline shared by player casts and procs:
    range roll + spell damage * coefficient -> crit x2 -> talent modifier
    -> flat partial resist

Every draw comes from the simulation's single RNG stream, so the order of
calls here is part of the replay contract.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tbc_sim.ir.abilities import AbilityKey
from tbc_sim.ir.spells import SpellCategory, SpellDefinition
from tbc_sim.ir.stats import Stat
from tbc_sim.sim.mechanics.casting import new_cast

if TYPE_CHECKING:
    from tbc_sim.sim.core.cast import Cast
    from tbc_sim.sim.engine import Simulation

CRIT_MULTIPLIER = 2.0


def roll_damage(sim: Simulation, cast: Cast) -> float:
    """Roll the base damage of *cast*: range roll plus scaled spell damage."""
    spell = cast.spell
    spread = int(spell.max_damage - spell.min_damage)
    base = spell.min_damage + sim.rng.random_below(spread)
    spell_damage = sim.effective(Stat.SPELL_DAMAGE) + cast.bonus_spell_damage
    return base + spell_damage * spell.coefficient


def talent_damage_multiplier(sim: Simulation, spell: SpellDefinition) -> float:
    """Concussion: +1% damage per rank on Lightning spells."""
    concussion = sim.options.talents.concussion
    if concussion > 0 and spell.category == SpellCategory.LIGHTNING:
        return 1 + 0.01 * concussion
    return 1.0


def roll_partial_resist(sim: Simulation, damage: float) -> tuple[float, bool]:
    """Roll the flat partial resist.  Returns ``(damage, was_resisted)``.

    The target's resistances are not modelled; a landed spell has a fixed
    chance to lose a fixed fraction of its damage.
    """
    encounter = sim.options.encounter
    if sim.rng.chance(encounter.partial_resist_chance):
        return damage * (1 - encounter.partial_resist_amount), True
    return damage, False


def resolve_proc(sim: Simulation, spell_id: AbilityKey, scale: float = 1.0) -> Cast:
    """Resolve a free proc of *spell_id* immediately and archive it.

    Procs roll their own hit, damage, crit and resist, cost no mana and
    fire no aura hooks.

    Parameters
    ----------
    sim:
        The running simulation.
    spell_id:
        Catalog spell the proc copies.
    scale:
        Damage multiplier (e.g. ``0.5`` for a Lightning Overload copy).
    """
    cast = new_cast(sim, sim.registry.get_spell(spell_id), fire_hooks=False)
    cast.mana_cost = 0.0
    cast.is_proc = True
    cast.ticks_until_cast = 0
    cast.resolved_at_tick = sim.current_tick

    if sim.rng.chance(cast.hit_chance):
        cast.did_hit = True
        damage = roll_damage(sim, cast) * scale
        if sim.rng.chance(cast.crit_chance):
            cast.did_crit = True
            damage *= CRIT_MULTIPLIER
        damage *= talent_damage_multiplier(sim, cast.spell)
        cast.did_damage, cast.partial_resist = roll_partial_resist(sim, damage)

    sim.log.debug("Proc %s: %0.0f", cast.spell.name, cast.did_damage)
    sim.metrics.record_cast(cast)
    return cast
