"""Cast construction -- cost, hit, crit and cast time at selection time.

Pipeline (order matters):
    1. Mana cost, reduced by Convection for Lightning and Shock spells
    2. Hit chance: encounter base + hit rating + hit talents, capped
    3. Crit chance: crit rating + Lightning crit talents
    4. Cast time: Lightning Mastery, then haste
    5. Every active aura's ``on_cast`` hook may adjust the result
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tbc_sim.ir.spells import SpellCategory, SpellDefinition
from tbc_sim.ir.stats import (
    CRIT_RATING_PER_PERCENT,
    HASTE_RATING_PER_PERCENT,
    HIT_RATING_PER_PERCENT,
    Stat,
)
from tbc_sim.sim.core.cast import Cast
from tbc_sim.sim.core.clock import seconds_to_ticks

if TYPE_CHECKING:
    from tbc_sim.sim.engine import Simulation

_CONVECTION_SPELLS = frozenset({SpellCategory.LIGHTNING, SpellCategory.SHOCK})


def new_cast(sim: Simulation, spell: SpellDefinition, fire_hooks: bool = True) -> Cast:
    """Build a :class:`Cast` of *spell* from the caster's current state.

    Parameters
    ----------
    sim:
        The running simulation (read only, except through aura hooks).
    spell:
        The spell to cast.
    fire_hooks:
        Run the active auras' ``on_cast`` hooks.  Procs skip them.
    """
    talents = sim.options.talents
    encounter = sim.options.encounter
    is_lightning = spell.category == SpellCategory.LIGHTNING

    mana_cost = spell.mana_cost
    if spell.category in _CONVECTION_SPELLS:
        mana_cost *= 1 - 0.02 * talents.convection

    hit = (
        encounter.base_hit_chance
        + sim.effective(Stat.SPELL_HIT) / (HIT_RATING_PER_PERCENT * 100)
        + 0.01 * (talents.elemental_precision + talents.natures_guidance)
    )

    crit = sim.effective(Stat.SPELL_CRIT) / (CRIT_RATING_PER_PERCENT * 100)
    if is_lightning:
        crit += 0.01 * (talents.call_of_thunder + talents.tidal_mastery)

    cast_time = spell.cast_time
    if is_lightning:
        cast_time = max(0.0, cast_time - 0.1 * talents.lightning_mastery)
    cast_time /= 1 + sim.effective(Stat.SPELL_HASTE) / (HASTE_RATING_PER_PERCENT * 100)

    cast = Cast(
        spell=spell,
        mana_cost=mana_cost,
        hit_chance=min(hit, encounter.hit_cap),
        crit_chance=crit,
        ticks_until_cast=seconds_to_ticks(cast_time),
        cast_at_tick=sim.current_tick,
    )

    if fire_hooks:
        for effect in sim.active_effects():
            effect.on_cast(sim, cast)
    return cast
