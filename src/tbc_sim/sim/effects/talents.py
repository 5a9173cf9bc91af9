"""Elemental talent effects: Lightning Overload, Elemental Focus, Elemental Mastery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tbc_sim.ir.abilities import AbilityKey, AuraId
from tbc_sim.ir.spells import SpellCategory
from tbc_sim.sim.core.aura import Aura
from tbc_sim.sim.core.clock import seconds_to_ticks
from tbc_sim.sim.effects.base import AuraEffect, CastEffect
from tbc_sim.sim.mechanics.auras import remove_aura
from tbc_sim.sim.mechanics.cooldowns import arm_cooldown
from tbc_sim.sim.mechanics.damage import resolve_proc

if TYPE_CHECKING:
    from tbc_sim.sim.core.cast import Cast
    from tbc_sim.sim.engine import Simulation

OVERLOAD_CHANCE_PER_RANK = 0.04
OVERLOAD_DAMAGE_SCALE = 0.5

ELEMENTAL_FOCUS_DURATION = 15
ELEMENTAL_FOCUS_CHARGES = 2
ELEMENTAL_FOCUS_COST_MULTIPLIER = 0.6

ELEMENTAL_MASTERY_COOLDOWN = 180
GUARANTEED_CRIT = 1.01


# ---------------------------------------------------------------------------
# Lightning Overload
# ---------------------------------------------------------------------------

class LightningOverload(AuraEffect):
    """Arms an :class:`OverloadProc` on every Lightning cast."""

    def __init__(self, rank: int) -> None:
        self.chance = OVERLOAD_CHANCE_PER_RANK * rank

    def on_cast(self, sim: Simulation, cast: Cast) -> None:
        if cast.spell.category == SpellCategory.LIGHTNING:
            cast.effects.append(OverloadProc(self.chance))


class OverloadProc(CastEffect):
    """Chance for a landed Lightning spell to fire a half-damage copy."""

    def __init__(self, chance: float) -> None:
        self.chance = chance

    def apply(self, sim: Simulation, cast: Cast) -> None:
        if sim.rng.chance(self.chance):
            resolve_proc(sim, cast.spell.id, scale=OVERLOAD_DAMAGE_SCALE)


def lightning_overload_aura(rank: int) -> Aura:
    return Aura(id=AuraId.LIGHTNING_OVERLOAD, effect=LightningOverload(rank))


# ---------------------------------------------------------------------------
# Elemental Focus (clearcasting after a crit)
# ---------------------------------------------------------------------------

class ElementalFocus(AuraEffect):
    """Reduces the cost of the next two casts by 40%."""

    def __init__(self) -> None:
        self.charges = ELEMENTAL_FOCUS_CHARGES

    def on_cast(self, sim: Simulation, cast: Cast) -> None:
        cast.mana_cost *= ELEMENTAL_FOCUS_COST_MULTIPLIER

    def on_cast_complete(self, sim: Simulation, cast: Cast) -> None:
        self.charges -= 1
        if self.charges <= 0:
            remove_aura(sim, AuraId.ELEMENTAL_FOCUS)


def elemental_focus_aura(sim: Simulation) -> Aura:
    return Aura(
        id=AuraId.ELEMENTAL_FOCUS,
        expires_at=sim.current_tick + seconds_to_ticks(ELEMENTAL_FOCUS_DURATION),
        effect=ElementalFocus(),
    )


# ---------------------------------------------------------------------------
# Elemental Mastery
# ---------------------------------------------------------------------------

class ElementalMastery(AuraEffect):
    """Next cast is free and always crits; consumed when it completes."""

    def on_cast(self, sim: Simulation, cast: Cast) -> None:
        cast.crit_chance = GUARANTEED_CRIT
        cast.mana_cost = 0.0

    def on_cast_complete(self, sim: Simulation, cast: Cast) -> None:
        remove_aura(sim, AuraId.ELEMENTAL_MASTERY)
        arm_cooldown(
            sim.cooldowns,
            AbilityKey.ELEMENTAL_MASTERY,
            seconds_to_ticks(ELEMENTAL_MASTERY_COOLDOWN),
        )


def elemental_mastery_aura() -> Aura:
    return Aura(id=AuraId.ELEMENTAL_MASTERY, effect=ElementalMastery())
