"""Item activation effects and the factory that turns an item into an aura."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tbc_sim.ir.items import ItemDefinition, ItemEffect, ItemEffectKind
from tbc_sim.ir.spells import SpellCategory
from tbc_sim.sim.core.aura import Aura
from tbc_sim.sim.core.clock import NEVER_EXPIRES, seconds_to_ticks
from tbc_sim.sim.effects.base import AuraEffect
from tbc_sim.sim.effects.buffs import StatBuff, stat_buff_aura
from tbc_sim.sim.mechanics.auras import add_aura
from tbc_sim.sim.mechanics.cooldowns import arm_cooldown, is_ready
from tbc_sim.sim.mechanics.damage import resolve_proc

if TYPE_CHECKING:
    from tbc_sim.ir.abilities import AbilityKey
    from tbc_sim.sim.core.cast import Cast
    from tbc_sim.sim.engine import Simulation


class StatProc(AuraEffect):
    """On spell hit, a chance to gain a temporary stat buff.

    The proc is gated by an internal cooldown stored in the engine's
    cooldown table under the item's key.
    """

    def __init__(self, key: AbilityKey, effect: ItemEffect) -> None:
        self.key = key
        self.effect = effect

    def on_spell_hit(self, sim: Simulation, cast: Cast) -> None:
        if not is_ready(sim.cooldowns, self.key):
            return
        if not sim.rng.chance(self.effect.proc_chance):
            return
        add_aura(sim, stat_buff_aura(
            sim,
            self.effect.proc_aura_id,
            self.effect.stat,
            self.effect.amount,
            self.effect.duration,
        ))
        arm_cooldown(sim.cooldowns, self.key, seconds_to_ticks(self.effect.internal_cooldown))


class SpellDamageBonus(AuraEffect):
    """Flat spell damage added to every cast of one category."""

    def __init__(self, category: SpellCategory, amount: float) -> None:
        self.category = category
        self.amount = amount

    def on_cast(self, sim: Simulation, cast: Cast) -> None:
        if cast.spell.category == self.category:
            cast.bonus_spell_damage += self.amount


class LightningCapacitor(AuraEffect):
    """Stores a charge per spell crit and discharges a bolt when full."""

    def __init__(self, key: AbilityKey, effect: ItemEffect) -> None:
        self.key = key
        self.effect = effect
        self.charges = 0

    def on_spell_hit(self, sim: Simulation, cast: Cast) -> None:
        if not cast.did_crit:
            return
        self.charges += 1
        if self.charges >= self.effect.charges and is_ready(sim.cooldowns, self.key):
            self.charges = 0
            resolve_proc(sim, self.effect.proc_spell)
            arm_cooldown(
                sim.cooldowns, self.key, seconds_to_ticks(self.effect.internal_cooldown),
            )


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def _stat_buff(sim: Simulation, item: ItemDefinition) -> AuraEffect:
    return StatBuff(item.effect.stat, item.effect.amount)


def _stat_proc(sim: Simulation, item: ItemDefinition) -> AuraEffect:
    return StatProc(item.cooldown_key, item.effect)


def _spell_damage_bonus(sim: Simulation, item: ItemDefinition) -> AuraEffect:
    return SpellDamageBonus(item.effect.spell_category, item.effect.amount)


def _lightning_capacitor(sim: Simulation, item: ItemDefinition) -> AuraEffect:
    return LightningCapacitor(item.cooldown_key, item.effect)


_EFFECT_BUILDERS: dict[ItemEffectKind, Callable[[Simulation, ItemDefinition], AuraEffect]] = {
    ItemEffectKind.STAT_BUFF: _stat_buff,
    ItemEffectKind.STAT_PROC: _stat_proc,
    ItemEffectKind.SPELL_DAMAGE_BONUS: _spell_damage_bonus,
    ItemEffectKind.LIGHTNING_CAPACITOR: _lightning_capacitor,
}


def build_item_aura(sim: Simulation, item: ItemDefinition) -> Aura:
    """Build the aura *item* grants when activated (or at reset if always active).

    Raises
    ------
    ValueError
        If *item* has no activation effect.
    """
    if item.effect is None:
        raise ValueError(f"Item {item.name!r} has no activation effect")

    builder = _EFFECT_BUILDERS[item.effect.kind]
    duration = item.effect.duration
    # Proc-style effects keep their duration for the buff they grant.
    if item.effect.kind != ItemEffectKind.STAT_BUFF or duration <= 0:
        expires_at = NEVER_EXPIRES
    else:
        expires_at = sim.current_tick + seconds_to_ticks(duration)
    return Aura(id=item.effect.aura_id, expires_at=expires_at, effect=builder(sim, item))
