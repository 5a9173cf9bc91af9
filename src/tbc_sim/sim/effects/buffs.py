"""Stat overlays and raid buffs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tbc_sim.ir.abilities import AuraId
from tbc_sim.ir.stats import HASTE_RATING_PER_PERCENT, Stat
from tbc_sim.sim.core.aura import Aura
from tbc_sim.sim.core.clock import NEVER_EXPIRES, seconds_to_ticks
from tbc_sim.sim.effects.base import AuraEffect
from tbc_sim.sim.mechanics.mana import restore_mana

if TYPE_CHECKING:
    from tbc_sim.sim.core.cast import Cast
    from tbc_sim.sim.engine import Simulation

BLOODLUST_DURATION = 40
BLOODLUST_HASTE_RATING = 0.30 * HASTE_RATING_PER_PERCENT * 100

JUDGEMENT_OF_WISDOM_CHANCE = 0.5
JUDGEMENT_OF_WISDOM_MANA = 74


class StatBuff(AuraEffect):
    """Adds *amount* of *stat* to the buff overlay while the aura is active."""

    def __init__(self, stat: Stat, amount: float) -> None:
        self.stat = stat
        self.amount = amount

    def on_gain(self, sim: Simulation, aura: Aura) -> None:
        sim.buffs.add(self.stat, self.amount)

    def on_expire(self, sim: Simulation, aura: Aura) -> None:
        sim.buffs.add(self.stat, -self.amount)

    def __repr__(self) -> str:
        return f"StatBuff({self.stat.value}, {self.amount:g})"


def stat_buff_aura(
    sim: Simulation, aura_id: AuraId, stat: Stat, amount: float, duration: float,
) -> Aura:
    """An aura granting *amount* of *stat* for *duration* seconds (0 = permanent)."""
    expires_at = sim.current_tick + seconds_to_ticks(duration) if duration > 0 else NEVER_EXPIRES
    return Aura(id=aura_id, expires_at=expires_at, effect=StatBuff(stat, amount))


def bloodlust_aura(sim: Simulation) -> Aura:
    """+30% haste for 40 seconds."""
    return stat_buff_aura(
        sim, AuraId.BLOODLUST, Stat.SPELL_HASTE, BLOODLUST_HASTE_RATING, BLOODLUST_DURATION,
    )


class JudgementOfWisdom(AuraEffect):
    """Landed spells have a chance to return mana to the caster."""

    def on_spell_hit(self, sim: Simulation, cast: Cast) -> None:
        if sim.rng.chance(JUDGEMENT_OF_WISDOM_CHANCE):
            restore_mana(sim, JUDGEMENT_OF_WISDOM_MANA)


def judgement_of_wisdom_aura() -> Aura:
    return Aura(id=AuraId.JUDGEMENT_OF_WISDOM, effect=JudgementOfWisdom())
