"""Cast -- one invocation of a spell, from selection through resolution."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from tbc_sim.ir.spells import SpellDefinition


class Cast(BaseModel):
    """A spell cast in flight or already resolved.

    Mana cost and hit/crit chances are fixed when the cast is selected;
    spell damage is read from the caster when it resolves.  Once resolved
    the cast is archived in :class:`~tbc_sim.sim.metrics.SimMetrics` and no
    longer mutated.
    """

    model_config = {"arbitrary_types_allowed": True}

    spell: SpellDefinition
    mana_cost: float
    hit_chance: float
    crit_chance: float

    bonus_spell_damage: float = 0.0
    """Extra spell damage applied to this cast only (e.g. a totem)."""

    ticks_until_cast: int = 0
    """Counts down while in flight; the cast resolves once it reaches 0."""

    cast_at_tick: int = 0
    resolved_at_tick: int | None = None

    did_hit: bool = False
    did_crit: bool = False
    did_damage: float = 0.0
    """Resolved damage.  A non-zero value set before resolution overrides
    the damage roll."""

    partial_resist: bool = False
    is_proc: bool = False
    """Damage from a talent or item proc rather than a player cast."""

    effects: list[Any] = Field(default_factory=list, exclude=True)
    """Cast-local :class:`~tbc_sim.sim.effects.base.CastEffect` hooks,
    applied on hit and cleared once the cast resolves."""

    def __repr__(self) -> str:
        outcome = "crit" if self.did_crit else "hit" if self.did_hit else "miss"
        return f"Cast({self.spell.name}, {outcome}, {self.did_damage:.0f})"
