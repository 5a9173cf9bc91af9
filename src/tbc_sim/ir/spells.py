"""Spell definitions -- the static spell catalog consumed by the simulator."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from .abilities import AbilityKey


class SpellCategory(str, Enum):
    """Groups spells for talent and item modifiers."""

    LIGHTNING = "LIGHTNING"
    """Lightning Bolt and Chain Lightning (Concussion, Call of Thunder, ...)."""

    SHOCK = "SHOCK"
    """Instant shocks sharing the six second shock cooldown."""

    PROC = "PROC"
    """Damage produced by items; never part of a rotation."""


class SpellDefinition(BaseModel):
    """Complete definition of a single spell in the catalog."""

    id: AbilityKey
    """Also the key this spell's cooldown is stored under."""

    name: str
    """Name used by rotations (e.g. 'LB12')."""

    category: SpellCategory

    min_damage: float
    max_damage: float
    """Damage range; the roll is ``min + randint in [0, max - min)``."""

    cast_time: float = 0.0
    """Seconds.  ``0`` means instant."""

    cooldown: float = 0.0
    """Seconds.  ``0`` means no cooldown."""

    mana_cost: float = 0.0

    coefficient: float = 0.0
    """Fraction of the caster's spell damage added to each hit."""

    model_config = {"frozen": True}

    @property
    def is_instant(self) -> bool:
        return self.cast_time <= 0
