"""Equipment definitions -- items and the activation effects they carry."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from .abilities import AbilityKey, AuraId
from .spells import SpellCategory
from .stats import Stat

ALWAYS_ACTIVE = -1
"""``activate_cd`` sentinel: the effect is a permanent aura added at reset."""


class EquipSlot(str, Enum):
    """Where an item is worn.  Only trinkets share a cooldown group."""

    HEAD = "HEAD"
    NECK = "NECK"
    SHOULDER = "SHOULDER"
    BACK = "BACK"
    CHEST = "CHEST"
    WRIST = "WRIST"
    HANDS = "HANDS"
    WAIST = "WAIST"
    LEGS = "LEGS"
    FEET = "FEET"
    FINGER = "FINGER"
    TRINKET = "TRINKET"
    TOTEM = "TOTEM"
    WEAPON = "WEAPON"
    OFFHAND = "OFFHAND"


class ItemEffectKind(str, Enum):
    """Which effect variant an item builds when it activates."""

    STAT_BUFF = "STAT_BUFF"
    """Temporarily add ``amount`` of ``stat`` for ``duration`` seconds."""

    STAT_PROC = "STAT_PROC"
    """On spell hit, ``proc_chance`` to gain a STAT_BUFF (with internal cooldown)."""

    SPELL_DAMAGE_BONUS = "SPELL_DAMAGE_BONUS"
    """Flat spell damage added to casts of ``spell_category``."""

    LIGHTNING_CAPACITOR = "LIGHTNING_CAPACITOR"
    """Gain a charge per spell crit; at ``charges`` fire ``proc_spell``."""


class ItemEffect(BaseModel):
    """Tagged parameters for an item's activation effect.

    Each ``kind`` reads only the fields it needs; the rest keep defaults.
    """

    kind: ItemEffectKind
    aura_id: AuraId
    """Aura the effect lives under while active."""

    stat: Stat | None = None
    amount: float = 0.0
    duration: float = 0.0
    """Seconds.  ``0`` for permanent auras."""

    proc_chance: float = 0.0
    proc_aura_id: AuraId | None = None
    """Aura granted by a STAT_PROC."""

    internal_cooldown: float = 0.0
    """Seconds between procs."""

    spell_category: SpellCategory | None = None
    charges: int = 0
    proc_spell: AbilityKey | None = None

    model_config = {"frozen": True}


class ItemDefinition(BaseModel):
    """A single equippable item.

    Plain stat contributions are folded into :class:`~tbc_sim.ir.stats.Stats`
    by the caller; the engine only cares about activation effects.
    """

    name: str
    slot: EquipSlot
    effect: ItemEffect | None = None

    activate_cd: float | None = None
    """Seconds between uses, ``ALWAYS_ACTIVE`` for permanent effects,
    ``None`` for items without an activation."""

    cooldown_key: AbilityKey | None = None
    """Cooldown table key for on-use items and internal proc cooldowns."""

    model_config = {"frozen": True}

    @property
    def is_on_use(self) -> bool:
        return (
            self.effect is not None
            and self.activate_cd is not None
            and self.activate_cd != ALWAYS_ACTIVE
        )

    @property
    def is_always_active(self) -> bool:
        return self.effect is not None and self.activate_cd == ALWAYS_ACTIVE
