"""Static, read-only definitions for the caster simulator.

Stats, spells, items, consumables and options are Pydantic models that
serialise cleanly to/from JSON.  The simulator consumes them as lookup data
and never mutates them during a run.
"""

from .abilities import AbilityKey, AuraId
from .consumables import ConsumableDefinition
from .items import (
    ALWAYS_ACTIVE,
    EquipSlot,
    ItemDefinition,
    ItemEffect,
    ItemEffectKind,
)
from .options import (
    Buffs,
    Encounter,
    Options,
    RotationMode,
    SimulationConfig,
    Talents,
    load_config,
)
from .spells import SpellCategory, SpellDefinition
from .stats import (
    CRIT_RATING_PER_PERCENT,
    HASTE_RATING_PER_PERCENT,
    HIT_RATING_PER_PERCENT,
    Stat,
    Stats,
)

__all__ = [
    # abilities
    "AbilityKey",
    "AuraId",
    # consumables
    "ConsumableDefinition",
    # items
    "ALWAYS_ACTIVE",
    "EquipSlot",
    "ItemDefinition",
    "ItemEffect",
    "ItemEffectKind",
    # options
    "Buffs",
    "Encounter",
    "Options",
    "RotationMode",
    "SimulationConfig",
    "Talents",
    "load_config",
    # spells
    "SpellCategory",
    "SpellDefinition",
    # stats
    "CRIT_RATING_PER_PERCENT",
    "HASTE_RATING_PER_PERCENT",
    "HIT_RATING_PER_PERCENT",
    "Stat",
    "Stats",
]
