"""Aura and cast effects: talents, raid buffs and item activations."""

from .base import AuraEffect, CastEffect
from .buffs import (
    JudgementOfWisdom,
    StatBuff,
    bloodlust_aura,
    judgement_of_wisdom_aura,
    stat_buff_aura,
)
from .items import LightningCapacitor, SpellDamageBonus, StatProc, build_item_aura
from .talents import (
    ElementalFocus,
    ElementalMastery,
    LightningOverload,
    OverloadProc,
    elemental_focus_aura,
    elemental_mastery_aura,
    lightning_overload_aura,
)

__all__ = [
    "AuraEffect",
    "CastEffect",
    # talents
    "LightningOverload",
    "OverloadProc",
    "ElementalFocus",
    "ElementalMastery",
    "lightning_overload_aura",
    "elemental_focus_aura",
    "elemental_mastery_aura",
    # buffs
    "StatBuff",
    "JudgementOfWisdom",
    "stat_buff_aura",
    "bloodlust_aura",
    "judgement_of_wisdom_aura",
    # items
    "StatProc",
    "SpellDamageBonus",
    "LightningCapacitor",
    "build_item_aura",
]
