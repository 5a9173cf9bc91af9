"""Identifiers for everything that can sit on a cooldown or be an aura.

Catalog spells, internal pseudo-abilities (Bloodlust, consumables, the
shared trinket lock) and item (internal) cooldowns share one enumeration so
the cooldown table is never keyed by free-form strings.
"""

from __future__ import annotations

from enum import Enum


class AbilityKey(str, Enum):
    """Keys of the engine's cooldown table."""

    # -- catalog spells --------------------------------------------------------
    LB12 = "LB12"
    CL6 = "CL6"
    ES8 = "ES8"
    FRS5 = "FRS5"
    FLS7 = "FLS7"
    TLC_LB = "TLC_LB"

    # -- pseudo abilities ------------------------------------------------------
    BLOODLUST = "BLOODLUST"
    ELEMENTAL_MASTERY = "ELEMENTAL_MASTERY"
    MANA_POTION = "MANA_POTION"
    DARK_RUNE = "DARK_RUNE"
    SHARED_TRINKET = "SHARED_TRINKET"

    # -- item cooldowns --------------------------------------------------------
    ICON_OF_THE_SILVER_CRESCENT = "ICON_OF_THE_SILVER_CRESCENT"
    SCRYERS_BLOODGEM = "SCRYERS_BLOODGEM"
    MIND_QUICKENING_GEM = "MIND_QUICKENING_GEM"
    QUAGMIRRANS_EYE = "QUAGMIRRANS_EYE"
    LIGHTNING_CAPACITOR = "LIGHTNING_CAPACITOR"


class AuraId(str, Enum):
    """Identity of an aura.  Adding an aura with a live id replaces it."""

    LIGHTNING_OVERLOAD = "LIGHTNING_OVERLOAD"
    ELEMENTAL_FOCUS = "ELEMENTAL_FOCUS"
    ELEMENTAL_MASTERY = "ELEMENTAL_MASTERY"
    BLOODLUST = "BLOODLUST"
    JUDGEMENT_OF_WISDOM = "JUDGEMENT_OF_WISDOM"
    BLESSING_OF_THE_SILVER_CRESCENT = "BLESSING_OF_THE_SILVER_CRESCENT"
    SCRYERS_BLOODGEM = "SCRYERS_BLOODGEM"
    MIND_QUICKENING = "MIND_QUICKENING"
    QUAGMIRRANS_EYE = "QUAGMIRRANS_EYE"
    FUNGAL_FRENZY = "FUNGAL_FRENZY"
    LIGHTNING_CAPACITOR = "LIGHTNING_CAPACITOR"
    TOTEM_OF_THE_VOID = "TOTEM_OF_THE_VOID"
