"""Core mechanics for the caster simulator.

Re-exports the primary functions from each mechanics module for convenience.

Usage::

    from tbc_sim.sim.mechanics import (
        add_aura, remove_aura, expire_auras,
        arm_cooldown, is_ready, advance_cooldowns,
        regenerate, restore_mana, use_consumables,
        new_cast, roll_damage, resolve_proc,
    )
"""

# -- auras -------------------------------------------------------------------
from .auras import add_aura, expire_auras, get_aura, has_aura, remove_aura

# -- cooldowns ---------------------------------------------------------------
from .cooldowns import advance_cooldowns, arm_cooldown, is_ready, remaining

# -- mana --------------------------------------------------------------------
from .mana import (
    mana_deficit,
    mana_regen_per_tick,
    regenerate,
    restore_mana,
    ticks_until_affordable,
    use_consumables,
)

# -- casting -----------------------------------------------------------------
from .casting import new_cast

# -- damage ------------------------------------------------------------------
from .damage import (
    resolve_proc,
    roll_damage,
    roll_partial_resist,
    talent_damage_multiplier,
)

__all__ = [
    # auras
    "add_aura",
    "remove_aura",
    "get_aura",
    "has_aura",
    "expire_auras",
    # cooldowns
    "is_ready",
    "remaining",
    "arm_cooldown",
    "advance_cooldowns",
    # mana
    "mana_regen_per_tick",
    "regenerate",
    "restore_mana",
    "mana_deficit",
    "ticks_until_affordable",
    "use_consumables",
    # casting
    "new_cast",
    # damage
    "roll_damage",
    "talent_damage_multiplier",
    "roll_partial_resist",
    "resolve_proc",
]
