"""Cooldown table -- arm, query and count down ability cooldowns.

The table maps an :class:`~tbc_sim.ir.abilities.AbilityKey` to the ticks
left before it can be used again.  A key that is absent is ready; entries
are dropped as soon as they fall below one tick.
"""

from __future__ import annotations

from tbc_sim.ir.abilities import AbilityKey


def is_ready(cooldowns: dict[AbilityKey, int], key: AbilityKey) -> bool:
    """Return ``True`` if *key* is off cooldown."""
    return cooldowns.get(key, 0) < 1


def remaining(cooldowns: dict[AbilityKey, int], key: AbilityKey) -> int:
    """Ticks left on *key*'s cooldown (``0`` when ready)."""
    return cooldowns.get(key, 0)


def arm_cooldown(cooldowns: dict[AbilityKey, int], key: AbilityKey, ticks: int) -> None:
    """Put *key* on cooldown for *ticks* ticks.

    Parameters
    ----------
    cooldowns:
        The engine's cooldown table (mutated in place).
    key:
        The ability to lock.
    ticks:
        Cooldown length.  Values below one leave the key ready.
    """
    if ticks >= 1:
        cooldowns[key] = ticks


def advance_cooldowns(cooldowns: dict[AbilityKey, int], ticks: int) -> None:
    """Count every cooldown down by *ticks* and drop the expired ones."""
    for key in list(cooldowns):
        left = cooldowns[key] - ticks
        if left < 1:
            del cooldowns[key]
        else:
            cooldowns[key] = left
