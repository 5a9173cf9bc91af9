"""Aura lifecycle -- add, replace, remove and expire.

Manages the ``auras`` list on the engine.  The list keeps insertion order;
an aura whose id is already present takes over the old aura's slot.
Removing an aura fires its ``on_expire`` hook and then clears the hooks, so
an aura removed while the engine is iterating a snapshot of the list can
never fire again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tbc_sim.ir.abilities import AuraId

if TYPE_CHECKING:
    from tbc_sim.sim.core.aura import Aura
    from tbc_sim.sim.engine import Simulation


def add_aura(sim: Simulation, aura: Aura) -> None:
    """Add *aura*, replacing any live aura with the same id in place.

    The replaced aura is retired exactly like an expired one (``on_expire``
    fires, then its hooks are cleared) before the new aura's ``on_gain``
    runs, so stat overlays never double count.
    """
    for i, existing in enumerate(sim.auras):
        if existing.id == aura.id:
            _retire(sim, existing)
            sim.auras[i] = aura
            break
    else:
        sim.auras.append(aura)

    if aura.effect is not None:
        aura.effect.on_gain(sim, aura)
    sim.log.debug("+aura %s", aura.id.value)


def remove_aura(sim: Simulation, aura_id: AuraId) -> bool:
    """Remove the aura with *aura_id*.  Returns ``False`` if it was not active."""
    for i, aura in enumerate(sim.auras):
        if aura.id == aura_id:
            _remove_at(sim, i)
            return True
    return False


def get_aura(sim: Simulation, aura_id: AuraId) -> Aura | None:
    for aura in sim.auras:
        if aura.id == aura_id:
            return aura
    return None


def has_aura(sim: Simulation, aura_id: AuraId) -> bool:
    return get_aura(sim, aura_id) is not None


def expire_auras(sim: Simulation, up_to_tick: int) -> None:
    """Remove every aura with ``expires_at <= up_to_tick``.

    Indices are collected in one pass and removed afterwards in reverse
    order, so several auras expiring in the same advance are all handled
    exactly once.
    """
    expired = [i for i, aura in enumerate(sim.auras) if aura.expires_at <= up_to_tick]
    for i in reversed(expired):
        _remove_at(sim, i)


def _remove_at(sim: Simulation, index: int) -> None:
    aura = sim.auras[index]
    _retire(sim, aura)
    del sim.auras[index]
    sim.log.debug("-aura %s", aura.id.value)


def _retire(sim: Simulation, aura: Aura) -> None:
    if aura.effect is not None:
        aura.effect.on_expire(sim, aura)
    aura.clear()
