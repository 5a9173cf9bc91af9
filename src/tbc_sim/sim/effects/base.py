"""Base classes for aura and cast effects.

An :class:`AuraEffect` is the behaviour attached to an
:class:`~tbc_sim.sim.core.aura.Aura`.  The engine calls its hooks at fixed
points of the tick loop; every hook defaults to doing nothing, so a variant
only overrides the events it reacts to.  Hooks may read and mutate the
simulation (buff overlay, mana, the cast being resolved, metrics).

A :class:`CastEffect` is attached to a single cast and applied once, when
that cast lands.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tbc_sim.sim.core.aura import Aura
    from tbc_sim.sim.core.cast import Cast
    from tbc_sim.sim.engine import Simulation


class AuraEffect:
    """Hooks of an active aura."""

    def on_gain(self, sim: Simulation, aura: Aura) -> None:
        """The aura was just added (or replaced an aura with the same id)."""

    def on_cast(self, sim: Simulation, cast: Cast) -> None:
        """A cast is being built at selection time; adjust cost or chances."""

    def on_cast_complete(self, sim: Simulation, cast: Cast) -> None:
        """*cast* finished casting and is about to roll."""

    def on_spell_hit(self, sim: Simulation, cast: Cast) -> None:
        """*cast* landed; ``did_damage`` holds its final damage."""

    def on_struck(self, sim: Simulation) -> None:
        """The caster was hit by the target."""

    def on_expire(self, sim: Simulation, aura: Aura) -> None:
        """The aura is leaving (expired, removed or replaced)."""


class CastEffect(ABC):
    """An effect tied to one specific cast."""

    @abstractmethod
    def apply(self, sim: Simulation, cast: Cast) -> None:
        """Apply the effect after *cast* landed."""
