"""Aura -- a timed effect attached to the caster."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tbc_sim.ir.abilities import AuraId
from tbc_sim.sim.core.clock import NEVER_EXPIRES

if TYPE_CHECKING:
    from tbc_sim.sim.effects.base import AuraEffect


@dataclass
class Aura:
    """An active effect and the tick it expires on.

    Attributes
    ----------
    id:
        Identity used for replacement: at most one aura per id is active.
    expires_at:
        Absolute tick.  The aura is removed by the first advance that
        reaches it.
    effect:
        Hooks fired by the engine.  Set to ``None`` when the aura is
        removed so a stale reference can never fire again.
    """

    id: AuraId
    expires_at: int = NEVER_EXPIRES
    effect: AuraEffect | None = None

    def clear(self) -> None:
        """Disarm every hook of this aura."""
        self.effect = None
