"""Spell selection strategies.

Re-exports the base class and both concrete rotations so consumers can do::

    from tbc_sim.sim.rotations import Rotation, build_rotation
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tbc_sim.ir.options import RotationMode

from .base import Rotation
from .fixed_order import FixedOrderRotation
from .priority import PriorityRotation

if TYPE_CHECKING:
    from tbc_sim.ir.spells import SpellDefinition

_ROTATIONS: dict[RotationMode, type[Rotation]] = {
    RotationMode.FIXED_ORDER: FixedOrderRotation,
    RotationMode.PRIORITY: PriorityRotation,
}


def build_rotation(mode: RotationMode, spells: list[SpellDefinition]) -> Rotation:
    """Return the rotation strategy for *mode* over *spells*."""
    return _ROTATIONS[mode](spells)


__all__ = ["Rotation", "FixedOrderRotation", "PriorityRotation", "build_rotation"]
