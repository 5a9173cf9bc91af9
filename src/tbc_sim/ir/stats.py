"""Stat bundle -- the flat numeric character sheet consumed by the simulator.

Stat aggregation (gear + buffs + talents) happens outside the engine; the
simulator only ever sees the resulting :class:`Stats`.  Ratings are kept in
their raw form and converted to percentages at the point of use.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

# Rating needed for 1% of the corresponding chance / speed at level 70.
HIT_RATING_PER_PERCENT = 12.6
CRIT_RATING_PER_PERCENT = 22.08
HASTE_RATING_PER_PERCENT = 15.77


class Stat(str, Enum):
    """Fixed stat schema.  Values double as field names on :class:`Stats`."""

    INTELLECT = "intellect"
    STAMINA = "stamina"
    SPELL_DAMAGE = "spell_damage"
    SPELL_HIT = "spell_hit"
    """Hit rating."""
    SPELL_CRIT = "spell_crit"
    """Crit rating."""
    SPELL_HASTE = "spell_haste"
    """Haste rating."""
    MP5 = "mp5"
    MANA = "mana"


class Stats(BaseModel):
    """Indexed, fixed-schema numeric vector.

    Usage::

        stats = Stats(spell_damage=1000, mana=10_000)
        stats[Stat.SPELL_DAMAGE]        # 1000.0
        stats.add(Stat.MP5, 50)
    """

    intellect: float = 0.0
    stamina: float = 0.0
    spell_damage: float = 0.0
    spell_hit: float = 0.0
    spell_crit: float = 0.0
    spell_haste: float = 0.0
    mp5: float = 0.0
    mana: float = 0.0

    def __getitem__(self, stat: Stat) -> float:
        return getattr(self, stat.value)

    def __setitem__(self, stat: Stat, value: float) -> None:
        setattr(self, stat.value, value)

    def add(self, stat: Stat, amount: float) -> None:
        """Add *amount* (may be negative) to *stat* in place."""
        self[stat] = self[stat] + amount

    def copy_with(self, **changes: float) -> Stats:
        """Return a copy with the given fields replaced."""
        return self.model_copy(update=changes)
