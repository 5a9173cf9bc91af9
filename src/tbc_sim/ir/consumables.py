"""Consumable definitions -- mana restoring items with a shared cooldown key."""

from __future__ import annotations

from pydantic import BaseModel

from .abilities import AbilityKey


class ConsumableDefinition(BaseModel):
    """A mana consumable used once the caster's deficit reaches ``threshold``."""

    key: AbilityKey
    name: str

    threshold: float
    """Used when ``max mana - current mana + MP5 >= threshold``."""

    min_restore: int
    max_restore: int
    """Restores a random integer in ``[min_restore, max_restore)``."""

    cooldown: float
    """Seconds."""

    model_config = {"frozen": True}
