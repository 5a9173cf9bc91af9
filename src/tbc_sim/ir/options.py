"""Simulation options -- rotation, talents, raid buffs and encounter settings.

Everything the engine needs besides stats and equipment.  A complete
scenario (stats + equipment names + options) is a :class:`SimulationConfig`,
which is what the scripts read from JSON.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from .stats import Stats


class RotationMode(str, Enum):
    """How the rotation list is interpreted."""

    FIXED_ORDER = "FIXED_ORDER"
    """Cycle through the list, waiting on the current entry."""

    PRIORITY = "PRIORITY"
    """Cast the first entry that is off cooldown and affordable."""


class Talents(BaseModel):
    """Elemental talent ranks that the engine models."""

    lightning_overload: int = Field(0, ge=0, le=5)
    """4% per rank for Lightning spells to fire a half-damage copy."""

    elemental_precision: int = Field(0, ge=0, le=3)
    """+1% spell hit per rank."""

    natures_guidance: int = Field(0, ge=0, le=3)
    """+1% spell hit per rank."""

    tidal_mastery: int = Field(0, ge=0, le=5)
    """+1% crit per rank on Lightning spells."""

    call_of_thunder: int = Field(0, ge=0, le=5)
    """+1% crit per rank on Lightning spells."""

    concussion: int = Field(0, ge=0, le=5)
    """+1% damage per rank on Lightning spells."""

    convection: int = Field(0, ge=0, le=5)
    """-2% mana cost per rank on Lightning and Shock spells."""

    lightning_mastery: int = Field(0, ge=0, le=5)
    """-0.1s cast time per rank on Lightning spells."""

    elemental_mastery: bool = False
    """Next cast is a free guaranteed crit, three minute cooldown."""


class Buffs(BaseModel):
    """External buffs that act as auras rather than flat stats."""

    judgement_of_wisdom: bool = False


class Encounter(BaseModel):
    """Target-side settings of the simulated fight."""

    duration: int = Field(60, gt=0)
    """Seconds."""

    base_hit_chance: float = Field(0.83, ge=0.0, le=1.0)
    """Spell hit chance before hit rating (0.83 against a level 73 boss)."""

    hit_cap: float = Field(0.99, ge=0.0, le=1.0)

    partial_resist_chance: float = Field(0.025, ge=0.0, le=1.0)
    """Flat chance for a landed spell to be partially resisted."""

    partial_resist_amount: float = Field(0.25, ge=0.0, le=1.0)
    """Fraction of damage removed by a partial resist."""


class Options(BaseModel):
    """Everything that shapes a run besides stats and gear."""

    rotation: list[str] = Field(default_factory=list)
    """Spell names in cast order (FIXED_ORDER) or priority order (PRIORITY)."""

    rotation_mode: RotationMode = RotationMode.FIXED_ORDER

    num_bloodlust: int = Field(0, ge=0)
    """Bloodlusts available to the caster's group, used back to back."""

    use_consumables: bool = True
    """Use Dark Runes and Super Mana Potions when the deficit allows."""

    talents: Talents = Field(default_factory=Talents)
    buffs: Buffs = Field(default_factory=Buffs)
    encounter: Encounter = Field(default_factory=Encounter)

    exit_on_oom: bool = False
    """Stop the run at the first out-of-mana event."""

    random_seed: int = 0


class SimulationConfig(BaseModel):
    """A complete scenario: character stats, worn items and options."""

    stats: Stats
    equipment: list[str] = Field(default_factory=list)
    """Item names, resolved through the content registry."""

    options: Options = Field(default_factory=Options)


def load_config(path: Path) -> SimulationConfig:
    """Load a :class:`SimulationConfig` from a JSON file."""
    data = json.loads(Path(path).read_text())
    return SimulationConfig.model_validate(data)
