"""Shared fixtures for simulator tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from tbc_sim.ir.abilities import AbilityKey
from tbc_sim.ir.options import Encounter, Options
from tbc_sim.ir.spells import SpellCategory, SpellDefinition
from tbc_sim.ir.stats import Stats
from tbc_sim.sim.content.registry import ContentRegistry
from tbc_sim.sim.engine import Simulation


@pytest.fixture()
def perfect_aim() -> Encounter:
    """Every cast lands and nothing is resisted."""
    return Encounter(base_hit_chance=1.0, hit_cap=1.0, partial_resist_chance=0.0)


@pytest.fixture()
def registry() -> ContentRegistry:
    """Fresh registry with the bundled catalogs (tests may add to it)."""
    return ContentRegistry.default()


@pytest.fixture()
def flat_bolt(registry: ContentRegistry) -> SpellDefinition:
    """A lightning spell with a fixed 500 damage roll, 0.5 coefficient and no cost.

    Registered under the LB12 key so procs that copy it resolve to it.
    """
    spell = SpellDefinition(
        id=AbilityKey.LB12,
        name="BOLT",
        category=SpellCategory.LIGHTNING,
        min_damage=500,
        max_damage=500,
        cast_time=2.5,
        coefficient=0.5,
    )
    registry.add_spell(spell)
    return spell


@pytest.fixture()
def make_sim(registry: ContentRegistry) -> Callable[..., Simulation]:
    """Factory for simulations against the test registry.

    Usage::

        sim = make_sim(rotation=["LB12"], stats=Stats(mana=5000), num_bloodlust=1)
    """

    def _make(
        rotation: list[str] | None = None,
        stats: Stats | None = None,
        equipment: list[str] | None = None,
        **option_kwargs: Any,
    ) -> Simulation:
        options = Options(rotation=rotation or ["LB12"], **option_kwargs)
        return Simulation(
            stats or Stats(spell_damage=1000, mp5=100, mana=12_000),
            equipment or [],
            options,
            registry=registry,
        )

    return _make

