"""Simulation engine -- the tick loop of a single caster against one target.

The engine owns all mutable run state (mana, the cast in flight, cooldowns,
auras, metrics) and a single seeded RNG stream.  Each call to :meth:`run`
starts a fresh, reproducible encounter:

    reset -> loop { spellcasting -> advance } -> metrics

``spellcasting`` either resolves a due cast or, when the caster is idle,
fires burst cooldowns, consumables and on-use items and asks the rotation
for the next spell.  ``advance`` moves time forward by the number of ticks
the decision step asked for.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from tbc_sim.ir.abilities import AbilityKey, AuraId
from tbc_sim.ir.items import EquipSlot
from tbc_sim.ir.stats import Stat, Stats
from tbc_sim.sim.content.registry import ContentRegistry
from tbc_sim.sim.core.clock import TICKS_PER_SECOND, seconds_to_ticks
from tbc_sim.sim.core.combat_log import DEFAULT_LOGGER, CombatLog
from tbc_sim.sim.core.rng import SimRNG
from tbc_sim.sim.effects.buffs import (
    BLOODLUST_DURATION,
    bloodlust_aura,
    judgement_of_wisdom_aura,
)
from tbc_sim.sim.effects.items import build_item_aura
from tbc_sim.sim.effects.talents import (
    elemental_focus_aura,
    elemental_mastery_aura,
    lightning_overload_aura,
)
from tbc_sim.sim.errors import ConfigurationError, InvariantViolation
from tbc_sim.sim.mechanics.auras import add_aura, expire_auras, has_aura
from tbc_sim.sim.mechanics.cooldowns import advance_cooldowns, arm_cooldown, is_ready
from tbc_sim.sim.mechanics.damage import (
    CRIT_MULTIPLIER,
    roll_damage,
    roll_partial_resist,
    talent_damage_multiplier,
)
from tbc_sim.sim.mechanics.mana import regenerate, use_consumables
from tbc_sim.sim.metrics import SimMetrics
from tbc_sim.sim.rotations import Rotation, build_rotation

if TYPE_CHECKING:
    from tbc_sim.ir.items import ItemDefinition
    from tbc_sim.ir.options import Options
    from tbc_sim.ir.spells import SpellDefinition
    from tbc_sim.sim.core.aura import Aura
    from tbc_sim.sim.core.cast import Cast
    from tbc_sim.sim.effects.base import AuraEffect

logger = logging.getLogger(__name__)

SHARED_TRINKET_COOLDOWN = 30


class Simulation:
    """Runs encounters for one character, gear set and option set.

    Parameters
    ----------
    stats:
        Fully aggregated character stats.  ``stats.mana`` is maximum mana.
    equipment:
        Names of worn items, resolved through *registry*.  Only items with
        an activation effect matter to the engine.
    options:
        Rotation, talents, buffs and encounter settings.  Never mutated.
    registry:
        Spell, item and consumable catalogs.  Defaults to the bundled data.
    logger:
        Destination of the per-event combat log.  Defaults to the
        ``tbc_sim.sim.combat`` logger.

    Raises
    ------
    ConfigurationError
        If the rotation is empty, names an unknown spell, or contains an
        instant spell without a cooldown (it could never let time pass), or
        if an on-use item has no cooldown key.
    KeyError
        If an equipment name is not in the registry.
    """

    def __init__(
        self,
        stats: Stats,
        equipment: list[str],
        options: Options,
        registry: ContentRegistry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.stats = stats
        self.options = options
        self.registry = registry or ContentRegistry.default()
        self.equipment: list[ItemDefinition] = self.registry.get_equipment(equipment)
        self.log = CombatLog(logger or DEFAULT_LOGGER, self)
        self.rotation: Rotation = build_rotation(
            options.rotation_mode, self._resolve_rotation(options.rotation),
        )
        for item in self.equipment:
            if item.is_on_use and item.cooldown_key is None:
                raise ConfigurationError(f"On-use item {item.name!r} has no cooldown key")

        self.seed = options.random_seed
        self.rng = SimRNG(self.seed)

        # Run state, rebuilt by reset()
        self.current_tick = 0
        self.current_mana = stats[Stat.MANA]
        self.casting: Cast | None = None
        self.buffs = Stats()
        self.cooldowns: dict[AbilityKey, int] = {}
        self.auras: list[Aura] = []
        self.remaining_bloodlust = options.num_bloodlust
        self.metrics = SimMetrics(rotation=self.rotation.names)
        self._tick_budget = 0

    def _resolve_rotation(self, names: list[str]) -> list[SpellDefinition]:
        if not names:
            raise ConfigurationError("Rotation is empty")
        spells: list[SpellDefinition] = []
        for name in names:
            spell = self.registry.get_spell_by_name(name)
            if spell is None:
                raise ConfigurationError(f"Unknown spell in rotation: {name!r}")
            if spell.is_instant and spell.cooldown <= 0:
                raise ConfigurationError(
                    f"Instant spell {name!r} without a cooldown cannot be in a rotation"
                )
            spells.append(spell)
        return spells

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    def effective(self, stat: Stat) -> float:
        """Base stat plus every active buff overlay."""
        return self.stats[stat] + self.buffs[stat]

    @property
    def ticks_remaining(self) -> int:
        return max(0, self._tick_budget - self.current_tick)

    def active_effects(self) -> Iterator[AuraEffect]:
        """Yield the hooks of every active aura.

        Iterates a snapshot, so hooks may add or remove auras.  An aura
        removed earlier in the same pass has been cleared and is skipped.
        """
        for aura in list(self.auras):
            if aura.effect is not None:
                yield aura.effect

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    def reset(self, seconds: int | None = None) -> None:
        """Start a new encounter: bump the seed and rebuild every piece of run state.

        *seconds* sets the encounter length (default
        ``options.encounter.duration``), which bounds waits such as an
        unaffordable spell without mana regeneration.
        """
        if seconds is None:
            seconds = self.options.encounter.duration
        self._tick_budget = seconds * TICKS_PER_SECOND
        self.seed += 1
        self.rng.reseed(self.seed)

        self.current_tick = 0
        self.current_mana = self.stats[Stat.MANA]
        self.casting = None
        self.buffs = Stats()
        self.cooldowns = {}
        self.auras = []
        self.remaining_bloodlust = self.options.num_bloodlust
        self.metrics = SimMetrics(rotation=self.rotation.names)
        self.rotation.reset()

        talents = self.options.talents
        if talents.lightning_overload > 0:
            add_aura(self, lightning_overload_aura(talents.lightning_overload))
        if self.options.buffs.judgement_of_wisdom:
            add_aura(self, judgement_of_wisdom_aura())
        for item in self.equipment:
            if item.is_always_active:
                add_aura(self, build_item_aura(self, item))

    def run(self, seconds: int | None = None) -> SimMetrics:
        """Simulate one encounter and return its metrics.

        Parameters
        ----------
        seconds:
            Encounter length.  Defaults to ``options.encounter.duration``.

        Raises
        ------
        InvariantViolation
            If mana ever drops below zero.
        """
        self.reset(seconds)
        logger.debug("Run seed=%d ticks=%d", self.seed, self._tick_budget)

        tick = 0
        while tick < self._tick_budget:
            self._check_mana()
            self.current_tick = tick
            ticks = self.spellcasting()
            if self.options.exit_on_oom and self.metrics.ran_out_of_mana:
                break
            self.advance(ticks)
            tick += ticks

        self._check_mana()
        self.metrics.ending_mana = self.current_mana
        logger.debug(
            "Run done: %0.0f damage, %d hits, %d crits, oom=%s",
            self.metrics.total_damage, self.metrics.hits, self.metrics.crits,
            self.metrics.ran_out_of_mana,
        )
        return self.metrics

    def _check_mana(self) -> None:
        if self.current_mana < 0:
            raise InvariantViolation(
                f"Mana went negative ({self.current_mana:0.1f}) at tick {self.current_tick}"
            )

    # ------------------------------------------------------------------
    # Decision step
    # ------------------------------------------------------------------

    def spellcasting(self) -> int:
        """Resolve a due cast or pick the next action.  Returns ticks to advance."""
        if self.casting is not None and self.casting.ticks_until_cast <= 0:
            self.cast(self.casting)

        if self.casting is not None:
            return 1

        self._use_bloodlust()
        self._use_elemental_mastery()
        if self.options.use_consumables:
            use_consumables(self)
        self._use_items()
        return self.rotation.choose(self)

    def _use_bloodlust(self) -> None:
        if self.remaining_bloodlust <= 0 or not is_ready(self.cooldowns, AbilityKey.BLOODLUST):
            return
        add_aura(self, bloodlust_aura(self))
        arm_cooldown(
            self.cooldowns, AbilityKey.BLOODLUST, seconds_to_ticks(BLOODLUST_DURATION),
        )
        self.remaining_bloodlust -= 1

    def _use_elemental_mastery(self) -> None:
        if not self.options.talents.elemental_mastery:
            return
        if not is_ready(self.cooldowns, AbilityKey.ELEMENTAL_MASTERY):
            return
        if has_aura(self, AuraId.ELEMENTAL_MASTERY):
            return
        add_aura(self, elemental_mastery_aura())

    def _use_items(self) -> None:
        for item in self.equipment:
            if not item.is_on_use or not is_ready(self.cooldowns, item.cooldown_key):
                continue
            is_trinket = item.slot == EquipSlot.TRINKET
            if is_trinket and not is_ready(self.cooldowns, AbilityKey.SHARED_TRINKET):
                continue

            add_aura(self, build_item_aura(self, item))
            arm_cooldown(self.cooldowns, item.cooldown_key, seconds_to_ticks(item.activate_cd))
            if is_trinket:
                arm_cooldown(
                    self.cooldowns,
                    AbilityKey.SHARED_TRINKET,
                    seconds_to_ticks(SHARED_TRINKET_COOLDOWN),
                )
            self.log.debug("Activated %s", item.name)

    # ------------------------------------------------------------------
    # Cast resolution
    # ------------------------------------------------------------------

    def cast(self, cast: Cast) -> None:
        """Resolve *cast*: roll it, apply its effects and commit its costs.

        Draw order: hit, damage, crit, partial resist, then whatever the
        cast-local effects and on-spell-hit hooks draw.
        """
        for effect in self.active_effects():
            effect.on_cast_complete(self, cast)

        if self.rng.chance(cast.hit_chance):
            cast.did_hit = True
            damage = roll_damage(self, cast)
            if cast.did_damage > 0:
                damage = cast.did_damage
            if self.rng.chance(cast.crit_chance):
                cast.did_crit = True
                damage *= CRIT_MULTIPLIER
                add_aura(self, elemental_focus_aura(self))
            damage *= talent_damage_multiplier(self, cast.spell)
            cast.did_damage, cast.partial_resist = roll_partial_resist(self, damage)
        else:
            cast.did_damage = 0.0

        # Archived ahead of any proc it triggers
        cast.resolved_at_tick = self.current_tick
        self.metrics.record_cast(cast)

        if cast.did_hit:
            for cast_effect in cast.effects:
                cast_effect.apply(self, cast)
            for effect in self.active_effects():
                effect.on_spell_hit(self, cast)
        cast.effects.clear()
        self.log.debug("%r", cast)

        self.current_mana -= cast.mana_cost
        self.casting = None
        arm_cooldown(self.cooldowns, cast.spell.id, seconds_to_ticks(cast.spell.cooldown))

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------

    def advance(self, ticks: int) -> None:
        """Step time forward by *ticks*."""
        if self.casting is not None:
            self.casting.ticks_until_cast -= ticks
        regenerate(self, ticks)
        advance_cooldowns(self.cooldowns, ticks)
        expire_auras(self, self.current_tick + ticks)

    def struck(self) -> None:
        """The caster was hit; fire every aura's ``on_struck`` hook."""
        for effect in self.active_effects():
            effect.on_struck(self)

    def __repr__(self) -> str:
        return (
            f"Simulation(seed={self.seed}, rotation={self.rotation.names}, "
            f"mode={self.options.rotation_mode.value})"
        )
