"""Tests for Lightning Overload, Elemental Focus and Elemental Mastery."""

import pytest

from tbc_sim.ir.abilities import AbilityKey, AuraId
from tbc_sim.ir.options import Talents
from tbc_sim.ir.stats import Stats
from tbc_sim.sim.effects.talents import OverloadProc, elemental_focus_aura
from tbc_sim.sim.mechanics.auras import add_aura, get_aura, has_aura
from tbc_sim.sim.mechanics.casting import new_cast


class TestLightningOverload:
    def test_aura_added_at_reset(self, make_sim):
        sim = make_sim(talents=Talents(lightning_overload=5))
        sim.reset()
        assert has_aura(sim, AuraId.LIGHTNING_OVERLOAD)

    def test_untalented_has_no_aura(self, make_sim):
        sim = make_sim()
        sim.reset()
        assert not has_aura(sim, AuraId.LIGHTNING_OVERLOAD)

    def test_attaches_proc_to_lightning_only(self, make_sim):
        sim = make_sim(talents=Talents(lightning_overload=5))
        sim.reset()
        bolt = new_cast(sim, sim.registry.get_spell(AbilityKey.LB12))
        shock = new_cast(sim, sim.registry.get_spell(AbilityKey.ES8))

        assert len(bolt.effects) == 1
        assert isinstance(bolt.effects[0], OverloadProc)
        assert bolt.effects[0].chance == pytest.approx(0.20)
        assert shock.effects == []

    def test_proc_deals_half_damage(self, make_sim, flat_bolt, perfect_aim):
        sim = make_sim(
            rotation=["BOLT"],
            stats=Stats(spell_damage=1_000, mana=1_000),
            encounter=perfect_aim,
        )
        sim.reset()
        cast = new_cast(sim, flat_bolt)
        OverloadProc(1.0).apply(sim, cast)

        [proc] = sim.metrics.casts
        assert proc.is_proc
        assert proc.did_damage == 500

    def test_failed_proc_roll(self, make_sim, flat_bolt):
        sim = make_sim(rotation=["BOLT"])
        sim.reset()
        OverloadProc(0.0).apply(sim, new_cast(sim, flat_bolt))
        assert sim.metrics.casts == []

    def test_proc_archived_after_its_cast(self, make_sim, flat_bolt, perfect_aim):
        sim = make_sim(
            rotation=["BOLT"],
            stats=Stats(spell_damage=1_000, mana=1_000),
            talents=Talents(lightning_overload=5),
            encounter=perfect_aim,
        )
        sim.reset()
        cast = new_cast(sim, flat_bolt)
        cast.effects[0].chance = 1.0
        sim.casting = cast
        sim.cast(cast)

        parent, proc = sim.metrics.casts
        assert parent is cast
        assert not parent.is_proc
        assert proc.is_proc
        assert proc.resolved_at_tick == parent.resolved_at_tick
        assert sim.metrics.total_damage == 1_500


class TestElementalFocus:
    def test_reduces_cost(self, make_sim):
        sim = make_sim()
        sim.reset()
        add_aura(sim, elemental_focus_aura(sim))
        cast = new_cast(sim, sim.registry.get_spell(AbilityKey.LB12))
        assert cast.mana_cost == pytest.approx(180)

    def test_consumed_after_two_casts(self, make_sim):
        sim = make_sim()
        sim.reset()
        add_aura(sim, elemental_focus_aura(sim))
        effect = get_aura(sim, AuraId.ELEMENTAL_FOCUS).effect
        cast = new_cast(sim, sim.registry.get_spell(AbilityKey.LB12))

        effect.on_cast_complete(sim, cast)
        assert has_aura(sim, AuraId.ELEMENTAL_FOCUS)
        effect.on_cast_complete(sim, cast)
        assert not has_aura(sim, AuraId.ELEMENTAL_FOCUS)

    def test_expires_after_fifteen_seconds(self, make_sim):
        sim = make_sim()
        sim.reset()
        add_aura(sim, elemental_focus_aura(sim))
        assert get_aura(sim, AuraId.ELEMENTAL_FOCUS).expires_at == 450


class TestElementalMastery:
    def _make_started(self, make_sim, perfect_aim):
        sim = make_sim(
            talents=Talents(elemental_mastery=True),
            encounter=perfect_aim,
        )
        sim.reset()
        return sim

    def test_next_cast_free_and_guaranteed_crit(self, make_sim, perfect_aim):
        sim = self._make_started(make_sim, perfect_aim)
        sim.spellcasting()

        assert has_aura(sim, AuraId.ELEMENTAL_MASTERY)
        assert sim.casting.mana_cost == 0
        assert sim.casting.crit_chance > 1

    def test_consumed_on_completion(self, make_sim, perfect_aim):
        sim = self._make_started(make_sim, perfect_aim)
        ticks = sim.spellcasting()
        sim.advance(ticks)
        sim.current_tick += ticks
        sim.spellcasting()

        first = sim.metrics.casts[0]
        assert first.did_crit
        assert not has_aura(sim, AuraId.ELEMENTAL_MASTERY)
        assert sim.cooldowns[AbilityKey.ELEMENTAL_MASTERY] == 180 * 30
        assert sim.current_mana == 12_000

    def test_crit_grants_elemental_focus_for_next_cast(self, make_sim, perfect_aim):
        sim = self._make_started(make_sim, perfect_aim)
        ticks = sim.spellcasting()
        sim.advance(ticks)
        sim.current_tick += ticks
        sim.spellcasting()

        assert has_aura(sim, AuraId.ELEMENTAL_FOCUS)
        assert sim.casting.mana_cost == pytest.approx(180)
