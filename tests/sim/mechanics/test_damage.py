"""Tests for damage rolls, talent modifiers, partial resists and procs."""

import pytest

from tbc_sim.ir.abilities import AbilityKey
from tbc_sim.ir.options import Encounter, Talents
from tbc_sim.ir.stats import Stats
from tbc_sim.sim.mechanics.casting import new_cast
from tbc_sim.sim.mechanics.damage import (
    resolve_proc,
    roll_damage,
    roll_partial_resist,
    talent_damage_multiplier,
)


class TestRollDamage:
    def test_range_without_spell_damage(self, make_sim):
        sim = make_sim(stats=Stats(mana=1_000))
        sim.reset()
        cast = new_cast(sim, sim.registry.get_spell(AbilityKey.LB12))
        rolls = [roll_damage(sim, cast) for _ in range(500)]
        assert min(rolls) >= 571
        assert max(rolls) < 652

    def test_spell_damage_scaled_by_coefficient(self, make_sim, flat_bolt):
        sim = make_sim(rotation=["BOLT"], stats=Stats(spell_damage=1_000, mana=1_000))
        sim.reset()
        cast = new_cast(sim, flat_bolt)
        assert roll_damage(sim, cast) == 1_000

    def test_cast_bonus_spell_damage(self, make_sim, flat_bolt):
        sim = make_sim(rotation=["BOLT"], stats=Stats(spell_damage=1_000, mana=1_000))
        sim.reset()
        cast = new_cast(sim, flat_bolt)
        cast.bonus_spell_damage = 100
        assert roll_damage(sim, cast) == 1_050


class TestTalentMultiplier:
    def test_concussion_on_lightning(self, make_sim):
        sim = make_sim(talents=Talents(concussion=5))
        lb = sim.registry.get_spell(AbilityKey.LB12)
        assert talent_damage_multiplier(sim, lb) == pytest.approx(1.05)

    def test_concussion_ignores_shocks(self, make_sim):
        sim = make_sim(talents=Talents(concussion=5))
        es = sim.registry.get_spell(AbilityKey.ES8)
        assert talent_damage_multiplier(sim, es) == 1.0

    def test_untalented(self, make_sim):
        sim = make_sim()
        lb = sim.registry.get_spell(AbilityKey.LB12)
        assert talent_damage_multiplier(sim, lb) == 1.0


class TestPartialResist:
    def test_disabled(self, make_sim, perfect_aim):
        sim = make_sim(encounter=perfect_aim)
        sim.reset()
        assert all(roll_partial_resist(sim, 1_000) == (1_000, False) for _ in range(200))

    def test_resisted_damage_reduced(self, make_sim):
        sim = make_sim(encounter=Encounter(partial_resist_chance=1.0))
        sim.reset()
        assert roll_partial_resist(sim, 1_000) == (750, True)

    @pytest.mark.statistical
    def test_default_rate_converges(self, make_sim):
        sim = make_sim()
        sim.reset()
        n = 20_000
        resisted = sum(roll_partial_resist(sim, 1_000)[1] for _ in range(n))
        assert resisted / n == pytest.approx(0.025, abs=0.005)

    @pytest.mark.statistical
    def test_rate_over_full_runs(self, make_sim, flat_bolt):
        """Every cast lands without crits, so 2.5% of them are resisted for 75% damage."""
        sim = make_sim(
            rotation=["BOLT"],
            stats=Stats(spell_damage=1_000, mana=1_000),
            encounter=Encounter(base_hit_chance=1.0, hit_cap=1.0),
        )
        casts = [c for _ in range(400) for c in sim.run().casts]
        resisted = [c for c in casts if c.partial_resist]

        assert all(c.did_hit and not c.did_crit for c in casts)
        assert all(c.did_damage == 750 for c in resisted)
        assert len(resisted) / len(casts) == pytest.approx(0.025, abs=0.006)


class TestResolveProc:
    def test_free_archived_proc(self, make_sim, flat_bolt, perfect_aim):
        sim = make_sim(
            rotation=["BOLT"],
            stats=Stats(spell_damage=1_000, mana=1_000),
            encounter=perfect_aim,
        )
        sim.reset()
        cast = resolve_proc(sim, AbilityKey.LB12, scale=0.5)

        assert cast.is_proc
        assert cast.mana_cost == 0
        assert cast.did_hit
        assert cast.did_damage == 500
        assert sim.metrics.casts == [cast]
        assert sim.metrics.total_damage == 500
        assert sim.current_mana == 1_000

    def test_missed_proc_recorded_with_zero_damage(self, make_sim, flat_bolt):
        sim = make_sim(
            rotation=["BOLT"],
            encounter=Encounter(base_hit_chance=0.0, hit_cap=0.0),
        )
        sim.reset()
        cast = resolve_proc(sim, AbilityKey.LB12)
        assert not cast.did_hit
        assert cast.did_damage == 0
        assert sim.metrics.casts == [cast]

    def test_proc_skips_aura_hooks(self, make_sim, flat_bolt, perfect_aim):
        sim = make_sim(
            rotation=["BOLT"],
            talents=Talents(lightning_overload=5),
            encounter=perfect_aim,
        )
        sim.reset()
        cast = resolve_proc(sim, AbilityKey.LB12)
        assert cast.effects == []
