"""Tests for the cooldown table."""

from tbc_sim.ir.abilities import AbilityKey
from tbc_sim.sim.mechanics.cooldowns import (
    advance_cooldowns,
    arm_cooldown,
    is_ready,
    remaining,
)


class TestArm:
    def test_absent_key_is_ready(self):
        assert is_ready({}, AbilityKey.CL6)
        assert remaining({}, AbilityKey.CL6) == 0

    def test_armed_key_not_ready(self):
        cooldowns = {}
        arm_cooldown(cooldowns, AbilityKey.CL6, 180)
        assert not is_ready(cooldowns, AbilityKey.CL6)
        assert remaining(cooldowns, AbilityKey.CL6) == 180

    def test_zero_ticks_leaves_ready(self):
        cooldowns = {}
        arm_cooldown(cooldowns, AbilityKey.LB12, 0)
        assert cooldowns == {}


class TestAdvance:
    def test_counts_down_monotonically(self):
        cooldowns = {}
        arm_cooldown(cooldowns, AbilityKey.CL6, 180)
        seen = []
        while AbilityKey.CL6 in cooldowns:
            seen.append(cooldowns[AbilityKey.CL6])
            advance_cooldowns(cooldowns, 7)
        assert seen == sorted(seen, reverse=True)
        assert len(set(seen)) == len(seen)
        assert all(value >= 1 for value in seen)

    def test_entry_removed_below_one(self):
        cooldowns = {AbilityKey.CL6: 10, AbilityKey.ES8: 100}
        advance_cooldowns(cooldowns, 10)
        assert cooldowns == {AbilityKey.ES8: 90}

    def test_overshoot_removes(self):
        cooldowns = {AbilityKey.CL6: 10}
        advance_cooldowns(cooldowns, 500)
        assert is_ready(cooldowns, AbilityKey.CL6)
