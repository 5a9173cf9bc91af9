"""Pure metric computation functions for balance analysis.

All functions take a list of SimMetrics and return structured metrics.
No side effects, no I/O.
"""

from __future__ import annotations

import statistics
from collections import defaultdict
from typing import TYPE_CHECKING

from tbc_sim.balance.models import BatchSummary, SpellBreakdown

if TYPE_CHECKING:
    from tbc_sim.sim.metrics import SimMetrics


def compute_batch_summary(runs: list[SimMetrics], duration: int) -> BatchSummary:
    """Compute damage, DPS and mana statistics of a batch.

    Parameters
    ----------
    runs:
        Metrics of each encounter.
    duration:
        Encounter length in seconds, used for DPS.
    """
    total = len(runs)
    if total == 0:
        return BatchSummary(
            num_runs=0, duration=duration, mean_damage=0.0, stdev_damage=0.0,
            min_damage=0.0, max_damage=0.0, mean_dps=0.0, oom_rate=0.0,
            mean_ending_mana=0.0,
        )

    damages = [r.total_damage for r in runs]
    mean_damage = sum(damages) / total
    oom_runs = [r for r in runs if r.ran_out_of_mana]

    mean_oom_second = None
    if oom_runs:
        mean_oom_second = sum(r.oom_at_second for r in oom_runs) / len(oom_runs)

    return BatchSummary(
        num_runs=total,
        duration=duration,
        mean_damage=mean_damage,
        stdev_damage=statistics.pstdev(damages),
        min_damage=min(damages),
        max_damage=max(damages),
        mean_dps=mean_damage / duration,
        oom_rate=len(oom_runs) / total,
        mean_oom_second=mean_oom_second,
        mean_ending_mana=sum(r.ending_mana for r in runs) / total,
        spells=compute_spell_breakdown(runs),
    )


def compute_spell_breakdown(runs: list[SimMetrics]) -> list[SpellBreakdown]:
    """Aggregate every archived cast by spell name, sorted by damage."""
    casts: dict[str, int] = defaultdict(int)
    hits: dict[str, int] = defaultdict(int)
    crits: dict[str, int] = defaultdict(int)
    procs: dict[str, int] = defaultdict(int)
    damage: dict[str, float] = defaultdict(float)

    for run in runs:
        for cast in run.casts:
            name = cast.spell.name
            damage[name] += cast.did_damage
            if cast.is_proc:
                procs[name] += 1
                continue
            casts[name] += 1
            if cast.did_hit:
                hits[name] += 1
            if cast.did_crit:
                crits[name] += 1

    batch_damage = sum(damage.values())
    results = [
        SpellBreakdown(
            spell=name,
            casts=casts[name],
            hits=hits[name],
            crits=crits[name],
            procs=procs[name],
            total_damage=damage[name],
            hit_rate=hits[name] / casts[name] if casts[name] else 0.0,
            crit_rate=crits[name] / hits[name] if hits[name] else 0.0,
            damage_share=damage[name] / batch_damage if batch_damage else 0.0,
        )
        for name in damage
    ]
    results.sort(key=lambda s: s.total_damage, reverse=True)
    return results
