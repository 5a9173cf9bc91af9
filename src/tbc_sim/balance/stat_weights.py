"""Stat weights: how much DPS each stat point is worth for a scenario.

Every stat is measured by re-running the batch with that stat raised by a
fixed amount.  Baseline and bumped batches use the same seeds, so most of
the run-to-run noise cancels out of the difference.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tbc_sim.balance.models import StatWeights
from tbc_sim.ir.stats import Stat
from tbc_sim.sim.runner import BatchRunner

if TYPE_CHECKING:
    from tbc_sim.ir.options import SimulationConfig
    from tbc_sim.sim.content.registry import ContentRegistry
    from tbc_sim.sim.metrics import SimMetrics

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTED_STATS = (
    Stat.SPELL_DAMAGE,
    Stat.SPELL_HIT,
    Stat.SPELL_CRIT,
    Stat.SPELL_HASTE,
    Stat.MP5,
)


def _mean_dps(results: list[SimMetrics], duration: int) -> float:
    return sum(r.total_damage for r in results) / len(results) / duration


def compute_stat_weights(
    config: SimulationConfig,
    num_runs: int = 1_000,
    stats: tuple[Stat, ...] = DEFAULT_WEIGHTED_STATS,
    delta: float = 50.0,
    registry: ContentRegistry | None = None,
    parallel: bool = False,
) -> StatWeights:
    """Measure DPS per point of each stat in *stats*.

    Parameters
    ----------
    config:
        The scenario to measure.
    num_runs:
        Encounters per batch (one baseline batch plus one per stat).
    stats:
        Stats to weigh.
    delta:
        Points added to a stat for its batch.
    registry:
        Content catalogs; defaults to the bundled data.
    parallel:
        Run each batch in a process pool.
    """
    duration = config.options.encounter.duration
    base = BatchRunner(config, registry).run_batch(num_runs, parallel=parallel)
    base_dps = _mean_dps(base, duration)

    weights: dict[str, float] = {}
    for stat in stats:
        bumped_stats = config.stats.copy_with(**{stat.value: config.stats[stat] + delta})
        bumped = config.model_copy(update={"stats": bumped_stats})
        results = BatchRunner(bumped, registry).run_batch(num_runs, parallel=parallel)
        weights[stat.value] = (_mean_dps(results, duration) - base_dps) / delta
        logger.info("%s: %.3f DPS per point", stat.value, weights[stat.value])

    reference = weights.get(Stat.SPELL_DAMAGE.value)
    if reference:
        normalized = {name: w / reference for name, w in weights.items()}
    else:
        normalized = dict(weights)

    return StatWeights(
        num_runs=num_runs,
        base_dps=base_dps,
        delta=delta,
        weights=weights,
        normalized=normalized,
    )
