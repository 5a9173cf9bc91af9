"""Regression baselines: run a scenario, record per-seed damage, save/load JSON.

Orchestrates BatchRunner -> metric computation -> RegressionBaseline model.
Because every run is seeded, re-running a saved baseline's scenario must
reproduce its damage exactly unless the simulator's behaviour changed.
"""

from __future__ import annotations

import json
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from tbc_sim.balance.metrics import compute_batch_summary
from tbc_sim.balance.models import RegressionBaseline
from tbc_sim.sim.runner import BatchRunner

if TYPE_CHECKING:
    from tbc_sim.ir.options import SimulationConfig
    from tbc_sim.sim.content.registry import ContentRegistry


def generate_baseline(
    config: SimulationConfig,
    num_runs: int = 100,
    registry: ContentRegistry | None = None,
    parallel: bool = False,
) -> RegressionBaseline:
    """Run *num_runs* encounters of *config* and record the outcome.

    Parameters
    ----------
    config:
        Scenario to record.  Its ``random_seed`` anchors the seed sequence.
    num_runs:
        Number of encounters.
    registry:
        Content catalogs; defaults to the bundled data.
    parallel:
        Run the batch in a process pool.
    """
    runner = BatchRunner(config, registry)
    results = runner.run_batch(num_runs, parallel=parallel)

    return RegressionBaseline(
        config=config,
        num_runs=num_runs,
        generated_at=datetime.now(timezone.utc).isoformat(),
        damage_per_run=[r.total_damage for r in results],
        summary=compute_batch_summary(results, config.options.encounter.duration),
    )


def find_regressions(
    baseline: RegressionBaseline,
    registry: ContentRegistry | None = None,
    rel_tol: float = 1e-9,
) -> list[tuple[int, float, float]]:
    """Re-run *baseline*'s scenario and report runs whose damage changed.

    Returns
    -------
    list[tuple[int, float, float]]
        ``(run index, recorded damage, new damage)`` for every mismatch.
    """
    results = BatchRunner(baseline.config, registry).run_batch(baseline.num_runs)
    return [
        (k, expected, result.total_damage)
        for k, (expected, result) in enumerate(zip(baseline.damage_per_run, results))
        if not math.isclose(expected, result.total_damage, rel_tol=rel_tol)
    ]


def save_baseline(baseline: RegressionBaseline, path: Path) -> None:
    """Save baseline to JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(baseline.model_dump(mode="json"), indent=2))


def load_baseline(path: Path) -> RegressionBaseline:
    """Load baseline from JSON file."""
    data = json.loads(path.read_text())
    return RegressionBaseline.model_validate(data)
