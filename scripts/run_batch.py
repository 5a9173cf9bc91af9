"""Run a scenario many times and print a batch report.

Usage:
    uv run python scripts/run_batch.py data/example_config.json [--runs 1000] [--parallel]
    uv run python scripts/run_batch.py data/example_config.json --weights
"""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

from tbc_sim.balance.metrics import compute_batch_summary
from tbc_sim.balance.report import generate_stat_weight_report, generate_text_report
from tbc_sim.balance.stat_weights import compute_stat_weights
from tbc_sim.ir.options import load_config
from tbc_sim.sim.runner import BatchRunner


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate a scenario in batch")
    parser.add_argument("config", type=str, help="Scenario JSON file")
    parser.add_argument("--runs", type=int, default=1_000, help="Number of encounters")
    parser.add_argument("--seed", type=int, default=None, help="Override the scenario's seed")
    parser.add_argument("--parallel", action="store_true", help="Use a process pool")
    parser.add_argument("--weights", action="store_true", help="Also compute stat weights")
    parser.add_argument("--verbose", action="store_true", help="Log every combat event")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s")

    config = load_config(Path(args.config))
    if args.seed is not None:
        config.options.random_seed = args.seed

    print(f"Running {args.runs:,} encounters of {args.config}...")
    t0 = time.perf_counter()
    results = BatchRunner(config).run_batch(args.runs, parallel=args.parallel)
    elapsed = time.perf_counter() - t0
    print(f"Done in {elapsed:.1f}s")

    summary = compute_batch_summary(results, config.options.encounter.duration)
    print()
    print(generate_text_report(summary, title=f"Batch Report - {Path(args.config).name}"))

    if args.weights:
        print()
        weights = compute_stat_weights(config, num_runs=args.runs, parallel=args.parallel)
        print(generate_stat_weight_report(weights))


if __name__ == "__main__":
    main()
