"""Generate (or check) a regression baseline for a scenario.

Usage:
    uv run python scripts/generate_baselines.py data/example_config.json [--runs 100] [--output data/baselines/]
    uv run python scripts/generate_baselines.py --check data/baselines/example_config_100.json
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from tbc_sim.balance.baselines import (
    find_regressions,
    generate_baseline,
    load_baseline,
    save_baseline,
)
from tbc_sim.balance.report import generate_text_report
from tbc_sim.ir.options import load_config


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate regression baselines")
    parser.add_argument("config", type=str, nargs="?", help="Scenario JSON file")
    parser.add_argument("--runs", type=int, default=100, help="Number of encounters")
    parser.add_argument("--output", type=str, default="data/baselines/", help="Output directory")
    parser.add_argument("--check", type=str, default=None, help="Baseline file to re-run and compare")
    parser.add_argument("--verbose", action="store_true", help="Log progress")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s %(message)s")

    if args.check:
        baseline = load_baseline(Path(args.check))
        print(f"Re-running {baseline.num_runs:,} encounters from {args.check}...")
        mismatches = find_regressions(baseline)
        if not mismatches:
            print("No regressions")
            return
        for k, expected, actual in mismatches:
            print(f"  run {k}: {expected:.1f} -> {actual:.1f}")
        sys.exit(1)

    if args.config is None:
        parser.error("config is required unless --check is given")

    config = load_config(Path(args.config))

    print(f"Running {args.runs:,} encounters...")
    t0 = time.perf_counter()
    baseline = generate_baseline(config, num_runs=args.runs)
    elapsed = time.perf_counter() - t0
    print(f"Done in {elapsed:.1f}s")

    # Save JSON
    out_dir = Path(args.output)
    filename = f"{Path(args.config).stem}_{args.runs}.json"
    json_path = out_dir / filename
    save_baseline(baseline, json_path)
    print(f"Saved baseline to {json_path}")

    # Print text report
    print()
    print(generate_text_report(baseline.summary))


if __name__ == "__main__":
    main()
