"""Text reports for batch summaries and stat weights."""

from __future__ import annotations

from tbc_sim.balance.models import BatchSummary, StatWeights


def generate_text_report(summary: BatchSummary, title: str = "Batch Report") -> str:
    """Generate a human-readable summary of a batch."""
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append(title)
    lines.append(f"Runs: {summary.num_runs:,} | Duration: {summary.duration}s")
    lines.append("=" * 60)

    lines.append("")
    lines.append("## Damage")
    lines.append(f"  Mean DPS:     {summary.mean_dps:.1f}")
    lines.append(f"  Mean damage:  {summary.mean_damage:.0f} (sd {summary.stdev_damage:.0f})")
    lines.append(f"  Range:        {summary.min_damage:.0f} - {summary.max_damage:.0f}")

    lines.append("")
    lines.append("## Mana")
    lines.append(f"  OOM rate:     {summary.oom_rate:.1%}")
    if summary.mean_oom_second is not None:
        lines.append(f"  Mean OOM at:  {summary.mean_oom_second:.1f}s")
    lines.append(f"  Ending mana:  {summary.mean_ending_mana:.0f}")

    if summary.spells:
        lines.append("")
        lines.append("## Spells")
        for s in summary.spells:
            lines.append(
                f"  {s.spell:10s}  share={s.damage_share:.1%}"
                f"  casts={s.casts}  hit={s.hit_rate:.1%}"
                f"  crit={s.crit_rate:.1%}  procs={s.procs}"
            )

    return "\n".join(lines)


def generate_stat_weight_report(weights: StatWeights) -> str:
    """One line per stat, strongest first."""
    lines = [
        f"Stat weights ({weights.num_runs:,} runs per stat, +{weights.delta:g} each,"
        f" base {weights.base_dps:.1f} DPS)",
    ]
    for name, value in sorted(weights.weights.items(), key=lambda kv: kv[1], reverse=True):
        lines.append(
            f"  {name:14s}  {value:7.3f} DPS/pt  ({weights.normalized[name]:.2f})"
        )
    return "\n".join(lines)
