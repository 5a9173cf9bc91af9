"""Balance analysis: batch summaries, stat weights, and regression baselines."""

from tbc_sim.balance.baselines import (
    find_regressions,
    generate_baseline,
    load_baseline,
    save_baseline,
)
from tbc_sim.balance.metrics import compute_batch_summary, compute_spell_breakdown
from tbc_sim.balance.models import (
    BatchSummary,
    RegressionBaseline,
    SpellBreakdown,
    StatWeights,
)
from tbc_sim.balance.report import generate_stat_weight_report, generate_text_report
from tbc_sim.balance.stat_weights import compute_stat_weights

__all__ = [
    "BatchSummary",
    "RegressionBaseline",
    "SpellBreakdown",
    "StatWeights",
    "compute_batch_summary",
    "compute_spell_breakdown",
    "compute_stat_weights",
    "find_regressions",
    "generate_baseline",
    "generate_stat_weight_report",
    "generate_text_report",
    "load_baseline",
    "save_baseline",
]
