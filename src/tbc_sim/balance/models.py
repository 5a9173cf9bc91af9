"""Pydantic v2 models for balance analysis output.

These models describe what a batch of simulated encounters says about a
scenario: damage distribution, mana behaviour, per-spell breakdown, stat
weights, and the per-seed regression baseline.  All are serializable to
and from JSON.
"""

from __future__ import annotations

from pydantic import BaseModel

from tbc_sim.ir.options import SimulationConfig


class SpellBreakdown(BaseModel):
    """Per-spell totals across every run of a batch."""

    spell: str
    casts: int
    """Player casts, procs excluded."""
    hits: int
    crits: int
    procs: int
    """Damage events produced by talents or items copying this spell."""
    total_damage: float
    """Damage of casts and procs of this spell."""
    hit_rate: float
    """hits / casts."""
    crit_rate: float
    """crits / hits."""
    damage_share: float
    """total_damage / batch total damage."""


class BatchSummary(BaseModel):
    """Aggregate statistics of a batch of encounters."""

    num_runs: int
    duration: int
    """Encounter length in seconds."""
    mean_damage: float
    stdev_damage: float
    min_damage: float
    max_damage: float
    mean_dps: float
    oom_rate: float
    """Fraction of runs that ran out of mana."""
    mean_oom_second: float | None = None
    """Average second of the first out-of-mana event, over OOM runs only."""
    mean_ending_mana: float
    spells: list[SpellBreakdown] = []


class StatWeights(BaseModel):
    """DPS gained per point of each stat, relative to a baseline scenario."""

    num_runs: int
    base_dps: float
    delta: float
    """Amount each stat was raised by for its measurement."""
    weights: dict[str, float]
    """Stat name -> DPS per point."""
    normalized: dict[str, float]
    """Weights divided by the spell damage weight (spell damage = 1.0)."""


class RegressionBaseline(BaseModel):
    """Recorded per-seed results of a scenario, for detecting behaviour changes."""

    config: SimulationConfig
    num_runs: int
    generated_at: str
    """ISO 8601 timestamp."""
    damage_per_run: list[float]
    """Total damage of run ``k``, which used seed ``random_seed + k + 1``."""
    summary: BatchSummary
