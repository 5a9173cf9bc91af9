"""Per-run metrics collected by the simulation engine.

A fresh :class:`SimMetrics` is created at every reset and handed back by
``Simulation.run``; the engine never touches it again afterwards.  It is a
plain ``dataclass`` (not a Pydantic model) to keep accumulation cheap.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tbc_sim.sim.core.cast import Cast


@dataclass
class SimMetrics:
    """Stats from a single simulated encounter.

    Attributes
    ----------
    total_damage:
        Damage from every landed cast and proc.
    damage_at_oom:
        ``total_damage`` at the first out-of-mana event.
    oom_at_second:
        Whole second of the first out-of-mana event (``0`` = never, or
        within the first second; see ``ran_out_of_mana``).
    ran_out_of_mana:
        ``True`` once an out-of-mana event was recorded.
    ending_mana:
        Mana left when the run finished.
    casts:
        Resolved casts in resolution order, misses and procs included.  A
        proc follows the cast that triggered it.
    rotation:
        Spell names of the configured rotation.
    """

    total_damage: float = 0.0
    damage_at_oom: float = 0.0
    oom_at_second: int = 0
    ran_out_of_mana: bool = False
    ending_mana: float = 0.0
    casts: list[Cast] = field(default_factory=list)
    rotation: list[str] = field(default_factory=list)

    def record_oom(self, tick: int, ticks_per_second: int) -> None:
        """Capture the first out-of-mana event; later calls are ignored."""
        if self.ran_out_of_mana:
            return
        self.ran_out_of_mana = True
        self.oom_at_second = tick // ticks_per_second
        self.damage_at_oom = self.total_damage

    def record_cast(self, cast: Cast) -> None:
        self.total_damage += cast.did_damage
        self.casts.append(cast)

    @property
    def hits(self) -> int:
        return sum(1 for c in self.casts if c.did_hit and not c.is_proc)

    @property
    def crits(self) -> int:
        return sum(1 for c in self.casts if c.did_crit and not c.is_proc)
