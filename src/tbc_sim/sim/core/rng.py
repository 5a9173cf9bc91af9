"""Seeded random number generator for deterministic combat simulation.

Wraps Python's random.Random so that every random draw of a run comes from
one stream owned by the engine.  The stream is reseeded at the start of
each run; the order of draws is part of the simulator's contract.
"""

from __future__ import annotations

import random


class SimRNG:
    """Deterministic RNG that can be reseeded between runs.

    Parameters
    ----------
    seed:
        Integer seed for the underlying Mersenne Twister.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    # -- public properties ---------------------------------------------------

    @property
    def seed(self) -> int:
        """Return the seed the stream was last (re)initialised with."""
        return self._seed

    def reseed(self, seed: int) -> None:
        """Restart the stream from *seed*."""
        self._seed = seed
        self._rng.seed(seed)

    # -- core random methods -------------------------------------------------

    def random_float(self) -> float:
        """Return a random float in the half-open interval ``[0.0, 1.0)``."""
        return self._rng.random()

    def random_below(self, n: int) -> int:
        """Return a random integer in ``[0, n)``.

        ``n <= 0`` returns ``0`` without consuming a draw, so a fixed damage
        range does not shift the stream.
        """
        if n <= 0:
            return 0
        return self._rng.randrange(n)

    def chance(self, probability: float) -> bool:
        """Draw once and return ``True`` with the given *probability*."""
        return self._rng.random() < probability

    # -- dunder helpers ------------------------------------------------------

    def __repr__(self) -> str:
        return f"SimRNG(seed={self._seed})"
