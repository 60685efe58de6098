"""
Seeded pseudo-random generator for reproducible demo scenes.

Implements the Park-Miller "minimal standard" linear congruential
generator:
    state = (state * 16807) mod (2^31 - 1)
    u     = (state - 1) / (2^31 - 2)

and a Box-Muller transform for standard normal draws. Every scene owns
its own generator object, so generation runs never share state.
"""

import logging
import math
from typing import Iterator

import numpy as np

from config import LCG_MULTIPLIER, LCG_MODULUS

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a generation input cannot produce a valid scene."""


class LCGRandom:
    """
    Deterministic uniform / Gaussian stream driven by an integer seed.

    The same seed and the same call order always give bit-identical
    values, which is what keeps each demo scene visually fixed.

    Attributes:
        seed: Seed the stream was created with (reduced mod 2^31 - 1)
        state: Current LCG state
        draws: Number of uniform values consumed so far
    """

    def __init__(self, seed: int):
        """
        Initialize the generator.

        Args:
            seed: Any integer not divisible by 2^31 - 1
        """
        reduced = int(seed) % LCG_MODULUS
        if reduced == 0:
            raise ConfigurationError(
                f"Seed {seed} is a multiple of {LCG_MODULUS}; the LCG would stay at 0"
            )
        self.seed = reduced
        self.state = reduced
        self.draws = 0

    def random(self) -> float:
        """Draw one uniform value in [0, 1)."""
        self.state = (self.state * LCG_MULTIPLIER) % LCG_MODULUS
        self.draws += 1
        return (self.state - 1) / (LCG_MODULUS - 1)

    def gauss(self) -> float:
        """
        Draw one standard normal value (Box-Muller, cosine branch).

        z = sqrt(-2 ln u) * cos(2 pi v)

        u is drawn before v. A u of exactly 0 is resampled so the log is
        always defined.
        """
        u = self.random()
        while u <= 0.0:
            logger.debug("LCG produced u=0 at draw %d; resampling", self.draws)
            u = self.random()
        v = self.random()
        return math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)

    def uniforms(self) -> Iterator[float]:
        """Infinite lazy stream of uniform draws, continuing from the current state."""
        while True:
            yield self.random()

    def normal(self, size: int) -> np.ndarray:
        """Draw `size` standard normal values into an array."""
        return np.array([self.gauss() for _ in range(size)], dtype=np.float64)

    def reset(self) -> 'LCGRandom':
        """Restart the stream from the original seed."""
        self.state = self.seed
        self.draws = 0
        return self

    def __repr__(self) -> str:
        return f"LCGRandom(seed={self.seed}, draws={self.draws})"
