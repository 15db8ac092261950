# noise.py - gradient noise sampling and the height remapping curve
from __future__ import annotations

import logging
import math
from typing import Callable

from opensimplex import OpenSimplex

logger = logging.getLogger(__name__)

NoiseSampler = Callable[[float, float], float]

MAX_HEIGHT = 10.0
NOISE_FREQUENCY = 0.1
HEIGHT_EXPONENT = 1.5
FALLBACK_HEIGHT = 0.0


def simplex_sampler(seed: int) -> NoiseSampler:
    """2D OpenSimplex noise in ``[-1, 1]``, fully determined by ``seed``."""
    return OpenSimplex(seed=seed).noise2


class HeightField:
    """Turns raw noise into a bounded terrain height.

    ``raw`` in ``[-1, 1]`` is normalized to ``[0, 1]``, raised to
    ``exponent`` (1.5 pushes the distribution toward lowland) and scaled by
    ``max_height``.  A sampler that returns NaN or infinity breaks its
    contract; such samples get ``FALLBACK_HEIGHT`` and are counted in
    ``anomalies`` instead of aborting the pass.
    """

    def __init__(self, sampler: NoiseSampler, max_height: float = MAX_HEIGHT,
                 frequency: float = NOISE_FREQUENCY, exponent: float = HEIGHT_EXPONENT) -> None:
        self.sampler = sampler
        self.max_height = max_height
        self.frequency = frequency
        self.exponent = exponent
        self.anomalies = 0

    def sample(self, column: int, row: int) -> float:
        raw = self.sampler(column * self.frequency, row * self.frequency)
        if not math.isfinite(raw):
            self.anomalies += 1
            logger.warning("noise sample at (%d, %d) is %r; using height %.1f",
                           column, row, raw, FALLBACK_HEIGHT)
            return FALLBACK_HEIGHT
        return self.remap(raw)

    def remap(self, raw: float) -> float:
        normalized = min(1.0, max(0.0, (raw + 1.0) * 0.5))
        return (normalized ** self.exponent) * self.max_height
