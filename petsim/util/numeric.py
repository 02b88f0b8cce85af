"""Numeric helpers shared by the genetics and decay engines."""

import math
import random

from petsim.util.rng import require_rng_param

STAT_MIN = 0
STAT_MAX = 100


def clamp(value: float, min_val: float = STAT_MIN, max_val: float = STAT_MAX) -> float:
    """Clamp ``value`` to [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def round_half_up(value: float) -> int:
    """Round to the nearest int with halves going up (37.5 -> 38, -2.5 -> -2).

    Python's round() uses banker's rounding, which would make stored stats
    drift depending on parity.
    """
    return int(math.floor(value + 0.5))


def random_variance(magnitude: int, rng: random.Random) -> int:
    """Draw a uniform integer in [-magnitude, +magnitude]."""
    rng = require_rng_param(rng, "random_variance")
    return rng.randint(-magnitude, magnitude)
