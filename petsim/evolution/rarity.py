"""Weighted rarity sampling shared by initial trait rolls and mutations."""

import random
from typing import Mapping, Optional

from petsim.config.genetics import RARITY_DISTRIBUTION
from petsim.models import Rarity
from petsim.util.rng import require_rng_param


def sample_rarity(
    rng: random.Random,
    distribution: Optional[Mapping[str, float]] = None,
) -> Rarity:
    """Draw a rarity tier from a cumulative weight table.

    One uniform draw in [0, 1) is walked against the cumulative weights in
    table order. If floating-point error leaves the draw above the final
    cumulative sum, the result is ``common``.

    Args:
        rng: Random number generator
        distribution: Rarity name -> probability (defaults to the game table)

    Returns:
        The sampled Rarity
    """
    rng = require_rng_param(rng, "sample_rarity")
    table = distribution if distribution is not None else RARITY_DISTRIBUTION

    draw = rng.random()
    cumulative = 0.0
    for rarity, probability in table.items():
        cumulative += probability
        if draw < cumulative:
            return Rarity(rarity)

    return Rarity.COMMON
