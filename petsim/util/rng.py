"""RNG utilities for deterministic genetics.

Every random decision in petsim (rarity draws, personality variance,
shuffles, mutation rolls) goes through an explicit ``random.Random`` so that
tests and replays can seed it. Internal helpers insist on receiving one;
public entry points may fall back to a fresh unseeded generator.
"""

import logging
import random
from typing import Optional

logger = logging.getLogger(__name__)


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This indicates a bug in the caller: the public entry point should have
    resolved an RNG before delegating to the low-level operation.
    """
    pass


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def roll_mutation(chance, rng=None):
            rng = require_rng_param(rng, "roll_mutation")
            return rng.random() < chance
    """
    if rng is None:
        raise MissingRNGError(
            f"RNG required: {context}. Pass the caller's RNG explicitly."
        )
    return rng


def get_rng_or_default(rng: Optional[random.Random], context: str = "unknown") -> random.Random:
    """Return ``rng`` or a fresh unseeded generator for top-level callers.

    Use this only at public entry points (pet creation, breeding). Everything
    below them should receive the resolved RNG and call require_rng_param().

    Args:
        rng: Caller supplied RNG, may be None
        context: Description of where this is called from (for debug logs)

    Returns:
        The supplied RNG, or a new ``random.Random()``
    """
    if rng is not None:
        return rng

    logger.debug("No RNG supplied for %s; using an unseeded generator", context)
    return random.Random()
