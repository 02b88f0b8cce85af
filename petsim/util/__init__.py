"""Shared utilities for the petsim engines."""

from petsim.util.clock import ensure_utc, hours_between, resolve_now, utc_now
from petsim.util.numeric import clamp, random_variance, round_half_up
from petsim.util.rng import MissingRNGError, get_rng_or_default, require_rng_param

__all__ = [
    "clamp",
    "random_variance",
    "round_half_up",
    "ensure_utc",
    "hours_between",
    "resolve_now",
    "utc_now",
    "MissingRNGError",
    "get_rng_or_default",
    "require_rng_param",
]
