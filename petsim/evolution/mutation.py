"""Mutation operations for trait inheritance.

A mutation swaps an inherited trait slot for a freshly rolled trait of the
same type. The replacement is drawn with the same rarity table used for
generation-1 pets, so legendary traits can appear in any generation.

Trait draws degrade gracefully: when the sampled rarity tier is empty for a
type, any trait of that type is used; when the type itself is empty, the
draw yields None and the caller decides what the slot becomes.
"""

import logging
import random
from typing import AbstractSet, List, Mapping, Optional

from petsim.catalog import TraitCatalog
from petsim.evolution.rarity import sample_rarity
from petsim.models import Trait
from petsim.util.rng import require_rng_param

logger = logging.getLogger(__name__)


def should_mutate(mutation_chance: float, rng: Optional[random.Random] = None) -> bool:
    """Roll a mutation for one inherited slot.

    Args:
        mutation_chance: Probability of mutation (0.0-1.0)
        rng: Random number generator

    Returns:
        True if the slot mutates
    """
    rng = require_rng_param(rng, "should_mutate")
    return rng.random() < mutation_chance


def draw_trait(
    catalog: TraitCatalog,
    trait_type: str,
    rng: random.Random,
    *,
    distribution: Optional[Mapping[str, float]] = None,
    exclude: AbstractSet[str] = frozenset(),
) -> Optional[Trait]:
    """Draw a random trait of ``trait_type`` using the rarity table.

    Args:
        catalog: Trait catalog to query
        trait_type: Category to draw from
        rng: Random number generator
        distribution: Rarity weights (defaults to the game table)
        exclude: Trait ids that must not be returned

    Returns:
        A trait, or None when no eligible trait of that type exists
    """
    rng = require_rng_param(rng, "draw_trait")
    rarity = sample_rarity(rng, distribution)

    pool = _eligible(catalog.find_by_type_and_rarity(trait_type, rarity), exclude)
    if not pool:
        logger.debug("No %s traits of rarity %s; falling back to any rarity", trait_type, rarity.value)
        pool = _eligible(catalog.find_by_type(trait_type), exclude)

    if not pool:
        return None
    return rng.choice(pool)


def _eligible(traits: List[Trait], exclude: AbstractSet[str]) -> List[Trait]:
    if not exclude:
        return list(traits)
    return [trait for trait in traits if trait.id not in exclude]


def mutate_trait(
    original: Trait,
    catalog: TraitCatalog,
    rng: random.Random,
    distribution: Optional[Mapping[str, float]] = None,
) -> Optional[Trait]:
    """Return a random replacement for ``original`` from the same trait type.

    The replacement may be the original trait itself; deduplication against
    the offspring's existing traits is the caller's job.
    """
    return draw_trait(catalog, original.trait_type, rng, distribution=distribution)
