"""Inheritance utilities for passing personality and traits to an offspring.

Inheritance follows two rules:
- Personality attributes: integer mean of the parents plus bounded noise
- Traits: per trait type, half of the combined parental pool (at least one)
  is sampled without replacement, each slot with a chance to mutate

An offspring never receives the same trait twice. Slots whose trait is
already taken simply produce nothing, so an offspring can end up with fewer
traits than the computed count.
"""

import logging
import random
from typing import Dict, List, Mapping, Optional, Set, Tuple

from petsim.catalog import TraitCatalog
from petsim.evolution.mutation import mutate_trait, should_mutate
from petsim.models import (
    PERSONALITY_ATTRIBUTES,
    InheritanceSource,
    Personality,
    Pet,
    PetTrait,
    Trait,
)
from petsim.util.numeric import clamp, random_variance
from petsim.util.rng import require_rng_param

logger = logging.getLogger(__name__)


def inherit_attribute(
    val1: int,
    val2: int,
    variance: int,
    rng: Optional[random.Random] = None,
    min_val: int = 0,
    max_val: int = 100,
) -> int:
    """Inherit one personality attribute from two parents.

    Args:
        val1: First parent's value
        val2: Second parent's value
        variance: Max absolute noise added to the floored mean
        rng: Random number generator
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        ``clamp(floor((val1 + val2) / 2) + noise)``
    """
    rng = require_rng_param(rng, "inherit_attribute")
    return int(clamp((val1 + val2) // 2 + random_variance(variance, rng), min_val, max_val))


def inherit_personality(
    parent1: Personality,
    parent2: Personality,
    variance: int,
    rng: Optional[random.Random] = None,
) -> Personality:
    """Blend two personalities, drawing fresh noise for every attribute."""
    rng = require_rng_param(rng, "inherit_personality")
    return Personality(
        **{
            name: inherit_attribute(getattr(parent1, name), getattr(parent2, name), variance, rng)
            for name in PERSONALITY_ATTRIBUTES
        }
    )


def inherited_count(n1: int, n2: int) -> int:
    """Number of slots an offspring gets for a trait type held n1/n2 times by its parents."""
    return max(1, (n1 + n2) // 2)


def select_candidates(
    parent1_traits: List[PetTrait],
    parent2_traits: List[PetTrait],
    rng: random.Random,
) -> List[Tuple[Trait, InheritanceSource]]:
    """Pick the inherited slots for one trait type.

    The two parents' associations are pooled (tagged by origin), shuffled
    uniformly, and the first ``inherited_count`` entries are returned.
    """
    rng = require_rng_param(rng, "select_candidates")
    pool = [(pt.trait, InheritanceSource.PARENT1) for pt in parent1_traits]
    pool.extend((pt.trait, InheritanceSource.PARENT2) for pt in parent2_traits)
    rng.shuffle(pool)
    return pool[: inherited_count(len(parent1_traits), len(parent2_traits))]


def inherit_traits(
    parent1: Pet,
    parent2: Pet,
    catalog: TraitCatalog,
    *,
    mutation_chance: float,
    rng: random.Random,
    distribution: Optional[Mapping[str, float]] = None,
) -> List[PetTrait]:
    """Build the offspring's trait associations from both parents.

    Trait types are processed in order of first appearance (parent1 first).
    A single used-id set spans all types.

    Args:
        parent1: First parent, with traits
        parent2: Second parent, with traits
        catalog: Catalog used to draw mutations
        mutation_chance: Probability a slot mutates
        rng: Random number generator
        distribution: Rarity weights for mutation draws

    Returns:
        The offspring's trait associations, duplicate free
    """
    rng = require_rng_param(rng, "inherit_traits")
    by_type1 = parent1.traits_by_type()
    by_type2 = parent2.traits_by_type()
    trait_types: Dict[str, None] = dict.fromkeys(list(by_type1) + list(by_type2))

    inherited: List[PetTrait] = []
    used_ids: Set[str] = set()

    def take(trait: Trait, source: InheritanceSource) -> bool:
        if trait.id in used_ids:
            return False
        inherited.append(PetTrait(trait=trait, source=source))
        used_ids.add(trait.id)
        return True

    for trait_type in trait_types:
        candidates = select_candidates(by_type1.get(trait_type, []), by_type2.get(trait_type, []), rng)
        for trait, origin in candidates:
            if should_mutate(mutation_chance, rng):
                replacement = mutate_trait(trait, catalog, rng, distribution)
                if replacement is not None and take(replacement, InheritanceSource.MUTATION):
                    logger.debug("Mutation: %s slot %s -> %s", trait_type, trait.id, replacement.id)
                    continue
                # Mutation produced nothing usable; inherit the candidate instead
                take(trait, origin)
            else:
                take(trait, origin)

    return inherited
