"""Genetics for founding (generation 1) pets.

A new pet gets a uniformly random personality and a fixed number of traits
per type, each drawn with the rarity table. The same trait is never handed
out twice to one pet.
"""

import logging
import random
from datetime import datetime
from typing import List, Mapping, Optional, Set

from petsim.catalog import TraitCatalog
from petsim.config.engine_config import DEFAULT_GENETICS_CONFIG, GeneticsConfig
from petsim.config.genetics import PERSONALITY_MAX, PERSONALITY_MIN
from petsim.evolution.mutation import draw_trait
from petsim.models import PERSONALITY_ATTRIBUTES, InheritanceSource, Personality, Pet, PetTrait
from petsim.util.clock import resolve_now
from petsim.util.rng import get_rng_or_default, require_rng_param

logger = logging.getLogger(__name__)


def random_personality(rng: random.Random) -> Personality:
    """Roll five independent uniform attributes in [0, 100]."""
    rng = require_rng_param(rng, "random_personality")
    return Personality(
        **{name: rng.randint(PERSONALITY_MIN, PERSONALITY_MAX) for name in PERSONALITY_ATTRIBUTES}
    )


def assign_random_traits(
    catalog: TraitCatalog,
    trait_counts: Mapping[str, int],
    rng: random.Random,
    distribution: Optional[Mapping[str, float]] = None,
) -> List[PetTrait]:
    """Roll initial traits for a new pet.

    For each slot a rarity is sampled and a trait of that type and rarity is
    picked (any rarity of the type if the tier is empty). Traits already
    given to this pet are excluded from the draw; a slot with nothing left to
    give is skipped.

    Args:
        catalog: Trait catalog to draw from
        trait_counts: Slots per trait type, e.g. ``{"visual": 4, "personality": 3}``
        rng: Random number generator
        distribution: Rarity weights (defaults to the game table)

    Returns:
        Trait associations tagged ``initial``
    """
    rng = require_rng_param(rng, "assign_random_traits")
    assigned: List[PetTrait] = []
    used_ids: Set[str] = set()

    for trait_type, count in trait_counts.items():
        for _ in range(count):
            trait = draw_trait(catalog, trait_type, rng, distribution=distribution, exclude=used_ids)
            if trait is None:
                logger.debug("No unused %s traits left; skipping slot", trait_type)
                break
            assigned.append(PetTrait(trait=trait, source=InheritanceSource.INITIAL))
            used_ids.add(trait.id)

    return assigned


def create_pet_with_genetics(
    owner_id: str,
    name: str,
    catalog: TraitCatalog,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    config: Optional[GeneticsConfig] = None,
) -> Pet:
    """Create a generation-1 pet with random personality and initial traits."""
    cfg = config or DEFAULT_GENETICS_CONFIG
    rng = get_rng_or_default(rng, "create_pet_with_genetics")
    now = resolve_now(now)

    pet = Pet(
        owner_id=owner_id,
        name=name,
        generation=1,
        personality=random_personality(rng),
        traits=assign_random_traits(catalog, cfg.initial_trait_counts, rng, cfg.rarity_distribution),
        created_at=now,
        last_stat_update=now,
    )
    logger.info("Created pet %s (%s) with %d traits", pet.id, name, len(pet.traits))
    return pet
