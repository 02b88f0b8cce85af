"""Breeding: combine two parent snapshots into one offspring snapshot.

Callers are expected to run can_breed() first; breed() itself does not
re-check eligibility, it only refuses malformed parent snapshots.
"""

import logging
import random
from datetime import datetime
from typing import Optional

from petsim.catalog import TraitCatalog
from petsim.config.engine_config import DEFAULT_GENETICS_CONFIG, GeneticsConfig
from petsim.evolution.inheritance import inherit_personality, inherit_traits
from petsim.models import Pet
from petsim.util.clock import resolve_now
from petsim.util.rng import get_rng_or_default
from petsim.validation import ensure_valid_pet

logger = logging.getLogger(__name__)


def offspring_generation(parent1: Pet, parent2: Pet) -> int:
    return max(parent1.generation, parent2.generation) + 1


def breed(
    parent1: Pet,
    parent2: Pet,
    owner_id: str,
    offspring_name: str,
    catalog: TraitCatalog,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    config: Optional[GeneticsConfig] = None,
) -> Pet:
    """Create an offspring from two parents.

    Args:
        parent1: First parent, with its traits loaded
        parent2: Second parent, with its traits loaded
        owner_id: Owner of the offspring
        offspring_name: Name for the offspring
        catalog: Trait catalog used for mutation draws
        rng: Random number generator (unseeded if omitted)
        now: Birth time of the offspring (current UTC time if omitted)
        config: Genetics configuration

    Returns:
        The offspring snapshot with generation, blended personality,
        inherited traits and parent ids. Vital stats start at their defaults.

    Raises:
        InvalidSnapshotError: If either parent violates the snapshot invariants
    """
    cfg = config or DEFAULT_GENETICS_CONFIG
    rng = get_rng_or_default(rng, "breed")
    now = resolve_now(now)
    ensure_valid_pet(parent1, path="parent1")
    ensure_valid_pet(parent2, path="parent2")

    personality = inherit_personality(
        parent1.personality, parent2.personality, cfg.personality_variance, rng
    )
    traits = inherit_traits(
        parent1,
        parent2,
        catalog,
        mutation_chance=cfg.mutation_chance,
        rng=rng,
        distribution=cfg.rarity_distribution,
    )

    offspring = Pet(
        owner_id=owner_id,
        name=offspring_name,
        generation=offspring_generation(parent1, parent2),
        personality=personality,
        traits=traits,
        created_at=now,
        last_stat_update=now,
        parent1_id=parent1.id,
        parent2_id=parent2.id,
    )
    logger.info(
        "Bred %s + %s -> %s (gen %d, %d traits)",
        parent1.id,
        parent2.id,
        offspring.id,
        offspring.generation,
        len(traits),
    )
    return offspring
