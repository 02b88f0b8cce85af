"""Genetic inheritance engine.

This package covers the life of a pet's genes:

- Founding pets: random personality and rarity-weighted initial traits
- Eligibility: the ordered rule chain deciding whether two pets may breed
- Breeding: blended personality, pooled and possibly mutated traits

The low-level operations (rarity sampling, mutation, inheritance) live in
petsim.evolution; this package wires them to pet snapshots and config.
"""

from petsim.genetics.assignment import (
    assign_random_traits,
    create_pet_with_genetics,
    random_personality,
)
from petsim.genetics.breeding import breed, offspring_generation
from petsim.genetics.eligibility import (
    REASON_COOLDOWN,
    REASON_CRITICAL,
    REASON_LOW_HEALTH,
    REASON_SAME_PET,
    REASON_TOO_YOUNG,
    EligibilityResult,
    can_breed,
    check_eligibility,
)

__all__ = [
    # Founding pets
    "assign_random_traits",
    "create_pet_with_genetics",
    "random_personality",
    # Breeding
    "breed",
    "offspring_generation",
    # Eligibility
    "EligibilityResult",
    "can_breed",
    "check_eligibility",
    "REASON_COOLDOWN",
    "REASON_CRITICAL",
    "REASON_LOW_HEALTH",
    "REASON_SAME_PET",
    "REASON_TOO_YOUNG",
]
