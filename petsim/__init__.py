"""petsim: genetics and stat decay engine for virtual companion pets."""

from petsim.catalog import DEFAULT_TRAITS, InMemoryTraitCatalog, TraitCatalog, default_catalog
from petsim.config import DecayConfig, EngineConfig, GeneticsConfig
from petsim.decay import (
    StatUpdateResult,
    batch_update_pet_stats,
    calculate_stat_degradation,
)
from petsim.genetics import (
    EligibilityResult,
    breed,
    can_breed,
    check_eligibility,
    create_pet_with_genetics,
)
from petsim.models import (
    InheritanceSource,
    Personality,
    Pet,
    PetTrait,
    Rarity,
    Trait,
    VitalStats,
)

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_TRAITS", "InMemoryTraitCatalog", "TraitCatalog", "default_catalog",
    "DecayConfig", "EngineConfig", "GeneticsConfig",
    "StatUpdateResult", "batch_update_pet_stats", "calculate_stat_degradation",
    "EligibilityResult", "breed", "can_breed", "check_eligibility", "create_pet_with_genetics",
    "InheritanceSource", "Personality", "Pet", "PetTrait", "Rarity", "Trait", "VitalStats",
]
