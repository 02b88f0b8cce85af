"""Evolution module: the genetic operations behind pet breeding.

The module consolidates:
- Rarity: weighted sampling of rarity tiers
- Mutation: replacing an inherited trait with a fresh draw
- Inheritance: blending personality and pooling parental traits

All operations take an explicit ``random.Random`` so outcomes can be
reproduced from a seed.
"""

from petsim.evolution.inheritance import (
    inherit_attribute,
    inherit_personality,
    inherit_traits,
    inherited_count,
    select_candidates,
)
from petsim.evolution.mutation import draw_trait, mutate_trait, should_mutate
from petsim.evolution.rarity import sample_rarity

__all__ = [
    # Rarity
    "sample_rarity",
    # Mutation
    "draw_trait",
    "mutate_trait",
    "should_mutate",
    # Inheritance
    "inherit_attribute",
    "inherit_personality",
    "inherit_traits",
    "inherited_count",
    "select_candidates",
]
