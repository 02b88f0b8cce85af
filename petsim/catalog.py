"""Trait catalog access.

The engines only ever read the catalog, through two lookups. Empty results
are normal (a rarity tier may have no traits of a given type) and are
absorbed by fallback chains in the callers.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Protocol, Tuple, runtime_checkable

from petsim.exceptions import GeneticsError
from petsim.models import Rarity, Trait


@runtime_checkable
class TraitCatalog(Protocol):
    """Read-only trait lookup consumed by the genetics engine."""

    def find_by_type_and_rarity(self, trait_type: str, rarity: Rarity) -> List[Trait]:
        """Return every trait of ``trait_type`` with the given rarity."""

    def find_by_type(self, trait_type: str) -> List[Trait]:
        """Return every trait of ``trait_type`` regardless of rarity."""


class InMemoryTraitCatalog:
    """Catalog backed by a list of traits, indexed by (type, rarity)."""

    def __init__(self, traits: Iterable[Trait] = ()):
        self._by_id: Dict[str, Trait] = {}
        self._by_type: Dict[str, List[Trait]] = {}
        self._by_type_rarity: Dict[Tuple[str, Rarity], List[Trait]] = {}
        for trait in traits:
            self.add(trait)

    def add(self, trait: Trait) -> None:
        if trait.id in self._by_id:
            raise GeneticsError(f"Duplicate trait id in catalog: {trait.id}")
        self._by_id[trait.id] = trait
        self._by_type.setdefault(trait.trait_type, []).append(trait)
        self._by_type_rarity.setdefault((trait.trait_type, Rarity(trait.rarity)), []).append(trait)

    def get(self, trait_id: str) -> Trait:
        return self._by_id[trait_id]

    def find_by_type_and_rarity(self, trait_type: str, rarity: Rarity) -> List[Trait]:
        return list(self._by_type_rarity.get((trait_type, Rarity(rarity)), ()))

    def find_by_type(self, trait_type: str) -> List[Trait]:
        return list(self._by_type.get(trait_type, ()))

    def __len__(self) -> int:
        return len(self._by_id)

    def __iter__(self):
        return iter(self._by_id.values())


def _trait(trait_type: str, name: str, rarity: str, description: str) -> Trait:
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return Trait(
        id=f"{trait_type}-{slug}",
        name=name,
        trait_type=trait_type,
        rarity=Rarity(rarity),
        description=description,
    )


# Seed catalog shipped with the game
DEFAULT_TRAITS: Tuple[Trait, ...] = (
    # Visual
    _trait("visual", "Sky Blue", "common", "A bright sky blue coloration"),
    _trait("visual", "Leaf Green", "common", "A natural leaf green color"),
    _trait("visual", "Sunset Orange", "common", "A warm sunset orange hue"),
    _trait("visual", "Bubblegum Pink", "common", "A playful bubblegum pink shade"),
    _trait("visual", "Lavender Purple", "common", "A soft lavender purple tone"),
    _trait("visual", "Striped Pattern", "uncommon", "Distinctive striped markings"),
    _trait("visual", "Spotted Pattern", "uncommon", "Spotted coat pattern"),
    _trait("visual", "Gradient Fur", "uncommon", "Color transitions smoothly across body"),
    _trait("visual", "Glowing Eyes", "rare", "Eyes that emit a soft glow"),
    _trait("visual", "Crystal Horns", "rare", "Transparent crystalline horns"),
    _trait("visual", "Rainbow Shimmer", "legendary", "Fur shimmers with rainbow iridescence"),
    _trait("visual", "Galaxy Pattern", "legendary", "Coat displays a starfield galaxy pattern"),
    # Personality
    _trait("personality", "Cheerful", "common", "Always upbeat and positive"),
    _trait("personality", "Calm", "common", "Relaxed and peaceful demeanor"),
    _trait("personality", "Energetic", "common", "Always ready for activity and play"),
    _trait("personality", "Curious", "uncommon", "Loves to explore and ask questions"),
    _trait("personality", "Loyal", "uncommon", "Deeply attached to owner"),
    _trait("personality", "Mischievous", "uncommon", "Playfully troublesome nature"),
    _trait("personality", "Wise", "rare", "Thoughtful and perceptive"),
    _trait("personality", "Empathetic", "legendary", "Deeply understands emotions"),
    # Skill
    _trait("skill", "Quick Learner", "common", "Picks up new skills easily"),
    _trait("skill", "Athletic", "common", "Naturally physically capable"),
    _trait("skill", "Artistic", "common", "Creative and expressive"),
    _trait("skill", "Mathematical Mind", "uncommon", "Excels at numbers and logic"),
    _trait("skill", "Musical Talent", "uncommon", "Natural sense of rhythm and melody"),
    _trait("skill", "Problem Solver", "uncommon", "Excellent at finding solutions"),
    _trait("skill", "Photographic Memory", "rare", "Can recall details perfectly"),
    _trait("skill", "Linguistic Genius", "rare", "Mastery of languages"),
    _trait("skill", "Telepathic Bond", "legendary", "Can sense owner's emotions remotely"),
    _trait("skill", "Universal Translator", "legendary", "Can understand and speak any language"),
)


def default_catalog() -> InMemoryTraitCatalog:
    return InMemoryTraitCatalog(DEFAULT_TRAITS)
