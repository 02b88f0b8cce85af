"""Core data models: pets, their vital stats, personality and genetic traits.

These are plain value snapshots. The engines never mutate a snapshot they
were handed; they build and return new ones.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from petsim.util.clock import utc_now


class Rarity(str, Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    LEGENDARY = "legendary"


class InheritanceSource(str, Enum):
    """Where a pet got one of its traits."""

    INITIAL = "initial"
    PARENT1 = "parent1"
    PARENT2 = "parent2"
    MUTATION = "mutation"


def new_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass(frozen=True)
class Trait:
    """A catalog trait. Read-only from the engine's point of view.

    ``trait_type`` is an open category ("visual", "personality", "skill", ...).
    """

    id: str
    name: str
    trait_type: str
    rarity: Rarity
    description: str = ""


@dataclass(frozen=True)
class PetTrait:
    """Association of a trait with a pet, tagged with its provenance."""

    trait: Trait
    source: InheritanceSource

    @property
    def trait_id(self) -> str:
        return self.trait.id

    @property
    def trait_type(self) -> str:
        return self.trait.trait_type


PERSONALITY_ATTRIBUTES = ("friendliness", "energy", "curiosity", "patience", "playfulness")
VITAL_STATS = ("health", "hunger", "happiness", "energy")


@dataclass
class Personality:
    """Five innate attributes, each an int in [0, 100]. Fixed at birth."""

    friendliness: int = 50
    energy: int = 50
    curiosity: int = 50
    patience: int = 50
    playfulness: int = 50

    def as_dict(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in PERSONALITY_ATTRIBUTES}


@dataclass
class VitalStats:
    """Four care stats, each an int in [0, 100].

    ``energy`` here is the tiredness meter, unrelated to the personality
    attribute of the same name.
    """

    health: int = 100
    hunger: int = 0
    happiness: int = 100
    energy: int = 100

    def as_dict(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in VITAL_STATS}


@dataclass
class Pet:
    """Snapshot of a pet as seen by the engines."""

    owner_id: str
    name: str
    generation: int = 1
    personality: Personality = field(default_factory=Personality)
    stats: VitalStats = field(default_factory=VitalStats)
    traits: List[PetTrait] = field(default_factory=list)
    is_critical: bool = False
    max_health_penalty: int = 0
    created_at: datetime = field(default_factory=utc_now)
    last_stat_update: datetime = field(default_factory=utc_now)
    neglect_started_at: Optional[datetime] = None
    last_fed_at: Optional[datetime] = None
    last_interaction_at: Optional[datetime] = None
    last_bred_at: Optional[datetime] = None
    parent1_id: Optional[str] = None
    parent2_id: Optional[str] = None
    id: str = field(default_factory=new_id)

    def trait_ids(self) -> List[str]:
        return [pt.trait_id for pt in self.traits]

    def traits_by_type(self) -> Dict[str, List[PetTrait]]:
        """Group associations by trait type, preserving order of first appearance."""
        grouped: Dict[str, List[PetTrait]] = {}
        for pet_trait in self.traits:
            grouped.setdefault(pet_trait.trait_type, []).append(pet_trait)
        return grouped
