"""Validated boundary models for callers that hand the engines raw data.

The scheduler and read path load pets from their own store and pass plain
mappings (or these models) to the batch decay wrapper. Validating here means
out-of-range stats are rejected before the engine sees them.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from petsim.models import Pet, VitalStats


class StatsModel(BaseModel):
    """The four vital stats, each an int in [0, 100]."""

    health: int = Field(ge=0, le=100)
    hunger: int = Field(ge=0, le=100)
    happiness: int = Field(ge=0, le=100)
    energy: int = Field(ge=0, le=100)

    def to_stats(self) -> VitalStats:
        return VitalStats(
            health=self.health,
            hunger=self.hunger,
            happiness=self.happiness,
            energy=self.energy,
        )


class PetDecayDescriptor(BaseModel):
    """Everything the decay transform needs to know about one pet."""

    id: str
    stats: StatsModel
    last_update: datetime
    last_interaction: Optional[datetime] = None
    neglect_started_at: Optional[datetime] = None
    is_critical: bool = False

    @classmethod
    def from_pet(cls, pet: Pet) -> "PetDecayDescriptor":
        return cls(
            id=pet.id,
            stats=StatsModel(**pet.stats.as_dict()),
            last_update=pet.last_stat_update,
            last_interaction=pet.last_interaction_at,
            neglect_started_at=pet.neglect_started_at,
            is_critical=pet.is_critical,
        )


class BreedingRequest(BaseModel):
    """Payload of a breeding request from the API layer."""

    parent1_id: str = Field(min_length=1)
    parent2_id: str = Field(min_length=1)
    offspring_name: str = Field(min_length=1, max_length=50)
