"""Handler services that connect the engines to a pet store."""

from petsim.services.genetics_service import BreedingOutcome, GeneticsService
from petsim.services.recovery_service import RecoveryService
from petsim.services.stat_update_service import StatUpdateService
from petsim.services.store import InMemoryPetStore, PetStore

__all__ = [
    "BreedingOutcome",
    "GeneticsService",
    "InMemoryPetStore",
    "PetStore",
    "RecoveryService",
    "StatUpdateService",
]
