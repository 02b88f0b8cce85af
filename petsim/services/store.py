"""Pet store protocol and an in-memory reference implementation.

The engines never persist anything. The services in this package talk to a
PetStore; production deployments back it with their database, tests and
tools use InMemoryPetStore.
"""

import threading
from dataclasses import replace
from typing import Any, Dict, List, Protocol, runtime_checkable

from petsim.decay.health_warnings import PetWarning, WarningType
from petsim.exceptions import PetNotFoundError
from petsim.models import Pet


@runtime_checkable
class PetStore(Protocol):
    """Minimal persistence interface the services rely on."""

    def get(self, pet_id: str) -> Pet:
        """Return the pet or raise PetNotFoundError."""

    def save(self, pet: Pet) -> None:
        """Insert or replace a pet snapshot."""

    def update(self, pet_id: str, **changes: Any) -> Pet:
        """Apply field changes to the stored pet atomically and return the result.

        Only the named fields are written, so concurrent handlers that touch
        different fields of the same pet do not overwrite each other.
        """

    def list_pets(self) -> List[Pet]:
        """Return every stored pet."""

    def count_by_owner(self, owner_id: str) -> int:
        """Number of pets owned by ``owner_id``."""

    def active_warnings(self, pet_id: str) -> Dict[WarningType, PetWarning]:
        """Uncleared warnings for a pet, keyed by type."""

    def raise_warning(self, pet_id: str, warning: PetWarning) -> None:
        """Record a new active warning."""

    def clear_warning(self, pet_id: str, warning_type: WarningType) -> None:
        """Mark a warning type as cleared for a pet."""


class InMemoryPetStore:
    """Dict-backed PetStore, safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pets: Dict[str, Pet] = {}
        self._warnings: Dict[str, Dict[WarningType, PetWarning]] = {}

    def get(self, pet_id: str) -> Pet:
        with self._lock:
            try:
                return self._pets[pet_id]
            except KeyError:
                raise PetNotFoundError(f"Pet {pet_id} not found") from None

    def save(self, pet: Pet) -> None:
        with self._lock:
            self._pets[pet.id] = pet

    def update(self, pet_id: str, **changes: Any) -> Pet:
        with self._lock:
            try:
                current = self._pets[pet_id]
            except KeyError:
                raise PetNotFoundError(f"Pet {pet_id} not found") from None
            updated = replace(current, **changes)
            self._pets[pet_id] = updated
            return updated

    def list_pets(self) -> List[Pet]:
        with self._lock:
            return list(self._pets.values())

    def count_by_owner(self, owner_id: str) -> int:
        with self._lock:
            return sum(1 for pet in self._pets.values() if pet.owner_id == owner_id)

    def active_warnings(self, pet_id: str) -> Dict[WarningType, PetWarning]:
        with self._lock:
            return dict(self._warnings.get(pet_id, {}))

    def raise_warning(self, pet_id: str, warning: PetWarning) -> None:
        with self._lock:
            self._warnings.setdefault(pet_id, {})[warning.type] = warning

    def clear_warning(self, pet_id: str, warning_type: WarningType) -> None:
        with self._lock:
            self._warnings.get(pet_id, {}).pop(warning_type, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._pets)
