"""Pet creation and breeding handlers.

These wrap the pure genetics engine with the bookkeeping an API endpoint
needs: loading parents, policy checks, saving the offspring and stamping
the parents' breeding time. Failures that a player can cause come back as a
BreedingOutcome with a reason instead of an exception.
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from petsim.catalog import TraitCatalog
from petsim.config.engine_config import DEFAULT_GENETICS_CONFIG, GeneticsConfig
from petsim.exceptions import PetNotFoundError
from petsim.genetics.assignment import create_pet_with_genetics
from petsim.genetics.breeding import breed
from petsim.genetics.eligibility import can_breed
from petsim.models import Pet
from petsim.schemas import BreedingRequest
from petsim.services.store import PetStore
from petsim.util.clock import resolve_now
from petsim.util.rng import get_rng_or_default

logger = logging.getLogger(__name__)

REASON_PARENT_NOT_FOUND = "One or both parent pets not found"
REASON_NOT_OWNER = "You must own at least one of the parent pets"
REASON_PET_LIMIT = "You have reached the maximum number of pets ({limit})"


@dataclass(frozen=True)
class BreedingOutcome:
    success: bool
    offspring: Optional[Pet] = None
    reason: Optional[str] = None


class GeneticsService:
    """Entry point for the pet-creation and breeding API handlers."""

    def __init__(
        self,
        store: PetStore,
        catalog: TraitCatalog,
        config: Optional[GeneticsConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self._store = store
        self._catalog = catalog
        self._config = config or DEFAULT_GENETICS_CONFIG
        self._rng = get_rng_or_default(rng, "GeneticsService")

    def create_pet(self, owner_id: str, name: str, now: Optional[datetime] = None) -> Pet:
        pet = create_pet_with_genetics(
            owner_id, name, self._catalog, rng=self._rng, now=now, config=self._config
        )
        self._store.save(pet)
        return pet

    def breed_pets(
        self,
        requester_id: str,
        request: BreedingRequest,
        now: Optional[datetime] = None,
    ) -> BreedingOutcome:
        """Handle a breeding request end to end.

        Checks run in the order the API reports them: parents exist,
        eligibility, ownership, then the per-owner pet ceiling.
        """
        now = resolve_now(now)
        try:
            parent1 = self._store.get(request.parent1_id)
            parent2 = self._store.get(request.parent2_id)
        except PetNotFoundError:
            logger.debug("Breeding request references unknown pet(s): %s", request)
            return BreedingOutcome(False, reason=REASON_PARENT_NOT_FOUND)

        eligibility = can_breed(parent1, parent2, now, self._config)
        if not eligibility.can_breed:
            return BreedingOutcome(False, reason=eligibility.reason)

        if requester_id not in (parent1.owner_id, parent2.owner_id):
            return BreedingOutcome(False, reason=REASON_NOT_OWNER)

        limit = self._config.max_pets_per_owner
        if self._store.count_by_owner(requester_id) >= limit:
            return BreedingOutcome(False, reason=REASON_PET_LIMIT.format(limit=limit))

        offspring = breed(
            parent1,
            parent2,
            requester_id,
            request.offspring_name,
            self._catalog,
            rng=self._rng,
            now=now,
            config=self._config,
        )
        self._store.save(offspring)
        self._store.update(parent1.id, last_bred_at=now)
        self._store.update(parent2.id, last_bred_at=now)
        return BreedingOutcome(True, offspring=offspring)
