"""Recovery handler: bring a critical pet back with a recovery item.

Item inventory lives outside petsim; the caller passes the quantity the
owner holds and decrements it when the outcome reports success.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from petsim.decay.recovery import RecoveryResult, apply_recovery, can_use_recovery_item
from petsim.exceptions import PetNotFoundError
from petsim.services.store import PetStore
from petsim.util.clock import resolve_now

logger = logging.getLogger(__name__)

REASON_PET_NOT_FOUND = "Pet not found"
REASON_UNAUTHORIZED = "Unauthorized"


class RecoveryService:
    """Entry point for the recovery-item API handler."""

    def __init__(self, store: PetStore):
        self._store = store

    def recover_pet(
        self,
        requester_id: str,
        pet_id: str,
        item_quantity: int,
        now: Optional[datetime] = None,
    ) -> RecoveryResult:
        """Use one recovery item on a critical pet.

        On success the pet leaves the critical state with restored health and
        a larger max-health penalty, its neglect episode is reset and the
        recovery counts as an owner interaction.

        Returns:
            The recovery result; on failure ``success`` is False, the pet's
            current values are echoed back and ``message`` holds the reason
        """
        now = resolve_now(now)
        try:
            pet = self._store.get(pet_id)
        except PetNotFoundError:
            return RecoveryResult(False, 0, 0, False, REASON_PET_NOT_FOUND)

        def refused(reason: str) -> RecoveryResult:
            return RecoveryResult(
                False, pet.stats.health, pet.max_health_penalty, pet.is_critical, reason
            )

        if pet.owner_id != requester_id:
            return refused(REASON_UNAUTHORIZED)

        check = can_use_recovery_item(pet.is_critical, item_quantity)
        if not check.allowed:
            return refused(check.reason)

        result = apply_recovery(pet.stats.health, pet.max_health_penalty)
        self._store.update(
            pet_id,
            stats=replace(pet.stats, health=result.health),
            is_critical=result.is_critical,
            max_health_penalty=result.max_health_penalty,
            neglect_started_at=None,
            last_interaction_at=now,
        )
        logger.info("Recovered pet %s (penalty now %d%%)", pet_id, result.max_health_penalty)
        return result
