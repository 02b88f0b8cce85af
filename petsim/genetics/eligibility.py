"""Breeding eligibility.

The rule chain is evaluated in a fixed order and the first failing rule
decides the reason. The reason strings are shown to players and matched by
API clients, so they must stay stable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from petsim.config.engine_config import DEFAULT_GENETICS_CONFIG, GeneticsConfig
from petsim.models import Pet
from petsim.util.clock import days_between, ensure_utc, resolve_now

REASON_SAME_PET = "Cannot breed a pet with itself"
REASON_TOO_YOUNG = "Both pets must be at least 7 days old"
REASON_LOW_HEALTH = "Both pets must have health > 50"
REASON_CRITICAL = "Pets in critical state cannot breed"
REASON_COOLDOWN = "Pets must wait {days} day(s) before breeding again"


@dataclass(frozen=True)
class EligibilityResult:
    can_breed: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.can_breed


def _cooldown_days_remaining(pet: Pet, now: datetime, cooldown_days: float) -> float:
    if pet.last_bred_at is None:
        return 0.0
    return max(0.0, cooldown_days - days_between(now, pet.last_bred_at))


def can_breed(
    pet1: Pet,
    pet2: Pet,
    now: Optional[datetime] = None,
    config: Optional[GeneticsConfig] = None,
) -> EligibilityResult:
    """Check whether two pets may breed right now.

    Never raises for domain conditions; a denial carries one of the
    ``REASON_*`` messages.
    """
    cfg = config or DEFAULT_GENETICS_CONFIG
    now = resolve_now(now)

    if pet1.id == pet2.id:
        return EligibilityResult(False, REASON_SAME_PET)

    adult_cutoff = now - timedelta(days=cfg.breeding_min_age_days)
    if ensure_utc(pet1.created_at) > adult_cutoff or ensure_utc(pet2.created_at) > adult_cutoff:
        return EligibilityResult(False, REASON_TOO_YOUNG)

    if pet1.stats.health <= cfg.breeding_min_health or pet2.stats.health <= cfg.breeding_min_health:
        return EligibilityResult(False, REASON_LOW_HEALTH)

    if pet1.is_critical or pet2.is_critical:
        return EligibilityResult(False, REASON_CRITICAL)

    remaining = max(
        _cooldown_days_remaining(pet1, now, cfg.breeding_cooldown_days),
        _cooldown_days_remaining(pet2, now, cfg.breeding_cooldown_days),
    )
    if remaining > 0:
        return EligibilityResult(False, REASON_COOLDOWN.format(days=math.ceil(remaining)))

    return EligibilityResult(True)


# Name used by the breeding API handler
check_eligibility = can_breed
