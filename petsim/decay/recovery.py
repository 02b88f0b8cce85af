"""Critical state, grace period and recovery mechanics.

A pet whose health reaches zero becomes critical. It stays frozen until the
owner uses a recovery item, which brings it back at reduced maximum health.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from petsim.config.decay import (
    GRACE_PERIOD_HOURS,
    GRACE_PERIOD_MULTIPLIER,
    MAX_HEALTH_PENALTY,
    RECOVERY_HEALTH_RESTORE,
    RECOVERY_PENALTY_PERCENT,
)
from petsim.util.clock import hours_between, resolve_now

REASON_NOT_CRITICAL = "Pet is not in Critical state"
REASON_NO_ITEMS = "No recovery items available"


@dataclass(frozen=True)
class RecoveryResult:
    success: bool
    health: int
    max_health_penalty: int
    is_critical: bool
    message: str


@dataclass(frozen=True)
class RecoveryCheck:
    allowed: bool
    reason: Optional[str] = None


def should_enter_critical_state(health: float) -> bool:
    return health <= 0


def is_in_grace_period(
    neglect_started_at: Optional[datetime],
    now: Optional[datetime] = None,
    grace_period_hours: float = GRACE_PERIOD_HOURS,
) -> bool:
    """True during the first ``grace_period_hours`` of a neglect episode."""
    if neglect_started_at is None:
        return False
    return hours_between(resolve_now(now), neglect_started_at) < grace_period_hours


def adjusted_degradation_rate(
    base_rate: float,
    neglect_started_at: Optional[datetime],
    now: Optional[datetime] = None,
) -> float:
    """Scale a decay rate down while the neglect episode is in its grace period."""
    if is_in_grace_period(neglect_started_at, now):
        return base_rate * GRACE_PERIOD_MULTIPLIER
    return base_rate


def apply_recovery(current_health: int, current_penalty: int) -> RecoveryResult:
    """Bring a critical pet back.

    Each recovery permanently lowers maximum health by RECOVERY_PENALTY_PERCENT
    (capped at MAX_HEALTH_PENALTY); health is restored to
    RECOVERY_HEALTH_RESTORE or the reduced maximum, whichever is lower.
    """
    new_penalty = min(MAX_HEALTH_PENALTY, current_penalty + RECOVERY_PENALTY_PERCENT)
    restored_health = min(RECOVERY_HEALTH_RESTORE, 100 - new_penalty)

    return RecoveryResult(
        success=True,
        health=restored_health,
        max_health_penalty=new_penalty,
        is_critical=False,
        message=(
            f"Pet recovered! Health restored to {restored_health}. "
            f"Max health reduced by {RECOVERY_PENALTY_PERCENT}% (total penalty: {new_penalty}%)."
        ),
    )


def can_use_recovery_item(pet_is_critical: bool, item_quantity: int) -> RecoveryCheck:
    if not pet_is_critical:
        return RecoveryCheck(False, REASON_NOT_CRITICAL)
    if item_quantity <= 0:
        return RecoveryCheck(False, REASON_NO_ITEMS)
    return RecoveryCheck(True)
