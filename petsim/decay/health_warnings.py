"""Health warnings derived from a pet's vital stats."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional

from petsim.config.decay import (
    HEALTH_CRITICAL_WARNING_THRESHOLD,
    HEALTH_WARNING_THRESHOLD,
    HUNGER_WARNING_THRESHOLD,
    SICK_HEALTH_THRESHOLD,
)
from petsim.models import VitalStats
from petsim.util.clock import resolve_now


class WarningType(str, Enum):
    HUNGER = "hunger"
    HEALTH = "health"
    CRITICAL = "critical"


class WarningSeverity(str, Enum):
    WARNING = "warning"
    CRITICAL = "critical"


class VisualState(str, Enum):
    HEALTHY = "healthy"
    SICK = "sick"
    CRITICAL = "critical"


@dataclass(frozen=True)
class PetWarning:
    type: WarningType
    severity: WarningSeverity
    message: str
    timestamp: datetime


def check_pet_warnings(stats: VitalStats, now: Optional[datetime] = None) -> List[PetWarning]:
    """Return the warnings active for ``stats``.

    Hunger and health are independent; of the two health warnings only the
    more severe one is reported.
    """
    now = resolve_now(now)
    warnings: List[PetWarning] = []

    if stats.hunger > HUNGER_WARNING_THRESHOLD:
        warnings.append(
            PetWarning(WarningType.HUNGER, WarningSeverity.WARNING, "Your pet is very hungry!", now)
        )

    if stats.health < HEALTH_CRITICAL_WARNING_THRESHOLD:
        warnings.append(
            PetWarning(
                WarningType.CRITICAL,
                WarningSeverity.CRITICAL,
                "CRITICAL: Your pet is in critical condition! Immediate care needed!",
                now,
            )
        )
    elif stats.health < HEALTH_WARNING_THRESHOLD:
        warnings.append(
            PetWarning(WarningType.HEALTH, WarningSeverity.CRITICAL, "Your pet is getting sick!", now)
        )

    return warnings


def is_pet_sick(health: int) -> bool:
    return health < SICK_HEALTH_THRESHOLD


def get_pet_visual_state(health: int) -> VisualState:
    if health < HEALTH_CRITICAL_WARNING_THRESHOLD:
        return VisualState.CRITICAL
    if health < SICK_HEALTH_THRESHOLD:
        return VisualState.SICK
    return VisualState.HEALTHY


def have_warnings_cleared(previous: VitalStats, current: VitalStats) -> bool:
    """True if ``previous`` had warnings and ``current`` has none."""
    return bool(check_pet_warnings(previous)) and not check_pet_warnings(current)
