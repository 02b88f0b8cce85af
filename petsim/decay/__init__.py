"""Stat decay and neglect state machine.

- stats: the per-pet decay transform and its batch wrapper
- recovery: critical state, grace period and recovery items
- health_warnings: player-facing warnings derived from vital stats
"""

from petsim.decay.health_warnings import (
    PetWarning,
    VisualState,
    WarningSeverity,
    WarningType,
    check_pet_warnings,
    get_pet_visual_state,
    have_warnings_cleared,
    is_pet_sick,
)
from petsim.decay.recovery import (
    RecoveryCheck,
    RecoveryResult,
    adjusted_degradation_rate,
    apply_recovery,
    can_use_recovery_item,
    is_in_grace_period,
    should_enter_critical_state,
)
from petsim.decay.stats import (
    BatchUpdate,
    StatUpdateResult,
    batch_update_pet_stats,
    calculate_stat_degradation,
    is_neglected,
    is_sleep_time,
)

__all__ = [
    # Decay
    "BatchUpdate",
    "StatUpdateResult",
    "batch_update_pet_stats",
    "calculate_stat_degradation",
    "is_neglected",
    "is_sleep_time",
    # Recovery
    "RecoveryCheck",
    "RecoveryResult",
    "adjusted_degradation_rate",
    "apply_recovery",
    "can_use_recovery_item",
    "is_in_grace_period",
    "should_enter_critical_state",
    # Warnings
    "PetWarning",
    "VisualState",
    "WarningSeverity",
    "WarningType",
    "check_pet_warnings",
    "get_pet_visual_state",
    "have_warnings_cleared",
    "is_pet_sick",
]
