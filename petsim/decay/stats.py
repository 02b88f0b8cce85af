"""Stat decay and neglect state machine.

Stats drift over time between care actions:

- Hunger rises, and health falls while the pet is starving
- Happiness falls with time since the owner last interacted
- Energy drains while awake and recovers during the local night

A neglected pet (hungry or unhappy) gets a grace period at the start of the
episode during which hunger, health and happiness move at half speed. When
health reaches zero the pet turns critical and its stats freeze until it is
recovered.

calculate_stat_degradation() is a pure function of its inputs: it never
reads the clock unless ``now`` is omitted and never mutates its arguments.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from petsim.config.engine_config import DEFAULT_DECAY_CONFIG, DecayConfig
from petsim.decay.recovery import is_in_grace_period
from petsim.exceptions import InvalidSnapshotError
from petsim.models import Pet, VitalStats
from petsim.schemas import PetDecayDescriptor
from petsim.util.clock import ensure_utc, hours_between, resolve_now
from petsim.util.numeric import clamp, round_half_up
from petsim.validation import ensure_valid_stats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatUpdateResult:
    """Output of one decay evaluation, ready to be persisted by the caller."""

    health: int
    hunger: int
    happiness: int
    energy: int
    is_critical: bool
    neglect_started_at: Optional[datetime]
    last_stat_update: datetime

    @property
    def stats(self) -> VitalStats:
        return VitalStats(
            health=self.health,
            hunger=self.hunger,
            happiness=self.happiness,
            energy=self.energy,
        )

    def changes(self) -> Dict[str, Any]:
        """The Pet fields this result writes, for a field-level store update."""
        return {
            "stats": self.stats,
            "is_critical": self.is_critical,
            "neglect_started_at": self.neglect_started_at,
            "last_stat_update": self.last_stat_update,
        }

    def apply_to(self, pet: Pet) -> Pet:
        """Return a copy of ``pet`` carrying these stats and state flags."""
        return replace(pet, **self.changes())


@dataclass(frozen=True)
class BatchUpdate:
    id: str
    updates: StatUpdateResult


def is_sleep_time(now: datetime, tz_offset: float = 0.0, config: Optional[DecayConfig] = None) -> bool:
    """Whether the owner's local hour falls in the sleep window.

    Args:
        now: Current instant
        tz_offset: Owner's UTC offset in hours
        config: Decay configuration (sleep window)
    """
    cfg = config or DEFAULT_DECAY_CONFIG
    hour = (ensure_utc(now) + timedelta(hours=tz_offset)).hour
    start, end = cfg.sleep_start_hour, cfg.sleep_end_hour
    if start <= end:
        return start <= hour < end
    # Window wraps past midnight, e.g. 22 -> 6
    return hour >= start or hour < end


def is_neglected(hunger: float, happiness: float, config: Optional[DecayConfig] = None) -> bool:
    cfg = config or DEFAULT_DECAY_CONFIG
    return hunger > cfg.neglect_hunger_threshold or happiness < cfg.neglect_happiness_threshold


def calculate_stat_degradation(
    stats: VitalStats,
    last_update: datetime,
    last_interaction: Optional[datetime],
    neglect_started_at: Optional[datetime] = None,
    is_critical: bool = False,
    tz_offset: float = 0.0,
    now: Optional[datetime] = None,
    config: Optional[DecayConfig] = None,
) -> StatUpdateResult:
    """Advance a pet's vital stats from ``last_update`` to ``now``.

    Args:
        stats: Current vital stats
        last_update: When the stats were last advanced
        last_interaction: Last owner interaction; happiness decays from here
            when set, otherwise from ``last_update``
        neglect_started_at: Start of the current neglect episode, if any
        is_critical: Whether the pet is already critical
        tz_offset: Owner's UTC offset in hours, used for the sleep window
        now: Evaluation instant (current UTC time if omitted)
        config: Decay rates and thresholds

    Neglect is judged on the rounded post-update values, so a hunger of 50.4
    rounds to 50 and does not start a neglect episode.

    Returns:
        The updated stats, critical flag and neglect timestamp

    Raises:
        InvalidSnapshotError: If stats are out of range or last_update lies
            after ``now``
    """
    cfg = config or DEFAULT_DECAY_CONFIG
    now = resolve_now(now)
    last_update = ensure_utc(last_update)
    neglect_started_at = ensure_utc(neglect_started_at)
    ensure_valid_stats(stats)

    hours_elapsed = hours_between(now, last_update)
    if hours_elapsed < 0:
        raise InvalidSnapshotError(
            f"last_update {last_update.isoformat()} is after now {now.isoformat()}"
        )

    if hours_elapsed < cfg.min_update_interval_hours:
        return StatUpdateResult(
            health=stats.health,
            hunger=stats.hunger,
            happiness=stats.happiness,
            energy=stats.energy,
            is_critical=is_critical,
            neglect_started_at=neglect_started_at,
            last_stat_update=last_update,
        )

    if is_critical:
        return StatUpdateResult(
            health=0,
            hunger=stats.hunger,
            happiness=stats.happiness,
            energy=stats.energy,
            is_critical=True,
            neglect_started_at=neglect_started_at,
            last_stat_update=now,
        )

    multiplier = (
        cfg.grace_period_multiplier
        if is_in_grace_period(neglect_started_at, now, cfg.grace_period_hours)
        else 1.0
    )

    hunger = clamp(stats.hunger + cfg.hunger_increase_per_hour * multiplier * hours_elapsed)

    if last_interaction is not None:
        hours_since_interaction = max(0.0, hours_between(now, last_interaction))
    else:
        hours_since_interaction = hours_elapsed
    happiness = clamp(
        stats.happiness - cfg.happiness_decay_per_hour * multiplier * hours_since_interaction
    )

    if is_sleep_time(now, tz_offset, cfg):
        energy = clamp(stats.energy + cfg.energy_recovery_per_hour * hours_elapsed)
    else:
        energy = clamp(stats.energy - cfg.energy_decay_per_hour * hours_elapsed)

    health = float(stats.health)
    if hunger > cfg.starvation_hunger_threshold:
        health = clamp(health - cfg.health_decay_per_hour * multiplier * hours_elapsed)

    result_health = round_half_up(health)
    result_hunger = round_half_up(hunger)
    result_happiness = round_half_up(happiness)

    critical = result_health == 0
    if critical:
        logger.info("Pet entered critical state after %.2fh without care", hours_elapsed)

    neglected = is_neglected(result_hunger, result_happiness, cfg)
    if neglected and neglect_started_at is None:
        neglect_started_at = now
    elif not neglected and neglect_started_at is not None:
        neglect_started_at = None

    return StatUpdateResult(
        health=result_health,
        hunger=result_hunger,
        happiness=result_happiness,
        energy=round_half_up(energy),
        is_critical=critical,
        neglect_started_at=neglect_started_at,
        last_stat_update=now,
    )


def _as_descriptor(pet: Union[PetDecayDescriptor, Mapping[str, Any]]) -> PetDecayDescriptor:
    if isinstance(pet, PetDecayDescriptor):
        return pet
    return PetDecayDescriptor.model_validate(pet)


def batch_update_pet_stats(
    pets: Iterable[Union[PetDecayDescriptor, Mapping[str, Any]]],
    tz_offset: float = 0.0,
    now: Optional[datetime] = None,
    *,
    max_workers: Optional[int] = None,
    config: Optional[DecayConfig] = None,
) -> List[BatchUpdate]:
    """Run the decay transform over many independent pets under one ``now``.

    Args:
        pets: Descriptors (or mappings validated into descriptors)
        tz_offset: UTC offset in hours shared by the whole batch
        now: Evaluation instant shared by the whole batch
        max_workers: When greater than 1, evaluate on a thread pool
        config: Decay rates and thresholds

    Returns:
        One BatchUpdate per input pet, in input order
    """
    now = resolve_now(now)
    descriptors = [_as_descriptor(pet) for pet in pets]

    def update(descriptor: PetDecayDescriptor) -> BatchUpdate:
        return BatchUpdate(
            id=descriptor.id,
            updates=calculate_stat_degradation(
                descriptor.stats.to_stats(),
                descriptor.last_update,
                descriptor.last_interaction,
                descriptor.neglect_started_at,
                descriptor.is_critical,
                tz_offset,
                now=now,
                config=config,
            ),
        )

    if max_workers is not None and max_workers > 1 and len(descriptors) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(update, descriptors))

    return [update(descriptor) for descriptor in descriptors]
