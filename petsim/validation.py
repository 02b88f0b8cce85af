"""Validation helpers for pet snapshots.

They catch out-of-range attributes, bad generations and duplicate trait
associations close to the source, before a malformed snapshot reaches an
engine. The ``validate_*`` functions return human-readable issues (empty
means valid); the ``ensure_*`` variants raise.
"""

from __future__ import annotations

import math
from typing import List

from petsim.exceptions import InvalidSnapshotError
from petsim.models import PERSONALITY_ATTRIBUTES, VITAL_STATS, Personality, Pet, VitalStats
from petsim.util.numeric import STAT_MAX, STAT_MIN


def _validate_bounded(container: object, names: tuple, *, path: str) -> List[str]:
    issues: List[str] = []
    for name in names:
        value = getattr(container, name, None)
        if value is None:
            issues.append(f"{path}.{name}: missing attribute")
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            issues.append(f"{path}.{name}: expected number, got {type(value).__name__}")
            continue
        if not math.isfinite(float(value)):
            issues.append(f"{path}.{name}: not finite ({value})")
            continue
        if value < STAT_MIN or value > STAT_MAX:
            issues.append(f"{path}.{name}: {value} not in [{STAT_MIN}, {STAT_MAX}]")
    return issues


def validate_stats(stats: VitalStats, *, path: str = "stats") -> List[str]:
    return _validate_bounded(stats, VITAL_STATS, path=path)


def validate_personality(personality: Personality, *, path: str = "personality") -> List[str]:
    return _validate_bounded(personality, PERSONALITY_ATTRIBUTES, path=path)


def validate_pet(pet: Pet, *, path: str = "pet") -> List[str]:
    """Validate every engine invariant on a pet snapshot."""
    issues: List[str] = []
    if not isinstance(pet.generation, int) or pet.generation < 1:
        issues.append(f"{path}.generation: {pet.generation!r} must be an int >= 1")

    issues.extend(validate_personality(pet.personality, path=f"{path}.personality"))
    issues.extend(validate_stats(pet.stats, path=f"{path}.stats"))

    seen = set()
    for pet_trait in pet.traits:
        if pet_trait.trait_id in seen:
            issues.append(f"{path}.traits: duplicate trait {pet_trait.trait_id}")
        seen.add(pet_trait.trait_id)

    if not 0 <= pet.max_health_penalty <= STAT_MAX:
        issues.append(f"{path}.max_health_penalty: {pet.max_health_penalty} not in [0, {STAT_MAX}]")
    return issues


def ensure_valid_pet(pet: Pet, *, path: str = "pet") -> Pet:
    issues = validate_pet(pet, path=path)
    if issues:
        raise InvalidSnapshotError("; ".join(issues))
    return pet


def ensure_valid_stats(stats: VitalStats, *, path: str = "stats") -> VitalStats:
    issues = validate_stats(stats, path=path)
    if issues:
        raise InvalidSnapshotError("; ".join(issues))
    return stats
