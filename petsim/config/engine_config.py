"""Engine configuration dataclasses.

The genetics and decay engines take these objects rather than reading the
module constants directly, so balance tuning happens by passing a different
config instead of patching code.
"""

import math
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping

from petsim.config import decay as decay_constants
from petsim.config import genetics as genetics_constants
from petsim.exceptions import ConfigurationError

RARITY_ORDER = ("common", "uncommon", "rare", "legendary")


@dataclass
class GeneticsConfig:
    """Configuration for trait assignment, breeding and eligibility.

    Attributes:
        rarity_distribution: Probability per rarity; must cover the four
            rarities and sum to 1.0.
        initial_trait_counts: Traits rolled per type for a generation-1 pet.
        mutation_chance: Probability that an inherited slot mutates.
        personality_variance: Max absolute offset added to the parent mean.
        breeding_min_age_days: Minimum pet age before breeding.
        breeding_min_health: Health must be strictly above this to breed.
        breeding_cooldown_days: Days a pet rests after breeding.
        max_pets_per_owner: Ceiling enforced by the breeding service.
    """

    rarity_distribution: Dict[str, float] = field(
        default_factory=lambda: dict(genetics_constants.RARITY_DISTRIBUTION)
    )
    initial_trait_counts: Dict[str, int] = field(
        default_factory=lambda: dict(genetics_constants.INITIAL_TRAIT_COUNTS)
    )
    mutation_chance: float = genetics_constants.MUTATION_CHANCE
    personality_variance: int = genetics_constants.PERSONALITY_VARIANCE
    breeding_min_age_days: float = genetics_constants.BREEDING_MIN_AGE_DAYS
    breeding_min_health: int = genetics_constants.BREEDING_MIN_HEALTH
    breeding_cooldown_days: float = genetics_constants.BREEDING_COOLDOWN_DAYS
    max_pets_per_owner: int = genetics_constants.MAX_PETS_PER_OWNER

    def validate(self) -> None:
        """Raise ConfigurationError if the values cannot drive the engine."""
        missing = [r for r in RARITY_ORDER if r not in self.rarity_distribution]
        if missing:
            raise ConfigurationError(f"rarity_distribution missing rarities: {missing}")
        unknown = [r for r in self.rarity_distribution if r not in RARITY_ORDER]
        if unknown:
            raise ConfigurationError(f"rarity_distribution has unknown rarities: {unknown}")
        if any(p < 0 for p in self.rarity_distribution.values()):
            raise ConfigurationError("rarity_distribution weights must be non-negative")
        total = sum(self.rarity_distribution.values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ConfigurationError(f"rarity_distribution must sum to 1.0, got {total}")
        if any(count < 0 for count in self.initial_trait_counts.values()):
            raise ConfigurationError("initial_trait_counts must be non-negative")
        if not 0.0 <= self.mutation_chance <= 1.0:
            raise ConfigurationError(f"mutation_chance {self.mutation_chance} not in [0, 1]")
        if self.personality_variance < 0:
            raise ConfigurationError("personality_variance must be non-negative")
        if self.max_pets_per_owner < 1:
            raise ConfigurationError("max_pets_per_owner must be at least 1")


@dataclass
class DecayConfig:
    """Rates and thresholds for the stat decay state machine (points per hour)."""

    min_update_interval_hours: float = decay_constants.MIN_UPDATE_INTERVAL_HOURS
    hunger_increase_per_hour: float = decay_constants.HUNGER_INCREASE_PER_HOUR
    happiness_decay_per_hour: float = decay_constants.HAPPINESS_DECAY_PER_HOUR
    energy_decay_per_hour: float = decay_constants.ENERGY_DECAY_PER_HOUR
    energy_recovery_per_hour: float = decay_constants.ENERGY_RECOVERY_PER_HOUR
    health_decay_per_hour: float = decay_constants.HEALTH_DECAY_PER_HOUR
    starvation_hunger_threshold: float = decay_constants.STARVATION_HUNGER_THRESHOLD
    sleep_start_hour: int = decay_constants.SLEEP_START_HOUR
    sleep_end_hour: int = decay_constants.SLEEP_END_HOUR
    neglect_hunger_threshold: float = decay_constants.NEGLECT_HUNGER_THRESHOLD
    neglect_happiness_threshold: float = decay_constants.NEGLECT_HAPPINESS_THRESHOLD
    grace_period_hours: float = decay_constants.GRACE_PERIOD_HOURS
    grace_period_multiplier: float = decay_constants.GRACE_PERIOD_MULTIPLIER

    def validate(self) -> None:
        rates = {
            "hunger_increase_per_hour": self.hunger_increase_per_hour,
            "happiness_decay_per_hour": self.happiness_decay_per_hour,
            "energy_decay_per_hour": self.energy_decay_per_hour,
            "energy_recovery_per_hour": self.energy_recovery_per_hour,
            "health_decay_per_hour": self.health_decay_per_hour,
        }
        for name, rate in rates.items():
            if rate < 0 or not math.isfinite(rate):
                raise ConfigurationError(f"{name} must be a finite non-negative rate, got {rate}")
        if not (0 <= self.sleep_start_hour <= 24 and 0 <= self.sleep_end_hour <= 24):
            raise ConfigurationError("sleep window hours must lie in [0, 24]")
        if not 0.0 <= self.grace_period_multiplier <= 1.0:
            raise ConfigurationError("grace_period_multiplier must lie in [0, 1]")
        if self.min_update_interval_hours < 0:
            raise ConfigurationError("min_update_interval_hours must be non-negative")


@dataclass
class EngineConfig:
    """Top-level configuration bundle for both engines."""

    genetics: GeneticsConfig = field(default_factory=GeneticsConfig)
    decay: DecayConfig = field(default_factory=DecayConfig)

    def validate(self) -> None:
        self.genetics.validate()
        self.decay.validate()

    @classmethod
    def from_overrides(cls, overrides: Mapping[str, Mapping[str, Any]]) -> "EngineConfig":
        """Build a config from nested overrides such as ``{"decay": {"health_decay_per_hour": 3}}``.

        Raises:
            ConfigurationError: On unknown sections/keys or invalid resulting values.
        """
        sections = {"genetics": GeneticsConfig(), "decay": DecayConfig()}
        for section_name, values in overrides.items():
            if section_name not in sections:
                raise ConfigurationError(f"Unknown config section: {section_name!r}")
            section = sections[section_name]
            allowed = {f.name for f in fields(section)}
            unknown = sorted(set(values) - allowed)
            if unknown:
                raise ConfigurationError(f"Unknown {section_name} config keys: {unknown}")
            sections[section_name] = replace(section, **dict(values))

        config = cls(genetics=sections["genetics"], decay=sections["decay"])
        config.validate()
        return config


DEFAULT_GENETICS_CONFIG = GeneticsConfig()
DEFAULT_DECAY_CONFIG = DecayConfig()
DEFAULT_ENGINE_CONFIG = EngineConfig(genetics=DEFAULT_GENETICS_CONFIG, decay=DEFAULT_DECAY_CONFIG)
