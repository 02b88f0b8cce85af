"""Tests for engine configuration and logging setup."""

import logging

import pytest

from petsim.config import DecayConfig, EngineConfig, GeneticsConfig
from petsim.exceptions import ConfigurationError
from petsim.logging_config import configure_logging


class TestEngineConfig:
    def test_defaults_are_valid(self) -> None:
        config = EngineConfig()
        config.validate()
        assert config.genetics.mutation_chance == 0.15
        assert config.decay.hunger_increase_per_hour == 1.0

    def test_overrides_replace_only_named_keys(self) -> None:
        config = EngineConfig.from_overrides(
            {"decay": {"health_decay_per_hour": 3.0}, "genetics": {"max_pets_per_owner": 4}}
        )
        assert config.decay.health_decay_per_hour == 3.0
        assert config.decay.hunger_increase_per_hour == 1.0
        assert config.genetics.max_pets_per_owner == 4

    def test_overrides_do_not_leak_into_defaults(self) -> None:
        EngineConfig.from_overrides({"genetics": {"mutation_chance": 0.5}})
        assert GeneticsConfig().mutation_chance == 0.15

    def test_unknown_section(self) -> None:
        with pytest.raises(ConfigurationError, match="section"):
            EngineConfig.from_overrides({"economy": {}})

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigurationError, match="hunger_rate"):
            EngineConfig.from_overrides({"decay": {"hunger_rate": 2}})

    def test_rarity_weights_must_sum_to_one(self) -> None:
        distribution = {"common": 0.5, "uncommon": 0.25, "rare": 0.1, "legendary": 0.05}
        with pytest.raises(ConfigurationError, match="sum to 1.0"):
            EngineConfig.from_overrides({"genetics": {"rarity_distribution": distribution}})

    def test_rarity_distribution_needs_every_rarity(self) -> None:
        with pytest.raises(ConfigurationError, match="missing"):
            GeneticsConfig(rarity_distribution={"common": 1.0}).validate()

    @pytest.mark.parametrize("chance", [-0.1, 1.5])
    def test_mutation_chance_bounds(self, chance: float) -> None:
        with pytest.raises(ConfigurationError):
            GeneticsConfig(mutation_chance=chance).validate()

    def test_negative_rate(self) -> None:
        with pytest.raises(ConfigurationError, match="health_decay_per_hour"):
            DecayConfig(health_decay_per_hour=-1.0).validate()

    def test_grace_multiplier_bounds(self) -> None:
        with pytest.raises(ConfigurationError):
            DecayConfig(grace_period_multiplier=2.0).validate()


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def clean_environment(self, monkeypatch):
        for name in ("PETSIM_LOG_LEVEL", "PETSIM_GENETICS_LOG_LEVEL", "PETSIM_DECAY_LOG_LEVEL",
                     "PETSIM_SERVICES_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

    def test_explicit_level(self) -> None:
        logger = configure_logging("debug")
        assert logger.name == "petsim"
        assert logger.level == logging.DEBUG

    def test_package_level_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("PETSIM_LOG_LEVEL", "warning")
        assert configure_logging().level == logging.WARNING

    def test_engines_inherit_package_level(self) -> None:
        configure_logging("info")
        decay_logger = logging.getLogger("petsim.decay.stats")
        assert logging.getLogger("petsim.decay").level == logging.NOTSET
        assert decay_logger.getEffectiveLevel() == logging.INFO

    def test_engine_override_covers_all_its_loggers(self) -> None:
        configure_logging("info", engine_levels={"genetics": "debug"})
        assert logging.getLogger("petsim.genetics").level == logging.DEBUG
        assert logging.getLogger("petsim.evolution").level == logging.DEBUG
        assert logging.getLogger("petsim.decay").level == logging.NOTSET

    def test_engine_level_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("PETSIM_DECAY_LOG_LEVEL", "error")
        configure_logging("info")
        assert logging.getLogger("petsim.decay").level == logging.ERROR

    def test_unknown_level(self) -> None:
        with pytest.raises(ConfigurationError, match="LOUD"):
            configure_logging("LOUD")

    def test_unknown_engine(self) -> None:
        with pytest.raises(ConfigurationError, match="economy"):
            configure_logging("info", engine_levels={"economy": "debug"})
