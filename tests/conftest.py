"""Pytest configuration and fixtures for petsim tests."""

import random
from datetime import datetime, timedelta, timezone

import pytest

# Fixed instant at 14:00 UTC so the decay engine sees awake hours by default
NOW = datetime(2024, 6, 15, 14, 0, tzinfo=timezone.utc)


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def catalog():
    """The seed trait catalog shipped with the game."""
    from petsim.catalog import default_catalog

    return default_catalog()


@pytest.fixture
def make_pet(catalog):
    """Factory for adult, healthy, never-bred pets with a few catalog traits."""
    from petsim.models import InheritanceSource, Personality, Pet, PetTrait, VitalStats

    def _make(**overrides):
        trait_ids = overrides.pop(
            "trait_ids",
            ["visual-sky-blue", "visual-striped-pattern", "personality-calm"],
        )
        defaults = dict(
            owner_id="owner-1",
            name="Pet",
            personality=Personality(60, 40, 70, 30, 50),
            stats=VitalStats(health=90, hunger=20, happiness=80, energy=70),
            traits=[
                PetTrait(catalog.get(tid), InheritanceSource.INITIAL) for tid in trait_ids
            ],
            created_at=NOW - timedelta(days=10),
            last_stat_update=NOW,
        )
        defaults.update(overrides)
        return Pet(**defaults)

    return _make
