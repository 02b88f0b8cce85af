"""Tests for pet snapshot validation and the trait catalog."""

import pytest

from petsim.catalog import TraitCatalog
from petsim.exceptions import GeneticsError, InvalidSnapshotError
from petsim.models import Personality, VitalStats
from petsim.validation import ensure_valid_pet, validate_pet, validate_stats


class TestValidatePet:
    def test_valid_pet(self, make_pet) -> None:
        assert validate_pet(make_pet()) == []

    def test_duplicate_traits(self, make_pet) -> None:
        pet = make_pet(trait_ids=["visual-sky-blue", "visual-sky-blue"])
        [issue] = validate_pet(pet)
        assert "duplicate trait visual-sky-blue" in issue

    def test_generation_must_be_positive(self, make_pet) -> None:
        [issue] = validate_pet(make_pet(generation=0))
        assert "generation" in issue

    def test_personality_out_of_range(self, make_pet) -> None:
        pet = make_pet(personality=Personality(101, 50, 50, 50, 50))
        [issue] = validate_pet(pet)
        assert issue.startswith("pet.personality.friendliness")

    def test_non_numeric_stat(self) -> None:
        [issue] = validate_stats(VitalStats(health="full"))
        assert "expected number" in issue

    def test_ensure_raises_with_path(self, make_pet) -> None:
        with pytest.raises(InvalidSnapshotError, match="parent2.stats.hunger"):
            ensure_valid_pet(make_pet(stats=VitalStats(hunger=-5)), path="parent2")

    def test_invalid_snapshot_is_value_error(self, make_pet) -> None:
        with pytest.raises(ValueError):
            ensure_valid_pet(make_pet(generation=0))


class TestTraitCatalog:
    def test_duplicate_ids_rejected(self, catalog) -> None:
        with pytest.raises(GeneticsError, match="visual-sky-blue"):
            catalog.add(catalog.get("visual-sky-blue"))

    def test_seed_catalog_shape(self, catalog) -> None:
        assert len(catalog) == 30
        assert len(catalog.find_by_type("visual")) == 12
        assert isinstance(catalog, TraitCatalog)
