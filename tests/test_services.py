"""Tests for the pet store and the breeding, recovery and stat update services."""

import asyncio
import logging
import random
from dataclasses import replace
from datetime import timedelta

import pytest

from petsim.config import GeneticsConfig
from petsim.decay import WarningType
from petsim.exceptions import PetNotFoundError
from petsim.models import VitalStats
from petsim.schemas import BreedingRequest
from petsim.services import (
    GeneticsService,
    InMemoryPetStore,
    PetStore,
    RecoveryService,
    StatUpdateService,
)
from petsim.util.clock import utc_now


@pytest.fixture
def store():
    return InMemoryPetStore()


@pytest.fixture
def service(store, catalog):
    return GeneticsService(store, catalog, rng=random.Random(7))


@pytest.fixture
def parents(store, make_pet):
    mother = make_pet(name="Mother")
    father = make_pet(name="Father", trait_ids=["visual-glowing-eyes", "personality-curious"])
    store.save(mother)
    store.save(father)
    return mother, father


class TestInMemoryPetStore:
    def test_implements_protocol(self, store) -> None:
        assert isinstance(store, PetStore)

    def test_missing_pet(self, store) -> None:
        with pytest.raises(PetNotFoundError):
            store.get("nope")

    def test_update_writes_only_named_fields(self, store, make_pet, now) -> None:
        pet = make_pet()
        store.save(pet)

        updated = store.update(pet.id, last_bred_at=now)

        assert updated.last_bred_at == now
        assert updated.stats == pet.stats
        assert store.get(pet.id) is updated

    def test_update_missing_pet(self, store) -> None:
        with pytest.raises(PetNotFoundError):
            store.update("nope", is_critical=True)


class TestGeneticsService:
    def test_create_pet_is_saved(self, service, store, now) -> None:
        pet = service.create_pet("owner-2", "Sprout", now=now)
        assert store.get(pet.id) is pet
        assert pet.generation == 1
        assert store.count_by_owner("owner-2") == 1

    def test_breed_saves_offspring_and_stamps_parents(self, service, store, parents, now) -> None:
        mother, father = parents
        request = BreedingRequest(parent1_id=mother.id, parent2_id=father.id, offspring_name="Kit")

        outcome = service.breed_pets("owner-1", request, now=now)

        assert outcome.success
        assert outcome.reason is None
        kit = store.get(outcome.offspring.id)
        assert kit.owner_id == "owner-1"
        assert kit.generation == 2
        assert store.get(mother.id).last_bred_at == now
        assert store.get(father.id).last_bred_at == now

    def test_parents_enter_cooldown(self, service, parents, now) -> None:
        mother, father = parents
        request = BreedingRequest(parent1_id=mother.id, parent2_id=father.id, offspring_name="Kit")
        service.breed_pets("owner-1", request, now=now)

        again = service.breed_pets("owner-1", request, now=now + timedelta(days=1))

        assert not again.success
        assert again.reason == "Pets must wait 6 day(s) before breeding again"

    def test_unknown_parent(self, service, parents, now) -> None:
        request = BreedingRequest(parent1_id=parents[0].id, parent2_id="ghost", offspring_name="Kit")
        outcome = service.breed_pets("owner-1", request, now=now)
        assert outcome.reason == "One or both parent pets not found"

    def test_requester_must_own_a_parent(self, service, parents, now) -> None:
        mother, father = parents
        request = BreedingRequest(parent1_id=mother.id, parent2_id=father.id, offspring_name="Kit")
        outcome = service.breed_pets("stranger", request, now=now)
        assert outcome.reason == "You must own at least one of the parent pets"

    def test_pet_limit(self, store, catalog, parents, make_pet, now) -> None:
        store.save(make_pet(name="Third"))
        service = GeneticsService(store, catalog, GeneticsConfig(max_pets_per_owner=3), random.Random(1))
        mother, father = parents
        request = BreedingRequest(parent1_id=mother.id, parent2_id=father.id, offspring_name="Kit")

        outcome = service.breed_pets("owner-1", request, now=now)

        assert outcome.reason == "You have reached the maximum number of pets (3)"
        assert len(store) == 3

    def test_ineligible_pair_reports_reason(self, service, store, parents, now) -> None:
        mother, father = parents
        store.save(replace(father, stats=VitalStats(health=40)))
        request = BreedingRequest(parent1_id=mother.id, parent2_id=father.id, offspring_name="Kit")

        outcome = service.breed_pets("owner-1", request, now=now)

        assert outcome.reason == "Both pets must have health > 50"
        assert store.get(mother.id).last_bred_at is None

    def test_request_validation(self) -> None:
        with pytest.raises(ValueError):
            BreedingRequest(parent1_id="a", parent2_id="b", offspring_name="")


class TestStatUpdateService:
    def test_run_once_updates_and_reconciles_warnings(self, store, make_pet, now) -> None:
        pet = make_pet(
            stats=VitalStats(health=80, hunger=78, happiness=80, energy=70),
            last_stat_update=now - timedelta(hours=4),
            last_interaction_at=now,
        )
        store.save(pet)
        service = StatUpdateService(store)

        assert service.run_once(now) == 1
        updated = store.get(pet.id)
        assert updated.stats.hunger == 82
        assert updated.last_stat_update == now
        assert set(store.active_warnings(pet.id)) == {WarningType.HUNGER}

        fed = replace(updated, stats=replace(updated.stats, hunger=10))
        store.save(fed)
        service.run_once(now + timedelta(hours=1))
        assert store.active_warnings(pet.id) == {}

    def test_run_once_with_thread_pool(self, store, make_pet, now) -> None:
        for i in range(6):
            store.save(make_pet(name=f"Pet{i}", last_stat_update=now - timedelta(hours=i + 1)))
        service = StatUpdateService(store, max_workers=3)

        assert service.run_once(now) == 6
        assert all(pet.last_stat_update == now for pet in store.list_pets())

    @pytest.mark.asyncio
    async def test_start_and_stop(self, store, make_pet) -> None:
        stale = utc_now() - timedelta(hours=2)
        pet = make_pet(last_stat_update=stale, last_interaction_at=None)
        store.save(pet)
        service = StatUpdateService(store, interval=60)

        await service.start()
        assert service.running
        for _ in range(200):
            if store.get(pet.id).last_stat_update != stale:
                break
            await asyncio.sleep(0.01)
        await service.stop()

        assert not service.running
        assert store.get(pet.id).stats.hunger == 22

    @pytest.mark.asyncio
    async def test_failed_run_is_logged_and_loop_continues(self, caplog) -> None:
        class BrokenStore(InMemoryPetStore):
            calls = 0

            def list_pets(self):
                BrokenStore.calls += 1
                raise RuntimeError("database unavailable")

        service = StatUpdateService(BrokenStore(), interval=0.01)
        with caplog.at_level(logging.ERROR, logger="petsim.services"):
            await service.start()
            for _ in range(200):
                if BrokenStore.calls >= 2:
                    break
                await asyncio.sleep(0.01)
            await service.stop()

        assert BrokenStore.calls >= 2
        assert "Stat update job failed: database unavailable" in caplog.text

    @pytest.mark.asyncio
    async def test_stop_without_start(self, store) -> None:
        service = StatUpdateService(store)
        await service.stop()
        assert not service.running


class BreedsWhileListing(InMemoryPetStore):
    """Store that runs a callback right after handing out a pet listing.

    Lets a breeding request land while a stat batch is between its read and
    its writes.
    """

    def __init__(self) -> None:
        super().__init__()
        self.after_listing = None

    def list_pets(self):
        pets = super().list_pets()
        if self.after_listing is not None:
            callback, self.after_listing = self.after_listing, None
            callback()
        return pets


class TestConcurrentHandlers:
    def test_breeding_during_stat_batch_keeps_cooldown(self, catalog, make_pet, now) -> None:
        store = BreedsWhileListing()
        mother = make_pet(name="Mother", last_stat_update=now - timedelta(hours=4))
        father = make_pet(name="Father", last_stat_update=now - timedelta(hours=4))
        store.save(mother)
        store.save(father)
        genetics = GeneticsService(store, catalog, rng=random.Random(3))
        request = BreedingRequest(parent1_id=mother.id, parent2_id=father.id, offspring_name="Kit")
        store.after_listing = lambda: genetics.breed_pets("owner-1", request, now=now)

        StatUpdateService(store).run_once(now)

        for parent in (mother, father):
            stored = store.get(parent.id)
            assert stored.last_bred_at == now
            assert stored.stats.hunger == 24
            assert stored.last_stat_update == now

        again = genetics.breed_pets("owner-1", request, now=now + timedelta(hours=1))
        assert not again.success
        assert again.reason == "Pets must wait 7 day(s) before breeding again"

    def test_breeding_keeps_decayed_stats(self, store, service, parents, now) -> None:
        mother, father = parents
        store.save(replace(mother, last_stat_update=now - timedelta(hours=6)))
        StatUpdateService(store).run_once(now)
        decayed = store.get(mother.id).stats

        request = BreedingRequest(parent1_id=mother.id, parent2_id=father.id, offspring_name="Kit")
        assert service.breed_pets("owner-1", request, now=now).success

        assert store.get(mother.id).stats == decayed
        assert decayed.hunger == 26


class TestRecoveryService:
    @pytest.fixture
    def critical_pet(self, store, make_pet, now):
        pet = make_pet(
            stats=VitalStats(health=0, hunger=100, happiness=10, energy=30),
            is_critical=True,
            neglect_started_at=now - timedelta(days=3),
            last_stat_update=now,
        )
        store.save(pet)
        return pet

    def test_recovers_critical_pet(self, store, critical_pet, now) -> None:
        result = RecoveryService(store).recover_pet("owner-1", critical_pet.id, 2, now=now)

        assert result.success
        recovered = store.get(critical_pet.id)
        assert recovered.stats.health == 50
        assert recovered.stats.hunger == 100
        assert recovered.max_health_penalty == 10
        assert recovered.is_critical is False
        assert recovered.neglect_started_at is None
        assert recovered.last_interaction_at == now

    def test_second_recovery_compounds_penalty(self, store, critical_pet, now) -> None:
        service = RecoveryService(store)
        service.recover_pet("owner-1", critical_pet.id, 1, now=now)
        store.update(critical_pet.id, is_critical=True, stats=VitalStats(health=0, hunger=100))

        result = service.recover_pet("owner-1", critical_pet.id, 1, now=now)

        assert result.max_health_penalty == 20
        assert store.get(critical_pet.id).max_health_penalty == 20

    def test_recovered_pet_decays_again(self, store, critical_pet, now) -> None:
        RecoveryService(store).recover_pet("owner-1", critical_pet.id, 1, now=now)

        StatUpdateService(store).run_once(now + timedelta(hours=2))

        pet = store.get(critical_pet.id)
        assert pet.is_critical is False
        assert pet.stats.health == 46

    def test_requires_critical_state(self, store, make_pet, now) -> None:
        pet = make_pet()
        store.save(pet)
        result = RecoveryService(store).recover_pet("owner-1", pet.id, 1, now=now)
        assert not result.success
        assert result.message == "Pet is not in Critical state"
        assert store.get(pet.id) is pet

    def test_requires_item(self, store, critical_pet, now) -> None:
        result = RecoveryService(store).recover_pet("owner-1", critical_pet.id, 0, now=now)
        assert result.message == "No recovery items available"
        assert store.get(critical_pet.id).is_critical

    def test_requires_owner(self, store, critical_pet, now) -> None:
        result = RecoveryService(store).recover_pet("stranger", critical_pet.id, 1, now=now)
        assert result.message == "Unauthorized"

    def test_unknown_pet(self, store, now) -> None:
        result = RecoveryService(store).recover_pet("owner-1", "ghost", 1, now=now)
        assert not result.success
        assert result.message == "Pet not found"
