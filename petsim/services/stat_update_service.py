"""Background stat update service.

Periodically advances every stored pet's vital stats with the decay engine,
saves the results and reconciles each pet's active warnings.
"""

import asyncio
import logging
from datetime import datetime
from typing import Optional

from petsim.config.decay import STAT_UPDATE_INTERVAL_SECONDS
from petsim.config.engine_config import DecayConfig
from petsim.decay.health_warnings import check_pet_warnings
from petsim.decay.stats import batch_update_pet_stats
from petsim.models import Pet
from petsim.schemas import PetDecayDescriptor
from petsim.services.store import PetStore
from petsim.util.clock import resolve_now

logger = logging.getLogger(__name__)


class StatUpdateService:
    """Runs the decay batch against a PetStore on a fixed interval."""

    def __init__(
        self,
        store: PetStore,
        interval: float = STAT_UPDATE_INTERVAL_SECONDS,
        tz_offset: float = 0.0,
        config: Optional[DecayConfig] = None,
        max_workers: Optional[int] = None,
    ):
        """Initialize the stat update service.

        Args:
            store: Where pets are loaded from and saved to
            interval: Seconds between runs
            tz_offset: UTC offset in hours applied to the whole batch
            config: Decay rates and thresholds
            max_workers: Thread pool size for the batch (serial if None)
        """
        self._store = store
        self._interval = interval
        self._tz_offset = tz_offset
        self._config = config
        self._max_workers = max_workers
        self._task: Optional[asyncio.Task] = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def run_once(self, now: Optional[datetime] = None) -> int:
        """Advance every pet once.

        Returns:
            Number of pets processed
        """
        now = resolve_now(now)
        results = batch_update_pet_stats(
            [PetDecayDescriptor.from_pet(pet) for pet in self._store.list_pets()],
            self._tz_offset,
            now,
            max_workers=self._max_workers,
            config=self._config,
        )

        for result in results:
            # Field-level write keeps changes other handlers made during the batch
            updated = self._store.update(result.id, **result.updates.changes())
            self._reconcile_warnings(updated, now)

        logger.info("Updated stats and warnings for %d pets", len(results))
        return len(results)

    def _reconcile_warnings(self, pet: Pet, now: datetime) -> None:
        active = {warning.type: warning for warning in check_pet_warnings(pet.stats, now)}
        existing = self._store.active_warnings(pet.id)

        for warning_type in existing:
            if warning_type not in active:
                self._store.clear_warning(pet.id, warning_type)
        for warning_type, warning in active.items():
            if warning_type not in existing:
                self._store.raise_warning(pet.id, warning)

    async def start(self) -> None:
        """Run immediately, then every ``interval`` seconds until stopped."""
        if self._running:
            logger.warning("Stat update service already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._update_loop(), name="stat_update")
        logger.info("Stat update service started (%ss interval)", self._interval)

    async def stop(self) -> None:
        if not self._running:
            return

        self._running = False
        logger.info("Stopping stat update service...")
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("Stat update service stopped")

    async def _update_loop(self) -> None:
        loop = asyncio.get_running_loop()
        try:
            while self._running:
                try:
                    await loop.run_in_executor(None, self.run_once)
                except Exception as e:
                    logger.error("Stat update job failed: %s", e, exc_info=True)
                await asyncio.sleep(self._interval)
        except asyncio.CancelledError:
            logger.info("Stat update loop cancelled")
            raise
