"""Headless petsim run.

Creates founding pets for one owner, then steps a simulated clock: stats
decay on every step, the owner feeds and plays on a fixed schedule, critical
pets get a recovery item while any remain, and the two oldest pets breed
whenever they are eligible. A summary of every pet is printed at the end.

Examples:
  # Two weeks with default care
  python -m petsim --seed 42

  # A neglectful owner: feed once every three days
  python -m petsim --days 21 --care-every 72 --log-level DEBUG
"""

import argparse
import logging
import random
import sys
from dataclasses import replace
from datetime import timedelta
from typing import List, Optional

from petsim.catalog import default_catalog
from petsim.decay.health_warnings import get_pet_visual_state
from petsim.logging_config import configure_logging
from petsim.models import Pet
from petsim.schemas import BreedingRequest
from petsim.services import GeneticsService, InMemoryPetStore, RecoveryService, StatUpdateService
from petsim.util.clock import utc_now

logger = logging.getLogger(__name__)

OWNER_ID = "player-1"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="petsim",
        description="Headless companion pet simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Examples:", 1)[1] if __doc__ else None,
    )
    parser.add_argument("--founders", type=int, default=2, help="Founding pets (default: 2)")
    parser.add_argument("--days", type=float, default=14, help="Simulated days (default: 14)")
    parser.add_argument(
        "--step-hours", type=float, default=3, help="Hours per simulation step (default: 3)"
    )
    parser.add_argument(
        "--care-every",
        type=float,
        default=12,
        metavar="HOURS",
        help="Feed and play with every pet this often (default: 12)",
    )
    parser.add_argument(
        "--recovery-items", type=int, default=1, help="Recovery items the owner holds (default: 1)"
    )
    parser.add_argument("--tz-offset", type=float, default=0, help="Owner UTC offset in hours")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (optional)")
    parser.add_argument("--log-level", default=None, help="Package log level (default: INFO)")
    return parser


def _care_for(store: InMemoryPetStore, pet: Pet, now) -> None:
    store.update(
        pet.id,
        stats=replace(pet.stats, hunger=0, happiness=100),
        last_fed_at=now,
        last_interaction_at=now,
    )


def _oldest_pair(pets: List[Pet]) -> Optional[List[Pet]]:
    healthy = sorted((p for p in pets if not p.is_critical), key=lambda p: p.created_at)
    return healthy[:2] if len(healthy) >= 2 else None


def run(args: argparse.Namespace) -> List[Pet]:
    """Run the simulation described by ``args`` and return the final pets."""
    rng = random.Random(args.seed)
    store = InMemoryPetStore()
    genetics = GeneticsService(store, default_catalog(), rng=rng)
    recovery = RecoveryService(store)
    updater = StatUpdateService(store, tz_offset=args.tz_offset)
    items = args.recovery_items

    now = utc_now()
    for i in range(args.founders):
        genetics.create_pet(OWNER_ID, f"Founder {i + 1}", now=now)

    steps = int(args.days * 24 / args.step_hours)
    since_care = 0.0
    for step in range(1, steps + 1):
        now = now + timedelta(hours=args.step_hours)
        updater.run_once(now)

        since_care += args.step_hours
        if since_care >= args.care_every:
            since_care = 0.0
            for pet in store.list_pets():
                if not pet.is_critical:
                    _care_for(store, pet, now)

        for pet in store.list_pets():
            if pet.is_critical and items > 0:
                result = recovery.recover_pet(OWNER_ID, pet.id, items, now=now)
                if result.success:
                    items -= 1
                    logger.info("Step %d: %s", step, result.message)

        pair = _oldest_pair(store.list_pets())
        if pair is not None:
            request = BreedingRequest(
                parent1_id=pair[0].id,
                parent2_id=pair[1].id,
                offspring_name=f"Kit {len(store) - args.founders + 1}",
            )
            outcome = genetics.breed_pets(OWNER_ID, request, now=now)
            if outcome.success:
                logger.info("Step %d: %s was born", step, outcome.offspring.name)

    return store.list_pets()


def print_summary(pets: List[Pet]) -> None:
    print(f"{'name':<12} {'gen':>3} {'hp':>4} {'hun':>4} {'hap':>4} {'nrg':>4}  state     traits")
    for pet in sorted(pets, key=lambda p: p.created_at):
        s = pet.stats
        state = "critical" if pet.is_critical else get_pet_visual_state(s.health).value
        traits = ", ".join(pt.trait.name for pt in pet.traits)
        print(
            f"{pet.name:<12} {pet.generation:>3} {s.health:>4} {s.hunger:>4} "
            f"{s.happiness:>4} {s.energy:>4}  {state:<9} {traits}"
        )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    logger.info(
        "Simulating %s days in %sh steps with %d founders", args.days, args.step_hours, args.founders
    )
    print_summary(run(args))
    return 0


if __name__ == "__main__":
    sys.exit(main())
