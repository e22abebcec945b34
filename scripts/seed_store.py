"""
Seed the durable store with demo data (no-op when already seeded).

Usage:
    python scripts/seed_store.py
    python scripts/seed_store.py --reset --seed 42
"""

import argparse
import asyncio
import random
import sys
from pathlib import Path

# Add parent directory to path so we can import talentflow modules
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from talentflow.core.config import settings
from talentflow.core.logging import configure_logging
from talentflow.db.session import get_default_store
from talentflow.services.seed_service import SeedCounts, Seeder


async def seed_store(reset: bool, seed: int | None) -> None:
    store = get_default_store()
    try:
        if reset:
            await store.reset()
            print(f"[OK] Cleared store at {settings.DATABASE_URL}")
        await store.create_tables()

        seeder = Seeder(
            store,
            rng=random.Random(seed if seed is not None else settings.SEED_RANDOM_SEED),
            counts=SeedCounts(
                jobs=settings.SEED_JOB_COUNT,
                candidates=settings.SEED_CANDIDATE_COUNT,
                assessments=settings.SEED_ASSESSMENT_COUNT,
            ),
        )
        if await seeder.ensure_seeded():
            print("[OK] Seeded demo data")
        else:
            print("[OK] Store already seeded; nothing to do")
    finally:
        await store.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--reset", action="store_true", help="Clear every table before seeding.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible content.")
    args = parser.parse_args()

    configure_logging()
    asyncio.run(seed_store(args.reset, args.seed))


if __name__ == "__main__":
    main()
