"""
Pytest configuration and shared fixtures.

Every test gets its own SQLite file under tmp_path, a zero-latency simulator
and a small seed so the suite stays fast. Async code is driven with
asyncio.run from plain test functions.
"""

import asyncio
import random

import pytest

from talentflow.db.store import DurableStore
from talentflow.services.backend import MockBackend
from talentflow.services.request_simulator import NeverFailPolicy, RequestSimulator, no_sleep
from talentflow.services.seed_service import SeedCounts, Seeder

SMALL_SEED = SeedCounts(jobs=6, candidates=30, assessments=2)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no store")
    config.addinivalue_line("markers", "db: uses a temporary SQLite store")


def store_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'talentflow.db'}"


def build_backend(
    url: str,
    failure_policy=None,
    counts: SeedCounts = SMALL_SEED,
    seed: int = 1234,
) -> MockBackend:
    store = DurableStore(url)
    simulator = RequestSimulator(
        store,
        failure_policy=failure_policy or NeverFailPolicy(),
        rng=random.Random(seed),
        sleep=no_sleep,
    )
    seeder = Seeder(store, rng=random.Random(seed), counts=counts)
    return MockBackend(store, simulator, seeder)


def run_scenario(backend: MockBackend, scenario):
    """Run `await scenario(backend)` on a fresh loop and dispose the engine afterwards."""
    async def main():
        try:
            return await scenario(backend)
        finally:
            await backend.store.dispose()

    return asyncio.run(main())


@pytest.fixture
def backend(tmp_path) -> MockBackend:
    return build_backend(store_url(tmp_path))
