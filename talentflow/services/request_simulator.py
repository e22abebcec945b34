"""
Request simulator.

Wraps every logical operation with randomized latency and, for mutations, a
failure coin drawn after validation and before any write. The coin comes from
an injected FailurePolicy so tests can force either outcome.

Order inside a mutation:
    1. latency sleep (outside the write lock)
    2. acquire the store write lock, open a unit of work
    3. validate -> ClientError / NotFoundError, deterministic
    4. failure coin -> InjectedFailure, nothing written
    5. apply and commit
"""

import asyncio
import logging
import random
from collections import deque
from typing import Awaitable, Callable, Iterable, List, Optional, Tuple, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from talentflow.db.store import DurableStore
from talentflow.errors import InjectedFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P")


class FailurePolicy:
    """Decides whether a mutation fails before it is applied."""

    def should_fail(self, operation: str, rate: float) -> bool:
        raise NotImplementedError


class RandomFailurePolicy(FailurePolicy):
    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def should_fail(self, operation: str, rate: float) -> bool:
        return self.rng.random() < rate


class NeverFailPolicy(FailurePolicy):
    def should_fail(self, operation: str, rate: float) -> bool:
        return False


class AlwaysFailPolicy(FailurePolicy):
    def should_fail(self, operation: str, rate: float) -> bool:
        return True


class ScriptedFailurePolicy(FailurePolicy):
    """
    Replays a fixed list of outcomes (True = fail), then succeeds forever.
    Every decision is recorded in `calls` as (operation, rate).
    """

    def __init__(self, outcomes: Iterable[bool] = ()):
        self.outcomes = deque(outcomes)
        self.calls: List[Tuple[str, float]] = []

    def should_fail(self, operation: str, rate: float) -> bool:
        self.calls.append((operation, rate))
        return self.outcomes.popleft() if self.outcomes else False


FAILURE_POLICIES = {
    "random": RandomFailurePolicy,
    "never": NeverFailPolicy,
    "always": AlwaysFailPolicy,
}


def build_failure_policy(name: str, rng: Optional[random.Random] = None) -> FailurePolicy:
    try:
        policy_cls = FAILURE_POLICIES[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown failure policy '{name}'; expected one of {sorted(FAILURE_POLICIES)}") from None
    if policy_cls is RandomFailurePolicy:
        return RandomFailurePolicy(rng)
    return policy_cls()


async def no_sleep(_: float) -> None:
    """Zero-latency stand-in for asyncio.sleep."""
    return None


class RequestSimulator:
    """Latency and failure injection in front of the durable store."""

    def __init__(
        self,
        store: DurableStore,
        failure_policy: Optional[FailurePolicy] = None,
        latency_min_ms: int = 200,
        latency_max_ms: int = 1200,
        rng: Optional[random.Random] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        if latency_min_ms < 0 or latency_max_ms < latency_min_ms:
            raise ValueError("latency bounds must satisfy 0 <= min <= max")
        self.store = store
        self.failure_policy = failure_policy or RandomFailurePolicy(rng)
        self.latency_min_ms = latency_min_ms
        self.latency_max_ms = latency_max_ms
        self.rng = rng or random.Random()
        self.sleep = sleep

    def draw_latency(self) -> float:
        """Seconds to wait, uniform over [min, max) milliseconds."""
        return self.rng.uniform(self.latency_min_ms, self.latency_max_ms) / 1000.0

    async def delay(self) -> None:
        await self.sleep(self.draw_latency())

    async def read(self, operation: str, handler: Callable[[AsyncSession], Awaitable[T]]) -> T:
        """Delay, then run a read-only handler in its own unit of work."""
        await self.delay()
        async with self.store.session() as db:
            return await handler(db)

    async def mutate(
        self,
        operation: str,
        validate: Callable[[AsyncSession], Awaitable[P]],
        apply: Callable[[AsyncSession, P], Awaitable[T]],
        failure_rate: Optional[float] = None,
    ) -> T:
        """
        Delay, validate, maybe inject a failure, then apply.

        `validate` returns whatever `apply` needs. A None failure_rate skips
        the coin (used for writes that are never injected, like notes).
        """
        await self.delay()
        async with self.store.write_lock:
            async with self.store.session() as db:
                prepared = await validate(db)
                if failure_rate is not None and self.failure_policy.should_fail(operation, failure_rate):
                    logger.warning("Injected failure for %s (rate=%.2f)", operation, failure_rate)
                    raise InjectedFailure(operation)
                return await apply(db, prepared)
