"""
Durable store.

Owns the async engine, the session factory and the single write lock that
serializes multi-step mutations. The store lives in a SQLite file so its
contents survive a process restart; deleting the file (or calling reset())
returns the system to its pre-seed state.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from talentflow.db.base import Base

logger = logging.getLogger(__name__)


class DurableStore:
    """Persistent set of typed tables shared by every in-flight request."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.engine = create_async_engine(database_url, echo=echo, future=True)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,  # Snapshots stay readable after commit
        )
        # Held around validate-then-apply sequences; reads never take it.
        self.write_lock = asyncio.Lock()
        self._schema_lock = asyncio.Lock()
        self._tables_ready = False

    async def create_tables(self) -> None:
        """Create every table if missing. Cheap after the first call."""
        if self._tables_ready:
            return
        # Register all models on Base.metadata before create_all
        from talentflow import models  # noqa: F401

        async with self._schema_lock:
            if self._tables_ready:
                return
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            self._tables_ready = True

    async def reset(self) -> None:
        """Drop and recreate every table, clearing data and the seed flag."""
        from talentflow import models  # noqa: F401

        async with self.write_lock:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.drop_all)
                await conn.run_sync(Base.metadata.create_all)
        self._tables_ready = True
        logger.info("Durable store reset: %s", self.database_url)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Open a unit of work.

        Commits when the block exits normally and rolls back on any exception,
        so a failed request never leaves a partial mutation behind.
        """
        await self.create_tables()
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        await self.engine.dispose()
