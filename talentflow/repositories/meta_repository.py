"""
Meta repository - keyed process-wide flags.
"""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from talentflow.models.meta import Meta


class MetaRepository:
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def get(self, key: str) -> Optional[Any]:
        row = await self.db.get(Meta, key)
        return row.value if row else None
    
    async def set(self, key: str, value: Any) -> None:
        row = await self.db.get(Meta, key)
        if row is None:
            self.db.add(Meta(key=key, value=value))
        else:
            row.value = value
        await self.db.flush()
