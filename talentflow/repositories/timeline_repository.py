"""
Timeline repository - append-only access to candidate timeline events.
"""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from talentflow.models.timeline_event import TimelineEvent


class TimelineRepository:
    """Repository for TimelineEvent. There is deliberately no update or delete."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def list_for_candidate(self, candidate_id: int) -> List[TimelineEvent]:
        """Events for one candidate, oldest first (ties in insertion order)."""
        result = await self.db.execute(
            select(TimelineEvent)
            .where(TimelineEvent.candidate_id == candidate_id)
            .order_by(TimelineEvent.at.asc(), TimelineEvent.id.asc())
        )
        return list(result.scalars().all())
    
    async def count(self, candidate_id: Optional[int] = None) -> int:
        query = select(func.count()).select_from(TimelineEvent)
        if candidate_id is not None:
            query = query.where(TimelineEvent.candidate_id == candidate_id)
        result = await self.db.execute(query)
        return int(result.scalar_one())
    
    async def add_stage_change(
        self,
        candidate_id: int,
        from_stage: Optional[str],
        to_stage: str,
        at: int,
    ) -> TimelineEvent:
        event = TimelineEvent(
            candidate_id=candidate_id,
            type="stage_change",
            from_stage=from_stage,
            to_stage=to_stage,
            at=at,
        )
        self.db.add(event)
        await self.db.flush()
        return event
    
    async def add_note(self, candidate_id: int, note: str, at: int) -> TimelineEvent:
        event = TimelineEvent(
            candidate_id=candidate_id,
            type="note",
            note=note,
            at=at,
        )
        self.db.add(event)
        await self.db.flush()
        return event
