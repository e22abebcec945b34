"""
Job repository - database operations for Job.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from talentflow.models.job import Job


class JobRepository:
    """Repository for Job database operations."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def list_all(self) -> List[Job]:
        """Full table scan in display order."""
        result = await self.db.execute(select(Job).order_by(Job.order.asc(), Job.id.asc()))
        return list(result.scalars().all())
    
    async def get_by_id(self, job_id: int) -> Optional[Job]:
        return await self.db.get(Job, job_id)
    
    async def get_by_slug(self, slug: str) -> Optional[Job]:
        result = await self.db.execute(select(Job).where(Job.slug == slug).limit(1))
        return result.scalar_one_or_none()
    
    async def max_order(self) -> Optional[int]:
        result = await self.db.execute(select(func.max(Job.order)))
        return result.scalar_one_or_none()
    
    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Job))
        return int(result.scalar_one())
    
    async def create(
        self,
        title: str,
        slug: str,
        tags: List[str],
        order: int,
        now: int,
    ) -> Job:
        """Insert a new active job."""
        job = Job(
            title=title,
            slug=slug,
            status="active",
            tags=list(tags),
            order=order,
            created_at=now,
            updated_at=now,
        )
        self.db.add(job)
        await self.db.flush()
        await self.db.refresh(job)
        return job
    
    async def update(self, job_id: int, values: Dict[str, Any], now: int) -> Optional[Job]:
        """Apply field values. Returns None (and writes nothing) for an unknown id."""
        job = await self.get_by_id(job_id)
        if not job:
            return None
        
        for field, value in values.items():
            setattr(job, field, value)
        
        job.updated_at = now
        await self.db.flush()
        await self.db.refresh(job)
        return job
    
    async def set_orders(self, jobs: List[Job]) -> int:
        """Rewrite order = list index for every job whose position changed."""
        changed = 0
        for index, job in enumerate(jobs):
            if job.order != index:
                job.order = index
                changed += 1
        await self.db.flush()
        return changed
