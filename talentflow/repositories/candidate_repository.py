"""
Candidate repository - database operations for Candidate.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from talentflow.models.candidate import Candidate


class CandidateRepository:
    """Repository for Candidate database operations."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def list_all(self) -> List[Candidate]:
        result = await self.db.execute(select(Candidate).order_by(Candidate.id.asc()))
        return list(result.scalars().all())
    
    async def get_by_id(self, candidate_id: int) -> Optional[Candidate]:
        return await self.db.get(Candidate, candidate_id)
    
    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Candidate))
        return int(result.scalar_one())
    
    async def create(self, job_id: Optional[int], name: str, email: str, now: int) -> Candidate:
        """Create a new candidate at the applied stage."""
        candidate = Candidate(
            job_id=job_id,
            name=name,
            email=email,
            stage="applied",
            created_at=now,
            updated_at=now,
        )
        self.db.add(candidate)
        await self.db.flush()
        await self.db.refresh(candidate)
        return candidate
    
    async def update(self, candidate_id: int, values: Dict[str, Any], now: int) -> Optional[Candidate]:
        """Update a candidate."""
        candidate = await self.get_by_id(candidate_id)
        if not candidate:
            return None
        
        for field, value in values.items():
            setattr(candidate, field, value)
        
        candidate.updated_at = now
        await self.db.flush()
        await self.db.refresh(candidate)
        return candidate
