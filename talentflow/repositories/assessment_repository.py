"""
Assessment repository - upsert-by-id storage for assessments and
append-only storage for their responses.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from talentflow.models.assessment import Assessment
from talentflow.models.assessment_response import AssessmentResponse


class AssessmentRepository:
    """Repository for Assessment database operations."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def get_by_id(self, job_id: int) -> Optional[Assessment]:
        """The assessment id is the job id."""
        return await self.db.get(Assessment, job_id)
    
    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Assessment))
        return int(result.scalar_one())
    
    async def upsert(
        self,
        job_id: int,
        title: str,
        sections: List[Dict[str, Any]],
        now: int,
    ) -> Assessment:
        """Insert or fully replace the assessment for a job."""
        assessment = await self.get_by_id(job_id)
        if assessment is None:
            assessment = Assessment(id=job_id, job_id=job_id, title=title, sections=sections, updated_at=now)
            self.db.add(assessment)
        else:
            assessment.title = title
            assessment.sections = sections
            assessment.updated_at = now
        await self.db.flush()
        return assessment


class AssessmentResponseRepository:
    """Repository for AssessmentResponse. Append-only."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def create(
        self,
        job_id: int,
        candidate_id: int,
        responses: Dict[str, Any],
        now: int,
    ) -> AssessmentResponse:
        response = AssessmentResponse(
            job_id=job_id,
            candidate_id=candidate_id,
            responses=dict(responses),
            submitted_at=now,
        )
        self.db.add(response)
        await self.db.flush()
        await self.db.refresh(response)
        return response
    
    async def list_for(self, job_id: int, candidate_id: Optional[int] = None) -> List[AssessmentResponse]:
        query = select(AssessmentResponse).where(AssessmentResponse.job_id == job_id)
        if candidate_id is not None:
            query = query.where(AssessmentResponse.candidate_id == candidate_id)
        result = await self.db.execute(query.order_by(AssessmentResponse.submitted_at.asc(), AssessmentResponse.id.asc()))
        return list(result.scalars().all())
