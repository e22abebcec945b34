"""
Assessment business logic service.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from talentflow.errors import ClientError, NotFoundError
from talentflow.repositories.assessment_repository import AssessmentRepository, AssessmentResponseRepository
from talentflow.schemas.assessment import (
    AssessmentRead,
    AssessmentResponseRead,
    AssessmentSubmission,
    AssessmentUpsert,
    ResponseValidationResult,
)
from talentflow.services.assessment_rules import structural_problems, validate_responses
from talentflow.utils.time import now_ms


class AssessmentService:
    """Service for assessments and their responses."""
    
    def __init__(self, db: AsyncSession):
        self.repository = AssessmentRepository(db)
        self.responses = AssessmentResponseRepository(db)
    
    async def get_assessment(self, job_id: int) -> AssessmentRead:
        assessment = await self.repository.get_by_id(job_id)
        if not assessment:
            raise NotFoundError("Assessment", job_id)
        return AssessmentRead.model_validate(assessment)
    
    async def validate_upsert(self, job_id: int, data: AssessmentUpsert) -> AssessmentUpsert:
        problems = structural_problems(data)
        if problems:
            raise ClientError(
                "Assessment is not valid",
                code="invalid_assessment",
                details={"jobId": job_id, "problems": problems},
            )
        return data
    
    async def save_assessment(self, job_id: int, data: AssessmentUpsert) -> AssessmentRead:
        """Insert or replace the assessment whose id is job_id."""
        sections = [section.model_dump(by_alias=True, exclude_none=True) for section in data.sections]
        assessment = await self.repository.upsert(job_id, data.title, sections, now=now_ms())
        return AssessmentRead.model_validate(assessment)
    
    async def submit_response(self, job_id: int, data: AssessmentSubmission) -> AssessmentResponseRead:
        response = await self.responses.create(job_id, data.candidate_id, data.responses, now=now_ms())
        return AssessmentResponseRead.model_validate(response)
    
    async def list_responses(self, job_id: int, candidate_id: int | None = None) -> List[AssessmentResponseRead]:
        rows = await self.responses.list_for(job_id, candidate_id)
        return [AssessmentResponseRead.model_validate(row) for row in rows]
    
    async def check_responses(self, job_id: int, answers: dict) -> ResponseValidationResult:
        assessment = await self.get_assessment(job_id)
        errors = validate_responses(assessment, answers)
        return ResponseValidationResult(ok=not errors, errors=errors)
