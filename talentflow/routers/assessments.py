"""
Assessments router - builder storage, submissions and answer validation.
"""

from fastapi import APIRouter, Depends

from talentflow.core.dependencies import get_backend
from talentflow.schemas.assessment import (
    AssessmentRead,
    AssessmentSubmission,
    AssessmentUpsert,
    ResponseValidationRequest,
    ResponseValidationResult,
)
from talentflow.schemas.base import OkResponse
from talentflow.services.backend import MockBackend

router = APIRouter(prefix="/assessments", tags=["assessments"])


@router.get("/{job_id}", response_model=AssessmentRead)
async def get_assessment(job_id: int, backend: MockBackend = Depends(get_backend)):
    """Get the assessment saved for a job (404 until one is saved)."""
    return await backend.get_assessment(job_id)


@router.put("/{job_id}", response_model=OkResponse)
async def put_assessment(job_id: int, data: AssessmentUpsert, backend: MockBackend = Depends(get_backend)):
    """Create or replace the assessment for a job."""
    return await backend.put_assessment(job_id, data)


@router.post("/{job_id}/submit", response_model=OkResponse)
async def submit_response(job_id: int, data: AssessmentSubmission, backend: MockBackend = Depends(get_backend)):
    """Store a candidate's answers. Multiple submissions are kept."""
    return await backend.submit_response(job_id, data)


@router.post("/{job_id}/validate", response_model=ResponseValidationResult)
async def validate_response(
    job_id: int,
    data: ResponseValidationRequest,
    backend: MockBackend = Depends(get_backend),
):
    """Check answers against required/range/length rules of visible questions."""
    return await backend.validate_response(job_id, data)
