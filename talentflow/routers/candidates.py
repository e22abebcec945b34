"""
Candidates router - API endpoints for candidates and their timelines.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from talentflow.core.config import settings
from talentflow.core.dependencies import get_backend
from talentflow.schemas.base import OkResponse, Page
from talentflow.schemas.candidate import (
    CandidateCreate,
    CandidateQuery,
    CandidateRead,
    CandidateUpdate,
    NoteCreate,
    TimelineEventRead,
)
from talentflow.services.backend import MockBackend

router = APIRouter(prefix="/candidates", tags=["candidates"])


@router.get("", response_model=Page[CandidateRead])
async def list_candidates(
    backend: MockBackend = Depends(get_backend),
    search: str = "",
    stage: Optional[str] = None,
    job_id: Optional[int] = Query(None, alias="jobId"),
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1),
):
    """
    List candidates, newest first.
    
    Filters: search (name/email), stage, jobId.
    """
    query = CandidateQuery(
        search=search,
        stage=stage or None,
        job_id=job_id,
        page=page,
        page_size=page_size or settings.DEFAULT_CANDIDATES_PAGE_SIZE,
    )
    return await backend.list_candidates(query)


@router.get("/{candidate_id}", response_model=CandidateRead)
async def get_candidate(candidate_id: int, backend: MockBackend = Depends(get_backend)):
    return await backend.get_candidate(candidate_id)


@router.post("", response_model=CandidateRead, status_code=status.HTTP_201_CREATED)
async def create_candidate(data: CandidateCreate, backend: MockBackend = Depends(get_backend)):
    """Create a candidate at the applied stage."""
    return await backend.create_candidate(data)


@router.patch("/{candidate_id}", response_model=CandidateRead)
async def patch_candidate(candidate_id: int, data: CandidateUpdate, backend: MockBackend = Depends(get_backend)):
    """Patch a candidate; a stage change is recorded on the timeline."""
    return await backend.patch_candidate(candidate_id, data)


@router.get("/{candidate_id}/timeline", response_model=List[TimelineEventRead])
async def get_timeline(candidate_id: int, backend: MockBackend = Depends(get_backend)):
    """Timeline events ordered by time."""
    return await backend.get_timeline(candidate_id)


@router.post("/{candidate_id}/notes", response_model=OkResponse)
async def add_note(candidate_id: int, data: NoteCreate, backend: MockBackend = Depends(get_backend)):
    return await backend.add_note(candidate_id, data)
