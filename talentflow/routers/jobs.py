"""
Jobs router - API endpoints for jobs.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from talentflow.core.config import settings
from talentflow.core.dependencies import get_backend
from talentflow.schemas.base import OkResponse, Page
from talentflow.schemas.job import JobCreate, JobQuery, JobRead, JobReorder, JobUpdate
from talentflow.services.backend import MockBackend
from talentflow.utils.text import split_csv

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=Page[JobRead])
async def list_jobs(
    backend: MockBackend = Depends(get_backend),
    search: str = "",
    status: Optional[str] = None,
    tags: str = Query("", description="Comma-separated; matches jobs sharing any tag"),
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1),
    sort: str = Query("order", description="order | createdAt:desc"),
):
    """
    List jobs with pagination and filters.
    
    Filters: search (title/slug), status, tags.
    """
    query = JobQuery(
        search=search,
        status=status or None,
        tags=split_csv(tags),
        page=page,
        page_size=page_size or settings.DEFAULT_JOBS_PAGE_SIZE,
        sort=sort or "order",
    )
    return await backend.list_jobs(query)


@router.get("/{job_id}", response_model=JobRead)
async def get_job(job_id: int, backend: MockBackend = Depends(get_backend)):
    """Get a job by ID."""
    return await backend.get_job(job_id)


@router.post("", response_model=JobRead, status_code=status.HTTP_201_CREATED)
async def create_job(data: JobCreate, backend: MockBackend = Depends(get_backend)):
    """Create a new job at the end of the ordering."""
    return await backend.create_job(data)


@router.patch("/{job_id}", response_model=JobRead)
async def patch_job(job_id: int, data: JobUpdate, backend: MockBackend = Depends(get_backend)):
    """Patch title, slug, status or tags."""
    return await backend.patch_job(job_id, data)


@router.patch("/{job_id}/reorder", response_model=OkResponse)
async def reorder_job(job_id: int, data: JobReorder, backend: MockBackend = Depends(get_backend)):
    """
    Move a job to toOrder.
    
    Positions are absolute over the whole collection ordered by `order`.
    """
    return await backend.reorder_job(job_id, data)
