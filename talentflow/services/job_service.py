"""
Job business logic service.

Validation methods are deterministic and side-effect free; they run before the
failure coin. Apply methods write and return value snapshots.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from talentflow.errors import ClientError, NotFoundError
from talentflow.models.job import Job
from talentflow.repositories.job_repository import JobRepository
from talentflow.schemas.base import Page
from talentflow.schemas.job import JobCreate, JobQuery, JobRead, JobUpdate
from talentflow.services.query_engine import query_jobs
from talentflow.utils.time import now_ms


@dataclass
class PreparedJobPatch:
    job_id: int
    values: Dict[str, Any]


def normalize_tags(tags: List[str]) -> List[str]:
    """Trim, drop blanks and duplicates, keep first-seen order."""
    seen: Dict[str, None] = {}
    for tag in tags:
        tag = tag.strip()
        if tag:
            seen.setdefault(tag, None)
    return list(seen)


class JobService:
    """Service for job business logic."""
    
    def __init__(self, db: AsyncSession):
        self.repository = JobRepository(db)
    
    async def list_jobs(self, query: JobQuery) -> Page[JobRead]:
        jobs = [JobRead.model_validate(job) for job in await self.repository.list_all()]
        return query_jobs(jobs, query)
    
    async def get_job(self, job_id: int) -> JobRead:
        job = await self.repository.get_by_id(job_id)
        if not job:
            raise NotFoundError("Job", job_id)
        return JobRead.model_validate(job)
    
    async def _ensure_slug_free(self, slug: str, job_id: int | None = None) -> None:
        existing = await self.repository.get_by_slug(slug)
        if existing and existing.id != job_id:
            raise ClientError("Slug must be unique", code="duplicate_slug", details={"slug": slug})
    
    async def validate_create(self, data: JobCreate) -> JobCreate:
        title = data.title.strip()
        slug = data.slug.strip()
        if not title:
            raise ClientError("Title is required", details={"field": "title"})
        if not slug:
            raise ClientError("Slug is required", details={"field": "slug"})
        await self._ensure_slug_free(slug)
        return JobCreate(title=title, slug=slug, tags=normalize_tags(data.tags))
    
    async def create_job(self, data: JobCreate) -> JobRead:
        """Append a new active job after the current last position."""
        last = await self.repository.max_order()
        job = await self.repository.create(
            title=data.title,
            slug=data.slug,
            tags=data.tags,
            order=0 if last is None else last + 1,
            now=now_ms(),
        )
        return JobRead.model_validate(job)
    
    async def validate_patch(self, job_id: int, data: JobUpdate) -> PreparedJobPatch:
        job: Job | None = await self.repository.get_by_id(job_id)
        if not job:
            raise NotFoundError("Job", job_id)
        
        values = data.model_dump(exclude_unset=True)
        # None means "not provided" for every patchable job field
        values = {field: value for field, value in values.items() if value is not None}
        
        if "title" in values:
            values["title"] = values["title"].strip()
            if not values["title"]:
                raise ClientError("Title is required", details={"field": "title"})
        if "slug" in values:
            values["slug"] = values["slug"].strip()
            if not values["slug"]:
                raise ClientError("Slug is required", details={"field": "slug"})
            if values["slug"] != job.slug:
                await self._ensure_slug_free(values["slug"], job_id)
        if "tags" in values:
            values["tags"] = normalize_tags(values["tags"])
        return PreparedJobPatch(job_id=job_id, values=values)
    
    async def apply_patch(self, patch: PreparedJobPatch) -> JobRead:
        job = await self.repository.update(patch.job_id, patch.values, now=now_ms())
        if job is None:
            raise NotFoundError("Job", patch.job_id)
        return JobRead.model_validate(job)
