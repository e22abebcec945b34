"""
Candidate business logic service.

Stage transitions and notes are recorded on the candidate timeline in the same
unit of work as the change that caused them.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from talentflow.errors import ClientError, NotFoundError
from talentflow.repositories.candidate_repository import CandidateRepository
from talentflow.repositories.timeline_repository import TimelineRepository
from talentflow.schemas.base import Page
from talentflow.schemas.candidate import (
    CandidateCreate,
    CandidateQuery,
    CandidateRead,
    CandidateUpdate,
    TimelineEventRead,
)
from talentflow.services.query_engine import query_candidates
from talentflow.utils.time import now_ms


@dataclass
class PreparedCandidatePatch:
    candidate_id: int
    current_stage: str
    values: Dict[str, Any]


class CandidateService:
    """Service for candidate business logic."""
    
    def __init__(self, db: AsyncSession):
        self.repository = CandidateRepository(db)
        self.timeline = TimelineRepository(db)
    
    async def list_candidates(self, query: CandidateQuery) -> Page[CandidateRead]:
        candidates = [CandidateRead.model_validate(c) for c in await self.repository.list_all()]
        return query_candidates(candidates, query)
    
    async def get_candidate(self, candidate_id: int) -> CandidateRead:
        candidate = await self.repository.get_by_id(candidate_id)
        if not candidate:
            raise NotFoundError("Candidate", candidate_id)
        return CandidateRead.model_validate(candidate)
    
    async def create_candidate(self, data: CandidateCreate) -> CandidateRead:
        """Create at the applied stage and record the origin event."""
        now = now_ms()
        candidate = await self.repository.create(
            job_id=data.job_id,
            name=data.name.strip(),
            email=data.email.strip(),
            now=now,
        )
        await self.timeline.add_stage_change(candidate.id, None, "applied", at=now)
        return CandidateRead.model_validate(candidate)
    
    async def validate_patch(self, candidate_id: int, data: CandidateUpdate) -> PreparedCandidatePatch:
        candidate = await self.repository.get_by_id(candidate_id)
        if not candidate:
            raise NotFoundError("Candidate", candidate_id)
        
        values = data.model_dump(exclude_unset=True)
        # job_id may be cleared explicitly; the other fields cannot be null
        values = {k: v for k, v in values.items() if v is not None or k == "job_id"}
        if "email" in values:
            values["email"] = values["email"].strip()
        return PreparedCandidatePatch(candidate_id=candidate_id, current_stage=candidate.stage, values=values)
    
    async def apply_patch(self, patch: PreparedCandidatePatch) -> CandidateRead:
        now = now_ms()
        new_stage = patch.values.get("stage")
        candidate = await self.repository.update(patch.candidate_id, patch.values, now=now)
        if candidate is None:
            raise NotFoundError("Candidate", patch.candidate_id)
        if new_stage is not None and new_stage != patch.current_stage:
            await self.timeline.add_stage_change(patch.candidate_id, patch.current_stage, new_stage, at=now)
        return CandidateRead.model_validate(candidate)
    
    async def get_timeline(self, candidate_id: int) -> List[TimelineEventRead]:
        if not await self.repository.get_by_id(candidate_id):
            raise NotFoundError("Candidate", candidate_id)
        events = await self.timeline.list_for_candidate(candidate_id)
        return [TimelineEventRead.model_validate(e) for e in events]
    
    async def validate_note(self, candidate_id: int, note: str) -> str:
        text = (note or "").strip()
        if not text:
            raise ClientError("Note is required", code="empty_note")
        if not await self.repository.get_by_id(candidate_id):
            raise NotFoundError("Candidate", candidate_id)
        return text
    
    async def add_note(self, candidate_id: int, note: str) -> TimelineEventRead:
        event = await self.timeline.add_note(candidate_id, note, at=now_ms())
        return TimelineEventRead.model_validate(event)
