"""Candidate and timeline schemas."""

from typing import Literal, Optional

from pydantic import Field

from talentflow.schemas.base import CamelModel, StoredRead

CandidateStage = Literal["applied", "screen", "tech", "offer", "hired", "rejected"]
EventType = Literal["stage_change", "note"]


class CandidateCreate(CamelModel):
    job_id: Optional[int] = None
    name: str
    email: str


class CandidateUpdate(CamelModel):
    """Partial patch. A changed stage appends a stage_change event."""

    job_id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    stage: Optional[CandidateStage] = None


class CandidateQuery(CamelModel):
    search: str = ""
    stage: Optional[str] = None
    job_id: Optional[int] = None
    page: int = 1
    page_size: int = 25


class CandidateRead(StoredRead):
    id: int
    job_id: Optional[int] = None
    name: str
    email: str
    stage: CandidateStage
    created_at: int
    updated_at: int


class NoteCreate(CamelModel):
    # Blank notes are rejected by the service with a 400, not by schema validation
    note: str = ""


class TimelineEventRead(StoredRead):
    id: int
    candidate_id: int
    type: EventType
    from_stage: Optional[CandidateStage] = Field(default=None, alias="from")
    to_stage: Optional[CandidateStage] = Field(default=None, alias="to")
    note: Optional[str] = None
    at: int
