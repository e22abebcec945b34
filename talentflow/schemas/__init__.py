"""
Schemas package.

Import all schemas here for easy access.
"""

from talentflow.schemas.base import CamelModel, OkResponse, Page, StoredRead
from talentflow.schemas.job import JobCreate, JobQuery, JobRead, JobReorder, JobUpdate
from talentflow.schemas.candidate import (
    CandidateCreate,
    CandidateQuery,
    CandidateRead,
    CandidateUpdate,
    NoteCreate,
    TimelineEventRead,
)
from talentflow.schemas.assessment import (
    AssessmentRead,
    AssessmentResponseRead,
    AssessmentSubmission,
    AssessmentUpsert,
    Question,
    ResponseValidationRequest,
    ResponseValidationResult,
    Section,
    ShowIf,
)
