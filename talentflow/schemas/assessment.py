"""
Assessment schemas.

Conditional logic compares a stored answer with ShowIf.equals. The comparison
value is restricted to the scalar types the builder produces.
"""

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr

from talentflow.schemas.base import CamelModel, StoredRead

QuestionType = Literal["single", "multi", "short", "long", "numeric", "file"]

# Order matters: bool before int so True never degrades to 1
ShowIfValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]


class ShowIf(CamelModel):
    question_id: str
    equals: ShowIfValue


class Question(CamelModel):
    id: str
    type: QuestionType
    label: str
    required: bool = False
    options: Optional[List[str]] = None  # single/multi
    max_length: Optional[int] = None  # short/long
    min: Optional[float] = None  # numeric
    max: Optional[float] = None
    show_if: Optional[ShowIf] = None


class Section(CamelModel):
    id: str
    title: str
    questions: List[Question] = Field(default_factory=list)


class AssessmentUpsert(CamelModel):
    """Full assessment body; id/jobId/updatedAt are assigned by the store."""

    title: str
    sections: List[Section] = Field(default_factory=list)


class AssessmentRead(StoredRead):
    id: int
    job_id: int
    title: str
    sections: List[Section]
    updated_at: int


class AssessmentSubmission(CamelModel):
    candidate_id: int
    responses: Dict[str, Any] = Field(default_factory=dict)


class AssessmentResponseRead(StoredRead):
    id: int
    job_id: int
    candidate_id: int
    responses: Dict[str, Any]
    submitted_at: int


class ResponseValidationRequest(CamelModel):
    responses: Dict[str, Any] = Field(default_factory=dict)


class ResponseValidationResult(CamelModel):
    ok: bool
    errors: List[str] = Field(default_factory=list)
