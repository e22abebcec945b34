"""
Models package.

Import all models here so they are registered with SQLAlchemy.
This file also makes it easy to import models from one place.
"""

from talentflow.models.job import Job
from talentflow.models.candidate import Candidate
from talentflow.models.timeline_event import TimelineEvent
from talentflow.models.assessment import Assessment
from talentflow.models.assessment_response import AssessmentResponse
from talentflow.models.meta import Meta

# Export all models
__all__ = [
    "Job",
    "Candidate",
    "TimelineEvent",
    "Assessment",
    "AssessmentResponse",
    "Meta",
]
