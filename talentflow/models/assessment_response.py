"""
Assessment response model.

Append-only; a candidate may submit several responses for the same job.
"""

from typing import Any, Dict

from sqlalchemy import JSON, BigInteger, Integer
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base


class AssessmentResponse(Base):
    __tablename__ = "assessment_responses"
    
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    
    job_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
    )
    
    candidate_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
    )
    
    # Keyed by question id
    responses: Mapped[Dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )
    
    submitted_at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        index=True,
    )
