"""
Candidate model.

Represents a person moving through the hiring funnel.
"""

from typing import Optional

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base

CANDIDATE_STAGES = ("applied", "screen", "tech", "offer", "hired", "rejected")


class Candidate(Base):
    """
    Candidate table.
    
    job_id is a weak reference: it is only used for lookups, there is no
    foreign key and no cascade.
    """
    
    __tablename__ = "candidates"
    
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    
    job_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        index=True,
    )
    
    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )
    
    # One of CANDIDATE_STAGES
    stage: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="applied",
        index=True,
    )
    
    created_at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        index=True,
    )
    
    updated_at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
    )
