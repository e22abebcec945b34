"""
Candidate timeline event model.

Append-only log of stage changes and notes. Rows are never updated or deleted.
"""

from typing import Optional

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base


class TimelineEvent(Base):
    __tablename__ = "timelines"
    
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    
    candidate_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
    )
    
    # "stage_change" or "note"
    type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
    )
    
    # Set for stage_change only; from_stage is NULL for the origin event
    from_stage: Mapped[Optional[str]] = mapped_column(
        "from",
        String(20),
        nullable=True,
    )
    
    to_stage: Mapped[Optional[str]] = mapped_column(
        "to",
        String(20),
        nullable=True,
    )
    
    note: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    
    at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        index=True,
    )
