"""
Assessment model.

One assessment per job: the primary key is the job id, so saving is an upsert
by id. Sections and questions are stored as a JSON document.
"""

from typing import Any, Dict, List

from sqlalchemy import JSON, BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base


class Assessment(Base):
    __tablename__ = "assessments"
    
    # Same value as job_id
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
    )
    
    job_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
    )
    
    title: Mapped[str] = mapped_column(
        String(300),
        nullable=False,
    )
    
    sections: Mapped[List[Dict[str, Any]]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )
    
    updated_at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        index=True,
    )
