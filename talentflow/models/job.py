"""
Job model.

Represents an open (or archived) position. Jobs are never deleted; archiving
flips the status. The order column holds a dense zero-based display position
across all jobs.
"""

from typing import List

from sqlalchemy import JSON, BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base


class Job(Base):
    """
    Job table.
    """
    
    __tablename__ = "jobs"
    
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    
    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    
    # URL-friendly identifier, globally unique
    slug: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        unique=True,
        index=True,
    )
    
    # "active" or "archived"
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="active",
        index=True,
    )
    
    tags: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )
    
    # Display position; "order" is quoted by SQLAlchemy
    order: Mapped[int] = mapped_column(
        "order",
        Integer,
        nullable=False,
        index=True,
    )
    
    # Epoch milliseconds (UTC)
    created_at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        index=True,
    )
    
    updated_at: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Job id={self.id} slug={self.slug} order={self.order} status={self.status}>"
