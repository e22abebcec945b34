"""
Metadata model.

Keyed process-wide flags. The only key in use is "seeded": absent before the
first seed, true afterwards, and only cleared by resetting the store.
"""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from talentflow.db.base import Base

SEEDED_KEY = "seeded"


class Meta(Base):
    __tablename__ = "meta"
    
    key: Mapped[str] = mapped_column(
        String(100),
        primary_key=True,
    )
    
    value: Mapped[Any] = mapped_column(
        JSON,
        nullable=True,
    )
