"""
SQLAlchemy declarative base.

This is the foundation for all database models.
All models inherit from this Base class.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.
    
    Every table of the durable store inherits from this class so that
    create_all/drop_all and Alembic see the whole schema.
    """
    pass
