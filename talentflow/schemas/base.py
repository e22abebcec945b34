"""
Base Pydantic schemas with common fields.

These are templates that other schemas inherit from. Wire names are camelCase
(createdAt, pageSize, jobId); Python attributes stay snake_case.
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Request/response body accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoredRead(CamelModel):
    """
    Base schema for reading stored records.
    
    Instances are value snapshots: mutating one never touches the store.
    """
    
    # This tells Pydantic to work with SQLAlchemy models
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class Page(CamelModel, Generic[T]):
    """One slice of a filtered, sorted collection."""

    data: List[T]
    page: int
    page_size: int
    # Size of the filtered set before slicing
    total: int
    pages: int


class OkResponse(CamelModel):
    ok: bool = True
