"""Job schemas."""

from typing import List, Literal, Optional

from pydantic import Field

from talentflow.schemas.base import CamelModel, StoredRead

JobStatus = Literal["active", "archived"]


class JobCreate(CamelModel):
    """Body of a create request. Status always starts active."""

    title: str
    slug: str
    tags: List[str] = Field(default_factory=list)


class JobUpdate(CamelModel):
    """Partial patch; only fields that were sent are applied."""

    title: Optional[str] = None
    slug: Optional[str] = None
    status: Optional[JobStatus] = None
    tags: Optional[List[str]] = None


class JobReorder(CamelModel):
    """
    Move request in absolute collection coordinates.

    Positions index the full job list ordered by `order`, never a filtered or
    paginated view; callers translate page-local indices first.
    """

    from_order: Optional[int] = None
    to_order: int


class JobQuery(CamelModel):
    search: str = ""
    # Unknown values simply match nothing
    status: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    page: int = 1
    page_size: int = 10
    # "order" (ascending) or "createdAt:desc"
    sort: str = "order"


class JobRead(StoredRead):
    id: int
    title: str
    slug: str
    status: JobStatus
    tags: List[str]
    order: int
    created_at: int
    updated_at: int
