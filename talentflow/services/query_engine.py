"""
Query engine.

Filtering, substring search, tag matching, sorting and page slicing over a
materialized list of snapshots. Filters are AND-composed and always run before
sorting, which runs before slicing.
"""

import math
from typing import Callable, Dict, List, Optional, Sequence, Type, TypeVar

from talentflow.errors import ClientError
from talentflow.schemas.base import Page
from talentflow.schemas.candidate import CandidateQuery, CandidateRead
from talentflow.schemas.job import JobQuery, JobRead

T = TypeVar("T")

JOB_SORTS: Dict[str, Callable[[List[JobRead]], List[JobRead]]] = {
    "order": lambda jobs: sorted(jobs, key=lambda j: (j.order, j.id)),
    "createdAt:desc": lambda jobs: sorted(jobs, key=lambda j: (-j.created_at, j.id)),
}


def paginate(items: Sequence[T], page: int, page_size: int, page_cls: Type[Page] = Page) -> Page:
    """
    Slice one page out of an already filtered and sorted sequence.

    An out-of-range page yields empty data; total and pages still describe the
    whole filtered set.
    """
    if page < 1:
        raise ClientError("page must be >= 1", details={"page": page})
    if page_size < 1:
        raise ClientError("pageSize must be >= 1", details={"pageSize": page_size})

    total = len(items)
    start = (page - 1) * page_size
    return page_cls(
        data=list(items[start:start + page_size]),
        page=page,
        page_size=page_size,
        total=total,
        pages=max(1, math.ceil(total / page_size)),
    )


def contains_text(needle: str, *haystacks: Optional[str]) -> bool:
    """Case-insensitive substring match against any of the given fields."""
    needle = needle.lower()
    return any(needle in (value or "").lower() for value in haystacks)


def filter_jobs(
    jobs: Sequence[JobRead],
    search: str = "",
    status: Optional[str] = None,
    tags: Sequence[str] = (),
) -> List[JobRead]:
    wanted_tags = set(tags)
    search = (search or "").strip()
    result = []
    for job in jobs:
        if status and job.status != status:
            continue
        if search and not contains_text(search, job.title, job.slug):
            continue
        # Keep jobs sharing at least one tag with the requested set
        if wanted_tags and wanted_tags.isdisjoint(job.tags):
            continue
        result.append(job)
    return result


def sort_jobs(jobs: Sequence[JobRead], sort: str = "order") -> List[JobRead]:
    try:
        sorter = JOB_SORTS[sort or "order"]
    except KeyError:
        raise ClientError(
            f"Unsupported sort '{sort}'",
            code="invalid_sort",
            details={"allowed": sorted(JOB_SORTS)},
        ) from None
    return sorter(list(jobs))


def query_jobs(jobs: Sequence[JobRead], query: JobQuery) -> Page[JobRead]:
    filtered = filter_jobs(jobs, search=query.search, status=query.status, tags=query.tags)
    return paginate(sort_jobs(filtered, query.sort), query.page, query.page_size, Page[JobRead])


def filter_candidates(
    candidates: Sequence[CandidateRead],
    search: str = "",
    stage: Optional[str] = None,
    job_id: Optional[int] = None,
) -> List[CandidateRead]:
    search = (search or "").strip()
    return [
        c for c in candidates
        if (not stage or c.stage == stage)
        and (job_id is None or c.job_id == job_id)
        and (not search or contains_text(search, c.name, c.email))
    ]


def query_candidates(candidates: Sequence[CandidateRead], query: CandidateQuery) -> Page[CandidateRead]:
    filtered = filter_candidates(candidates, search=query.search, stage=query.stage, job_id=query.job_id)
    # Newest first
    filtered.sort(key=lambda c: (-c.created_at, c.id))
    return paginate(filtered, query.page, query.page_size, Page[CandidateRead])
