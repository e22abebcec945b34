"""
Reorder transaction for the job collection.

Positions are absolute: they index the full job list ordered by `order`,
never a filtered or paginated view. Callers working from a page translate with
absolute_position() before sending a move.
"""

import logging
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from talentflow.errors import ClientError, NotFoundError
from talentflow.models.job import Job
from talentflow.repositories.job_repository import JobRepository

logger = logging.getLogger(__name__)


def absolute_position(page: int, page_size: int, visible_index: int) -> int:
    """Translate an index within a page (unfiltered, sorted by order) to a collection position."""
    if page < 1 or page_size < 1 or visible_index < 0:
        raise ClientError("page, pageSize and index must be positive")
    return (page - 1) * page_size + visible_index


def move_item(ids: Sequence[int], item_id: int, to_index: int) -> List[int]:
    """
    Return ids with item_id moved to to_index; every other id shifts by one
    slot towards the vacated position. to_index past the end means last.
    """
    remaining = [i for i in ids if i != item_id]
    if len(remaining) == len(ids):
        raise ValueError(f"{item_id} is not in the collection")
    remaining.insert(min(to_index, len(remaining)), item_id)
    return remaining


class ReorderTransaction:
    """
    All-or-nothing rewrite of Job.order.

    prepare() reads and validates, apply() rewrites. Both run in the same
    session while the caller holds the store write lock, so no other write to
    the order column can land between the read and the rewrite.
    """

    def __init__(self, db: AsyncSession):
        self.repository = JobRepository(db)

    async def prepare(self, job_id: int, to_order: int, from_order: Optional[int] = None) -> List[Job]:
        jobs = await self.repository.list_all()
        positions = {job.id: index for index, job in enumerate(jobs)}
        if job_id not in positions:
            raise NotFoundError("Job", job_id)
        if to_order < 0:
            raise ClientError("toOrder must be >= 0", details={"toOrder": to_order})

        if from_order is not None and positions[job_id] != from_order:
            logger.warning(
                "Reorder of job %s: fromOrder=%s but current position is %s",
                job_id, from_order, positions[job_id],
            )
        return jobs

    async def apply(self, jobs: List[Job], job_id: int, to_order: int) -> int:
        by_id = {job.id: job for job in jobs}
        new_ids = move_item([job.id for job in jobs], job_id, to_order)
        changed = await self.repository.set_orders([by_id[i] for i in new_ids])
        logger.info("Moved job %s to position %s (%s rows rewritten)", job_id, new_ids.index(job_id), changed)
        return changed
